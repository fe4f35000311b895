"""Permission evaluator port."""

from dataclasses import dataclass, field
from typing import Protocol

from calshare.domain.value_objects.requirement import RequirementLike


@dataclass(frozen=True)
class AuditContext:
    """Overrides for the audit entry written by a permission check."""

    action: str | None = None
    actor_id: str | None = None
    target_id: str | None = None
    details: str | None = None
    log_allowed: bool = True
    log_denied: bool = True


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of a permission check."""

    allowed: bool
    permissions: list[str] = field(default_factory=list)
    reason: str = ""


class PermissionEvaluator(Protocol):
    """Port for deciding whether a user satisfies a requirement on a calendar."""

    async def evaluate(
        self,
        user_id: str | None,
        calendar_id: str | None,
        requirement: RequirementLike,
        audit_context: AuditContext | None = None,
    ) -> EvaluationResult: ...
