"""Permission evaluator - checks requirements against calendar grants."""

import logging
from collections.abc import Callable
from typing import Any

from calshare.application.ports import AuditContext, EvaluationResult
from calshare.application.services.audit_service import AuditService
from calshare.domain.value_objects import (
    SHARE_VIEW_PERMISSIONS,
    VIEW_PERMISSIONS,
    AuditStatus,
    normalize_requirement,
)
from calshare.domain.value_objects.requirement import RequirementLike

logger = logging.getLogger(__name__)

DEFAULT_ACTION = "permission_check"
MISSING_IDENTITY = "Missing user or calendar"
ANONYMOUS = "anonymous"
UNKNOWN_TARGET = "unknown"

_GRANTED_TYPES = (list, tuple, set, frozenset)


def is_present(value: object) -> bool:
    """Explicit presence check for ids: None and "" are absent, "0" is not."""
    return value is not None and value != ""


def first_present(*values: object) -> Any:
    """First value that passes is_present, else None."""
    return next((v for v in values if is_present(v)), None)


def evaluate_permissions(granted: object, requirement: RequirementLike) -> bool:
    """Decide whether granted permissions satisfy a requirement. No I/O.

    An unspecified requirement (no anyOf and no allOf) is never satisfied.
    """
    normalized = normalize_requirement(requirement)
    if normalized.is_unspecified:
        return False
    held = list(granted) if isinstance(granted, _GRANTED_TYPES) else []
    any_allowed = not normalized.any_of or any(p in held for p in normalized.any_of)
    all_allowed = all(p in held for p in normalized.all_of)
    return any_allowed and all_allowed


def flatten_permissions(entries: list) -> list[str]:
    """Union of permissions across grants, first-seen order, no duplicates."""
    seen: dict[str, None] = {}
    for entry in entries:
        permissions = getattr(entry, "permissions", None)
        if not isinstance(permissions, (list, tuple)):
            continue
        for permission in permissions:
            seen.setdefault(str(permission), None)
    return list(seen)


class PermissionEvaluator:
    """Evaluates permission requirements for a (user, calendar) pair.

    Both collaborators are optional: without a unit of work factory no
    permissions are ever found (every check denies), without an audit
    service decisions are simply not recorded.
    """

    permission_sets = {
        "view": sorted(VIEW_PERMISSIONS),
        "share_view": sorted(SHARE_VIEW_PERMISSIONS),
    }

    def __init__(
        self,
        unit_of_work_factory: Callable[[], Any] | None = None,
        audit_service: AuditService | None = None,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def list_permissions(
        self, user_id: str | None, calendar_id: str | None = None
    ) -> list[str]:
        """All permissions the user holds, narrowed to a calendar if given."""
        if self._uow_factory is None or not is_present(user_id):
            return []
        async with self._uow_factory() as uow:
            entries = await uow.grants.list(
                user_id=user_id,
                calendar_id=calendar_id if is_present(calendar_id) else None,
            )
        return flatten_permissions(entries)

    async def evaluate(
        self,
        user_id: str | None,
        calendar_id: str | None,
        requirement: RequirementLike,
        audit_context: AuditContext | None = None,
    ) -> EvaluationResult:
        """Check the requirement and audit the decision.

        Ordinary denials are returned, never raised. Repository and audit
        failures propagate to the caller unchanged.
        """
        ctx = audit_context or AuditContext()
        actor_id = first_present(ctx.actor_id, user_id, ANONYMOUS)
        target_id = first_present(ctx.target_id, calendar_id, UNKNOWN_TARGET)
        action = ctx.action or DEFAULT_ACTION

        if not is_present(user_id) or not is_present(calendar_id):
            if ctx.log_denied:
                await self._record(
                    action, actor_id, target_id, AuditStatus.DENIED,
                    ctx.details or MISSING_IDENTITY,
                )
            logger.info(
                "Permission denied for %s on %s: %s", actor_id, target_id, MISSING_IDENTITY
            )
            return EvaluationResult(allowed=False, permissions=[], reason=MISSING_IDENTITY)

        normalized = normalize_requirement(requirement)
        description = normalized.describe() or "unspecified permission requirement"
        permissions = await self.list_permissions(user_id, calendar_id)
        allowed = evaluate_permissions(permissions, normalized)

        if allowed and ctx.log_allowed:
            await self._record(
                action, actor_id, target_id, AuditStatus.ALLOWED,
                ctx.details or f"Permission granted ({description})",
            )
        elif not allowed and ctx.log_denied:
            await self._record(
                action, actor_id, target_id, AuditStatus.DENIED,
                ctx.details or f"Missing permission ({description})",
            )

        if not allowed:
            logger.info("Permission denied for %s on %s: %s", actor_id, target_id, description)
        return EvaluationResult(
            allowed=allowed,
            permissions=permissions,
            reason="allowed" if allowed else "missing permission",
        )

    async def _record(
        self, action: str, actor_id: str, target_id: str, status: str, details: str
    ) -> None:
        if self._audit is None:
            return
        await self._audit.record(
            action=action,
            actor_id=actor_id,
            target_id=target_id,
            status=status,
            details=details,
        )
