"""Audit entry entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    ensure_valid,
    validate_optional_string,
    validate_required_string,
)


@dataclass(frozen=True)
class AuditEntry:
    """Append-only record of a security-relevant action."""

    id: str
    action: str
    actor_id: str
    status: str
    target_id: str = ""
    details: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.action, "action", errors)
        validate_required_string(self.actor_id, "actor_id", errors)
        validate_required_string(self.status, "status", errors)
        validate_optional_string(self.target_id, "target_id", errors)
        validate_optional_string(self.details, "details", errors)
        ensure_valid(errors)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "action": self.action,
            "actor_id": self.actor_id,
            "target_id": self.target_id,
            "status": self.status,
            "details": self.details,
            "created_at": self.created_at.isoformat(),
        }
