"""Role assignment entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    ensure_valid,
    validate_datetime,
    validate_required_string,
)


@dataclass
class RoleAssignment:
    """A user holding an organization role."""

    id: str
    organization_id: str
    role_id: str
    user_id: str
    assigned_by: str
    assigned_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.organization_id, "organization_id", errors)
        validate_required_string(self.role_id, "role_id", errors)
        validate_required_string(self.user_id, "user_id", errors)
        validate_required_string(self.assigned_by, "assigned_by", errors)
        validate_datetime(self.assigned_at, "assigned_at", errors)
        ensure_valid(errors)
