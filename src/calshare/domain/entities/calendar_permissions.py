"""Calendar permission grant entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    add_error,
    ensure_valid,
    validate_list,
    validate_required_string,
)
from calshare.domain.value_objects import is_known_permission


@dataclass
class CalendarPermissions:
    """Grant - user holds a set of permissions on a calendar."""

    id: str
    calendar_id: str
    user_id: str
    granted_by: str
    permissions: list[str]
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.calendar_id, "calendar_id", errors)
        validate_required_string(self.user_id, "user_id", errors)
        validate_required_string(self.granted_by, "granted_by", errors)
        validate_list(self.permissions, "permissions", errors, min_length=1)
        if isinstance(self.permissions, (list, tuple)):
            for permission in self.permissions:
                if not is_known_permission(permission):
                    add_error(errors, "permissions", f"Invalid permission: {permission}")
            self.permissions = [str(p) for p in self.permissions]
        ensure_valid(errors)
