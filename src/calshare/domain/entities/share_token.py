"""Share token entity - a calendar link carrying its own permission set."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    add_error,
    ensure_valid,
    validate_list,
    validate_required_string,
)
from calshare.domain.value_objects import SHARE_VIEW_PERMISSIONS, is_known_permission


@dataclass
class ShareToken:
    """Opaque token that lets anyone holding it see one calendar.

    ``permissions`` must come from the calendar permission vocabulary.
    A token without an ``expires_at`` never expires.
    """

    id: str
    calendar_id: str
    token: str
    created_by: str
    permissions: list[str]
    expires_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.calendar_id, "calendar_id", errors)
        validate_required_string(self.token, "token", errors)
        validate_required_string(self.created_by, "created_by", errors)
        validate_list(self.permissions, "permissions", errors, min_length=1)
        if isinstance(self.permissions, (list, tuple)):
            for permission in self.permissions:
                if not is_known_permission(permission):
                    add_error(errors, "permissions", f"Invalid permission: {permission}")
            self.permissions = [str(p) for p in self.permissions]
        if self.expires_at is not None and not isinstance(self.expires_at, datetime):
            add_error(errors, "expires_at", "expires_at must be a valid date")
        ensure_valid(errors)

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and now >= self.expires_at

    def allows_viewing(self) -> bool:
        return any(p in SHARE_VIEW_PERMISSIONS for p in self.permissions)
