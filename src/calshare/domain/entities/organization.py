"""Organization entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    ensure_valid,
    validate_list,
    validate_optional_string,
    validate_required_string,
)


@dataclass
class Organization:
    """Organization - groups users and may own calendars."""

    id: str
    name: str
    description: str = ""
    roles: list[str] = field(default_factory=lambda: ["owner", "admin", "member"])
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.name, "name", errors)
        validate_optional_string(self.description, "description", errors)
        validate_list(self.roles, "roles", errors)
        ensure_valid(errors)
