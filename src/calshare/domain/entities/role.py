"""Organization role entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    add_error,
    ensure_valid,
    validate_list,
    validate_optional_string,
    validate_required_string,
)


@dataclass
class Role:
    """Named set of permissions defined by an organization."""

    id: str
    organization_id: str
    name: str
    permissions: list[str]
    description: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.organization_id, "organization_id", errors)
        validate_required_string(self.name, "name", errors)
        validate_list(self.permissions, "permissions", errors, min_length=1)
        if isinstance(self.permissions, (list, tuple)) and not all(
            isinstance(p, str) and p.strip() for p in self.permissions
        ):
            add_error(errors, "permissions", "permissions must be non-empty strings")
        validate_optional_string(self.description, "description", errors)
        ensure_valid(errors)
