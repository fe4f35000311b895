"""User entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    ensure_valid,
    validate_optional_string,
    validate_required_string,
)


@dataclass
class User:
    """Account that can log in and hold calendar grants."""

    id: str
    name: str
    email: str
    organization_id: str | None = None
    role: str = "member"
    password_hash: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.name, "name", errors)
        validate_required_string(self.email, "email", errors)
        validate_optional_string(self.organization_id, "organization_id", errors)
        validate_optional_string(self.role, "role", errors)
        validate_optional_string(self.password_hash, "password_hash", errors)
        ensure_valid(errors)

    def to_public_dict(self) -> dict:
        """Serializable view without the password hash."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "organization_id": self.organization_id,
            "role": self.role,
            "created_at": self.created_at.isoformat(),
        }
