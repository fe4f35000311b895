"""Calendar entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    ensure_valid,
    validate_boolean,
    validate_choice,
    validate_list,
    validate_optional_string,
    validate_required_string,
)
from calshare.domain.value_objects import OwnerType

DEFAULT_COLOR = "#8FB1FF"


@dataclass
class Calendar:
    """Calendar owned by a user or an organization."""

    id: str
    name: str
    owner_id: str
    owner_type: str = OwnerType.USER
    color: str = DEFAULT_COLOR
    shared_owner_ids: list[str] = field(default_factory=list)
    is_public: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.name, "name", errors)
        validate_required_string(self.owner_id, "owner_id", errors)
        validate_choice(self.owner_type, "owner_type", (t.value for t in OwnerType), errors)
        validate_optional_string(self.color, "color", errors)
        validate_list(self.shared_owner_ids, "shared_owner_ids", errors)
        validate_boolean(self.is_public, "is_public", errors)
        ensure_valid(errors)

    def is_owned_by(self, user_id: str) -> bool:
        """Direct owner or one of the shared owners."""
        return self.owner_id == user_id or user_id in self.shared_owner_ids
