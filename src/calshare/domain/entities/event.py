"""Event entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError
from calshare.domain.validation import (
    add_error,
    ensure_valid,
    validate_datetime,
    validate_list,
    validate_optional_string,
    validate_required_string,
)


@dataclass
class Event:
    """Event placed on one or more calendars."""

    id: str
    title: str
    calendar_ids: list[str]
    starts_at: datetime
    ends_at: datetime
    created_by: str
    description: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        errors: list[FieldError] = []
        validate_required_string(self.id, "id", errors)
        validate_required_string(self.title, "title", errors)
        validate_required_string(self.created_by, "created_by", errors)
        validate_list(self.calendar_ids, "calendar_ids", errors, min_length=1)
        validate_datetime(self.starts_at, "starts_at", errors)
        validate_datetime(self.ends_at, "ends_at", errors)
        validate_optional_string(self.description, "description", errors)
        if (
            isinstance(self.starts_at, datetime)
            and isinstance(self.ends_at, datetime)
            and self.ends_at < self.starts_at
        ):
            add_error(errors, "ends_at", "ends_at must be after starts_at")
        ensure_valid(errors)
