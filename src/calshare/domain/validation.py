"""Field validators shared by domain entities.

Each validator appends ``FieldError`` items to an error list instead of
raising, so an entity can report every bad field at once via ``ensure_valid``.
"""

from collections.abc import Iterable
from datetime import UTC, datetime

from calshare.domain.exceptions import FieldError, ValidationError


def add_error(errors: list[FieldError], field: str, message: str) -> None:
    errors.append(FieldError(field, message))


def validate_required_string(value: object, field: str, errors: list[FieldError]) -> None:
    if not isinstance(value, str) or not value.strip():
        add_error(errors, field, f"{field} must be a non-empty string")


def validate_optional_string(value: object, field: str, errors: list[FieldError]) -> None:
    if value is None:
        return
    if not isinstance(value, str):
        add_error(errors, field, f"{field} must be a string")


def validate_boolean(value: object, field: str, errors: list[FieldError]) -> None:
    if not isinstance(value, bool):
        add_error(errors, field, f"{field} must be a boolean")


def validate_list(
    value: object, field: str, errors: list[FieldError], min_length: int = 0
) -> None:
    if not isinstance(value, (list, tuple)):
        add_error(errors, field, f"{field} must be a list")
        return
    if len(value) < min_length:
        add_error(errors, field, f"{field} must have at least {min_length} entries")


def validate_datetime(value: object, field: str, errors: list[FieldError]) -> None:
    if not isinstance(value, datetime):
        add_error(errors, field, f"{field} must be a valid date")


def validate_choice(
    value: object, field: str, choices: Iterable[str], errors: list[FieldError]
) -> None:
    allowed = list(choices)
    if value not in allowed:
        add_error(errors, field, f"{field} must be one of: {', '.join(allowed)}")


def ensure_valid(errors: list[FieldError]) -> None:
    """Raise ValidationError carrying all collected field errors."""
    if errors:
        raise ValidationError("Validation failed", errors)


def parse_datetime(value: object) -> datetime | object:
    """Parse ISO 8601 strings (naive values are taken as UTC).

    Anything unparseable is returned untouched so validation can report it.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value
