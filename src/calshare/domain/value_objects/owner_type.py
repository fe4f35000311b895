"""Calendar owner types."""

from enum import StrEnum


class OwnerType(StrEnum):
    """Who owns a calendar."""

    USER = "user"
    ORGANIZATION = "organization"
