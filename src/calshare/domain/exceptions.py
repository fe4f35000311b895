"""Domain exceptions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """Single field-level validation message."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message}


class CalShareError(Exception):
    """Base exception for calshare."""

    pass


class PermissionDenied(CalShareError):
    """User does not have permission for the requested action."""

    pass


class NotFound(CalShareError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        self.resource = resource
        self.identifier = identifier
        message = f"{resource} not found"
        if identifier is not None:
            message = f"{message}: {identifier}"
        super().__init__(message)


class Conflict(CalShareError):
    """Resource already exists (e.g. duplicate email)."""

    pass


class AuthenticationRequired(CalShareError):
    """Request has no authenticated user."""

    pass


class InvalidCredentials(CalShareError):
    """Email/password pair did not match."""

    pass


class ValidationError(CalShareError):
    """Validation failed for input data."""

    def __init__(
        self, message: str = "Validation failed", details: list[FieldError] | None = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = list(details or [])
