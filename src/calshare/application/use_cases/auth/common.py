"""Helpers shared by the auth use cases."""

from calshare.domain.exceptions import NotFound


def normalize_email(email: str) -> str:
    return email.strip().lower()


def normalize_optional_id(value: object) -> object:
    """Trim string ids; blank strings become None. Non-strings pass through for validation."""
    if not isinstance(value, str):
        return value
    return value.strip() or None


async def ensure_organization_exists(uow, organization_id: str | None) -> None:
    if organization_id and not await uow.organizations.get_by_id(organization_id):
        raise NotFound("Organization", organization_id)
