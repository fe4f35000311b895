"""List calendars visible to a user."""

from calshare.application.services.audit_service import AuditService
from calshare.application.use_cases.calendar.provision import provision_default_calendar
from calshare.domain.entities import Calendar, User
from calshare.domain.value_objects import VIEW_PERMISSIONS


async def visible_calendar_ids(uow, user: User) -> set[str]:
    """Calendars where the user holds at least one view permission."""
    grants = await uow.grants.list(user_id=user.id)
    return {
        g.calendar_id
        for g in grants
        if any(p in VIEW_PERMISSIONS for p in (g.permissions or []))
    }


def filter_visible(calendars: list[Calendar], user: User, permitted: set[str]) -> list[Calendar]:
    return [c for c in calendars if c.is_owned_by(user.id) or c.id in permitted]


class ListCalendarsUseCase:
    """List calendars the user owns, co-owns or may view.

    An unfiltered listing that finds nothing provisions the user's default
    calendar, so every user always has somewhere to put events.
    """

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(
        self,
        user: User,
        *,
        owner_id: str | None = None,
        owner_type: str | None = None,
        shared_owner_id: str | None = None,
    ) -> list[Calendar]:
        filters = {
            "owner_id": owner_id,
            "owner_type": owner_type,
            "shared_owner_ids": shared_owner_id,
        }
        filtered = any(v is not None for v in filters.values())
        async with self._uow_factory() as uow:
            calendars = await uow.calendars.list(**filters)
            visible = filter_visible(calendars, user, await visible_calendar_ids(uow, user))
            if not visible and not filtered:
                visible = [await provision_default_calendar(uow, user, self._audit)]
        return visible
