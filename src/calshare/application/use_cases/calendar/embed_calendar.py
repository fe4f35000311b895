"""Embed calendar use case."""

from dataclasses import dataclass
from datetime import UTC, datetime

from calshare.application.use_cases.calendar.list_calendars import (
    filter_visible,
    visible_calendar_ids,
)
from calshare.domain.entities import Calendar, Event, User
from calshare.domain.exceptions import NotFound, PermissionDenied


@dataclass
class EmbedView:
    calendar: Calendar
    events: list[Event]
    share_permissions: list[str] | None = None


class EmbedCalendarUseCase:
    """Read-only view of a calendar for embedding.

    Public calendars are open to anyone. A private calendar needs either a
    signed-in user who may view it or a share token that allows viewing.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, user: User | None, calendar_id: str, token: str | None = None
    ) -> EmbedView:
        async with self._uow_factory() as uow:
            calendar = await uow.calendars.get_by_id(calendar_id)
            if not calendar:
                raise NotFound("Calendar", calendar_id)
            share_permissions = None
            if not calendar.is_public and not await self._user_may_view(uow, user, calendar):
                share_permissions = await self._token_permissions(uow, calendar, token)
            events = await uow.events.list(calendar_ids=calendar.id)
        return EmbedView(calendar, events, share_permissions)

    @staticmethod
    async def _user_may_view(uow, user: User | None, calendar: Calendar) -> bool:
        if user is None:
            return False
        return bool(filter_visible([calendar], user, await visible_calendar_ids(uow, user)))

    @staticmethod
    async def _token_permissions(uow, calendar: Calendar, token: str | None) -> list[str]:
        if not token:
            raise PermissionDenied("Calendar is private")
        matches = await uow.share_tokens.list(calendar_id=calendar.id, token=token)
        share = matches[0] if matches else None
        if share is None or share.is_expired(datetime.now(UTC)):
            raise PermissionDenied("Calendar is private")
        if not share.allows_viewing():
            raise PermissionDenied("Share link does not allow viewing")
        return list(share.permissions)
