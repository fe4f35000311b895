"""Get calendar use case."""

from calshare.application.use_cases.calendar.list_calendars import (
    filter_visible,
    visible_calendar_ids,
)
from calshare.domain.entities import Calendar, User
from calshare.domain.exceptions import NotFound, PermissionDenied


class GetCalendarUseCase:
    """Fetch a calendar the user owns or may view."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, user: User, calendar_id: str) -> Calendar:
        async with self._uow_factory() as uow:
            calendar = await uow.calendars.get_by_id(calendar_id)
            if not calendar:
                raise NotFound("Calendar", calendar_id)
            permitted = await visible_calendar_ids(uow, user)
        if not filter_visible([calendar], user, permitted):
            raise PermissionDenied("User cannot view calendar")
        return calendar
