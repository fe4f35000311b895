"""List events use case."""

from calshare.application.ports import AuditContext, PermissionEvaluator
from calshare.application.use_cases.calendar.list_calendars import visible_calendar_ids
from calshare.domain.entities import Event, User
from calshare.domain.exceptions import PermissionDenied
from calshare.domain.value_objects import VIEW_PERMISSIONS, Requirement

VIEW_REQUIREMENT = Requirement(any_of=tuple(sorted(VIEW_PERMISSIONS)))


class ListEventsUseCase:
    """List events on one calendar, or on every calendar the user can see."""

    def __init__(
        self, unit_of_work_factory: type, permission_evaluator: PermissionEvaluator
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._evaluator = permission_evaluator

    async def execute(self, user: User, calendar_id: str | None = None) -> list[Event]:
        if calendar_id:
            result = await self._evaluator.evaluate(
                user.id,
                calendar_id,
                VIEW_REQUIREMENT,
                AuditContext(log_allowed=False),
            )
            if not result.allowed:
                raise PermissionDenied("User cannot view calendar events")
            async with self._uow_factory() as uow:
                return await uow.events.list(calendar_ids=calendar_id)

        async with self._uow_factory() as uow:
            permitted = await visible_calendar_ids(uow, user)
            owned = {
                c.id for c in await uow.calendars.list() if c.is_owned_by(user.id)
            }
            events = await uow.events.list()
        visible = permitted | owned
        return [e for e in events if any(cid in visible for cid in e.calendar_ids)]
