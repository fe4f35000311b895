"""Get event use case."""

from calshare.application.ports import AuditContext, PermissionEvaluator
from calshare.application.use_cases.event.list_events import VIEW_REQUIREMENT
from calshare.domain.entities import Event, User
from calshare.domain.exceptions import NotFound, PermissionDenied


class GetEventUseCase:
    """Fetch an event if the user may view at least one of its calendars."""

    def __init__(
        self, unit_of_work_factory: type, permission_evaluator: PermissionEvaluator
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._evaluator = permission_evaluator

    async def execute(self, user: User, event_id: str) -> Event:
        async with self._uow_factory() as uow:
            event = await uow.events.get_by_id(event_id)
        if not event:
            raise NotFound("Event", event_id)
        if event.created_by == user.id:
            return event
        for calendar_id in event.calendar_ids:
            result = await self._evaluator.evaluate(
                user.id,
                calendar_id,
                VIEW_REQUIREMENT,
                AuditContext(log_allowed=False, log_denied=False),
            )
            if result.allowed:
                return event
        raise PermissionDenied("User cannot view event")
