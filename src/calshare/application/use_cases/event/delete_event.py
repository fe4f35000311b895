"""Delete event use case."""

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import Event, User
from calshare.domain.exceptions import NotFound
from calshare.domain.value_objects import AuditStatus


class DeleteEventUseCase:
    """Delete an event from a calendar the caller manages.

    The caller enforces Manage Calendar on ``calendar_id``; an event that is
    not on that calendar is reported as not found.
    """

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, user: User, event_id: str, calendar_id: str) -> Event:
        async with self._uow_factory() as uow:
            event = await uow.events.get_by_id(event_id)
            if not event or calendar_id not in event.calendar_ids:
                raise NotFound("Event", event_id)
            await uow.events.delete(event_id)

        await self._audit.record(
            action="event_delete",
            actor_id=user.id,
            target_id=event_id,
            status=AuditStatus.SUCCESS,
            details="Event deleted",
        )
        return event
