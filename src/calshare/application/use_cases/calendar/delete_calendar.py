"""Delete calendar use case."""

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import Calendar, User
from calshare.domain.exceptions import NotFound
from calshare.domain.value_objects import AuditStatus


class DeleteCalendarUseCase:
    """Delete a calendar with its grants and share tokens. The caller enforces Manage Calendar."""

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, user: User, calendar_id: str) -> Calendar:
        async with self._uow_factory() as uow:
            deleted = await uow.calendars.delete(calendar_id)
            if not deleted:
                raise NotFound("Calendar", calendar_id)
            for grant in await uow.grants.list(calendar_id=calendar_id):
                await uow.grants.delete(grant.id)
            for share in await uow.share_tokens.list(calendar_id=calendar_id):
                await uow.share_tokens.delete(share.id)

        await self._audit.record(
            action="calendar_delete",
            actor_id=user.id,
            target_id=calendar_id,
            status=AuditStatus.SUCCESS,
            details="Calendar deleted",
        )
        return deleted
