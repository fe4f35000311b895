"""Grant calendar permissions use case."""

from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import CalendarPermissions, User
from calshare.domain.exceptions import NotFound
from calshare.domain.identifiers import new_id
from calshare.domain.value_objects import AuditStatus


class GrantPermissionUseCase:
    """Grant a user permissions on a calendar.

    The caller enforces Manage Calendar on ``calendar_id``.
    """

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, actor: User, payload: dict[str, Any]) -> CalendarPermissions:
        grant = CalendarPermissions(
            id=payload.get("id") or new_id("perm"),
            calendar_id=payload.get("calendar_id"),
            user_id=payload.get("user_id"),
            granted_by=payload.get("granted_by") or actor.id,
            permissions=payload.get("permissions"),
        )
        async with self._uow_factory() as uow:
            if not await uow.calendars.get_by_id(grant.calendar_id):
                raise NotFound("Calendar", grant.calendar_id)
            if not await uow.users.get_by_id(grant.user_id):
                raise NotFound("User", grant.user_id)
            await uow.grants.create(grant)

        await self._audit.record(
            action="permission_grant",
            actor_id=actor.id,
            target_id=grant.id,
            status=AuditStatus.SUCCESS,
            details=f"Permission granted to {grant.user_id} on {grant.calendar_id}",
        )
        return grant
