"""Create share link use case."""

import secrets
from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import ShareToken, User
from calshare.domain.exceptions import NotFound
from calshare.domain.identifiers import new_id
from calshare.domain.value_objects import AuditStatus, CalendarPermission


class CreateShareLinkUseCase:
    """Issue a share token for a calendar.

    The caller enforces Manage Calendar on ``calendar_id``. Without
    ``permissions`` the token carries View Calendar only.
    """

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, actor: User, payload: dict[str, Any]) -> ShareToken:
        permissions = payload.get("permissions")
        if not isinstance(permissions, list) or not permissions:
            permissions = [CalendarPermission.VIEW.value]
        share = ShareToken(
            id=new_id("share"),
            calendar_id=payload.get("calendar_id"),
            token=secrets.token_hex(16),
            created_by=actor.id,
            permissions=permissions,
        )
        async with self._uow_factory() as uow:
            if not await uow.calendars.get_by_id(share.calendar_id):
                raise NotFound("Calendar", share.calendar_id)
            await uow.share_tokens.create(share)

        await self._audit.record(
            action="share_link_create",
            actor_id=actor.id,
            target_id=share.id,
            status=AuditStatus.SUCCESS,
            details=f"Share link created for {share.calendar_id}",
        )
        return share
