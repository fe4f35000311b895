"""Create calendar use case."""

from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.application.use_cases.calendar.provision import create_owned_calendar
from calshare.domain.entities import Calendar, User
from calshare.domain.identifiers import new_id
from calshare.domain.value_objects import AuditStatus, OwnerType


class CreateCalendarUseCase:
    """Create a calendar; the creator receives every permission on it."""

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, user: User, payload: dict[str, Any]) -> Calendar:
        """Create calendar from request payload. Raises ValidationError."""
        calendar = Calendar(
            id=payload.get("id") or new_id("cal"),
            name=payload.get("name"),
            owner_id=payload.get("owner_id") or user.id,
            owner_type=payload.get("owner_type") or OwnerType.USER,
            color=payload.get("color") or "#8FB1FF",
            shared_owner_ids=payload.get("shared_owner_ids") or [],
            is_public=payload.get("is_public", False),
        )
        async with self._uow_factory() as uow:
            await create_owned_calendar(uow, calendar, user)

        await self._audit.record(
            action="calendar_create",
            actor_id=user.id,
            target_id=calendar.id,
            status=AuditStatus.SUCCESS,
            details="Calendar created",
        )
        return calendar
