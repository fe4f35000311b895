"""Create event use case."""

from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import Event, User
from calshare.domain.exceptions import FieldError, ValidationError
from calshare.domain.identifiers import new_id
from calshare.domain.validation import parse_datetime
from calshare.domain.value_objects import AuditStatus


class CreateEventUseCase:
    """Create an event. The caller enforces Add to Calendar on the target calendar."""

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, user: User, payload: dict[str, Any]) -> Event:
        """Create event; ``calendar_id`` (the guarded calendar) must be among its calendars."""
        calendar_id = payload.get("calendar_id")
        calendar_ids = payload.get("calendar_ids")
        if calendar_ids is None and calendar_id:
            calendar_ids = [calendar_id]
        if calendar_id and isinstance(calendar_ids, list) and calendar_id not in calendar_ids:
            raise ValidationError(
                "Validation failed",
                [FieldError("calendar_ids", "calendar_ids must include calendar_id")],
            )
        event = Event(
            id=payload.get("id") or new_id("evt"),
            title=payload.get("title"),
            description=payload.get("description") or "",
            calendar_ids=calendar_ids if calendar_ids is not None else [],
            starts_at=parse_datetime(payload.get("starts_at")),
            ends_at=parse_datetime(payload.get("ends_at")),
            created_by=payload.get("created_by") or user.id,
        )
        async with self._uow_factory() as uow:
            await uow.events.create(event)

        await self._audit.record(
            action="event_create",
            actor_id=user.id,
            target_id=event.id,
            status=AuditStatus.SUCCESS,
            details="Event created",
        )
        return event
