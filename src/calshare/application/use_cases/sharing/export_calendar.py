"""Export calendar use case."""

from dataclasses import dataclass

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import User
from calshare.domain.exceptions import FieldError, NotFound, ValidationError
from calshare.domain.value_objects import AuditStatus

EXPORT_FORMATS = ("ICS", "CSV")


@dataclass(frozen=True)
class ExportRequest:
    calendar_id: str
    format: str


class ExportCalendarUseCase:
    """Record a calendar export in ICS or CSV.

    The caller enforces view access on ``calendar_id``. Rendering the file
    itself is left to the download endpoint.
    """

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(
        self, actor: User, calendar_id: str, fmt: str | None = None
    ) -> ExportRequest:
        fmt = str(fmt or "ICS").upper()
        if fmt not in EXPORT_FORMATS:
            raise ValidationError(
                "Validation failed",
                [FieldError("format", f"format must be one of {', '.join(EXPORT_FORMATS)}")],
            )
        async with self._uow_factory() as uow:
            if not await uow.calendars.get_by_id(calendar_id):
                raise NotFound("Calendar", calendar_id)

        await self._audit.record(
            action="calendar_export",
            actor_id=actor.id,
            target_id=calendar_id,
            status=AuditStatus.SUCCESS,
            details=f"Exported calendar in {fmt} format",
        )
        return ExportRequest(calendar_id=calendar_id, format=fmt)
