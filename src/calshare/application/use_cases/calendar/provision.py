"""Calendar creation shared by registration and the calendars API."""

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import Calendar, CalendarPermissions, User
from calshare.domain.identifiers import new_id
from calshare.domain.value_objects import ALL_PERMISSIONS, AuditStatus


async def create_owned_calendar(uow, calendar: Calendar, owner: User) -> Calendar:
    """Persist calendar and grant its creator every permission on it."""
    await uow.calendars.create(calendar)
    await uow.grants.create(
        CalendarPermissions(
            id=new_id("perm"),
            calendar_id=calendar.id,
            user_id=owner.id,
            granted_by=owner.id,
            permissions=list(ALL_PERMISSIONS),
        )
    )
    return calendar


async def provision_default_calendar(
    uow, user: User, audit_service: AuditService | None = None
) -> Calendar:
    """Create ``<name>'s Calendar`` for a user who has none."""
    calendar = await create_owned_calendar(
        uow,
        Calendar(id=new_id("cal"), name=f"{user.name}'s Calendar", owner_id=user.id),
        user,
    )
    if audit_service is not None:
        await audit_service.record(
            action="calendar_auto_provision",
            actor_id=user.id,
            target_id=calendar.id,
            status=AuditStatus.SUCCESS,
            details="Default calendar created for user",
        )
    return calendar
