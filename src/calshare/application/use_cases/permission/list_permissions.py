"""List calendar permission grants."""

from calshare.domain.entities import CalendarPermissions, User


class ListPermissionsUseCase:
    """Grants visible to a user: their own, plus every grant on calendars they own."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        user: User,
        *,
        user_id: str | None = None,
        calendar_id: str | None = None,
    ) -> list[CalendarPermissions]:
        async with self._uow_factory() as uow:
            grants = await uow.grants.list(user_id=user_id, calendar_id=calendar_id)
            owned = {
                c.id for c in await uow.calendars.list() if c.is_owned_by(user.id)
            }
        return [g for g in grants if g.user_id == user.id or g.calendar_id in owned]
