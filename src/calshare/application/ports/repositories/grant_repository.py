"""Calendar permission grant repository port."""

from typing import Protocol

from calshare.domain.entities import CalendarPermissions


class GrantRepository(Protocol):
    """Port for calendar permission grants."""

    async def get_by_id(self, grant_id: str) -> CalendarPermissions | None: ...

    async def list(
        self, *, user_id: str | None = None, calendar_id: str | None = None
    ) -> list[CalendarPermissions]: ...

    async def create(self, grant: CalendarPermissions) -> CalendarPermissions: ...

    async def delete(self, grant_id: str) -> CalendarPermissions | None: ...
