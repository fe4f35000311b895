"""Calendar repository port."""

from typing import Any, Protocol

from calshare.domain.entities import Calendar


class CalendarRepository(Protocol):
    """Port for calendar persistence.

    ``list`` filters match by equality; for list-valued columns
    (``shared_owner_ids``) a filter value matches on membership.
    """

    async def get_by_id(self, calendar_id: str) -> Calendar | None: ...

    async def list(self, **filters: Any) -> list[Calendar]: ...

    async def create(self, calendar: Calendar) -> Calendar: ...

    async def delete(self, calendar_id: str) -> Calendar | None: ...
