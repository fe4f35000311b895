"""Event repository port."""

from typing import Any, Protocol

from calshare.domain.entities import Event


class EventRepository(Protocol):
    """Port for event persistence. ``calendar_ids`` filters on membership."""

    async def get_by_id(self, event_id: str) -> Event | None: ...

    async def list(self, **filters: Any) -> list[Event]: ...

    async def create(self, event: Event) -> Event: ...

    async def delete(self, event_id: str) -> Event | None: ...
