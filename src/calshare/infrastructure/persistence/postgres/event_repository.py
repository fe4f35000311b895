"""PostgreSQL event repository implementation."""

from typing import Any

from psycopg import AsyncConnection

from calshare.domain.entities import Event
from calshare.infrastructure.persistence.postgres.filters import (
    build_filter_conditions,
    where_clause,
)

_COLUMNS = "id, title, description, calendar_ids, starts_at, ends_at, created_by, created_at"
_FILTERABLE = frozenset({"id", "created_by"})
_ARRAY_FILTERABLE = frozenset({"calendar_ids"})


def _row_to_event(r: tuple) -> Event:
    return Event(
        id=r[0],
        title=r[1],
        description=r[2] or "",
        calendar_ids=list(r[3] or []),
        starts_at=r[4],
        ends_at=r[5],
        created_by=r[6],
        created_at=r[7],
    )


class PostgresEventRepository:
    """Event repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, event_id: str) -> Event | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM event WHERE id = %s", (event_id,)
        )
        r = await cur.fetchone()
        return _row_to_event(r) if r else None

    async def list(self, **filters: Any) -> list[Event]:
        conditions, params = build_filter_conditions(filters, _FILTERABLE, _ARRAY_FILTERABLE)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM event{where_clause(conditions)} ORDER BY starts_at",
            params,
        )
        return [_row_to_event(r) for r in await cur.fetchall()]

    async def create(self, event: Event) -> Event:
        await self._conn.execute(
            f"INSERT INTO event ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                event.id,
                event.title,
                event.description,
                event.calendar_ids,
                event.starts_at,
                event.ends_at,
                event.created_by,
                event.created_at,
            ),
        )
        return event

    async def delete(self, event_id: str) -> Event | None:
        cur = await self._conn.execute(
            f"DELETE FROM event WHERE id = %s RETURNING {_COLUMNS}", (event_id,)
        )
        r = await cur.fetchone()
        return _row_to_event(r) if r else None
