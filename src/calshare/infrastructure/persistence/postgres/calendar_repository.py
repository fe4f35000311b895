"""PostgreSQL calendar repository implementation."""

from typing import Any

from psycopg import AsyncConnection

from calshare.domain.entities import Calendar
from calshare.infrastructure.persistence.postgres.filters import (
    build_filter_conditions,
    where_clause,
)

_COLUMNS = "id, name, owner_id, owner_type, color, shared_owner_ids, is_public, created_at"
_FILTERABLE = frozenset({"id", "owner_id", "owner_type", "is_public"})
_ARRAY_FILTERABLE = frozenset({"shared_owner_ids"})


def _row_to_calendar(r: tuple) -> Calendar:
    return Calendar(
        id=r[0],
        name=r[1],
        owner_id=r[2],
        owner_type=r[3],
        color=r[4],
        shared_owner_ids=list(r[5] or []),
        is_public=r[6],
        created_at=r[7],
    )


class PostgresCalendarRepository:
    """Calendar repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, calendar_id: str) -> Calendar | None:
        """Get calendar by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM calendar WHERE id = %s", (calendar_id,)
        )
        r = await cur.fetchone()
        return _row_to_calendar(r) if r else None

    async def list(self, **filters: Any) -> list[Calendar]:
        """List calendars; shared_owner_ids filters on membership."""
        conditions, params = build_filter_conditions(filters, _FILTERABLE, _ARRAY_FILTERABLE)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM calendar{where_clause(conditions)} ORDER BY created_at",
            params,
        )
        return [_row_to_calendar(r) for r in await cur.fetchall()]

    async def create(self, calendar: Calendar) -> Calendar:
        """Create calendar."""
        await self._conn.execute(
            f"INSERT INTO calendar ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                calendar.id,
                calendar.name,
                calendar.owner_id,
                str(calendar.owner_type),
                calendar.color,
                calendar.shared_owner_ids,
                calendar.is_public,
                calendar.created_at,
            ),
        )
        return calendar

    async def delete(self, calendar_id: str) -> Calendar | None:
        """Delete calendar, returning the removed row."""
        cur = await self._conn.execute(
            f"DELETE FROM calendar WHERE id = %s RETURNING {_COLUMNS}", (calendar_id,)
        )
        r = await cur.fetchone()
        return _row_to_calendar(r) if r else None
