"""PostgreSQL calendar permission grant repository implementation."""

from psycopg import AsyncConnection

from calshare.domain.entities import CalendarPermissions
from calshare.infrastructure.persistence.postgres.filters import (
    build_filter_conditions,
    where_clause,
)

_COLUMNS = "id, calendar_id, user_id, granted_by, permissions, created_at"
_FILTERABLE = frozenset({"user_id", "calendar_id"})


def _row_to_grant(r: tuple) -> CalendarPermissions:
    return CalendarPermissions(
        id=r[0],
        calendar_id=r[1],
        user_id=r[2],
        granted_by=r[3],
        permissions=list(r[4] or []),
        created_at=r[5],
    )


class PostgresGrantRepository:
    """Grant repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, grant_id: str) -> CalendarPermissions | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM calendar_permission WHERE id = %s", (grant_id,)
        )
        r = await cur.fetchone()
        return _row_to_grant(r) if r else None

    async def list(
        self, *, user_id: str | None = None, calendar_id: str | None = None
    ) -> list[CalendarPermissions]:
        """List grants for a user and/or calendar."""
        conditions, params = build_filter_conditions(
            {"user_id": user_id, "calendar_id": calendar_id}, _FILTERABLE
        )
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM calendar_permission{where_clause(conditions)} "
            "ORDER BY created_at",
            params,
        )
        return [_row_to_grant(r) for r in await cur.fetchall()]

    async def create(self, grant: CalendarPermissions) -> CalendarPermissions:
        await self._conn.execute(
            f"INSERT INTO calendar_permission ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                grant.id,
                grant.calendar_id,
                grant.user_id,
                grant.granted_by,
                grant.permissions,
                grant.created_at,
            ),
        )
        return grant

    async def delete(self, grant_id: str) -> CalendarPermissions | None:
        cur = await self._conn.execute(
            f"DELETE FROM calendar_permission WHERE id = %s RETURNING {_COLUMNS}",
            (grant_id,),
        )
        r = await cur.fetchone()
        return _row_to_grant(r) if r else None
