"""PostgreSQL share token repository implementation."""

from typing import Any

from psycopg import AsyncConnection

from calshare.domain.entities import ShareToken
from calshare.infrastructure.persistence.postgres.filters import (
    build_filter_conditions,
    where_clause,
)

_COLUMNS = "id, calendar_id, token, created_by, permissions, expires_at, created_at"
_FILTERABLE = frozenset({"calendar_id", "token", "created_by"})


def _row_to_share_token(r: tuple) -> ShareToken:
    return ShareToken(
        id=r[0],
        calendar_id=r[1],
        token=r[2],
        created_by=r[3],
        permissions=list(r[4] or []),
        expires_at=r[5],
        created_at=r[6],
    )


class PostgresShareTokenRepository:
    """Share token repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, share_id: str) -> ShareToken | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM share_token WHERE id = %s", (share_id,)
        )
        r = await cur.fetchone()
        return _row_to_share_token(r) if r else None

    async def list(self, **filters: Any) -> list[ShareToken]:
        conditions, params = build_filter_conditions(filters, _FILTERABLE)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM share_token{where_clause(conditions)} ORDER BY created_at",
            params,
        )
        return [_row_to_share_token(r) for r in await cur.fetchall()]

    async def create(self, share_token: ShareToken) -> ShareToken:
        await self._conn.execute(
            f"INSERT INTO share_token ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                share_token.id,
                share_token.calendar_id,
                share_token.token,
                share_token.created_by,
                share_token.permissions,
                share_token.expires_at,
                share_token.created_at,
            ),
        )
        return share_token

    async def delete(self, share_id: str) -> ShareToken | None:
        cur = await self._conn.execute(
            f"DELETE FROM share_token WHERE id = %s RETURNING {_COLUMNS}", (share_id,)
        )
        r = await cur.fetchone()
        return _row_to_share_token(r) if r else None
