"""PostgreSQL user repository implementation."""

from typing import Any

from psycopg import AsyncConnection

from calshare.domain.entities import User
from calshare.infrastructure.persistence.postgres.filters import (
    build_filter_conditions,
    where_clause,
)

_COLUMNS = "id, name, email, organization_id, role, password_hash, created_at"
_FILTERABLE = frozenset({"id", "email", "organization_id", "role"})


def _row_to_user(r: tuple) -> User:
    return User(
        id=r[0],
        name=r[1],
        email=r[2],
        organization_id=r[3],
        role=r[4],
        password_hash=r[5],
        created_at=r[6],
    )


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s", (user_id,)
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None

    async def list(self, **filters: Any) -> list[User]:
        """List users matching filters."""
        conditions, params = build_filter_conditions(filters, _FILTERABLE)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user{where_clause(conditions)} ORDER BY created_at",
            params,
        )
        return [_row_to_user(r) for r in await cur.fetchall()]

    async def create(self, user: User) -> User:
        """Create user."""
        await self._conn.execute(
            f"INSERT INTO app_user ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                user.id,
                user.name,
                user.email,
                user.organization_id,
                user.role,
                user.password_hash,
                user.created_at,
            ),
        )
        return user

    async def update(self, user: User) -> User:
        """Update mutable profile fields."""
        await self._conn.execute(
            "UPDATE app_user SET name=%s, email=%s, organization_id=%s, role=%s, "
            "password_hash=%s WHERE id=%s",
            (
                user.name,
                user.email,
                user.organization_id,
                user.role,
                user.password_hash,
                user.id,
            ),
        )
        return user

    async def delete(self, user_id: str) -> User | None:
        """Delete user, returning the removed row."""
        cur = await self._conn.execute(
            f"DELETE FROM app_user WHERE id = %s RETURNING {_COLUMNS}", (user_id,)
        )
        r = await cur.fetchone()
        return _row_to_user(r) if r else None
