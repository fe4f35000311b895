"""PostgreSQL organization repository implementation."""

from typing import Any

from psycopg import AsyncConnection

from calshare.domain.entities import Organization
from calshare.infrastructure.persistence.postgres.filters import (
    build_filter_conditions,
    where_clause,
)

_COLUMNS = "id, name, description, roles, created_at"
_FILTERABLE = frozenset({"id", "name"})


def _row_to_organization(r: tuple) -> Organization:
    return Organization(
        id=r[0],
        name=r[1],
        description=r[2] or "",
        roles=list(r[3] or []),
        created_at=r[4],
    )


class PostgresOrganizationRepository:
    """Organization repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, organization_id: str) -> Organization | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM organization WHERE id = %s", (organization_id,)
        )
        r = await cur.fetchone()
        return _row_to_organization(r) if r else None

    async def list(self, **filters: Any) -> list[Organization]:
        conditions, params = build_filter_conditions(filters, _FILTERABLE)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM organization{where_clause(conditions)} ORDER BY created_at",
            params,
        )
        return [_row_to_organization(r) for r in await cur.fetchall()]

    async def create(self, organization: Organization) -> Organization:
        await self._conn.execute(
            f"INSERT INTO organization ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s)",
            (
                organization.id,
                organization.name,
                organization.description,
                organization.roles,
                organization.created_at,
            ),
        )
        return organization

    async def delete(self, organization_id: str) -> Organization | None:
        cur = await self._conn.execute(
            f"DELETE FROM organization WHERE id = %s RETURNING {_COLUMNS}",
            (organization_id,),
        )
        r = await cur.fetchone()
        return _row_to_organization(r) if r else None
