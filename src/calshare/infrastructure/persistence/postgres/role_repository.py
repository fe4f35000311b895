"""PostgreSQL role and role assignment repositories."""

from typing import Any

from psycopg import AsyncConnection

from calshare.domain.entities import Role, RoleAssignment
from calshare.infrastructure.persistence.postgres.filters import (
    build_filter_conditions,
    where_clause,
)

_ROLE_COLUMNS = "id, organization_id, name, permissions, description, created_at"
_ASSIGNMENT_COLUMNS = "id, organization_id, role_id, user_id, assigned_by, assigned_at"


def _row_to_role(r: tuple) -> Role:
    return Role(
        id=r[0],
        organization_id=r[1],
        name=r[2],
        permissions=list(r[3] or []),
        description=r[4] or "",
        created_at=r[5],
    )


def _row_to_assignment(r: tuple) -> RoleAssignment:
    return RoleAssignment(
        id=r[0],
        organization_id=r[1],
        role_id=r[2],
        user_id=r[3],
        assigned_by=r[4],
        assigned_at=r[5],
    )


class PostgresRoleRepository:
    """Organization role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: str) -> Role | None:
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM org_role WHERE id = %s", (role_id,)
        )
        r = await cur.fetchone()
        return _row_to_role(r) if r else None

    async def list(self, **filters: Any) -> list[Role]:
        conditions, params = build_filter_conditions(
            filters, frozenset({"organization_id", "name"})
        )
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM org_role{where_clause(conditions)} ORDER BY created_at",
            params,
        )
        return [_row_to_role(r) for r in await cur.fetchall()]

    async def create(self, role: Role) -> Role:
        await self._conn.execute(
            f"INSERT INTO org_role ({_ROLE_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                role.id,
                role.organization_id,
                role.name,
                role.permissions,
                role.description,
                role.created_at,
            ),
        )
        return role


class PostgresRoleAssignmentRepository:
    """Role assignment repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, assignment_id: str) -> RoleAssignment | None:
        cur = await self._conn.execute(
            f"SELECT {_ASSIGNMENT_COLUMNS} FROM role_assignment WHERE id = %s",
            (assignment_id,),
        )
        r = await cur.fetchone()
        return _row_to_assignment(r) if r else None

    async def list(self, **filters: Any) -> list[RoleAssignment]:
        conditions, params = build_filter_conditions(
            filters, frozenset({"organization_id", "role_id", "user_id"})
        )
        cur = await self._conn.execute(
            f"SELECT {_ASSIGNMENT_COLUMNS} FROM role_assignment{where_clause(conditions)} "
            "ORDER BY assigned_at",
            params,
        )
        return [_row_to_assignment(r) for r in await cur.fetchall()]

    async def create(self, assignment: RoleAssignment) -> RoleAssignment:
        await self._conn.execute(
            f"INSERT INTO role_assignment ({_ASSIGNMENT_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s)",
            (
                assignment.id,
                assignment.organization_id,
                assignment.role_id,
                assignment.user_id,
                assignment.assigned_by,
                assignment.assigned_at,
            ),
        )
        return assignment
