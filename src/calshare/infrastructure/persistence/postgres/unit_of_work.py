"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation
from psycopg_pool import AsyncConnectionPool

from calshare.domain.exceptions import Conflict
from calshare.infrastructure.persistence.postgres.audit_repository import (
    PostgresAuditRepository,
)
from calshare.infrastructure.persistence.postgres.calendar_repository import (
    PostgresCalendarRepository,
)
from calshare.infrastructure.persistence.postgres.event_repository import (
    PostgresEventRepository,
)
from calshare.infrastructure.persistence.postgres.grant_repository import (
    PostgresGrantRepository,
)
from calshare.infrastructure.persistence.postgres.organization_repository import (
    PostgresOrganizationRepository,
)
from calshare.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleAssignmentRepository,
    PostgresRoleRepository,
)
from calshare.infrastructure.persistence.postgres.share_token_repository import (
    PostgresShareTokenRepository,
)
from calshare.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """Repositories sharing one pooled connection and its transaction."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self.users = PostgresUserRepository(conn)
        self.organizations = PostgresOrganizationRepository(conn)
        self.calendars = PostgresCalendarRepository(conn)
        self.events = PostgresEventRepository(conn)
        self.grants = PostgresGrantRepository(conn)
        self.share_tokens = PostgresShareTokenRepository(conn)
        self.roles = PostgresRoleRepository(conn)
        self.role_assignments = PostgresRoleAssignmentRepository(conn)
        self.audit_entries = PostgresAuditRepository(conn)

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    The pool commits when the block exits cleanly and rolls back when it
    raises, then returns the connection. Duplicate keys surface as Conflict.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        try:
            async with pool.connection() as conn:
                yield PostgresUnitOfWork(conn)
        except UniqueViolation as exc:
            raise Conflict(f"Duplicate record ({exc.diag.constraint_name})") from exc

    return factory
