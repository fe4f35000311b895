"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from calshare.domain.entities import (
    Calendar,
    Event,
    Organization,
    Role,
    RoleAssignment,
    ShareToken,
    User,
)
from calshare.infrastructure.persistence.memory.repositories import (
    MemoryAuditRepository,
    MemoryGrantRepository,
    MemoryRepository,
    MemoryStore,
)


class MemoryUnitOfWork:
    """Unit of Work over a shared MemoryStore. Writes apply immediately."""

    def __init__(self, store: MemoryStore) -> None:
        self.users: MemoryRepository[User] = MemoryRepository(store.users)
        self.organizations: MemoryRepository[Organization] = MemoryRepository(
            store.organizations
        )
        self.calendars: MemoryRepository[Calendar] = MemoryRepository(store.calendars)
        self.events: MemoryRepository[Event] = MemoryRepository(store.events)
        self.grants = MemoryGrantRepository(store.grants)
        self.share_tokens: MemoryRepository[ShareToken] = MemoryRepository(store.share_tokens)
        self.roles: MemoryRepository[Role] = MemoryRepository(store.roles)
        self.role_assignments: MemoryRepository[RoleAssignment] = MemoryRepository(
            store.role_assignments
        )
        self.audit_entries = MemoryAuditRepository(store.audit_entries)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def create_memory_uow_factory(store: MemoryStore | None = None) -> object:
    """Create UnitOfWork factory (async context manager) over one store."""
    store = store if store is not None else MemoryStore()

    @asynccontextmanager
    async def factory() -> AsyncIterator[MemoryUnitOfWork]:
        yield MemoryUnitOfWork(store)

    factory.store = store
    return factory
