"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from calshare.application.ports.repositories import (
    AuditRepository,
    CalendarRepository,
    EventRepository,
    GrantRepository,
    OrganizationRepository,
    RoleAssignmentRepository,
    RoleRepository,
    ShareTokenRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def users(self) -> UserRepository: ...

    @property
    def organizations(self) -> OrganizationRepository: ...

    @property
    def calendars(self) -> CalendarRepository: ...

    @property
    def events(self) -> EventRepository: ...

    @property
    def grants(self) -> GrantRepository: ...

    @property
    def share_tokens(self) -> ShareTokenRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def role_assignments(self) -> RoleAssignmentRepository: ...

    @property
    def audit_entries(self) -> AuditRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    def __call__(self) -> AsyncIterator[UnitOfWork]: ...
