"""Audit entry repository port."""

from typing import Protocol

from calshare.domain.entities import AuditEntry


class AuditRepository(Protocol):
    """Port for audit persistence. Append-only: no update or delete."""

    async def create(self, entry: AuditEntry) -> AuditEntry: ...

    async def list(self) -> list[AuditEntry]: ...
