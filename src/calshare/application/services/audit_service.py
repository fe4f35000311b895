"""Audit service - append-only log of security-relevant actions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from calshare.domain.entities import AuditEntry

logger = logging.getLogger(__name__)


class AuditService:
    """Records audit entries in process memory and, optionally, in storage.

    Entries get sequential ids (``audit-1``, ``audit-2``, ...) unique per
    service instance. Nothing is ever edited or removed once recorded.
    """

    def __init__(self, unit_of_work_factory: Callable[[], Any] | None = None) -> None:
        self._uow_factory = unit_of_work_factory
        self._entries: list[AuditEntry] = []
        self._sequence = 0

    async def record(
        self,
        *,
        action: str,
        actor_id: str,
        status: str,
        target_id: str | None = None,
        details: str | None = None,
    ) -> AuditEntry:
        """Validate, append and persist a new entry. Raises ValidationError."""
        entry = AuditEntry(
            id=f"audit-{self._sequence + 1}",
            action=action,
            actor_id=actor_id,
            status=status,
            target_id=target_id or "",
            details=details or "",
        )
        self._sequence += 1
        self._entries.append(entry)
        logger.debug(
            "audit %s %s actor=%s target=%s",
            entry.action,
            entry.status,
            entry.actor_id,
            entry.target_id,
        )
        if self._uow_factory is not None:
            async with self._uow_factory() as uow:
                await uow.audit_entries.create(entry)
        return entry

    def list(self) -> list[AuditEntry]:
        """Snapshot of in-memory entries in insertion order."""
        return list(self._entries)

    async def history(self) -> list[AuditEntry]:
        """In-memory entries merged with persisted history, oldest first."""
        merged: dict[tuple, AuditEntry] = {(e.id, e.created_at): e for e in self._entries}
        if self._uow_factory is not None:
            async with self._uow_factory() as uow:
                for entry in await uow.audit_entries.list():
                    merged.setdefault((entry.id, entry.created_at), entry)
        return sorted(merged.values(), key=lambda e: e.created_at)
