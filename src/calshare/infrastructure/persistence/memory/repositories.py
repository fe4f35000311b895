"""In-memory repositories backed by plain dicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from calshare.domain.entities import (
    AuditEntry,
    Calendar,
    CalendarPermissions,
    Event,
    Organization,
    Role,
    RoleAssignment,
    ShareToken,
    User,
)
from calshare.domain.exceptions import Conflict

T = TypeVar("T")


def _matches(item: object, filters: dict[str, Any]) -> bool:
    """Equality match per field; list-valued fields match on membership."""
    for key, expected in filters.items():
        if expected is None:
            continue
        value = getattr(item, key, None)
        if isinstance(value, (list, tuple)):
            if expected not in value:
                return False
        elif value != expected:
            return False
    return True


@dataclass
class MemoryStore:
    """Process-wide tables shared by every in-memory unit of work."""

    users: dict[str, User] = field(default_factory=dict)
    organizations: dict[str, Organization] = field(default_factory=dict)
    calendars: dict[str, Calendar] = field(default_factory=dict)
    events: dict[str, Event] = field(default_factory=dict)
    grants: dict[str, CalendarPermissions] = field(default_factory=dict)
    share_tokens: dict[str, ShareToken] = field(default_factory=dict)
    roles: dict[str, Role] = field(default_factory=dict)
    role_assignments: dict[str, RoleAssignment] = field(default_factory=dict)
    audit_entries: list[AuditEntry] = field(default_factory=list)

    def clear(self) -> None:
        self.users.clear()
        self.organizations.clear()
        self.calendars.clear()
        self.events.clear()
        self.grants.clear()
        self.share_tokens.clear()
        self.roles.clear()
        self.role_assignments.clear()
        self.audit_entries.clear()


class MemoryRepository(Generic[T]):
    """Dict-backed repository keyed by entity ``id``."""

    def __init__(self, table: dict[str, T]) -> None:
        self._table = table

    async def get_by_id(self, item_id: str) -> T | None:
        return self._table.get(item_id)

    async def list(self, **filters: Any) -> list[T]:
        return [item for item in self._table.values() if _matches(item, filters)]

    async def create(self, item: T) -> T:
        """Insert a new item. Raises Conflict if the id is taken."""
        if item.id in self._table:
            raise Conflict(f"{type(item).__name__} {item.id} already exists")
        self._table[item.id] = item
        return item

    async def update(self, item: T) -> T:
        self._table[item.id] = item
        return item

    async def delete(self, item_id: str) -> T | None:
        return self._table.pop(item_id, None)


class MemoryGrantRepository(MemoryRepository[CalendarPermissions]):
    """In-memory calendar permission grant repository."""

    async def list(
        self, *, user_id: str | None = None, calendar_id: str | None = None
    ) -> list[CalendarPermissions]:
        return await super().list(user_id=user_id, calendar_id=calendar_id)


class MemoryAuditRepository:
    """Append-only in-memory audit sink."""

    def __init__(self, entries: list[AuditEntry]) -> None:
        self._entries = entries

    async def create(self, entry: AuditEntry) -> AuditEntry:
        self._entries.append(entry)
        return entry

    async def list(self) -> list[AuditEntry]:
        return list(self._entries)

