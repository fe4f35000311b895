"""Pytest fixtures for calshare tests."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import (
    Calendar,
    CalendarPermissions,
    Event,
    Organization,
    Role,
    RoleAssignment,
    ShareToken,
    User,
)
from calshare.domain.value_objects import ALL_PERMISSIONS
from calshare.infrastructure.persistence.memory import MemoryStore, create_memory_uow_factory


# --- Builders ---


def make_user(user_id: str = "user-1", **overrides) -> User:
    values = {
        "id": user_id,
        "name": "Ada",
        "email": f"{user_id}@example.com",
    }
    values.update(overrides)
    return User(**values)


def make_calendar(calendar_id: str = "cal-1", owner_id: str = "user-1", **overrides) -> Calendar:
    values = {"id": calendar_id, "name": "Team", "owner_id": owner_id}
    values.update(overrides)
    return Calendar(**values)


def make_grant(
    user_id: str = "user-1",
    calendar_id: str = "cal-1",
    permissions: list[str] | None = None,
    grant_id: str | None = None,
) -> CalendarPermissions:
    return CalendarPermissions(
        id=grant_id or f"perm-{user_id}-{calendar_id}",
        calendar_id=calendar_id,
        user_id=user_id,
        granted_by=user_id,
        permissions=list(ALL_PERMISSIONS) if permissions is None else permissions,
    )


def make_event(event_id: str = "evt-1", calendar_ids: list[str] | None = None, **overrides) -> Event:
    values = {
        "id": event_id,
        "title": "Standup",
        "calendar_ids": ["cal-1"] if calendar_ids is None else calendar_ids,
        "starts_at": datetime(2026, 1, 5, 9, 0, tzinfo=UTC),
        "ends_at": datetime(2026, 1, 5, 9, 15, tzinfo=UTC),
        "created_by": "user-1",
    }
    values.update(overrides)
    return Event(**values)


def make_organization(org_id: str = "org-1") -> Organization:
    return Organization(id=org_id, name="Acme")


def make_share_token(
    token: str = "token-1",
    calendar_id: str = "cal-1",
    permissions: list[str] | None = None,
    **overrides,
) -> ShareToken:
    values = {
        "id": f"share-{token}",
        "calendar_id": calendar_id,
        "token": token,
        "created_by": "user-1",
        "permissions": ["View Calendar"] if permissions is None else permissions,
    }
    values.update(overrides)
    return ShareToken(**values)


def make_role(role_id: str = "role-1", org_id: str = "org-1", **overrides) -> Role:
    values = {
        "id": role_id,
        "organization_id": org_id,
        "name": "Scheduler",
        "permissions": ["Add to Calendar"],
    }
    values.update(overrides)
    return Role(**values)


def seed(store: MemoryStore, *items) -> None:
    """Put entities straight into the store tables."""
    tables = {
        User: store.users,
        Organization: store.organizations,
        Calendar: store.calendars,
        Event: store.events,
        CalendarPermissions: store.grants,
        ShareToken: store.share_tokens,
        Role: store.roles,
        RoleAssignment: store.role_assignments,
    }
    for item in items:
        tables[type(item)][item.id] = item


# --- Fixtures ---


@pytest.fixture
def store() -> MemoryStore:
    """Fresh in-memory tables for each test."""
    return MemoryStore()


@pytest.fixture
def uow_factory(store: MemoryStore):
    """Factory returning async context manager over the test store."""
    return create_memory_uow_factory(store)


@pytest.fixture
def audit_service() -> AuditService:
    """Audit service without persistence."""
    return AuditService()


@pytest.fixture
def user() -> User:
    return make_user()
