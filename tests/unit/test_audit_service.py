"""Unit tests for AuditService."""

from datetime import UTC, datetime

import pytest

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import AuditEntry
from calshare.domain.exceptions import ValidationError
from calshare.domain.value_objects import AuditStatus


@pytest.mark.asyncio
async def test_record_assigns_sequential_ids() -> None:
    audit = AuditService()

    first = await audit.record(action="login", actor_id="u1", status=AuditStatus.SUCCESS)
    second = await audit.record(action="logout", actor_id="u1", status=AuditStatus.SUCCESS)

    assert (first.id, second.id) == ("audit-1", "audit-2")
    assert first.target_id == ""
    assert first.details == ""


@pytest.mark.asyncio
async def test_list_returns_copy_in_insertion_order() -> None:
    audit = AuditService()
    await audit.record(action="a", actor_id="u1", status=AuditStatus.ALLOWED)
    await audit.record(action="b", actor_id="u1", status=AuditStatus.DENIED)

    entries = audit.list()
    entries.clear()

    assert [e.action for e in audit.list()] == ["a", "b"]


@pytest.mark.asyncio
async def test_invalid_entry_is_rejected_without_consuming_an_id() -> None:
    audit = AuditService()

    with pytest.raises(ValidationError) as exc_info:
        await audit.record(action="", actor_id="u1", status=AuditStatus.SUCCESS)

    assert exc_info.value.details[0].field == "action"
    assert audit.list() == []
    entry = await audit.record(action="ok", actor_id="u1", status=AuditStatus.SUCCESS)
    assert entry.id == "audit-1"


@pytest.mark.asyncio
async def test_record_persists_through_unit_of_work(store, uow_factory) -> None:
    audit = AuditService(uow_factory)

    entry = await audit.record(
        action="calendar_create", actor_id="u1", target_id="c1", status=AuditStatus.SUCCESS
    )

    assert store.audit_entries == [entry]


@pytest.mark.asyncio
async def test_history_merges_persisted_entries(store, uow_factory) -> None:
    """Entries from an earlier process come first; duplicates appear once."""
    earlier = AuditEntry(
        id="audit-1",
        action="login",
        actor_id="u0",
        status=AuditStatus.SUCCESS,
        created_at=datetime(2020, 1, 1, tzinfo=UTC),
    )
    store.audit_entries.append(earlier)
    audit = AuditService(uow_factory)
    current = await audit.record(action="logout", actor_id="u1", status=AuditStatus.SUCCESS)

    history = await audit.history()

    assert history == [earlier, current]


@pytest.mark.asyncio
async def test_history_without_storage_is_in_memory_log() -> None:
    audit = AuditService()
    entry = await audit.record(action="a", actor_id="u1", status=AuditStatus.SUCCESS)

    assert await audit.history() == [entry]


def test_audit_entry_to_dict() -> None:
    entry = AuditEntry(
        id="audit-1",
        action="login",
        actor_id="u1",
        status=AuditStatus.SUCCESS,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )
    assert entry.to_dict() == {
        "id": "audit-1",
        "action": "login",
        "actor_id": "u1",
        "target_id": "",
        "status": "success",
        "details": "",
        "created_at": "2026-01-01T00:00:00+00:00",
    }
