"""Unit tests for the in-memory persistence backend."""

import pytest

from calshare.domain.exceptions import Conflict
from calshare.domain.value_objects import CalendarPermission
from calshare.infrastructure.persistence.memory import MemoryStore, create_memory_uow_factory

from tests.conftest import make_calendar, make_event, make_grant, make_user

VIEW = CalendarPermission.VIEW.value


@pytest.mark.asyncio
async def test_units_of_work_share_the_store() -> None:
    factory = create_memory_uow_factory()
    user = make_user()

    async with factory() as uow:
        await uow.users.create(user)
    async with factory() as uow:
        assert await uow.users.get_by_id(user.id) == user

    assert factory.store.users == {user.id: user}


@pytest.mark.asyncio
async def test_list_filters_by_equality_and_skips_none(uow_factory) -> None:
    async with uow_factory() as uow:
        await uow.calendars.create(make_calendar("c1", owner_id="u1"))
        await uow.calendars.create(make_calendar("c2", owner_id="u2"))

        assert [c.id for c in await uow.calendars.list(owner_id="u1")] == ["c1"]
        assert len(await uow.calendars.list(owner_id=None)) == 2


@pytest.mark.asyncio
async def test_list_matches_membership_on_list_fields(uow_factory) -> None:
    async with uow_factory() as uow:
        await uow.events.create(make_event("e1", calendar_ids=["c1", "c2"]))
        await uow.events.create(make_event("e2", calendar_ids=["c2"]))

        assert [e.id for e in await uow.events.list(calendar_ids="c1")] == ["e1"]
        assert {e.id for e in await uow.events.list(calendar_ids="c2")} == {"e1", "e2"}


@pytest.mark.asyncio
async def test_grant_list_by_user_and_calendar(uow_factory) -> None:
    async with uow_factory() as uow:
        await uow.grants.create(make_grant("u1", "c1"))
        await uow.grants.create(make_grant("u1", "c2"))
        await uow.grants.create(make_grant("u2", "c1"))

        assert len(await uow.grants.list(user_id="u1")) == 2
        assert len(await uow.grants.list(calendar_id="c1")) == 2
        assert len(await uow.grants.list(user_id="u1", calendar_id="c1")) == 1
        assert len(await uow.grants.list()) == 3


@pytest.mark.asyncio
async def test_delete_returns_removed_item(uow_factory) -> None:
    async with uow_factory() as uow:
        calendar = await uow.calendars.create(make_calendar())

        assert await uow.calendars.delete(calendar.id) == calendar
        assert await uow.calendars.delete(calendar.id) is None


def test_store_clear() -> None:
    store = MemoryStore()
    store.users["u1"] = make_user("u1")
    store.clear()
    assert store.users == {}


@pytest.mark.asyncio
async def test_create_rejects_existing_id(uow_factory) -> None:
    async with uow_factory() as uow:
        original = await uow.calendars.create(make_calendar("c1", owner_id="u1"))

        with pytest.raises(Conflict, match="Calendar c1 already exists"):
            await uow.calendars.create(make_calendar("c1", owner_id="u2"))

        assert await uow.calendars.get_by_id("c1") is original

        await uow.grants.create(make_grant("u1", "c1"))
        with pytest.raises(Conflict):
            await uow.grants.create(make_grant("u1", "c1", [VIEW]))
