"""Unit tests for the PostgreSQL unit of work factory."""

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from psycopg.errors import UniqueViolation

from calshare.domain.exceptions import Conflict
from calshare.infrastructure.persistence.postgres.unit_of_work import (
    PostgresUnitOfWork,
    create_uow_factory,
)

from tests.conftest import make_calendar


def _pool(conn) -> MagicMock:
    pool = MagicMock()

    @asynccontextmanager
    async def connection():
        yield conn

    pool.connection = connection
    return pool


@pytest.mark.asyncio
async def test_factory_binds_repositories_to_one_connection() -> None:
    conn = AsyncMock()
    factory = create_uow_factory(_pool(conn))

    async with factory() as uow:
        assert isinstance(uow, PostgresUnitOfWork)
        await uow.commit()

    conn.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_duplicate_key_becomes_conflict() -> None:
    conn = AsyncMock()
    conn.execute.side_effect = UniqueViolation("duplicate key value")
    factory = create_uow_factory(_pool(conn))

    with pytest.raises(Conflict) as exc_info:
        async with factory() as uow:
            await uow.calendars.create(make_calendar("c1"))

    assert isinstance(exc_info.value.__cause__, UniqueViolation)


@pytest.mark.asyncio
async def test_share_token_lookup_filters_by_calendar_and_token() -> None:
    created = datetime(2026, 1, 1, tzinfo=UTC)
    cursor = AsyncMock()
    cursor.fetchall.return_value = [
        ("share-1", "c1", "abc", "u1", ["View Calendar"], None, created)
    ]
    conn = AsyncMock()
    conn.execute.return_value = cursor
    factory = create_uow_factory(_pool(conn))

    async with factory() as uow:
        [share] = await uow.share_tokens.list(calendar_id="c1", token="abc")

    sql, params = conn.execute.await_args.args
    assert "WHERE calendar_id = %s AND token = %s" in sql
    assert params == ["c1", "abc"]
    assert share.permissions == ["View Calendar"]
    assert share.allows_viewing()


@pytest.mark.asyncio
async def test_role_assignment_filters_reject_unknown_columns() -> None:
    conn = AsyncMock()
    factory = create_uow_factory(_pool(conn))

    with pytest.raises(ValueError, match="Unsupported filter"):
        async with factory() as uow:
            await uow.role_assignments.list(assigned_by="u1")
