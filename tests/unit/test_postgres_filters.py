"""Unit tests for the PostgreSQL filter builder."""

import pytest

from calshare.infrastructure.persistence.postgres.filters import (
    build_filter_conditions,
    where_clause,
)

COLUMNS = frozenset({"owner_id", "owner_type"})
ARRAYS = frozenset({"shared_owner_ids"})


def test_equality_and_array_conditions() -> None:
    conditions, params = build_filter_conditions(
        {"owner_id": "u1", "shared_owner_ids": "u2"}, COLUMNS, ARRAYS
    )
    assert conditions == ["owner_id = %s", "%s = ANY(shared_owner_ids)"]
    assert params == ["u1", "u2"]


def test_none_values_are_skipped() -> None:
    assert build_filter_conditions({"owner_id": None}, COLUMNS) == ([], [])


def test_unknown_column_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported filter"):
        build_filter_conditions({"owner_id; DROP TABLE calendar": "x"}, COLUMNS)


def test_where_clause() -> None:
    assert where_clause([]) == ""
    assert where_clause(["a = %s", "b = %s"]) == " WHERE a = %s AND b = %s"
