"""WHERE-clause builder for simple repository filters."""

from typing import Any


def build_filter_conditions(
    filters: dict[str, Any],
    columns: frozenset[str],
    array_columns: frozenset[str] = frozenset(),
) -> tuple[list[str], list[Any]]:
    """Build SQL conditions and params from ``field=value`` filters.

    None values are skipped. Array columns match on membership
    (``%s = ANY(col)``). Unknown fields raise ValueError so that callers can
    never inject column names.
    """
    conditions: list[str] = []
    params: list[Any] = []
    for key, value in filters.items():
        if value is None:
            continue
        if key in array_columns:
            conditions.append(f"%s = ANY({key})")
        elif key in columns:
            conditions.append(f"{key} = %s")
        else:
            raise ValueError(f"Unsupported filter: {key}")
        params.append(value)
    return conditions, params


def where_clause(conditions: list[str]) -> str:
    return f" WHERE {' AND '.join(conditions)}" if conditions else ""
