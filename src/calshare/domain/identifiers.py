"""Prefixed random identifiers (``cal-1a2b...``, ``user-...``)."""

import secrets


def new_id(prefix: str) -> str:
    return f"{prefix}-{secrets.token_hex(8)}"
