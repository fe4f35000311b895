"""Audit entry statuses."""

from enum import StrEnum


class AuditStatus(StrEnum):
    """Known audit outcomes. Entries may carry other non-empty statuses."""

    ALLOWED = "allowed"
    DENIED = "denied"
    SUCCESS = "success"
    FAILURE = "failure"
