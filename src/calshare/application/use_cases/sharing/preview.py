"""Sharing options for a calendar."""

from typing import Any

from calshare.application.use_cases.sharing.export_calendar import EXPORT_FORMATS
from calshare.domain.value_objects import ALL_PERMISSIONS


def sharing_options(calendar_id: str | None) -> list[dict[str, Any]]:
    """Channels offered for sharing ``calendar_id``; none without a calendar."""
    if not calendar_id:
        return []
    return [
        {
            "channel": "Share link",
            "description": "Generate a secure share link for this calendar.",
            "permissions": [p.value for p in ALL_PERMISSIONS],
        },
        {
            "channel": "Export",
            "description": "Export calendar data for backup or migration.",
            "formats": list(EXPORT_FORMATS),
        },
    ]
