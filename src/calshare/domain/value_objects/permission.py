"""Calendar permission vocabulary."""

from enum import StrEnum


class CalendarPermission(StrEnum):
    """Independent grants a user can hold on a calendar.

    No ordering or hierarchy is implied; MANAGE is only treated as the
    superset in presentational "access level" displays.
    """

    VIEW = "View Calendar"
    VIEW_TIMES_ONLY = "View Calendar - Times Only"
    ADD = "Add to Calendar"
    COMMENT = "Comment on Calendar"
    MANAGE = "Manage Calendar"


ALL_PERMISSIONS: tuple[CalendarPermission, ...] = tuple(CalendarPermission)

# Any one of these lets a user see a calendar and its events.
VIEW_PERMISSIONS: frozenset[CalendarPermission] = frozenset({
    CalendarPermission.VIEW,
    CalendarPermission.VIEW_TIMES_ONLY,
    CalendarPermission.ADD,
})

SHARE_VIEW_PERMISSIONS: frozenset[CalendarPermission] = frozenset({
    CalendarPermission.VIEW,
    CalendarPermission.VIEW_TIMES_ONLY,
})


def is_known_permission(value: object) -> bool:
    """True if value is one of the vocabulary labels."""
    return isinstance(value, str) and value in CalendarPermission._value2member_map_
