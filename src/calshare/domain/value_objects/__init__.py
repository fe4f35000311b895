"""Domain value objects."""

from calshare.domain.value_objects.audit_status import AuditStatus
from calshare.domain.value_objects.owner_type import OwnerType
from calshare.domain.value_objects.permission import (
    ALL_PERMISSIONS,
    SHARE_VIEW_PERMISSIONS,
    VIEW_PERMISSIONS,
    CalendarPermission,
    is_known_permission,
)
from calshare.domain.value_objects.requirement import (
    Requirement,
    describe_requirement,
    normalize_requirement,
)

__all__ = [
    "ALL_PERMISSIONS",
    "AuditStatus",
    "CalendarPermission",
    "OwnerType",
    "Requirement",
    "SHARE_VIEW_PERMISSIONS",
    "VIEW_PERMISSIONS",
    "describe_requirement",
    "is_known_permission",
    "normalize_requirement",
]
