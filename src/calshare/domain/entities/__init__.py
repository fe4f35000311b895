"""Domain entities."""

from calshare.domain.entities.audit_entry import AuditEntry
from calshare.domain.entities.calendar import Calendar
from calshare.domain.entities.calendar_permissions import CalendarPermissions
from calshare.domain.entities.event import Event
from calshare.domain.entities.organization import Organization
from calshare.domain.entities.role import Role
from calshare.domain.entities.role_assignment import RoleAssignment
from calshare.domain.entities.session import Session
from calshare.domain.entities.share_token import ShareToken
from calshare.domain.entities.user import User

__all__ = [
    "AuditEntry",
    "Calendar",
    "CalendarPermissions",
    "Event",
    "Organization",
    "Role",
    "RoleAssignment",
    "Session",
    "ShareToken",
    "User",
]
