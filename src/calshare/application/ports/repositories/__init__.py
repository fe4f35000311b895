"""Repository ports."""

from calshare.application.ports.repositories.audit_repository import AuditRepository
from calshare.application.ports.repositories.calendar_repository import (
    CalendarRepository,
)
from calshare.application.ports.repositories.event_repository import EventRepository
from calshare.application.ports.repositories.grant_repository import GrantRepository
from calshare.application.ports.repositories.organization_repository import (
    OrganizationRepository,
)
from calshare.application.ports.repositories.role_repository import (
    RoleAssignmentRepository,
    RoleRepository,
)
from calshare.application.ports.repositories.share_token_repository import (
    ShareTokenRepository,
)
from calshare.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "AuditRepository",
    "CalendarRepository",
    "EventRepository",
    "GrantRepository",
    "OrganizationRepository",
    "RoleAssignmentRepository",
    "RoleRepository",
    "ShareTokenRepository",
    "UserRepository",
]
