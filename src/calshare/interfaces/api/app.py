"""Falcon ASGI application."""

from dataclasses import dataclass, field
from typing import Any

import falcon.asgi
from falcon.asgi import App

from calshare.application.services.audit_service import AuditService
from calshare.application.use_cases.auth.login import LoginUseCase
from calshare.application.use_cases.auth.logout import LogoutUseCase
from calshare.application.use_cases.auth.register import RegisterUserUseCase
from calshare.application.use_cases.auth.update_profile import UpdateProfileUseCase
from calshare.application.use_cases.calendar.create_calendar import CreateCalendarUseCase
from calshare.application.use_cases.calendar.delete_calendar import DeleteCalendarUseCase
from calshare.application.use_cases.calendar.embed_calendar import EmbedCalendarUseCase
from calshare.application.use_cases.calendar.get_calendar import GetCalendarUseCase
from calshare.application.use_cases.calendar.list_calendars import ListCalendarsUseCase
from calshare.application.use_cases.event.create_event import CreateEventUseCase
from calshare.application.use_cases.event.delete_event import DeleteEventUseCase
from calshare.application.use_cases.event.get_event import GetEventUseCase
from calshare.application.use_cases.event.list_events import ListEventsUseCase
from calshare.application.use_cases.organization.create_organization import (
    CreateOrganizationUseCase,
)
from calshare.application.use_cases.organization.get_organization import (
    GetOrganizationUseCase,
)
from calshare.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from calshare.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from calshare.application.use_cases.role.assign_role import AssignRoleUseCase
from calshare.application.use_cases.role.create_role import CreateRoleUseCase
from calshare.application.use_cases.role.list_roles import (
    ListRoleAssignmentsUseCase,
    ListRolesUseCase,
)
from calshare.application.use_cases.sharing.create_share_link import CreateShareLinkUseCase
from calshare.application.use_cases.sharing.export_calendar import ExportCalendarUseCase
from calshare.infrastructure.auth.session_store import SessionStore
from calshare.infrastructure.permission.permission_evaluator import PermissionEvaluator
from calshare.infrastructure.resilience import CircuitBreaker
from calshare.interfaces.api.errors import register_error_handlers
from calshare.interfaces.api.hooks import PermissionGuard
from calshare.interfaces.api.middleware.auth import SessionMiddleware
from calshare.interfaces.api.middleware.cors import CORSMiddleware
from calshare.interfaces.api.resources.audit import AuditLogsResource
from calshare.interfaces.api.resources.auth import (
    LoginResource,
    LogoutResource,
    ProfileResource,
    RegisterResource,
    SessionResource,
)
from calshare.interfaces.api.resources.calendars import (
    CalendarEmbedResource,
    CalendarResource,
    CalendarsResource,
)
from calshare.interfaces.api.resources.events import EventResource, EventsResource
from calshare.interfaces.api.resources.monitoring import (
    AdminDashboardResource,
    HealthResource,
    MetricsResource,
    StorageCheck,
)
from calshare.interfaces.api.resources.organizations import (
    OrganizationResource,
    OrganizationsResource,
)
from calshare.interfaces.api.resources.permissions import PermissionsResource
from calshare.interfaces.api.resources.roles import RoleAssignmentsResource, RolesResource
from calshare.interfaces.api.resources.sharing import (
    ExportResource,
    ShareLinkResource,
    SharingPreviewResource,
)


@dataclass
class Container:
    """Collaborators shared by every request."""

    unit_of_work_factory: Any
    audit_service: AuditService
    session_store: SessionStore
    breaker: CircuitBreaker = field(default_factory=lambda: CircuitBreaker(name="storage"))
    storage_mode: str = "memory"
    cors_origins: list[str] = field(default_factory=list)
    health_retries: int = 2
    health_retry_delay_ms: float = 50
    extra_middleware: list[Any] = field(default_factory=list)


def create_app(container: Container) -> App:
    """Wire use cases into resources and build the Falcon app with routes."""
    uow_factory = container.unit_of_work_factory
    audit = container.audit_service
    sessions = container.session_store

    evaluator = PermissionEvaluator(unit_of_work_factory=uow_factory, audit_service=audit)
    guard = PermissionGuard(evaluator=evaluator)
    storage_check = StorageCheck(
        uow_factory,
        container.breaker,
        retries=container.health_retries,
        delay_ms=container.health_retry_delay_ms,
    )

    middleware = [CORSMiddleware(container.cors_origins), *container.extra_middleware]
    middleware.append(SessionMiddleware(sessions, uow_factory))
    app = falcon.asgi.App(middleware=middleware)
    register_error_handlers(app)

    health = HealthResource(storage_check, container.storage_mode)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/metrics", MetricsResource(storage_check))
    app.add_route("/v1/admin/dashboard", AdminDashboardResource(storage_check))

    app.add_route(
        "/v1/auth/register",
        RegisterResource(RegisterUserUseCase(uow_factory, sessions, audit)),
    )
    app.add_route("/v1/auth/login", LoginResource(LoginUseCase(uow_factory, sessions, audit)))
    app.add_route("/v1/auth/logout", LogoutResource(LogoutUseCase(sessions, audit)))
    app.add_route("/v1/auth/session", SessionResource())
    app.add_route("/v1/auth/profile", ProfileResource(UpdateProfileUseCase(uow_factory, audit)))

    app.add_route(
        "/v1/calendars",
        CalendarsResource(
            ListCalendarsUseCase(uow_factory, audit),
            CreateCalendarUseCase(uow_factory, audit),
        ),
    )
    app.add_route(
        "/v1/calendars/{calendar_id}",
        CalendarResource(
            GetCalendarUseCase(uow_factory),
            DeleteCalendarUseCase(uow_factory, audit),
            guard,
        ),
    )
    app.add_route(
        "/v1/calendars/{calendar_id}/embed",
        CalendarEmbedResource(EmbedCalendarUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/events",
        EventsResource(
            ListEventsUseCase(uow_factory, evaluator),
            CreateEventUseCase(uow_factory, audit),
            guard,
        ),
    )
    app.add_route(
        "/v1/events/{event_id}",
        EventResource(
            GetEventUseCase(uow_factory, evaluator),
            DeleteEventUseCase(uow_factory, audit),
            guard,
        ),
    )
    app.add_route(
        "/v1/permissions",
        PermissionsResource(
            ListPermissionsUseCase(uow_factory),
            GrantPermissionUseCase(uow_factory, audit),
            guard,
        ),
    )
    app.add_route(
        "/v1/organizations",
        OrganizationsResource(CreateOrganizationUseCase(uow_factory, audit)),
    )
    app.add_route(
        "/v1/organizations/{org_id}",
        OrganizationResource(GetOrganizationUseCase(uow_factory)),
    )
    app.add_route(
        "/v1/sharing/link",
        ShareLinkResource(CreateShareLinkUseCase(uow_factory, audit), guard),
    )
    app.add_route(
        "/v1/sharing/export",
        ExportResource(ExportCalendarUseCase(uow_factory, audit), guard),
    )
    app.add_route("/v1/sharing/preview", SharingPreviewResource())
    app.add_route(
        "/v1/roles",
        RolesResource(ListRolesUseCase(uow_factory), CreateRoleUseCase(uow_factory, audit)),
    )
    app.add_route(
        "/v1/roles/assignments",
        RoleAssignmentsResource(
            ListRoleAssignmentsUseCase(uow_factory), AssignRoleUseCase(uow_factory, audit)
        ),
    )
    app.add_route("/v1/audit/logs", AuditLogsResource(audit))
    return app
