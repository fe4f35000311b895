"""Permission guard - enforces calendar permission requirements on requests.

The guard resolves who is asking (``req.context.user``) and which calendar
is targeted, hands both to the permission evaluator and turns a denial into
``PermissionDenied``. The registered error handler renders that as
``403 {"error": "Permission denied"}`` before the responder runs.

The calendar is looked up in this order, first non-empty wins:

1. the ``calendar_id`` path parameter
2. the JSON body (``calendar_id`` or ``calendarId``)
3. the query string (``calendar_id`` or ``calendarId``)
"""

import logging
from collections.abc import Callable
from typing import Any

import falcon
import falcon.asgi

from calshare.application.ports import AuditContext, EvaluationResult
from calshare.application.services.audit_service import AuditService
from calshare.domain.exceptions import PermissionDenied
from calshare.domain.value_objects.requirement import RequirementLike
from calshare.infrastructure.permission.permission_evaluator import (
    ANONYMOUS,
    DEFAULT_ACTION,
    UNKNOWN_TARGET,
    PermissionEvaluator,
    first_present,
    is_present,
)

logger = logging.getLogger(__name__)

CALENDAR_KEYS = ("calendar_id", "calendarId")


async def _read_body(req: falcon.asgi.Request) -> dict[str, Any]:
    if req.method in ("GET", "HEAD", "DELETE", "OPTIONS"):
        return {}
    body = await req.get_media(default_when_empty=None)
    return body if isinstance(body, dict) else {}


async def resolve_calendar_id(req: falcon.asgi.Request, params: dict[str, Any]) -> str | None:
    body = await _read_body(req)
    candidates = [params.get("calendar_id")]
    candidates += [body.get(key) for key in CALENDAR_KEYS]
    candidates += [req.get_param(key) for key in CALENDAR_KEYS]
    return first_present(*candidates)


class PermissionGuard:
    """Request-level enforcement on top of PermissionEvaluator."""

    def __init__(
        self,
        unit_of_work_factory: Callable[[], Any] | None = None,
        audit_service: AuditService | None = None,
        evaluator: PermissionEvaluator | None = None,
    ) -> None:
        self._evaluator = evaluator or PermissionEvaluator(
            unit_of_work_factory=unit_of_work_factory, audit_service=audit_service
        )

    @property
    def evaluator(self) -> PermissionEvaluator:
        return self._evaluator

    async def enforce(
        self,
        req: falcon.asgi.Request,
        params: dict[str, Any],
        requirement: RequirementLike,
        *,
        action: str | None = None,
        details: str | None = None,
        log_allowed: bool = True,
        log_denied: bool = True,
    ) -> EvaluationResult:
        """Allow the request through or raise PermissionDenied."""
        user = getattr(req.context, "user", None)
        user_id = user.id if user is not None else None
        calendar_id = await resolve_calendar_id(req, params)

        context = AuditContext(
            action=action or DEFAULT_ACTION,
            actor_id=first_present(user_id, ANONYMOUS),
            target_id=first_present(calendar_id, UNKNOWN_TARGET),
            details=details,
            log_allowed=log_allowed,
            log_denied=log_denied,
        )
        result = await self._evaluator.evaluate(user_id, calendar_id, requirement, context)
        if not result.allowed:
            raise PermissionDenied(result.reason)

        req.context.permissions = result.permissions
        if is_present(calendar_id):
            req.context.calendar_id = calendar_id
        return result


def require_permission(requirement: RequirementLike, **options: Any):
    """Falcon before-hook enforcing ``requirement`` via ``resource.permission_guard``."""

    async def hook(req: falcon.asgi.Request, resp, resource, params) -> None:
        await resource.permission_guard.enforce(req, params, requirement, **options)

    return hook
