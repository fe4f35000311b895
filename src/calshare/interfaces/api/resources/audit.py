"""Audit log resource."""

import falcon
import falcon.asgi

from calshare.application.services.audit_service import AuditService
from calshare.interfaces.api.middleware.auth import require_auth


class AuditLogsResource:
    """GET /v1/audit/logs - audit history, oldest first."""

    def __init__(self, audit_service: AuditService) -> None:
        self._audit = audit_service

    @falcon.before(require_auth)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        entries = await self._audit.history()
        resp.media = {"entries": [e.to_dict() for e in entries]}
        resp.status = falcon.HTTP_200
