"""Calendar permission grant resources."""

import falcon
import falcon.asgi

from calshare.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from calshare.application.use_cases.permission.list_permissions import ListPermissionsUseCase
from calshare.domain.value_objects import CalendarPermission
from calshare.interfaces.api.hooks import PermissionGuard, require_permission
from calshare.interfaces.api.middleware.auth import require_auth
from calshare.interfaces.api.resources.common import read_json
from calshare.interfaces.api.resources.serializers import grant_to_dict


class PermissionsResource:
    """GET/POST /v1/permissions - list grants, grant permissions on a calendar."""

    def __init__(
        self,
        list_permissions: ListPermissionsUseCase,
        grant_permission: GrantPermissionUseCase,
        permission_guard: PermissionGuard,
    ) -> None:
        self._list = list_permissions
        self._grant = grant_permission
        self.permission_guard = permission_guard

    @falcon.before(require_auth)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        grants = await self._list.execute(
            req.context.user,
            user_id=req.get_param("user_id") or req.get_param("userId"),
            calendar_id=req.get_param("calendar_id") or req.get_param("calendarId"),
        )
        resp.media = {"entries": [grant_to_dict(g) for g in grants]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_auth)
    @falcon.before(require_permission(CalendarPermission.MANAGE))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        payload = await read_json(req)
        payload["calendar_id"] = req.context.calendar_id
        grant = await self._grant.execute(req.context.user, payload)
        resp.media = grant_to_dict(grant)
        resp.status = falcon.HTTP_201
