"""Calendar sharing resources."""

import falcon
import falcon.asgi

from calshare.application.use_cases.sharing.create_share_link import CreateShareLinkUseCase
from calshare.application.use_cases.sharing.export_calendar import ExportCalendarUseCase
from calshare.application.use_cases.sharing.preview import sharing_options
from calshare.domain.value_objects import VIEW_PERMISSIONS, CalendarPermission
from calshare.interfaces.api.hooks import PermissionGuard, require_permission
from calshare.interfaces.api.middleware.auth import require_auth
from calshare.interfaces.api.resources.common import read_json

EXPORT_REQUIREMENT = {"anyOf": sorted(VIEW_PERMISSIONS)}


class ShareLinkResource:
    """POST /v1/sharing/link - issue a share token for a managed calendar."""

    def __init__(
        self, create_share_link: CreateShareLinkUseCase, permission_guard: PermissionGuard
    ) -> None:
        self._create = create_share_link
        self.permission_guard = permission_guard

    @falcon.before(require_auth)
    @falcon.before(require_permission(CalendarPermission.MANAGE))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        payload = await read_json(req)
        payload["calendar_id"] = req.context.calendar_id
        share = await self._create.execute(req.context.user, payload)
        resp.media = {
            "share_id": share.id,
            "link": f"{req.prefix}/v1/calendars/{share.calendar_id}/embed?token={share.token}",
            "permissions": list(share.permissions),
        }
        resp.status = falcon.HTTP_201


class ExportResource:
    """POST /v1/sharing/export - prepare a calendar export."""

    def __init__(
        self, export_calendar: ExportCalendarUseCase, permission_guard: PermissionGuard
    ) -> None:
        self._export = export_calendar
        self.permission_guard = permission_guard

    @falcon.before(require_auth)
    @falcon.before(require_permission(EXPORT_REQUIREMENT))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        payload = await read_json(req)
        export = await self._export.execute(
            req.context.user, req.context.calendar_id, payload.get("format")
        )
        resp.media = {
            "calendar_id": export.calendar_id,
            "format": export.format,
            "status": "ready",
            "download_url": (
                f"{req.prefix}/export/{export.calendar_id}.{export.format.lower()}"
            ),
        }
        resp.status = falcon.HTTP_201


class SharingPreviewResource:
    """GET /v1/sharing/preview?calendar_id= - sharing channels for a calendar."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        calendar_id = req.get_param("calendar_id") or req.get_param("calendarId")
        resp.media = {"calendar_id": calendar_id, "options": sharing_options(calendar_id)}
        resp.status = falcon.HTTP_200
