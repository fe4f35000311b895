"""Calendar API resources."""

import falcon
import falcon.asgi

from calshare.application.use_cases.calendar.create_calendar import CreateCalendarUseCase
from calshare.application.use_cases.calendar.delete_calendar import DeleteCalendarUseCase
from calshare.application.use_cases.calendar.embed_calendar import EmbedCalendarUseCase
from calshare.application.use_cases.calendar.get_calendar import GetCalendarUseCase
from calshare.application.use_cases.calendar.list_calendars import ListCalendarsUseCase
from calshare.domain.value_objects import CalendarPermission
from calshare.interfaces.api.hooks import PermissionGuard, require_permission
from calshare.interfaces.api.middleware.auth import require_auth
from calshare.interfaces.api.resources.common import read_json
from calshare.interfaces.api.resources.serializers import calendar_to_dict, event_to_dict


class CalendarsResource:
    """GET/POST /v1/calendars - list visible calendars and create one."""

    def __init__(
        self, list_calendars: ListCalendarsUseCase, create_calendar: CreateCalendarUseCase
    ) -> None:
        self._list = list_calendars
        self._create = create_calendar

    @falcon.before(require_auth)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        calendars = await self._list.execute(
            req.context.user,
            owner_id=req.get_param("owner_id"),
            owner_type=req.get_param("owner_type"),
            shared_owner_id=req.get_param("shared_owner_id"),
        )
        resp.media = {"calendars": [calendar_to_dict(c) for c in calendars]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_auth)
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        calendar = await self._create.execute(req.context.user, await read_json(req))
        resp.media = calendar_to_dict(calendar)
        resp.status = falcon.HTTP_201


class CalendarResource:
    """GET/DELETE /v1/calendars/{calendar_id}"""

    def __init__(
        self,
        get_calendar: GetCalendarUseCase,
        delete_calendar: DeleteCalendarUseCase,
        permission_guard: PermissionGuard,
    ) -> None:
        self._get = get_calendar
        self._delete = delete_calendar
        self.permission_guard = permission_guard

    @falcon.before(require_auth)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, calendar_id: str
    ) -> None:
        calendar = await self._get.execute(req.context.user, calendar_id)
        resp.media = calendar_to_dict(calendar)
        resp.status = falcon.HTTP_200

    @falcon.before(require_auth)
    @falcon.before(require_permission(CalendarPermission.MANAGE))
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, calendar_id: str
    ) -> None:
        await self._delete.execute(req.context.user, calendar_id)
        resp.media = {"status": "deleted"}
        resp.status = falcon.HTTP_200


def _times_only(event: dict) -> dict:
    return {key: event[key] for key in ("id", "starts_at", "ends_at")}


class CalendarEmbedResource:
    """GET /v1/calendars/{calendar_id}/embed?token= - embeddable read-only view.

    Share tokens without View Calendar see event times only.
    """

    def __init__(self, embed_calendar: EmbedCalendarUseCase) -> None:
        self._embed = embed_calendar

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, calendar_id: str
    ) -> None:
        view = await self._embed.execute(
            getattr(req.context, "user", None), calendar_id, req.get_param("token")
        )
        events = [event_to_dict(e) for e in view.events]
        permissions = view.share_permissions
        if permissions is not None and CalendarPermission.VIEW not in permissions:
            events = [_times_only(e) for e in events]
        resp.media = {
            "calendar": {
                "id": view.calendar.id,
                "name": view.calendar.name,
                "is_public": view.calendar.is_public,
            },
            "events": events,
            "permissions": permissions,
            "embed": {
                "theme": "default",
                "refresh_seconds": 60,
                "source": f"/v1/calendars/{view.calendar.id}",
            },
        }
        resp.status = falcon.HTTP_200
