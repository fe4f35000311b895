"""Event API resources."""

import falcon
import falcon.asgi

from calshare.application.use_cases.event.create_event import CreateEventUseCase
from calshare.application.use_cases.event.delete_event import DeleteEventUseCase
from calshare.application.use_cases.event.get_event import GetEventUseCase
from calshare.application.use_cases.event.list_events import ListEventsUseCase
from calshare.domain.value_objects import CalendarPermission
from calshare.interfaces.api.hooks import PermissionGuard, require_permission
from calshare.interfaces.api.middleware.auth import require_auth
from calshare.interfaces.api.resources.common import read_json
from calshare.interfaces.api.resources.serializers import event_to_dict


class EventsResource:
    """GET/POST /v1/events

    POST is guarded by Add to Calendar on the body's calendar; the event is
    always created on that calendar.
    """

    def __init__(
        self,
        list_events: ListEventsUseCase,
        create_event: CreateEventUseCase,
        permission_guard: PermissionGuard,
    ) -> None:
        self._list = list_events
        self._create = create_event
        self.permission_guard = permission_guard

    @falcon.before(require_auth)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        calendar_id = req.get_param("calendar_id") or req.get_param("calendarId")
        events = await self._list.execute(req.context.user, calendar_id)
        resp.media = {"events": [event_to_dict(e) for e in events]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_auth)
    @falcon.before(require_permission(CalendarPermission.ADD))
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        payload = await read_json(req)
        payload["calendar_id"] = req.context.calendar_id
        event = await self._create.execute(req.context.user, payload)
        resp.media = event_to_dict(event)
        resp.status = falcon.HTTP_201


class EventResource:
    """GET/DELETE /v1/events/{event_id}

    DELETE takes the calendar from ``?calendar_id=`` and requires Manage
    Calendar on it.
    """

    def __init__(
        self,
        get_event: GetEventUseCase,
        delete_event: DeleteEventUseCase,
        permission_guard: PermissionGuard,
    ) -> None:
        self._get = get_event
        self._delete = delete_event
        self.permission_guard = permission_guard

    @falcon.before(require_auth)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, event_id: str
    ) -> None:
        event = await self._get.execute(req.context.user, event_id)
        resp.media = event_to_dict(event)
        resp.status = falcon.HTTP_200

    @falcon.before(require_auth)
    @falcon.before(require_permission(CalendarPermission.MANAGE))
    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, event_id: str
    ) -> None:
        await self._delete.execute(req.context.user, event_id, req.context.calendar_id)
        resp.media = {"status": "deleted"}
        resp.status = falcon.HTTP_200
