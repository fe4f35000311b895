"""Session middleware - resolves the session token to a user."""

import falcon.asgi

from calshare.domain.exceptions import AuthenticationRequired
from calshare.infrastructure.auth.session_store import SessionStore

SESSION_COOKIE = "session"


def parse_authorization_header(header: str | None) -> str | None:
    if header and header.startswith("Bearer "):
        return header[7:] or None
    return None


def parse_token(req: falcon.asgi.Request) -> str | None:
    """Bearer token first, then the ``session`` cookie."""
    token = parse_authorization_header(req.get_header("Authorization"))
    if token:
        return token
    values = req.get_cookie_values(SESSION_COOKIE)
    return values[0] if values else None


class SessionMiddleware:
    """Middleware that sets req.context.session and req.context.user.

    Both are None for anonymous requests, unknown or expired tokens, and
    sessions whose user no longer exists.
    """

    def __init__(self, session_store: SessionStore, unit_of_work_factory: type) -> None:
        self._sessions = session_store
        self._uow_factory = unit_of_work_factory

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.session = None
        req.context.user = None
        session = self._sessions.get_session(parse_token(req))
        if session is None:
            return
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(session.user_id)
        if user is None:
            return
        req.context.session = session
        req.context.user = user


async def require_auth(req: falcon.asgi.Request, resp, resource, params) -> None:
    """Falcon before-hook rejecting requests without an authenticated user."""
    if getattr(req.context, "user", None) is None:
        raise AuthenticationRequired("Authentication required")
