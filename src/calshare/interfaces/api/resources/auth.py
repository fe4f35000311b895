"""Authentication API resources."""

import falcon
import falcon.asgi

from calshare.application.use_cases.auth.login import LoginUseCase
from calshare.application.use_cases.auth.logout import LogoutUseCase
from calshare.application.use_cases.auth.register import AuthResult, RegisterUserUseCase
from calshare.application.use_cases.auth.update_profile import UpdateProfileUseCase
from calshare.interfaces.api.middleware.auth import SESSION_COOKIE, require_auth
from calshare.interfaces.api.resources.common import read_json


def _set_session_cookie(req: falcon.asgi.Request, resp: falcon.asgi.Response, result: AuthResult) -> None:
    resp.set_cookie(
        SESSION_COOKIE,
        result.session.token,
        max_age=int(result.session.expires_at - result.session.created_at),
        http_only=True,
        secure=req.scheme == "https",
        same_site="Lax",
        path="/",
    )


class RegisterResource:
    """POST /v1/auth/register - create account and open a session."""

    def __init__(self, register_user: RegisterUserUseCase) -> None:
        self._register = register_user

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        result = await self._register.execute(await read_json(req))
        _set_session_cookie(req, resp, result)
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_201


class LoginResource:
    """POST /v1/auth/login"""

    def __init__(self, login: LoginUseCase) -> None:
        self._login = login

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        result = await self._login.execute(await read_json(req))
        _set_session_cookie(req, resp, result)
        resp.media = result.to_dict()
        resp.status = falcon.HTTP_200


class LogoutResource:
    """POST /v1/auth/logout"""

    def __init__(self, logout: LogoutUseCase) -> None:
        self._logout = logout

    @falcon.before(require_auth)
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        await self._logout.execute(req.context.user, req.context.session)
        resp.unset_cookie(SESSION_COOKIE, path="/")
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200


class SessionResource:
    """GET /v1/auth/session - current user and session."""

    @falcon.before(require_auth)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {
            "user": req.context.user.to_public_dict(),
            "session": req.context.session.to_dict(),
        }
        resp.status = falcon.HTTP_200


class ProfileResource:
    """POST /v1/auth/profile - update the current user."""

    def __init__(self, update_profile: UpdateProfileUseCase) -> None:
        self._update_profile = update_profile

    @falcon.before(require_auth)
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user = await self._update_profile.execute(req.context.user, await read_json(req))
        resp.media = {"user": user.to_public_dict()}
        resp.status = falcon.HTTP_200
