"""Organization role resources."""

import falcon
import falcon.asgi

from calshare.application.use_cases.role.assign_role import AssignRoleUseCase
from calshare.application.use_cases.role.create_role import CreateRoleUseCase
from calshare.application.use_cases.role.list_roles import (
    ListRoleAssignmentsUseCase,
    ListRolesUseCase,
)
from calshare.interfaces.api.middleware.auth import require_auth
from calshare.interfaces.api.resources.common import read_json
from calshare.interfaces.api.resources.serializers import (
    role_assignment_to_dict,
    role_to_dict,
)


class RolesResource:
    """GET/POST /v1/roles"""

    def __init__(self, list_roles: ListRolesUseCase, create_role: CreateRoleUseCase) -> None:
        self._list = list_roles
        self._create = create_role

    @falcon.before(require_auth)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        roles = await self._list.execute(organization_id=req.get_param("organization_id"))
        resp.media = {"roles": [role_to_dict(r) for r in roles]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_auth)
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        role = await self._create.execute(req.context.user, await read_json(req))
        resp.media = role_to_dict(role)
        resp.status = falcon.HTTP_201


class RoleAssignmentsResource:
    """GET/POST /v1/roles/assignments"""

    def __init__(
        self, list_assignments: ListRoleAssignmentsUseCase, assign_role: AssignRoleUseCase
    ) -> None:
        self._list = list_assignments
        self._assign = assign_role

    @falcon.before(require_auth)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        assignments = await self._list.execute(
            organization_id=req.get_param("organization_id"),
            role_id=req.get_param("role_id"),
            user_id=req.get_param("user_id"),
        )
        resp.media = {"assignments": [role_assignment_to_dict(a) for a in assignments]}
        resp.status = falcon.HTTP_200

    @falcon.before(require_auth)
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        assignment = await self._assign.execute(req.context.user, await read_json(req))
        resp.media = role_assignment_to_dict(assignment)
        resp.status = falcon.HTTP_201
