"""Organization API resources."""

import falcon
import falcon.asgi

from calshare.application.use_cases.organization.create_organization import (
    CreateOrganizationUseCase,
)
from calshare.application.use_cases.organization.get_organization import (
    GetOrganizationUseCase,
)
from calshare.interfaces.api.middleware.auth import require_auth
from calshare.interfaces.api.resources.common import read_json
from calshare.interfaces.api.resources.serializers import organization_to_dict


class OrganizationsResource:
    """POST /v1/organizations"""

    def __init__(self, create_organization: CreateOrganizationUseCase) -> None:
        self._create = create_organization

    @falcon.before(require_auth)
    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        organization = await self._create.execute(req.context.user, await read_json(req))
        resp.media = organization_to_dict(organization)
        resp.status = falcon.HTTP_201


class OrganizationResource:
    """GET /v1/organizations/{org_id}"""

    def __init__(self, get_organization: GetOrganizationUseCase) -> None:
        self._get = get_organization

    @falcon.before(require_auth)
    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, org_id: str
    ) -> None:
        organization = await self._get.execute(org_id)
        resp.media = organization_to_dict(organization)
        resp.status = falcon.HTTP_200
