"""Get organization use case."""

from calshare.domain.entities import Organization
from calshare.domain.exceptions import NotFound


class GetOrganizationUseCase:
    """Fetch an organization by id."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, organization_id: str) -> Organization:
        async with self._uow_factory() as uow:
            organization = await uow.organizations.get_by_id(organization_id)
        if not organization:
            raise NotFound("Organization", organization_id)
        return organization
