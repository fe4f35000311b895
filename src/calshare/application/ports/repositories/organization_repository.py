"""Organization repository port."""

from typing import Any, Protocol

from calshare.domain.entities import Organization


class OrganizationRepository(Protocol):
    """Port for organization persistence."""

    async def get_by_id(self, organization_id: str) -> Organization | None: ...

    async def list(self, **filters: Any) -> list[Organization]: ...

    async def create(self, organization: Organization) -> Organization: ...

    async def delete(self, organization_id: str) -> Organization | None: ...
