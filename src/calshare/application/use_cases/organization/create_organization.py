"""Create organization use case."""

from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import Organization, User
from calshare.domain.exceptions import Conflict
from calshare.domain.identifiers import new_id
from calshare.domain.value_objects import AuditStatus


class CreateOrganizationUseCase:
    """Create an organization."""

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, user: User, payload: dict[str, Any]) -> Organization:
        kwargs = {
            "id": payload.get("id") or new_id("org"),
            "name": payload.get("name"),
            "description": payload.get("description") or "",
        }
        if payload.get("roles") is not None:
            kwargs["roles"] = payload["roles"]
        organization = Organization(**kwargs)
        async with self._uow_factory() as uow:
            if await uow.organizations.get_by_id(organization.id):
                raise Conflict(f"Organization {organization.id} already exists")
            await uow.organizations.create(organization)

        await self._audit.record(
            action="organization_create",
            actor_id=user.id,
            target_id=organization.id,
            status=AuditStatus.SUCCESS,
            details="Organization created",
        )
        return organization
