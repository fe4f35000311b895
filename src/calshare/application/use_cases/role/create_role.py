"""Create organization role use case."""

from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import Role, User
from calshare.domain.exceptions import NotFound, PermissionDenied
from calshare.domain.identifiers import new_id
from calshare.domain.value_objects import AuditStatus


class CreateRoleUseCase:
    """Define a role inside the actor's own organization."""

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, actor: User, payload: dict[str, Any]) -> Role:
        role = Role(
            id=payload.get("id") or new_id("role"),
            organization_id=payload.get("organization_id"),
            name=payload.get("name"),
            permissions=payload.get("permissions"),
            description=payload.get("description") or "",
        )
        async with self._uow_factory() as uow:
            if not await uow.organizations.get_by_id(role.organization_id):
                raise NotFound("Organization", role.organization_id)
            if actor.organization_id != role.organization_id:
                raise PermissionDenied("User is not a member of the organization")
            await uow.roles.create(role)

        await self._audit.record(
            action="role_create",
            actor_id=actor.id,
            target_id=role.id,
            status=AuditStatus.SUCCESS,
            details="Role created",
        )
        return role
