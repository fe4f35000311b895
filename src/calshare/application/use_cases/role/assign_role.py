"""Assign organization role use case."""

from typing import Any

from calshare.application.services.audit_service import AuditService
from calshare.domain.entities import RoleAssignment, User
from calshare.domain.exceptions import FieldError, NotFound, PermissionDenied, ValidationError
from calshare.domain.identifiers import new_id
from calshare.domain.value_objects import AuditStatus


class AssignRoleUseCase:
    """Give a user one of the organization's roles.

    ``organization_id`` defaults to the role's organization and must match
    it when given. Only members of that organization may assign its roles.
    """

    def __init__(self, unit_of_work_factory: type, audit_service: AuditService) -> None:
        self._uow_factory = unit_of_work_factory
        self._audit = audit_service

    async def execute(self, actor: User, payload: dict[str, Any]) -> RoleAssignment:
        role_id = payload.get("role_id")
        user_id = payload.get("user_id")
        async with self._uow_factory() as uow:
            role = await uow.roles.get_by_id(role_id) if role_id else None
            if role is None:
                raise NotFound("Role", role_id)
            organization_id = payload.get("organization_id") or role.organization_id
            if organization_id != role.organization_id:
                raise ValidationError(
                    "Validation failed",
                    [FieldError("organization_id", "organization_id must match the role")],
                )
            if actor.organization_id != organization_id:
                raise PermissionDenied("User is not a member of the organization")
            if not user_id or not await uow.users.get_by_id(user_id):
                raise NotFound("User", user_id)
            assignment = RoleAssignment(
                id=payload.get("id") or new_id("assign"),
                organization_id=organization_id,
                role_id=role.id,
                user_id=user_id,
                assigned_by=actor.id,
            )
            await uow.role_assignments.create(assignment)

        await self._audit.record(
            action="role_assign",
            actor_id=actor.id,
            target_id=assignment.id,
            status=AuditStatus.SUCCESS,
            details=f"Role {role.id} assigned to {user_id}",
        )
        return assignment
