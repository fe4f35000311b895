"""List organization roles and role assignments."""

from calshare.domain.entities import Role, RoleAssignment


class ListRolesUseCase:
    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, *, organization_id: str | None = None) -> list[Role]:
        async with self._uow_factory() as uow:
            return await uow.roles.list(organization_id=organization_id)


class ListRoleAssignmentsUseCase:
    """Assignments filtered by organization, role and user."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        *,
        organization_id: str | None = None,
        role_id: str | None = None,
        user_id: str | None = None,
    ) -> list[RoleAssignment]:
        async with self._uow_factory() as uow:
            return await uow.role_assignments.list(
                organization_id=organization_id, role_id=role_id, user_id=user_id
            )
