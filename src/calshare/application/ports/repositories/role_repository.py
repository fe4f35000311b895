"""Role and role assignment repository ports."""

from typing import Any, Protocol

from calshare.domain.entities import Role, RoleAssignment


class RoleRepository(Protocol):
    """Port for organization roles."""

    async def get_by_id(self, role_id: str) -> Role | None: ...

    async def list(self, **filters: Any) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...


class RoleAssignmentRepository(Protocol):
    """Port for role assignments, filterable by organization, role and user."""

    async def get_by_id(self, assignment_id: str) -> RoleAssignment | None: ...

    async def list(self, **filters: Any) -> list[RoleAssignment]: ...

    async def create(self, assignment: RoleAssignment) -> RoleAssignment: ...
