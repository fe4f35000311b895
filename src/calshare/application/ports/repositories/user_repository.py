"""User repository port."""

from typing import Any, Protocol

from calshare.domain.entities import User


class UserRepository(Protocol):
    """Port for user persistence."""

    async def get_by_id(self, user_id: str) -> User | None: ...

    async def list(self, **filters: Any) -> list[User]: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> User: ...

    async def delete(self, user_id: str) -> User | None: ...
