"""Share token repository port."""

from typing import Any, Protocol

from calshare.domain.entities import ShareToken


class ShareTokenRepository(Protocol):
    """Port for calendar share tokens.

    ``list`` filters by equality, e.g. ``list(calendar_id=..., token=...)``.
    """

    async def get_by_id(self, share_id: str) -> ShareToken | None: ...

    async def list(self, **filters: Any) -> list[ShareToken]: ...

    async def create(self, share_token: ShareToken) -> ShareToken: ...

    async def delete(self, share_id: str) -> ShareToken | None: ...
