"""Pool lifespan middleware - ties the PostgreSQL pool to the ASGI lifespan."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Opens the connection pool on startup and closes it on shutdown.

    Only installed for the ``postgres`` storage backend.
    """

    def __init__(self, pool: AsyncConnectionPool, wait: bool = False) -> None:
        self._pool = pool
        self._wait = wait

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open(wait=self._wait)
        logger.info("Connection pool opened (min_size=%s)", self._pool.min_size)

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Connection pool closed")
