"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

POOL_NAME = "calshare"


def create_pool(
    conninfo: str, min_size: int = 1, max_size: int = 10, timeout: float = 5.0
) -> AsyncConnectionPool:
    """Create a closed pool; PoolLifespanMiddleware opens it at ASGI startup.

    Connections are checked before being handed out, so a database restart
    surfaces as a fresh connection rather than a broken one.
    """
    return AsyncConnectionPool(
        conninfo=conninfo,
        min_size=min_size,
        max_size=max_size,
        timeout=timeout,
        name=POOL_NAME,
        check=AsyncConnectionPool.check_connection,
        open=False,
    )
