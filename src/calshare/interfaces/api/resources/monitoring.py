"""Monitoring endpoints - health, readiness, metrics and admin totals.

Storage reads made here go through ``StorageCheck``: retried with backoff,
inside a circuit breaker. While storage is failing the endpoints answer
``503`` with a degraded body instead of raising.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Any, TypeVar

import falcon
import falcon.asgi

from calshare.infrastructure.resilience import CircuitBreaker, graceful_error, with_retries
from calshare.interfaces.api.middleware.auth import require_auth

logger = logging.getLogger(__name__)

T = TypeVar("T")

HEALTH_CHECK_ID = "__health__"


class StorageCheck:
    """Runs storage reads through with_retries inside a circuit breaker."""

    def __init__(
        self,
        unit_of_work_factory: Callable[[], Any],
        breaker: CircuitBreaker,
        retries: int = 2,
        delay_ms: float = 50,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._breaker = breaker
        self._retries = retries
        self._delay_ms = delay_ms

    @property
    def breaker(self) -> CircuitBreaker:
        return self._breaker

    async def run(self, read: Callable[[Any], Awaitable[T]]) -> T:
        """Open a unit of work and pass it to ``read``."""

        async def attempt(_: int) -> T:
            async with self._uow_factory() as uow:
                return await read(uow)

        return await self._breaker.execute(
            lambda: with_retries(attempt, retries=self._retries, delay_ms=self._delay_ms)
        )

    async def ping(self) -> None:
        async def read(uow) -> None:
            await uow.users.get_by_id(HEALTH_CHECK_ID)

        await self.run(read)


def _degraded(resp: falcon.asgi.Response, error: Exception, message: str) -> None:
    logger.warning("%s: %s", message, error)
    resp.status = falcon.HTTP_503
    resp.media = graceful_error(error, message)


class HealthResource:
    """GET /v1/health (liveness) and /v1/health/ready (storage readiness)."""

    def __init__(self, storage_check: StorageCheck, storage_mode: str) -> None:
        self._check = storage_check
        self._mode = storage_mode

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = {"status": "ok", "mode": self._mode}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            await self._check.ping()
        except Exception as exc:
            _degraded(resp, exc, "Storage unavailable")
            return
        resp.media = {
            "status": "ready",
            "mode": self._mode,
            "circuit": self._check.breaker.snapshot().to_dict(),
        }
        resp.status = falcon.HTTP_200


class MetricsResource:
    """GET /v1/metrics - record counts and uptime."""

    def __init__(self, storage_check: StorageCheck, started_at: float | None = None) -> None:
        self._check = storage_check
        self._started_at = started_at if started_at is not None else time.monotonic()

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async def read(uow) -> dict[str, int]:
            return {
                "users": len(await uow.users.list()),
                "events": len(await uow.events.list()),
            }

        try:
            counts = await self._check.run(read)
        except Exception as exc:
            _degraded(resp, exc, "Metrics unavailable")
            return
        resp.media = {
            **counts,
            "uptime_seconds": round(time.monotonic() - self._started_at),
            "circuit": self._check.breaker.snapshot().to_dict(),
        }
        resp.status = falcon.HTTP_200


class AdminDashboardResource:
    """GET /v1/admin/dashboard - totals per entity."""

    def __init__(self, storage_check: StorageCheck) -> None:
        self._check = storage_check

    @falcon.before(require_auth)
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        async def read(uow) -> dict[str, int]:
            return {
                "users": len(await uow.users.list()),
                "organizations": len(await uow.organizations.list()),
                "calendars": len(await uow.calendars.list()),
                "events": len(await uow.events.list()),
            }

        try:
            totals = await self._check.run(read)
        except Exception as exc:
            _degraded(resp, exc, "Dashboard unavailable")
            return
        resp.media = {"totals": totals, "generated_at": datetime.now(UTC).isoformat()}
        resp.status = falcon.HTTP_200
