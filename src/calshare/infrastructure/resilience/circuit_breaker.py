"""Circuit breaker for calls to a failing dependency.

States:
    closed     calls pass; failures are counted, reaching the threshold opens
    open       calls are rejected until ``cooldown_ms`` has elapsed
    half-open  probing; enough successes close, failures count toward reopening

State changes happen in synchronous sections between awaits, so a breaker
is safe to share across coroutines on one event loop.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeVar

from calshare.domain.exceptions import CalShareError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CircuitState(StrEnum):
    """Circuit breaker states."""

    CLOSED = "closed"
    OPEN = "open"
    HALF_OPEN = "half-open"


class CircuitOpenError(CalShareError):
    """Raised when the breaker rejects a call without running it."""

    code = "CIRCUIT_OPEN"

    def __init__(self, message: str = "Circuit breaker open") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class CircuitSnapshot:
    """Point-in-time view of breaker counters."""

    state: CircuitState
    failure_count: int
    success_count: int
    opened_at: float | None

    def to_dict(self) -> dict:
        return {
            "state": str(self.state),
            "failure_count": self.failure_count,
            "success_count": self.success_count,
            "opened_at": self.opened_at,
        }


def _wall_clock_ms() -> float:
    return time.time() * 1000


class CircuitBreaker:
    """Three-state circuit breaker. ``now`` returns milliseconds."""

    def __init__(
        self,
        failure_threshold: int = 3,
        success_threshold: int = 2,
        cooldown_ms: float = 1000,
        now: Callable[[], float] | None = None,
        name: str = "default",
    ) -> None:
        if failure_threshold < 1 or success_threshold < 1:
            raise ValueError("thresholds must be at least 1")
        self._failure_threshold = failure_threshold
        self._success_threshold = success_threshold
        self._cooldown_ms = cooldown_ms
        self._now = now or _wall_clock_ms
        self._name = name
        self._state = CircuitState.CLOSED
        self._failure_count = 0
        self._success_count = 0
        self._opened_at: float | None = None

    @property
    def state(self) -> CircuitState:
        return self._state

    def snapshot(self) -> CircuitSnapshot:
        return CircuitSnapshot(
            state=self._state,
            failure_count=self._failure_count,
            success_count=self._success_count,
            opened_at=self._opened_at,
        )

    def _can_attempt(self) -> bool:
        if self._state is not CircuitState.OPEN:
            return True
        if self._opened_at is None:
            return False
        return self._now() - self._opened_at >= self._cooldown_ms

    def _record_success(self) -> None:
        if self._state is CircuitState.HALF_OPEN:
            self._success_count += 1
            if self._success_count >= self._success_threshold:
                self._state = CircuitState.CLOSED
                self._failure_count = 0
                self._success_count = 0
                self._opened_at = None
                logger.info("Circuit %s closed", self._name)
            return
        self._failure_count = 0

    def _record_failure(self) -> None:
        self._failure_count += 1
        if self._failure_count >= self._failure_threshold:
            self._state = CircuitState.OPEN
            self._opened_at = self._now()
            self._success_count = 0
            logger.warning(
                "Circuit %s opened after %d failures", self._name, self._failure_count
            )

    async def execute(self, task: Callable[[], Awaitable[T]]) -> T:
        """Run task under breaker protection. Raises CircuitOpenError when open."""
        if not self._can_attempt():
            raise CircuitOpenError()

        if self._state is CircuitState.OPEN:
            self._state = CircuitState.HALF_OPEN
            self._failure_count = 0
            self._success_count = 0
            logger.info("Circuit %s half-open, probing", self._name)

        try:
            result = await task()
        except Exception:
            self._record_failure()
            raise
        self._record_success()
        return result
