"""Unit tests for retries, the circuit breaker and graceful errors."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from calshare.domain.exceptions import CalShareError
from calshare.infrastructure.resilience import (
    CircuitBreaker,
    CircuitOpenError,
    CircuitState,
    graceful_error,
    with_retries,
)


class Clock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


async def _fail():
    raise RuntimeError("boom")


async def _ok():
    return "ok"


# --- with_retries ---


@pytest.mark.asyncio
async def test_with_retries_succeeds_after_failures() -> None:
    task = AsyncMock(side_effect=[RuntimeError("a"), RuntimeError("b"), "done"])
    on_retry = MagicMock()

    with patch("calshare.infrastructure.resilience.retry.asyncio.sleep", new=AsyncMock()) as sleep:
        result = await with_retries(task, retries=2, delay_ms=10, on_retry=on_retry)

    assert result == "done"
    assert task.await_count == 3
    assert [c.args for c in task.await_args_list] == [(0,), (1,), (2,)]
    assert on_retry.call_count == 2
    assert on_retry.call_args_list[0].kwargs["attempt"] == 0
    assert str(on_retry.call_args_list[1].kwargs["error"]) == "b"
    assert [c.args[0] for c in sleep.await_args_list] == [0.01, 0.02]


@pytest.mark.asyncio
async def test_with_retries_raises_last_error_after_all_attempts() -> None:
    task = AsyncMock(side_effect=[RuntimeError("first"), RuntimeError("last")])

    with patch("calshare.infrastructure.resilience.retry.asyncio.sleep", new=AsyncMock()):
        with pytest.raises(RuntimeError, match="last"):
            await with_retries(task, retries=1)

    assert task.await_count == 2


@pytest.mark.asyncio
async def test_with_retries_zero_retries_runs_once() -> None:
    task = AsyncMock(side_effect=RuntimeError("once"))

    with pytest.raises(RuntimeError, match="once"):
        await with_retries(task, retries=0)

    assert task.await_count == 1


@pytest.mark.asyncio
async def test_with_retries_rejects_negative_retries() -> None:
    with pytest.raises(ValueError):
        await with_retries(AsyncMock(), retries=-1)


# --- CircuitBreaker ---


@pytest.mark.asyncio
async def test_breaker_single_failure_opens_and_rejects() -> None:
    """failure_threshold=1: the second call is rejected without running."""
    breaker = CircuitBreaker(failure_threshold=1, cooldown_ms=1000, now=lambda: 0)
    second = AsyncMock()

    with pytest.raises(RuntimeError):
        await breaker.execute(_fail)
    with pytest.raises(CircuitOpenError, match="Circuit breaker open"):
        await breaker.execute(second)

    second.assert_not_called()
    assert breaker.state is CircuitState.OPEN


@pytest.mark.asyncio
async def test_breaker_opens_at_threshold() -> None:
    breaker = CircuitBreaker(failure_threshold=3, now=Clock())

    for _ in range(2):
        with pytest.raises(RuntimeError):
            await breaker.execute(_fail)
        assert breaker.state is CircuitState.CLOSED
    with pytest.raises(RuntimeError):
        await breaker.execute(_fail)

    assert breaker.state is CircuitState.OPEN


@pytest.mark.asyncio
async def test_breaker_success_resets_failure_count() -> None:
    breaker = CircuitBreaker(failure_threshold=2, now=Clock())

    with pytest.raises(RuntimeError):
        await breaker.execute(_fail)
    await breaker.execute(_ok)
    with pytest.raises(RuntimeError):
        await breaker.execute(_fail)

    assert breaker.state is CircuitState.CLOSED
    assert breaker.snapshot().failure_count == 1


@pytest.mark.asyncio
async def test_breaker_half_open_trial_closes_after_successes() -> None:
    clock = Clock()
    breaker = CircuitBreaker(failure_threshold=1, success_threshold=2, cooldown_ms=1000, now=clock)
    with pytest.raises(RuntimeError):
        await breaker.execute(_fail)

    clock.now = 999
    with pytest.raises(CircuitOpenError):
        await breaker.execute(_ok)

    clock.now = 1000
    assert await breaker.execute(_ok) == "ok"
    assert breaker.state is CircuitState.HALF_OPEN
    await breaker.execute(_ok)
    assert breaker.state is CircuitState.CLOSED
    assert breaker.snapshot().opened_at is None


@pytest.mark.asyncio
async def test_breaker_half_open_failure_reopens_at_threshold() -> None:
    """Probation failures share failure_threshold with the closed state."""
    clock = Clock()
    breaker = CircuitBreaker(failure_threshold=2, cooldown_ms=100, now=clock)
    for _ in range(2):
        with pytest.raises(RuntimeError):
            await breaker.execute(_fail)
    assert breaker.state is CircuitState.OPEN

    clock.now = 100
    with pytest.raises(RuntimeError):
        await breaker.execute(_fail)
    assert breaker.state is CircuitState.HALF_OPEN

    with pytest.raises(RuntimeError):
        await breaker.execute(_fail)
    assert breaker.state is CircuitState.OPEN
    assert breaker.snapshot().opened_at == 100


def test_breaker_rejects_invalid_thresholds() -> None:
    with pytest.raises(ValueError):
        CircuitBreaker(failure_threshold=0)


def test_circuit_open_error_is_calshare_error() -> None:
    error = CircuitOpenError()
    assert isinstance(error, CalShareError)
    assert error.code == "CIRCUIT_OPEN"


def test_snapshot_to_dict() -> None:
    breaker = CircuitBreaker(now=Clock())
    assert breaker.snapshot().to_dict() == {
        "state": "closed",
        "failure_count": 0,
        "success_count": 0,
        "opened_at": None,
    }


# --- graceful_error ---


def test_graceful_error_shape() -> None:
    assert graceful_error(RuntimeError("db down"), "Storage unavailable") == {
        "message": "Storage unavailable",
        "reason": "db down",
        "status": "degraded",
    }


def test_graceful_error_defaults() -> None:
    body = graceful_error(RuntimeError())
    assert body["message"] == "Temporarily unavailable"
    assert body["reason"] == "unknown"


def test_graceful_error_keeps_explicit_empty_message() -> None:
    assert graceful_error(RuntimeError("db down"), "")["message"] == ""
    assert graceful_error(RuntimeError("db down"), None)["message"] == "Temporarily unavailable"
