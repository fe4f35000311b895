"""Fault tolerance primitives."""

from calshare.infrastructure.resilience.circuit_breaker import (
    CircuitBreaker,
    CircuitOpenError,
    CircuitSnapshot,
    CircuitState,
)
from calshare.infrastructure.resilience.graceful import graceful_error
from calshare.infrastructure.resilience.retry import with_retries

__all__ = [
    "CircuitBreaker",
    "CircuitOpenError",
    "CircuitSnapshot",
    "CircuitState",
    "graceful_error",
    "with_retries",
]
