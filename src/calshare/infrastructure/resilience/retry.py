"""Retry with exponential backoff."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_retries(
    task: Callable[[int], Awaitable[T]],
    *,
    retries: int = 2,
    delay_ms: float = 50,
    backoff_factor: float = 2,
    on_retry: Callable[..., None] | None = None,
) -> T:
    """Run ``task(attempt)`` up to ``retries + 1`` times.

    Between attempts waits ``delay_ms * backoff_factor ** attempt`` and calls
    ``on_retry(attempt=..., error=...)`` first. The last error is re-raised
    unchanged once all attempts fail.
    """
    if retries < 0:
        raise ValueError("retries must be non-negative")

    attempt = 0
    while True:
        try:
            return await task(attempt)
        except Exception as error:
            if attempt >= retries:
                raise
            logger.warning("Attempt %d failed, retrying: %s", attempt + 1, error)
            if on_retry is not None:
                on_retry(attempt=attempt, error=error)
            await asyncio.sleep(delay_ms * backoff_factor**attempt / 1000)
        attempt += 1
