"""
Retry policy with exponential backoff.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]
# Called as (retry_number, delay_seconds, error) before each pause
RetryCallback = Callable[[int, float, Exception], None]


@dataclass(frozen=True)
class RetryPolicy:
    """
    How often and how long to wait before trying a failed operation again.

    ``max_retries`` counts retries after the first attempt, so an operation is
    tried at most ``max_retries + 1`` times.
    """

    max_retries: int = 3
    base_delay: float = 2.0
    backoff: float = 2.0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {self.max_retries}")
        if self.base_delay < 0:
            raise ValueError(f"base_delay must be >= 0, got {self.base_delay}")
        if self.backoff < 1:
            raise ValueError(f"backoff must be >= 1, got {self.backoff}")

    @property
    def max_attempts(self) -> int:
        return self.max_retries + 1

    def delay_for_attempt(self, attempt: int) -> float:
        """Seconds to wait between attempt ``attempt`` (1-based) and the next one."""
        if attempt < 1:
            raise ValueError(f"attempt is 1-based, got {attempt}")
        return self.base_delay * self.backoff ** (attempt - 1)


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
    *,
    sleep: SleepFunc = asyncio.sleep,
    on_retry: RetryCallback | None = None,
) -> T:
    """
    Await ``operation`` until it succeeds or the policy is exhausted.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt.
        policy: Retry policy.
        sleep: Awaitable sleep, injectable for tests.
        on_retry: Optional callback invoked before each pause.

    Returns:
        The first successful result.

    Raises:
        Exception: The error of the final attempt once retries are exhausted.
    """
    attempt = 1
    while True:
        try:
            return await operation()
        except Exception as e:
            if attempt >= policy.max_attempts:
                logger.debug("Giving up after %d attempt(s): %s", attempt, e)
                raise

            delay = policy.delay_for_attempt(attempt)
            if on_retry is not None:
                on_retry(attempt, delay, e)
            await sleep(delay)
            attempt += 1
