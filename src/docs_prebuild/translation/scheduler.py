"""
Chunked job scheduler.

Jobs run in contiguous chunks of ``max_workers``. Each chunk is awaited as a
whole before the next one starts, and a failing job never cancels the others.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Job = Callable[[], Awaitable[T]]


class BatchScheduler(Generic[T]):
    """Runs coroutine factories with a chunk barrier."""

    def __init__(self, max_workers: int):
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")
        self.max_workers = max_workers

    @property
    def sequential(self) -> bool:
        return self.max_workers == 1

    def chunk(self, jobs: Sequence[Job[T]]) -> list[Sequence[Job[T]]]:
        """Split ``jobs`` into contiguous chunks of at most ``max_workers``."""
        return [jobs[i : i + self.max_workers] for i in range(0, len(jobs), self.max_workers)]

    async def run(
        self,
        jobs: Sequence[Job[T]],
        on_chunk_done: Callable[[list[T | BaseException]], None] | None = None,
    ) -> list[T | BaseException]:
        """
        Run all jobs.

        Args:
            jobs: Zero-argument coroutine factories. A job is only called when
                its chunk starts.
            on_chunk_done: Optional callback receiving each chunk's outcomes
                once the whole chunk has resolved.

        Returns:
            One entry per job, in input order: its result, or the exception it
            raised.
        """
        outcomes: list[T | BaseException] = []

        if self.sequential:
            for job in jobs:
                try:
                    outcome: T | BaseException = await job()
                except Exception as e:
                    logger.debug("Job failed: %r", e)
                    outcome = e
                outcomes.append(outcome)
                if on_chunk_done is not None:
                    on_chunk_done([outcome])
            return outcomes

        for index, chunk in enumerate(self.chunk(jobs), start=1):
            logger.debug("Starting chunk %d with %d job(s)", index, len(chunk))
            chunk_outcomes = list(
                await asyncio.gather(*(job() for job in chunk), return_exceptions=True)
            )
            outcomes.extend(chunk_outcomes)
            if on_chunk_done is not None:
                on_chunk_done(chunk_outcomes)

        return outcomes
