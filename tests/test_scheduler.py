"""Tests for the chunked BatchScheduler."""

from __future__ import annotations

import asyncio

import pytest

from docs_prebuild.translation.scheduler import BatchScheduler


def test_rejects_zero_workers() -> None:
    with pytest.raises(ValueError):
        BatchScheduler(0)


def test_chunk_is_contiguous() -> None:
    scheduler: BatchScheduler[int] = BatchScheduler(2)
    jobs = ["a", "b", "c", "d", "e"]

    assert scheduler.chunk(jobs) == [["a", "b"], ["c", "d"], ["e"]]


@pytest.mark.asyncio
async def test_next_chunk_waits_for_slowest_job() -> None:
    """With two workers the third job only starts once the first two finish."""
    events: list[str] = []

    def job(name: str, delay: float):
        async def run() -> str:
            events.append(f"start {name}")
            await asyncio.sleep(delay)
            events.append(f"end {name}")
            return name

        return run

    scheduler: BatchScheduler[str] = BatchScheduler(2)
    results = await scheduler.run([job("A", 0.05), job("B", 0.0), job("C", 0.0)])

    assert results == ["A", "B", "C"]
    assert events.index("start C") > events.index("end A")
    assert events.index("start C") > events.index("end B")
    assert events.index("end B") < events.index("end A")


@pytest.mark.asyncio
async def test_failure_does_not_cancel_siblings() -> None:
    async def ok() -> str:
        await asyncio.sleep(0.01)
        return "ok"

    async def boom() -> str:
        raise RuntimeError("boom")

    scheduler: BatchScheduler[str] = BatchScheduler(3)
    results = await scheduler.run([boom, ok, ok, ok])

    assert isinstance(results[0], RuntimeError)
    assert results[1:] == ["ok", "ok", "ok"]


@pytest.mark.asyncio
async def test_sequential_mode_runs_in_order_and_isolates_failures() -> None:
    order: list[int] = []

    def job(n: int):
        async def run() -> int:
            order.append(n)
            if n == 2:
                raise ValueError("bad job")
            return n

        return run

    scheduler: BatchScheduler[int] = BatchScheduler(1)
    assert scheduler.sequential

    results = await scheduler.run([job(n) for n in range(4)])

    assert order == [0, 1, 2, 3]
    assert results[:2] == [0, 1]
    assert isinstance(results[2], ValueError)
    assert results[3] == 3


@pytest.mark.asyncio
async def test_on_chunk_done_sees_every_chunk() -> None:
    def job(n: int):
        async def run() -> int:
            return n

        return run

    seen: list[list[int]] = []
    scheduler: BatchScheduler[int] = BatchScheduler(2)
    await scheduler.run([job(n) for n in range(5)], on_chunk_done=seen.append)

    assert seen == [[0, 1], [2, 3], [4]]


@pytest.mark.asyncio
async def test_jobs_are_started_lazily() -> None:
    started: list[int] = []
    first_done = asyncio.Event()

    def job(n: int):
        async def run() -> int:
            started.append(n)
            if n == 0:
                first_done.set()
            else:
                assert first_done.is_set()
            return n

        return run

    scheduler: BatchScheduler[int] = BatchScheduler(1)
    await scheduler.run([job(0), job(1)])

    assert started == [0, 1]


@pytest.mark.asyncio
async def test_empty_job_list() -> None:
    assert await BatchScheduler(3).run([]) == []
