from __future__ import annotations

import asyncio
import time

import pytest

from portfolio.scheduler import AsyncioScheduler


def test_repeating_call_fires_until_cancelled():
    ticks: list[int] = []

    async def go():
        sched = AsyncioScheduler()
        handle = None

        def on_tick() -> None:
            ticks.append(len(ticks) + 1)
            if len(ticks) == 3:
                handle.cancel()

        handle = sched.every(0.001, on_tick)
        await asyncio.sleep(0.05)
        return handle

    handle = asyncio.run(go())

    assert ticks == [1, 2, 3]
    assert handle.cancelled


def test_cancel_before_first_tick_runs_nothing():
    ticks: list[int] = []

    async def go():
        handle = AsyncioScheduler().every(0.001, lambda: ticks.append(1))
        handle.cancel()
        handle.cancel()
        await asyncio.sleep(0.01)

    asyncio.run(go())

    assert ticks == []


def test_failing_callback_keeps_schedule():
    ticks: list[int] = []

    async def go():
        handle = None

        def on_tick() -> None:
            ticks.append(1)
            if len(ticks) >= 2:
                handle.cancel()
            raise RuntimeError("boom")

        handle = AsyncioScheduler().every(0.001, on_tick)
        await asyncio.sleep(0.05)

    asyncio.run(go())

    assert len(ticks) == 2


def test_interval_must_be_positive():
    async def go():
        AsyncioScheduler().every(0, lambda: None)

    with pytest.raises(ValueError):
        asyncio.run(go())


def test_stalled_loop_does_not_replay_missed_ticks():
    stamps: list[float] = []

    async def go():
        loop = asyncio.get_running_loop()
        handle = AsyncioScheduler().every(0.05, lambda: stamps.append(loop.time()))
        time.sleep(0.5)  # block the loop across ~10 deadlines
        await asyncio.sleep(0.06)
        handle.cancel()

    asyncio.run(go())

    assert 1 <= len(stamps) <= 3
    gaps = [b - a for a, b in zip(stamps, stamps[1:])]
    assert all(g >= 0.04 for g in gaps)
