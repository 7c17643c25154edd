"""
Unit Tests for the async delay helper
"""

import asyncio
import math
import time

import pytest

from journalism_climate.helpers import sleep


def _elapsed(ms):
    start = time.perf_counter()
    asyncio.run(sleep(ms))
    return time.perf_counter() - start


def test_sleep_waits_at_least_requested_duration():
    # 1 ms slack for clock granularity.
    assert _elapsed(100) >= 0.099


def test_sleep_returns_none():
    assert asyncio.run(sleep(1)) is None


def test_sleep_zero_resolves_immediately():
    assert _elapsed(0) < 0.5


def test_sleep_negative_treated_as_zero():
    assert _elapsed(-500) < 0.5


def test_sleep_lets_other_tasks_run():
    order = []

    async def slow():
        await sleep(50)
        order.append("slow")

    async def fast():
        await sleep(1)
        order.append("fast")

    async def main():
        await asyncio.gather(slow(), fast())

    asyncio.run(main())

    assert order == ["fast", "slow"]


def test_sleep_can_be_cancelled():
    async def main():
        task = asyncio.create_task(sleep(10_000))
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    start = time.perf_counter()
    asyncio.run(main())
    assert time.perf_counter() - start < 5


@pytest.mark.parametrize("ms", [math.nan, math.inf])
def test_sleep_rejects_non_finite(ms):
    with pytest.raises(ValueError):
        asyncio.run(sleep(ms))


def test_sleep_rejects_non_numbers():
    with pytest.raises(TypeError):
        asyncio.run(sleep("100"))
