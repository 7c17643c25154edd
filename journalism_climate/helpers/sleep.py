"""Async delay helper."""

from __future__ import annotations

import asyncio
import math
import numbers


async def sleep(ms: float) -> None:
    """Suspend the current coroutine for at least ``ms`` milliseconds.

    Negative durations are treated as zero and resolve on the next loop iteration.
    Cancel the awaiting task to abandon the wait early.
    """
    if isinstance(ms, bool) or not isinstance(ms, numbers.Real):
        raise TypeError(f"ms must be a number, got {type(ms).__name__}")
    if not math.isfinite(ms):
        raise ValueError(f"ms must be finite, got {ms}")
    await asyncio.sleep(max(float(ms), 0.0) / 1000.0)
