"""Clock helpers and an asyncio loop that drives a :class:`Motion` in real time."""

from __future__ import annotations

import asyncio
import time
from datetime import timedelta
from typing import TypeVar, Union

from .motion import Motion

__all__ = [
    "IDLE_POLL_RATE",
    "MAX_FRAME_DT",
    "now",
    "delay",
    "next_frame_delay",
    "drive",
]

T = TypeVar("T")

IDLE_POLL_RATE = timedelta(milliseconds=100)
MAX_FRAME_DT = 0.1


def now() -> float:
    """A monotonic timestamp in seconds."""
    return time.perf_counter()


async def delay(duration: Union[timedelta, float]) -> None:
    """Sleep for ``duration`` (a timedelta or seconds)."""
    seconds = (
        duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    )
    if seconds < 0:
        raise ValueError("delay must not be negative")
    await asyncio.sleep(seconds)


def next_frame_delay(dt: float) -> timedelta:
    """Pick the wait before the next frame from the last frame's length."""
    if dt < 0.008:
        return timedelta(milliseconds=8)
    if dt < 0.016:
        return timedelta(milliseconds=16)
    return timedelta(milliseconds=32)


async def drive(motion: Motion[T], max_dt: float = MAX_FRAME_DT) -> T:
    """Update ``motion`` each frame until it stops; return its final value.

    Each frame's delta is capped at ``max_dt`` seconds.
    """
    if max_dt <= 0:
        raise ValueError("max_dt must be positive")
    last_frame = now()
    while motion.is_running():
        current = now()
        dt = min(current - last_frame, max_dt)
        last_frame = current
        motion.update(dt)
        await delay(next_frame_delay(dt))
    return motion.value()