import asyncio
from datetime import timedelta

import pytest

from motionflow.config import AnimationConfig
from motionflow.driver import delay, drive, next_frame_delay, now
from motionflow.motion import Motion
from motionflow.spring import Spring
from motionflow.tween import Tween


@pytest.mark.parametrize(
    "dt, expected_ms",
    [(0.001, 8), (0.012, 16), (0.05, 32)],
)
def test_next_frame_delay(dt, expected_ms):
    assert next_frame_delay(dt) == timedelta(milliseconds=expected_ms)


def test_next_frame_delay_never_shrinks_as_frames_slow():
    delays = [next_frame_delay(dt) for dt in (0.0, 0.004, 0.009, 0.015, 0.02, 0.1)]
    assert delays == sorted(delays)


def test_now_is_monotonic():
    first = now()
    second = now()
    assert second >= first


@pytest.mark.asyncio
async def test_delay_waits_at_least_duration():
    start = now()
    await delay(timedelta(milliseconds=20))
    assert now() - start >= 0.019


@pytest.mark.asyncio
async def test_delay_accepts_seconds():
    start = now()
    await delay(0.01)
    assert now() - start >= 0.009


@pytest.mark.asyncio
async def test_delay_rejects_negative():
    with pytest.raises(ValueError):
        await delay(-1.0)


@pytest.mark.asyncio
async def test_drive_runs_tween_to_target():
    motion = Motion(0.0)
    motion.animate_to(10.0, AnimationConfig(mode=Tween(duration=timedelta(milliseconds=60))))
    final = await asyncio.wait_for(drive(motion), timeout=5.0)
    assert final == 10.0
    assert not motion.is_running()


@pytest.mark.asyncio
async def test_drive_runs_spring_to_target():
    motion = Motion(0.0)
    motion.animate_to(1.0, AnimationConfig(mode=Spring(stiffness=400.0, damping=40.0)))
    final = await asyncio.wait_for(drive(motion), timeout=10.0)
    assert final == 1.0
    assert not motion.is_running()


@pytest.mark.asyncio
async def test_drive_idle_motion_returns_value():
    motion = Motion(3.0)
    assert await drive(motion) == 3.0


@pytest.mark.asyncio
async def test_drive_rejects_non_positive_max_dt():
    with pytest.raises(ValueError):
        await drive(Motion(0.0), max_dt=0.0)