"""Animation configuration: mode, looping, delay and completion callback."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Optional, Union

from .spring import Spring
from .tween import Tween

__all__ = [
    "AnimationMode",
    "LoopKind",
    "LoopMode",
    "AnimationConfig",
    "INFINITE_DURATION",
]

AnimationMode = Union[Tween, Spring]

# Stand-in for an unbounded running time.
INFINITE_DURATION = timedelta.max

_SPRING_ESTIMATE = timedelta(seconds=1)
_MAX_COUNT = 255


class LoopKind(enum.Enum):
    """How an animation repeats."""

    NONE = "none"
    INFINITE = "infinite"
    TIMES = "times"
    ALTERNATE = "alternate"
    ALTERNATE_TIMES = "alternate_times"


def _check_count(count: int) -> int:
    if not 0 <= count <= _MAX_COUNT:
        raise ValueError(f"loop count must be between 0 and {_MAX_COUNT}, got {count}")
    return count


@dataclass(frozen=True)
class LoopMode:
    """A loop kind together with its repeat count where it has one."""

    kind: LoopKind = LoopKind.NONE
    count: int = 0

    def __post_init__(self) -> None:
        _check_count(self.count)

    @classmethod
    def times(cls, count: int) -> LoopMode:
        """Play the animation ``count`` times."""
        return cls(LoopKind.TIMES, _check_count(count))

    @classmethod
    def alternate_times(cls, count: int) -> LoopMode:
        """Play back and forth ``count`` times."""
        return cls(LoopKind.ALTERNATE_TIMES, _check_count(count))


@dataclass(frozen=True)
class AnimationConfig:
    """Everything that shapes how one animation runs."""

    mode: AnimationMode = field(default_factory=Tween)
    loop_mode: Optional[LoopMode] = None
    delay: timedelta = field(default_factory=timedelta)
    on_complete: Optional[Callable[[], object]] = None

    def with_loop(self, loop_mode: LoopMode) -> AnimationConfig:
        """Return a copy that loops as ``loop_mode`` says."""
        return dataclasses.replace(self, loop_mode=loop_mode)

    def with_delay(self, delay: timedelta) -> AnimationConfig:
        """Return a copy that waits ``delay`` before starting."""
        return dataclasses.replace(self, delay=delay)

    def with_on_complete(self, callback: Callable[[], object]) -> AnimationConfig:
        """Return a copy that calls ``callback`` when the animation completes."""
        return dataclasses.replace(self, on_complete=callback)

    def get_duration(self) -> timedelta:
        """Total running time; springs are estimated at one second."""
        if isinstance(self.mode, Spring):
            return _SPRING_ESTIMATE
        base = self.mode.duration
        kind = self.loop_mode.kind if self.loop_mode is not None else LoopKind.NONE
        if kind in (LoopKind.INFINITE, LoopKind.ALTERNATE):
            return INFINITE_DURATION
        if kind is LoopKind.TIMES:
            return base * self.loop_mode.count  # type: ignore[union-attr]
        if kind is LoopKind.ALTERNATE_TIMES:
            return base * (self.loop_mode.count * 2)  # type: ignore[union-attr]
        return base

    def execute_completion(self) -> None:
        """Call the completion callback if one is set."""
        if self.on_complete is not None:
            self.on_complete()