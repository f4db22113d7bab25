"""Multi-step animation sequences and keyframe animations."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Callable, Generic, Optional, TypeVar

from .animatable import interpolate
from .config import AnimationConfig
from .easing import EasingFunction

__all__ = [
    "AnimationStep",
    "AnimationSequence",
    "Keyframe",
    "KeyframeAnimation",
]

T = TypeVar("T")


@dataclass(frozen=True)
class AnimationStep(Generic[T]):
    """One step of a sequence: a target value and how to reach it.

    ``predicted_next`` is the midpoint between the previous step's target and
    this one, or ``None`` for the first step.
    """

    target: T
    config: AnimationConfig
    predicted_next: Optional[T] = None


@dataclass(frozen=True)
class AnimationSequence(Generic[T]):
    """An ordered series of animation steps played one after another.

    The builder methods return new sequences and leave the original untouched.
    ``completion`` is the callback to run once the last step has finished.
    """

    steps: tuple[AnimationStep[T], ...] = ()
    current_step: int = 0
    completion: Optional[Callable[[], Any]] = None

    def then(self, target: T, config: AnimationConfig) -> AnimationSequence[T]:
        """Return a sequence with a step towards ``target`` appended."""
        predicted = (
            interpolate(self.steps[-1].target, target, 0.5) if self.steps else None
        )
        step = AnimationStep(target=target, config=config, predicted_next=predicted)
        return dataclasses.replace(self, steps=self.steps + (step,))

    def on_complete(self, callback: Callable[[], Any]) -> AnimationSequence[T]:
        """Return a sequence that calls ``callback`` when it finishes."""
        return dataclasses.replace(self, completion=callback)

    def __len__(self) -> int:
        return len(self.steps)


@dataclass(frozen=True)
class Keyframe(Generic[T]):
    """A value reached at ``offset`` (``0.0..=1.0``) of the animation.

    ``easing``, if set, shapes the approach to this keyframe.
    """

    value: T
    offset: float
    easing: Optional[EasingFunction] = None


@dataclass(frozen=True)
class KeyframeAnimation(Generic[T]):
    """Keyframes spread over ``duration``, kept sorted by offset."""

    duration: timedelta
    keyframes: tuple[Keyframe[T], ...] = field(default=())

    def add_keyframe(
        self,
        value: T,
        offset: float,
        easing: Optional[EasingFunction] = None,
    ) -> KeyframeAnimation[T]:
        """Return an animation with a keyframe added at the clamped ``offset``.

        Raises :class:`ValueError` if ``offset`` is NaN.
        """
        offset = float(offset)
        if math.isnan(offset):
            raise ValueError("keyframe offset must not be NaN")
        keyframe = Keyframe(value=value, offset=min(max(offset, 0.0), 1.0), easing=easing)
        ordered = sorted(self.keyframes + (keyframe,), key=lambda k: k.offset)
        return dataclasses.replace(self, keyframes=tuple(ordered))