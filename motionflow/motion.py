"""The animation state machine that advances a value frame by frame."""

from __future__ import annotations

import dataclasses
from datetime import timedelta
from typing import Generic, Optional, TypeVar

from .animatable import add, interpolate, magnitude, scale, sub, zero_like
from .config import AnimationConfig, LoopKind
from .sequence import AnimationSequence, Keyframe, KeyframeAnimation
from .spring import Spring, SpringState
from .tween import Tween

__all__ = ["Motion", "MIN_DELTA"]

T = TypeVar("T")

# Frame deltas shorter than this (~4ms) are skipped as imperceptible.
MIN_DELTA = 1.0 / 240.0

_FIXED_DT = 1.0 / 120.0
_POSITION_THRESHOLD = 0.001
_VELOCITY_THRESHOLD = 0.001
_EPSILON = 0.001


class Motion(Generic[T]):
    """An animated value driven by tweens, springs, sequences or keyframes.

    Call :meth:`update` with the time since the last frame to advance it.
    """

    def __init__(self, initial: T) -> None:
        self.initial: T = initial
        self.current: T = initial
        self.target: T = initial
        self.velocity: T = zero_like(initial)
        self.running = False
        self.elapsed = timedelta()
        self.delay_elapsed = timedelta()
        self.current_loop = 0
        self.config = AnimationConfig()
        self.sequence: Optional[AnimationSequence[T]] = None
        self.reverse = False
        self.keyframe_animation: Optional[KeyframeAnimation[T]] = None

    def animate_to(self, target: T, config: AnimationConfig) -> None:
        """Start animating from the current value towards ``target``."""
        self.sequence = None
        self.initial = self.current
        self.target = target
        self.config = config
        self.running = True
        self.elapsed = timedelta()
        self.delay_elapsed = timedelta()
        self.velocity = zero_like(self.current)
        self.current_loop = 0

    def animate_sequence(self, sequence: AnimationSequence[T]) -> None:
        """Play the steps of ``sequence`` one after another; empty ones are ignored."""
        if not sequence.steps:
            return
        first = sequence.steps[0]
        self.animate_to(first.target, first.config)
        self.sequence = dataclasses.replace(sequence, current_step=0)

    def animate_keyframes(self, animation: KeyframeAnimation[T]) -> None:
        """Play a keyframe animation.

        Raises :class:`ValueError` if the animation has no keyframes.
        """
        if not animation.keyframes:
            raise ValueError("keyframe animation must contain at least one keyframe")
        self.keyframe_animation = animation
        self.running = True
        self.elapsed = timedelta()
        self.velocity = zero_like(self.current)

    def value(self) -> T:
        """The current animated value."""
        return self.current

    def is_running(self) -> bool:
        """Whether any animation, sequence or keyframe run is still active."""
        return (
            self.running
            or self.sequence is not None
            or self.keyframe_animation is not None
        )

    def reset(self) -> None:
        """Stop and return to the value the current animation started from."""
        self.stop()
        self.current = self.initial
        self.elapsed = timedelta()

    def stop(self) -> None:
        """Stop all animation, keeping the current value."""
        self.running = False
        self.current_loop = 0
        self.velocity = zero_like(self.current)
        self.sequence = None
        self.keyframe_animation = None

    def delay(self, duration: timedelta) -> None:
        """Set the delay before the current animation starts moving."""
        self.config = self.config.with_delay(duration)

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; return whether animation continues."""
        if not self.is_running():
            return False

        if self.sequence is not None and not self.running:
            return self._advance_sequence(self.sequence)

        if self.keyframe_animation is not None:
            return self._update_keyframes(self.keyframe_animation, dt)

        if dt < MIN_DELTA:
            return True

        if self.delay_elapsed < self.config.delay:
            self.delay_elapsed += timedelta(seconds=dt)
            return True

        mode = self.config.mode
        if isinstance(mode, Spring):
            completed = self._update_spring(mode, dt) is SpringState.COMPLETED
        else:
            completed = self._update_tween(mode, dt)

        return self._handle_completion() if completed else True

    def _advance_sequence(self, sequence: AnimationSequence[T]) -> bool:
        next_index = sequence.current_step + 1
        if next_index < len(sequence.steps):
            step = sequence.steps[next_index]
            self.sequence = dataclasses.replace(sequence, current_step=next_index)
            self.initial = self.current
            self.target = step.target
            self.config = step.config
            self.running = True
            self.elapsed = timedelta()
            self.delay_elapsed = timedelta()
            self.velocity = zero_like(self.current)
            return True

        callback = sequence.completion
        self.sequence = None
        self.stop()
        if callback is not None:
            callback()
        return False

    def _update_spring(self, spring: Spring, dt: float) -> SpringState:
        mass_inv = 1.0 / spring.mass
        steps = max(int(dt / _FIXED_DT), 1)
        step_dt = dt / steps

        for _ in range(steps):
            delta = sub(self.target, self.current)
            if (
                magnitude(delta) < _POSITION_THRESHOLD
                and magnitude(self.velocity) < _VELOCITY_THRESHOLD
            ):
                self.current = self.target
                self.velocity = zero_like(self.current)
                return SpringState.COMPLETED

            force = scale(delta, spring.stiffness)
            damping_force = scale(self.velocity, spring.damping)
            acceleration = scale(sub(force, damping_force), mass_inv * step_dt)
            self.velocity = add(self.velocity, acceleration)
            self.current = add(self.current, scale(self.velocity, step_dt))

        return self._check_spring_completion()

    def _check_spring_completion(self) -> SpringState:
        epsilon_sq = _EPSILON * _EPSILON
        velocity_sq = magnitude(self.velocity) ** 2
        delta_sq = magnitude(sub(self.target, self.current)) ** 2
        if velocity_sq < epsilon_sq and delta_sq < epsilon_sq:
            self.current = self.target
            self.velocity = zero_like(self.current)
            return SpringState.COMPLETED
        return SpringState.ACTIVE

    def _update_tween(self, tween: Tween, dt: float) -> bool:
        elapsed_secs = self.elapsed.total_seconds() + dt
        self.elapsed = timedelta(seconds=elapsed_secs)

        duration_secs = tween.duration.total_seconds()
        progress = 1.0 if duration_secs == 0.0 else min(elapsed_secs / duration_secs, 1.0)

        if progress <= 0.0:
            self.current = self.initial
            return False
        if progress >= 1.0:
            self.current = self.target
            return True

        eased = tween.easing(progress, 0.0, 1.0, 1.0)
        if eased == 0.0:
            self.current = self.initial
        elif eased == 1.0:
            self.current = self.target
        else:
            self.current = interpolate(self.initial, self.target, eased)
        return False

    def _handle_completion(self) -> bool:
        loop_mode = self.config.loop_mode
        kind = loop_mode.kind if loop_mode is not None else LoopKind.NONE

        if kind is LoopKind.NONE:
            self.running = False
            should_continue = False
        elif kind is LoopKind.INFINITE:
            self._restart_from_initial()
            should_continue = True
        elif kind is LoopKind.TIMES:
            self.current_loop += 1
            if self.current_loop >= loop_mode.count:  # type: ignore[union-attr]
                self.stop()
                should_continue = False
            else:
                self._restart_from_initial()
                should_continue = True
        elif kind is LoopKind.ALTERNATE:
            self._flip_direction()
            should_continue = True
        else:
            self.current_loop += 1
            if self.current_loop >= loop_mode.count * 2:  # type: ignore[union-attr]
                self.stop()
                should_continue = False
            else:
                self._flip_direction()
                should_continue = True

        if not should_continue:
            self.config.execute_completion()
        return should_continue

    def _restart_from_initial(self) -> None:
        self.current = self.initial
        self.elapsed = timedelta()
        self.velocity = zero_like(self.current)

    def _flip_direction(self) -> None:
        self.reverse = not self.reverse
        if self.reverse:
            self.initial, self.target = self.target, self.initial
        self.elapsed = timedelta()
        self.velocity = zero_like(self.current)

    def _update_keyframes(self, animation: KeyframeAnimation[T], dt: float) -> bool:
        keyframes = animation.keyframes
        if not keyframes:
            raise ValueError("keyframe animation must contain at least one keyframe")

        duration_secs = animation.duration.total_seconds()
        if duration_secs == 0.0:
            progress = 1.0
        else:
            progress = min(max(self.elapsed.total_seconds() / duration_secs, 0.0), 1.0)

        start, end = self._keyframe_pair(keyframes, progress)
        if start.offset == end.offset:
            local_progress = 1.0
        else:
            local_progress = (progress - start.offset) / (end.offset - start.offset)

        eased = (
            end.easing(local_progress, 0.0, 1.0, 1.0)
            if end.easing is not None
            else local_progress
        )
        self.current = interpolate(start.value, end.value, eased)
        self.elapsed += timedelta(seconds=dt)

        if progress < 1.0:
            return True
        should_continue = self._handle_completion()
        if not should_continue:
            self.keyframe_animation = None
        return should_continue

    @staticmethod
    def _keyframe_pair(
        keyframes: tuple[Keyframe[T], ...], progress: float
    ) -> tuple[Keyframe[T], Keyframe[T]]:
        for start, end in zip(keyframes, keyframes[1:]):
            if start.offset <= progress <= end.offset:
                return start, end
        if progress <= keyframes[0].offset:
            return keyframes[0], keyframes[0]
        return keyframes[-1], keyframes[-1]