# motionflow

A small animation library. It moves values over time with spring physics,
tweens shaped by easing functions, multi-step sequences and keyframes, and it
carries preset configurations for page transitions.

It has no dependencies outside the standard library.

## Installation

```
pip install motionflow
```

To run the test suite, install the `test` extra:

```
pip install "motionflow[test]"
pytest
```

## Animatable values

These can be animated:

- plain `int` and `float` numbers
- `motionflow.colors.Color`: RGBA with every channel clamped to 0.0–1.0
- `motionflow.transform.Transform`: `x`, `y`, `scale` and `rotation` (radians)

The functions in `motionflow.animatable` (`zero_like`, `epsilon_of`,
`magnitude`, `scale`, `add`, `sub`, `interpolate`) do the arithmetic on any of
them. Other types can take part by providing the methods of the `Animatable`
protocol.

```python
from motionflow.colors import Color
from motionflow.transform import Transform

orange = Color.from_rgba(255, 128, 0, 255)
orange.to_rgba()                      # (255, 128, 0, 255)

start = Transform(0.0, 0.0, 1.0, 0.0)
end = Transform(100.0, 100.0, 2.0, 3.14159)
start.interpolate(end, 0.5)           # rotation takes the shorter arc
```

`Color.interpolate` clamps `t` to 0–1; `Transform.interpolate` does not.

## Easing

`motionflow.easing` has `linear`, `quad_ease_in`, `quad_ease_out`,
`quad_ease_in_out`, `cubic_ease_in`, `cubic_ease_out` and `cubic_ease_in_out`.
Each takes `(t, b, c, d)`: elapsed time, start value, total change, duration.

## Motions

A `Motion` holds a value and the animation moving it. Advance it with
`update(dt)`, where `dt` is the time since the last frame in seconds; it
returns whether the animation continues. Frames shorter than 1/240 s are
skipped.

```python
from datetime import timedelta

from motionflow import easing
from motionflow.config import AnimationConfig, LoopKind, LoopMode
from motionflow.motion import Motion
from motionflow.spring import Spring
from motionflow.tween import Tween

motion = Motion(0.0)
motion.animate_to(100.0, AnimationConfig(Spring()))

while motion.is_running():
    motion.update(1 / 60)

motion.value()                        # 100.0
```

A tween runs for a fixed time (300 ms and linear easing by default):

```python
tween = Tween(timedelta(seconds=1)).with_easing(easing.cubic_ease_in_out)
config = AnimationConfig(tween).with_loop(LoopMode.times(3))
motion.animate_to(0.0, config)
```

`AnimationConfig` is immutable; `with_loop`, `with_delay` and
`with_on_complete` return new configurations. `get_duration()` gives the total
running time (springs are estimated at one second, endless loops give
`timedelta.max`).

Loop modes:

- `LoopMode()` – play once (the default)
- `LoopMode(LoopKind.INFINITE)` – repeat from the start forever
- `LoopMode.times(n)` – play `n` times
- `LoopMode(LoopKind.ALTERNATE)` – go back and forth forever
- `LoopMode.alternate_times(n)` – go back and forth `n` times

Counts must be between 0 and 255, otherwise `ValueError` is raised.

`stop()` halts the animation where it is; `reset()` halts it and returns to the
value the animation started from; `delay(duration)` sets the start delay of
the current animation.

## Sequences and keyframes

```python
from motionflow.sequence import AnimationSequence, KeyframeAnimation

sequence = (
    AnimationSequence()
    .then(50.0, AnimationConfig(Spring()))
    .then(100.0, AnimationConfig(Tween(timedelta(milliseconds=300))))
    .on_complete(lambda: print("done"))
)
motion.animate_sequence(sequence)

keyframes = (
    KeyframeAnimation(timedelta(seconds=2))
    .add_keyframe(0.0, 0.0, None)
    .add_keyframe(80.0, 0.5, easing.quad_ease_out)
    .add_keyframe(100.0, 1.0, None)
)
motion.animate_keyframes(keyframes)
```

Keyframe offsets are clamped to 0–1 and kept sorted; a NaN offset raises
`ValueError`, and so does animating a keyframe animation with no keyframes.
An empty sequence is ignored.

## Running in an event loop

`motionflow.driver.drive` is a coroutine that updates a motion each frame
until it stops and returns its final value. Each frame's delta is capped at
`max_dt` seconds (0.1 by default), and the wait before the next frame
(`next_frame_delay`) is 8, 16 or 32 ms depending on the last frame's length.

```python
import asyncio
from motionflow.driver import drive

asyncio.run(drive(motion))
```

## Page transitions

`motionflow.transitions.TransitionVariant` lists presets such as
`SLIDE_LEFT`, `FADE`, `SCALE_UP`, `FLIP_HORIZONTAL`, `ZOOM_OUT` and
`SPIRAL_IN`. `get_config()` returns a `TransitionConfig` with the start and end
`Transform` of the page leaving and of the page entering.

In `motionflow.page_transitions`:

- `PageTransition(variant, router=None)` animates both pages' transforms and
  opacities with the spring from `transition_spring()`; call `update(dt)`
  until `is_running()` is false. When it finishes it settles the router, if
  one was given.
- `RouterTransition(to)` records the route being entered and, while a
  transition is in progress, the route being left (`set_target_route`,
  `target_route`, `settle`, `is_transitioning`).
- `should_animate(from_depth, to_depth, outlet_level)` says whether an outlet
  at a given layout depth should animate a route change.

## What it does not do

motionflow computes values only. It draws nothing, has no widgets, routing or
UI framework integration, and schedules frames only through the asyncio
`drive` coroutine. Reading the current values and rendering them is up to the
caller.