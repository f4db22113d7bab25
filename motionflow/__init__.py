"""Spring, tween, sequence and keyframe animation of numbers, colours and transforms, with page transition presets."""

__version__ = "0.3.1"

__all__ = [
    "animatable",
    "colors",
    "config",
    "driver",
    "easing",
    "motion",
    "page_transitions",
    "sequence",
    "spring",
    "transform",
    "transitions",
    "tween",
]