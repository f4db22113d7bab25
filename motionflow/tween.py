"""Time-based tween configuration."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import timedelta

from .easing import EasingFunction, linear

__all__ = ["Tween"]


@dataclass(frozen=True)
class Tween:
    """A tween lasting ``duration`` and shaped by ``easing``.

    The easing function takes ``(t, b, c, d)``; linear easing is the default.
    """

    duration: timedelta = field(default_factory=lambda: timedelta(milliseconds=300))
    easing: EasingFunction = linear

    def with_easing(self, easing: EasingFunction) -> Tween:
        """Return a copy that uses ``easing``."""
        return dataclasses.replace(self, easing=easing)