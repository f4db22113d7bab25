"""Animatable 2D transforms: translation, uniform scale and rotation."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Transform"]


@dataclass(frozen=True)
class Transform:
    """A 2D transform; ``rotation`` is in radians."""

    x: float
    y: float
    scale: float
    rotation: float

    @classmethod
    def identity(cls) -> Transform:
        """The transform that leaves everything in place."""
        return cls(0.0, 0.0, 1.0, 0.0)

    @classmethod
    def zero(cls) -> Transform:
        """A transform with every component zero."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def epsilon(cls) -> float:
        """Smallest meaningful difference between transforms."""
        return 0.001

    def magnitude(self) -> float:
        """Euclidean length of the component vector."""
        return math.sqrt(self.x**2 + self.y**2 + self.scale**2 + self.rotation**2)

    def scale_by(self, factor: float) -> Transform:
        """Multiply every component by ``factor``."""
        return Transform(
            self.x * factor, self.y * factor, self.scale * factor, self.rotation * factor
        )

    def add(self, other: Transform) -> Transform:
        """Component-wise sum."""
        return Transform(
            self.x + other.x,
            self.y + other.y,
            self.scale + other.scale,
            self.rotation + other.rotation,
        )

    def sub(self, other: Transform) -> Transform:
        """Component-wise difference."""
        return Transform(
            self.x - other.x,
            self.y - other.y,
            self.scale - other.scale,
            self.rotation - other.rotation,
        )

    def interpolate(self, target: Transform, t: float) -> Transform:
        """Interpolate towards ``target``, rotating along the shorter arc."""
        rotation_diff = target.rotation - self.rotation
        if rotation_diff > math.pi:
            rotation_diff -= 2.0 * math.pi
        elif rotation_diff < -math.pi:
            rotation_diff += 2.0 * math.pi
        return Transform(
            self.x + (target.x - self.x) * t,
            self.y + (target.y - self.y) * t,
            self.scale + (target.scale - self.scale) * t,
            self.rotation + rotation_diff * t,
        )