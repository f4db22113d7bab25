"""RGBA colours with normalised components that can be animated."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Color"]


def _unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


def _byte(value: float) -> int:
    return min(max(int(value), 0), 255)


@dataclass(frozen=True)
class Color:
    """An RGBA colour whose components are clamped to ``0.0..=1.0``."""

    r: float
    g: float
    b: float
    a: float

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            object.__setattr__(self, name, _unit(getattr(self, name)))

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from 8-bit components."""
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def to_rgba(self) -> tuple[int, int, int, int]:
        """Return the colour as rounded 8-bit components."""
        return (
            _byte(self.r * 255.0 + 0.5),
            _byte(self.g * 255.0 + 0.5),
            _byte(self.b * 255.0 + 0.5),
            _byte(self.a * 255.0 + 0.5),
        )

    @classmethod
    def zero(cls) -> Color:
        """Fully transparent black."""
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def epsilon(cls) -> float:
        """Smallest meaningful difference between colour components."""
        return 0.00001

    def magnitude(self) -> float:
        """Euclidean length of the component vector."""
        return math.sqrt(self.r**2 + self.g**2 + self.b**2 + self.a**2)

    def scale(self, factor: float) -> Color:
        """Multiply every component by ``factor``."""
        return Color(self.r * factor, self.g * factor, self.b * factor, self.a * factor)

    def add(self, other: Color) -> Color:
        """Component-wise sum."""
        return Color(self.r + other.r, self.g + other.g, self.b + other.b, self.a + other.a)

    def sub(self, other: Color) -> Color:
        """Component-wise difference."""
        return Color(self.r - other.r, self.g - other.g, self.b - other.b, self.a - other.a)

    def interpolate(self, target: Color, t: float) -> Color:
        """Linear interpolation towards ``target`` with ``t`` clamped to ``0..=1``."""
        t = _unit(t)
        keep = 1.0 - t
        return Color(
            self.r * keep + target.r * t,
            self.g * keep + target.g * t,
            self.b * keep + target.b * t,
            self.a * keep + target.a * t,
        )