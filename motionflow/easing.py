"""Easing functions using the classic ``(t, b, c, d)`` signature.

``t`` is the elapsed time, ``b`` the start value, ``c`` the total change
and ``d`` the duration. Each function returns the eased value.
"""

from __future__ import annotations

from typing import Callable

EasingFunction = Callable[[float, float, float, float], float]

__all__ = [
    "EasingFunction",
    "linear",
    "quad_ease_in",
    "quad_ease_out",
    "quad_ease_in_out",
    "cubic_ease_in",
    "cubic_ease_out",
    "cubic_ease_in_out",
]


def linear(t: float, b: float, c: float, d: float) -> float:
    """Constant-rate progression from ``b`` to ``b + c``."""
    return c * t / d + b


def quad_ease_in(t: float, b: float, c: float, d: float) -> float:
    """Quadratic acceleration from rest."""
    t /= d
    return c * t * t + b


def quad_ease_out(t: float, b: float, c: float, d: float) -> float:
    """Quadratic deceleration to rest."""
    t /= d
    return -c * t * (t - 2.0) + b


def quad_ease_in_out(t: float, b: float, c: float, d: float) -> float:
    """Quadratic acceleration for the first half, deceleration for the second."""
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * t * t + b
    t -= 1.0
    return -c / 2.0 * (t * (t - 2.0) - 1.0) + b


def cubic_ease_in(t: float, b: float, c: float, d: float) -> float:
    """Cubic acceleration from rest."""
    t /= d
    return c * t * t * t + b


def cubic_ease_out(t: float, b: float, c: float, d: float) -> float:
    """Cubic deceleration to rest."""
    t = t / d - 1.0
    return c * (t * t * t + 1.0) + b


def cubic_ease_in_out(t: float, b: float, c: float, d: float) -> float:
    """Cubic acceleration for the first half, deceleration for the second."""
    t /= d / 2.0
    if t < 1.0:
        return c / 2.0 * t * t * t + b
    t -= 2.0
    return c / 2.0 * (t * t * t + 2.0) + b