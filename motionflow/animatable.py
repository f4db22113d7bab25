"""The value protocol that animations operate on.

Plain numbers are animatable directly; richer types implement the
:class:`Animatable` protocol. The module-level helpers dispatch to either.
"""

from __future__ import annotations

import math
from typing import Any, Protocol, TypeVar, runtime_checkable

__all__ = [
    "Animatable",
    "SCALAR_EPSILON",
    "zero_like",
    "epsilon_of",
    "magnitude",
    "scale",
    "add",
    "sub",
    "interpolate",
]

SCALAR_EPSILON = 0.001

T = TypeVar("T")


@runtime_checkable
class Animatable(Protocol):
    """A value that supports the arithmetic animations need."""

    @classmethod
    def zero(cls) -> Any:
        """Return the zero value of the type."""
        ...

    @classmethod
    def epsilon(cls) -> float:
        """Return the smallest meaningful difference between values."""
        ...

    def magnitude(self) -> float:
        """Return the length of the value."""
        ...

    def add(self, other: Any) -> Any:
        """Return the sum of two values."""
        ...

    def sub(self, other: Any) -> Any:
        """Return the difference of two values."""
        ...

    def interpolate(self, target: Any, t: float) -> Any:
        """Return the value a fraction ``t`` of the way to ``target``."""
        ...


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def zero_like(value: T) -> T:
    """Return the zero value of ``value``'s type."""
    if _is_scalar(value):
        return 0.0  # type: ignore[return-value]
    return type(value).zero()  # type: ignore[attr-defined]


def epsilon_of(value: Any) -> float:
    """Return the epsilon of ``value``'s type."""
    if _is_scalar(value):
        return SCALAR_EPSILON
    return type(value).epsilon()


def magnitude(value: Any) -> float:
    """Return the magnitude of ``value``."""
    if _is_scalar(value):
        return math.fabs(value)
    return value.magnitude()


def scale(value: T, factor: float) -> T:
    """Return ``value`` multiplied by ``factor``."""
    if _is_scalar(value):
        return value * factor  # type: ignore[operator]
    scaler = getattr(value, "scale_by", None)
    if not callable(scaler):
        scaler = value.scale  # type: ignore[attr-defined]
    return scaler(factor)


def add(a: T, b: T) -> T:
    """Return ``a + b``."""
    if _is_scalar(a):
        return a + b  # type: ignore[operator]
    return a.add(b)  # type: ignore[attr-defined]


def sub(a: T, b: T) -> T:
    """Return ``a - b``."""
    if _is_scalar(a):
        return a - b  # type: ignore[operator]
    return a.sub(b)  # type: ignore[attr-defined]


def interpolate(start: T, target: T, t: float) -> T:
    """Return the value a fraction ``t`` of the way from ``start`` to ``target``."""
    if _is_scalar(start):
        return start + (target - start) * t  # type: ignore[operator]
    return start.interpolate(target, t)  # type: ignore[attr-defined]