"""Spring physics parameters for spring-driven animations."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = ["Spring", "SpringState"]


@dataclass(frozen=True)
class Spring:
    """A mass-spring-damper configuration.

    Higher ``stiffness`` snaps faster, higher ``damping`` bounces less and
    higher ``mass`` adds inertia. ``velocity`` is the initial velocity.
    """

    stiffness: float = 100.0
    damping: float = 10.0
    mass: float = 1.0
    velocity: float = 0.0


class SpringState(enum.Enum):
    """Whether a spring is still moving or has settled."""

    ACTIVE = "active"
    COMPLETED = "completed"