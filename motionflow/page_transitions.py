"""Route-change bookkeeping and the spring-driven animation between two pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .config import AnimationConfig
from .motion import Motion
from .spring import Spring
from .transform import Transform
from .transitions import TransitionConfig, TransitionVariant

__all__ = [
    "RouterTransition",
    "should_animate",
    "transition_spring",
    "PageTransition",
]

R = TypeVar("R")


@dataclass
class RouterTransition(Generic[R]):
    """Tracks whether the router is settled in a route or moving between two.

    While ``from_route`` is set, a transition from it to ``to`` is in progress;
    once it is ``None`` the router is settled in ``to``.
    """

    to: R
    from_route: Optional[R] = None

    @property
    def is_transitioning(self) -> bool:
        """Whether a transition between two routes is in progress."""
        return self.from_route is not None

    def target_route(self) -> R:
        """The destination route."""
        return self.to

    def set_target_route(self, to: R) -> None:
        """Start a transition from the current destination to ``to``."""
        self.from_route = self.to
        self.to = to

    def settle(self) -> None:
        """Finish any transition so that only the destination remains."""
        self.from_route = None


def should_animate(from_depth: int, to_depth: int, outlet_level: int) -> bool:
    """Whether an outlet at ``outlet_level`` animates a change between two depths.

    A change animates when either route is at the root (depth 1), or when both
    routes sit at the same depth and the outlet is at that depth.
    """
    involves_root = from_depth == 1 or to_depth == 1
    same_depth_here = from_depth == to_depth and outlet_level == to_depth
    return involves_root or same_depth_here


def transition_spring() -> Spring:
    """The spring used for page transitions."""
    return Spring(stiffness=160.0, damping=25.0, mass=1.5, velocity=10.0)


class PageTransition:
    """Animates an exiting and an entering page for one transition preset.

    The exiting page moves from ``exit_start`` to ``exit_end`` and fades out;
    the entering page moves from ``enter_start`` to ``enter_end`` and fades in.
    When every animation has finished, the optional router is settled.
    """

    def __init__(
        self,
        variant: TransitionVariant,
        router: Optional[RouterTransition] = None,
    ) -> None:
        self.variant = variant
        self.router = router
        self.config: TransitionConfig = variant.get_config()

        self.from_transform: Motion[Transform] = Motion(self.config.exit_start)
        self.to_transform: Motion[Transform] = Motion(self.config.enter_start)
        self.from_opacity: Motion[float] = Motion(1.0)
        self.to_opacity: Motion[float] = Motion(0.0)

        spring_config = AnimationConfig(mode=transition_spring())
        self.from_transform.animate_to(self.config.exit_end, spring_config)
        self.to_transform.animate_to(self.config.enter_end, spring_config)
        self.from_opacity.animate_to(0.0, spring_config)
        self.to_opacity.animate_to(1.0, spring_config)

    @property
    def _motions(self) -> tuple[Motion, ...]:
        return (self.from_transform, self.to_transform, self.from_opacity, self.to_opacity)

    def update(self, dt: float) -> bool:
        """Advance every animation by ``dt`` seconds; return whether any still runs."""
        for motion in self._motions:
            motion.update(dt)
        running = self.is_running()
        if not running and self.router is not None:
            self.router.settle()
        return running

    def is_running(self) -> bool:
        """Whether any of the four animations is still active."""
        return any(motion.is_running() for motion in self._motions)