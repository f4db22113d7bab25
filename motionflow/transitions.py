"""Preset page transitions: where exiting and entering pages start and end."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .transform import Transform

__all__ = ["TransitionConfig", "TransitionVariant"]


@dataclass(frozen=True)
class TransitionConfig:
    """Start and end transforms for the exiting and the entering page."""

    exit_start: Transform
    exit_end: Transform
    enter_start: Transform
    enter_end: Transform


class TransitionVariant(enum.Enum):
    """A named page transition preset."""

    SLIDE_LEFT = "slide_left"
    SLIDE_RIGHT = "slide_right"
    SLIDE_UP = "slide_up"
    SLIDE_DOWN = "slide_down"
    FADE = "fade"
    SCALE_UP = "scale_up"
    SCALE_DOWN = "scale_down"
    FLIP_HORIZONTAL = "flip_horizontal"
    FLIP_VERTICAL = "flip_vertical"
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    SLIDE_UP_FADE = "slide_up_fade"
    SLIDE_DOWN_FADE = "slide_down_fade"
    SCALE_UP_FADE = "scale_up_fade"
    BOUNCE_IN = "bounce_in"
    BOUNCE_OUT = "bounce_out"
    SCALE_DOWN_FADE = "scale_down_fade"
    ROTATE_LEFT_FADE = "rotate_left_fade"
    ROTATE_RIGHT_FADE = "rotate_right_fade"
    FLIP_HORIZONTAL_FADE = "flip_horizontal_fade"
    FLIP_VERTICAL_FADE = "flip_vertical_fade"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    SLIDE_DIAGONAL_UP_LEFT = "slide_diagonal_up_left"
    SLIDE_DIAGONAL_UP_RIGHT = "slide_diagonal_up_right"
    SLIDE_DIAGONAL_DOWN_LEFT = "slide_diagonal_down_left"
    SLIDE_DIAGONAL_DOWN_RIGHT = "slide_diagonal_down_right"
    SPIRAL_IN = "spiral_in"
    SPIRAL_OUT = "spiral_out"
    ELASTIC_IN = "elastic_in"
    ELASTIC_OUT = "elastic_out"
    SWING_IN = "swing_in"
    SWING_OUT = "swing_out"
    SLIDE_LEFT_FADE = "slide_left_fade"
    SLIDE_RIGHT_FADE = "slide_right_fade"
    SCALE_ROTATE_FADE = "scale_rotate_fade"
    SLIDE_FADE_ROTATE = "slide_fade_rotate"
    SCALE_FADE_FLIP = "scale_fade_flip"
    ROTATE_SCALE_SLIDE = "rotate_scale_slide"

    def get_config(self) -> TransitionConfig:
        """Return the transforms this preset animates between."""
        return _CONFIGS[self]


def _t(x: float, y: float, scale: float, rotation: float) -> Transform:
    return Transform(x, y, scale, rotation)


def _config(
    exit_end: Transform,
    enter_start: Transform,
    enter_end: Transform | None = None,
) -> TransitionConfig:
    identity = Transform.identity()
    return TransitionConfig(
        exit_start=identity,
        exit_end=exit_end,
        enter_start=enter_start,
        enter_end=identity if enter_end is None else enter_end,
    )


_V = TransitionVariant

_SLIDE_LEFT = _config(_t(-100.0, 0.0, 1.0, 0.0), _t(100.0, 0.0, 1.0, 0.0))
_SLIDE_RIGHT = _config(_t(100.0, 0.0, 1.0, 0.0), _t(-100.0, 0.0, 1.0, 0.0))
_SLIDE_UP = _config(_t(0.0, -100.0, 1.0, 0.0), _t(0.0, 100.0, 1.0, 0.0))
_SLIDE_DOWN = _config(_t(0.0, 100.0, 1.0, 0.0), _t(0.0, -100.0, 1.0, 0.0))
_IN_PLACE = _config(_t(0.0, 0.0, 1.0, 0.0), _t(0.0, 0.0, 1.0, 0.0))
_SHRINK = _config(_t(0.0, 0.0, 0.0, 0.0), _t(0.0, 0.0, 0.0, 0.0))
_GROW = _config(_t(0.0, 0.0, 2.0, 0.0), _t(0.0, 0.0, 2.0, 0.0))
_FLIP = _config(_t(0.0, 0.0, 1.0, 180.0), _t(0.0, 0.0, 1.0, -180.0))
_ROTATE_LEFT = _config(_t(0.0, 0.0, 1.0, 90.0), _t(0.0, 0.0, 1.0, -90.0))
_ROTATE_RIGHT = _config(_t(0.0, 0.0, 1.0, -90.0), _t(0.0, 0.0, 1.0, 90.0))
_RISE_IN = _config(_t(0.0, 0.0, 1.0, 0.0), _t(0.0, 100.0, 1.0, 0.0))
_DROP_OUT = _config(_t(0.0, 100.0, 1.0, 0.0), _t(0.0, 0.0, 1.0, 0.0))
_APPEAR = _config(_t(0.0, 0.0, 1.0, 0.0), _t(0.0, 0.0, 0.0, 0.0))
_VANISH = _config(
    _t(0.0, 0.0, 2.0, 0.0), Transform.identity(), _t(0.0, 0.0, 0.0, 0.0)
)

_CONFIGS: dict[TransitionVariant, TransitionConfig] = {
    _V.SLIDE_LEFT: _SLIDE_LEFT,
    _V.SLIDE_RIGHT: _SLIDE_RIGHT,
    _V.SLIDE_UP: _SLIDE_UP,
    _V.SLIDE_DOWN: _SLIDE_DOWN,
    _V.FADE: _IN_PLACE,
    _V.SCALE_UP: _SHRINK,
    _V.SCALE_DOWN: _GROW,
    _V.FLIP_HORIZONTAL: _FLIP,
    _V.FLIP_VERTICAL: _FLIP,
    _V.ROTATE_LEFT: _ROTATE_LEFT,
    _V.ROTATE_RIGHT: _ROTATE_RIGHT,
    _V.SLIDE_UP_FADE: _SLIDE_UP,
    _V.SLIDE_DOWN_FADE: _SLIDE_DOWN,
    _V.SCALE_UP_FADE: _SHRINK,
    _V.BOUNCE_IN: _RISE_IN,
    _V.BOUNCE_OUT: _DROP_OUT,
    _V.SCALE_DOWN_FADE: _GROW,
    _V.ROTATE_LEFT_FADE: _ROTATE_LEFT,
    _V.ROTATE_RIGHT_FADE: _ROTATE_RIGHT,
    _V.FLIP_HORIZONTAL_FADE: _FLIP,
    _V.FLIP_VERTICAL_FADE: _FLIP,
    _V.ZOOM_IN: _APPEAR,
    _V.ZOOM_OUT: _VANISH,
    _V.SLIDE_DIAGONAL_UP_LEFT: _config(
        _t(-100.0, -100.0, 1.0, 0.0), _t(100.0, 100.0, 1.0, 0.0)
    ),
    _V.SLIDE_DIAGONAL_UP_RIGHT: _config(
        _t(100.0, -100.0, 1.0, 0.0), _t(-100.0, 100.0, 1.0, 0.0)
    ),
    _V.SLIDE_DIAGONAL_DOWN_LEFT: _config(
        _t(-100.0, 100.0, 1.0, 0.0), _t(100.0, -100.0, 1.0, 0.0)
    ),
    _V.SLIDE_DIAGONAL_DOWN_RIGHT: _config(
        _t(100.0, 100.0, 1.0, 0.0), _t(-100.0, -100.0, 1.0, 0.0)
    ),
    _V.SPIRAL_IN: _APPEAR,
    _V.SPIRAL_OUT: _VANISH,
    _V.ELASTIC_IN: _RISE_IN,
    _V.ELASTIC_OUT: _DROP_OUT,
    _V.SWING_IN: _RISE_IN,
    _V.SWING_OUT: _DROP_OUT,
    _V.SLIDE_LEFT_FADE: _SLIDE_LEFT,
    _V.SLIDE_RIGHT_FADE: _SLIDE_RIGHT,
    _V.SCALE_ROTATE_FADE: _APPEAR,
    _V.SLIDE_FADE_ROTATE: _APPEAR,
    _V.SCALE_FADE_FLIP: _APPEAR,
    _V.ROTATE_SCALE_SLIDE: _APPEAR,
}