import dataclasses

import pytest

from motionflow.transform import Transform
from motionflow.transitions import TransitionConfig, TransitionVariant

V = TransitionVariant


@pytest.mark.parametrize("variant", list(TransitionVariant))
def test_every_variant_exits_from_identity(variant):
    config = variant.get_config()
    assert config.exit_start == Transform.identity()


@pytest.mark.parametrize(
    "variant",
    [v for v in TransitionVariant if v not in (V.ZOOM_OUT, V.SPIRAL_OUT)],
)
def test_entering_page_ends_in_place(variant):
    assert variant.get_config().enter_end == Transform.identity()


@pytest.mark.parametrize("variant", [V.ZOOM_OUT, V.SPIRAL_OUT])
def test_out_variants_shrink_entering_page(variant):
    config = variant.get_config()
    assert config.enter_start == Transform.identity()
    assert config.enter_end == Transform.zero()


def test_slide_left_pinned():
    config = V.SLIDE_LEFT.get_config()
    assert config.exit_end == Transform(-100.0, 0.0, 1.0, 0.0)
    assert config.enter_start == Transform(100.0, 0.0, 1.0, 0.0)


def test_slide_left_and_right_mirror():
    left = V.SLIDE_LEFT.get_config()
    right = V.SLIDE_RIGHT.get_config()
    assert left.exit_end.x == -right.exit_end.x
    assert left.enter_start.x == -right.enter_start.x
    assert left.exit_end.y == right.exit_end.y


def test_slide_up_and_down_mirror():
    up = V.SLIDE_UP.get_config()
    down = V.SLIDE_DOWN.get_config()
    assert up.exit_end.y == -down.exit_end.y
    assert up.enter_start.y == -down.enter_start.y


def test_rotate_left_and_right_mirror():
    left = V.ROTATE_LEFT.get_config()
    right = V.ROTATE_RIGHT.get_config()
    assert left.exit_end.rotation == -right.exit_end.rotation
    assert left.enter_start.rotation == -right.enter_start.rotation


@pytest.mark.parametrize(
    ("faded", "base"),
    [
        (V.SLIDE_UP_FADE, V.SLIDE_UP),
        (V.SLIDE_DOWN_FADE, V.SLIDE_DOWN),
        (V.SLIDE_LEFT_FADE, V.SLIDE_LEFT),
        (V.SLIDE_RIGHT_FADE, V.SLIDE_RIGHT),
        (V.SCALE_UP_FADE, V.SCALE_UP),
        (V.SCALE_DOWN_FADE, V.SCALE_DOWN),
        (V.ROTATE_LEFT_FADE, V.ROTATE_LEFT),
        (V.ROTATE_RIGHT_FADE, V.ROTATE_RIGHT),
        (V.FLIP_HORIZONTAL_FADE, V.FLIP_HORIZONTAL),
        (V.FLIP_VERTICAL_FADE, V.FLIP_VERTICAL),
    ],
)
def test_fade_variants_share_transforms(faded, base):
    assert faded.get_config() == base.get_config()


def test_fade_keeps_everything_in_place():
    config = V.FADE.get_config()
    identity = Transform.identity()
    assert config.exit_end == identity
    assert config.enter_start == identity


def test_scale_up_starts_from_zero():
    config = V.SCALE_UP.get_config()
    assert config.exit_end == Transform.zero()
    assert config.enter_start == Transform.zero()


def test_scale_down_grows_to_double():
    config = V.SCALE_DOWN.get_config()
    assert config.exit_end.scale == 2.0
    assert config.enter_start == config.exit_end


@pytest.mark.parametrize(
    "variant",
    [
        V.SLIDE_DIAGONAL_UP_LEFT,
        V.SLIDE_DIAGONAL_UP_RIGHT,
        V.SLIDE_DIAGONAL_DOWN_LEFT,
        V.SLIDE_DIAGONAL_DOWN_RIGHT,
    ],
)
def test_diagonal_enter_is_opposite_of_exit(variant):
    config = variant.get_config()
    assert config.enter_start.x == -config.exit_end.x
    assert config.enter_start.y == -config.exit_end.y
    assert abs(config.exit_end.x) == abs(config.exit_end.y)


@pytest.mark.parametrize(
    ("a", "b"),
    [
        (V.BOUNCE_IN, V.ELASTIC_IN),
        (V.BOUNCE_IN, V.SWING_IN),
        (V.BOUNCE_OUT, V.ELASTIC_OUT),
        (V.BOUNCE_OUT, V.SWING_OUT),
        (V.ZOOM_IN, V.SPIRAL_IN),
        (V.ZOOM_OUT, V.SPIRAL_OUT),
    ],
)
def test_equivalent_presets(a, b):
    assert a.get_config() == b.get_config()


def test_get_config_is_stable():
    identity = Transform.identity()
    expected = TransitionConfig(
        identity,
        Transform(0.0, -100.0, 1.0, 0.0),
        Transform(0.0, 100.0, 1.0, 0.0),
        identity,
    )
    assert V.SLIDE_UP.get_config() == expected
    assert V.SLIDE_UP.get_config() == expected


def test_config_is_immutable():
    config = V.SLIDE_LEFT.get_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.exit_end = Transform.identity()  # type: ignore[misc]
    assert V.SLIDE_LEFT.get_config().exit_end.x == -100.0


def test_transition_config_holds_given_transforms():
    identity = Transform.identity()
    zero = Transform.zero()
    config = TransitionConfig(identity, zero, zero, identity)
    assert config.exit_start == identity
    assert config.exit_end == zero
    assert config.enter_start == zero
    assert config.enter_end == identity


def test_variant_lookup_by_value():
    assert TransitionVariant("slide_left") is V.SLIDE_LEFT
    with pytest.raises(ValueError):
        TransitionVariant("no_such_transition")