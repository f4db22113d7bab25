import math

import pytest

from motionflow.transform import Transform

PI = math.pi
F32_EPS = 1.1920929e-07


def test_transform_new():
    transform = Transform(100.0, 50.0, 1.5, PI / 4.0)
    assert transform.x == 100.0
    assert transform.y == 50.0
    assert transform.scale == 1.5
    assert abs(transform.rotation - PI / 4.0) < F32_EPS


def test_transform_default():
    transform = Transform.identity()
    assert transform.x == 0.0
    assert transform.y == 0.0
    assert transform.scale == 1.0
    assert transform.rotation == 0.0


def test_transform_lerp():
    start = Transform(0.0, 0.0, 1.0, 0.0)
    end = Transform(100.0, 100.0, 2.0, PI)
    mid = start.interpolate(end, 0.5)
    assert mid.x == 50.0
    assert mid.y == 50.0
    assert mid.scale == 1.5
    assert abs(mid.rotation - PI / 2.0) < F32_EPS


def test_rotation_takes_shortest_path():
    start = Transform(0.0, 0.0, 1.0, 0.0)
    end = Transform(0.0, 0.0, 1.0, 1.5 * PI)
    assert start.interpolate(end, 1.0).rotation == pytest.approx(-PI / 2.0)

    back = Transform(0.0, 0.0, 1.0, -1.5 * PI)
    assert start.interpolate(back, 1.0).rotation == pytest.approx(PI / 2.0)


def test_interpolate_endpoints():
    start = Transform(1.0, 2.0, 3.0, 0.25)
    end = Transform(-4.0, 8.0, 0.5, 1.0)
    assert start.interpolate(end, 0.0) == start
    result = start.interpolate(end, 1.0)
    assert result.x == pytest.approx(end.x)
    assert result.y == pytest.approx(end.y)
    assert result.scale == pytest.approx(end.scale)
    assert result.rotation == pytest.approx(end.rotation)


def test_add_sub_roundtrip():
    a = Transform(1.5, -2.0, 0.75, 0.3)
    b = Transform(10.0, 20.0, 2.0, 1.0)
    result = a.add(b).sub(b)
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)
    assert result.scale == pytest.approx(a.scale)
    assert result.rotation == pytest.approx(a.rotation)


def test_scale_by_and_zero():
    t = Transform(1.0, 2.0, 3.0, 4.0)
    assert t.scale_by(0.0) == Transform.zero()
    assert t.scale_by(2.0).magnitude() == pytest.approx(2.0 * t.magnitude())


def test_magnitude_and_epsilon():
    assert Transform.identity().magnitude() == 1.0
    assert Transform.zero().magnitude() == 0.0
    assert Transform.epsilon() == 0.001