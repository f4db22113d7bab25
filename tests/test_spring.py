import dataclasses

import pytest

from motionflow.spring import Spring, SpringState


def test_spring_default():
    spring = Spring()
    assert spring.stiffness == 100.0
    assert spring.damping == 10.0
    assert spring.mass == 1.0
    assert spring.velocity == 0.0


def test_spring_custom():
    spring = Spring(stiffness=200.0, damping=20.0, mass=2.0, velocity=5.0)
    assert spring.stiffness == 200.0
    assert spring.damping == 20.0
    assert spring.mass == 2.0
    assert spring.velocity == 5.0


def test_spring_equality_and_immutability():
    assert Spring() == Spring(100.0, 10.0, 1.0, 0.0)
    assert Spring(stiffness=200.0) != Spring()
    with pytest.raises(dataclasses.FrozenInstanceError):
        Spring().mass = 3.0  # type: ignore[misc]


def test_spring_state_members():
    assert SpringState(SpringState.ACTIVE.value) is SpringState.ACTIVE
    assert SpringState(SpringState.COMPLETED.value) is SpringState.COMPLETED
    assert SpringState["ACTIVE"] is SpringState.ACTIVE
    assert {s.name for s in SpringState} == {"ACTIVE", "COMPLETED"}