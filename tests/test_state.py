"""Tests for the VehicleState snapshot."""
import numpy as np
import pytest

from orbit_sim.factory import ATLAS_V_STAGE1, build_single_stage
from orbit_sim.state import VehicleState
from orbit_sim.vector import Point, PolarVector


def test_default_state():
    state = VehicleState()
    assert state.position == Point(0.0, 0.0)
    assert state.speed == 0.0
    assert state.stage_index == 0
    assert not state.is_crashed


def test_from_vehicle():
    vehicle = build_single_stage(ATLAS_V_STAGE1, 400.0)
    vehicle.advance_time(1.0)
    state = VehicleState.from_vehicle(vehicle)
    assert state.elapsed_time == pytest.approx(1.0)
    assert state.height == vehicle.position.y
    assert state.speed == vehicle.velocity.magnitude
    assert state.current_mass == vehicle.current_mass
    assert state.thrust == vehicle.thrust


def test_snapshot_does_not_follow_vehicle():
    vehicle = build_single_stage(ATLAS_V_STAGE1, 400.0)
    state = vehicle.snapshot()
    vehicle.advance_time(1.0)
    assert state.elapsed_time == 0.0
    assert state.height == 0.0


def test_copy_is_independent():
    state = VehicleState(fuel_level=10.0)
    other = state.copy()
    other.fuel_level = 5.0
    assert state.fuel_level == 10.0


def test_to_vector():
    state = VehicleState(position=Point(1.0, 2.0), velocity=PolarVector(3.0, 0.0),
                         fuel_level=4.0, current_mass=5.0, elapsed_time=6.0)
    vec = state.to_vector()
    assert vec.shape == (7,)
    np.testing.assert_allclose(vec, [1.0, 2.0, 0.0, 3.0, 4.0, 5.0, 6.0], atol=1e-12)


def test_str():
    state = VehicleState(position=Point(0.0, 1500.0), elapsed_time=2.0)
    assert str(state) == "VehicleState(t=2.00s, stage=1, h=1.50km, v=0.0m/s, fuel=0.0kg, m=0.0kg)"
