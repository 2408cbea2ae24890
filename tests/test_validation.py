import pytest

from orbit_sim.factory import atlas_v, build_multi_stage
from orbit_sim.validation import (
    ValidationError,
    check_fuel_valid,
    check_mass_valid,
    check_state_finite,
    check_throttle_valid,
    validate_state,
)
from orbit_sim.vector import Point, PolarVector


def test_check_fuel_valid():
    assert check_fuel_valid(0.0)
    with pytest.raises(ValidationError):
        check_fuel_valid(-1.0)


def test_check_mass_valid():
    assert check_mass_valid(1100.0, 100.0, 1000.0)
    with pytest.raises(ValidationError, match="below dry mass"):
        check_mass_valid(500.0, 0.0, 1000.0)
    with pytest.raises(ValidationError, match="inconsistent"):
        check_mass_valid(1500.0, 100.0, 1000.0)


def test_check_state_finite():
    assert check_state_finite(Point(1.0, 2.0), PolarVector(3.0, 0.1))
    with pytest.raises(ValidationError):
        check_state_finite(Point(float('nan'), 0.0), PolarVector(1.0, 0.0))
    with pytest.raises(ValidationError):
        check_state_finite(Point(0.0, 0.0), PolarVector(float('inf'), 0.0))


def test_check_throttle_valid():
    assert check_throttle_valid(0.5)
    with pytest.raises(ValidationError):
        check_throttle_valid(1.5)


def test_validate_state_passes_during_flight():
    rocket = build_multi_stage(atlas_v())
    assert validate_state(rocket) == []
    rocket.advance_time(10.0)
    assert validate_state(rocket) == []
    rocket.eject_stage()
    rocket.advance_time(10.0)
    assert validate_state(rocket) == []


def test_validate_state_collects_errors():
    rocket = build_multi_stage(atlas_v())
    rocket.active_stage._fuel_level = -1.0
    errors = validate_state(rocket, abort_on_error=False)
    assert any("Negative fuel" in e for e in errors)
    with pytest.raises(ValidationError):
        validate_state(rocket)
