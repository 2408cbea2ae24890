import numpy as np
import pytest

from orbit_sim import constants as C
from orbit_sim import utils


@pytest.mark.parametrize("theta, expected", [
    (0.0, 0.0),
    (C.PI, C.PI),
    (-C.PI, C.PI),
    (1.5 * C.PI, -0.5 * C.PI),
    (-1.5 * C.PI, 0.5 * C.PI),
    (3.5 * C.PI, -0.5 * C.PI),
    (C.TWO_PI, 0.0),
    (-0.25, -0.25),
])
def test_simplify_angle(theta, expected):
    assert utils.simplify_angle(theta) == pytest.approx(expected, abs=1e-12)


def test_simplify_angle_range():
    for theta in np.linspace(-20.0, 20.0, 401):
        phi = utils.simplify_angle(theta)
        assert -C.PI < phi <= C.PI
        assert np.cos(phi) == pytest.approx(np.cos(theta), abs=1e-9)
        assert np.sin(phi) == pytest.approx(np.sin(theta), abs=1e-9)


@pytest.mark.parametrize("theta, expected", [
    (0.0, C.HALF_PI),
    (C.HALF_PI, 0.0),
    (C.PI, -C.HALF_PI),
    (-C.HALF_PI, C.PI),
    (0.25 * C.PI, 0.25 * C.PI),
])
def test_convert_angle_to_vertical(theta, expected):
    assert utils.convert_angle_to_vertical(theta) == pytest.approx(expected)


def test_unit_conversions():
    assert utils.convert_radians_to_degrees(C.PI) == pytest.approx(180.0)
    assert utils.convert_degrees_to_radians(90.0) == pytest.approx(C.HALF_PI)
    assert utils.convert_mps_to_kmph(10.0) == pytest.approx(36.0)
    assert utils.convert_kmph_to_mps(36.0) == pytest.approx(10.0)
    assert utils.convert_metres_to_km(1500.0) == pytest.approx(1.5)
    assert utils.convert_km_to_metres(1.5) == pytest.approx(1500.0)


def test_tangential_velocity():
    assert utils.get_tangential_velocity() == pytest.approx(C.TANGENTIAL_VELOCITY_EQUATOR_KMPH)
    assert utils.get_tangential_velocity(60.0) == pytest.approx(
        0.5 * C.TANGENTIAL_VELOCITY_EQUATOR_KMPH)
    assert utils.get_tangential_velocity(90.0) == pytest.approx(0.0, abs=1e-9)


def test_orbital_and_escape_speed():
    radius = C.EARTH_RADIUS_KM * 1000.0
    expected = np.sqrt(C.G0 * radius) * 3.6
    assert utils.get_required_orbital_speed(0.0) == pytest.approx(expected)
    # Higher orbits are slower
    assert utils.get_required_orbital_speed(400.0) < utils.get_required_orbital_speed(200.0)
    assert utils.get_escape_velocity() == pytest.approx(np.sqrt(2.0) * expected)
