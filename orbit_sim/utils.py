"""
Orbit Simulator - Utility Functions

Angle canonicalization, unit conversions and simple orbital speed estimates
shared across modules.

Angles are in radians unless the function name says otherwise. Directions
are measured from the vertical (up) axis, positive to the right.
"""

import numpy as np

from . import constants as C


def simplify_angle(theta: float) -> float:
    """
    Reduce an angle to the range (-pi, pi].

    The angle is first reduced modulo 2*pi (keeping the sign of the input),
    then shifted by a full turn if it still lies outside the range.
    """
    theta = float(np.fmod(theta, C.TWO_PI))
    if theta > C.PI:
        theta -= C.TWO_PI
    elif theta <= -C.PI:
        theta += C.TWO_PI
    return theta


def convert_angle_to_vertical(theta: float) -> float:
    """
    Convert an angle measured from the horizontal axis into the equivalent
    angle measured from the vertical axis.

    Args:
        theta: Angle from the horizontal (anticlockwise positive), radians

    Returns:
        Angle from the vertical (clockwise positive) in (-pi, pi]
    """
    return simplify_angle(C.HALF_PI - simplify_angle(theta))


def convert_radians_to_degrees(rad_angle: float) -> float:
    return rad_angle * 180.0 / C.PI


def convert_degrees_to_radians(deg_angle: float) -> float:
    return deg_angle * C.PI / 180.0


def convert_mps_to_kmph(mps: float) -> float:
    """Convert metres per second to kilometres per hour."""
    return mps * C.MPS_TO_KMPH


def convert_kmph_to_mps(kmph: float) -> float:
    """Convert kilometres per hour to metres per second."""
    return kmph / C.MPS_TO_KMPH


def convert_metres_to_km(m: float) -> float:
    return m / C.METRES_PER_KM


def convert_km_to_metres(km: float) -> float:
    return km * C.METRES_PER_KM


def get_tangential_velocity(latitude: float = 0.0) -> float:
    """
    Ground speed due to Earth's rotation at a given latitude.

    Args:
        latitude: Latitude in degrees (default: equator)

    Returns:
        Tangential speed in km/h
    """
    return float(np.cos(convert_degrees_to_radians(latitude))) * C.TANGENTIAL_VELOCITY_EQUATOR_KMPH


def get_required_orbital_speed(height: float) -> float:
    """
    Speed needed for a circular orbit at a given height.

    Args:
        height: Height above the surface in km

    Returns:
        Orbital speed in km/h
    """
    earth_radius = convert_km_to_metres(C.EARTH_RADIUS_KM)
    numerator = C.G0 * earth_radius * earth_radius
    denominator = earth_radius + convert_km_to_metres(height)
    return convert_mps_to_kmph(float(np.sqrt(numerator / denominator)))


def get_escape_velocity(height: float = 0.0) -> float:
    """Escape speed in km/h at a height (km) above the surface."""
    return float(np.sqrt(2.0)) * get_required_orbital_speed(height)
