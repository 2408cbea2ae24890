"""
Orbit Simulator - Validation Checks

Sanity checks run by the simulation driver after each update:
- Fuel is never negative
- Mass never drops below the dry mass of the active stage
- Position and velocity are finite
- Throttle stays within [0, 1]

A failed check signals a defect in the integrator, not a user error, and
ends the run.
"""

from typing import List

import numpy as np

from . import constants as C


class ValidationError(Exception):
    """Raised when a physics validation check fails."""
    pass


def check_fuel_valid(fuel: float) -> bool:
    """
    Check that the fuel level is not negative.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if fuel < 0.0:
        raise ValidationError(f"Negative fuel level: {fuel:.6f} kg")
    return True


def check_mass_valid(mass: float, fuel: float, dry_mass: float) -> bool:
    """
    Check that mass is consistent with fuel and dry mass.

    Args:
        mass: Current mass (kg)
        fuel: Current fuel (kg)
        dry_mass: Mass with no fuel (kg)

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if mass < dry_mass * (1.0 - C.DECIMAL_TOLERANCE):
        raise ValidationError(
            f"Mass below dry mass: m = {mass:.2f} kg, dry mass = {dry_mass:.2f} kg"
        )
    if abs(mass - dry_mass - fuel) > C.DECIMAL_TOLERANCE * max(1.0, mass):
        raise ValidationError(
            f"Mass inconsistent with fuel: m = {mass:.2f} kg, "
            f"dry mass = {dry_mass:.2f} kg, fuel = {fuel:.2f} kg"
        )
    return True


def check_state_finite(position, velocity) -> bool:
    """
    Check that position and velocity are finite numbers.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    values = np.array([position.x, position.y, velocity.magnitude, velocity.direction])
    if not np.all(np.isfinite(values)):
        raise ValidationError(
            f"Non-finite state: position=({position.x}, {position.y}), "
            f"velocity=({velocity.magnitude}, {velocity.direction})"
        )
    return True


def check_throttle_valid(throttle: float) -> bool:
    """Check the throttle is within [0, 1]."""
    if not C.MIN_THROTTLE <= throttle <= C.MAX_THROTTLE:
        raise ValidationError(f"Throttle out of range: {throttle}")
    return True


def validate_state(vehicle, abort_on_error: bool = True) -> List[str]:
    """
    Run all checks on the active stage of a vehicle.

    Args:
        vehicle: A SingleStageVehicle or MultiStageVehicle
        abort_on_error: If True, raise on the first failure; otherwise
            collect the messages

    Returns:
        List of failure messages (empty if everything passed)
    """
    stage = getattr(vehicle, "active_stage", vehicle)
    dry_mass = stage.payload_mass + stage.structural_mass + stage.engine.mass
    checks = [
        lambda: check_fuel_valid(stage.fuel_level),
        lambda: check_mass_valid(stage.current_mass, stage.fuel_level, dry_mass),
        lambda: check_state_finite(vehicle.position, vehicle.velocity),
        lambda: check_throttle_valid(vehicle.throttle),
    ]
    errors = []
    for check in checks:
        try:
            check()
        except ValidationError as e:
            if abort_on_error:
                raise
            errors.append(str(e))
    return errors
