"""
Orbit Simulator - Mass and propellant bookkeeping.
"""

import numpy as np


def clamp_non_negative(value: float) -> float:
    """Floor a mass or fuel quantity at zero."""
    return float(value) if value > 0.0 else 0.0


def compute_current_mass(payload_mass: float, structural_mass: float,
                         fuel: float, engine_mass: float) -> float:
    """
    Total vehicle mass: payload + structure + remaining fuel + engine.
    """
    return payload_mass + structural_mass + fuel + engine_mass


def compute_mass_flow_rate(engine_mass_flow_rate: float, throttle: float) -> float:
    """
    Effective propellant mass flow (kg/s, positive while burning).
    """
    if throttle <= 0.0:
        return 0.0
    return engine_mass_flow_rate * float(np.clip(throttle, 0.0, 1.0))


def compute_fuel_burn(mass_flow_rate: float, dt: float) -> float:
    """Propellant consumed over dt at a constant mass flow (kg)."""
    return mass_flow_rate * dt


def compute_burn_time(fuel: float, mass_flow_rate: float) -> float:
    """
    Time needed to burn the given fuel at a constant mass flow (s).

    Raises:
        ValueError: If the mass flow is not positive
    """
    if mass_flow_rate <= 0.0:
        raise ValueError(f"Mass flow rate must be positive, got {mass_flow_rate}")
    return fuel / mass_flow_rate


def is_fuel_exhausted(fuel: float) -> bool:
    """True if no propellant remains."""
    return fuel <= 0.0
