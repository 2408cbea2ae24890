"""
Orbit Simulator - Closed-Form Equations of Motion

Exact solutions of the ideal rocket equation in a uniform gravity field:

- Powered flight (constant mass flow ṁ, exhaust velocity Ve):
    Δv = Ve · ln(m_i / m_f)            along the thrust direction
    Δs = u·Δt + Ve·(Δt + m_f·ln(m_f / m_i) / ṁ)
  with gravity adding -g0·Δt to velocity and -½·g0·Δt² to position,
  straight down.
- Free fall (no thrust):
    Δv_y = -g0·Δt
    Δs   = (v_x·Δt, v_y·Δt - ½·g0·Δt²)

Because these are analytic integrals, the result does not depend on how a
time interval is split into steps.
"""

from typing import NamedTuple

import numpy as np

from . import constants as C
from .vector import PolarVector


class StateChange(NamedTuple):
    """Velocity and position increments over one interval."""
    dv: PolarVector
    ds: PolarVector


def rocket_equation_delta_v(exhaust_velocity: float, m_i: float, m_f: float) -> float:
    """
    Tsiolkovsky speed change for a burn from m_i down to m_f (m/s).
    """
    return exhaust_velocity * float(np.log(m_i / m_f))


def burn_duration(mass_flow_rate: float, m_i: float, m_f: float) -> float:
    """Time taken to burn from m_i down to m_f at constant mass flow (s)."""
    return (m_i - m_f) / mass_flow_rate


def burn_velocity_change(thrust_direction: float, exhaust_velocity: float,
                         mass_flow_rate: float, m_i: float, m_f: float) -> PolarVector:
    """
    Velocity change over a burn, including gravity.

    Args:
        thrust_direction: Direction of thrust from vertical (rad)
        exhaust_velocity: Effective exhaust velocity Ve (m/s)
        mass_flow_rate: Effective mass flow ṁ (kg/s), must be positive
        m_i: Mass at the start of the burn (kg)
        m_f: Mass at the end of the burn (kg)

    Returns:
        The change in velocity as a PolarVector
    """
    dv = rocket_equation_delta_v(exhaust_velocity, m_i, m_f)
    dt = burn_duration(mass_flow_rate, m_i, m_f)
    thrust_effect = PolarVector(dv, thrust_direction)
    gravity_effect = PolarVector(-C.G0 * dt, 0.0)  # Straight down
    return thrust_effect + gravity_effect


def burn_position_change(speed: float, thrust_direction: float, exhaust_velocity: float,
                         mass_flow_rate: float, m_i: float, m_f: float) -> PolarVector:
    """
    Displacement over a burn, from integrating the rocket equation over time.

    Args:
        speed: Speed at the start of the burn u (m/s)
        thrust_direction: Direction of thrust from vertical (rad)
        exhaust_velocity: Effective exhaust velocity Ve (m/s)
        mass_flow_rate: Effective mass flow ṁ (kg/s), must be positive
        m_i: Mass at the start of the burn (kg)
        m_f: Mass at the end of the burn (kg)

    Returns:
        The change in position as a PolarVector
    """
    dt = burn_duration(mass_flow_rate, m_i, m_f)
    ds = speed * dt + exhaust_velocity * (
        dt + (m_f * float(np.log(m_f / m_i))) / mass_flow_rate
    )
    gravity_effect = PolarVector(-0.5 * C.G0 * dt * dt, 0.0)
    return PolarVector(ds, thrust_direction) + gravity_effect


def compute_burn_change(velocity: PolarVector, thrust_direction: float,
                        exhaust_velocity: float, mass_flow_rate: float,
                        m_i: float, m_f: float) -> StateChange:
    """Velocity and position increments for a burn from m_i to m_f."""
    dv = burn_velocity_change(thrust_direction, exhaust_velocity, mass_flow_rate, m_i, m_f)
    ds = burn_position_change(velocity.magnitude, thrust_direction, exhaust_velocity,
                              mass_flow_rate, m_i, m_f)
    return StateChange(dv=dv, ds=ds)


def free_fall_change(velocity: PolarVector, dt: float) -> StateChange:
    """
    Velocity and position increments for an unpowered interval.

    Args:
        velocity: Velocity at the start of the interval
        dt: Length of the interval (s)
    """
    dv = PolarVector.from_cartesian(0.0, -C.G0 * dt)
    dy = velocity.y * dt - 0.5 * C.G0 * dt * dt
    dx = velocity.x * dt
    ds = PolarVector.from_cartesian(dx, dy)
    return StateChange(dv=dv, ds=ds)
