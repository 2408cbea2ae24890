"""
Orbit Simulator - Rocket Engine

Fixed propulsion specification (engine mass, specific impulse, mass flow
rate) plus a gimbal angle that can be changed in flight.
"""

import numpy as np

from . import constants as C


class Engine:
    """
    A rocket engine.

    Attributes:
        mass: Dry mass of the engine (kg)
        specific_impulse: Specific impulse (s)
        mass_flow_rate: Propellant mass flow at full throttle (kg/s)
        gimbal_angle: Thrust deflection from the vehicle axis (rad),
            strictly inside (-pi/2, pi/2)
    """

    def __init__(self, mass: float, specific_impulse: float, mass_flow_rate: float):
        self._mass = float(mass)
        self._specific_impulse = float(specific_impulse)
        self._mass_flow_rate = float(mass_flow_rate)
        self._gimbal_angle = 0.0

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def specific_impulse(self) -> float:
        return self._specific_impulse

    @property
    def mass_flow_rate(self) -> float:
        return self._mass_flow_rate

    @property
    def gimbal_angle(self) -> float:
        return self._gimbal_angle

    @gimbal_angle.setter
    def gimbal_angle(self, value: float):
        """
        Set the gimbal angle.

        Raises:
            ValueError: If the angle, reduced modulo 2*pi, does not point
                into the forward hemisphere. The angle is left unchanged.
        """
        angle = float(np.fmod(value, C.TWO_PI))
        if not -C.MAX_GIMBAL_ANGLE < angle < C.MAX_GIMBAL_ANGLE:
            raise ValueError(
                f"Gimbal angle must point up the rocket's axis, got {value:.4f} rad"
            )
        self._gimbal_angle = angle

    @property
    def effective_exhaust_velocity(self) -> float:
        """Ve = Isp * g0 (m/s)."""
        return self._specific_impulse * C.G0

    @property
    def max_thrust(self) -> float:
        """Thrust at full throttle (N)."""
        return self._specific_impulse * self._mass_flow_rate * C.G0

    def copy(self) -> 'Engine':
        """Create an independent engine with the same specification and gimbal."""
        engine = Engine(self._mass, self._specific_impulse, self._mass_flow_rate)
        engine._gimbal_angle = self._gimbal_angle
        return engine

    def __repr__(self) -> str:
        return (
            f"Engine(mass={self._mass}, specific_impulse={self._specific_impulse}, "
            f"mass_flow_rate={self._mass_flow_rate}, gimbal_angle={self._gimbal_angle:.4f})"
        )
