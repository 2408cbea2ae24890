"""
Orbit Simulator - Vehicle Contract and Single-Stage Integrator

SingleStageVehicle models one rocket stage under the ideal rocket equation,
including uniform gravity but not air resistance. Time steps are integrated
in closed form (see dynamics.py), so the state after a long step is the same
as after many short ones covering the same interval.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from . import constants as C
from .dynamics import compute_burn_change, free_fall_change
from .engine import Engine
from .mass import (
    clamp_non_negative,
    compute_burn_time,
    compute_current_mass,
    compute_fuel_burn,
    compute_mass_flow_rate,
)
from .state import VehicleState
from .vector import Point, PolarVector, ZERO_VECTOR

logger = logging.getLogger(__name__)


@runtime_checkable
class Vehicle(Protocol):
    """Operations shared by single-stage and multi-stage vehicles."""

    @property
    def position(self) -> Point: ...

    @property
    def velocity(self) -> PolarVector: ...

    @property
    def thrust(self) -> PolarVector: ...

    @property
    def throttle(self) -> float: ...

    @property
    def gimbal_angle(self) -> float: ...

    @property
    def fuel_level(self) -> float: ...

    @property
    def current_mass(self) -> float: ...

    @property
    def elapsed_time(self) -> float: ...

    @property
    def can_eject(self) -> bool: ...

    @property
    def current_stage_index(self) -> int: ...

    @property
    def num_stages(self) -> int: ...

    @property
    def is_crashed(self) -> bool: ...

    def advance_time(self, dt: float) -> None: ...

    def set_throttle(self, value: float) -> None: ...

    def set_gimbal(self, angle: float) -> None: ...

    def eject_stage(self) -> bool: ...


class SingleStageVehicle:
    """
    A single-stage rocket launched in vacuum over flat ground.

    Mass is the sum of payload, structure, remaining fuel and the engine. The
    engine is owned by the vehicle: the one passed in is copied.

    Args:
        engine: The stage's engine
        payload_mass: Mass carried on top of the stage (kg)
        fuel: Initial propellant (kg)
        structural_mass: Structure mass excluding the engine (kg)
        position: Starting position (default: on the ground at the origin)
        velocity: Starting velocity (default: at rest)

    Negative masses and fuel are treated as zero.

    Raises:
        ValueError: If the dry mass (payload, structure and engine) is not
            positive
    """

    def __init__(self, engine: Engine, payload_mass: float, fuel: float,
                 structural_mass: float, position: Optional[Point] = None,
                 velocity: Optional[PolarVector] = None):
        self._engine = engine.copy()
        self._payload_mass = clamp_non_negative(payload_mass)
        self._structural_mass = clamp_non_negative(structural_mass)
        self._fuel_level = clamp_non_negative(fuel)
        dry_mass = self._payload_mass + self._structural_mass + self._engine.mass
        if dry_mass <= 0.0:
            raise ValueError(f"Dry mass must be positive, got {dry_mass}")
        self._throttle = C.DEFAULT_THROTTLE
        self._elapsed_time = 0.0
        self._max_height = 0.0
        self._position = Point()
        self._velocity = ZERO_VECTOR
        if position is not None:
            self._max_height = position.y
            self._position = position
        if velocity is not None:
            self._velocity = velocity
        self._initial_mass = self.current_mass

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def position(self) -> Point:
        return self._position

    @position.setter
    def position(self, value: Point):
        self._position = value
        if value.y > self._max_height:
            self._max_height = value.y

    @property
    def velocity(self) -> PolarVector:
        return self._velocity

    @property
    def fuel_level(self) -> float:
        return self._fuel_level

    @fuel_level.setter
    def fuel_level(self, value: float):
        # Fuel can never go negative
        self._fuel_level = clamp_non_negative(value)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def payload_mass(self) -> float:
        return self._payload_mass

    @property
    def structural_mass(self) -> float:
        return self._structural_mass

    @property
    def initial_mass(self) -> float:
        """Mass at construction (kg)."""
        return self._initial_mass

    @property
    def max_height(self) -> float:
        """Highest point reached so far (m)."""
        return self._max_height

    @property
    def current_mass(self) -> float:
        return compute_current_mass(self._payload_mass, self._structural_mass,
                                    self._fuel_level, self._engine.mass)

    @property
    def throttle(self) -> float:
        return self._throttle

    @throttle.setter
    def throttle(self, value: float):
        if not C.MIN_THROTTLE <= value <= C.MAX_THROTTLE:
            raise ValueError(f"Throttle must be between 0 and 1, got {value}")
        self._throttle = float(value)

    @property
    def gimbal_angle(self) -> float:
        return self._engine.gimbal_angle

    @property
    def mass_flow_rate(self) -> float:
        """Engine mass flow scaled by throttle (kg/s)."""
        return compute_mass_flow_rate(self._engine.mass_flow_rate, self._throttle)

    @property
    def exhaust_velocity(self) -> float:
        """Effective exhaust velocity Isp * g0 (m/s)."""
        return self._engine.effective_exhaust_velocity

    @property
    def thrust_direction(self) -> float:
        """Gimbal angle relative to the current direction of travel (rad)."""
        return self._engine.gimbal_angle + self._velocity.direction

    @property
    def thrust(self) -> PolarVector:
        """Thrust (N); zero once the fuel has run out."""
        if self._fuel_level > 0:
            return PolarVector(self.mass_flow_rate * self.exhaust_velocity, self.thrust_direction)
        return ZERO_VECTOR

    @property
    def elapsed_time(self) -> float:
        return self._elapsed_time

    @property
    def is_crashed(self) -> bool:
        return self._position.y <= 0 and self._elapsed_time > 0

    @property
    def can_eject(self) -> bool:
        return False

    @property
    def current_stage_index(self) -> int:
        return 0

    @property
    def num_stages(self) -> int:
        return 1

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def advance_time(self, dt: float) -> None:
        """
        Advance the simulation by dt seconds.

        Steps of zero or negative length are ignored.
        """
        if dt <= 0:
            return
        self._increment_time(dt)

    def set_throttle(self, value: float) -> None:
        """
        Set the throttle.

        Raises:
            ValueError: If value is outside [0, 1]; the throttle is unchanged.
        """
        self.throttle = value

    def set_gimbal(self, angle: float) -> None:
        """
        Set the engine gimbal angle (rad).

        Raises:
            ValueError: If the angle is outside (-pi/2, pi/2).
        """
        self._engine.gimbal_angle = angle

    def eject_stage(self) -> bool:
        """A single stage has nothing to eject."""
        return False

    # ------------------------------------------------------------------
    # Integration
    # ------------------------------------------------------------------

    def _increment_time(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"Time step dt cannot be negative, got {dt}")

        mdot = self.mass_flow_rate
        if self._fuel_level > 0 and mdot != 0:
            dm = compute_fuel_burn(mdot, dt)
            if self._fuel_level >= dm:
                self._burn_fuel(dm)
            else:
                # Fuel runs out part way through the step
                remaining = self._fuel_level
                burn_time = compute_burn_time(remaining, mdot)
                logger.debug(f"Fuel exhausted {burn_time:.3f}s into a {dt:.3f}s step "
                             f"at t={self._elapsed_time:.2f}s")
                self._burn_fuel(remaining)
                self._fall(dt - burn_time)
        else:
            self._fall(dt)
        self._elapsed_time += dt

    def _burn_fuel(self, dm: float) -> None:
        """
        Burn dm kg of fuel at the current mass flow, moving the vehicle.

        Raises:
            ValueError: If dm exceeds the remaining fuel
        """
        if dm > self._fuel_level:
            raise ValueError(
                f"Cannot burn {dm:.3f} kg of fuel with {self._fuel_level:.3f} kg remaining"
            )
        m_i = self.current_mass
        m_f = m_i - dm
        change = compute_burn_change(self._velocity, self.thrust_direction,
                                     self.exhaust_velocity, self.mass_flow_rate, m_i, m_f)
        # Apply only after both changes have been computed
        self._velocity = self._velocity + change.dv
        self.position = self._position + change.ds
        self.fuel_level = self._fuel_level - dm

    def _fall(self, dt: float) -> None:
        """Move the vehicle under gravity alone for dt seconds."""
        change = free_fall_change(self._velocity, dt)
        self._velocity = self._velocity + change.dv
        self.position = self._position + change.ds

    # ------------------------------------------------------------------
    # State transfer
    # ------------------------------------------------------------------

    def set_state(self, position: Point, velocity: PolarVector, time: float = 0.0) -> None:
        """Place the vehicle at a given position, velocity and time."""
        self.position = position
        self._velocity = velocity
        self._elapsed_time = float(time)

    def copy_state_from(self, vehicle: Vehicle) -> None:
        """Take over the kinematic state (position, velocity, time) of another vehicle."""
        self.set_state(vehicle.position, vehicle.velocity, vehicle.elapsed_time)

    def snapshot(self) -> VehicleState:
        return VehicleState.from_vehicle(self)

    def __str__(self) -> str:
        return (
            f"Time:{self._elapsed_time:.2f}, Height:{self._position.y:.2f}, "
            f"Speed:{self._velocity.magnitude:.2f}, Pitch:{self._velocity.direction:.2f}, "
            f"FuelLevel:{self._fuel_level:.2f}, Throttle:{self._throttle * 100:.2f}%, "
            f"Mass:{self.current_mass:.2f}, Thrust:{self.thrust.magnitude:.2f}"
        )
