"""
Orbit Simulator - Multi-Stage Vehicle

Sequences an ordered list of single stages. Only the active stage is ever
integrated; every read and command goes to it. Ejecting a stage hands the
current position, velocity and time to the next stage and drops everything
else about the spent stage (its structure and any leftover fuel).

Stage state machine:

    0 --eject--> 1 --eject--> ... --eject--> N-1   (eject disabled)
"""

import logging
from typing import Iterable, Tuple

from .state import VehicleState
from .vector import Point, PolarVector
from .vehicle import SingleStageVehicle

logger = logging.getLogger(__name__)


class MultiStageVehicle:
    """
    A rocket made of stages fired in order, first stage first.

    Args:
        stages: Stages from bottom (fired first) to top

    Raises:
        ValueError: If no stages are given
    """

    def __init__(self, stages: Iterable[SingleStageVehicle]):
        self._stages: Tuple[SingleStageVehicle, ...] = tuple(stages)
        if not self._stages:
            raise ValueError("A multi-stage vehicle needs at least one stage")
        self._stage_index = 0

    @property
    def stages(self) -> Tuple[SingleStageVehicle, ...]:
        return self._stages

    @property
    def active_stage(self) -> SingleStageVehicle:
        return self._stages[self._stage_index]

    @property
    def current_stage_index(self) -> int:
        """Zero-based index of the active stage."""
        return self._stage_index

    @property
    def num_stages(self) -> int:
        return len(self._stages)

    @property
    def num_stages_left(self) -> int:
        """Stages not yet ejected, including the active one."""
        return self.num_stages - self._stage_index

    @property
    def can_eject(self) -> bool:
        """False once the final stage is active."""
        return self._stage_index < len(self._stages) - 1

    @property
    def total_fuel(self) -> float:
        """Fuel in the active stage and every stage above it (kg)."""
        return sum(stage.fuel_level for stage in self._stages[self._stage_index:])

    # ------------------------------------------------------------------
    # Read-through to the active stage
    # ------------------------------------------------------------------

    @property
    def position(self) -> Point:
        return self.active_stage.position

    @property
    def velocity(self) -> PolarVector:
        return self.active_stage.velocity

    @property
    def thrust(self) -> PolarVector:
        return self.active_stage.thrust

    @property
    def throttle(self) -> float:
        return self.active_stage.throttle

    @throttle.setter
    def throttle(self, value: float):
        self.active_stage.throttle = value

    @property
    def gimbal_angle(self) -> float:
        return self.active_stage.gimbal_angle

    @property
    def fuel_level(self) -> float:
        return self.active_stage.fuel_level

    @property
    def current_mass(self) -> float:
        return self.active_stage.current_mass

    @property
    def elapsed_time(self) -> float:
        return self.active_stage.elapsed_time

    @property
    def max_height(self) -> float:
        return max(stage.max_height for stage in self._stages[:self._stage_index + 1])

    @property
    def is_crashed(self) -> bool:
        return self.position.y <= 0 and self.elapsed_time > 0

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def advance_time(self, dt: float) -> None:
        self.active_stage.advance_time(dt)

    def set_throttle(self, value: float) -> None:
        self.active_stage.set_throttle(value)

    def set_gimbal(self, angle: float) -> None:
        self.active_stage.set_gimbal(angle)

    def eject_stage(self) -> bool:
        """
        Separate the active stage and fire the next one.

        Returns:
            True if a stage was ejected, False if already on the final stage
        """
        if not self.can_eject:
            return False
        spent = self.active_stage
        next_stage = self._stages[self._stage_index + 1]
        next_stage.copy_state_from(spent)
        self._stage_index += 1
        logger.debug(f"Stage {self._stage_index} ejected at t={spent.elapsed_time:.2f}s "
                     f"with {spent.fuel_level:.1f} kg fuel left")
        return True

    def snapshot(self) -> VehicleState:
        return VehicleState.from_vehicle(self)

    def __str__(self) -> str:
        active = self.active_stage
        return (
            f"Time:{self.elapsed_time:.2f}, Stage:{self._stage_index + 1}, "
            f"Height:{self.position.y:.2f}, Speed:{self.velocity.magnitude:.2f}, "
            f"Total Fuel:{self.total_fuel:.2f}, Active Fuel:{active.fuel_level:.2f}, "
            f"Throttle:{self.throttle:.2%}, Mass:{self.current_mass:.2f}, "
            f"Thrust:{active.thrust.magnitude:.2f}"
        )
