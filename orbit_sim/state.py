"""
Orbit Simulator - Vehicle State Snapshot

A read-only record of everything the presentation side observes about a
vehicle after an update. Vehicles own their live state; snapshots are taken
for telemetry and comparison and never fed back into the integrator.
"""

from dataclasses import dataclass, field, replace

import numpy as np

from .utils import convert_metres_to_km
from .vector import Point, PolarVector


@dataclass
class VehicleState:
    """
    Snapshot of a vehicle's observable state.

    Attributes:
        position: Position on the flat-ground plane (m)
        velocity: Velocity (m/s)
        thrust: Thrust (N)
        fuel_level: Propellant in the active stage (kg)
        current_mass: Mass of the active stage stack (kg)
        throttle: Throttle setting (0 to 1)
        elapsed_time: Time since launch (s)
        stage_index: Zero-based active stage
        is_crashed: Whether the vehicle has hit the ground
    """

    position: Point = field(default_factory=Point)
    velocity: PolarVector = field(default_factory=PolarVector)
    thrust: PolarVector = field(default_factory=PolarVector)
    fuel_level: float = 0.0
    current_mass: float = 0.0
    throttle: float = 1.0
    elapsed_time: float = 0.0
    stage_index: int = 0
    is_crashed: bool = False

    @classmethod
    def from_vehicle(cls, vehicle) -> 'VehicleState':
        """Capture the current state of any vehicle."""
        return cls(
            position=vehicle.position,
            velocity=vehicle.velocity,
            thrust=vehicle.thrust,
            fuel_level=vehicle.fuel_level,
            current_mass=vehicle.current_mass,
            throttle=vehicle.throttle,
            elapsed_time=vehicle.elapsed_time,
            stage_index=vehicle.current_stage_index,
            is_crashed=vehicle.is_crashed,
        )

    def copy(self) -> 'VehicleState':
        return replace(self)

    def to_vector(self) -> np.ndarray:
        """Flatten to [x, y, vx, vy, fuel, mass, t]."""
        return np.array([
            self.position.x, self.position.y,
            self.velocity.x, self.velocity.y,
            self.fuel_level, self.current_mass, self.elapsed_time,
        ], dtype=np.float64)

    @property
    def height(self) -> float:
        """Height above ground (m)."""
        return self.position.y

    @property
    def speed(self) -> float:
        """Magnitude of velocity (m/s)."""
        return self.velocity.magnitude

    def __str__(self) -> str:
        """Human-readable state summary."""
        return (
            f"VehicleState(t={self.elapsed_time:.2f}s, "
            f"stage={self.stage_index + 1}, "
            f"h={convert_metres_to_km(self.height):.2f}km, "
            f"v={self.speed:.1f}m/s, "
            f"fuel={self.fuel_level:.1f}kg, "
            f"m={self.current_mass:.1f}kg)"
        )
