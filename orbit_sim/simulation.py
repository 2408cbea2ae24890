"""
Orbit Simulator - Headless Simulation Driver

This module runs a vehicle forward at a fixed step with:
- Mission event detection (full burn, atmosphere layers, staging)
- Optional automatic stage ejection on fuel exhaustion
- Per-step validation and telemetry logging
- Logging framework for diagnostics

The driver only uses the public vehicle contract: advance_time,
set_throttle, set_gimbal, eject_stage and state reads.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .state import VehicleState
from .utils import convert_metres_to_km, convert_mps_to_kmph, convert_radians_to_degrees
from .validation import ValidationError, validate_state
from .vehicle import Vehicle

# Configure module logger
logger = logging.getLogger(__name__)

FULL_BURN_MESSAGE = "Full Burn Reached"
UPPER_ATMOSPHERE_MESSAGE = "Reached the upper atmosphere"
ESCAPED_ATMOSPHERE_MESSAGE = "Escaped Earth's atmosphere"

REASON_CRASHED = "Vehicle crashed"
REASON_TARGET_HEIGHT = "Target height reached"
REASON_MAX_TIME = "Maximum simulation time reached"


@dataclass
class SimulationLog:
    """Container for logged simulation data."""
    time: List[float] = field(default_factory=list)
    height: List[float] = field(default_factory=list)       # km
    downrange: List[float] = field(default_factory=list)    # km
    speed: List[float] = field(default_factory=list)        # m/s
    signed_speed_kmph: List[float] = field(default_factory=list)
    direction_deg: List[float] = field(default_factory=list)
    fuel: List[float] = field(default_factory=list)         # kg, active stage
    mass: List[float] = field(default_factory=list)         # kg
    thrust: List[float] = field(default_factory=list)       # N
    throttle: List[float] = field(default_factory=list)
    gimbal_deg: List[float] = field(default_factory=list)
    stage_number: List[int] = field(default_factory=list)
    events: List[Tuple[float, str]] = field(default_factory=list)

    def append(self, vehicle: Vehicle):
        """Log data from current timestep."""
        velocity = vehicle.velocity
        speed_kmph = convert_mps_to_kmph(velocity.magnitude)
        self.time.append(vehicle.elapsed_time)
        self.height.append(convert_metres_to_km(vehicle.position.y))
        self.downrange.append(convert_metres_to_km(vehicle.position.x))
        self.speed.append(velocity.magnitude)
        self.signed_speed_kmph.append(-speed_kmph if velocity.is_downward else speed_kmph)
        self.direction_deg.append(convert_radians_to_degrees(velocity.direction))
        self.fuel.append(vehicle.fuel_level)
        self.mass.append(vehicle.current_mass)
        self.thrust.append(vehicle.thrust.magnitude)
        self.throttle.append(vehicle.throttle)
        self.gimbal_deg.append(convert_radians_to_degrees(vehicle.gimbal_angle))
        self.stage_number.append(vehicle.current_stage_index + 1)

    def add_event(self, t: float, message: str):
        self.events.append((t, message))
        logger.info(f"t={t:.2f}s: {message}")

    def to_arrays(self) -> Dict[str, np.ndarray]:
        """Telemetry series as numpy arrays, keyed by field name."""
        return {
            name: np.asarray(values, dtype=np.float64)
            for name, values in vars(self).items()
            if name != 'events'
        }

    def __len__(self) -> int:
        return len(self.time)


@dataclass
class SimulationResult:
    """Outcome of a headless run."""
    final_state: VehicleState
    log: SimulationLog
    reason: str

    @property
    def event_messages(self) -> List[str]:
        return [message for _, message in self.log.events]


class MissionMonitor:
    """
    Tracks which one-off mission events have already been reported.
    """

    def __init__(self):
        self.notified_full_burn = False
        self.notified_upper_atmosphere = False
        self.notified_escaped_atmosphere = False

    def check(self, vehicle: Vehicle) -> List[str]:
        """Return the messages for events first reached on this update."""
        messages = []
        height_km = max(0.0, convert_metres_to_km(vehicle.position.y))
        if vehicle.fuel_level == 0 and not self.notified_full_burn:
            messages.append(FULL_BURN_MESSAGE)
            self.notified_full_burn = True
        if height_km >= C.TROPOSPHERE_EDGE and not self.notified_upper_atmosphere:
            messages.append(UPPER_ATMOSPHERE_MESSAGE)
            self.notified_upper_atmosphere = True
        if height_km >= C.ATMOSPHERE_EDGE and not self.notified_escaped_atmosphere:
            messages.append(ESCAPED_ATMOSPHERE_MESSAGE)
            self.notified_escaped_atmosphere = True
        return messages

    def stage_ejected(self):
        """A fresh stage has fuel again."""
        self.notified_full_burn = False


def check_termination(vehicle: Vehicle, config: SimulationConfig) -> Tuple[bool, str]:
    """
    Check whether the run is over.

    Returns:
        (should_terminate, reason)
    """
    if vehicle.is_crashed:
        return True, REASON_CRASHED
    if convert_metres_to_km(vehicle.position.y) >= config.target_height_km:
        return True, REASON_TARGET_HEIGHT
    if vehicle.elapsed_time >= config.max_time - C.ZERO_TOLERANCE:
        return True, REASON_MAX_TIME
    return False, ""


def run_simulation(vehicle: Vehicle, config: Optional[SimulationConfig] = None,
                   controller: Optional[Callable[[Vehicle], None]] = None) -> SimulationResult:
    """
    Run a vehicle until it crashes, reaches the target height or runs out of time.

    Args:
        vehicle: The vehicle to fly; it is advanced in place
        config: SimulationConfig instance. If None a default is created.
        controller: Optional callback invoked before every update, free to
            call set_throttle / set_gimbal / eject_stage on the vehicle

    Returns:
        SimulationResult with the final state, telemetry and termination reason

    Raises:
        ValueError: If the configured step size is not positive
    """
    if config is None:
        config = create_default_config()

    dt = config.step_size
    if dt <= 0:
        raise ValueError(f"Step size must be positive, got {dt}")

    log = SimulationLog()
    monitor = MissionMonitor()
    log.append(vehicle)

    logger.info(f"Starting simulation: dt={dt}s, max_time={config.max_time}s, "
                f"stages={vehicle.num_stages}")
    logger.debug(f"Initial state: {VehicleState.from_vehicle(vehicle)}")

    if config.verbose:
        print("\n" + "=" * 72)
        print(f"ORBIT SIMULATION    | dt={dt}s | T_max={config.max_time}s | "
              f"target={config.target_height_km}km")
        print("=" * 72)
        print(f"{'Time (s)':^10} | {'Height (km)':^12} | {'Speed (m/s)':^12} | "
              f"{'Fuel (kg)':^12} | {'Stage':^6}")
        print("-" * 72)

    start_time = time.time()
    step_count = 0
    last_print_time = 0.0
    reason = ""

    while True:
        if controller is not None:
            controller(vehicle)

        vehicle.advance_time(dt)
        step_count += 1
        log.append(vehicle)

        if config.validate:
            try:
                validate_state(vehicle)
            except ValidationError as e:
                logger.error(f"Validation failed: {e}")
                reason = f"Validation failure: {e}"
                break

        for message in monitor.check(vehicle):
            log.add_event(vehicle.elapsed_time, message)
            if message == FULL_BURN_MESSAGE and config.auto_eject and vehicle.can_eject:
                if vehicle.eject_stage():
                    monitor.stage_ejected()
                    log.add_event(vehicle.elapsed_time,
                                  f"Stage {vehicle.current_stage_index} ejected")

        should_terminate, reason = check_termination(vehicle, config)
        if should_terminate:
            if reason in (REASON_CRASHED, REASON_TARGET_HEIGHT):
                log.add_event(vehicle.elapsed_time, reason)
            logger.info(f"Simulation terminated: {reason}")
            break

        if config.verbose and vehicle.elapsed_time - last_print_time >= 10.0:
            _print_status(vehicle)
            last_print_time = vehicle.elapsed_time

    elapsed = time.time() - start_time
    final_state = VehicleState.from_vehicle(vehicle)
    _log_completion(final_state, step_count, elapsed, config.verbose, reason)

    return SimulationResult(final_state=final_state, log=log, reason=reason)


def _print_status(vehicle: Vehicle):
    """Print a formatted status row."""
    msg = (f"{vehicle.elapsed_time:10.1f} | "
           f"{convert_metres_to_km(vehicle.position.y):12.2f} | "
           f"{vehicle.velocity.magnitude:12.1f} | {vehicle.fuel_level:12.1f} | "
           f"{vehicle.current_stage_index + 1:^6d}")
    print(msg)
    logger.debug(msg)


def _log_completion(state: VehicleState, steps: int, elapsed: float,
                    verbose: bool, reason: str):
    """Log and print the final summary."""
    logger.info(f"Simulation complete: {steps} steps in {elapsed:.2f}s")
    logger.info(f"Final state: {state}")

    if verbose:
        print("-" * 72)
        print(f"SIMULATION COMPLETED: {reason}")
        print("-" * 72)
        print(f"Final Time:   {state.elapsed_time:.2f} s")
        print(f"Final Height: {convert_metres_to_km(state.height):.2f} km")
        print(f"Final Speed:  {state.speed:.2f} m/s")
        print(f"Final Mass:   {state.current_mass:.1f} kg")
        print(f"Stage:        {state.stage_index + 1}")
        print("-" * 72)
