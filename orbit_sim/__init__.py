"""
Orbit Simulator Package

A closed-form ideal-rocket integrator for single- and multi-stage vehicles
launched vertically over flat ground in uniform gravity, with no air
resistance.

Modules:
    - constants: Physical constants, control limits and reference vehicle data
    - utils: Angle canonicalization, unit conversions, orbital speeds
    - vector: PolarVector and Point
    - engine: Rocket engine with a gimbal
    - mass: Mass and propellant bookkeeping
    - dynamics: Closed-form burn and free-fall equations of motion
    - state: VehicleState snapshot
    - vehicle: Vehicle contract and SingleStageVehicle
    - multistage: MultiStageVehicle
    - factory: Building vehicles from specification records
    - config: SimulationConfig for headless runs
    - validation: Physics validation checks
    - simulation: Headless simulation driver
    - plotting: Telemetry plots
    - cli: Command-line entry point
"""

from .vector import PolarVector, Point, ZERO_VECTOR, ORIGIN
from .engine import Engine
from .state import VehicleState
from .vehicle import Vehicle, SingleStageVehicle
from .multistage import MultiStageVehicle
from .factory import (
    EngineSpec, StageSpec, RocketSpec,
    build_engine, build_single_stage, build_multi_stage, atlas_v,
)
from .config import SimulationConfig, create_default_config, create_test_config
from .simulation import run_simulation, SimulationLog, SimulationResult

__version__ = "1.0.0"

__all__ = [
    'PolarVector',
    'Point',
    'ZERO_VECTOR',
    'ORIGIN',
    'Engine',
    'VehicleState',
    'Vehicle',
    'SingleStageVehicle',
    'MultiStageVehicle',
    'EngineSpec',
    'StageSpec',
    'RocketSpec',
    'build_engine',
    'build_single_stage',
    'build_multi_stage',
    'atlas_v',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
    'run_simulation',
    'SimulationLog',
    'SimulationResult',
]
