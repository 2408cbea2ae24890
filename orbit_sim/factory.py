"""
Orbit Simulator - Vehicle Construction

Builds engines and vehicles from plain specification records, the same
numbers a stored rocket definition would carry.

For a multi-stage rocket each stage carries everything above it as payload:
the top stage carries the rocket's payload, the stage below it carries the
full mass of the top stage, and so on down to the first stage.
"""

from dataclasses import dataclass, field
from typing import List

from . import constants as C
from .engine import Engine
from .multistage import MultiStageVehicle
from .vehicle import SingleStageVehicle


@dataclass(frozen=True)
class EngineSpec:
    """Engine specification: mass (kg), Isp (s), mass flow (kg/s)."""
    name: str
    mass: float
    specific_impulse: float
    mass_flow_rate: float


@dataclass(frozen=True)
class StageSpec:
    """Stage specification: engine plus propellant and structural mass (kg)."""
    name: str
    engine: EngineSpec
    propellant_mass: float
    structural_mass: float

    @property
    def total_mass(self) -> float:
        """Stage mass without payload (kg)."""
        return self.propellant_mass + self.structural_mass + self.engine.mass


@dataclass(frozen=True)
class RocketSpec:
    """A rocket: payload (kg) and stages from bottom to top."""
    name: str
    payload_mass: float = 0.0
    stages: List[StageSpec] = field(default_factory=list)

    @property
    def num_stages(self) -> int:
        return len(self.stages)


def build_engine(spec: EngineSpec) -> Engine:
    """Create an Engine from its specification."""
    return Engine(spec.mass, spec.specific_impulse, spec.mass_flow_rate)


def build_single_stage(spec: StageSpec, payload_mass: float) -> SingleStageVehicle:
    """Create a SingleStageVehicle at rest on the ground."""
    engine = build_engine(spec.engine)
    return SingleStageVehicle(engine, payload_mass, spec.propellant_mass, spec.structural_mass)


def build_multi_stage(spec: RocketSpec) -> MultiStageVehicle:
    """
    Create a MultiStageVehicle from a rocket specification.

    Stages are built from the top down so each lower stage's payload is the
    current mass of the stack above it.

    Raises:
        ValueError: If the rocket has no stages
    """
    if not spec.stages:
        raise ValueError(f"Rocket '{spec.name}' has no stages")
    payload = spec.payload_mass
    built = []
    for stage_spec in reversed(spec.stages):
        stage = build_single_stage(stage_spec, payload)
        payload = stage.current_mass
        built.append(stage)
    built.reverse()
    return MultiStageVehicle(built)


# =============================================================================
# Reference vehicle
# =============================================================================

RD180 = EngineSpec(
    name="RD180",
    mass=C.RD180_MASS,
    specific_impulse=C.RD180_ISP,
    mass_flow_rate=C.RD180_MASS_FLOW_RATE,
)

RL10 = EngineSpec(
    name="RL10",
    mass=C.RL10_MASS,
    specific_impulse=C.RL10_ISP,
    mass_flow_rate=C.RL10_MASS_FLOW_RATE,
)

ATLAS_V_STAGE1 = StageSpec(
    name="Atlas V Stage 1",
    engine=RD180,
    propellant_mass=C.ATLAS_V_STAGE1_PROPELLANT_MASS,
    structural_mass=C.ATLAS_V_STAGE1_STRUCTURAL_MASS,
)

ATLAS_V_STAGE2 = StageSpec(
    name="Atlas V Stage 2",
    engine=RL10,
    propellant_mass=C.ATLAS_V_STAGE2_PROPELLANT_MASS,
    structural_mass=C.ATLAS_V_STAGE2_STRUCTURAL_MASS,
)


def atlas_v(payload_mass: float = C.DEFAULT_PAYLOAD_MASS) -> RocketSpec:
    """The two-stage Atlas V reference rocket."""
    return RocketSpec(
        name="Atlas V",
        payload_mass=payload_mass,
        stages=[ATLAS_V_STAGE1, ATLAS_V_STAGE2],
    )
