import dataclasses

import pytest

from orbit_sim import constants as C
from orbit_sim import factory
from orbit_sim.multistage import MultiStageVehicle
from orbit_sim.vehicle import SingleStageVehicle


def test_build_engine():
    engine = factory.build_engine(factory.RD180)
    assert engine.mass == C.RD180_MASS
    assert engine.specific_impulse == C.RD180_ISP
    assert engine.mass_flow_rate == C.RD180_MASS_FLOW_RATE
    assert engine.gimbal_angle == 0.0


def test_stage_total_mass():
    assert factory.ATLAS_V_STAGE2.total_mass == pytest.approx(20830.0 + 2079.0 + 167.8)


def test_build_single_stage():
    stage = factory.build_single_stage(factory.ATLAS_V_STAGE1, 400.0)
    assert isinstance(stage, SingleStageVehicle)
    assert stage.payload_mass == 400.0
    assert stage.fuel_level == C.ATLAS_V_STAGE1_PROPELLANT_MASS
    assert stage.current_mass == pytest.approx(305539.0)


def test_build_multi_stage_chains_payloads():
    rocket = factory.build_multi_stage(factory.atlas_v(payload_mass=1000.0))
    assert isinstance(rocket, MultiStageVehicle)
    lower, upper = rocket.stages
    assert upper.payload_mass == 1000.0
    assert lower.payload_mass == pytest.approx(upper.current_mass)
    assert lower.engine.specific_impulse == C.RD180_ISP
    assert upper.engine.specific_impulse == C.RL10_ISP


def test_build_multi_stage_single_entry():
    spec = factory.RocketSpec(name="Stage 1 only", payload_mass=400.0,
                              stages=[factory.ATLAS_V_STAGE1])
    rocket = factory.build_multi_stage(spec)
    assert rocket.num_stages == 1
    assert not rocket.can_eject
    assert rocket.current_mass == pytest.approx(305539.0)


def test_build_multi_stage_requires_stages():
    with pytest.raises(ValueError):
        factory.build_multi_stage(factory.RocketSpec(name="Empty"))


def test_atlas_v_spec():
    spec = factory.atlas_v()
    assert spec.payload_mass == C.DEFAULT_PAYLOAD_MASS
    assert spec.num_stages == 2
    assert spec.stages[0].engine.name == "RD180"
    assert spec.stages[1].engine.name == "RL10"


def test_specs_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        factory.RD180.mass = 1.0
