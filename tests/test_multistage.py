"""Tests for MultiStageVehicle and stage ejection."""
import pytest

from orbit_sim import constants as C
from orbit_sim.factory import atlas_v, build_multi_stage
from orbit_sim.multistage import MultiStageVehicle
from orbit_sim.vehicle import Vehicle

STAGE2_MASS = (C.ATLAS_V_STAGE2_PROPELLANT_MASS + C.ATLAS_V_STAGE2_STRUCTURAL_MASS
               + C.RL10_MASS)
STAGE1_MASS = (C.ATLAS_V_STAGE1_PROPELLANT_MASS + C.ATLAS_V_STAGE1_STRUCTURAL_MASS
               + C.RD180_MASS)


@pytest.fixture
def rocket():
    return build_multi_stage(atlas_v())


def test_initial_state(rocket):
    assert rocket.num_stages == 2
    assert rocket.num_stages_left == 2
    assert rocket.current_stage_index == 0
    assert rocket.can_eject
    assert rocket.elapsed_time == 0.0
    assert not rocket.is_crashed
    assert rocket.current_mass == pytest.approx(STAGE1_MASS + STAGE2_MASS + C.DEFAULT_PAYLOAD_MASS)
    assert rocket.fuel_level == C.ATLAS_V_STAGE1_PROPELLANT_MASS
    assert isinstance(rocket, Vehicle)


def test_total_fuel(rocket):
    assert rocket.total_fuel == pytest.approx(
        C.ATLAS_V_STAGE1_PROPELLANT_MASS + C.ATLAS_V_STAGE2_PROPELLANT_MASS)
    rocket.advance_time(1.0)
    assert rocket.total_fuel == pytest.approx(
        C.ATLAS_V_STAGE1_PROPELLANT_MASS - 1250.0 + C.ATLAS_V_STAGE2_PROPELLANT_MASS)


def test_only_active_stage_burns(rocket):
    rocket.advance_time(2.0)
    assert rocket.stages[0].fuel_level == pytest.approx(C.ATLAS_V_STAGE1_PROPELLANT_MASS - 2500.0)
    assert rocket.stages[1].fuel_level == C.ATLAS_V_STAGE2_PROPELLANT_MASS
    assert rocket.stages[1].elapsed_time == 0.0


class TestEjection:
    def test_eject_preserves_kinematics(self, rocket):
        rocket.advance_time(3.0)
        position = rocket.position
        velocity = rocket.velocity
        assert rocket.eject_stage() is True
        assert rocket.current_stage_index == 1
        assert rocket.position == position
        assert rocket.velocity == velocity
        assert rocket.elapsed_time == pytest.approx(3.0)

    def test_mass_after_ejection(self, rocket):
        rocket.advance_time(1.0)
        rocket.eject_stage()
        assert rocket.current_mass == pytest.approx(STAGE2_MASS + C.DEFAULT_PAYLOAD_MASS)
        assert rocket.fuel_level == C.ATLAS_V_STAGE2_PROPELLANT_MASS
        assert rocket.total_fuel == C.ATLAS_V_STAGE2_PROPELLANT_MASS

    def test_final_stage_cannot_eject(self, rocket):
        rocket.eject_stage()
        assert not rocket.can_eject
        assert rocket.num_stages_left == 1
        before = rocket.current_mass
        assert rocket.eject_stage() is False
        assert rocket.current_stage_index == 1
        assert rocket.current_mass == before

    def test_throttle_resets_on_new_stage(self, rocket):
        rocket.set_throttle(0.6)
        rocket.eject_stage()
        assert rocket.throttle == C.DEFAULT_THROTTLE
        assert rocket.stages[0].throttle == 0.6

    def test_flight_continues_on_next_stage(self, rocket):
        rocket.advance_time(5.0)
        rocket.eject_stage()
        height = rocket.position.y
        rocket.advance_time(1.0)
        assert rocket.elapsed_time == pytest.approx(6.0)
        assert rocket.fuel_level == pytest.approx(C.ATLAS_V_STAGE2_PROPELLANT_MASS - 22.45)
        assert rocket.max_height >= height


def test_commands_reach_active_stage(rocket):
    rocket.set_gimbal(0.1)
    rocket.set_throttle(0.5)
    assert rocket.active_stage.gimbal_angle == pytest.approx(0.1)
    assert rocket.active_stage.throttle == 0.5
    assert rocket.gimbal_angle == pytest.approx(0.1)
    rocket.throttle = 0.25
    assert rocket.active_stage.throttle == 0.25
    with pytest.raises(ValueError):
        rocket.set_throttle(1.5)
    with pytest.raises(ValueError):
        rocket.set_gimbal(2.0)
    assert rocket.throttle == 0.25


@pytest.mark.parametrize("dt", [0.0, 0.5, 1.0, 5.0])
def test_steps_are_additive(dt):
    split = build_multi_stage(atlas_v())
    whole = build_multi_stage(atlas_v())
    split.advance_time(dt)
    split.advance_time(dt)
    whole.advance_time(2.0 * dt)
    assert split.position.y == pytest.approx(whole.position.y, rel=1e-9, abs=1e-9)
    assert split.velocity.magnitude == pytest.approx(whole.velocity.magnitude, rel=1e-9, abs=1e-9)
    assert split.fuel_level == pytest.approx(whole.fuel_level)


def test_crash(rocket):
    rocket.set_throttle(0.0)
    rocket.advance_time(1.0)
    assert rocket.is_crashed


def test_empty_stage_list_rejected():
    with pytest.raises(ValueError):
        MultiStageVehicle([])


def test_snapshot_and_str(rocket):
    rocket.advance_time(1.0)
    rocket.eject_stage()
    snap = rocket.snapshot()
    assert snap.stage_index == 1
    assert snap.fuel_level == C.ATLAS_V_STAGE2_PROPELLANT_MASS
    assert "Stage:2" in str(rocket)
