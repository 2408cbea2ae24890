from orbit_sim import constants as C


def test_gravity():
    assert C.G0 == 9.81


def test_control_limits():
    assert C.MIN_THROTTLE == 0.0
    assert C.MAX_THROTTLE == 1.0
    assert C.MIN_THROTTLE <= C.DEFAULT_THROTTLE <= C.MAX_THROTTLE
    assert C.MAX_GIMBAL_ANGLE == C.HALF_PI


def test_atmosphere_layers_ordered():
    assert C.TROPOSPHERE_EDGE < C.STRATOSPHERE_EDGE < C.ATMOSPHERE_EDGE < C.KARMAN_LINE


def test_time_ratio_values_sorted():
    values = list(C.TIME_RATIO_VALUES)
    assert values == sorted(values)
    assert C.DEFAULT_TIME_RATIO in values


def test_print_config(capsys):
    C.print_config()
    out = capsys.readouterr().out
    assert "Orbit Simulator Configuration" in out
    assert "g0: 9.81" in out
