import pytest

from maneuver_lab.core.config import ControlsCfg
from maneuver_lab.core.controls import Controls, clamp, snap
from maneuver_lab.core.model import OrbitalState


def test_defaults_match_leo_without_burn():
    state = Controls().state
    assert state.altitude_km == 400.0
    assert state.delta_v == 0.0
    assert state.zoom == 0.05


def test_clamp_and_snap_helpers():
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
    assert snap(412.0, 50.0, 200.0) == 400.0
    assert snap(-1_488.0, 25.0, -1_500.0) == -1_500.0
    assert snap(3.0, 0.0, 0.0) == 3.0


@pytest.mark.parametrize(
    "requested, expected",
    [(100.0, 200.0), (430.0, 450.0), (1_999.0, 2_000.0), (5_000.0, 2_000.0)],
)
def test_altitude_is_clamped_to_slider(requested, expected):
    controls = Controls()
    assert controls.set_altitude(requested) == expected


@pytest.mark.parametrize(
    "requested, expected",
    [(-9_000.0, -1_500.0), (-12.0, -0.0), (37.0, 25.0), (9_000.0, 3_500.0)],
)
def test_delta_v_is_clamped_to_slider(requested, expected):
    controls = Controls()
    assert controls.set_delta_v(requested) == expected


def test_initial_state_is_validated():
    controls = Controls(OrbitalState(altitude_km=50.0, delta_v=10_000.0, zoom=100.0))
    assert controls.state.altitude_km == 200.0
    assert controls.state.delta_v == 3_500.0
    assert controls.state.zoom == ControlsCfg().zoom_max


def test_nudges_move_by_one_step():
    controls = Controls()
    assert controls.nudge_altitude(1) == 450.0
    assert controls.nudge_altitude(-3) == 300.0
    assert controls.nudge_delta_v(4) == 100.0
    assert controls.nudge_delta_v(-8) == -100.0


def test_zoom_scales_by_factor_within_limits():
    controls = Controls()
    assert controls.zoom_in() == pytest.approx(0.075)
    assert controls.zoom_out() == pytest.approx(0.05)
    for _ in range(50):
        controls.zoom_out()
    assert controls.state.zoom == ControlsCfg().zoom_min


def test_reset_vector_keeps_altitude():
    controls = Controls()
    controls.set_altitude(1_000.0)
    controls.set_delta_v(750.0)
    controls.reset_vector()
    assert controls.state.delta_v == 0.0
    assert controls.state.altitude_km == 1_000.0


def test_reset_restores_defaults():
    controls = Controls()
    controls.set_altitude(1_500.0)
    controls.set_delta_v(-500.0)
    controls.zoom_in()
    controls.reset()
    assert controls.state == OrbitalState()
