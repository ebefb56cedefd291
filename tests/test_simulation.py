import math

import pytest

from maneuver_lab.core.config import PhysicsCfg
from maneuver_lab.core.physics import compute_elements
from maneuver_lab.core.regime import Regime
from maneuver_lab.core.simulation import Simulation, build_snapshot
from maneuver_lab.data.bodies import get_body


def test_snapshot_of_default_state_is_circular_leo():
    sim = Simulation()
    snap = sim.snapshot()
    assert snap.elapsed == 0.0
    assert snap.regime is Regime.CIRCULAR
    assert snap.has_position
    assert snap.current_radius == pytest.approx(6_771_000.0)
    assert snap.periapsis_altitude_km == pytest.approx(400.0)
    assert snap.period_seconds / 60.0 == pytest.approx(92.4, abs=0.1)


def test_step_advances_clock_and_position():
    sim = Simulation()
    sim.controls.set_delta_v(500.0)
    first = sim.snapshot()
    second = sim.step()
    assert second.elapsed == pytest.approx(1.0 / 60.0)
    assert second.true_anomaly > first.true_anomaly


def test_time_acceleration_scales_motion():
    sim = Simulation()
    sim.controls.set_delta_v(500.0)
    sim.step()
    fast = sim.snapshot().true_anomaly
    slow_sim = Simulation(cfg=PhysicsCfg(time_acceleration=1.0))
    slow_sim.controls.set_delta_v(500.0)
    slow_sim.step()
    assert fast > slow_sim.snapshot().true_anomaly > 0.0


def test_escape_snapshot_suppresses_position():
    sim = Simulation()
    sim.controls.set_delta_v(3_300.0)
    snap = sim.step()
    assert snap.regime is Regime.ESCAPE
    assert not snap.has_position
    assert snap.true_anomaly is None
    assert snap.display_angle is None


def test_paused_clock_freezes_the_frame():
    sim = Simulation()
    sim.controls.set_delta_v(800.0)
    sim.step()
    sim.clock.pause()
    before = sim.snapshot()
    after = sim.step()
    assert after == before


def test_elements_follow_control_changes():
    sim = Simulation()
    assert sim.regime() is Regime.CIRCULAR
    sim.controls.set_delta_v(1_000.0)
    assert sim.regime() is Regime.ELLIPTICAL
    assert sim.elements().delta_v == 1_000.0


def test_body_can_be_swapped():
    sim = Simulation(get_body("mars"))
    assert sim.body.name == "Mars"
    mars_period = sim.elements().period
    sim.set_body(get_body("earth"))
    assert sim.body.mu == 3.986e14
    assert sim.elements().period != mars_period


def test_readout_matches_regime():
    sim = Simulation()
    sim.controls.set_delta_v(3_500.0)
    assert sim.readout().status == "Escape Trajectory"


def test_build_snapshot_uses_config_iterations():
    el = compute_elements(3.986e14, 6_371_000.0, 400.0, 2_000.0)
    exact = build_snapshot(el, 1_000.0, PhysicsCfg(kepler_iterations=50))
    coarse = build_snapshot(el, 1_000.0, PhysicsCfg(kepler_iterations=0))
    assert exact.true_anomaly != coarse.true_anomaly
    assert math.isfinite(exact.current_radius)
