import numpy as np
import pytest

from maneuver_lab.analyze_run import (
    analyze,
    estimate_period,
    load_events,
    load_timeseries,
    resolve_run_dir,
)
from maneuver_lab.core.simulation import Simulation
from maneuver_lab.data.bodies import get_body
from maneuver_lab.record import record_run
from maneuver_lab.sweep import REGIME_CODES, plot_sweep, run_sweep
from maneuver_lab.core.regime import Regime


@pytest.fixture
def elliptical_run(tmp_path):
    sim = Simulation()
    sim.controls.set_delta_v(1_000.0)
    frames = int(2.2 * sim.elements().period / sim.cfg.time_acceleration / sim.cfg.tick_seconds)
    return record_run(sim, frames, root_dir=tmp_path / "runs", run_id="ellipse"), sim


def test_sweep_covers_all_regimes():
    result = run_sweep(get_body("earth"), 400.0, (-1_500.0, 3_500.0), 201)
    assert result.delta_v.size == 201
    codes = set(result.regime.tolist())
    assert codes == set(REGIME_CODES.values())
    assert result.escape_threshold == pytest.approx(3_178.0, abs=2.0)
    escaped = result.regime == REGIME_CODES[Regime.ESCAPE]
    assert np.all(np.isnan(result.apoapsis_km[escaped]))
    assert np.all(result.eccentricity[escaped] >= 1.0)


def test_sweep_plot_is_written(tmp_path):
    result = run_sweep(get_body("mars"), 300.0, (-500.0, 2_000.0), 51)
    out = plot_sweep(result, tmp_path)
    assert out.exists()
    assert out.name == "sweep_mars_300km.png"


def test_timeseries_round_trip_keeps_text_columns(elliptical_run):
    run_dir, _ = elliptical_run
    ts = load_timeseries(run_dir / "timeseries.csv")
    assert ts["t"].dtype == float
    assert set(ts["regime"].tolist()) == {"elliptical"}


def test_period_estimate_matches_kepler_period(elliptical_run):
    run_dir, sim = elliptical_run
    events = load_events(run_dir / "events.csv")
    frame_period = estimate_period(events)
    assert frame_period is not None
    simulated = frame_period * sim.cfg.time_acceleration
    assert simulated == pytest.approx(sim.elements().period, rel=0.01)


def test_estimate_period_needs_two_passes():
    assert estimate_period([{"t": 1.0, "type": "periapsis"}]) is None


def test_analyze_writes_figures(elliptical_run):
    run_dir, sim = elliptical_run
    summary = analyze(run_dir)
    assert summary["regime"] == "elliptical"
    assert summary["events"]["apoapsis"] >= 2
    assert summary["r_min"] == pytest.approx(sim.elements().periapsis, rel=1e-6)
    for figure in summary["figures"]:
        assert figure.exists()


def test_resolve_run_dir_uses_last_run(elliptical_run):
    run_dir, _ = elliptical_run
    assert resolve_run_dir(None, run_dir.parent) == run_dir
    assert resolve_run_dir("ellipse", run_dir.parent) == run_dir


def test_resolve_run_dir_reports_missing_runs(tmp_path):
    with pytest.raises(FileNotFoundError):
        resolve_run_dir(None, tmp_path)
    with pytest.raises(FileNotFoundError):
        resolve_run_dir("nope", tmp_path)
