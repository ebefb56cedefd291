"""Recording of simulation frames and apsis events to a run directory."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from maneuver_lab import __version__
from maneuver_lab.core.logging_utils import RunLogger
from maneuver_lab.core.model import FrameSnapshot
from maneuver_lab.core.regime import Regime
from maneuver_lab.core.simulation import Simulation


def build_meta(sim: Simulation) -> dict:
    body = sim.body
    state = sim.controls.state
    elements = sim.elements()
    return {
        "body_name": body.name,
        "body_radius": body.radius,
        "mu": body.mu,
        "altitude_km": state.altitude_km,
        "delta_v": state.delta_v,
        "r1": elements.r1,
        "v1": elements.v1,
        "v2": elements.v2,
        "semi_major_axis": elements.semi_major_axis,
        "eccentricity": elements.eccentricity,
        "period": elements.period,
        "regime": sim.regime().value,
        "time_acceleration": sim.cfg.time_acceleration,
        "tick_seconds": sim.cfg.tick_seconds,
        "kepler_iterations": sim.cfg.kepler_iterations,
        "code_version": f"Maneuver Lab {__version__}",
    }


class FlightRecorder:
    """Feeds frames into a :class:`RunLogger` and detects apsis passes."""

    def __init__(self, logger: RunLogger, *, log_every: int = 1) -> None:
        self.logger = logger
        self._log_every = max(1, log_every)
        self._frames = 0
        self._prev_r: Optional[float] = None
        self._prev_dr: Optional[float] = None
        self._prev_elapsed = 0.0
        self._regime: Optional[Regime] = None
        self._controls: Optional[tuple[float, float]] = None

    def start(self, sim: Simulation) -> None:
        self.logger.write_meta(build_meta(sim))
        self._observe_controls(sim, sim.snapshot(), event="burn")

    def record(self, sim: Simulation, snapshot: FrameSnapshot) -> None:
        self._observe_controls(sim, snapshot, event="controls")
        if sim.clock.paused:
            # Frozen frames repeat the previous timestamp.
            return
        state = sim.controls.state
        if self._frames % self._log_every == 0:
            self.logger.log_snapshot(snapshot, state.altitude_km, state.delta_v)
        self._frames += 1
        self._detect_apsis(snapshot, state.altitude_km, state.delta_v)
        self._prev_elapsed = snapshot.elapsed

    def _observe_controls(self, sim: Simulation, snapshot: FrameSnapshot, *, event: str) -> None:
        state = sim.controls.state
        controls = (state.altitude_km, state.delta_v)
        if controls != self._controls:
            if self._controls is not None or event == "burn":
                self.logger.log_event(
                    [
                        snapshot.elapsed,
                        event,
                        state.altitude_km,
                        state.delta_v,
                        {"e": snapshot.eccentricity, "a": snapshot.semi_major_axis},
                    ]
                )
            self._controls = controls
            self._prev_r = None
            self._prev_dr = None
        if snapshot.regime is not self._regime:
            self.logger.log_event(
                [snapshot.elapsed, "regime", state.altitude_km, state.delta_v, snapshot.regime.value]
            )
            self._regime = snapshot.regime

    def _detect_apsis(self, snapshot: FrameSnapshot, altitude_km: float, delta_v: float) -> None:
        r = snapshot.current_radius
        if r is None or snapshot.regime is Regime.CIRCULAR:
            self._prev_r = None
            self._prev_dr = None
            return
        if self._prev_r is not None:
            dr = r - self._prev_r
            if self._prev_dr is not None:
                if self._prev_dr > 0.0 and dr <= 0.0:
                    self.logger.log_event(
                        [self._prev_elapsed, "apoapsis", altitude_km, delta_v, {"r": self._prev_r}]
                    )
                elif self._prev_dr < 0.0 and dr >= 0.0:
                    self.logger.log_event(
                        [self._prev_elapsed, "periapsis", altitude_km, delta_v, {"r": self._prev_r}]
                    )
            self._prev_dr = dr
        self._prev_r = r


def record_run(
    sim: Simulation,
    frames: int,
    *,
    root_dir: str | Path = "data/runs",
    run_id: Optional[str] = None,
    log_every: int = 1,
) -> Path:
    """Step ``sim`` for ``frames`` ticks, recording every frame; returns the run directory."""

    with RunLogger(root_dir, run_id) as logger:
        recorder = FlightRecorder(logger, log_every=log_every)
        recorder.start(sim)
        recorder.record(sim, sim.snapshot())
        for _ in range(frames):
            recorder.record(sim, sim.step())
    return logger.run_dir


__all__ = ["FlightRecorder", "build_meta", "record_run"]
