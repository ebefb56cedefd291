"""Per-frame glue between the controls, the clock and the Kepler engine."""
from __future__ import annotations

from .config import PHYSICS_CFG, PhysicsCfg
from .controls import Controls
from .model import Body, FrameSnapshot, OrbitalElements
from .physics import compute_elements, propagate
from .regime import Readout, Regime, classify, describe
from .timekeeping import SimulationClock


def build_snapshot(
    elements: OrbitalElements,
    elapsed: float,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> FrameSnapshot:
    """Classify ``elements`` and, for bound orbits, locate the spacecraft."""

    regime = classify(elements.eccentricity, circular_threshold=cfg.circular_threshold)
    fields = dict(
        elapsed=elapsed,
        semi_major_axis=elements.semi_major_axis,
        eccentricity=elements.eccentricity,
        periapsis_altitude_km=elements.periapsis_altitude_km,
        apoapsis_altitude_km=elements.apoapsis_altitude_km,
        period_seconds=elements.period,
        regime=regime,
    )
    if regime.is_bound:
        position = propagate(
            elements,
            elapsed,
            cfg.time_acceleration,
            iterations=cfg.kepler_iterations,
        )
        fields.update(
            current_radius=position.radius,
            true_anomaly=position.true_anomaly,
            display_angle=position.display_angle,
        )
    return FrameSnapshot(**fields)


class Simulation:
    """Owns the controls and the clock for one visualisation session."""

    def __init__(
        self,
        body: Body | None = None,
        *,
        controls: Controls | None = None,
        clock: SimulationClock | None = None,
        cfg: PhysicsCfg = PHYSICS_CFG,
    ) -> None:
        self._cfg = cfg.for_body(body) if body is not None else cfg
        self.controls = controls or Controls()
        self.clock = clock or SimulationClock(tick_seconds=self._cfg.tick_seconds)

    @property
    def cfg(self) -> PhysicsCfg:
        return self._cfg

    @property
    def body(self) -> Body:
        return Body(name=self._cfg.body_name, radius=self._cfg.body_radius, mu=self._cfg.gm)

    def set_body(self, body: Body) -> None:
        self._cfg = self._cfg.for_body(body)

    def elements(self) -> OrbitalElements:
        state = self.controls.state
        return compute_elements(
            self._cfg.gm,
            self._cfg.body_radius,
            state.altitude_km,
            state.delta_v,
            clamp_burn_speed=self._cfg.clamp_burn_speed,
        )

    def regime(self) -> Regime:
        return classify(self.elements().eccentricity, circular_threshold=self._cfg.circular_threshold)

    def readout(self) -> Readout:
        elements = self.elements()
        return describe(elements, classify(elements.eccentricity, circular_threshold=self._cfg.circular_threshold))

    def snapshot(self) -> FrameSnapshot:
        return build_snapshot(self.elements(), self.clock.elapsed, self._cfg)

    def step(self) -> FrameSnapshot:
        """Advance the clock by one tick and return the new frame."""

        self.clock.advance()
        return self.snapshot()


__all__ = ["Simulation", "build_snapshot"]
