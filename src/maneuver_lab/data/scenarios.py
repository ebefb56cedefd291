"""Preset maneuvers for the simulator."""
from __future__ import annotations

from dataclasses import dataclass

from maneuver_lab.core.controls import Controls


@dataclass(frozen=True)
class Scenario:
    key: str
    name: str
    altitude_km: float
    delta_v: float
    description: str

    def apply(self, controls: Controls) -> None:
        controls.set_altitude(self.altitude_km)
        controls.set_delta_v(self.delta_v)


SCENARIO_DEFINITIONS: tuple[Scenario, ...] = (
    Scenario(
        key="leo",
        name="LEO",
        altitude_km=400.0,
        delta_v=0.0,
        description="Circular low Earth orbit at ISS altitude, no burn.",
    ),
    Scenario(
        key="raise",
        name="Orbit raise",
        altitude_km=400.0,
        delta_v=500.0,
        description="Modest prograde burn; the burn point becomes periapsis.",
    ),
    Scenario(
        key="transfer",
        name="Transfer",
        altitude_km=400.0,
        delta_v=2_425.0,
        description="Large prograde burn lifting apoapsis near geostationary altitude.",
    ),
    Scenario(
        key="deorbit",
        name="Deorbit",
        altitude_km=400.0,
        delta_v=-125.0,
        description="Retrograde burn dropping periapsis below the surface.",
    ),
    Scenario(
        key="escape",
        name="Escape",
        altitude_km=400.0,
        delta_v=3_300.0,
        description="Prograde burn past escape velocity (~3.18 km/s from LEO).",
    ),
    Scenario(
        key="retrograde",
        name="High retrograde",
        altitude_km=2_000.0,
        delta_v=-1_000.0,
        description="Retrograde burn from a high orbit; the burn point becomes apoapsis.",
    ),
)

SCENARIOS: dict[str, Scenario] = {scenario.key: scenario for scenario in SCENARIO_DEFINITIONS}
SCENARIO_DISPLAY_ORDER: list[str] = [scenario.key for scenario in SCENARIO_DEFINITIONS]
DEFAULT_SCENARIO_KEY = SCENARIO_DISPLAY_ORDER[0]
SCENARIO_FLASH_DURATION = 2.0


__all__ = [
    "DEFAULT_SCENARIO_KEY",
    "SCENARIO_DEFINITIONS",
    "SCENARIO_DISPLAY_ORDER",
    "SCENARIOS",
    "SCENARIO_FLASH_DURATION",
    "Scenario",
]
