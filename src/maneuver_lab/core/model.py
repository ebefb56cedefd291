"""Data models for the maneuver simulation state."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from maneuver_lab.core.regime import Regime


@dataclass(frozen=True)
class Body:
    """Central body the spacecraft orbits."""

    name: str
    radius: float
    mu: float

    @property
    def surface_gravity(self) -> float:
        return self.mu / (self.radius**2)


@dataclass
class OrbitalState:
    """Slider-controlled inputs. Only the controls layer mutates this."""

    altitude_km: float = 400.0
    delta_v: float = 0.0
    zoom: float = 0.05


@dataclass(frozen=True)
class OrbitalElements:
    """Conic elements after an impulsive burn from a circular orbit.

    Lengths are in metres, speeds in m/s and the period in seconds. For
    escape trajectories ``apoapsis`` and ``period`` are not physical and may
    be negative or non-finite.
    """

    gm: float
    body_radius: float
    delta_v: float
    r1: float
    v1: float
    v2: float
    semi_major_axis: float
    eccentricity: float
    periapsis: float
    apoapsis: float
    period: float

    @property
    def retrograde(self) -> bool:
        return self.delta_v < 0.0

    @property
    def periapsis_altitude_km(self) -> float:
        return (self.periapsis - self.body_radius) / 1000.0

    @property
    def apoapsis_altitude_km(self) -> float:
        return (self.apoapsis - self.body_radius) / 1000.0

    @property
    def is_bound(self) -> bool:
        e = self.eccentricity
        return math.isfinite(e) and abs(e) < 1.0

    @property
    def suborbital(self) -> bool:
        """``True`` when the closest approach lies below the surface."""

        return math.isfinite(self.periapsis) and self.periapsis < self.body_radius


@dataclass(frozen=True)
class OrbitPosition:
    """Instantaneous position on a bound orbit."""

    true_anomaly: float
    radius: float
    display_angle: float

    def xy(self) -> tuple[float, float]:
        """Body-centred position in metres along the display angle."""

        return (
            self.radius * math.cos(self.display_angle),
            self.radius * math.sin(self.display_angle),
        )


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the presentation layer needs for one frame."""

    elapsed: float
    semi_major_axis: float
    eccentricity: float
    periapsis_altitude_km: float
    apoapsis_altitude_km: float
    period_seconds: float
    regime: "Regime"
    current_radius: Optional[float] = None
    true_anomaly: Optional[float] = None
    display_angle: Optional[float] = None

    @property
    def has_position(self) -> bool:
        return self.current_radius is not None


__all__ = ["Body", "FrameSnapshot", "OrbitPosition", "OrbitalElements", "OrbitalState"]
