"""Trajectory regime classification and the labels shown for each regime."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .config import PHYSICS_CFG, RENDER_CFG
from .model import OrbitalElements


class Regime(Enum):
    CIRCULAR = "circular"
    ELLIPTICAL = "elliptical"
    ESCAPE = "escape"

    @property
    def is_bound(self) -> bool:
        return self is not Regime.ESCAPE

    @property
    def label(self) -> str:
        return "Escape Trajectory" if self is Regime.ESCAPE else "Stable Orbit"


def classify(
    eccentricity: float,
    *,
    circular_threshold: float = PHYSICS_CFG.circular_threshold,
) -> Regime:
    """Map an eccentricity onto a regime.

    Non-finite values are treated as escape so that the propagator is never
    invoked on them.
    """

    if not math.isfinite(eccentricity):
        return Regime.ESCAPE
    magnitude = abs(eccentricity)
    if magnitude < circular_threshold:
        return Regime.CIRCULAR
    if magnitude < 1.0:
        return Regime.ELLIPTICAL
    return Regime.ESCAPE


@dataclass(frozen=True)
class Readout:
    """Formatted values for the HUD."""

    status: str
    eccentricity: str
    periapsis: str
    apoapsis: str
    period: str
    burn_velocity: str
    suborbital: bool


def _format_km(value: float) -> str:
    return f"{value:,.0f} km"


def describe(
    elements: OrbitalElements,
    regime: Regime | None = None,
    *,
    apoapsis_limit_km: float = RENDER_CFG.apoapsis_display_limit_km,
) -> Readout:
    """Build the HUD readout, suppressing values that have no meaning for ``regime``."""

    if regime is None:
        regime = classify(elements.eccentricity)

    periapsis_alt = elements.periapsis_altitude_km
    periapsis = _format_km(periapsis_alt) if math.isfinite(periapsis_alt) else "N/A"

    apoapsis_alt = elements.apoapsis_altitude_km
    if regime.is_bound and math.isfinite(apoapsis_alt) and apoapsis_alt < apoapsis_limit_km:
        apoapsis = _format_km(apoapsis_alt)
    else:
        apoapsis = "∞"

    if regime.is_bound and math.isfinite(elements.period):
        period = f"{elements.period / 60.0:.1f} min"
    else:
        period = "N/A"

    return Readout(
        status=regime.label,
        eccentricity=f"{abs(elements.eccentricity):.4f}",
        periapsis=periapsis,
        apoapsis=apoapsis,
        period=period,
        burn_velocity=f"{elements.v2:.1f} m/s",
        suborbital=elements.suborbital,
    )


__all__ = ["Readout", "Regime", "classify", "describe"]
