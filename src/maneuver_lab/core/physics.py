"""Two-body Keplerian helpers for the maneuver simulation."""
from __future__ import annotations

import math

import numpy as np

from .config import PHYSICS_CFG
from .model import OrbitPosition, OrbitalElements

TWO_PI = 2.0 * math.pi


def circular_velocity(gm: float, r: float) -> float:
    """Speed of a circular orbit of radius ``r``."""

    return math.sqrt(gm / r)


def escape_velocity(gm: float, r: float) -> float:
    return math.sqrt(2.0 * gm / r)


def escape_delta_v(gm: float, body_radius: float, altitude_km: float) -> float:
    """Prograde burn at which a circular orbit at ``altitude_km`` becomes unbound."""

    r1 = body_radius + altitude_km * 1000.0
    return escape_velocity(gm, r1) - circular_velocity(gm, r1)


def orbital_period(gm: float, a: float) -> float:
    """Kepler's third law. ``nan`` for non-positive semi-major axes."""

    if not a > 0.0:
        return math.nan
    # a * sqrt(a / gm) rather than sqrt(a**3 / gm) so huge axes reach inf
    # instead of raising OverflowError.
    return TWO_PI * a * math.sqrt(a / gm)


def compute_elements(
    gm: float,
    body_radius: float,
    altitude_km: float,
    delta_v: float,
    *,
    clamp_burn_speed: bool = PHYSICS_CFG.clamp_burn_speed,
) -> OrbitalElements:
    """Orbital elements after an impulsive burn of ``delta_v`` from a circular orbit.

    The burn point becomes periapsis for prograde burns and apoapsis for
    retrograde ones, which is why the eccentricity formula depends on the sign
    of ``delta_v``. Degenerate geometry (a parabolic burn, say) produces
    ``inf``/``nan`` fields rather than raising.
    """

    if not gm > 0.0:
        raise ValueError("gravitational parameter must be positive")
    if not body_radius > 0.0:
        raise ValueError("body radius must be positive")
    r1 = body_radius + altitude_km * 1000.0
    if not r1 > 0.0:
        raise ValueError(f"orbital radius must be positive, got {r1:.1f} m")

    v1 = circular_velocity(gm, r1)
    v2 = v1 + delta_v
    if clamp_burn_speed:
        v2 = max(v2, 0.0)

    denom = 2.0 / r1 - v2 * v2 / gm
    a = math.inf if denom == 0.0 else 1.0 / denom

    if delta_v >= 0.0:
        e = 1.0 - r1 / a
    else:
        e = r1 / a - 1.0

    return OrbitalElements(
        gm=gm,
        body_radius=body_radius,
        delta_v=delta_v,
        r1=r1,
        v1=v1,
        v2=v2,
        semi_major_axis=a,
        eccentricity=e,
        periapsis=a * (1.0 - e),
        apoapsis=a * (1.0 + e),
        period=orbital_period(gm, a),
    )


def mean_anomaly(elapsed_seconds: float, time_acceleration: float, period: float) -> float:
    """Mean anomaly in ``[0, 2*pi)``, wrapped once per period."""

    return ((elapsed_seconds * time_acceleration) % period) / period * TWO_PI


def solve_kepler(
    mean_anom: float,
    e: float,
    iterations: int = PHYSICS_CFG.kepler_iterations,
) -> float:
    """Eccentric anomaly for ``mean_anom`` using a fixed number of Newton steps.

    There is no convergence test: the loop always runs ``iterations`` times,
    which keeps the per-frame cost constant. Five steps are plenty for the
    eccentricities the sliders can reach; raise ``iterations`` for orbits
    close to parabolic.
    """

    E = mean_anom
    for _ in range(iterations):
        E = E - (E - e * math.sin(E) - mean_anom) / (1.0 - e * math.cos(E))
    return E


def true_anomaly_from_eccentric(E: float, e: float) -> float:
    return 2.0 * math.atan(math.sqrt((1.0 + e) / (1.0 - e)) * math.tan(E / 2.0))


def conic_radius(a: float, e: float, nu: float) -> float:
    """Polar conic equation measured from the focus."""

    return a * (1.0 - e * e) / (1.0 + e * math.cos(nu))


def display_angle(elements: OrbitalElements, true_anomaly: float) -> float:
    """Angle at which to draw the spacecraft.

    After a retrograde burn the burn point is apoapsis, so the conic is
    rotated by half a turn to keep that point on the +x axis.
    """

    if elements.retrograde:
        return true_anomaly + math.pi
    return true_anomaly


def propagate(
    elements: OrbitalElements,
    elapsed_seconds: float,
    time_acceleration: float,
    *,
    iterations: int = PHYSICS_CFG.kepler_iterations,
) -> OrbitPosition:
    """Position on a bound orbit after ``elapsed_seconds`` of simulation time."""

    e = elements.eccentricity
    if not abs(e) < 1.0:
        raise ValueError(f"cannot propagate an unbound trajectory (e={e:.4f})")

    period = elements.period
    if not (math.isfinite(period) and period > 0.0):
        return OrbitPosition(
            true_anomaly=0.0,
            radius=elements.periapsis,
            display_angle=display_angle(elements, 0.0),
        )

    M = mean_anomaly(elapsed_seconds, time_acceleration, period)
    E = solve_kepler(M, e, iterations)
    nu = true_anomaly_from_eccentric(E, e)
    radius = conic_radius(elements.semi_major_axis, e, nu)
    return OrbitPosition(true_anomaly=nu, radius=radius, display_angle=display_angle(elements, nu))


def sample_orbit(
    elements: OrbitalElements,
    samples: int = PHYSICS_CFG.orbit_samples,
) -> tuple[np.ndarray, np.ndarray]:
    """Closed path of a bound orbit in display orientation, in metres."""

    if not elements.is_bound or not math.isfinite(elements.semi_major_axis):
        return np.array([], dtype=float), np.array([], dtype=float)

    e = elements.eccentricity
    nu = np.linspace(0.0, TWO_PI, max(2, samples) + 1)
    r = elements.semi_major_axis * (1.0 - e * e) / (1.0 + e * np.cos(nu))
    angle = nu + math.pi if elements.retrograde else nu
    return r * np.cos(angle), r * np.sin(angle)


__all__ = [
    "circular_velocity",
    "compute_elements",
    "conic_radius",
    "display_angle",
    "escape_delta_v",
    "escape_velocity",
    "mean_anomaly",
    "orbital_period",
    "propagate",
    "sample_orbit",
    "solve_kepler",
    "true_anomaly_from_eccentric",
]
