"""Delta-V sweep: how eccentricity and apsides respond to the burn at one altitude."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from maneuver_lab.core.config import CONTROLS_CFG, PHYSICS_CFG
from maneuver_lab.core.model import Body
from maneuver_lab.core.physics import compute_elements, escape_delta_v
from maneuver_lab.core.regime import Regime, classify

FIGURES_DIR = Path("figures")
REGIME_CODES = {Regime.CIRCULAR: 0, Regime.ELLIPTICAL: 1, Regime.ESCAPE: 2}


@dataclass(frozen=True)
class SweepResult:
    body: Body
    altitude_km: float
    delta_v: np.ndarray
    eccentricity: np.ndarray
    periapsis_km: np.ndarray
    apoapsis_km: np.ndarray
    period_min: np.ndarray
    regime: np.ndarray
    escape_threshold: float


def run_sweep(
    body: Body,
    altitude_km: float,
    delta_v_range: tuple[float, float] = (CONTROLS_CFG.delta_v_min, CONTROLS_CFG.delta_v_max),
    points: int = 401,
) -> SweepResult:
    delta_vs = np.linspace(delta_v_range[0], delta_v_range[1], points)
    ecc = np.empty(points)
    peri = np.empty(points)
    apo = np.empty(points)
    period = np.empty(points)
    regime = np.empty(points, dtype=int)

    for i, dv in enumerate(delta_vs):
        el = compute_elements(body.mu, body.radius, altitude_km, float(dv))
        kind = classify(el.eccentricity, circular_threshold=PHYSICS_CFG.circular_threshold)
        ecc[i] = el.eccentricity
        peri[i] = el.periapsis_altitude_km
        apo[i] = el.apoapsis_altitude_km if kind.is_bound else np.nan
        period[i] = el.period / 60.0 if kind.is_bound else np.nan
        regime[i] = REGIME_CODES[kind]

    return SweepResult(
        body=body,
        altitude_km=altitude_km,
        delta_v=delta_vs,
        eccentricity=ecc,
        periapsis_km=peri,
        apoapsis_km=apo,
        period_min=period,
        regime=regime,
        escape_threshold=escape_delta_v(body.mu, body.radius, altitude_km),
    )


def plot_sweep(result: SweepResult, out_dir: Path = FIGURES_DIR) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    fig, (ax_e, ax_alt) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    ax_e.plot(result.delta_v, result.eccentricity, color="#0ea5e9", lw=1.6)
    ax_e.axhline(1.0, color="#f43f5e", ls="--", lw=1.0, label="e = 1")
    ax_e.set_ylabel("Eccentricity")
    ax_e.set_ylim(0.0, 1.5)
    ax_e.grid(True, alpha=0.3)

    ax_alt.plot(result.delta_v, result.periapsis_km, color="#10b981", label="Periapsis")
    ax_alt.plot(result.delta_v, result.apoapsis_km, color="#fbbf24", label="Apoapsis")
    ax_alt.set_yscale("symlog", linthresh=1_000.0)
    ax_alt.set_xlabel("Delta-V [m/s]")
    ax_alt.set_ylabel("Altitude [km]")
    ax_alt.grid(True, alpha=0.3)

    for ax in (ax_e, ax_alt):
        if result.delta_v[0] <= result.escape_threshold <= result.delta_v[-1]:
            ax.axvline(result.escape_threshold, color="#f43f5e", lw=1.0, alpha=0.7)
        ax.legend(loc="upper left")

    fig.suptitle(
        f"{result.body.name}: burn from {result.altitude_km:.0f} km "
        f"(escape at +{result.escape_threshold:.0f} m/s)"
    )
    fig.tight_layout()
    out = out_dir / f"sweep_{result.body.name.lower()}_{result.altitude_km:.0f}km.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def print_sweep_summary(result: SweepResult) -> None:
    counts = {kind.value: int(np.sum(result.regime == code)) for kind, code in REGIME_CODES.items()}
    print(f"\n--- Delta-V sweep, {result.body.name} @ {result.altitude_km:.0f} km ---")
    print(f" Range: {result.delta_v[0]:+.0f} .. {result.delta_v[-1]:+.0f} m/s ({result.delta_v.size} points)")
    print(f" Escape threshold: +{result.escape_threshold:.1f} m/s")
    print(" Regimes:" + ",".join(f" {name}: {count}" for name, count in counts.items()))


__all__ = ["SweepResult", "plot_sweep", "print_sweep_summary", "run_sweep"]
