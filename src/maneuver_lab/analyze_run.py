"""Analyze a recorded maneuver run and generate diagnostic figures."""
from __future__ import annotations

import csv
import json
import math
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


TIMESERIES_FILENAME = "timeseries.csv"
EVENTS_FILENAME = "events.csv"
META_FILENAME = "meta.json"
FIGS_SUBDIR = "figs"
DEFAULT_RUNS_DIR = Path("data") / "runs"


def load_timeseries(path: Path) -> Dict[str, np.ndarray]:
    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        columns: Dict[str, List[str]] = {name: [] for name in reader.fieldnames or []}
        for row in reader:
            for key, value in row.items():
                if key is None:
                    continue
                columns.setdefault(key, []).append(value)
    data: Dict[str, np.ndarray] = {}
    for key, values in columns.items():
        try:
            data[key] = np.asarray(values, dtype=float)
        except ValueError:
            data[key] = np.asarray(values)
    return data


def load_events(path: Path) -> List[dict]:
    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        events: List[dict] = []
        for row in reader:
            if not row:
                continue
            event = {
                "t": float(row["t"]),
                "type": row["type"],
                "altitude_km": float(row["altitude_km"]),
                "delta_v": float(row["delta_v"]),
            }
            details_raw = row.get("details", "")
            if details_raw:
                try:
                    event["details"] = json.loads(details_raw)
                except json.JSONDecodeError:
                    event["details"] = details_raw
            events.append(event)
    return events


def resolve_run_dir(run_dir: Optional[str], base_runs_dir: Path = DEFAULT_RUNS_DIR) -> Path:
    """Turn a run id, a path, or nothing (latest run) into a run directory."""

    if run_dir:
        run_path = Path(run_dir)
        if not run_path.is_dir():
            run_path = base_runs_dir / run_dir
    else:
        last_run_file = base_runs_dir / "last_run.txt"
        if not last_run_file.exists():
            raise FileNotFoundError("No run given and last_run.txt is missing")
        run_path = base_runs_dir / last_run_file.read_text(encoding="utf-8").strip()

    if not run_path.is_dir():
        raise FileNotFoundError(f"Run directory not found: {run_path}")
    for name in (META_FILENAME, TIMESERIES_FILENAME, EVENTS_FILENAME):
        if not (run_path / name).exists():
            raise FileNotFoundError(f"Run directory is missing {name}")
    return run_path


def ensure_fig_dir(run_dir: Path) -> Path:
    fig_dir = run_dir / FIGS_SUBDIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    return fig_dir


def summarize_events(events: List[dict]) -> Dict[str, int]:
    summary: Dict[str, int] = {"periapsis": 0, "apoapsis": 0, "regime": 0, "controls": 0}
    for event in events:
        if event["type"] in summary:
            summary[event["type"]] += 1
    return summary


def estimate_period(events: List[dict]) -> Optional[float]:
    """Mean time between successive periapsis passes, if there are at least two."""

    times = [event["t"] for event in events if event["type"] == "periapsis"]
    if len(times) < 2:
        return None
    return float(np.mean(np.diff(times)))


def plot_orbit(fig_dir: Path, ts: Dict[str, np.ndarray], body_radius: float) -> Path:
    r = ts.get("r", np.array([]))
    angle = ts.get("angle", np.array([]))
    fig, ax = plt.subplots(figsize=(6, 6))
    if r.size:
        ax.plot(r * np.cos(angle) / 1e6, r * np.sin(angle) / 1e6, lw=1.2, label="Spacecraft")
    body = plt.Circle((0.0, 0.0), body_radius / 1e6, color="#1e40af", alpha=0.8, label="Body")
    ax.add_patch(body)
    ax.set_xlabel("x [Mm]")
    ax.set_ylabel("y [Mm]")
    ax.set_title("Trajectory")
    ax.set_aspect("equal", adjustable="datalim")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right")
    fig.tight_layout()
    out = fig_dir / "orbit.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def plot_radius(
    fig_dir: Path,
    ts: Dict[str, np.ndarray],
    events: List[dict],
    body_radius: float,
) -> Path:
    t = ts.get("t", np.array([]))
    r = ts.get("r", np.array([]))
    fig, ax = plt.subplots(figsize=(9, 4))
    if t.size:
        ax.plot(t, (r - body_radius) / 1000.0, lw=1.2, color="#0ea5e9")
    for event in events:
        details = event.get("details")
        if event["type"] not in ("periapsis", "apoapsis") or not isinstance(details, dict):
            continue
        marker = "v" if event["type"] == "periapsis" else "^"
        ax.plot(event["t"], (details["r"] - body_radius) / 1000.0, marker, color="#f43f5e")
    ax.set_xlabel("Elapsed frame time [s]")
    ax.set_ylabel("Altitude [km]")
    ax.set_title("Altitude over time")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    out = fig_dir / "altitude.png"
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def analyze(run_path: Path) -> dict:
    """Plot a recorded run and return its summary."""

    with (run_path / META_FILENAME).open("r", encoding="utf-8") as fh:
        meta = json.load(fh)
    ts = load_timeseries(run_path / TIMESERIES_FILENAME)
    events = load_events(run_path / EVENTS_FILENAME)
    if not ts or ts["t"].size == 0:
        raise ValueError("timeseries.csv is empty, nothing to analyze")

    body_radius = float(meta.get("body_radius", 0.0))
    fig_dir = ensure_fig_dir(run_path)
    figures = [plot_orbit(fig_dir, ts, body_radius), plot_radius(fig_dir, ts, events, body_radius)]

    # Recorded times are frame time; periapsis spacing in frame time is the
    # orbital period divided by the time acceleration.
    frame_period = estimate_period(events)
    acceleration = float(meta.get("time_acceleration", 1.0))
    period = meta.get("period")
    simulated_period = frame_period * acceleration if frame_period is not None else None

    r = ts.get("r", np.array([]))
    finite_r = r[np.isfinite(r)] if r.size else r
    return {
        "run": run_path.name,
        "body": meta.get("body_name"),
        "regime": meta.get("regime"),
        "eccentricity": meta.get("eccentricity"),
        "period": period if period is not None and math.isfinite(period) else None,
        "simulated_period": simulated_period,
        "r_min": float(finite_r.min()) if finite_r.size else None,
        "r_max": float(finite_r.max()) if finite_r.size else None,
        "events": summarize_events(events),
        "figures": figures,
    }


def print_summary(summary: dict) -> None:
    print(f"\n--- Run {summary['run']} ({summary['body']}) ---")
    print(f" Regime: {summary['regime']}, e = {summary['eccentricity']:.4f}")
    if summary["period"] is not None:
        print(f" Kepler period: {summary['period'] / 60.0:.1f} min")
    if summary["simulated_period"] is not None:
        print(f" Periapsis-to-periapsis: {summary['simulated_period'] / 60.0:.1f} min")
    else:
        print(" Periapsis-to-periapsis: needs at least two periapsis passes")
    if summary["r_min"] is not None:
        print(f" Radius range: {summary['r_min'] / 1000:.0f} .. {summary['r_max'] / 1000:.0f} km")
    print(
        " Events:" +
        ",".join(f" {etype}: {count}" for etype, count in summary["events"].items())
    )
    for path in summary["figures"]:
        print(f" Figure: {path}")


__all__ = [
    "analyze",
    "estimate_period",
    "load_events",
    "load_timeseries",
    "print_summary",
    "resolve_run_dir",
    "summarize_events",
]
