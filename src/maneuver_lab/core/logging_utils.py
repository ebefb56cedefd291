"""Run logging for recorded maneuver simulations."""
from __future__ import annotations

import json
import math
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from .model import FrameSnapshot


class RunLogger:
    """Buffered logger that stores per-frame telemetry and events as CSV."""

    TIMESERIES_HEADER = [
        "t",
        "altitude_km",
        "delta_v",
        "a",
        "e",
        "nu",
        "r",
        "angle",
        "regime",
    ]
    EVENTS_HEADER = ["t", "type", "altitude_km", "delta_v", "details"]

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        timeseries_flush_threshold: int = 200,
        events_flush_threshold: int = 50,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)

        base = run_id or f"{datetime.now().strftime('%Y%m%d_%H%M%S')}_run"
        candidate_id = base
        suffix = 1
        while (self.root_dir / candidate_id).exists():
            candidate_id = f"{base}_{suffix:02d}"
            suffix += 1

        self.run_id = candidate_id
        self.run_dir = self.root_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=False)

        self.timeseries_path = self.run_dir / "timeseries.csv"
        self.events_path = self.run_dir / "events.csv"
        self.meta_path = self.run_dir / "meta.json"

        self._ts_file = self.timeseries_path.open("w", newline="")
        self._ts_file.write(",".join(self.TIMESERIES_HEADER) + "\n")
        self._ev_file = self.events_path.open("w", newline="")
        self._ev_file.write(",".join(self.EVENTS_HEADER) + "\n")

        self._ts_buffer: list[str] = []
        self._ev_buffer: list[str] = []
        self._ts_threshold = max(1, timeseries_flush_threshold)
        self._ev_threshold = max(1, events_flush_threshold)

        (self.root_dir / "last_run.txt").write_text(self.run_id, encoding="utf-8")

    def write_meta(self, meta: dict) -> None:
        with self.meta_path.open("w", encoding="utf-8") as fh:
            json.dump(meta, fh, indent=2, sort_keys=True)

    def log_ts(self, values: Sequence[object]) -> None:
        self._ts_buffer.append(",".join(self._format_value(v) for v in values))
        if len(self._ts_buffer) >= self._ts_threshold:
            self._flush_timeseries()

    def log_snapshot(self, snapshot: FrameSnapshot, altitude_km: float, delta_v: float) -> None:
        """Append one frame; position columns are ``nan`` on escape trajectories."""

        self.log_ts(
            [
                snapshot.elapsed,
                altitude_km,
                delta_v,
                snapshot.semi_major_axis,
                snapshot.eccentricity,
                _or_nan(snapshot.true_anomaly),
                _or_nan(snapshot.current_radius),
                _or_nan(snapshot.display_angle),
                snapshot.regime.value,
            ]
        )

    def log_event(self, values: Sequence[object]) -> None:
        self._ev_buffer.append(",".join(self._format_value(v) for v in values))
        if len(self._ev_buffer) >= self._ev_threshold:
            self._flush_events()

    def close(self) -> None:
        self._flush_timeseries()
        self._flush_events()
        self._ts_file.close()
        self._ev_file.close()

    def _flush_timeseries(self) -> None:
        if self._ts_buffer:
            self._ts_file.write("\n".join(self._ts_buffer) + "\n")
            self._ts_file.flush()
            self._ts_buffer.clear()

    def _flush_events(self) -> None:
        if self._ev_buffer:
            self._ev_file.write("\n".join(self._ev_buffer) + "\n")
            self._ev_file.flush()
            self._ev_buffer.clear()

    @staticmethod
    def _format_value(value: object) -> str:
        if isinstance(value, bool):
            return str(value)
        if isinstance(value, (int, float)):
            return f"{value:.10g}"
        if isinstance(value, dict):
            # quoted so the commas inside the JSON survive csv parsing
            return '"' + json.dumps(value, sort_keys=True).replace('"', '""') + '"'
        return str(value)

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


def _or_nan(value: Optional[float]) -> float:
    return math.nan if value is None else value


__all__ = ["RunLogger"]
