"""Fixed-step simulation clock driven once per animation frame."""
from __future__ import annotations

from dataclasses import dataclass

from .config import PHYSICS_CFG


@dataclass
class SimulationClock:
    """Elapsed simulated time, advanced by a constant step per tick.

    The step models a 60 Hz refresh regardless of how long a frame really
    took, so the clock is deterministic but not wall-clock accurate.
    """

    tick_seconds: float = PHYSICS_CFG.tick_seconds
    elapsed: float = 0.0
    paused: bool = False

    def advance(self) -> float:
        if not self.paused:
            self.elapsed += self.tick_seconds
        return self.elapsed

    def reset(self) -> float:
        self.elapsed = 0.0
        return self.elapsed

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle(self) -> bool:
        """Flip between paused and running; returns the new ``paused`` flag."""

        self.paused = not self.paused
        return self.paused


__all__ = ["SimulationClock"]
