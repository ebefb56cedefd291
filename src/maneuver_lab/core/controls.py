"""Slider-style controls that own and mutate the :class:`OrbitalState`."""
from __future__ import annotations

from .config import CONTROLS_CFG, ControlsCfg
from .model import OrbitalState


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


def snap(value: float, step: float, origin: float) -> float:
    """Round *value* onto the grid ``origin + k * step``."""

    if step <= 0.0:
        return value
    return origin + round((value - origin) / step) * step


class Controls:
    """Range-checked access to the orbital state.

    The engine never re-validates slider ranges, so every mutation goes
    through here.
    """

    def __init__(self, state: OrbitalState | None = None, cfg: ControlsCfg = CONTROLS_CFG) -> None:
        self._cfg = cfg
        self._state = state or OrbitalState(
            altitude_km=cfg.default_altitude_km,
            delta_v=cfg.default_delta_v,
            zoom=cfg.default_zoom,
        )
        self.set_altitude(self._state.altitude_km)
        self.set_delta_v(self._state.delta_v)
        self.set_zoom(self._state.zoom)

    @property
    def state(self) -> OrbitalState:
        return self._state

    @property
    def cfg(self) -> ControlsCfg:
        return self._cfg

    def set_altitude(self, altitude_km: float) -> float:
        cfg = self._cfg
        value = snap(altitude_km, cfg.altitude_step_km, cfg.altitude_min_km)
        self._state.altitude_km = clamp(value, cfg.altitude_min_km, cfg.altitude_max_km)
        return self._state.altitude_km

    def set_delta_v(self, delta_v: float) -> float:
        cfg = self._cfg
        value = snap(delta_v, cfg.delta_v_step, cfg.delta_v_min)
        self._state.delta_v = clamp(value, cfg.delta_v_min, cfg.delta_v_max)
        return self._state.delta_v

    def set_zoom(self, zoom: float) -> float:
        self._state.zoom = clamp(zoom, self._cfg.zoom_min, self._cfg.zoom_max)
        return self._state.zoom

    def nudge_altitude(self, steps: int) -> float:
        return self.set_altitude(self._state.altitude_km + steps * self._cfg.altitude_step_km)

    def nudge_delta_v(self, steps: int) -> float:
        return self.set_delta_v(self._state.delta_v + steps * self._cfg.delta_v_step)

    def zoom_in(self) -> float:
        return self.set_zoom(self._state.zoom * self._cfg.zoom_factor)

    def zoom_out(self) -> float:
        return self.set_zoom(self._state.zoom / self._cfg.zoom_factor)

    def reset_vector(self) -> None:
        """Cancel the planned burn, keeping altitude and zoom."""

        self._state.delta_v = 0.0

    def reset(self) -> None:
        cfg = self._cfg
        self._state.altitude_km = cfg.default_altitude_km
        self._state.delta_v = cfg.default_delta_v
        self._state.zoom = cfg.default_zoom


__all__ = ["Controls", "clamp", "snap"]
