"""Configuration dataclasses for the maneuver simulator."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from maneuver_lab.core.model import Body


@dataclass(frozen=True)
class PhysicsCfg:
    gm: float = 3.986e14
    body_radius: float = 6_371_000.0
    body_name: str = "Earth"
    time_acceleration: float = 150.0
    tick_seconds: float = 1.0 / 60.0
    kepler_iterations: int = 5
    circular_threshold: float = 1e-3
    clamp_burn_speed: bool = True
    orbit_samples: int = 360

    def for_body(self, body: "Body") -> "PhysicsCfg":
        """Return a copy of this config orbiting *body* instead."""

        return replace(self, gm=body.mu, body_radius=body.radius, body_name=body.name)


@dataclass(frozen=True)
class ControlsCfg:
    altitude_min_km: float = 200.0
    altitude_max_km: float = 2_000.0
    altitude_step_km: float = 50.0
    delta_v_min: float = -1_500.0
    delta_v_max: float = 3_500.0
    delta_v_step: float = 25.0
    default_altitude_km: float = 400.0
    default_delta_v: float = 0.0
    default_zoom: float = 0.05
    zoom_factor: float = 1.5
    zoom_min: float = 0.002
    zoom_max: float = 2.0


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1600
    height: int = 1000
    fps: int = 60
    background_color: tuple[int, int, int] = (2, 6, 23)
    body_color: tuple[int, int, int] = (30, 64, 175)
    body_rim_color: tuple[int, int, int] = (56, 189, 248)
    reference_orbit_color: tuple[int, int, int, int] = (100, 116, 139, 90)
    reference_dash_degrees: float = 4.0
    circular_path_color: tuple[int, int, int] = (14, 165, 233)
    elliptical_path_color: tuple[int, int, int] = (16, 185, 129)
    high_eccentricity_color: tuple[int, int, int] = (244, 63, 94)
    high_eccentricity_threshold: float = 0.8
    path_line_width: int = 2
    spacecraft_color: tuple[int, int, int] = (251, 191, 36)
    spacecraft_pixel_radius: int = 5
    burn_marker_color: tuple[int, int, int] = (244, 63, 94)
    burn_marker_pixel_radius: int = 3
    warning_color: tuple[int, int, int] = (244, 63, 94)
    hud_text_color: tuple[int, int, int] = (234, 241, 255)
    hud_muted_color: tuple[int, int, int] = (148, 163, 184)
    hud_good_color: tuple[int, int, int] = (52, 211, 153)
    hud_bad_color: tuple[int, int, int] = (248, 113, 113)
    hud_panel_color: tuple[int, int, int, int] = (12, 18, 30, 200)
    hud_font_size: int = 18
    title_font_size: int = 28
    apoapsis_display_limit_km: float = 100_000.0
    star_count: int = 80


PHYSICS_CFG = PhysicsCfg()
CONTROLS_CFG = ControlsCfg()
RENDER_CFG = RenderCfg()


__all__ = [
    "CONTROLS_CFG",
    "ControlsCfg",
    "PHYSICS_CFG",
    "PhysicsCfg",
    "RENDER_CFG",
    "RenderCfg",
]
