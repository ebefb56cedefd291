"""Rendering helpers for the maneuver simulator."""

from .camera import Camera
from .draw import (
    draw_body,
    draw_burn_marker,
    draw_escape_warning,
    draw_reference_orbit,
    draw_spacecraft,
    draw_starfield,
    draw_trajectory,
    generate_starfield,
    path_color,
    project_path,
)
from .hud import (
    CONTROL_HINTS,
    build_text_panel,
    get_text_surface,
    hud_lines,
    load_font,
)

__all__ = [
    "CONTROL_HINTS",
    "Camera",
    "build_text_panel",
    "draw_body",
    "draw_burn_marker",
    "draw_escape_warning",
    "draw_reference_orbit",
    "draw_spacecraft",
    "draw_starfield",
    "draw_trajectory",
    "generate_starfield",
    "get_text_surface",
    "hud_lines",
    "load_font",
    "path_color",
    "project_path",
]
