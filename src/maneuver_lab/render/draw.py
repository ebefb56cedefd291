from __future__ import annotations

import math
import random
from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np
import pygame

from .hud import get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from maneuver_lab.core.config import RenderCfg
    from maneuver_lab.core.model import OrbitalElements
    from .camera import Camera


def path_color(elements: OrbitalElements, render_cfg: RenderCfg) -> tuple[int, int, int]:
    """Trajectory colour: no burn, highly eccentric, or ordinary ellipse."""

    if elements.delta_v == 0.0:
        return render_cfg.circular_path_color
    if elements.eccentricity > render_cfg.high_eccentricity_threshold:
        return render_cfg.high_eccentricity_color
    return render_cfg.elliptical_path_color


def project_path(camera: Camera, xs: np.ndarray, ys: np.ndarray) -> list[tuple[int, int]]:
    return [camera.world_to_screen(float(x), float(y)) for x, y in zip(xs, ys)]


def draw_body(
    surface: pygame.Surface,
    position: tuple[int, int],
    radius: int,
    *,
    render_cfg: RenderCfg,
) -> None:
    if radius <= 0:
        return
    pygame.draw.circle(surface, render_cfg.body_color, position, radius)
    pygame.draw.circle(surface, render_cfg.body_rim_color, position, radius, 2)


def draw_reference_orbit(
    surface: pygame.Surface,
    position: tuple[int, int],
    radius: int,
    *,
    render_cfg: RenderCfg,
) -> None:
    """Dashed circle marking the pre-burn orbit."""

    if radius <= 1:
        return
    size = radius * 2 + 2
    layer = pygame.Surface((size, size), pygame.SRCALPHA)
    rect = pygame.Rect(1, 1, radius * 2, radius * 2)
    dash = math.radians(render_cfg.reference_dash_degrees)
    start = 0.0
    while start < 2.0 * math.pi:
        pygame.draw.arc(layer, render_cfg.reference_orbit_color, rect, start, start + dash, 1)
        start += 2.0 * dash
    surface.blit(layer, layer.get_rect(center=position))


def draw_trajectory(
    surface: pygame.Surface,
    points: Sequence[tuple[int, int]],
    color: tuple[int, int, int],
    *,
    render_cfg: RenderCfg,
) -> None:
    if len(points) < 2:
        return
    glow = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    pygame.draw.lines(glow, (*color, 50), True, points, render_cfg.path_line_width * 4)
    surface.blit(glow, (0, 0))
    pygame.draw.lines(surface, color, True, points, render_cfg.path_line_width)
    pygame.draw.aalines(surface, color, True, points)


def draw_spacecraft(
    surface: pygame.Surface,
    position: tuple[int, int],
    *,
    render_cfg: RenderCfg,
) -> None:
    radius = render_cfg.spacecraft_pixel_radius
    halo = pygame.Surface((radius * 6, radius * 6), pygame.SRCALPHA)
    pygame.draw.circle(halo, (*render_cfg.spacecraft_color, 70), (radius * 3, radius * 3), radius * 3)
    surface.blit(halo, halo.get_rect(center=position))
    pygame.draw.circle(surface, render_cfg.spacecraft_color, position, radius)


def draw_burn_marker(
    surface: pygame.Surface,
    position: tuple[int, int],
    *,
    render_cfg: RenderCfg,
) -> None:
    pygame.draw.circle(
        surface,
        render_cfg.burn_marker_color,
        position,
        render_cfg.burn_marker_pixel_radius,
    )


def draw_escape_warning(
    surface: pygame.Surface,
    font: pygame.font.Font,
    anchor: tuple[int, int],
    *,
    render_cfg: RenderCfg,
) -> None:
    text = get_text_surface(font, "CRITICAL: ESCAPE VELOCITY EXCEEDED", render_cfg.warning_color)
    rect = text.get_rect(midbottom=anchor)
    surface.blit(text, rect)


def generate_starfield(
    num_stars: int,
    *,
    size: tuple[int, int],
    rng: random.Random | None = None,
) -> list[dict[str, object]]:
    rng = rng or random.Random()
    width, height = size
    stars: list[dict[str, object]] = []
    for _ in range(num_stars):
        radius = rng.choice([1, 1, 1, 2])
        alpha = rng.randint(25, 100)
        star_surface = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(star_surface, (255, 255, 255, alpha), (radius, radius), radius)
        stars.append(
            {
                "pos": (rng.uniform(0, width), rng.uniform(0, height)),
                "surface": star_surface,
                "radius": radius,
            }
        )
    return stars


def draw_starfield(
    surface: pygame.Surface,
    starfield: Iterable[dict[str, object]],
    drift: float,
) -> None:
    """Stars scroll slowly to the right as simulated time passes."""

    width, height = surface.get_size()
    for star in starfield:
        base_x, base_y = star["pos"]  # type: ignore[index]
        star_surface = star["surface"]  # type: ignore[index]
        radius = star["radius"]  # type: ignore[index]
        sx = int((base_x + drift) % width)
        sy = int(base_y % height)
        surface.blit(star_surface, (sx - radius, sy - radius))
