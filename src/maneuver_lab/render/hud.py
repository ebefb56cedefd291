from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, Sequence, TYPE_CHECKING

import pygame

if TYPE_CHECKING:  # pragma: no cover
    from maneuver_lab.core.config import RenderCfg
    from maneuver_lab.core.model import OrbitalState
    from maneuver_lab.core.regime import Readout


Color = tuple[int, int, int] | tuple[int, int, int, int]
HudLine = tuple[str, tuple[int, int, int]]

CONTROL_HINTS: tuple[str, ...] = (
    "UP/DOWN altitude   LEFT/RIGHT delta-v   0 reset vector",
    "+/- zoom   SPACE pause   R restart clock   B next body   1-6 scenarios",
)

_TEXT_SURFACE_CACHE_MAX_SIZE = 256
_TEXT_SURFACE_CACHE: OrderedDict[tuple[int, str, Color], pygame.Surface] = OrderedDict()


def get_text_surface(font: pygame.font.Font, text: str, color: Color) -> pygame.Surface:
    """Render ``text``, reusing the surface when the same label is drawn again."""

    key = (id(font), text, color)
    cached = _TEXT_SURFACE_CACHE.get(key)
    if cached is not None:
        _TEXT_SURFACE_CACHE.move_to_end(key)
        return cached
    rendered = font.render(text, True, color)
    _TEXT_SURFACE_CACHE[key] = rendered
    if len(_TEXT_SURFACE_CACHE) > _TEXT_SURFACE_CACHE_MAX_SIZE:
        _TEXT_SURFACE_CACHE.popitem(last=False)
    return rendered


def load_font(preferred_names: Iterable[str], size: int, *, bold: bool = False) -> pygame.font.Font:
    names = list(preferred_names)
    for name in names:
        match = pygame.font.match_font(name, bold=bold)
        if match:
            return pygame.font.Font(match, size)
    return pygame.font.SysFont(names[0] if names else None, size, bold=bold)


def hud_lines(
    readout: Readout,
    state: OrbitalState,
    body_name: str,
    *,
    paused: bool,
    render_cfg: RenderCfg,
) -> list[HudLine]:
    """Text rows of the readout panel, coloured by trajectory status."""

    text = render_cfg.hud_text_color
    muted = render_cfg.hud_muted_color
    stable = readout.status == "Stable Orbit"
    status_color = render_cfg.hud_good_color if stable else render_cfg.hud_bad_color
    status = readout.status.upper()
    if paused:
        status += "  (PAUSED)"
    lines: list[HudLine] = [
        (status, status_color),
        (f"Reference body   {body_name}", muted),
        ("", text),
        (f"Altitude         {state.altitude_km:,.0f} km", text),
        (f"Delta-V          {state.delta_v:+,.0f} m/s", text),
        (f"Burn velocity    {readout.burn_velocity}", text),
        ("", text),
        (f"Periapsis        {readout.periapsis}", text),
        (f"Apoapsis         {readout.apoapsis}", text),
        (f"Eccentricity     {readout.eccentricity}", text),
        (f"Period           {readout.period}", text),
    ]
    if readout.suborbital:
        lines.append(("WARNING: periapsis below surface", render_cfg.hud_bad_color))
    return lines


def build_text_panel(
    font: pygame.font.Font,
    lines: Sequence[HudLine],
    *,
    background_color: Color,
    padding: tuple[int, int] = (14, 14),
) -> pygame.Surface:
    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    width = max(font.size(text)[0] for text, _ in lines) + padding_x * 2
    height = line_height * len(lines) + padding_y * 2
    panel_surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(panel_surface, background_color, panel_surface.get_rect(), border_radius=12)
    for idx, (text, color) in enumerate(lines):
        if not text:
            continue
        panel_surface.blit(get_text_surface(font, text, color), (padding_x, padding_y + idx * line_height))
    return panel_surface
