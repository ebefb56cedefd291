"""Interactive pygame view of the maneuver simulation."""
from __future__ import annotations

import math
import time
from typing import Optional

import pygame

from maneuver_lab.core.config import RENDER_CFG, RenderCfg
from maneuver_lab.core.physics import sample_orbit
from maneuver_lab.core.simulation import Simulation
from maneuver_lab.data.bodies import get_body, next_body_key
from maneuver_lab.data.scenarios import SCENARIO_DEFINITIONS, SCENARIO_FLASH_DURATION
from maneuver_lab.record import FlightRecorder

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
from .hud import CONTROL_HINTS, build_text_panel, get_text_surface, hud_lines, load_font

FONT_NAMES = ("dejavusansmono", "menlo", "consolas", "couriernew")
SCENARIO_KEYS = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5, pygame.K_6)


def _handle_key(sim: Simulation, key: int, mods: int) -> Optional[str]:
    """Apply one key press; returns a message to flash, if any."""

    controls = sim.controls
    coarse = 4 if mods & pygame.KMOD_SHIFT else 1
    if key == pygame.K_SPACE:
        sim.clock.toggle()
    elif key == pygame.K_r:
        sim.clock.reset()
    elif key == pygame.K_0:
        controls.reset_vector()
        return "Vector reset"
    elif key == pygame.K_UP:
        controls.nudge_altitude(coarse)
    elif key == pygame.K_DOWN:
        controls.nudge_altitude(-coarse)
    elif key == pygame.K_RIGHT:
        controls.nudge_delta_v(coarse)
    elif key == pygame.K_LEFT:
        controls.nudge_delta_v(-coarse)
    elif key in (pygame.K_EQUALS, pygame.K_PLUS, pygame.K_KP_PLUS):
        controls.zoom_in()
    elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
        controls.zoom_out()
    elif key == pygame.K_b:
        body = get_body(next_body_key(sim.body.name))
        sim.set_body(body)
        return body.name
    elif key in SCENARIO_KEYS:
        scenario = SCENARIO_DEFINITIONS[SCENARIO_KEYS.index(key)]
        scenario.apply(controls)
        sim.clock.reset()
        return scenario.name
    return None


def run_live(
    sim: Simulation,
    *,
    recorder: Optional[FlightRecorder] = None,
    render_cfg: RenderCfg = RENDER_CFG,
) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode((render_cfg.width, render_cfg.height), pygame.RESIZABLE)
        pygame.display.set_caption("Maneuver Lab")
        clock = pygame.time.Clock()
        font = load_font(FONT_NAMES, render_cfg.hud_font_size)
        title_font = load_font(FONT_NAMES, render_cfg.title_font_size, bold=True)
        camera = Camera(screen.get_size(), sim.controls.state.zoom)
        stars = generate_starfield(render_cfg.star_count, size=screen.get_size())
        flash_text: Optional[str] = None
        flash_time = 0.0

        if recorder is not None:
            recorder.start(sim)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    camera.update_size(screen.get_size())
                elif event.type == pygame.MOUSEWHEEL:
                    if event.y > 0:
                        sim.controls.zoom_in()
                    elif event.y < 0:
                        sim.controls.zoom_out()
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                        continue
                    message = _handle_key(sim, event.key, event.mod)
                    if message:
                        flash_text = message
                        flash_time = time.perf_counter()

            snapshot = sim.step()
            if recorder is not None:
                # Paused frames only log control changes.
                recorder.record(sim, snapshot)
            elements = sim.elements()

            camera.set_zoom_target(sim.controls.state.zoom)
            camera.update()
            center = camera.center

            screen.fill(render_cfg.background_color)
            draw_starfield(screen, stars, snapshot.elapsed / 10.0)
            draw_body(
                screen,
                center,
                camera.meters_to_pixels(elements.body_radius),
                render_cfg=render_cfg,
            )
            draw_reference_orbit(
                screen,
                center,
                camera.meters_to_pixels(elements.r1),
                render_cfg=render_cfg,
            )

            if snapshot.regime.is_bound:
                xs, ys = sample_orbit(elements, sim.cfg.orbit_samples)
                if xs.size:
                    draw_trajectory(
                        screen,
                        project_path(camera, xs, ys),
                        path_color(elements, render_cfg),
                        render_cfg=render_cfg,
                    )
            else:
                body_px = camera.meters_to_pixels(elements.body_radius)
                draw_escape_warning(
                    screen,
                    title_font,
                    (center[0], center[1] - body_px - 40),
                    render_cfg=render_cfg,
                )

            if snapshot.has_position:
                angle = snapshot.display_angle
                x = snapshot.current_radius * math.cos(angle)
                y = snapshot.current_radius * math.sin(angle)
                draw_spacecraft(screen, camera.world_to_screen(x, y), render_cfg=render_cfg)
                draw_burn_marker(screen, camera.world_to_screen(elements.r1, 0.0), render_cfg=render_cfg)

            lines = hud_lines(
                sim.readout(),
                sim.controls.state,
                sim.body.name,
                paused=sim.clock.paused,
                render_cfg=render_cfg,
            )
            panel = build_text_panel(font, lines, background_color=render_cfg.hud_panel_color)
            screen.blit(panel, (16, 16))

            width, height = screen.get_size()
            for idx, hint in enumerate(reversed(CONTROL_HINTS)):
                hint_surf = get_text_surface(font, hint, render_cfg.hud_muted_color)
                screen.blit(hint_surf, (16, height - 16 - (idx + 1) * font.get_linesize()))

            if flash_text and time.perf_counter() - flash_time < SCENARIO_FLASH_DURATION:
                flash_surf = get_text_surface(title_font, flash_text, render_cfg.hud_text_color)
                screen.blit(flash_surf, flash_surf.get_rect(center=(width // 2, 40)))

            fps_surf = font.render(f"FPS: {clock.get_fps():.1f}", True, render_cfg.hud_muted_color)
            screen.blit(fps_surf, fps_surf.get_rect(bottomright=(width - 16, height - 16)))

            pygame.display.flip()
            clock.tick(render_cfg.fps)
    finally:
        if recorder is not None:
            recorder.logger.close()
        pygame.quit()


__all__ = ["run_live"]
