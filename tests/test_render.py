import json

import pygame
import pytest

from maneuver_lab.core.config import RENDER_CFG
from maneuver_lab.core.physics import compute_elements
from maneuver_lab.core.regime import Regime, describe
from maneuver_lab.core.simulation import Simulation
from maneuver_lab.data.bodies import load_body
from maneuver_lab.render import Camera, hud_lines, path_color
from maneuver_lab.render.app import _handle_key

GM = 3.986e14
R = 6_371_000.0


def test_camera_maps_metres_to_pixels_with_y_up():
    camera = Camera((800, 600), zoom=0.05)
    assert camera.ppm == pytest.approx(5e-5)
    assert camera.world_to_screen(0.0, 0.0) == (400, 300)
    assert camera.world_to_screen(2_000_000.0, 2_000_000.0) == (500, 200)


def test_camera_eases_towards_zoom_target():
    camera = Camera((800, 600), zoom=0.1)
    camera.set_zoom_target(0.2)
    camera.update(smoothing=0.5)
    assert camera.ppm == pytest.approx(1.5e-4)
    camera.set_zoom(0.3)
    assert camera.ppm == pytest.approx(3e-4)


@pytest.mark.parametrize(
    "delta_v, expected",
    [
        (0.0, RENDER_CFG.circular_path_color),
        (500.0, RENDER_CFG.elliptical_path_color),
        (3_100.0, RENDER_CFG.high_eccentricity_color),
    ],
)
def test_path_color_tracks_shape(delta_v, expected):
    assert path_color(compute_elements(GM, R, 400.0, delta_v), RENDER_CFG) == expected


def test_hud_lines_flag_suborbital_and_pause():
    sim = Simulation()
    sim.controls.set_delta_v(-200.0)
    lines = hud_lines(sim.readout(), sim.controls.state, sim.body.name, paused=True, render_cfg=RENDER_CFG)
    assert lines[0] == ("STABLE ORBIT  (PAUSED)", RENDER_CFG.hud_good_color)
    assert lines[-1][0].startswith("WARNING")


def test_hud_lines_for_escape():
    el = compute_elements(GM, R, 400.0, 3_300.0)
    readout = describe(el, Regime.ESCAPE)
    sim = Simulation()
    lines = hud_lines(readout, sim.controls.state, "Earth", paused=False, render_cfg=RENDER_CFG)
    assert lines[0] == ("ESCAPE TRAJECTORY", RENDER_CFG.hud_bad_color)
    assert ("Apoapsis         ∞", RENDER_CFG.hud_text_color) in lines


def test_keys_drive_controls_and_clock():
    sim = Simulation()
    _handle_key(sim, pygame.K_RIGHT, 0)
    assert sim.controls.state.delta_v == 25.0
    _handle_key(sim, pygame.K_UP, pygame.KMOD_SHIFT)
    assert sim.controls.state.altitude_km == 600.0
    assert _handle_key(sim, pygame.K_0, 0) == "Vector reset"
    assert sim.controls.state.delta_v == 0.0
    _handle_key(sim, pygame.K_SPACE, 0)
    assert sim.clock.paused


def test_body_key_leaves_a_custom_body(tmp_path):
    path = tmp_path / "kerbin.json"
    path.write_text(json.dumps({"name": "Kerbin", "radius": 600_000, "mu": 3.5316e12}), encoding="utf-8")
    sim = Simulation(load_body(path))
    assert _handle_key(sim, pygame.K_b, 0) == "Earth"
    assert sim.body.mu == 3.986e14


def test_keys_switch_body_and_scenario():
    sim = Simulation()
    assert _handle_key(sim, pygame.K_b, 0) == "Moon"
    assert sim.body.name == "Moon"
    sim.step()
    name = _handle_key(sim, pygame.K_5, 0)
    assert name == "Escape"
    assert sim.clock.elapsed == 0.0
    assert sim.regime() is Regime.ESCAPE
