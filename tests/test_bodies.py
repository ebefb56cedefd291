import json

import pytest

from maneuver_lab.core.config import PhysicsCfg
from maneuver_lab.data.bodies import (
    BODY_DISPLAY_ORDER,
    DEFAULT_BODY_KEY,
    G,
    body_from_dict,
    get_body,
    list_bodies,
    load_body,
    next_body_key,
)
from maneuver_lab.data.scenarios import SCENARIO_DEFINITIONS, SCENARIOS
from maneuver_lab.core.controls import Controls


def test_earth_preset_matches_reference_constants():
    earth = get_body("Earth")
    assert earth.mu == 3.986e14
    assert earth.radius == 6_371_000.0
    assert earth.surface_gravity == pytest.approx(9.82, abs=0.01)


def test_lookup_is_case_insensitive_and_strict():
    assert get_body("  MARS ").name == "Mars"
    with pytest.raises(KeyError):
        get_body("pluto")


def test_body_cycle_wraps_around():
    assert list_bodies() == BODY_DISPLAY_ORDER
    assert next_body_key("Earth") == BODY_DISPLAY_ORDER[1]
    assert next_body_key(BODY_DISPLAY_ORDER[-1]) == BODY_DISPLAY_ORDER[0]


def test_body_cycle_from_custom_body_returns_to_default():
    assert next_body_key("Kerbin") == DEFAULT_BODY_KEY


def test_physics_config_follows_body():
    cfg = PhysicsCfg().for_body(get_body("moon"))
    assert cfg.body_name == "Moon"
    assert cfg.gm == pytest.approx(4.9048695e12)
    assert cfg.time_acceleration == PhysicsCfg().time_acceleration


def test_body_from_mass():
    body = body_from_dict({"name": "Ceres", "radius": 469_730, "mass": 9.3835e20})
    assert body.mu == pytest.approx(G * 9.3835e20)


@pytest.mark.parametrize(
    "data",
    [
        {"radius": 1.0, "mu": 1.0},
        {"name": "x", "mu": 1.0},
        {"name": "x", "radius": 1.0},
        {"name": "x", "radius": -1.0, "mu": 1.0},
    ],
)
def test_invalid_body_definitions(data):
    with pytest.raises(ValueError):
        body_from_dict(data)


def test_load_body_from_json(tmp_path):
    path = tmp_path / "kerbin.json"
    path.write_text(json.dumps({"name": "Kerbin", "radius": 600_000, "mu": 3.5316e12}), encoding="utf-8")
    body = load_body(path)
    assert body.name == "Kerbin"
    assert body.radius == 600_000.0


def test_load_body_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_body(path)


def test_scenarios_fit_slider_ranges():
    for scenario in SCENARIO_DEFINITIONS:
        controls = Controls()
        scenario.apply(controls)
        assert controls.state.altitude_km == scenario.altitude_km
        assert controls.state.delta_v == scenario.delta_v


def test_scenario_lookup():
    assert SCENARIOS["escape"].delta_v > 3_178.0
    assert SCENARIOS["deorbit"].delta_v < 0.0
