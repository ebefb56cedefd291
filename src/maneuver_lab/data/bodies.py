"""Central-body presets and loading of custom bodies."""
from __future__ import annotations

import json
from pathlib import Path

from maneuver_lab.core.model import Body

G = 6.674e-11

BODY_DEFINITIONS: tuple[Body, ...] = (
    Body(name="Earth", radius=6_371_000.0, mu=3.986e14),
    Body(name="Moon", radius=1_737_400.0, mu=4.9048695e12),
    Body(name="Mars", radius=3_389_500.0, mu=4.282837e13),
    Body(name="Venus", radius=6_051_800.0, mu=3.24859e14),
    Body(name="Mercury", radius=2_439_700.0, mu=2.2032e13),
    Body(name="Jupiter", radius=69_911_000.0, mu=1.26686534e17),
)

BODIES: dict[str, Body] = {body.name.lower(): body for body in BODY_DEFINITIONS}
BODY_DISPLAY_ORDER: list[str] = [body.name.lower() for body in BODY_DEFINITIONS]
DEFAULT_BODY_KEY = BODY_DISPLAY_ORDER[0]


def get_body(name: str) -> Body:
    """Look up a preset by case-insensitive name; raises ``KeyError`` if unknown."""

    key = name.strip().lower()
    if key not in BODIES:
        raise KeyError(f"Unknown body '{name}'. Available: {', '.join(BODY_DISPLAY_ORDER)}")
    return BODIES[key]


def list_bodies() -> list[str]:
    return list(BODY_DISPLAY_ORDER)


def next_body_key(current: str) -> str:
    """The preset after ``current`` in display order, wrapping around.

    Bodies that are not presets (loaded from a file) cycle to the default.
    """

    key = current.lower()
    if key not in BODY_DISPLAY_ORDER:
        return DEFAULT_BODY_KEY
    index = BODY_DISPLAY_ORDER.index(key)
    return BODY_DISPLAY_ORDER[(index + 1) % len(BODY_DISPLAY_ORDER)]


def body_from_dict(data: dict) -> Body:
    """Build a :class:`Body` from ``name``, ``radius`` and ``mu`` (or ``mass``)."""

    try:
        name = str(data["name"])
        radius = float(data["radius"])
    except KeyError as err:
        raise ValueError(f"Body definition is missing '{err.args[0]}'") from err
    if "mu" in data:
        mu = float(data["mu"])
    elif "mass" in data:
        mu = G * float(data["mass"])
    else:
        raise ValueError("Body definition needs either 'mu' or 'mass'")
    if radius <= 0.0 or mu <= 0.0:
        raise ValueError("Body radius and gravitational parameter must be positive")
    return Body(name=name, radius=radius, mu=mu)


def load_body(path: str | Path) -> Body:
    with Path(path).open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return body_from_dict(data)


__all__ = [
    "BODIES",
    "BODY_DEFINITIONS",
    "BODY_DISPLAY_ORDER",
    "DEFAULT_BODY_KEY",
    "body_from_dict",
    "get_body",
    "list_bodies",
    "load_body",
    "next_body_key",
]
