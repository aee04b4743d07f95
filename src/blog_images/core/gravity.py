"""Translation of generic gravity keywords into ImageKit layer positions."""

from typing import Dict

GRAVITY_MAP: Dict[str, str] = {
    "center": "center",
    "north_west": "top_left",
    "north_east": "top_right",
    "south_west": "bottom_left",
    "south_east": "bottom_right",
    "north": "top",
    "south": "bottom",
    "west": "left",
    "east": "right",
}


def resolve_gravity(gravity: str) -> str:
    """Return the CDN position for ``gravity``, or ``gravity`` itself if unknown."""
    return GRAVITY_MAP.get(gravity, gravity)
