"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import Lighting, build_default_scene

The simulation itself lives in `world.simulation`; it pulls in the player
and render packages, so it is not re-exported here.
"""

from .world_collision import (
    closest_point_on_segment,
    movement_blocked_by_wall,
    point_segment_distance,
)
from .lighting import Lighting, distance_attenuation
from .levels import build_default_scene, build_empty_arena, default_lights

__all__ = [
    "closest_point_on_segment",
    "movement_blocked_by_wall",
    "point_segment_distance",
    "Lighting",
    "distance_attenuation",
    "build_default_scene",
    "build_empty_arena",
    "default_lights",
]
