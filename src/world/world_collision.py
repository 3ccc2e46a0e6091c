"""Player-vs-wall collision utilities.

Expose `movement_blocked_by_wall(walls, new_pos, player_radius=15)`.
This keeps the Mover focused on steering while reusing the collision routine.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pygame.math import Vector2

from core.scene import Wall


def closest_point_on_segment(point: Vector2, start: Vector2, end: Vector2) -> Vector2:
    """Project `point` onto the segment, clamping the parameter to [0, 1]."""
    seg = end - start
    length_sq = seg.length_squared()
    if length_sq == 0:
        return Vector2(start)
    t = max(0.0, min(1.0, (point - start).dot(seg) / length_sq))
    return start + seg * t


def point_segment_distance(point: Vector2, wall: Wall) -> Optional[float]:
    """Euclidean distance from `point` to the wall segment.

    Returns None for a zero-length wall; callers skip those.
    """
    if wall.length == 0:
        return None
    return point.distance_to(closest_point_on_segment(point, wall.start, wall.end))


def movement_blocked_by_wall(
    walls: Iterable[Wall], new_pos: Vector2, player_radius: float = 15.0
) -> Optional[int]:
    """Return the index of the first wall closer than `player_radius` to
    `new_pos`, otherwise None.
    """
    radius_sq = player_radius * player_radius
    for index, wall in enumerate(walls):
        if wall.direction.length_squared() == 0:
            continue
        closest = closest_point_on_segment(new_pos, wall.start, wall.end)
        if new_pos.distance_squared_to(closest) < radius_sq:
            return index
    return None


__all__ = [
    "closest_point_on_segment",
    "point_segment_distance",
    "movement_blocked_by_wall",
]
