"""Projector: turns a ray sweep into wall strips for the first-person view.

Rays fan evenly across the field of view, centred on the player heading. For
every hit the raw distance is multiplied by ``cos(ray_angle - heading)`` to
remove the fisheye bulge of a radial sweep on a flat screen; the same angle
that was cast is reused, never re-derived. Strip height falls off as
``view_height * scale / (corrected + 1)`` and is capped at the view height.
Strip color is the wall color scaled by point lighting and a linear distance
fade.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from pygame.math import Vector2

from config import (
    FOV,
    MAX_VIEW_DISTANCE,
    MIN_DISTANCE_FACTOR,
    NUM_RAYS,
    PROJECTION_SCALE,
    VECTORIZED_SWEEP,
)
from core.raycaster import RayCaster, RayHit
from core.scene import Color
from world.lighting import Lighting, distance_attenuation


@dataclass(frozen=True)
class Column:
    """One screen column of the projected view (one ray)."""

    index: int
    angle: float
    hit: RayHit
    x: float = 0.0
    width: float = 0.0
    corrected_distance: float = math.inf
    height: float = 0.0
    # Strip top, relative to the top of the view
    top: float = 0.0
    light: float = 0.0
    brightness: float = 0.0
    color: Optional[Color] = None

    @property
    def visible(self) -> bool:
        return self.hit.hit

    @property
    def strip_rect(self) -> Tuple[float, float, float, float]:
        """(x, y, w, h) of the strip relative to the top-left of the view."""
        return (self.x, self.top, self.width, self.height)


def ray_angles(heading: float, fov: float, num_rays: int) -> List[float]:
    """Angles of `num_rays` rays spanning `fov`, first at the left edge."""
    if num_rays == 1:
        return [heading]
    start = heading - fov / 2
    return [start + (fov * i) / (num_rays - 1) for i in range(num_rays)]


def correct_fisheye(distance: float, ray_angle: float, heading: float) -> float:
    return distance * math.cos(ray_angle - heading)


def strip_height(
    corrected_distance: float, view_height: float, scale: float = PROJECTION_SCALE
) -> float:
    return min(view_height, view_height * scale / (corrected_distance + 1))


def shade(color: Color, brightness: float) -> Color:
    r, g, b = color
    return (int(r * brightness), int(g * brightness), int(b * brightness))


class Projector:
    def __init__(
        self,
        raycaster: RayCaster,
        lighting: Lighting,
        *,
        view_width: float,
        view_height: float,
        num_rays: int = NUM_RAYS,
        fov: float = FOV,
        projection_scale: float = PROJECTION_SCALE,
        max_distance: float = MAX_VIEW_DISTANCE,
        min_distance_factor: float = MIN_DISTANCE_FACTOR,
        vectorized: bool = VECTORIZED_SWEEP,
    ) -> None:
        if num_rays < 1:
            raise ValueError(f"Projector needs at least one ray, got {num_rays}")
        if not 0 < fov < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {fov}")
        self.raycaster = raycaster
        self.lighting = lighting
        self.view_width = float(view_width)
        self.view_height = float(view_height)
        self.num_rays = int(num_rays)
        self.fov = float(fov)
        self.projection_scale = float(projection_scale)
        self.max_distance = float(max_distance)
        self.min_distance_factor = float(min_distance_factor)
        self.vectorized = vectorized

    @property
    def column_width(self) -> float:
        return self.view_width / self.num_rays

    def sweep(self, origin: Vector2, heading: float) -> Tuple[List[float], List[RayHit]]:
        angles = ray_angles(heading, self.fov, self.num_rays)
        if self.vectorized:
            hits = self.raycaster.cast_many(origin, angles)
        else:
            hits = [self.raycaster.cast_angle(origin, a) for a in angles]
        return angles, hits

    def column(self, index: int, angle: float, hit: RayHit, heading: float) -> Column:
        width = self.column_width
        x = index * width
        if not hit.hit:
            return Column(index=index, angle=angle, hit=hit, x=x, width=width)

        corrected = correct_fisheye(hit.distance, angle, heading)
        light = self.lighting.at(hit.point)
        brightness = light * distance_attenuation(
            corrected,
            max_distance=self.max_distance,
            floor=self.min_distance_factor,
        )
        height = strip_height(corrected, self.view_height, self.projection_scale)
        wall = self.raycaster.scene.wall_for(hit)
        return Column(
            index=index,
            angle=angle,
            hit=hit,
            x=x,
            width=width,
            corrected_distance=corrected,
            height=height,
            top=(self.view_height - height) / 2,
            light=light,
            brightness=brightness,
            color=shade(wall.color, brightness),
        )

    def project(self, origin: Vector2, heading: float) -> List[Column]:
        angles, hits = self.sweep(origin, heading)
        return [
            self.column(i, angle, hit, heading)
            for i, (angle, hit) in enumerate(zip(angles, hits))
        ]


def visible_columns(columns: Sequence[Column]) -> List[Column]:
    return [c for c in columns if c.visible]


__all__ = [
    "Column",
    "Projector",
    "ray_angles",
    "correct_fisheye",
    "strip_height",
    "shade",
    "visible_columns",
]
