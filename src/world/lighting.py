"""Point-light illumination for wall hits.

Brightness at a point is the ambient floor plus an additive contribution from
every light, clamped to `max_light`:

    ambient + sum(intensity / (distance * falloff + 1) * scale)

Lights shine through walls: there is no occlusion test, only Euclidean
distance. The ``+ 1`` keeps a light sitting exactly on the point finite.
"""

from __future__ import annotations

from typing import Iterable, Tuple

from pygame.math import Vector2

from config import (
    AMBIENT_LIGHT,
    LIGHT_FALLOFF,
    LIGHT_SCALE,
    MAX_LIGHT,
    MAX_VIEW_DISTANCE,
    MIN_DISTANCE_FACTOR,
)
from core.scene import LightSource


class Lighting:
    def __init__(
        self,
        lights: Iterable[LightSource],
        *,
        ambient: float = AMBIENT_LIGHT,
        falloff: float = LIGHT_FALLOFF,
        scale: float = LIGHT_SCALE,
        max_light: float = MAX_LIGHT,
    ) -> None:
        self.lights: Tuple[LightSource, ...] = tuple(lights)
        self.ambient = float(ambient)
        self.falloff = float(falloff)
        self.scale = float(scale)
        self.max_light = float(max_light)

    def contribution(self, light: LightSource, point: Vector2) -> float:
        distance = light.position.distance_to(point)
        return light.intensity / (distance * self.falloff + 1.0) * self.scale

    def at(self, point: Vector2) -> float:
        total = self.ambient
        for light in self.lights:
            total += self.contribution(light, point)
        return min(self.max_light, total)

    __call__ = at


def distance_attenuation(
    distance: float,
    *,
    max_distance: float = MAX_VIEW_DISTANCE,
    floor: float = MIN_DISTANCE_FACTOR,
) -> float:
    """Linear fade from 1 at the eye to `floor` at `max_distance` and beyond."""
    return max(floor, 1.0 - distance / max_distance)


__all__ = ["Lighting", "distance_attenuation"]
