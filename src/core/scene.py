"""Static level data: wall segments and point lights.

A Scene is built once and never mutated afterwards; repopulating a level means
constructing a new Scene. Ray hits refer to walls by their index into
``Scene.walls`` so a hit never holds on to the wall object itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from pygame.math import Vector2

Color = Tuple[int, int, int]
DEFAULT_WALL_COLOR: Color = (150, 150, 150)


@dataclass(frozen=True, eq=False)
class Wall:
    start: Vector2
    end: Vector2
    color: Color = DEFAULT_WALL_COLOR

    def __post_init__(self) -> None:
        # Own private copies so callers can't move a wall after the fact
        object.__setattr__(self, "start", Vector2(self.start))
        object.__setattr__(self, "end", Vector2(self.end))
        object.__setattr__(self, "color", tuple(int(c) for c in self.color))

    @property
    def direction(self) -> Vector2:
        return self.end - self.start

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True, eq=False)
class LightSource:
    position: Vector2
    intensity: float
    color: Color = (255, 255, 255)

    def __post_init__(self) -> None:
        if not self.intensity > 0:
            raise ValueError(
                f"Light intensity must be positive, got {self.intensity!r}"
            )
        object.__setattr__(self, "position", Vector2(self.position))
        object.__setattr__(self, "intensity", float(self.intensity))
        object.__setattr__(self, "color", tuple(int(c) for c in self.color))


@dataclass(frozen=True)
class Scene:
    walls: Tuple[Wall, ...] = ()
    lights: Tuple[LightSource, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "walls", tuple(self.walls))
        object.__setattr__(self, "lights", tuple(self.lights))

    @classmethod
    def from_segments(
        cls,
        segments: Iterable[Tuple[Tuple[float, float], Tuple[float, float], Color]],
        lights: Iterable[LightSource] = (),
    ) -> "Scene":
        """Build a scene from ``((x1, y1), (x2, y2), color)`` tuples."""
        return cls(
            walls=tuple(Wall(start, end, color) for start, end, color in segments),
            lights=tuple(lights),
        )

    def iter_walls(self) -> Iterator[Wall]:
        return iter(self.walls)

    def iter_lights(self) -> Iterator[LightSource]:
        return iter(self.lights)

    def wall_for(self, hit) -> Optional[Wall]:
        """Resolve the wall a RayHit refers to (None for a miss)."""
        if not hit.hit or hit.wall_index is None:
            return None
        return self.walls[hit.wall_index]

    def bounds(self) -> Tuple[float, float, float, float]:
        """Return (min_x, max_x, min_y, max_y) over all wall endpoints."""
        if not self.walls:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p.x for w in self.walls for p in (w.start, w.end)]
        ys = [p.y for w in self.walls for p in (w.start, w.end)]
        return (min(xs), max(xs), min(ys), max(ys))


__all__ = ["Color", "Wall", "LightSource", "Scene", "DEFAULT_WALL_COLOR"]
