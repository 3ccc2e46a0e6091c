"""Nearest-wall ray queries against a Scene.

Each wall is intersected by solving ``origin + t * dir == start + u * (end - start)``
with the 2x2 cross-product determinant ``dir x wall_dir``. A hit needs
``t > 0`` (strictly ahead) and ``0 <= u <= 1`` (on the segment); the smallest
``t`` wins and the first wall seen wins a tie.

`cast_many` runs the same arithmetic for a whole sweep of angles at once with
numpy broadcasting (rays x walls); it only reads the precomputed wall arrays.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from pygame.math import Vector2

from config import PARALLEL_EPSILON
from core.scene import Scene, Wall


@dataclass(frozen=True)
class RayHit:
    hit: bool
    point: Optional[Vector2] = None
    distance: float = math.inf
    wall_index: Optional[int] = None


MISS = RayHit(hit=False)


class RayCaster:
    def __init__(self, scene: Scene, *, epsilon: float = PARALLEL_EPSILON) -> None:
        self.scene = scene
        self.epsilon = float(epsilon)

        # Scene is immutable, so the wall arrays are built once
        walls = scene.walls
        self._sx = np.array([w.start.x for w in walls], dtype=np.float64)
        self._sy = np.array([w.start.y for w in walls], dtype=np.float64)
        self._wx = np.array([w.direction.x for w in walls], dtype=np.float64)
        self._wy = np.array([w.direction.y for w in walls], dtype=np.float64)

    def intersect(
        self, origin: Vector2, direction: Vector2, wall: Wall
    ) -> Optional[Tuple[float, Vector2]]:
        """Return ``(t, point)`` where the ray meets `wall`, or None."""
        wall_dir = wall.direction
        wall_dx, wall_dy = wall_dir.x, wall_dir.y

        denom = direction.x * wall_dy - direction.y * wall_dx
        if abs(denom) < self.epsilon:
            return None

        ox = wall.start.x - origin.x
        oy = wall.start.y - origin.y
        t = (ox * wall_dy - oy * wall_dx) / denom
        u = (ox * direction.y - oy * direction.x) / denom

        if t > 0 and 0 <= u <= 1:
            return t, Vector2(origin.x + t * direction.x, origin.y + t * direction.y)
        return None

    def cast(self, origin: Vector2, direction: Vector2) -> RayHit:
        """Nearest hit along `direction` (expected to be a unit vector)."""
        best: Optional[RayHit] = None
        for index, wall in enumerate(self.scene.walls):
            found = self.intersect(origin, direction, wall)
            if found is None:
                continue
            t, point = found
            if best is None or t < best.distance:
                best = RayHit(hit=True, point=point, distance=t, wall_index=index)
        return best if best is not None else MISS

    def cast_angle(self, origin: Vector2, angle: float) -> RayHit:
        return self.cast(origin, Vector2(math.cos(angle), math.sin(angle)))

    def cast_many(self, origin: Vector2, angles: Sequence[float]) -> List[RayHit]:
        """Cast one ray per angle from `origin` in a single numpy batch."""
        angles = np.asarray(angles, dtype=np.float64)
        if angles.size == 0:
            return []
        if self._sx.size == 0:
            return [MISS] * int(angles.size)

        dx = np.cos(angles)[:, None]
        dy = np.sin(angles)[:, None]
        ox = self._sx[None, :] - origin.x
        oy = self._sy[None, :] - origin.y

        denom = dx * self._wy[None, :] - dy * self._wx[None, :]
        parallel = np.abs(denom) < self.epsilon
        safe = np.where(parallel, 1.0, denom)
        t = (ox * self._wy[None, :] - oy * self._wx[None, :]) / safe
        u = (ox * dy - oy * dx) / safe

        valid = ~parallel & (t > 0) & (u >= 0) & (u <= 1)
        t = np.where(valid, t, np.inf)
        # argmin returns the first minimum, matching the scalar tie rule
        nearest = np.argmin(t, axis=1)
        rows = np.arange(t.shape[0])
        best_t = t[rows, nearest]

        hits: List[RayHit] = []
        for i in range(t.shape[0]):
            if not np.isfinite(best_t[i]):
                hits.append(MISS)
                continue
            dist = float(best_t[i])
            hits.append(
                RayHit(
                    hit=True,
                    point=Vector2(
                        origin.x + dist * float(dx[i, 0]),
                        origin.y + dist * float(dy[i, 0]),
                    ),
                    distance=dist,
                    wall_index=int(nearest[i]),
                )
            )
        return hits


__all__ = ["RayHit", "MISS", "RayCaster"]
