from __future__ import annotations

import math

from pygame.math import Vector2

from config import STARTING_HEADING, STARTING_POS


class Player:
    """Position and heading of the viewer on the 2D map.

    The heading is in radians and is never wrapped; only sin/cos ever read it.
    """

    def __init__(self, position=None, heading: float = STARTING_HEADING) -> None:
        self.position = Vector2(position if position is not None else STARTING_POS)
        self.heading = float(heading)

    @property
    def direction(self) -> Vector2:
        return Vector2(math.cos(self.heading), math.sin(self.heading))

    def pose(self) -> tuple[Vector2, float]:
        """Copy of (position, heading) safe to hand to other frames."""
        return Vector2(self.position), self.heading

    def clamp_to(self, bounds: tuple[float, float, float, float]) -> None:
        min_x, max_x, min_y, max_y = bounds
        self.position.x = max(min_x, min(max_x, self.position.x))
        self.position.y = max(min_y, min(max_y, self.position.y))


__all__ = ["Player"]
