"""Mover: autonomous wandering, wall blocking, and arena clamping.

Each tick the player is pushed along its heading at a speed modulated by two
slow oscillators (one per axis), so the path curves instead of running in
straight lines. A move that would put the player within `player_radius` of a
wall is dropped and the heading is kicked by a fixed obtuse angle instead;
over the next ticks the player turns away from the wall. This is not a
reflection and is not meant to be one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from pygame.math import Vector2

from config import (
    ARENA_BOUNDS,
    BOUNCE_ANGLE,
    MOVE_SPEED,
    OSC_AMPLITUDE,
    OSC_FREQUENCY_X,
    OSC_FREQUENCY_Y,
    PLAYER_RADIUS,
    ROT_OSC_AMPLITUDE,
    ROT_SPEED,
)
from core.scene import Scene
from player.player import Player
from world.world_collision import movement_blocked_by_wall


@dataclass(frozen=True)
class Oscillator:
    """Speed multiplier ``1 + wave(t * frequency) * amplitude``."""

    frequency: float
    amplitude: float
    wave: Callable[[float], float] = math.sin

    def factor(self, t: float) -> float:
        return 1.0 + self.wave(t * self.frequency) * self.amplitude


class Mover:
    def __init__(
        self,
        scene: Scene,
        player: Optional[Player] = None,
        *,
        move_speed: float = MOVE_SPEED,
        rot_speed: float = ROT_SPEED,
        player_radius: float = PLAYER_RADIUS,
        bounce_angle: float = BOUNCE_ANGLE,
        bounds: Tuple[float, float, float, float] = ARENA_BOUNDS,
        osc_x: Optional[Oscillator] = None,
        osc_y: Optional[Oscillator] = None,
        osc_turn: Optional[Oscillator] = None,
    ) -> None:
        self.scene = scene
        self.player = player or Player()
        self.move_speed = float(move_speed)
        self.rot_speed = float(rot_speed)
        self.player_radius = float(player_radius)
        self.bounce_angle = float(bounce_angle)
        self.bounds = tuple(float(b) for b in bounds)
        self.osc_x = osc_x or Oscillator(OSC_FREQUENCY_X, OSC_AMPLITUDE, math.sin)
        self.osc_y = osc_y or Oscillator(OSC_FREQUENCY_Y, OSC_AMPLITUDE, math.cos)
        self.osc_turn = osc_turn or Oscillator(
            OSC_FREQUENCY_Y, ROT_OSC_AMPLITUDE, math.cos
        )

    def displacement(self, t: float) -> Vector2:
        direction = self.player.direction
        return Vector2(
            direction.x * self.move_speed * self.osc_x.factor(t),
            direction.y * self.move_speed * self.osc_y.factor(t),
        )

    def blocked(self, pos: Vector2) -> bool:
        return (
            movement_blocked_by_wall(self.scene.walls, pos, self.player_radius)
            is not None
        )

    def update(self, t: float) -> bool:
        """Advance one tick at animation time `t`.

        Returns True if the player translated this tick.
        """
        candidate = self.player.position + self.displacement(t)

        moved = not self.blocked(candidate)
        if moved:
            self.player.position = candidate
        else:
            self.player.heading += self.bounce_angle

        # Turning runs whether or not the move went through
        self.player.heading += self.rot_speed * self.osc_turn.factor(t)

        self.player.clamp_to(self.bounds)
        return moved


__all__ = ["Mover", "Oscillator"]
