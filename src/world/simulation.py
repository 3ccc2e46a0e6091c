"""Simulation that owns the level, the player, and the per-frame pipeline.

One call to `step()` runs a whole frame in order: the Mover advances the
player, the Projector sweeps rays from the new pose, and the result is frozen
into a FrameSnapshot for whatever draws it. The only state carried between
frames is the player pose and the animation clock.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from pygame.math import Vector2

from config import (
    FOV,
    HEIGHT,
    LOG_TIMING,
    NUM_RAYS,
    TIME_STEP,
    VIEW_HEIGHT_FRAC,
    VIEW_WIDTH_FRAC,
    WIDTH,
)
from core.raycaster import RayCaster, RayHit
from core.scene import LightSource, Scene, Wall
from player import Mover, Player
from render.projector import Column, Projector, visible_columns
from world.levels import build_default_scene
from world.lighting import Lighting


@dataclass(frozen=True)
class FrameSnapshot:
    time: float
    position: Vector2
    heading: float
    moved: bool
    walls: Tuple[Wall, ...]
    lights: Tuple[LightSource, ...]
    columns: Tuple[Column, ...]

    @property
    def hits(self) -> Tuple[RayHit, ...]:
        return tuple(c.hit for c in self.columns)

    @property
    def visible_columns(self) -> List[Column]:
        return visible_columns(self.columns)


class Simulation:
    def __init__(
        self,
        scene: Optional[Scene] = None,
        *,
        player: Optional[Player] = None,
        width: float = WIDTH,
        height: float = HEIGHT,
        num_rays: int = NUM_RAYS,
        fov: float = FOV,
        time_step: float = TIME_STEP,
        vectorized: Optional[bool] = None,
        mover_options: Optional[dict] = None,
    ) -> None:
        start_time = time.perf_counter()
        self.scene = scene if scene is not None else build_default_scene()
        self.player = player or Player()
        self.mover = Mover(self.scene, self.player, **(mover_options or {}))
        self.raycaster = RayCaster(self.scene)
        self.lighting = Lighting(self.scene.lights)

        projector_options = {}
        if vectorized is not None:
            projector_options["vectorized"] = vectorized
        self.projector = Projector(
            self.raycaster,
            self.lighting,
            view_width=width * VIEW_WIDTH_FRAC,
            view_height=height * VIEW_HEIGHT_FRAC,
            num_rays=num_rays,
            fov=fov,
            **projector_options,
        )

        self.time = 0.0
        self.time_step = float(time_step)
        self.log_timing("Building simulation", start_time, time.perf_counter())

    def log_timing(
        self, message: str, start_time: float, end_time: float, log: bool = LOG_TIMING
    ):
        """Logs timing information for simulation phases."""
        if log:
            print(f"[Simulation] {message} took {end_time - start_time:.6f} seconds")

    def step(self) -> FrameSnapshot:
        moved = self.mover.update(self.time)
        position, heading = self.player.pose()
        columns = self.projector.project(position, heading)

        snapshot = FrameSnapshot(
            time=self.time,
            position=position,
            heading=heading,
            moved=moved,
            walls=self.scene.walls,
            lights=self.scene.lights,
            columns=tuple(columns),
        )
        self.time += self.time_step
        return snapshot

    def run(self, frames: int) -> Iterator[FrameSnapshot]:
        for _ in range(frames):
            yield self.step()


__all__ = ["FrameSnapshot", "Simulation"]
