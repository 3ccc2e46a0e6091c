"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window, clock, and main loop.
- Simulation: owns the level, player, and per-frame ray sweep.
- Canvas: turns the primitive list for a frame into pixels.

The engine never touches simulation state directly; it only steps the
simulation and forwards the frame to the canvas.
"""

from __future__ import annotations

import time
from typing import Optional

import pygame

from config import *
from core.drawable import Canvas
from render.frame_builder import build_frame
from render.pygame_canvas import PygameCanvas
from world.simulation import Simulation


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        simulation: Optional[Simulation] = None,
        canvas: Optional[Canvas] = None,
    ):
        start_time = time.perf_counter()
        pygame.init()
        pygame.display.set_caption(CAPTION)
        try:
            # vsync: 1 to enable, 0 to disable
            self.screen = pygame.display.set_mode(
                (WIDTH, HEIGHT), pygame.SCALED, vsync=(1 if VSYNC else 0)
            )
        except (TypeError, pygame.error):
            # vsync was requested but unavailable on this system/driver
            try:
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
            except pygame.error as e:
                print(f"[Engine] Could not open a {WIDTH}x{HEIGHT} window: {e}")
                raise
        self.clock = pygame.time.Clock()

        self.simulation = simulation or Simulation(width=WIDTH, height=HEIGHT)
        self.canvas: Canvas = canvas if canvas is not None else PygameCanvas(self.screen)
        self.font = pygame.font.SysFont("monospace", 14)
        print(
            f"[Engine] {WIDTH}x{HEIGHT}, {self.simulation.projector.num_rays} rays, "
            f"{len(self.simulation.scene.walls)} walls, "
            f"{len(self.simulation.scene.lights)} lights"
        )
        self.log_timing("Engine setup", start_time, time.perf_counter())

    def log_timing(self, message: str, start_time: float, end_time: float, log: bool = LOG_TIMING):
        if log:
            print(f"[Engine] {message} took {end_time - start_time:.6f} seconds")

    def tick(self) -> int:
        # Capped with or without vsync: animation time advances per frame
        return self.clock.tick(FPS)

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    # ------------------------------------------------------------------
    def render(self, snapshot) -> None:  # pragma: no cover - visual
        self.canvas.clear()
        for primitive in build_frame(snapshot, WIDTH, HEIGHT, fov=self.simulation.projector.fov):
            self.canvas.push(primitive)
        self.canvas.present()

        label = self.font.render(f"FPS: {self.clock.get_fps():5.1f}", True, (255, 0, 0))
        self.screen.blit(label, (12, 10))
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        frames = 0
        while running:
            self.tick()
            running = self.handle_events()
            if not running:
                break
            snapshot = self.simulation.step()
            self.render(snapshot)
            frames += 1
        print(f"[Engine] Stopped after {frames} frames")
        pygame.quit()
