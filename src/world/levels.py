"""Built-in levels."""

from __future__ import annotations

from core.scene import LightSource, Scene

# ((x1, y1), (x2, y2), color)
ARENA_WALLS = [
    ((50, 50), (750, 50), (200, 100, 100)),  # red
    ((750, 50), (750, 550), (100, 200, 100)),  # green
    ((750, 550), (50, 550), (100, 100, 200)),  # blue
    ((50, 550), (50, 50), (200, 200, 100)),  # yellow
]

MAZE_WALLS = [
    ((150, 150), (250, 150), (180, 120, 180)),
    ((250, 150), (250, 250), (180, 120, 180)),
    ((350, 100), (450, 100), (120, 180, 180)),
    ((450, 100), (450, 200), (120, 180, 180)),
    ((550, 150), (650, 150), (180, 180, 120)),
    ((650, 150), (650, 300), (180, 180, 120)),
    ((100, 350), (200, 350), (200, 150, 100)),
    ((200, 350), (200, 450), (200, 150, 100)),
    ((300, 400), (400, 300), (150, 200, 150)),
    ((500, 350), (600, 450), (100, 150, 200)),
]


def default_lights() -> list[LightSource]:
    return [
        LightSource((200, 200), 100, (255, 200, 200)),  # warm
        LightSource((600, 200), 80, (200, 200, 255)),  # cool
        LightSource((400, 450), 120, (200, 255, 200)),  # green
    ]


def build_default_scene() -> Scene:
    """The walled arena with its small maze and three lights."""
    return Scene.from_segments(ARENA_WALLS + MAZE_WALLS, default_lights())


def build_empty_arena() -> Scene:
    """Outer walls only, no lights (ambient light everywhere)."""
    return Scene.from_segments(ARENA_WALLS)


__all__ = ["build_default_scene", "build_empty_arena", "default_lights"]
