import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest
from pygame.math import Vector2

from core.scene import LightSource, Scene, Wall
from world.levels import build_default_scene


@pytest.fixture
def floor_wall_scene():
    """A single horizontal wall from (0, 0) to (10, 0)."""
    return Scene(walls=(Wall(Vector2(0, 0), Vector2(10, 0)),))


@pytest.fixture
def default_scene():
    return build_default_scene()


@pytest.fixture
def lit_scene():
    return Scene(
        walls=(Wall((0, 0), (10, 0)),),
        lights=(LightSource((0, 0), 100, (255, 255, 255)),),
    )
