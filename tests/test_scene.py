import pytest
from pygame.math import Vector2

from core.raycaster import MISS, RayCaster
from core.scene import DEFAULT_WALL_COLOR, Scene, Wall
from world.levels import ARENA_WALLS, MAZE_WALLS


def test_wall_owns_a_copy_of_its_endpoints():
    start = Vector2(1, 2)
    wall = Wall(start, (3, 4))
    start.x = 99
    assert wall.start == Vector2(1, 2)
    assert wall.end == Vector2(3, 4)
    assert wall.color == DEFAULT_WALL_COLOR


def test_wall_geometry():
    wall = Wall((0, 0), (3, 4))
    assert wall.length == pytest.approx(5.0)
    assert wall.direction == Vector2(3, 4)


def test_scene_collections_are_read_only_tuples(default_scene):
    assert isinstance(default_scene.walls, tuple)
    assert isinstance(default_scene.lights, tuple)
    with pytest.raises(AttributeError):
        default_scene.walls = ()


def test_default_level_contents(default_scene):
    assert len(default_scene.walls) == len(ARENA_WALLS) + len(MAZE_WALLS) == 14
    assert len(default_scene.lights) == 3
    assert default_scene.bounds() == (50, 750, 50, 550)
    assert [w.color for w in default_scene.walls[:4]] == [
        (200, 100, 100),
        (100, 200, 100),
        (100, 100, 200),
        (200, 200, 100),
    ]


def test_iteration_helpers(default_scene):
    assert list(default_scene.iter_walls()) == list(default_scene.walls)
    assert list(default_scene.iter_lights()) == list(default_scene.lights)


def test_wall_for_resolves_hit_index(floor_wall_scene):
    hit = RayCaster(floor_wall_scene).cast(Vector2(5, 5), Vector2(0, -1))
    assert floor_wall_scene.wall_for(hit) is floor_wall_scene.walls[0]
    assert floor_wall_scene.wall_for(MISS) is None


def test_empty_scene_bounds():
    assert Scene().bounds() == (0.0, 0.0, 0.0, 0.0)
