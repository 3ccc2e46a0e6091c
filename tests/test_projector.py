import math

import pytest
from pygame.math import Vector2

from core.raycaster import RayCaster
from core.scene import LightSource, Scene, Wall
from render.projector import (
    Projector,
    correct_fisheye,
    ray_angles,
    shade,
    strip_height,
    visible_columns,
)
from world.lighting import Lighting


def make_projector(scene, **kwargs):
    options = dict(view_width=90, view_height=100, num_rays=3, fov=math.pi / 2)
    options.update(kwargs)
    return Projector(RayCaster(scene), Lighting(scene.lights), **options)


@pytest.fixture
def facing_wall():
    """A long vertical wall 100 units in front of the origin."""
    return Scene(walls=(Wall((100, -1000), (100, 1000), (200, 160, 40)),))


def test_ray_angles_span_fov():
    angles = ray_angles(0.0, math.pi / 2, 5)
    assert angles[0] == pytest.approx(-math.pi / 4)
    assert angles[2] == pytest.approx(0.0)
    assert angles[-1] == pytest.approx(math.pi / 4)


def test_single_ray_looks_straight_ahead():
    assert ray_angles(1.25, 1.0, 1) == [1.25]


def test_fisheye_correction_never_lengthens():
    for offset in (-0.6, -0.2, 0.0, 0.3, 0.6):
        assert correct_fisheye(100.0, 1.0 + offset, 1.0) <= 100.0


def test_strip_height_is_capped_and_inverse():
    assert strip_height(0.0, 420.0) == 420.0
    assert strip_height(299.0, 420.0, scale=1.0) == pytest.approx(420.0 / 300.0)
    assert strip_height(49.0, 100.0, scale=1.0) > strip_height(99.0, 100.0, scale=1.0)


def test_shade_scales_channels():
    assert shade((200, 100, 50), 0.5) == (100, 50, 25)
    assert shade((200, 100, 50), 0.0) == (0, 0, 0)


def test_flat_wall_projects_flat(facing_wall):
    projector = make_projector(facing_wall, projection_scale=1.0)
    columns = projector.project(Vector2(0, 0), 0.0)

    assert len(columns) == 3
    assert all(c.visible for c in columns)
    # Edge rays travel further but correct back to the perpendicular distance
    assert columns[0].hit.distance == pytest.approx(100 * math.sqrt(2))
    for column in columns:
        assert column.corrected_distance == pytest.approx(100.0)
        assert column.corrected_distance <= column.hit.distance + 1e-9
        assert column.height == pytest.approx(100.0 / 101.0)
        assert column.top == pytest.approx((100.0 - column.height) / 2)


def test_columns_are_laid_out_left_to_right(facing_wall):
    projector = make_projector(facing_wall)
    columns = projector.project(Vector2(0, 0), 0.0)
    assert projector.column_width == pytest.approx(30.0)
    assert [c.index for c in columns] == [0, 1, 2]
    assert [c.x for c in columns] == pytest.approx([0.0, 30.0, 60.0])


def test_strip_color_blends_lighting_and_distance(facing_wall):
    column = make_projector(facing_wall).project(Vector2(0, 0), 0.0)[1]

    # ambient 0.1, distance fade 1 - 100 / 400
    assert column.light == pytest.approx(0.1)
    assert column.brightness == pytest.approx(0.1 * 0.75)
    assert column.color == shade((200, 160, 40), column.brightness)


def test_lights_brighten_strips():
    walls = (Wall((100, -1000), (100, 1000), (200, 200, 200)),)
    dark = make_projector(Scene(walls=walls)).project(Vector2(0, 0), 0.0)[1]
    lit = make_projector(
        Scene(walls=walls, lights=(LightSource((90, 0), 50),))
    ).project(Vector2(0, 0), 0.0)[1]
    assert lit.brightness > dark.brightness
    assert lit.color[0] > dark.color[0]


def test_missed_rays_leave_columns_empty(facing_wall):
    columns = make_projector(facing_wall).project(Vector2(0, 0), math.pi)
    assert visible_columns(columns) == []
    for column in columns:
        assert column.color is None
        assert column.height == 0.0


def test_vectorized_and_scalar_sweeps_agree(default_scene):
    fast = make_projector(default_scene, num_rays=60, fov=math.pi / 2.5, vectorized=True)
    slow = make_projector(default_scene, num_rays=60, fov=math.pi / 2.5, vectorized=False)
    origin = Vector2(400, 230)

    for a, b in zip(fast.project(origin, 0.7), slow.project(origin, 0.7)):
        assert a.visible == b.visible
        assert a.angle == b.angle
        assert a.corrected_distance == pytest.approx(b.corrected_distance)
        assert a.height == pytest.approx(b.height)
        assert a.brightness == pytest.approx(b.brightness)


def test_invalid_configuration_is_rejected(facing_wall):
    with pytest.raises(ValueError):
        make_projector(facing_wall, num_rays=0)
    with pytest.raises(ValueError):
        make_projector(facing_wall, fov=math.pi)


def test_strip_wall_is_resolved_through_scene(facing_wall, monkeypatch):
    resolved = []
    real = Scene.wall_for

    def recording_wall_for(scene, hit):
        wall = real(scene, hit)
        resolved.append(wall)
        return wall

    monkeypatch.setattr(Scene, "wall_for", recording_wall_for)
    columns = make_projector(facing_wall).project(Vector2(0, 0), 0.0)

    assert len(resolved) == len(visible_columns(columns)) == 3
    assert all(wall is facing_wall.walls[0] for wall in resolved)
