import pytest
from pygame.math import Vector2

from core.scene import Wall
from world.world_collision import (
    closest_point_on_segment,
    movement_blocked_by_wall,
    point_segment_distance,
)


@pytest.mark.parametrize(
    "point, expected",
    [
        ((5, 3), (5, 0)),
        ((-5, 3), (0, 0)),
        ((15, -3), (10, 0)),
    ],
)
def test_projection_is_clamped_to_segment(point, expected):
    closest = closest_point_on_segment(Vector2(point), Vector2(0, 0), Vector2(10, 0))
    assert closest == Vector2(expected)


def test_point_segment_distance():
    wall = Wall((0, 0), (10, 0))
    assert point_segment_distance(Vector2(5, 4), wall) == pytest.approx(4.0)
    assert point_segment_distance(Vector2(13, 4), wall) == pytest.approx(5.0)


def test_zero_length_wall_has_no_distance():
    assert point_segment_distance(Vector2(1, 1), Wall((1, 1), (1, 1))) is None


def test_blocked_within_radius():
    walls = [Wall((100, 100), (200, 100)), Wall((0, 0), (10, 0))]
    assert movement_blocked_by_wall(walls, Vector2(5, 10), 15.0) == 1
    assert movement_blocked_by_wall(walls, Vector2(5, 20), 15.0) is None


def test_exactly_at_radius_is_not_blocked():
    walls = [Wall((0, 0), (10, 0))]
    assert movement_blocked_by_wall(walls, Vector2(5, 15), 15.0) is None


def test_zero_length_wall_is_skipped():
    walls = [Wall((5, 5), (5, 5))]
    assert movement_blocked_by_wall(walls, Vector2(5, 5), 15.0) is None


def test_blocking_agrees_with_segment_distance():
    walls = [Wall((0, 0), (10, 0)), Wall((30, -20), (30, 20)), Wall((7, 7), (7, 7))]
    for x in range(-20, 50, 3):
        for y in range(-25, 26, 3):
            pos = Vector2(x, y)
            expected = None
            for index, wall in enumerate(walls):
                distance = point_segment_distance(pos, wall)
                if distance is not None and distance < 15.0:
                    expected = index
                    break
            assert movement_blocked_by_wall(walls, pos, 15.0) == expected


def test_blocking_uses_the_clamped_projection(monkeypatch):
    import world.world_collision as collision

    calls = []
    real = collision.closest_point_on_segment

    def spy(point, start, end):
        calls.append((Vector2(start), Vector2(end)))
        return real(point, start, end)

    monkeypatch.setattr(collision, "closest_point_on_segment", spy)
    walls = [Wall((100, 100), (200, 100)), Wall((0, 0), (10, 0))]

    assert collision.movement_blocked_by_wall(walls, Vector2(5, 10), 15.0) == 1
    assert calls == [(Vector2(100, 100), Vector2(200, 100)), (Vector2(0, 0), Vector2(10, 0))]
