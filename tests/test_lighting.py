import pytest
from pygame.math import Vector2

from core.scene import LightSource
from world.lighting import Lighting, distance_attenuation


def test_ambient_only_without_lights():
    assert Lighting([]).at(Vector2(10, 10)) == pytest.approx(0.1)


def test_light_on_the_point_saturates():
    lighting = Lighting([LightSource((0, 0), 100, (255, 255, 255))])
    assert lighting.at(Vector2(0, 0)) == 1.0


def test_inverse_distance_falloff():
    lighting = Lighting([LightSource((0, 0), 100, (255, 255, 255))])
    # 0.1 + 100 / (1000 * 0.01 + 1) * 0.01
    assert lighting.at(Vector2(1000, 0)) == pytest.approx(0.1 + 1.0 / 11.0)


def test_lights_shine_through_walls(lit_scene):
    # The wall between the light and the point changes nothing
    lighting = Lighting(lit_scene.lights)
    assert lighting.at(Vector2(5, -50)) == lighting.at(Vector2(5, 50))


def test_contributions_add_up():
    one = Lighting([LightSource((0, 0), 10)])
    two = Lighting([LightSource((0, 0), 10), LightSource((0, 0), 10)])
    p = Vector2(300, 0)
    assert two.at(p) - 0.1 == pytest.approx(2 * (one.at(p) - 0.1))


def test_lighting_bounds_over_default_level(default_scene):
    lighting = Lighting(default_scene.lights)
    for x in range(0, 801, 50):
        for y in range(0, 601, 50):
            value = lighting(Vector2(x, y))
            assert 0.1 <= value <= 1.0


@pytest.mark.parametrize(
    "distance, expected",
    [(0, 1.0), (200, 0.5), (400, 0.2), (1000, 0.2)],
)
def test_distance_attenuation(distance, expected):
    assert distance_attenuation(distance) == pytest.approx(expected)


def test_light_intensity_must_be_positive():
    with pytest.raises(ValueError):
        LightSource((0, 0), 0)
    with pytest.raises(ValueError):
        LightSource((0, 0), -5)
