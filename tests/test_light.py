import random

import pytest

from softraster.light import Light
from softraster.vectors import Vec3


def test_ambient_only():
    light = Light(Vec3(0.0, 0.0, 0.0), ambient=0.3)
    assert light.intensity(Vec3(0.0, 1.0, 0.0), Vec3(), Vec3()) == pytest.approx(0.3)


def test_ambient_clamped_to_one():
    light = Light(Vec3(0.0, 0.0, 0.0), ambient=3.0)
    assert light.intensity(Vec3(1.0, 0.0, 0.0), Vec3(), Vec3()) == 1.0


def test_negative_total_clamped_to_zero():
    light = Light(Vec3(0.0, 0.0, -5.0), diffuse=1.0)
    assert light.intensity(Vec3(0.0, 0.0, 1.0), Vec3(), Vec3()) == 0.0


def test_diffuse_uses_normalized_normal():
    light = Light(Vec3(0.0, 0.0, 0.5), diffuse=1.0)
    assert light.intensity(Vec3(0.0, 0.0, 7.0), Vec3(), Vec3()) == pytest.approx(0.5)


def test_specular_toward_look_direction():
    light = Light(Vec3(0.0, 0.0, 0.0), specular=1.0)
    assert light.intensity(Vec3(0.0, 0.0, 1.0), Vec3(), Vec3()) == pytest.approx(light.look_direction.z)


def test_disabled_components_contribute_nothing():
    light = Light(Vec3(0.0, 0.0, 0.5), ambient=0.4, diffuse=0.4, specular=0.2,
                  has_ambient=False, has_diffuse=False, has_specular=False)
    assert light.intensity(Vec3(0.0, 0.0, 1.0), Vec3(), Vec3()) == 0.0


def test_normal_argument_is_not_modified():
    light = Light(Vec3(0.0, 0.0, 0.5), ambient=0.4, diffuse=0.4, specular=0.2)
    normal = Vec3(0.0, 3.0, 4.0)
    light.intensity(normal, Vec3(), Vec3())
    assert (normal.x, normal.y, normal.z) == (0.0, 3.0, 4.0)


def test_result_always_in_unit_range():
    rng = random.Random(7)
    light = Light(Vec3(0.0, 0.0, 0.5), ambient=0.4, diffuse=0.4, specular=0.2)
    for _ in range(200):
        normal = Vec3(rng.uniform(-1, 1), rng.uniform(-1, 1), rng.uniform(0.1, 1))
        value = light.intensity(normal, Vec3(), Vec3())
        assert 0.0 <= value <= 1.0


def test_positions_do_not_affect_result():
    light = Light(Vec3(0.2, 0.1, 0.5), ambient=0.2, diffuse=0.3, specular=0.1)
    normal = Vec3(0.3, 0.2, 1.0)
    first = light.intensity(normal, Vec3(), Vec3())
    second = light.intensity(normal, Vec3(9.0, 9.0, 9.0), Vec3(-4.0, 2.0, 1.0))
    assert first == second


def test_zero_normal_raises():
    light = Light(Vec3(0.0, 0.0, 0.5), ambient=0.4)
    with pytest.raises(ZeroDivisionError):
        light.intensity(Vec3(), Vec3(), Vec3())