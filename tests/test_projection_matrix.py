import pytest

from softraster.projection_matrix import ProjectionMatrix
from softraster.vectors import Vec3


def test_aspect_ratio_is_whole_number_quotient():
    wide = ProjectionMatrix(800, 400, 1.0, 10.0, 90.0)
    assert wide.projection.x == pytest.approx(2 * wide.projection.y)
    truncated = ProjectionMatrix(1024, 768, 1.0, 10.0, 90.0)
    assert truncated.projection.x == pytest.approx(truncated.projection.y)


def test_taller_than_wide_collapses_x():
    matrix = ProjectionMatrix(300, 600, 1.0, 10.0, 60.0)
    assert matrix.projection.x == 0.0


def test_right_angle_fov_gives_unit_y_factor():
    matrix = ProjectionMatrix(640, 640, 1.0, 10.0, 90.0)
    assert matrix.projection.y == pytest.approx(1.0)


def test_depth_factors():
    matrix = ProjectionMatrix(640, 640, 1.0, 3.0, 90.0)
    assert matrix.projection.z == pytest.approx(2.0)
    assert matrix.homogenizer == pytest.approx(-3.0)


def test_origin_maps_to_inverse_homogenizer():
    matrix = ProjectionMatrix(640, 480, 0.5, 20.0, 70.0)
    result = matrix * Vec3()
    assert result.x == 0.0
    assert result.y == 0.0
    assert result.z * matrix.homogenizer == pytest.approx(1.0)


def test_x_is_linear_for_fixed_depth():
    matrix = ProjectionMatrix(640, 480, 0.5, 20.0, 70.0)
    single = matrix * Vec3(1.0, 2.0, 3.0)
    double = matrix * Vec3(2.0, 2.0, 3.0)
    assert double.x == pytest.approx(2 * single.x)
    assert double.y == pytest.approx(single.y)
    assert double.z == pytest.approx(single.z)


def test_input_is_not_modified():
    matrix = ProjectionMatrix(640, 480, 0.5, 20.0, 70.0)
    point = Vec3(1.0, 2.0, 3.0)
    matrix * point
    assert (point.x, point.y, point.z) == (1.0, 2.0, 3.0)


def test_degenerate_depth_raises():
    matrix = ProjectionMatrix(640, 640, 1.0, 3.0, 90.0)
    with pytest.raises(ZeroDivisionError):
        matrix * Vec3(0.0, 0.0, -1 / matrix.projection.z)


def test_unsupported_operand():
    matrix = ProjectionMatrix(640, 640, 1.0, 3.0, 90.0)
    with pytest.raises(TypeError):
        matrix * 2.0
    result = matrix * Vec3()
    assert result.z * matrix.homogenizer == pytest.approx(1.0)
    assert matrix.homogenizer == pytest.approx(-3.0)