"""
math_utils: Vector / Matrix products and transform factories
"""
import math

import pytest

from wireframe_spinner.math_utils import (
    Matrix,
    MatrixDimensionError,
    ProjectionError,
    Vector,
)


def assert_vec_close(actual, expected, tol=1e-9):
    assert len(actual) == len(expected)
    assert tuple(actual) == pytest.approx(tuple(expected), abs=tol)


def assert_mat_close(actual, expected, tol=1e-9):
    assert (actual.height, actual.width) == (expected.height, expected.width)
    for ra, rb in zip(actual.rows, expected.rows):
        assert ra == pytest.approx(rb, abs=tol)


class TestVector:
    def test_get_in_and_out_of_range(self):
        v = Vector((1, 2, 3))
        assert v.get(0) == 1.0
        assert v.get(2) == 3.0
        assert v.get(3) is None
        assert v.get(-1) is None

    def test_axis_accessors(self):
        v = Vector((4, 5))
        assert (v.x, v.y) == (4.0, 5.0)
        assert v.z is None

    def test_operations_return_new_vectors(self):
        v = Vector((1, 2, 3))
        moved = v.translate(1, 1, 1)
        assert moved is not v
        assert tuple(v) == (1.0, 2.0, 3.0)

    def test_translate_omitted_axes_are_zero(self):
        assert_vec_close(Vector((1, 2, 3)).translate(5), (6, 2, 3, 1))

    @pytest.mark.parametrize("a,b,c", [(0, 0, 0), (3, -4, 5), (1e3, 0.25, -7.5)])
    def test_translation_round_trip(self, a, b, c):
        v = Vector((0.3, -1.2, 2.0))
        back = v.translate(a, b, c).translate(-a, -b, -c)
        assert_vec_close(back, (0.3, -1.2, 2.0, 1.0))

    @pytest.mark.parametrize("theta", [0.0, 0.3, math.pi / 2, 2.5, 100.0])
    def test_yaw_rotation_inverse(self, theta):
        v = Vector((1.0, 2.0, 3.0))
        assert_vec_close(v.rotate(theta, 0, 0).rotate(-theta, 0, 0), v)

    def test_zero_rotation_is_identity(self):
        v = Vector((-0.5, 0.75, 2.0))
        assert_vec_close(v.rotate(0, 0, 0), v)

    def test_depth_project_at_z_zero_halves(self):
        p = Vector((4.0, -2.0, 0.0)).depth_project(2)
        assert_vec_close(p, (2.0, -1.0))

    def test_depth_project_requires_z(self):
        with pytest.raises(MatrixDimensionError):
            Vector((1.0, 1.0)).depth_project(2)

    def test_scale_all(self):
        assert_vec_close(Vector((1, -2, 3)).scale_all(2), (2, -4, 6))

    def test_scale_all_on_2d_vector_fills_missing_z(self):
        assert_vec_close(Vector((1, 2)).scale_all(3), (3, 6, 3))


class TestMatrix:
    def test_dimensions(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        assert (m.height, m.width) == (2, 3)
        assert Matrix().width == 0

    def test_non_rectangular_rows_rejected(self):
        with pytest.raises(MatrixDimensionError):
            Matrix([[1, 2], [3]])

    def test_mat_mul(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[5, 6, 7], [8, 9, 10]])
        assert a.mat_mul(b) == Matrix([[21, 24, 27], [47, 54, 61]])
        assert (a @ b) == a.mat_mul(b)

    def test_mat_mul_mismatch(self):
        with pytest.raises(MatrixDimensionError):
            Matrix([[1, 2, 3]]).mat_mul(Matrix([[1, 2, 3]]))

    def test_mat_mul_associative(self):
        a = Matrix.rotation(0.3, -1.1, 2.0)
        b = Matrix.scale(2, 0.5, -1)
        c = Matrix([[1, 2], [3, 4], [5, 6]])
        assert_mat_close((a @ b) @ c, a @ (b @ c))

    def test_vec_mul_missing_components_are_one(self):
        result = Matrix.translation(10, 20, 30).vec_mul(Vector((1, 2)))
        # absent z contributes 1 (not 0), so the z row is 1 + dz = 31; absent w gives 1
        assert_vec_close(result, (11, 22, 31, 1))

    def test_vec_mul_keeps_explicit_zero(self):
        result = Matrix.translation(0, 0, 5).vec_mul(Vector((1, 2, 0)))
        assert_vec_close(result, (1, 2, 5, 1))

    def test_vec_mul_vector_too_long(self):
        with pytest.raises(MatrixDimensionError):
            Matrix.scale(1, 1, 1).vec_mul(Vector((1, 2, 3, 4)))

    def test_vec_mul_result_length_is_height(self):
        m = Matrix.depth_projection(2, Vector((0, 0, 0)))
        assert len(m.vec_mul(Vector((1, 1, 0)))) == 2

    def test_translation_layout(self):
        m = Matrix.translation(1, 2, 3)
        assert (m.height, m.width) == (4, 4)
        assert [row[3] for row in m.rows] == [1, 2, 3, 1]
        assert Matrix.translation() == Matrix.identity(4)

    def test_scale_is_diagonal(self):
        assert Matrix.scale(2, 3, 4) == Matrix([[2, 0, 0], [0, 3, 0], [0, 0, 4]])

    def test_yaw_rotates_about_z(self):
        assert_vec_close(Matrix.yaw(math.pi / 2) @ Vector((1, 0, 0)), (0, 1, 0))

    def test_pitch_rotates_about_y(self):
        assert_vec_close(Matrix.pitch(math.pi / 2) @ Vector((0, 0, 1)), (1, 0, 0))

    def test_roll_rotates_about_x(self):
        assert_vec_close(Matrix.roll(math.pi / 2) @ Vector((0, 1, 0)), (0, 0, 1))

    def test_rotation_composition_order(self):
        y, p, r = 0.4, -0.9, 1.7
        expected = Matrix.roll(r) @ (Matrix.pitch(p) @ Matrix.yaw(y))
        assert_mat_close(Matrix.rotation(y, p, r), expected)
        reversed_order = Matrix.yaw(y) @ (Matrix.pitch(p) @ Matrix.roll(r))
        assert Matrix.rotation(y, p, r) != reversed_order

    def test_rotation_zero_is_identity(self):
        assert_mat_close(Matrix.rotation(0, 0, 0), Matrix.identity(3))

    def test_depth_projection_factor(self):
        m = Matrix.depth_projection(2, Vector((7, 7, 0)))
        assert m == Matrix([[0.5, 0, 0], [0, 0.5, 0]])

    def test_depth_projection_on_plane(self):
        with pytest.raises(ProjectionError):
            Matrix.depth_projection(2, Vector((0, 0, 2)))
