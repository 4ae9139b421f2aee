import math
import random

import pytest

from impulse2d.vecmath import (
    EPSILON,
    GRAVITY,
    GRAVITY_SCALE,
    PI,
    Mat2,
    Vec2,
    bias_greater_than,
    clamp,
    cross,
    dist_sqr,
    dot,
    equal,
    random_range,
    round_half,
    sqr,
    vmax,
    vmin,
)


def assert_vec(actual, expected, abs_tol=1e-9):
    assert actual.x == pytest.approx(expected.x, abs=abs_tol)
    assert actual.y == pytest.approx(expected.y, abs=abs_tol)


def test_arithmetic_operators():
    a = Vec2(1.5, -2.0)
    b = Vec2(0.5, 4.0)
    assert a + b == Vec2(2.0, 2.0)
    assert a - b == Vec2(1.0, -6.0)
    assert -a == Vec2(-1.5, 2.0)
    assert a * 2 == Vec2(3.0, -4.0)
    assert 2 * a == a * 2
    assert (a * 2) / 2 == a
    assert a + 1.0 == Vec2(2.5, -1.0)


def test_add_then_subtract_round_trip():
    a = Vec2(3.25, -7.5)
    b = Vec2(-1.0, 0.125)
    assert (a + b) - b == a


def test_length_of_three_four():
    v = Vec2(3.0, 4.0)
    assert v.length_sqr() == 25.0
    assert v.length() == 5.0


def test_normalized_has_unit_length():
    v = Vec2(-2.0, 7.0).normalized()
    assert v.length() == pytest.approx(1.0)
    assert cross(v, Vec2(-2.0, 7.0)) == pytest.approx(0.0)


def test_normalized_tiny_vector_unchanged():
    tiny = Vec2(EPSILON / 10, 0.0)
    assert tiny.normalized() == tiny


def test_rotation_preserves_length():
    v = Vec2(2.0, -1.0)
    for angle in (0.3, 1.7, -2.4):
        assert v.rotated(angle).length() == pytest.approx(v.length())


def test_rotate_quarter_turn():
    assert_vec(Vec2(1.0, 0.0).rotated(math.pi / 2), Vec2(0.0, 1.0))


def test_matrix_matches_vector_rotation():
    v = Vec2(0.7, -3.1)
    for angle in (0.1, 2.0, -1.3):
        assert_vec(Mat2.from_angle(angle) @ v, v.rotated(angle))


def test_transpose_inverts_rotation():
    m = Mat2.from_angle(0.9)
    v = Vec2(4.0, 2.0)
    assert_vec(m.transpose() @ (m @ v), v)
    product = m.transpose() @ m
    assert product.m00 == pytest.approx(1.0)
    assert product.m01 == pytest.approx(0.0, abs=1e-12)
    assert product.m10 == pytest.approx(0.0, abs=1e-12)
    assert product.m11 == pytest.approx(1.0)


def test_matrix_product_composes_rotations():
    a = Mat2.from_angle(0.4)
    b = Mat2.from_angle(0.5)
    v = Vec2(1.0, 2.0)
    assert_vec((a @ b) @ v, Mat2.from_angle(0.9) @ v)


def test_abs_axes_and_transpose():
    m = Mat2(-1.0, 2.0, -3.0, 4.0)
    assert m.abs() == Mat2(1.0, 2.0, 3.0, 4.0)
    assert m.axis_x() == Vec2(-1.0, -3.0)
    assert m.axis_y() == Vec2(2.0, 4.0)
    assert m.transpose() == Mat2(-1.0, -3.0, 2.0, 4.0)
    assert m.transpose().transpose() == m


def test_identity_default():
    v = Vec2(5.0, -6.0)
    assert Mat2() @ v == v


def test_min_max():
    a = Vec2(1.0, 5.0)
    b = Vec2(3.0, -2.0)
    assert vmin(a, b) == Vec2(1.0, -2.0)
    assert vmax(a, b) == Vec2(3.0, 5.0)


def test_dot_and_dist_sqr():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, -4.0)
    assert dot(a, b) == dot(b, a)
    assert dot(Vec2(1.0, 0.0), Vec2(0.0, 1.0)) == 0.0
    assert dist_sqr(a, b) == (a - b).length_sqr()
    assert dist_sqr(a, a) == 0.0


def test_cross_variants():
    a = Vec2(1.0, 2.0)
    b = Vec2(3.0, 4.0)
    assert cross(a, b) == -cross(b, a)
    assert cross(a, a) == 0.0
    assert cross(a, 2.0) == -cross(2.0, a)
    assert dot(cross(2.0, a), a) == 0.0
    assert cross(1.0, Vec2(1.0, 0.0)) == Vec2(-0.0, 1.0)


def test_cross_rejects_two_scalars():
    with pytest.raises(TypeError):
        cross(1.0, 2.0)


def test_equal_uses_epsilon():
    assert equal(1.0, 1.0 + EPSILON / 2)
    assert not equal(1.0, 1.0 + EPSILON * 2)


def test_sqr_and_clamp():
    assert sqr(-3.0) == 9.0
    assert clamp(0.0, 0.1, 0.5) == 0.1
    assert clamp(0.0, 0.1, -0.5) == 0.0
    assert clamp(0.0, 0.1, 0.05) == 0.05


def test_round_half():
    assert round_half(2.5) == 3
    assert round_half(2.4) == 2


def test_random_range_bounds_and_determinism():
    rng = random.Random(7)
    values = [random_range(-PI, PI, rng) for _ in range(200)]
    assert all(-PI <= v <= PI for v in values)
    again = random.Random(7)
    assert values == [random_range(-PI, PI, again) for _ in range(200)]


def test_bias_greater_than():
    assert bias_greater_than(2.0, 1.0)
    assert not bias_greater_than(1.0, 2.0)
    assert bias_greater_than(1.0, 1.0)


def test_gravity_constant():
    assert GRAVITY == Vec2(0.0, 10.0 * GRAVITY_SCALE)