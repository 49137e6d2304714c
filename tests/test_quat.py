import math

import pytest

from thornbase.quat import (
    Quat,
    axis_angle,
    from_angles,
    identity,
    rotate_x,
    rotate_y,
    rotate_z,
)
from thornbase.vector import Vec3

V = Vec3(0.3, -1.2, 2.5)


def approx_vec(v):
    return pytest.approx(tuple(v), abs=1e-9)


def test_identity_value():
    assert identity() == Quat(1.0, 0.0, 0.0, 0.0)


def test_identity_transform_is_noop():
    assert identity().transform(V) == V


def test_mul_by_identity():
    q = from_angles(Vec3(0.4, -0.7, 1.1))
    assert tuple(q.mul(identity())) == pytest.approx(tuple(q))
    assert tuple(identity() * q) == pytest.approx(tuple(q))


def test_rotate_z_quarter_turn():
    r = rotate_z(math.pi / 2).transform(Vec3(1.0, 0.0, 0.0))
    assert tuple(r) == approx_vec(Vec3(0.0, 1.0, 0.0))


def test_rotation_preserves_length():
    for q in (rotate_x(0.9), rotate_y(-2.1), rotate_z(3.0), from_angles(V)):
        assert q.transform(V).length() == pytest.approx(V.length())


def test_x_axis_matches_transform():
    q = from_angles(Vec3(0.2, 0.5, -1.3))
    assert tuple(q.x_axis()) == approx_vec(q.transform(Vec3(1.0, 0.0, 0.0)))


def test_axis_angle_normalizes_axis():
    a = 0.8
    assert tuple(axis_angle(Vec3(0.0, 0.0, 5.0), a)) == pytest.approx(tuple(rotate_z(a)))
    assert tuple(axis_angle(Vec3(3.0, 0.0, 0.0), a)) == pytest.approx(tuple(rotate_x(a)))
    assert tuple(axis_angle(Vec3(0.0, 0.5, 0.0), a)) == pytest.approx(tuple(rotate_y(a)))


def test_axis_angle_zero_axis_raises():
    with pytest.raises(ZeroDivisionError):
        axis_angle(Vec3(), 1.0)


def test_from_angles_single_axis():
    assert tuple(from_angles(Vec3(0.0, 0.0, 0.6))) == pytest.approx(tuple(rotate_z(0.6)))
    assert tuple(from_angles(Vec3(0.6, 0.0, 0.0))) == pytest.approx(tuple(rotate_x(0.6)))


def test_from_angles_is_product():
    angles = Vec3(0.3, 0.4, 0.5)
    expected = rotate_x(0.3) * rotate_y(0.4) * rotate_z(0.5)
    assert tuple(from_angles(angles)) == pytest.approx(tuple(expected))


def test_mul_composes_rotations():
    q1, q2 = rotate_x(0.7), rotate_y(-1.4)
    combined = q1.mul(q2).transform(V)
    assert tuple(combined) == approx_vec(q1.transform(q2.transform(V)))


def test_product_stays_unit():
    q = rotate_x(1.0) * rotate_y(2.0) * rotate_z(3.0)
    assert sum(c * c for c in q) == pytest.approx(1.0)