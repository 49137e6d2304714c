import math

import pytest

from thornbase.vector import IVec3, Vec2, Vec3, fclamp, fmix

A2 = Vec2(3.0, -2.0)
B2 = Vec2(-1.5, 4.0)
A3 = Vec3(3.0, -2.0, 0.5)
B3 = Vec3(-1.5, 4.0, 2.0)


def test_fclamp_limits():
    assert fclamp(5.0, 0.0, 1.0) == 1.0
    assert fclamp(-5.0, 0.0, 1.0) == 0.0
    assert fclamp(0.25, 0.0, 1.0) == 0.25


def test_fmix_endpoints():
    assert fmix(2.0, 10.0, 0.0) == 2.0
    assert fmix(2.0, 10.0, 1.0) == 10.0


def test_vec2_add_sub_round_trip():
    assert A2.add(B2).sub(B2) == A2
    assert A2 + B2 == B2 + A2
    assert A2 - B2 == A2.sub(B2)


def test_vec2_neg_twice():
    assert A2.neg().neg() == A2
    assert -A2 == A2.neg()
    assert A2.add(A2.neg()).length2() == 0.0


def test_vec2_extend_and_xy_round_trip():
    v = A2.extend(7.0)
    assert v.z == 7.0
    assert v.xy() == A2


def test_vec2_mul_and_scale_agree():
    assert A2.mul(Vec2(2.0, 2.0)) == A2.scale(2.0)


def test_vec2_min_max_order():
    lo, hi = A2.min(B2), A2.max(B2)
    assert lo.x <= hi.x and lo.y <= hi.y
    assert {lo.x, hi.x} == {A2.x, B2.x}


def test_vec2_clamp_within_bounds():
    c = Vec2(10.0, -10.0).clamp(-1.0, 1.0)
    assert c == Vec2(1.0, -1.0)
    cv = Vec2(10.0, -10.0).clampv(Vec2(0.0, 0.0), Vec2(5.0, 5.0))
    assert cv == Vec2(5.0, 0.0)


def test_vec2_lengths_and_distances():
    assert A2.length() == pytest.approx(math.sqrt(A2.length2()))
    assert A2.length2() == A2.dot(A2)
    assert A2.distance2(B2) == A2.sub(B2).length2()
    assert A2.distance(B2) == pytest.approx(B2.distance(A2))


def test_vec2_normalize_unit():
    assert A2.normalize().length() == pytest.approx(1.0)


def test_vec2_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2().normalize()


def test_vec2_mix_and_madd():
    assert A2.mix(B2, 0.0) == A2
    assert A2.mix(B2, 1.0) == B2
    assert A2.madd(B2, 1.0) == A2.add(B2)
    assert A2.madd(B2, 0.0) == A2


def test_vec3_add_sub_round_trip():
    assert A3.add(B3).sub(B3) == A3
    assert A3 + B3 == B3 + A3
    assert -(-A3) == A3


def test_vec3_mul_scale_min_max():
    assert A3.mul(Vec3(3.0, 3.0, 3.0)) == A3.scale(3.0)
    lo, hi = A3.min(B3), A3.max(B3)
    assert all(a <= b for a, b in zip(lo, hi))


def test_vec3_clamp():
    c = Vec3(10.0, -10.0, 0.5).clamp(-1.0, 1.0)
    assert c == Vec3(1.0, -1.0, 0.5)
    cv = Vec3(10.0, -10.0, 0.5).clampv(Vec3(0.0, 0.0, 0.0), Vec3(2.0, 2.0, 2.0))
    assert cv == Vec3(2.0, 0.0, 0.5)


def test_vec3_lengths_and_normalize():
    assert A3.length2() == A3.dot(A3)
    assert A3.distance2(B3) == A3.sub(B3).length2()
    assert A3.distance(B3) == pytest.approx(math.sqrt(A3.distance2(B3)))
    assert A3.normalize().length() == pytest.approx(1.0)


def test_vec3_mix_madd():
    assert A3.mix(B3, 0.0) == A3
    assert A3.mix(B3, 1.0) == B3
    assert A3.madd(B3, 1.0) == A3.add(B3)


def test_vec3_cross_orthogonal_and_anticommutative():
    c = A3.cross(B3)
    assert c.dot(A3) == pytest.approx(0.0)
    assert c.dot(B3) == pytest.approx(0.0)
    assert B3.cross(A3) == c.neg()


def test_vec3_cross_of_axes():
    assert Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0)) == Vec3(0.0, 0.0, 1.0)


def test_vec3_to_ivec3_truncates():
    assert Vec3(1.7, -1.7, 2.0).to_ivec3() == IVec3(1, -1, 2)


def test_ivec3_ops():
    a, b = IVec3(4, -3, 9), IVec3(-2, 5, 1)
    assert a.add(b).sub(b) == a
    assert a.neg().neg() == a
    assert a + b == b + a
    assert a - a == IVec3()