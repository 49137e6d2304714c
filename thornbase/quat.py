"""Quaternions for 3D rotation, stored as (w, x, y, z)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from thornbase.vector import Vec3


@dataclass(frozen=True, slots=True)
class Quat:
    """A quaternion; w is the real component."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    def __mul__(self, other: Quat) -> Quat:
        return self.mul(other)

    def mul(self, other: Quat) -> Quat:
        """Multiply two quaternions."""
        a0, a1, a2, a3 = self
        b0, b1, b2, b3 = other
        return Quat(
            a0 * b0 - a1 * b1 - a2 * b2 - a3 * b3,
            a0 * b1 + a1 * b0 + a2 * b3 - a3 * b2,
            a0 * b2 + a2 * b0 + a3 * b1 - a1 * b3,
            a0 * b3 + a3 * b0 + a1 * b2 - a2 * b1,
        )

    def transform(self, v: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        w, x, y, z = self
        return Vec3(
            v.x * (1 - 2 * y * y - 2 * z * z)
            + v.y * (2 * x * y - 2 * w * z)
            + v.z * (2 * z * x + 2 * w * y),
            v.x * (2 * x * y + 2 * w * z)
            + v.y * (1 - 2 * z * z - 2 * x * x)
            + v.z * (2 * y * z - 2 * w * x),
            v.x * (2 * z * x - 2 * w * y)
            + v.y * (2 * y * z + 2 * w * x)
            + v.z * (1 - 2 * x * x - 2 * y * y),
        )

    def x_axis(self) -> Vec3:
        """Return the vector (1, 0, 0) rotated by this quaternion."""
        w, x, y, z = self
        return Vec3(
            1 - 2 * y * y - 2 * z * z,
            2 * x * y + 2 * w * z,
            2 * z * x - 2 * w * y,
        )


def identity() -> Quat:
    """Return the identity rotation."""
    return Quat(1.0, 0.0, 0.0, 0.0)


def axis_angle(axis: Vec3, angle: float) -> Quat:
    """Rotation about an axis, which need not be normalized."""
    half = 0.5 * angle
    a = 1.0 / axis.length()
    c = a * math.sin(half)
    return Quat(math.cos(half), c * axis.x, c * axis.y, c * axis.z)


def rotate_x(angle: float) -> Quat:
    """Rotation about the X axis."""
    return Quat(math.cos(0.5 * angle), math.sin(0.5 * angle), 0.0, 0.0)


def rotate_y(angle: float) -> Quat:
    """Rotation about the Y axis."""
    return Quat(math.cos(0.5 * angle), 0.0, math.sin(0.5 * angle), 0.0)


def rotate_z(angle: float) -> Quat:
    """Rotation about the Z axis."""
    return Quat(math.cos(0.5 * angle), 0.0, 0.0, math.sin(0.5 * angle))


def from_angles(angles: Vec3) -> Quat:
    """Rotation from a (roll, pitch, yaw) vector: X, then Y, then Z factors."""
    return rotate_x(angles.x).mul(rotate_y(angles.y)).mul(rotate_z(angles.z))