"""4x4 column-major matrices for transforms and projection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from thornbase.quat import Quat
from thornbase.vector import Vec3


@dataclass(frozen=True, slots=True)
class Mat4:
    """A 4x4 matrix stored as 16 values in column-major order."""

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.values) != 16:
            raise ValueError("a 4x4 matrix needs exactly 16 values")
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)


def translate_rotate_scale(translation: Vec3, rotation: Quat, scale: float) -> Mat4:
    """Matrix that scales, then rotates, then translates."""
    w, x, y, z = rotation
    sx, sy, sz = scale * x, scale * y, scale * z
    xw, xx, xy, xz = sx * w, sx * x, sx * y, sx * z
    yw, yy, yz = sy * w, sy * y, sy * z
    zw, zz = sz * w, sz * z
    return Mat4(
        (
            scale - 2.0 * (yy + zz),
            2.0 * (xy + zw),
            2.0 * (xz - yw),
            0.0,
            2.0 * (xy - zw),
            scale - 2.0 * (zz + xx),
            2.0 * (yz + xw),
            0.0,
            2.0 * (xz + yw),
            2.0 * (yz - xw),
            scale - 2.0 * (xx + yy),
            0.0,
            translation.x,
            translation.y,
            translation.z,
            1.0,
        )
    )


def perspective(focalx: float, focaly: float, near: float, far: float, scale: float) -> Mat4:
    """Perspective projection; a focal length of 1 gives a 90 degree view."""
    values = [0.0] * 16
    values[0] = scale * focalx
    values[5] = scale * focaly
    values[10] = scale * (near + far) / (near - far)
    values[11] = -scale
    values[14] = scale * 2.0 * near * far / (near - far)
    return Mat4(tuple(values))