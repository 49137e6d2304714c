"""Small floating-point and integer vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


def fclamp(x: float, lo: float, hi: float) -> float:
    """Clamp a scalar to the range [lo, hi]."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def fmix(x: float, y: float, a: float) -> float:
    """Interpolate between two scalars."""
    return x + a * (y - x)


def _lesser(a: float, b: float) -> float:
    return a if a < b else b


def _greater(a: float, b: float) -> float:
    return a if a > b else b


@dataclass(frozen=True, slots=True)
class Vec2:
    """A 2D floating-point vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return self.add(other)

    def __sub__(self, other: Vec2) -> Vec2:
        return self.sub(other)

    def __neg__(self) -> Vec2:
        return self.neg()

    def extend(self, z: float) -> Vec3:
        """Return a 3D vector with this vector's X and Y and the given Z."""
        return Vec3(self.x, self.y, z)

    def add(self, other: Vec2) -> Vec2:
        """Add two vectors."""
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        """Subtract another vector from this one."""
        return Vec2(self.x - other.x, self.y - other.y)

    def neg(self) -> Vec2:
        """Negate the vector."""
        return Vec2(-self.x, -self.y)

    def mul(self, other: Vec2) -> Vec2:
        """Multiply componentwise."""
        return Vec2(self.x * other.x, self.y * other.y)

    def scale(self, a: float) -> Vec2:
        """Multiply by a scalar."""
        return Vec2(self.x * a, self.y * a)

    def min(self, other: Vec2) -> Vec2:
        """Componentwise minimum."""
        return Vec2(_lesser(self.x, other.x), _lesser(self.y, other.y))

    def max(self, other: Vec2) -> Vec2:
        """Componentwise maximum."""
        return Vec2(_greater(self.x, other.x), _greater(self.y, other.y))

    def clamp(self, lo: float, hi: float) -> Vec2:
        """Clamp every component to the same range."""
        return Vec2(fclamp(self.x, lo, hi), fclamp(self.y, lo, hi))

    def clampv(self, lo: Vec2, hi: Vec2) -> Vec2:
        """Clamp each component to the range given by two vectors."""
        return Vec2(fclamp(self.x, lo.x, hi.x), fclamp(self.y, lo.y, hi.y))

    def length2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Length."""
        return math.sqrt(self.length2())

    def distance2(self, other: Vec2) -> float:
        """Squared distance to another vector."""
        return self.sub(other).length2()

    def distance(self, other: Vec2) -> float:
        """Distance to another vector."""
        return math.sqrt(self.distance2(other))

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def normalize(self) -> Vec2:
        """Return the vector scaled to unit length."""
        return self.scale(1.0 / self.length())

    def mix(self, other: Vec2, a: float) -> Vec2:
        """Interpolate towards another vector."""
        return Vec2(fmix(self.x, other.x, a), fmix(self.y, other.y, a))

    def madd(self, other: Vec2, a: float) -> Vec2:
        """Compute self + a * other."""
        return Vec2(self.x + a * other.x, self.y + a * other.y)


@dataclass(frozen=True, slots=True)
class Vec3:
    """A 3D floating-point vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return self.add(other)

    def __sub__(self, other: Vec3) -> Vec3:
        return self.sub(other)

    def __neg__(self) -> Vec3:
        return self.neg()

    def xy(self) -> Vec2:
        """Drop the Z coordinate."""
        return Vec2(self.x, self.y)

    def to_ivec3(self) -> IVec3:
        """Convert to integers, truncating towards zero."""
        return IVec3(int(self.x), int(self.y), int(self.z))

    def add(self, other: Vec3) -> Vec3:
        """Add two vectors."""
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        """Subtract another vector from this one."""
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def neg(self) -> Vec3:
        """Negate the vector."""
        return Vec3(-self.x, -self.y, -self.z)

    def mul(self, other: Vec3) -> Vec3:
        """Multiply componentwise."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def scale(self, a: float) -> Vec3:
        """Multiply by a scalar."""
        return Vec3(self.x * a, self.y * a, self.z * a)

    def min(self, other: Vec3) -> Vec3:
        """Componentwise minimum."""
        return Vec3(
            _lesser(self.x, other.x),
            _lesser(self.y, other.y),
            _lesser(self.z, other.z),
        )

    def max(self, other: Vec3) -> Vec3:
        """Componentwise maximum."""
        return Vec3(
            _greater(self.x, other.x),
            _greater(self.y, other.y),
            _greater(self.z, other.z),
        )

    def clamp(self, lo: float, hi: float) -> Vec3:
        """Clamp every component to the same range."""
        return Vec3(fclamp(self.x, lo, hi), fclamp(self.y, lo, hi), fclamp(self.z, lo, hi))

    def clampv(self, lo: Vec3, hi: Vec3) -> Vec3:
        """Clamp each component to the range given by two vectors."""
        return Vec3(
            fclamp(self.x, lo.x, hi.x),
            fclamp(self.y, lo.y, hi.y),
            fclamp(self.z, lo.z, hi.z),
        )

    def length2(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        """Length."""
        return math.sqrt(self.length2())

    def distance2(self, other: Vec3) -> float:
        """Squared distance to another vector."""
        return self.sub(other).length2()

    def distance(self, other: Vec3) -> float:
        """Distance to another vector."""
        return math.sqrt(self.distance2(other))

    def dot(self, other: Vec3) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def normalize(self) -> Vec3:
        """Return the vector scaled to unit length."""
        return self.scale(1.0 / self.length())

    def mix(self, other: Vec3, a: float) -> Vec3:
        """Interpolate towards another vector."""
        return Vec3(
            fmix(self.x, other.x, a),
            fmix(self.y, other.y, a),
            fmix(self.z, other.z, a),
        )

    def madd(self, other: Vec3, a: float) -> Vec3:
        """Compute self + a * other."""
        return Vec3(self.x + a * other.x, self.y + a * other.y, self.z + a * other.z)

    def cross(self, other: Vec3) -> Vec3:
        """Cross product."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True, slots=True)
class IVec3:
    """A 3D integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: IVec3) -> IVec3:
        return self.add(other)

    def __sub__(self, other: IVec3) -> IVec3:
        return self.sub(other)

    def __neg__(self) -> IVec3:
        return self.neg()

    def add(self, other: IVec3) -> IVec3:
        """Add two vectors."""
        return IVec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: IVec3) -> IVec3:
        """Subtract another vector from this one."""
        return IVec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def neg(self) -> IVec3:
        """Negate the vector."""
        return IVec3(-self.x, -self.y, -self.z)