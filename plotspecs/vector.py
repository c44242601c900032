"""Three-dimensional vectors with component-wise arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Union

__all__ = ["Vec3", "to_vec2"]


def _xy(v: Any) -> tuple[float, float]:
    """Return the x and y of a 2D vector given as an object with x/y or a pair."""
    if hasattr(v, "x") and hasattr(v, "y"):
        return float(v.x), float(v.y)
    x, y = v
    return float(x), float(y)


@dataclass(order=True)
class Vec3:
    """A 3D vector; ordering compares x, then y, then z."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def filled(cls, n: float) -> "Vec3":
        """Return a vector with every component equal to ``n``."""
        return cls(n, n, n)

    @classmethod
    def from_vec2(cls, v: Any, z: float) -> "Vec3":
        """Build a vector from a 2D vector (x/y attributes or a pair) and a z value."""
        x, y = _xy(v)
        return cls(x, y, z)

    def _coerce(self, other: Union["Vec3", Real]) -> "Vec3":
        if isinstance(other, Vec3):
            return other
        if isinstance(other, Real):
            return Vec3.filled(float(other))
        raise TypeError(f"unsupported operand: {type(other).__name__}")

    def __add__(self, other: Union["Vec3", float]) -> "Vec3":
        o = self._coerce(other)
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, other: Union["Vec3", float]) -> "Vec3":
        o = self._coerce(other)
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, other: Union["Vec3", float]) -> "Vec3":
        o = self._coerce(other)
        return Vec3(self.x * o.x, self.y * o.y, self.z * o.z)

    def __truediv__(self, other: Union["Vec3", float]) -> "Vec3":
        o = self._coerce(other)
        return Vec3(self.x / o.x, self.y / o.y, self.z / o.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vec3") -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, other: "Vec3") -> float:
        """Return the Euclidean distance to ``other``."""
        return (self - other).length()

    def normalized(self) -> "Vec3":
        """Return this vector scaled to unit length."""
        return self / self.length()

    @staticmethod
    def cross(v1: Any, v2: Any) -> "Vec3":
        """Return the cross product; 2D operands are taken with z = 0."""
        a = v1 if isinstance(v1, Vec3) else Vec3.from_vec2(v1, 0.0)
        b = v2 if isinstance(v2, Vec3) else Vec3.from_vec2(v2, 0.0)
        return Vec3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )


def to_vec2(v: Vec3) -> tuple[float, float]:
    """Return the x and y components of ``v`` as a pair."""
    return (v.x, v.y)