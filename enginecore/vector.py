"""Three-, four- and two-component vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from enginecore.mathutil import SMALL_NUMBER, inv_sqrt

__all__ = ["Vector", "Vector4", "Vector2"]


@dataclass
class Vector:
    """A mutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> "Vector":
        return cls()

    @classmethod
    def one(cls) -> "Vector":
        return cls(1.0, 1.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    @staticmethod
    def distance(a: "Vector", b: "Vector") -> float:
        return math.sqrt((b.x - a.x) ** 2 + (b.y - a.y) ** 2 + (b.z - a.z) ** 2)

    @staticmethod
    def normal_from_points(a: "Vector", b: "Vector", c: "Vector") -> "Vector":
        """Return the (unnormalised) normal of the triangle ``a, b, c``."""
        return (b - a).cross(c - a)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalize(self, tolerance: float = SMALL_NUMBER) -> bool:
        """Normalise in place; return False if the vector is too short."""
        square_sum = self.length_squared()
        if square_sum > tolerance:
            scale = inv_sqrt(square_sum)
            self.x *= scale
            self.y *= scale
            self.z *= scale
            return True
        return False

    def get_unsafe_normal(self) -> "Vector":
        scale = inv_sqrt(self.length_squared())
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def get_safe_normal(self, tolerance: float = SMALL_NUMBER) -> "Vector":
        """Return a unit copy, or the zero vector when too short."""
        square_sum = self.length_squared()
        if square_sum == 1.0:
            return Vector(self.x, self.y, self.z)
        if square_sum < tolerance:
            return Vector()
        scale = inv_sqrt(square_sum)
        return Vector(self.x * scale, self.y * scale, self.z * scale)

    def __add__(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, other) -> "Vector":
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vector(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)


@dataclass
class Vector4(Vector):
    """A four-component vector, used for homogeneous coordinates."""

    w: float = 0.0

    @classmethod
    def one(cls) -> "Vector4":
        return cls(1.0, 1.0, 1.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def transform(self, matrix: Sequence[Sequence[float]]) -> "Vector4":
        """Multiply ``(x, y, z, 1)`` as a row vector by a 4x4 matrix."""
        x, y, z = self.x, self.y, self.z
        return Vector4(
            *(
                x * matrix[0][col] + y * matrix[1][col] + z * matrix[2][col] + matrix[3][col]
                for col in range(4)
            )
        )

    def __truediv__(self, scalar: float) -> "Vector4":
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, 1.0 / scalar)

    def coord(self) -> Vector:
        """Return the Cartesian point after dividing by ``w``."""
        if abs(self.w) < SMALL_NUMBER:
            return Vector()
        denom = 1.0 / self.w
        return Vector(self.x, self.y, self.z) * denom


@dataclass
class Vector2:
    """A mutable two-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y)

    def get_safe_normal(self, tolerance: float = SMALL_NUMBER) -> "Vector2":
        square_sum = self.x * self.x + self.y * self.y
        if square_sum < tolerance:
            return Vector2()
        scale = inv_sqrt(square_sum)
        return Vector2(self.x * scale, self.y * scale)

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar: float) -> "Vector2":
        return Vector2(self.x / scalar, self.y / scalar)