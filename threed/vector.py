"""Three-component vectors and 3x3 matrices used for geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Return the unit vector; a zero vector yields NaN components."""
        length = self.length()
        if length == 0.0:
            return Vec3(math.nan, math.nan, math.nan)
        return self / length


@dataclass(frozen=True)
class Mat3:
    """An immutable 3x3 matrix stored as three row vectors."""

    rows: tuple[Vec3, Vec3, Vec3]

    def __post_init__(self) -> None:
        rows = tuple(self.rows)
        if len(rows) != 3 or not all(isinstance(row, Vec3) for row in rows):
            raise ValueError("a Mat3 needs exactly three Vec3 rows")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def identity(cls) -> Mat3:
        return cls((Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0)))

    def apply(self, vector: Vec3) -> Vec3:
        """Multiply this matrix by a column vector."""
        return Vec3(*(row.dot(vector) for row in self.rows))

    def __matmul__(self, other):
        if isinstance(other, Vec3):
            return self.apply(other)
        if isinstance(other, Mat3):
            first, second, third = other.rows
            return Mat3(
                tuple(first * row.x + second * row.y + third * row.z for row in self.rows)
            )
        return NotImplemented


def rotation_x(angle: float) -> Mat3:
    """Right-handed rotation about the x axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Mat3((Vec3(1.0, 0.0, 0.0), Vec3(0.0, c, -s), Vec3(0.0, s, c)))


def rotation_y(angle: float) -> Mat3:
    """Right-handed rotation about the y axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Mat3((Vec3(c, 0.0, s), Vec3(0.0, 1.0, 0.0), Vec3(-s, 0.0, c)))


def rotation_z(angle: float) -> Mat3:
    """Right-handed rotation about the z axis by ``angle`` radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Mat3((Vec3(c, -s, 0.0), Vec3(s, c, 0.0), Vec3(0.0, 0.0, 1.0)))