"""Rotation quaternions with Euler-angle conversions in degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

from enginecore.mathutil import PI, degrees_to_radians, radians_to_degrees
from enginecore.vector import Vector

__all__ = ["Quat"]


@dataclass
class Quat:
    """A quaternion ``(x, y, z, w)``; the default is the identity rotation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def from_euler(cls, euler: Vector) -> "Quat":
        """Build from roll (x), pitch (y) and yaw (z) in degrees."""
        roll = degrees_to_radians(euler.x)
        pitch = degrees_to_radians(euler.y)
        yaw = degrees_to_radians(euler.z)

        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)

        return cls(
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            cr * cp * cy + sr * sp * sy,
        )

    @classmethod
    def from_axis_angle(cls, axis: Vector, angle_degrees: float) -> "Quat":
        half = degrees_to_radians(angle_degrees) * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_rotation_matrix(cls, matrix: Sequence[Sequence[float]]) -> "Quat":
        """Build from the upper 3x3 rotation part of a matrix."""
        m = matrix
        trace = m[0][0] + m[1][1] + m[2][2]
        if trace > 0.0:
            s = math.sqrt(trace + 1.0) * 2.0
            return cls(
                (m[2][1] - m[1][2]) / s,
                (m[0][2] - m[2][0]) / s,
                (m[1][0] - m[0][1]) / s,
                0.25 * s,
            )
        if m[0][0] > m[1][1] and m[0][0] > m[2][2]:
            s = math.sqrt(1.0 + m[0][0] - m[1][1] - m[2][2]) * 2.0
            return cls(
                0.25 * s,
                (m[0][1] + m[1][0]) / s,
                (m[0][2] + m[2][0]) / s,
                (m[2][1] - m[1][2]) / s,
            )
        if m[1][1] > m[2][2]:
            s = math.sqrt(1.0 + m[1][1] - m[0][0] - m[2][2]) * 2.0
            return cls(
                (m[0][1] + m[1][0]) / s,
                0.25 * s,
                (m[1][2] + m[2][1]) / s,
                (m[0][2] - m[2][0]) / s,
            )
        s = math.sqrt(1.0 + m[2][2] - m[0][0] - m[1][1]) * 2.0
        return cls(
            (m[0][2] + m[2][0]) / s,
            (m[1][2] + m[2][1]) / s,
            0.25 * s,
            (m[1][0] - m[0][1]) / s,
        )

    def to_euler(self) -> Vector:
        """Return roll, pitch and yaw in degrees."""
        x, y, z, w = self.x, self.y, self.z, self.w

        sinr_cosp = 2.0 * (w * x + y * z)
        cosr_cosp = 1.0 - 2.0 * (x * x + y * y)
        roll = math.atan2(sinr_cosp, cosr_cosp)

        t = 2.0 * (w * y - x * z)
        sinp = math.sqrt(max(0.0, 1.0 + t))
        cosp = math.sqrt(max(0.0, 1.0 - t))
        pitch = 2.0 * math.atan2(sinp, cosp) - PI / 2.0

        siny_cosp = 2.0 * (w * z + x * y)
        cosy_cosp = 1.0 - 2.0 * (y * y + z * z)
        yaw = math.atan2(siny_cosp, cosy_cosp)

        return Vector(
            radians_to_degrees(roll),
            radians_to_degrees(pitch),
            radians_to_degrees(yaw),
        )

    def __add__(self, other: "Quat") -> "Quat":
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Quat") -> "Quat":
        return Quat(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: "Quat") -> "Quat":
        """Hamilton product ``self * other``."""
        a, b = self, other
        return Quat(
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
        )