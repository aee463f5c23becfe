"""Axis-aligned bounding boxes and ray tests against them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from enginecore.vector import Vector, Vector4

__all__ = ["Box", "FLT_MAX", "FLT_EPSILON"]

FLT_MAX = 3.4028234663852886e38
FLT_EPSILON = 1.1920928955078125e-07


@dataclass
class Box:
    """An axis-aligned box spanning ``min`` to ``max``."""

    min: Vector = field(default_factory=Vector)
    max: Vector = field(default_factory=Vector)
    valid: bool = False

    @classmethod
    def from_points(
        cls,
        points: Iterable[Vector],
        matrix: Optional[Sequence[Sequence[float]]] = None,
    ) -> "Box":
        """Bound the points, each transformed by ``matrix`` first if given."""
        lower = [FLT_MAX, FLT_MAX, FLT_MAX]
        upper = [-FLT_MAX, -FLT_MAX, -FLT_MAX]
        for point in points:
            if matrix is not None:
                point = Vector4(point.x, point.y, point.z, 1.0).transform(matrix)
            coords = (point.x, point.y, point.z)
            lower = [min(lo, c) for lo, c in zip(lower, coords)]
            upper = [max(hi, c) for hi, c in zip(upper, coords)]
        return cls(Vector(*lower), Vector(*upper))

    @classmethod
    def build_aabb(cls, origin: Vector, extent: Vector) -> "Box":
        """Build the box centred on ``origin`` reaching ``extent`` each way."""
        return cls(origin - extent, origin + extent)

    def intersects(self, ray_origin: Vector, ray_dir: Vector) -> Optional[float]:
        """Return the entry parameter of the ray, or None when it misses."""
        t_min = -FLT_MAX
        t_max = FLT_MAX
        for origin, direction, lo, hi in zip(ray_origin, ray_dir, self.min, self.max):
            if abs(direction) < FLT_EPSILON:
                if origin < lo or origin > hi:
                    return None
                continue
            t1 = (lo - origin) / direction
            t2 = (hi - origin) / direction
            if t1 > t2:
                t1, t2 = t2, t1
            t_min = max(t_min, t1)
            t_max = min(t_max, t2)
        if t_max >= t_min and t_max >= 0:
            return t_min
        return None

    def center(self) -> Vector:
        return (self.max + self.min) / 2.0

    def extent(self) -> Vector:
        """Return the full size of the box along each axis."""
        return self.max - self.min