"""Position, rotation and scale of an object in the world."""

from __future__ import annotations

from dataclasses import dataclass, field

from enginecore.quat import Quat
from enginecore.vector import Vector

__all__ = ["Transform"]

_YAW_AXIS = Vector(0.0, 0.0, 1.0)
_PITCH_AXIS = Vector(0.0, 1.0, 0.0)
_ROLL_AXIS = Vector(1.0, 0.0, 0.0)


@dataclass
class Transform:
    """A translation, a rotation quaternion and a per-axis scale."""

    position: Vector = field(default_factory=Vector)
    rotation: Quat = field(default_factory=Quat)
    scale: Vector = field(default_factory=Vector.one)

    @classmethod
    def from_euler(cls, position: Vector, rotation: Vector, scale: Vector) -> "Transform":
        """Build from a position, Euler angles in degrees and a scale."""
        return cls(position, Quat.from_euler(rotation), scale)

    def set_rotation(self, rotation: Quat | Vector) -> None:
        """Set the rotation from a quaternion or from Euler angles in degrees."""
        if isinstance(rotation, Quat):
            self.rotation = rotation
        elif isinstance(rotation, Vector):
            self.rotation = Quat.from_euler(rotation)
        else:
            raise TypeError(f"cannot set rotation from {type(rotation).__name__}")

    def add_scale(self, scale: Vector) -> None:
        """Add ``scale`` component-wise to the current scale."""
        self.scale = self.scale + scale

    def translate(self, translation: Vector) -> None:
        """Move the position by ``translation``."""
        self.position = self.position + translation

    def rotate(self, rotation: Vector) -> None:
        """Apply roll (x), then pitch (y), then yaw (z), all in degrees."""
        self.rotate_roll(rotation.x)
        self.rotate_pitch(rotation.y)
        self.rotate_yaw(rotation.z)

    def rotate_yaw(self, angle: float) -> None:
        """Rotate about the z axis by ``angle`` degrees."""
        self.rotation = self.rotation * Quat.from_axis_angle(_YAW_AXIS, angle)

    def rotate_pitch(self, angle: float) -> None:
        """Rotate about the y axis by ``angle`` degrees."""
        self.rotation = self.rotation * Quat.from_axis_angle(_PITCH_AXIS, angle)

    def rotate_roll(self, angle: float) -> None:
        """Rotate about the x axis by ``angle`` degrees."""
        self.rotation = self.rotation * Quat.from_axis_angle(_ROLL_AXIS, angle)