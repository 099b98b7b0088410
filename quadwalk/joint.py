"""A single revolute joint of a leg."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Joint:
    """Origin of a joint relative to its parent, plus its current angle."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0
    theta: float = 0.0

    def set_translation(self, x: float, y: float, z: float) -> None:
        self.x, self.y, self.z = x, y, z

    def set_rotation(self, roll: float, pitch: float, yaw: float) -> None:
        self.roll, self.pitch, self.yaw = roll, pitch, yaw

    def set_origin(
        self, x: float, y: float, z: float, roll: float, pitch: float, yaw: float
    ) -> None:
        self.set_translation(x, y, z)
        self.set_rotation(roll, pitch, yaw)