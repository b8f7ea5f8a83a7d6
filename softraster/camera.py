"""A first-person camera with a projection and a view transform."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from softraster.mat4 import Mat4
from softraster.vectors import Vec3

_PITCH_LIMIT = 90.0


@dataclass
class Camera:
    """Camera position, rotation (degrees) and projection matrix."""

    projection: Mat4 = field(default_factory=Mat4.identity)
    position: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)

    def transformation(self) -> Mat4:
        """The world-to-camera matrix."""
        matrix = Mat4.x_rotation(-self.rotation.x)
        matrix *= Mat4.z_rotation(-self.rotation.z)
        matrix *= Mat4.y_rotation(-self.rotation.y)
        matrix *= Mat4.translation(-self.position)
        return matrix

    def set_perspective_view(self, width: int, height: int, near: float, far: float, fov: float) -> None:
        self.projection = Mat4.perspective(width / height, near, far, fov)

    def set_orthographic_view(self, width: float, height: float, depth: float) -> None:
        self.projection = Mat4.orthographic(width, height, depth)

    def set_orthographic_bounds(
        self, right: float, left: float, top: float, bottom: float, near: float, far: float
    ) -> None:
        self.projection = Mat4.orthographic_bounds(right, left, top, bottom, near, far)

    def translate(self, movement: Vec3) -> None:
        """Move relative to the heading: z is forward, x is sideways, y is vertical."""
        x, y, z = self.position.x, self.position.y, self.position.z
        if movement.z != 0:
            angle = math.radians(self.rotation.y)
            z += movement.z * math.cos(angle)
            x += movement.z * math.sin(angle)
        if movement.x != 0:
            angle = math.radians(self.rotation.y + 90.0)
            z += movement.x * math.cos(angle)
            x += movement.x * math.sin(angle)
        y += movement.y
        self.position = Vec3(x, y, z)

    def rotate(self, rotation: Vec3) -> None:
        """Add to the rotation, keeping the pitch within [-90, 90] degrees."""
        updated = self.rotation + rotation
        updated.x = min(max(updated.x, -_PITCH_LIMIT), _PITCH_LIMIT)
        self.rotation = updated