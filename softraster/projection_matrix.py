"""A compact perspective projection stored as per-axis factors."""

from __future__ import annotations

import math

from softraster.vectors import Vec3


class ProjectionMatrix:
    """Perspective projection kept as three axis factors and a homogenizer.

    The aspect ratio is the whole-number quotient of width by height.
    """

    __slots__ = ("projection", "homogenizer")

    def __init__(self, width: int, height: int, near: float, far: float, fov: float) -> None:
        tan_half = math.tan(math.radians(fov) / 2.0)
        depth_range = near - far
        aspect_ratio = float(int(width / height))
        self.projection = Vec3(
            1 / tan_half * aspect_ratio,
            1 / tan_half,
            (-near - far) / depth_range,
        )
        self.homogenizer = 2 * far * near / depth_range

    def __mul__(self, vec3: Vec3) -> Vec3:
        if not isinstance(vec3, Vec3):
            return NotImplemented
        result = Vec3(
            vec3.x * self.projection.x,
            vec3.y * self.projection.y,
            vec3.z * self.projection.z + 1.0,
        )
        result *= 1 / (result.z * self.homogenizer)
        return result

    def __repr__(self) -> str:
        return f"ProjectionMatrix(projection={self.projection!r}, homogenizer={self.homogenizer!r})"