"""A mesh placed in the world with its own position, rotation, scale and alpha."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from softraster.geometry import Triangle
from softraster.mat4 import Mat4
from softraster.mesh import Mesh
from softraster.vectors import Vec2, Vec3


def _unit_scale() -> Vec3:
    return Vec3(1.0, 1.0, 1.0)


@dataclass(eq=False)
class Entity:
    """An instance of a mesh; rotation angles are in degrees."""

    mesh: Mesh
    position: Vec3 = field(default_factory=Vec3)
    rotation: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=_unit_scale)
    alpha: float = 1.0

    def transformation(self) -> Mat4:
        """The local-to-world matrix."""
        return Mat4.transform(self.position, self.rotation, self.scale)

    def reset_transformation(self) -> None:
        self.position = Vec3()
        self.rotation = Vec3()
        self.scale = _unit_scale()

    def translate(self, movement: Vec3) -> None:
        self.position = self.position + movement

    def scale_by(self, scale: Vec3) -> None:
        """Add ``scale`` to the current scale factors."""
        self.scale = self.scale + scale

    def rotate(self, rotation: Vec3) -> None:
        self.rotation = self.rotation + rotation

    def normal_transformation(self) -> Mat4:
        """The matrix that carries local normals into world space."""
        matrix = Mat4.scaling(Vec3(1 / self.scale.x, 1 / self.scale.y, 1 / self.scale.z))
        matrix *= Mat4.x_rotation(-self.rotation.x)
        matrix *= Mat4.z_rotation(-self.rotation.z)
        matrix *= Mat4.y_rotation(-self.rotation.y)
        return matrix.transpose()

    @property
    def coordinates(self) -> list[Vec3]:
        return self.mesh.coordinates

    @property
    def normals(self) -> list[Vec3]:
        return self.mesh.normals

    @property
    def texels(self) -> list[Vec2]:
        return self.mesh.texels

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self.mesh.triangles)