"""Triangle meshes: buffers of coordinates, normals, texels and triangles."""

from __future__ import annotations

import math
import os
from typing import TYPE_CHECKING

from softraster.geometry import Triangle, Vertex
from softraster.vectors import Vec2, Vec3

if TYPE_CHECKING:
    from softraster.texture import Texture


def _floats(tokens: list[str], count: int) -> list[float]:
    values = [float(t) for t in tokens[:count]]
    return values + [0.0] * (count - len(values))


class Mesh:
    """Indexed geometry: triangles refer to entries of the other buffers."""

    __slots__ = ("coordinates", "normals", "texels", "triangles")

    def __init__(self) -> None:
        self.coordinates: list[Vec3] = []
        self.normals: list[Vec3] = []
        self.texels: list[Vec2] = []
        self.triangles: list[Triangle] = []

    # construction

    @classmethod
    def create_cube(cls, texture: Texture | None = None) -> Mesh:
        """A cube with its corners on the unit sphere, every face textured."""
        cube = cls()

        v = math.sqrt(1.0 / 3.0)
        right_up_front = cube.add_coordinate(v, v, v)
        left_up_front = cube.add_coordinate(-v, v, v)
        right_down_front = cube.add_coordinate(v, -v, v)
        left_down_front = cube.add_coordinate(-v, -v, v)
        right_up_back = cube.add_coordinate(v, v, -v)
        left_up_back = cube.add_coordinate(-v, v, -v)
        right_down_back = cube.add_coordinate(v, -v, -v)
        left_down_back = cube.add_coordinate(-v, -v, -v)

        left_down = cube.add_texel(-1.0, -1.0)
        right_down = cube.add_texel(2.0, -1.0)
        left_up = cube.add_texel(-1.0, 2.0)
        right_up = cube.add_texel(2.0, 2.0)

        right = cube.add_normal(1.0, 0.0, 0.0)
        up = cube.add_normal(0.0, 1.0, 0.0)
        front = cube.add_normal(0.0, 0.0, 1.0)
        left = cube.add_normal(-1.0, 0.0, 0.0)
        down = cube.add_normal(0.0, -1.0, 0.0)
        back = cube.add_normal(0.0, 0.0, -1.0)

        faces = [
            # front
            ((left_up_front, front, left_up), (left_down_front, front, left_down), (right_up_front, front, right_up)),
            ((right_up_front, front, right_up), (left_down_front, front, left_down), (right_down_front, front, right_down)),
            # up
            ((right_up_front, up, right_down), (right_up_back, up, right_up), (left_up_back, up, left_up)),
            ((right_up_front, up, right_down), (left_up_back, up, left_up), (left_up_front, up, left_down)),
            # right
            ((right_down_back, right, right_down), (right_up_back, right, right_up), (right_up_front, right, left_up)),
            ((right_down_back, right, right_down), (right_up_front, right, left_up), (right_down_front, right, left_down)),
            # back
            ((left_down_back, back, left_down), (left_up_back, back, left_up), (right_up_back, back, right_up)),
            ((left_down_back, back, left_down), (right_up_back, back, right_up), (right_down_back, back, right_down)),
            # down
            ((left_down_back, down, left_down), (right_down_back, down, right_down), (right_down_front, down, right_up)),
            ((left_down_back, down, left_down), (right_down_front, down, right_up), (left_down_front, down, left_up)),
            # left
            ((left_down_front, left, right_down), (left_up_back, left, left_up), (left_down_back, left, left_down)),
            ((left_down_front, left, right_down), (left_up_front, left, right_up), (left_up_back, left, left_up)),
        ]
        for a, b, c in faces:
            cube.add_triangle(Vertex(*a), Vertex(*b), Vertex(*c), texture)
        return cube

    @classmethod
    def create_sphere(cls, sector_count: int, stack_count: int) -> Mesh:
        """A unit UV sphere of ``sector_count`` bands and ``stack_count`` meridians."""
        sphere = cls()
        sphere.add_texel(0.0, 0.0)

        sector_step = math.pi / sector_count
        stack_step = 2 * math.pi / stack_count

        for sector in range(1, sector_count):
            sector_angle = math.pi / 2 - sector * sector_step
            parallel_y = math.sin(sector_angle)
            parallel_radius = math.cos(sector_angle)
            for stack in range(stack_count):
                stack_angle = stack * stack_step
                x = math.cos(stack_angle) * parallel_radius
                z = math.sin(stack_angle) * parallel_radius
                sphere.add_coordinate(x, parallel_y, z)
                sphere.add_normal(x, parallel_y, z)

        sphere.add_coordinate(0.0, 1.0, 0.0)
        sphere.add_coordinate(0.0, -1.0, 0.0)
        sphere.add_normal(0.0, 1.0, 0.0)
        sphere.add_normal(0.0, -1.0, 0.0)

        north_pole = len(sphere.coordinates) - 2
        south_pole = len(sphere.coordinates) - 1
        last_parallel = len(sphere.coordinates) - 3

        for sector in range(sector_count - 1):
            for stack in range(stack_count):
                flat_side1 = sector * stack_count + stack
                top = flat_side1 - stack_count
                flat_side2 = sector * stack_count + (stack + 1 + stack_count) % stack_count
                bottom = flat_side2 + stack_count

                if top < 0:
                    top = north_pole
                elif bottom > last_parallel:
                    bottom = south_pole

                sphere.add_triangle(
                    Vertex(flat_side1, flat_side1), Vertex(top, top), Vertex(flat_side2, flat_side2)
                )
                sphere.add_triangle(
                    Vertex(bottom, bottom), Vertex(flat_side1, flat_side1), Vertex(flat_side2, flat_side2)
                )
        return sphere

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Mesh:
        """Load a Wavefront OBJ file."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_text(handle.read())

    @classmethod
    def from_text(cls, text: str) -> Mesh:
        """Parse Wavefront OBJ text; polygons are split into triangle fans.

        A default texel ``(0, 0)`` and normal ``(1, 0, 0)`` are appended at the end.
        """
        mesh = cls()
        for line in text.splitlines():
            tokens = line.split()
            if not tokens:
                continue
            kind, args = tokens[0], tokens[1:]

            if kind == "v":
                x, y, z = _floats(args, 3)
                if len(args) > 3:
                    w = float(args[3])
                    if w != 1.0:
                        w = 1 / w
                        x, y, z = x * w, y * w, z * w
                mesh.add_coordinate(x, y, z)
            elif kind == "vn":
                mesh.add_normal(*_floats(args, 3))
            elif kind == "vt":
                u, v = _floats(args, 2)
                mesh.add_texel(u, v)
            elif kind == "f":
                if len(args) < 3:
                    raise ValueError(f"face needs at least three vertices: {line!r}")
                first, second, third = (mesh.parse_vertex(a) for a in args[:3])
                mesh.add_triangle(first, second, third)
                for extra in args[3:]:
                    second, third = third, mesh.parse_vertex(extra)
                    mesh.add_triangle(first, second, third)

        mesh.add_texel(0.0, 0.0)
        mesh.add_normal(1.0, 0.0, 0.0)
        return mesh

    def parse_vertex(self, text: str) -> Vertex:
        """Parse an OBJ face vertex such as ``3``, ``3/1``, ``3//2`` or ``3/1/2``.

        Indices are one-based; negative ones count back from the current end
        of the matching buffer.
        """
        vertex = Vertex()
        if not text:
            return vertex
        parts = text.split("/")

        vertex.coordinate_index = self._resolve(parts[0], len(self.coordinates))
        if len(parts) > 1 and parts[1]:
            vertex.texel_index = self._resolve(parts[1], len(self.texels))
        if len(parts) > 2 and parts[2]:
            vertex.normal_index = self._resolve(parts[2], len(self.normals))
        return vertex

    @staticmethod
    def _resolve(token: str, size: int) -> int:
        index = int(token) - 1
        if index < 0:
            index += size + 1
        return index

    # buffers

    def add_coordinate(self, x: float, y: float, z: float = 0.0) -> int:
        self.coordinates.append(Vec3(x, y, z))
        return len(self.coordinates) - 1

    def add_normal(self, x: float, y: float, z: float = 0.0) -> int:
        self.normals.append(Vec3(x, y, z))
        return len(self.normals) - 1

    def add_texel(self, u: float, v: float) -> int:
        self.texels.append(Vec2(u, v))
        return len(self.texels) - 1

    def add_triangle(
        self,
        first: Vertex,
        second: Vertex,
        third: Vertex,
        texture: Texture | None = None,
    ) -> None:
        self.triangles.append(Triangle(first, second, third, texture))

    def __repr__(self) -> str:
        return (
            f"Mesh(coordinates={len(self.coordinates)}, normals={len(self.normals)}, "
            f"texels={len(self.texels)}, triangles={len(self.triangles)})"
        )