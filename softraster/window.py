"""Triangles in normalized device coordinates, clipped and mapped to pixels."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Sequence

from softraster.clip_space import Edge, clip_edges
from softraster.color import Color
from softraster.geometry import Triangle
from softraster.vectors import Vec2, Vec3, Vecii

if TYPE_CHECKING:
    from softraster.texture import Texture


@dataclass
class WindowVertex:
    """A projected vertex with its attributes and its pixel position."""

    position: Vec3
    normal: Vec3
    texel: Vec2
    color: Color
    window_position: Vecii = field(default_factory=Vecii)


def _interpolate(a: Vec3, b: Vec3, ratio: float) -> Vec3:
    keep = 1 - ratio
    return Vec3(keep * a.x + ratio * b.x, keep * a.y + ratio * b.y, keep * a.z + ratio * b.z)


def _clip_against(polygon: list[Vec3], edge: Edge) -> list[Vec3]:
    output: list[Vec3] = []
    previous = polygon[-1]
    previous_distance = edge.distance(previous)
    for current in polygon:
        distance = edge.distance(current)
        if distance >= 0:
            if previous_distance < 0:
                ratio = previous_distance / (previous_distance - distance)
                output.append(_interpolate(previous, current, ratio))
            output.append(current)
        elif previous_distance >= 0:
            ratio = previous_distance / (previous_distance - distance)
            output.append(_interpolate(previous, current, ratio))
        previous, previous_distance = current, distance
    return output


class WindowTriangle:
    """A mesh triangle resolved against transformed buffers.

    ``clip`` finds the screen-space bounding box of the part inside the unit
    cube; ``apply_viewport`` maps vertices and that box to pixel positions.
    """

    def __init__(
        self,
        triangle: Triangle,
        coordinate_buffer: Sequence[Vec3],
        normal_buffer: Sequence[Vec3],
        texel_buffer: Sequence[Vec2],
        alpha: float = 1.0,
    ) -> None:
        self.vertices = tuple(
            WindowVertex(
                position=coordinate_buffer[vertex.coordinate_index],
                normal=normal_buffer[vertex.normal_index],
                texel=texel_buffer[vertex.texel_index],
                color=vertex.color.with_alpha(alpha),
            )
            for vertex in triangle
        )
        self.texture: Texture | None = triangle.texture
        self.minimum = Vec2()
        self.maximum = Vec2()
        self._min_x = 0
        self._max_x = 0
        self._min_y = 0
        self._max_y = 0

    @property
    def min_x(self) -> int:
        return self._min_x

    @property
    def max_x(self) -> int:
        return self._max_x

    @property
    def min_y(self) -> int:
        return self._min_y

    @property
    def max_y(self) -> int:
        return self._max_y

    def clip(self) -> None:
        """Compute the x/y bounds of the triangle clipped to the unit cube.

        A triangle entirely outside is left with a minimum above its maximum.
        """
        self.minimum = Vec2(1.0, 1.0)
        self.maximum = Vec2(-1.0, -1.0)

        polygon = [replace(vertex.position) for vertex in self.vertices]
        for edge in clip_edges():
            polygon = _clip_against(polygon, edge)
            if not polygon:
                return

        for point in polygon:
            self._insert(point.x, point.y)

    def _insert(self, x: float, y: float) -> None:
        self.minimum.u = min(self.minimum.u, x)
        self.maximum.u = max(self.maximum.u, x)
        self.minimum.v = min(self.minimum.v, y)
        self.maximum.v = max(self.maximum.v, y)

    def apply_viewport(self, width: int, height: int) -> None:
        """Map [-1, 1] coordinates onto [0, width] x [0, height] pixels."""

        def to_pixel(value: float, size: int) -> int:
            return int((value + 1.0) * 0.5 * size)

        for vertex in self.vertices:
            vertex.window_position = Vecii(
                to_pixel(vertex.position.x, width), to_pixel(vertex.position.y, height)
            )

        self._max_x = to_pixel(self.maximum.u, width)
        self._max_y = to_pixel(self.maximum.v, height)
        self._min_x = to_pixel(self.minimum.u, width)
        self._min_y = to_pixel(self.minimum.v, height)

    def __repr__(self) -> str:
        return (
            f"WindowTriangle(x=[{self._min_x}, {self._max_x}], "
            f"y=[{self._min_y}, {self._max_y}], texture={self.texture!r})"
        )