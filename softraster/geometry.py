"""Mesh vertices (indices into buffers) and triangles built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from softraster.color import Color

if TYPE_CHECKING:
    from softraster.texture import Texture


@dataclass
class Vertex:
    """Indices into a mesh's coordinate, normal and texel buffers, plus a colour."""

    coordinate_index: int = 0
    normal_index: int = 0
    texel_index: int = 0
    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))


class Triangle:
    """Three vertices and an optional texture."""

    __slots__ = ("vertices", "texture")

    def __init__(
        self,
        first: Vertex,
        second: Vertex,
        third: Vertex,
        texture: Texture | None = None,
    ) -> None:
        self.vertices = (first, second, third)
        self.texture = texture

    def __getitem__(self, index: int) -> Vertex:
        if not isinstance(index, int) or not 0 <= index < 3:
            raise IndexError(f"triangle vertex index out of range: {index!r}")
        return self.vertices[index]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return 3

    def __repr__(self) -> str:
        first, second, third = self.vertices
        return f"Triangle({first!r}, {second!r}, {third!r}, texture={self.texture!r})"