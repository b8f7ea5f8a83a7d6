"""An axis-aligned box with the six clipping planes that bound it."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterator

from softraster.clip_space import Edge
from softraster.vectors import Vec3


class ViewBox:
    """A box described by its six bounds; iterating yields its inward-facing planes."""

    __slots__ = ("maximum", "minimum")

    def __init__(self, right: float, left: float, top: float, bottom: float, far: float, near: float) -> None:
        self.maximum = Vec3(right, top, far)
        self.minimum = Vec3(left, bottom, near)

    @property
    def right(self) -> float:
        return self.maximum.x

    @property
    def left(self) -> float:
        return self.minimum.x

    @property
    def top(self) -> float:
        return self.maximum.y

    @property
    def bottom(self) -> float:
        return self.minimum.y

    @property
    def far(self) -> float:
        return self.maximum.z

    @property
    def near(self) -> float:
        return self.minimum.z

    @property
    def normal_right(self) -> Vec3:
        return Vec3(-1.0, 0.0, 0.0)

    @property
    def normal_left(self) -> Vec3:
        return Vec3(1.0, 0.0, 0.0)

    @property
    def normal_top(self) -> Vec3:
        return Vec3(0.0, -1.0, 0.0)

    @property
    def normal_bottom(self) -> Vec3:
        return Vec3(0.0, 1.0, 0.0)

    @property
    def normal_far(self) -> Vec3:
        return Vec3(0.0, 0.0, 1.0)

    @property
    def normal_near(self) -> Vec3:
        return Vec3(0.0, 0.0, -1.0)

    def __iter__(self) -> Iterator[Edge]:
        """Yield the right, top, near, left, bottom and far planes."""
        for normal in (self.normal_right, self.normal_top, self.normal_near):
            yield Edge(normal=normal, point=replace(self.maximum))
        for normal in (self.normal_left, self.normal_bottom, self.normal_far):
            yield Edge(normal=normal, point=replace(self.minimum))

    def __repr__(self) -> str:
        return (
            f"ViewBox(right={self.right!r}, left={self.left!r}, top={self.top!r}, "
            f"bottom={self.bottom!r}, far={self.far!r}, near={self.near!r})"
        )