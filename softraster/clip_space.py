"""The six planes bounding normalized device coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from softraster.vectors import Vec3

NORMAL_RIGHT = (-1.0, 0.0, 0.0)
NORMAL_LEFT = (1.0, 0.0, 0.0)
NORMAL_TOP = (0.0, -1.0, 0.0)
NORMAL_BOTTOM = (0.0, 1.0, 0.0)
NORMAL_NEAR = (0.0, 0.0, -1.0)
NORMAL_FAR = (0.0, 0.0, 1.0)

MINIMUM = (-1.0, -1.0, -1.0)
MAXIMUM = (1.0, 1.0, 1.0)

_EDGES = (
    (NORMAL_LEFT, MINIMUM),
    (NORMAL_TOP, MAXIMUM),
    (NORMAL_RIGHT, MAXIMUM),
    (NORMAL_BOTTOM, MINIMUM),
    (NORMAL_FAR, MINIMUM),
    (NORMAL_NEAR, MAXIMUM),
)


@dataclass(frozen=True)
class Edge:
    """A clipping plane: points with ``normal . (p - point) >= 0`` are inside."""

    normal: Vec3
    point: Vec3

    def distance(self, position: Vec3) -> float:
        """Signed distance of ``position`` from the plane, positive inside."""
        return self.normal.dot(Vec3.between(position, self.point))


def clip_edges() -> Iterator[Edge]:
    """Yield the left, top, right, bottom, far and near planes of the unit cube."""
    for normal, point in _EDGES:
        yield Edge(Vec3(*normal), Vec3(*point))