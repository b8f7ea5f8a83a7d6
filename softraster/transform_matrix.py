"""Affine 3x4 matrices: a 3x3 linear part with a translation column."""

from __future__ import annotations

import math
from typing import Iterable

from softraster.vectors import Vec3

_ROWS = 3
_COLS = 4


def _check(index: int, limit: int) -> int:
    if isinstance(index, int) and 0 <= index < limit:
        return index
    raise IndexError(f"matrix index out of range: {index!r}")


class TransformMatrix:
    """An affine transform stored as three rows of four values.

    The implicit fourth row is ``0 0 0 1``. ``m[row, col]`` reads one entry,
    ``m[row]`` a whole row.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._values = [0.0] * (_ROWS * _COLS)
        else:
            self._values = [float(v) for v in values]
            if len(self._values) != _ROWS * _COLS:
                raise ValueError("an affine matrix needs exactly 12 values")

    # construction

    @classmethod
    def identity(cls) -> TransformMatrix:
        return cls([1.0 if r == c else 0.0 for r in range(_ROWS) for c in range(_COLS)])

    @classmethod
    def transform(cls, position: Vec3, rotation: Vec3, scale: Vec3) -> TransformMatrix:
        """Scale, then Z, Y and X rotations (degrees), then translation."""
        matrix = cls.scaling(scale)
        matrix *= cls.z_rotation(rotation.z)
        matrix *= cls.y_rotation(rotation.y)
        matrix *= cls.x_rotation(rotation.x)
        matrix *= cls.translation(position)
        return matrix

    @classmethod
    def translation(cls, vec3: Vec3) -> TransformMatrix:
        return cls([
            1.0, 0.0, 0.0, vec3.x,
            0.0, 1.0, 0.0, vec3.y,
            0.0, 0.0, 1.0, vec3.z,
        ])

    @classmethod
    def scaling(cls, vec3: Vec3) -> TransformMatrix:
        return cls([
            vec3.x, 0.0, 0.0, 0.0,
            0.0, vec3.y, 0.0, 0.0,
            0.0, 0.0, vec3.z, 0.0,
        ])

    @classmethod
    def rotation(cls, vec3: Vec3) -> TransformMatrix:
        """Z, then Y, then X rotation, each angle in degrees."""
        matrix = cls.z_rotation(vec3.z)
        matrix *= cls.y_rotation(vec3.y)
        matrix *= cls.x_rotation(vec3.x)
        return matrix

    @classmethod
    def x_rotation(cls, angle: float) -> TransformMatrix:
        a = math.radians(angle)
        c, s = math.cos(a), math.sin(a)
        return cls([
            1.0, 0.0, 0.0, 0.0,
            0.0, c, -s, 0.0,
            0.0, s, c, 0.0,
        ])

    @classmethod
    def y_rotation(cls, angle: float) -> TransformMatrix:
        a = math.radians(angle)
        c, s = math.cos(a), math.sin(a)
        return cls([
            c, 0.0, s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            -s, 0.0, c, 0.0,
        ])

    @classmethod
    def z_rotation(cls, angle: float) -> TransformMatrix:
        a = math.radians(angle)
        c, s = math.cos(a), math.sin(a)
        return cls([
            c, -s, 0.0, 0.0,
            s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
        ])

    # algebra

    def extract_rotation(self) -> TransformMatrix:
        """The linear part with each row scaled to unit length; translation dropped."""
        values: list[float] = []
        for r in range(_ROWS):
            row = [self[r, c] for c in range(3)]
            length = math.sqrt(sum(v * v for v in row))
            values.extend(v / length for v in row)
            values.append(0.0)
        return TransformMatrix(values)

    def _product(self, other: TransformMatrix) -> list[float]:
        return [
            sum(self[r, a] * other[a, c] for a in range(3)) + (self[r, 3] if c == 3 else 0.0)
            for r in range(_ROWS)
            for c in range(_COLS)
        ]

    def __mul__(self, other):
        """Compose with another transform, or apply this transform to a point."""
        if isinstance(other, TransformMatrix):
            return TransformMatrix(self._product(other))
        if isinstance(other, Vec3):
            return Vec3(*(
                sum(other[c] * self[r, c] for c in range(3)) + self[r, 3]
                for r in range(_ROWS)
            ))
        return NotImplemented

    def __imul__(self, other: TransformMatrix) -> TransformMatrix:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        self._values = self._product(other)
        return self

    # access

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, col = index
            return self._values[_check(row, _ROWS) * _COLS + _check(col, _COLS)]
        start = _check(index, _ROWS) * _COLS
        return tuple(self._values[start:start + _COLS])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join(repr(self[r]) for r in range(_ROWS))
        return f"TransformMatrix({rows})"