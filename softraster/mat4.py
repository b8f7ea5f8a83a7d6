"""Row-major 4x4 matrices for affine and projective transforms."""

from __future__ import annotations

import math
from typing import Iterable

from softraster.vectors import Vec3

_SIZE = 4


def _check(index: int) -> int:
    if isinstance(index, int) and 0 <= index < _SIZE:
        return index
    raise IndexError(f"matrix index out of range: {index!r}")


class Mat4:
    """A 4x4 matrix; ``m[row, col]`` reads one entry, ``m[row]`` a whole row."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] | None = None) -> None:
        if values is None:
            self._values = [0.0] * (_SIZE * _SIZE)
        else:
            self._values = [float(v) for v in values]
            if len(self._values) != _SIZE * _SIZE:
                raise ValueError("a 4x4 matrix needs exactly 16 values")

    # construction

    @classmethod
    def identity(cls) -> Mat4:
        return cls([1.0 if r == c else 0.0 for r in range(_SIZE) for c in range(_SIZE)])

    @classmethod
    def transform(cls, position: Vec3, rotation: Vec3, scale: Vec3) -> Mat4:
        """Translation, then Y, Z and X rotations (degrees), then scale."""
        matrix = cls.translation(position)
        matrix *= cls.y_rotation(rotation.y)
        matrix *= cls.z_rotation(rotation.z)
        matrix *= cls.x_rotation(rotation.x)
        matrix *= cls.scaling(scale)
        return matrix

    @classmethod
    def translation(cls, vec3: Vec3) -> Mat4:
        return cls([
            1.0, 0.0, 0.0, vec3.x,
            0.0, 1.0, 0.0, vec3.y,
            0.0, 0.0, 1.0, vec3.z,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def scaling(cls, vec3: Vec3) -> Mat4:
        return cls([
            vec3.x, 0.0, 0.0, 0.0,
            0.0, vec3.y, 0.0, 0.0,
            0.0, 0.0, vec3.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def x_rotation(cls, angle: float) -> Mat4:
        a = math.radians(angle)
        c, s = math.cos(a), math.sin(a)
        return cls([
            1.0, 0.0, 0.0, 0.0,
            0.0, c, -s, 0.0,
            0.0, s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def y_rotation(cls, angle: float) -> Mat4:
        a = math.radians(angle)
        c, s = math.cos(a), math.sin(a)
        return cls([
            c, 0.0, s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            -s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def z_rotation(cls, angle: float) -> Mat4:
        a = math.radians(angle)
        c, s = math.cos(a), math.sin(a)
        return cls([
            c, -s, 0.0, 0.0,
            s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def perspective(cls, aspect_ratio: float, near: float, far: float, fov: float) -> Mat4:
        """A perspective projection; ``fov`` is the vertical field of view in degrees."""
        top = math.tan(math.radians(fov) / 2.0) * near
        right = top * aspect_ratio
        depth = far - near
        return cls([
            near / right, 0.0, 0.0, 0.0,
            0.0, near / top, 0.0, 0.0,
            0.0, 0.0, -(far + near) / depth, -(2 * far * near) / depth,
            0.0, 0.0, -1.0, 0.0,
        ])

    @classmethod
    def orthographic(cls, width: float, height: float, depth: float) -> Mat4:
        """An orthographic projection of a box centred on the origin."""
        return cls([
            2 / width, 0.0, 0.0, 0.0,
            0.0, 2 / height, 0.0, 0.0,
            0.0, 0.0, -2 / depth, 0.0,
            0.0, 0.0, 0.0, 1.0,
        ])

    @classmethod
    def orthographic_bounds(
        cls, right: float, left: float, top: float, bottom: float, near: float, far: float
    ) -> Mat4:
        """An orthographic projection of an arbitrary box."""
        return cls([
            2 / (right - left), 0.0, 0.0, -(right + left) / (right - left),
            0.0, 2 / (top - bottom), 0.0, -(top + bottom) / (top - bottom),
            0.0, 0.0, -2 / (far - near), -(far + near) / (far - near),
            0.0, 0.0, 0.0, 1.0,
        ])

    # algebra

    def inverse(self) -> Mat4:
        det = self.determinant()
        if det == 0:
            raise ValueError("matrix is singular and has no inverse")
        multiplier = 1 / det
        result = Mat4()
        for row in range(_SIZE):
            for col in range(_SIZE):
                sign = multiplier if (row + col) % 2 == 0 else -multiplier
                result[col, row] = self.minor_determinant(row, col) * sign
        return result

    def determinant(self) -> float:
        return (
            self[0, 0] * self.minor_determinant(0, 0)
            - self[0, 1] * self.minor_determinant(0, 1)
            + self[0, 2] * self.minor_determinant(0, 2)
            - self[0, 3] * self.minor_determinant(0, 3)
        )

    def minor_determinant(self, ignored_row: int, ignored_col: int) -> float:
        """Determinant of the 3x3 matrix left after removing one row and column."""
        _check(ignored_row)
        _check(ignored_col)
        r0, r1, r2 = (r for r in range(_SIZE) if r != ignored_row)
        c0, c1, c2 = (c for c in range(_SIZE) if c != ignored_col)
        return (
            self[r0, c0] * self._minor2(r1, c1, r2, c2)
            - self[r0, c1] * self._minor2(r1, c0, r2, c2)
            + self[r0, c2] * self._minor2(r1, c0, r2, c1)
        )

    def _minor2(self, row1: int, col1: int, row2: int, col2: int) -> float:
        return self[row1, col1] * self[row2, col2] - self[row2, col1] * self[row1, col2]

    def adjoint(self) -> Mat4:
        """Cofactor transpose of the upper-left 3x3 block; other entries stay zero."""
        result = Mat4()
        for row in range(3):
            for col in range(3):
                sign = 1 if (row + col) % 2 == 0 else -1
                result[col, row] = self.minor_determinant(row, col) * sign
        return result

    def transpose(self) -> Mat4:
        return Mat4(self[c, r] for r in range(_SIZE) for c in range(_SIZE))

    def _product(self, other: Mat4) -> list[float]:
        return [
            sum(self[r, k] * other[k, c] for k in range(_SIZE))
            for r in range(_SIZE)
            for c in range(_SIZE)
        ]

    def __mul__(self, other):
        """Multiply by another matrix, or transform a point with perspective division."""
        if isinstance(other, Mat4):
            return Mat4(self._product(other))
        if isinstance(other, Vec3):
            product = Vec3()
            homogenizer = 0.0
            for row in range(3):
                product[row] = sum(other[col] * self[row, col] for col in range(3)) + self[row, 3]
                homogenizer += self[3, row] * other[row]
            homogenizer += self[3, 3]
            if homogenizer > 0.0:
                product *= 1.0 / homogenizer
            return product
        return NotImplemented

    def __imul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        self._values = self._product(other)
        return self

    # access

    def __getitem__(self, index):
        if isinstance(index, tuple):
            row, col = index
            return self._values[_check(row) * _SIZE + _check(col)]
        start = _check(index) * _SIZE
        return tuple(self._values[start:start + _SIZE])

    def __setitem__(self, index, value) -> None:
        if isinstance(index, tuple):
            row, col = index
            self._values[_check(row) * _SIZE + _check(col)] = float(value)
            return
        row_values = [float(v) for v in value]
        if len(row_values) != _SIZE:
            raise ValueError("a matrix row needs exactly 4 values")
        start = _check(index) * _SIZE
        self._values[start:start + _SIZE] = row_values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join(repr(self[r]) for r in range(_SIZE))
        return f"Mat4({rows})"