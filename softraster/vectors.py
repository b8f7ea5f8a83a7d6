"""Small vector types used throughout the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _field_name(names: tuple[str, ...], index: int) -> str:
    if isinstance(index, int) and 0 <= index < len(names):
        return names[index]
    raise IndexError(f"vector index out of range: {index!r}")


@dataclass
class Vec2:
    """A two-component vector, used for texture coordinates."""

    u: float = 0.0
    v: float = 0.0

    _FIELDS = ("u", "v")

    def __getitem__(self, index: int) -> float:
        return getattr(self, _field_name(self._FIELDS, index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _field_name(self._FIELDS, index), value)


@dataclass
class Vec3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _FIELDS = ("x", "y", "z")

    @classmethod
    def between(cls, a: Vec3, b: Vec3) -> Vec3:
        """The vector going from ``b`` to ``a``."""
        return cls(a.x - b.x, a.y - b.y, a.z - b.z)

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vec3:
        """Scale this vector to unit length in place and return it."""
        length = self.magnitude()
        self.x /= length
        self.y /= length
        self.z /= length
        return self

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __getitem__(self, index: int) -> float:
        return getattr(self, _field_name(self._FIELDS, index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _field_name(self._FIELDS, index), value)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iadd__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __imul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self


@dataclass
class Vec4:
    """A homogeneous four-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    _FIELDS = ("x", "y", "z", "w")

    @classmethod
    def from_vec3(cls, vec3: Vec3, w: float = 1.0) -> Vec4:
        return cls(vec3.x, vec3.y, vec3.z, w)

    @classmethod
    def between(cls, a: Vec4, b: Vec4) -> Vec4:
        """The component-wise difference ``a - b``, including ``w``."""
        return cls(a.x - b.x, a.y - b.y, a.z - b.z, a.w - b.w)

    def homogenize(self) -> None:
        """Divide by ``w`` in place, unless ``w`` is zero."""
        if self.w != 0:
            self.x /= self.w
            self.y /= self.w
            self.z /= self.w
            self.w = 1.0

    def magnitude(self) -> float:
        """Length of the homogenized vector, ignoring ``w``."""
        copy = Vec4(self.x, self.y, self.z, self.w)
        copy.homogenize()
        return math.sqrt(copy.x * copy.x + copy.y * copy.y + copy.z * copy.z)

    def normalize(self) -> Vec4:
        """Scale x, y and z by the magnitude in place; ``w`` is left alone."""
        length = self.magnitude()
        self.x /= length
        self.y /= length
        self.z /= length
        return self

    def cross(self, other: Vec4) -> Vec4:
        return Vec4(
            self.y * other.z - self.z * other.y,
            -(self.x * other.z - self.z * other.x),
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec4) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def determinant(self, other: Vec4) -> float:
        return (
            self.y * other.z
            - self.z * other.y
            - (self.x * other.z - self.z * other.x)
            + self.x * other.y
            - self.y * other.x
        )

    def __getitem__(self, index: int) -> float:
        return getattr(self, _field_name(self._FIELDS, index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _field_name(self._FIELDS, index), value)

    def __add__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __iadd__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        self.w += other.w
        return self

    def __sub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __isub__(self, other: Vec4) -> Vec4:
        if not isinstance(other, Vec4):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        self.w -= other.w
        return self

    def __mul__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __imul__(self, scalar: float) -> Vec4:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        self.w *= scalar
        return self


@dataclass
class Vecii:
    """An integer pixel position."""

    x: int = 0
    y: int = 0