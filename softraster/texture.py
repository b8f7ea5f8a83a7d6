"""Bitmap textures sampled with mirrored repetition and bilinear filtering."""

from __future__ import annotations

import math
from dataclasses import dataclass

from softraster.color import Color

_SUPPORTED_COMPONENTS = (3, 4)


@dataclass
class Texture:
    """A grid of texels, stored row by row starting at ``v = 0``."""

    width: int
    height: int
    texels: list[Color]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("a texture needs a positive width and height")
        if len(self.texels) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} texels, got {len(self.texels)}"
            )

    @classmethod
    def from_bytes(cls, width: int, height: int, components: int, data: bytes) -> Texture:
        """Build a texture from 8-bit RGB or RGBA samples.

        ``data`` holds ``width * height * components`` bytes, rows ordered from
        ``v = 0`` upwards. RGB data gives fully opaque texels.
        """
        if components not in _SUPPORTED_COMPONENTS:
            raise ValueError(f"unsupported number of components: {components!r}")
        samples = bytes(data)
        if width <= 0 or height <= 0:
            raise ValueError("a texture needs a positive width and height")
        expected = width * height * components
        if len(samples) != expected:
            raise ValueError(f"expected {expected} bytes of image data, got {len(samples)}")

        texels = []
        for start in range(0, expected, components):
            channels = [b / 255.0 for b in samples[start:start + components]]
            texels.append(Color(*channels))
        return cls(width, height, texels)

    def color_at(self, u: float, v: float) -> Color:
        """Sample the texture at ``(u, v)``.

        Coordinates outside [0, 1] repeat the image mirrored. The four nearest
        texels are blended, each weighted by its own alpha; the result's alpha
        is the sum of those weights.
        """
        x = _mirror(u) * (self.width - 1)
        y = _mirror(v) * (self.height - 1)

        x0, y0 = int(x), int(y)
        x1 = min(x0 + 1, self.width - 1)
        y1 = min(y0 + 1, self.height - 1)

        t00 = self._texel(x0, y0)
        t10 = self._texel(x1, y0)
        t01 = self._texel(x0, y1)
        t11 = self._texel(x1, y1)

        wu = x - math.floor(x)
        wv = y - math.floor(y)
        w00 = t00.alpha * (1.0 - wu) * (1.0 - wv)
        w10 = t10.alpha * wu * (1.0 - wv)
        w01 = t01.alpha * (1.0 - wu) * wv
        w11 = t11.alpha * wu * wv

        weighted = ((t00, w00), (t10, w10), (t01, w01), (t11, w11))
        return Color(
            sum(t.red * w for t, w in weighted),
            sum(t.green * w for t, w in weighted),
            sum(t.blue * w for t, w in weighted),
            w00 + w10 + w01 + w11,
        )

    def _texel(self, x: int, y: int) -> Color:
        return self.texels[x + y * self.width]


def _mirror(coordinate: float) -> float:
    """Fold a coordinate into [0, 1], flipping every other repetition."""
    folded = coordinate - math.floor(coordinate)
    if math.fmod(math.ceil(coordinate), 2.0) == 0:
        folded = 1.0 - folded
    return folded