"""RGBA colours with floating-point channels."""

from __future__ import annotations

from dataclasses import dataclass

_CHANNELS = ("red", "green", "blue", "alpha")


def _channel(index: int) -> str:
    if isinstance(index, int) and 0 <= index < len(_CHANNELS):
        return _CHANNELS[index]
    raise IndexError(f"colour channel out of range: {index!r}")


@dataclass
class Color:
    """An RGBA colour; channels are expected to lie in [0, 1]."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 1.0

    @classmethod
    def gray(cls, value: float) -> Color:
        """An opaque colour with all three channels set to ``value``."""
        return cls(value, value, value, 1.0)

    def with_alpha(self, alpha: float) -> Color:
        """The same colour with its alpha multiplied by ``alpha``."""
        return Color(self.red, self.green, self.blue, self.alpha * alpha)

    def __getitem__(self, index: int) -> float:
        return getattr(self, _channel(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _channel(index), value)

    def __add__(self, other: Color) -> Color:
        """Add the channels and combine the alphas as stacked layers."""
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            self.red + other.red,
            self.green + other.green,
            self.blue + other.blue,
            other.alpha * (1.0 - self.alpha) + self.alpha,
        )

    def __mul__(self, alpha: float) -> Color:
        if not isinstance(alpha, (int, float)):
            return NotImplemented
        return Color(self.red * alpha, self.green * alpha, self.blue * alpha, self.alpha * alpha)