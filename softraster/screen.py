"""A colour and depth buffer that triangles and lines are drawn into."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Sequence

from softraster.color import Color
from softraster.light import Light
from softraster.vectors import Vec3
from softraster.window import WindowTriangle, WindowVertex

_CLEAR_DEPTH = 2.0


def _mix(values: Iterable[float], weights: Sequence[float]) -> float:
    return sum(value * weight for value, weight in zip(values, weights))


def _check_size(width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError(f"screen size cannot be negative: {width}x{height}")


class Screen:
    """Pixels stored row by row; ``pixels[width * y + x]`` is pixel ``(x, y)``."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        _check_size(width, height)
        self._width = width
        self._height = height
        self._capacity = width * height
        self.pixels = [Color() for _ in range(self._capacity)]
        self.depth = [0.0] * self._capacity
        self.clear_color = Color(0.0, 0.0, 0.0)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def resize(self, width: int, height: int) -> None:
        """Change the size, growing the buffers only when they are too small."""
        _check_size(width, height)
        needed = width * height
        if self._capacity < needed:
            self.pixels = [Color() for _ in range(needed)]
            self.depth = [0.0] * needed
            self._capacity = needed
        self._width = width
        self._height = height

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self._width}x{self._height} screen")
        return self._width * y + x

    def pixel(self, x: int, y: int) -> Color:
        return self.pixels[self._index(x, y)]

    def set_pixel_color(self, x: int, y: int, color: Color) -> None:
        self.pixels[self._index(x, y)] = replace(color)

    def clear(self) -> None:
        """Fill with the clear colour and reset depth to beyond the far plane."""
        for i in range(self._width * self._height):
            self.pixels[i] = replace(self.clear_color)
            self.depth[i] = _CLEAR_DEPTH

    def draw_triangle(
        self,
        triangle: WindowTriangle,
        lights: Sequence[Light],
        light_buffer: Sequence[Vec3],
        use_light: bool,
    ) -> None:
        """Fill the triangle with depth testing, blending and optional lighting."""
        v0, v1, v2 = triangle.vertices
        p0, p1, p2 = v0.window_position, v1.window_position, v2.window_position
        denom = (p1.y - p2.y) * (p0.x - p2.x) + (p2.x - p1.x) * (p0.y - p2.y)
        if denom == 0:
            return

        for x in range(triangle.min_x, triangle.max_x + 1):
            for y in range(triangle.min_y, triangle.max_y + 1):
                w0 = ((p1.y - p2.y) * (x - p2.x) + (p2.x - p1.x) * (y - p2.y)) / denom
                w1 = ((p2.y - p0.y) * (x - p2.x) + (p0.x - p2.x) * (y - p2.y)) / denom
                w2 = 1.0 - w0 - w1
                if w0 < 0.0 or w1 < 0.0 or w2 < 0.0:
                    continue
                self._plot(
                    self._width * y + x,
                    triangle,
                    triangle.vertices,
                    (w0, w1, w2),
                    lights,
                    light_buffer,
                    use_light,
                )

    def draw_frame(
        self,
        triangle: WindowTriangle,
        lights: Sequence[Light],
        light_buffer: Sequence[Vec3],
        use_light: bool,
    ) -> None:
        """Draw the three edges of the triangle."""
        v0, v1, v2 = triangle.vertices
        for first, second in ((v0, v1), (v1, v2), (v2, v0)):
            self.draw_line(triangle, first, second, lights, light_buffer, use_light)

    def draw_line(
        self,
        triangle: WindowTriangle,
        first: WindowVertex,
        second: WindowVertex,
        lights: Sequence[Light],
        light_buffer: Sequence[Vec3],
        use_light: bool,
    ) -> None:
        """Draw one edge with Bresenham's algorithm, kept inside the triangle's bounds."""
        x = first.window_position.x
        delta_x = second.window_position.x - x
        step_x = 1 if delta_x > 0 else -1
        delta_x *= step_x

        y = first.window_position.y
        delta_y = second.window_position.y - y
        step_y = 1 if delta_y > 0 else -1
        delta_y *= step_y

        steep = delta_y > delta_x
        half_big = delta_y if steep else delta_x
        big = half_big + half_big
        small = delta_x + delta_x if steep else delta_y + delta_y
        error = small - half_big

        # Step back once so the loop can move before it draws.
        if error < 0:
            if steep:
                x -= step_x
            else:
                y -= step_y
            error += big
        if steep:
            y -= step_y
        else:
            x -= step_x
        error -= small

        for i in range(half_big + 2):
            if error >= 0:
                if steep:
                    x += step_x
                else:
                    y += step_y
                error -= big
            if steep:
                y += step_y
            else:
                x += step_x
            error += small

            if not (triangle.min_x <= x <= triangle.max_x and triangle.min_y <= y <= triangle.max_y):
                continue
            w2 = i / half_big if half_big else 0.0
            w1 = 1.0 - w2
            self._plot(
                self._width * y + x,
                triangle,
                (first, second),
                (w1, w2),
                lights,
                light_buffer,
                use_light,
            )

    def _plot(
        self,
        index: int,
        triangle: WindowTriangle,
        vertices: Sequence[WindowVertex],
        weights: Sequence[float],
        lights: Sequence[Light],
        light_buffer: Sequence[Vec3],
        use_light: bool,
    ) -> None:
        z = _mix((v.position.z for v in vertices), weights)
        if z > self.depth[index]:
            return
        self.depth[index] = z

        if triangle.texture is not None:
            u = _mix((v.texel.u for v in vertices), weights)
            v = _mix((vertex.texel.v for vertex in vertices), weights)
            new = triangle.texture.color_at(u, v)
        else:
            new = Color(*(_mix((v.color[c] for v in vertices), weights) for c in range(4)))

        if new.alpha == 0.0:
            return

        if new.alpha == 1.0:
            pixel = self.pixels[index] = new
        else:
            pixel = self.pixels[index]
            keep = 1.0 - new.alpha
            pixel.red = pixel.red * keep + new.red * new.alpha
            pixel.green = pixel.green * keep + new.green * new.alpha
            pixel.blue = pixel.blue * keep + new.blue * new.alpha

        if not use_light:
            return

        normal = Vec3(*(_mix((v.normal[axis] for v in vertices), weights) for axis in range(3)))
        position = Vec3(
            _mix((v.position.x for v in vertices), weights),
            _mix((v.position.y for v in vertices), weights),
            z,
        )
        reference = light_buffer[0] if light_buffer else Vec3()
        intensity = sum(light.intensity(normal, position, reference) for light in lights)

        pixel.red *= intensity
        pixel.green *= intensity
        pixel.blue *= intensity

    def __repr__(self) -> str:
        return f"Screen({self._width}x{self._height})"