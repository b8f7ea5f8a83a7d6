"""Rendering of a whole scene into a screen through a camera."""

from __future__ import annotations

from typing import Sequence

from softraster.camera import Camera
from softraster.entity import Entity
from softraster.light import Light
from softraster.scene import Scene
from softraster.screen import Screen
from softraster.vectors import Vec3
from softraster.window import WindowTriangle


def render_scene(
    scene: Scene,
    screen: Screen,
    camera: Camera,
    wireframe: bool,
    cull: bool,
    light_on: bool,
) -> None:
    """Clear ``screen`` and draw every triangle of every entity in ``scene``.

    ``wireframe`` draws only triangle edges, ``cull`` skips back-facing
    triangles and ``light_on`` applies the scene's lights to each pixel.
    """
    screen.clear()
    lights = scene.lights

    for entity in scene:
        coordinates, normals, light_positions = update_buffers(entity, camera, lights)

        for triangle in entity:
            window_triangle = WindowTriangle(
                triangle, coordinates, normals, entity.texels, entity.alpha
            )

            if cull and is_culled(window_triangle):
                continue

            window_triangle.clip()
            # Pixel indices run from 0 to size - 1.
            window_triangle.apply_viewport(screen.width - 1, screen.height - 1)
            if is_clipped(window_triangle):
                continue

            if wireframe:
                screen.draw_frame(window_triangle, lights, light_positions, light_on)
            else:
                screen.draw_triangle(window_triangle, lights, light_positions, light_on)


def update_buffers(
    entity: Entity, camera: Camera, lights: Sequence[Light]
) -> tuple[list[Vec3], list[Vec3], list[Vec3]]:
    """Transform an entity's buffers for rendering.

    Returns the projected coordinates, the world-space normals and the
    projected light positions, in that order.
    """
    light_matrix = camera.projection * camera.transformation()
    global_matrix = light_matrix * entity.transformation()

    coordinates = [global_matrix * coordinate for coordinate in entity.coordinates]

    normal_matrix = entity.normal_transformation()
    normals = [normal_matrix * normal for normal in entity.normals]

    light_positions = [light_matrix * light.position for light in lights]

    return coordinates, normals, light_positions


def is_culled(triangle: WindowTriangle) -> bool:
    """True when the triangle's vertices wind clockwise in x/y, i.e. it faces away."""
    v0, v1, v2 = (vertex.position for vertex in triangle.vertices)
    first = Vec3.between(v1, v0)
    second = Vec3.between(v2, v0)
    return first.x * second.y - first.y * second.x < 0


def is_clipped(triangle: WindowTriangle) -> bool:
    """True when the triangle's pixel bounding box is empty."""
    return triangle.min_x >= triangle.max_x or triangle.min_y >= triangle.max_y