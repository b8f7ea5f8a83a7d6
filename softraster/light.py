"""A point light with ambient, diffuse and specular components."""

from __future__ import annotations

from dataclasses import dataclass, field

from softraster.vectors import Vec3


@dataclass
class Light:
    """A light source and the strength of each of its components."""

    position: Vec3
    ambient: float = 0.0
    diffuse: float = 0.0
    specular: float = 0.0
    look_direction: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 0.5))
    has_ambient: bool = True
    has_diffuse: bool = True
    has_specular: bool = True

    def intensity(self, normal: Vec3, pixel_position: Vec3, light_position: Vec3) -> float:
        """Light intensity in [0, 1] for a surface with the given normal.

        The diffuse term uses the light's own position as its direction;
        ``pixel_position`` and ``light_position`` do not affect the result.
        """
        unit_normal = Vec3(normal.x, normal.y, normal.z).normalize()

        ambient = self.ambient * self.has_ambient
        diffuse = 0.0
        specular = 0.0

        if self.diffuse > 0.0:
            diffuse = self.diffuse * self.has_diffuse * unit_normal.dot(self.position)

        if self.specular > 0.0:
            reflex = (unit_normal + self.look_direction).normalize()
            specular = self.specular * self.has_specular * reflex.dot(self.look_direction)

        return min(max(ambient + diffuse + specular, 0.0), 1.0)