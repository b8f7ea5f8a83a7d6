"""A collection of entities and the lights that shine on them."""

from __future__ import annotations

from typing import Iterator

from softraster.entity import Entity
from softraster.light import Light


class Scene:
    """Entities to render, in order, and the scene's lights."""

    __slots__ = ("_entities", "_lights")

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._lights: list[Light] = []

    def add_entity(self, entity: Entity) -> Entity:
        self._entities.append(entity)
        return entity

    def add_light(self, light: Light) -> Light:
        self._lights.append(light)
        return light

    @property
    def lights(self) -> list[Light]:
        """A copy of the list of lights."""
        return list(self._lights)

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __repr__(self) -> str:
        return f"Scene(entities={len(self._entities)}, lights={len(self._lights)})"