"""A small entity/component store: entities are integers, components live per type."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar, Union

from .transform import Transform

__all__ = [
    "Entity",
    "ComponentType",
    "TransformComponent",
    "MeshComponent",
    "MaterialComponent",
    "LightComponent",
    "CameraComponent",
    "ComponentStorage",
    "World",
]

Entity = int
T = TypeVar("T")


class ComponentType(enum.Enum):
    TRANSFORM = "transform"
    MESH = "mesh"
    MATERIAL = "material"
    LIGHT = "light"
    CAMERA = "camera"


@dataclass
class TransformComponent:
    transform: Transform


@dataclass
class MeshComponent:
    mesh_data: Any
    sub_mesh_name: str
    vao: int = 0


@dataclass
class MaterialComponent:
    material: Any = None
    texture: Any = None


@dataclass
class LightComponent:
    light: Any = None


@dataclass
class CameraComponent:
    camera: Any = None


_COMPONENT_CLASSES: dict[ComponentType, type] = {
    ComponentType.TRANSFORM: TransformComponent,
    ComponentType.MESH: MeshComponent,
    ComponentType.MATERIAL: MaterialComponent,
    ComponentType.LIGHT: LightComponent,
    ComponentType.CAMERA: CameraComponent,
}


class ComponentStorage(Generic[T]):
    """Components of one type keyed by entity."""

    def __init__(self) -> None:
        self._components: dict[Entity, T] = {}

    def add(self, entity: Entity, component: T) -> None:
        """Attach ``component`` to ``entity``, replacing any earlier one."""
        self._components[entity] = component

    def remove(self, entity: Entity) -> None:
        """Detach the entity's component; nothing happens if it has none."""
        self._components.pop(entity, None)

    def get(self, entity: Entity) -> T | None:
        return self._components.get(entity)

    def items(self) -> Iterator[tuple[Entity, T]]:
        return iter(list(self._components.items()))

    def __contains__(self, entity: object) -> bool:
        return entity in self._components

    def __len__(self) -> int:
        return len(self._components)


class World:
    """Hands out entity ids and keeps one component storage per component type."""

    def __init__(self) -> None:
        self._next_id: Entity = 1
        self._storages: dict[type, ComponentStorage[Any]] = {}

    def create_entity(self) -> Entity:
        entity = self._next_id
        self._next_id += 1
        return entity

    def delete_entity(self, entity: Entity) -> None:
        """Remove the entity's built-in components of every kind."""
        for component_class in _COMPONENT_CLASSES.values():
            self.storage(component_class).remove(entity)

    def add_component(self, entity: Entity, component: Any) -> None:
        self.storage(type(component)).add(entity, component)

    def get_component(
        self, entity: Entity, component_type: Union[type, ComponentType]
    ) -> Any | None:
        return self.storage(component_type).get(entity)

    def storage(self, component_type: Union[type, ComponentType]) -> ComponentStorage[Any]:
        """Return the storage for a component class or kind, creating it on first use."""
        if isinstance(component_type, ComponentType):
            component_type = _COMPONENT_CLASSES[component_type]
        if not isinstance(component_type, type):
            raise TypeError(f"not a component type: {component_type!r}")
        return self._storages.setdefault(component_type, ComponentStorage())