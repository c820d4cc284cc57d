"""Scene lights: their data, their kind, and a manager that uploads them to shaders."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from .logger import error, warn

__all__ = ["LightType", "LightData", "Light", "LightManager"]

SCENE_CENTER = np.zeros(3)


def _vec3(value: Sequence[float]) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array.copy()


def _towards_center(position: np.ndarray) -> np.ndarray:
    offset = SCENE_CENTER - position
    length = np.linalg.norm(offset)
    if length == 0:
        return np.zeros(3)
    return offset / length


class LightType(enum.IntEnum):
    POINT = 0
    DIRECTIONAL = 1
    SPOT = 2


class LightData:
    """Light properties that are sent to shaders as uniforms.

    The direction points from the light towards the scene centre (the origin);
    a light placed exactly at the centre has a zero direction.
    """

    def __init__(self, position: Sequence[float]) -> None:
        self._position = _vec3(position)
        self.direction = _towards_center(self._position)
        self.diffuse = np.ones(3)
        self.specular = np.ones(3)
        self.euler_angles = np.zeros(3)
        self.cut_off = math.cos(math.radians(12.5))
        self.outer_cut_off = math.cos(math.radians(17.5))
        self.constant = 1.0
        self.linear = 0.014
        self.quadratic = 0.0007

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _vec3(value)

    def point_from(self, pos: Sequence[float]) -> None:
        """Aim the light from ``pos`` towards the scene centre."""
        self.direction = _towards_center(_vec3(pos))


@dataclass(eq=False)
class Light:
    """A light source, named after the scene object that shows it."""

    light_data: LightData | None
    name: str = ""
    light_type: LightType = LightType.DIRECTIONAL

    def update(self) -> bool:
        """Check that the light has data to upload; warn and return False if not."""
        if self.light_data is None:
            warn(f"[Light.update] light {self.name!r} has no light data")
            return False
        return True


_VECTOR_UNIFORMS = ("position", "direction", "diffuse", "specular")


class LightManager:
    """Keeps lights in reusable slots and looks them up by name."""

    def __init__(self) -> None:
        self._lights: list[Light | None] = []
        self._free_slots: list[int] = []
        self._index_by_name: dict[str, int] = {}
        self._by_name: dict[str, Light] = {}

    @property
    def active_light_count(self) -> int:
        return len(self._by_name)

    @property
    def lights(self) -> list[Light | None]:
        """All slots in order; freed slots hold None."""
        return list(self._lights)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def set_light_uniforms(self, shader: Any, index: int, light: Light) -> bool:
        """Upload one light as ``lights[index]``; a light without data is removed."""
        data = light.light_data
        if data is None:
            self.remove_light(light.name)
            return False
        prefix = f"lights[{index}]"
        values = {
            "position": data.position,
            "direction": data.direction,
            "diffuse": data.diffuse,
            "specular": data.specular,
        }
        for field_name in _VECTOR_UNIFORMS:
            uniform = f"{prefix}.{field_name}"
            if shader.has_uniform(uniform):
                shader.set_vec3(uniform, np.asarray(values[field_name], dtype=float))
            else:
                warn(f"[LightManager.upload_lights] shader has no {field_name} uniform! {light.name}")
        if shader.has_uniform("activeLightCount"):
            shader.set_uint("activeLightCount", self.active_light_count)
        else:
            warn("[LightManager.upload_lights] shader has no activeLightCount uniform!")
        return True

    def upload_lights(self, shader: Any) -> int:
        """Bind ``shader`` and upload lights in slot order.

        Stops at the first empty slot. Returns how many lights were uploaded.
        """
        if shader is None:
            error("Shader is null in LightManager.upload_lights")
            return 0
        shader.bind()
        uploaded = 0
        for index, light in enumerate(self._lights):
            if light is None:
                warn("[LightManager.upload_lights] Light is None!")
                return uploaded
            light.update()
            if self.set_light_uniforms(shader, index, light):
                uploaded += 1
        return uploaded

    def add_light(self, light: Light) -> None:
        """Store ``light`` under its name, replacing a light of the same name."""
        name = light.name
        if name in self._by_name:
            self.remove_light(name)
        if self._free_slots:
            index = self._free_slots.pop()
            self._lights[index] = light
        else:
            self._lights.append(light)
            index = len(self._lights) - 1
        self._index_by_name[name] = index
        self._by_name[name] = light

    def remove_light(self, name: str) -> None:
        """Free the slot of the named light; unknown names are ignored."""
        index = self._index_by_name.get(name)
        if index is None:
            return
        if index < len(self._lights) and self._lights[index] is not None:
            self._lights[index] = None
            self._by_name.pop(name, None)
            self._free_slots.append(index)
            del self._index_by_name[name]

    def get_light(self, name: str) -> Light | None:
        light = self._by_name.get(name)
        if light is None:
            warn(f"[LightManager.get_light] object: {name} not found!")
        return light