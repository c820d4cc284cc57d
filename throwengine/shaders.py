"""Shader kinds that know which uniforms their program expects."""

from __future__ import annotations

import abc
import enum
from typing import Any, ClassVar, Sequence

from .logger import info, warn
from .shader_program import ShaderProgram

__all__ = ["ShaderType", "Shader", "BasicShader", "GridShader"]


class ShaderType(enum.Enum):
    BASIC = "basic"
    GRID = "grid"


class Shader(abc.ABC):
    """A shader kind wrapping a program; ``render_data`` is set by whoever draws."""

    shader_type: ClassVar[ShaderType]

    def __init__(self, program: ShaderProgram | None) -> None:
        self._program = program
        self.render_data: Any = None

    @property
    def program(self) -> ShaderProgram | None:
        return self._program

    @property
    def type(self) -> ShaderType:
        return self.shader_type

    def bind(self) -> bool:
        """Bind the program; warn and return False when there is none."""
        if self._program is None:
            warn(f"{type(self).__name__} program can't be bound!")
            return False
        self._program.bind()
        return True

    @abc.abstractmethod
    def set_lights(self, lights: Sequence[Any]) -> None:
        """Hand the scene lights to the shader."""

    @abc.abstractmethod
    def set_material(self, material: Any) -> None:
        """Upload the surface material."""

    @abc.abstractmethod
    def set_matrices(self, model: Any, view: Any, projection: Any, camera_pos: Sequence[float]) -> None:
        """Upload the transform matrices and camera position."""


class BasicShader(Shader):
    """Lit surface shader with a material and model/view/projection matrices."""

    shader_type = ShaderType.BASIC
    FALLBACK_COLOR = (1.0, 0.0, 1.0)

    def __init__(self, program: ShaderProgram | None) -> None:
        super().__init__(program)
        info("BasicShader created as fallback")

    def set_lights(self, lights: Sequence[Any]) -> None:
        """Lights are uploaded by the light manager, not here."""

    def set_material(self, material: Any) -> None:
        if self._program is None or material is None:
            return
        self._program.set_vec3("material.ambient", material.ambient)
        self._program.set_vec3("material.diffuse", material.diffuse)
        self._program.set_vec3("material.specular", material.specular)
        self._program.set_float("material.shininess", material.shininess)

    def set_matrices(self, model: Any, view: Any, projection: Any, camera_pos: Sequence[float]) -> None:
        if self._program is None:
            return
        self._program.set_mat4("model", model)
        self._program.set_mat4("view", view)
        self._program.set_mat4("projection", projection)
        self._program.set_vec3("viewPos", camera_pos)


class GridShader(Shader):
    """Unlit line shader for the ground grid."""

    shader_type = ShaderType.GRID

    def set_lights(self, lights: Sequence[Any]) -> None:
        """The grid is not lit."""

    def set_material(self, material: Any) -> None:
        """The grid has no material."""

    def set_matrices(self, model: Any, view: Any, projection: Any, camera_pos: Sequence[float]) -> None:
        if self._program is None:
            return
        self._program.set_mat4("uModel", model)
        self._program.set_mat4("uView", view)
        self._program.set_mat4("uProjection", projection)