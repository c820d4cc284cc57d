"""A drawable object of the scene: mesh, transform, material and shader."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import numpy as np

from .logger import error, info, warn
from .material import Material
from .shaders import Shader, ShaderType
from .transform import Transform

__all__ = ["SceneObject"]


class SceneObject:
    """One object of the scene.

    ``render_data`` handed to the drawing methods must offer ``light_manager``,
    ``material_library``, ``texture_manager``, ``camera`` and ``global_ambient``.
    """

    def __init__(self, mesh: Any, material_name: str) -> None:
        if mesh is None:
            warn("[SceneObject] mesh is None")
        self.mesh = mesh
        self.transform = Transform()
        self.material_name = material_name
        self.material: Material | None = None
        self.name = ""
        self.id: int | None = None
        self.input_component: Any = None
        self._shader: Shader | None = None
        self._marked_for_deletion = False

    @property
    def shader(self) -> Shader | None:
        return self._shader

    @property
    def marked_for_deletion(self) -> bool:
        return self._marked_for_deletion

    def mark_for_deletion(self) -> None:
        self._marked_for_deletion = True

    def validate_render_state(self, render_data: Any) -> bool:
        """Check everything drawing needs; a missing material is replaced by the default."""
        shader = self._shader
        if shader is None:
            warn("[SceneObject] Shader not found! Skipping draw.")
            return False
        if shader.program is None:
            warn("[SceneObject.validate_render_state] shader program is None!")
            return False
        if getattr(render_data, "light_manager", None) is None:
            warn("[SceneObject] LightManager missing! Skipping draw.")
            return False
        if self.material is None:
            info("[SceneObject] Material missing! Not skipping but assign default material!")
            self.material = render_data.material_library.default_material()
            return False
        if getattr(render_data, "texture_manager", None) is None:
            warn("[SceneObject] TextureManager missing! Skipping draw.")
            return False
        if getattr(render_data, "camera", None) is None:
            warn("[SceneObject] Camera missing! Skipping draw.")
            return False
        return True

    def initialize_material(self, library: Any) -> None:
        """Give the object its own copy of the library's material of its name."""
        base = library.get_material(self.material_name)
        self.material = replace(base)

    def set_shader(self, shader: Shader | None) -> bool:
        """Use ``shader`` for drawing; only basic shaders are accepted."""
        if shader is None:
            error("[SceneObject.set_shader] Shader is None!")
            return False
        if shader.type is ShaderType.BASIC:
            self._shader = shader
            return True
        error("[SceneObject.set_shader] Unknown Shader type!")
        return False

    def draw(self, view: Any, projection: Any, render_data: Any) -> bool:
        """Upload this object's uniforms and draw its mesh; False when skipped."""
        if not self.validate_render_state(render_data):
            warn(f"[SceneObject.draw]: {self.name} check up!!!")
            error("[SceneObject.draw] validate_render_state failed!")
            return False
        model = self.transform.model_matrix()
        camera_pos = np.asarray(render_data.camera.position, dtype=float)
        self._prepare_shader(model, view, projection, camera_pos, render_data)
        self.mesh.draw()
        return True

    def _prepare_shader(
        self, model: Any, view: Any, projection: Any, camera_pos: Any, render_data: Any
    ) -> None:
        shader = self._shader
        if shader is None:
            warn("[SceneObject._prepare_shader] Shader not found! skipping..")
            return
        shader.render_data = render_data
        shader.bind()
        self._bind_material_and_textures(render_data)
        program = shader.program
        program.set_vec3("globalAmbient", np.asarray(render_data.global_ambient, dtype=float))
        render_data.light_manager.upload_lights(program)
        shader.set_material(self.material)
        shader.set_matrices(model, view, projection, camera_pos)

    def _bind_material_and_textures(self, render_data: Any) -> None:
        textures = render_data.texture_manager
        material = self.material
        if material.diffuse_texture is not None:
            textures.bind(material.diffuse_texture.gl_id, 0)
        if material.specular_texture is not None:
            textures.bind(material.specular_texture.gl_id, 1)