"""State shared by everything that draws during a frame."""

from __future__ import annotations

from typing import Any

import numpy as np

from .logger import warn

__all__ = ["RenderData"]


class RenderData:
    """Managers, camera and the current view and projection matrices."""

    def __init__(
        self,
        shader_manager: Any,
        camera: Any,
        texture_manager: Any,
        material_library: Any,
    ) -> None:
        for label, value in (
            ("shader_manager", shader_manager),
            ("camera", camera),
            ("texture_manager", texture_manager),
            ("material_library", material_library),
        ):
            if value is None:
                warn(f"[RenderData] {label} is None")
        self.shader_manager = shader_manager
        self.camera = camera
        self.texture_manager = texture_manager
        self._material_library = material_library
        self.light_manager: Any = None
        self.grid_renderer: Any = None
        self.view = np.eye(4)
        self.projection = np.eye(4)
        self.global_ambient = np.full(3, 0.1)

    @property
    def material_library(self) -> Any:
        if self._material_library is None:
            warn("[RenderData.material_library] material library is None!")
        return self._material_library

    @property
    def wrapper_program(self) -> Any:
        """The helper program of the shader manager."""
        return self.shader_manager.wrapper_program

    def get_shader(self, name: str) -> Any:
        return self.shader_manager.get_shader(name)

    def update(self) -> None:
        """Copy the camera's current view and projection matrices."""
        self.view = np.asarray(self.camera.view_matrix, dtype=float).copy()
        self.projection = np.asarray(self.camera.projection_matrix, dtype=float).copy()