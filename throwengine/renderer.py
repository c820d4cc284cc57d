"""Per-frame drawing of a scene."""

from __future__ import annotations

from typing import Any

from .logger import warn

__all__ = ["Renderer"]


class Renderer:
    """Runs a scene's input components and draws its objects with shared render data."""

    def __init__(self, render_data: Any = None) -> None:
        self.render_data = render_data

    def draw(self, scene: Any, view: Any, projection: Any) -> bool:
        """Draw one frame of ``scene``; False when the scene or render data is missing."""
        if self.render_data is None:
            warn("[Renderer.draw] render_data is None!")
            return False
        if scene is None:
            warn("[Renderer.draw] scene is None!")
            return False
        scene.update_input_components()
        scene.draw_all_objects(view, projection, self.render_data)
        return True