"""The scene: object slots with recyclable ids, input components and the grid."""

from __future__ import annotations

import abc
import itertools
from dataclasses import dataclass
from typing import Any

from .logger import error, info, warn

__all__ = ["InputContext", "InputComponent", "Scene"]


@dataclass
class InputContext:
    """Timing and motion values shared by input handlers."""

    delta: float = 0.0
    rotation_speed: float = 0.0
    current_time: float = 0.0
    last_time: float = 0.0
    angle: float = 0.0
    interval: float = 0.0
    radius: float = 0.0
    is_jumping: bool = False
    jump_duration: float = 0.0
    jump_height: float = 0.0
    first_velocity_y: float = 0.0
    gravity: float = 0.0
    start_y: float = 0.0


class InputComponent(abc.ABC):
    """Something that reacts to input once per frame."""

    @abc.abstractmethod
    def process_input(self, scene: "Scene") -> None:
        """Handle this frame's input for ``scene``."""


class Scene:
    """Scene objects kept in reusable slots and looked up by name.

    Deleted slots and ids are recycled last-freed first. Deletions requested
    with ``mark_to_be_deleted`` happen at the end of ``draw_all_objects``.
    """

    def __init__(self, mesh_data: Any = None, input_context: InputContext | None = None) -> None:
        self.mesh_data = mesh_data
        self.input_context = input_context if input_context is not None else InputContext()
        self.grid_system: Any = None
        self.factory: Any = None
        self._input_components: list[Any] = []
        self._ids = itertools.count()
        self._by_id: dict[int, Any] = {}
        self._index_by_name: dict[str, int] = {}
        self._slots: list[Any] = []
        self._free_indices: list[int] = []
        self._free_ids: list[int] = []
        self._pending_deletion: list[str] = []

    @property
    def objects(self) -> list[Any]:
        """All slots in order; freed slots hold None."""
        return list(self._slots)

    def __contains__(self, name: object) -> bool:
        return name in self._index_by_name

    def add_object(self, obj: Any) -> int | None:
        """Give ``obj`` an id and a slot, reusing freed ones; return the id."""
        if obj is None:
            warn("[Scene.add_object] None object passed, skipping creation.")
            return None
        object_id = self._free_ids.pop() if self._free_ids else next(self._ids)
        obj.id = object_id
        if self._free_indices:
            index = self._free_indices.pop()
            self._slots[index] = obj
        else:
            index = len(self._slots)
            self._slots.append(obj)
        self._index_by_name[obj.name] = index
        self._by_id[object_id] = obj
        return object_id

    def add_input_component(self, component: Any) -> None:
        self._input_components.append(component)

    def mark_to_be_deleted(self, name: str) -> None:
        self._pending_deletion.append(name)

    def clean_up(self) -> None:
        """Destroy every object marked for deletion, last marked first."""
        while self._pending_deletion:
            self.destroy_object(self._pending_deletion.pop())

    def destroy_object(self, name: str) -> bool:
        """Free the named object's slot and id; False when there is nothing to free."""
        index = self._index_by_name.get(name)
        if index is None:
            warn(f"Attempted to destroy object with invalid name: {name}")
            return False
        if index >= len(self._slots) or self._slots[index] is None:
            return False
        object_id = self._slots[index].id
        self._slots[index] = None
        self._free_indices.append(index)
        self._free_ids.append(object_id)
        if object_id not in self._by_id:
            warn(f"No object found for this ID: {object_id}")
            return False
        del self._by_id[object_id]
        del self._index_by_name[name]
        return True

    def get_object(self, name: str) -> Any:
        """Return the named object; KeyError when no object has that name."""
        try:
            index = self._index_by_name[name]
        except KeyError:
            raise KeyError(f"no scene object named {name!r}") from None
        return self._slots[index]

    def update_input_components(self) -> None:
        """Let each input component handle input; stop at the first missing one."""
        for component in self._input_components:
            if component is None:
                warn("[Scene] Input Component is None, skipping update!")
                return
            component.process_input(self)

    def draw_all_objects(self, view: Any, projection: Any, render_data: Any) -> int:
        """Draw every object, then carry out pending deletions; return how many were drawn."""
        if render_data is None:
            warn("[Scene.draw_all_objects] render_data is None!")
            return 0
        drawn = 0
        for obj in list(self._slots):
            if obj is None:
                error("[Scene.draw_all_objects] a scene object was None, skipping draw!")
                continue
            obj.draw(view, projection, render_data)
            drawn += 1
        self.clean_up()
        return drawn

    def debug_drawing(self, view: Any, projection: Any, render_data: Any) -> int:
        """Draw every object, logging failures instead of raising them."""
        drawn = 0
        for obj in list(self._slots):
            if obj is None:
                error("Error drawing object: trying to draw an object that is None!")
                continue
            try:
                obj.draw(view, projection, render_data)
            except Exception as exc:  # noqa: BLE001 - one broken object must not stop the frame
                error(f"Error drawing object {obj.name}: {exc}")
                continue
            drawn += 1
        return drawn

    def draw_grid(self, view: Any, projection: Any, render_data: Any) -> int:
        """Draw the grid of ``render_data``; return how many line vertices were drawn."""
        renderer = getattr(render_data, "grid_renderer", None)
        if renderer is None:
            return 0
        shader = renderer.shader
        program = getattr(shader, "program", None)
        if program is None:
            return 0
        program.bind()
        program.set_mat4("u_view", view)
        program.set_mat4("u_projection", projection)
        return renderer.draw()

    def init_grid(self, render_data: Any) -> bool:
        """Give the grid renderer a shader, falling back from ``basic`` to ``default``."""
        shader_manager = getattr(render_data, "shader_manager", None)
        if shader_manager is None:
            warn("[Scene.init_grid] ShaderManager is None!")
            return False
        grid_shader = shader_manager.get_shader("basic")
        if grid_shader is None:
            warn("[Scene.init_grid] grid shader not found, using fallback")
            grid_shader = shader_manager.get_shader("default")
            if grid_shader is None:
                error("[Scene.init_grid] Fallback shader not found!")
                return False
        if self.grid_system is None:
            warn("[Scene.init_grid] grid system is None")
            return False
        renderer = self.grid_system.renderer
        if renderer is None or not renderer.set_shader(grid_shader):
            return False
        info("[Scene.init_grid] successful!")
        return True