"""Building ready-to-draw scene objects and lights from the base meshes."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, Sequence

from .lighting import Light, LightData, LightType
from .logger import error
from .mesh import MeshData3D
from .mesh_factory import MeshFactory
from .scene import InputContext
from .scene_object import SceneObject

__all__ = ["SceneObjectFactory", "create_input_context", "generate_name"]

BASIC_SHADER = "basic"
BASE_MESHES = ("cube", "sphere", "triangle", "square", "circle")

_name_counters: Counter[str] = Counter()


def create_input_context() -> InputContext:
    """Input settings for objects the factory builds (60 frames per second)."""
    return InputContext(rotation_speed=0.5, delta=0.016, angle=0.0, radius=45.0)


def generate_name(type_name: str) -> str:
    """Return ``<type>_<n>`` with ``n`` counting from 1 for each type."""
    _name_counters[type_name] += 1
    return f"{type_name}_{_name_counters[type_name]}"


@dataclass(eq=False)
class _ShapeMesh:
    """One named sub-mesh of the shared mesh data."""

    mesh_data: MeshData3D
    name: str

    @property
    def info(self) -> Any:
        return self.mesh_data.object_info(self.name)

    def draw(self) -> Any:
        """Return the sub-mesh description that is drawn."""
        return self.info


class SceneObjectFactory:
    """Creates cubes, spheres and lights and registers them with a scene."""

    def __init__(self, render_data: Any, scene: Any = None) -> None:
        self.render_data = render_data
        self.scene = scene
        self.mesh_factory = MeshFactory()
        self._mesh_data = MeshData3D()
        for name in BASE_MESHES:
            vertices, indices = self.mesh_factory.create(name)
            self._mesh_data.add_named_mesh(name, vertices, indices)

    @property
    def mesh_data(self) -> MeshData3D:
        return self._mesh_data

    def _require_scene(self) -> Any:
        if self.scene is None:
            raise RuntimeError("no scene is set on the factory")
        return self.scene

    def _build(
        self,
        mesh_name: str,
        pos: Sequence[float],
        material_name: str,
        scale: float,
        visual_light_obj: bool,
    ) -> SceneObject:
        obj = SceneObject(_ShapeMesh(self._mesh_data, mesh_name), material_name)
        obj.transform.set_position(tuple(pos))
        obj.set_shader(self.render_data.get_shader(BASIC_SHADER))
        obj.name = generate_name(mesh_name)
        obj.initialize_material(self.render_data.material_library)
        # Objects always start at the origin; ``pos`` is applied only before this reset.
        obj.transform.set_position((0.0, 0.0, 0.0))
        obj.transform.set_scale((scale, scale, scale))
        if not visual_light_obj:
            self._require_scene().add_object(obj)
        return obj

    def create_cube(
        self,
        pos: Sequence[float] = (0.0, 0.0, 0.0),
        material_name: str = "leather",
        visual_light_obj: bool = False,
    ) -> SceneObject:
        """A cube scaled by 7.5; added to the scene unless it shows a light."""
        return self._build("cube", pos, material_name, 7.5, visual_light_obj)

    def create_sphere(
        self,
        pos: Sequence[float] = (0.0, 0.0, 0.0),
        material_name: str = "gold",
        visual_light_obj: bool = False,
    ) -> SceneObject:
        """A sphere scaled by 3.5; added to the scene unless it shows a light."""
        return self._build("sphere", pos, material_name, 3.5, visual_light_obj)

    def _create_light(
        self, kind: str, light_type: LightType, material_name: str, position: Sequence[float]
    ) -> bool:
        scene = self._require_scene()
        visual = self.create_sphere(position, material_name, True)
        if visual is None:
            error(f"[SceneObjectFactory] Failed to create the visual object of a {kind} light.")
            return False
        visual.set_shader(self.render_data.get_shader(BASIC_SHADER))
        visual.name = generate_name(kind)
        light = Light(LightData(position), name=visual.name, light_type=light_type)
        scene.add_object(visual)
        self.render_data.light_manager.add_light(light)
        return True

    def create_point_light(
        self, material_name: str = "gold", position: Sequence[float] = (7.0, 7.0, 7.0)
    ) -> bool:
        return self._create_light("point", LightType.POINT, material_name, position)

    def create_directional_light(
        self, material_name: str = "gold", position: Sequence[float] = (7.0, 7.0, 7.0)
    ) -> bool:
        return self._create_light("directional", LightType.DIRECTIONAL, material_name, position)

    def create_spot_light(
        self, material_name: str = "gold", position: Sequence[float] = (7.0, 7.0, 7.0)
    ) -> bool:
        return self._create_light("spot", LightType.SPOT, material_name, position)