"""Shared vertex/index storage with named sub-meshes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

__all__ = ["Vertex", "SubMeshInfo", "MeshData", "MeshData3D", "SubMesh"]

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Vertex:
    """One vertex: position, normal, colour and texture coordinates."""

    position: Vec3
    normal: Vec3 = (0.0, 0.0, 0.0)
    color: Vec3 = (0.0, 0.0, 0.0)
    tex_coords: Vec2 = (0.0, 0.0)


@dataclass
class SubMeshInfo:
    """Where one mesh lives inside the shared buffers, and its vertex array id."""

    vertex_offset: int = 0
    index_offset: int = 0
    vertex_count: int = 0
    index_count: int = 0
    vao: int = 0


@dataclass
class MeshData:
    """All vertices and indices of several meshes packed into shared lists."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    sub_meshes: list[SubMeshInfo] = field(default_factory=list)
    vbo: int = 0
    ebo: int = 0

    def add_mesh(self, vertices: Iterable[Vertex], indices: Iterable[int]) -> SubMeshInfo:
        """Append a mesh; its indices are shifted by the current vertex count."""
        new_vertices = list(vertices)
        info = SubMeshInfo(
            vertex_offset=len(self.vertices),
            index_offset=len(self.indices),
            vertex_count=len(new_vertices),
        )
        shifted = [index + info.vertex_offset for index in indices]
        info.index_count = len(shifted)
        self.vertices.extend(new_vertices)
        self.indices.extend(shifted)
        self.sub_meshes.append(info)
        return info


@dataclass
class MeshData3D(MeshData):
    """Mesh storage whose sub-meshes can be looked up by name."""

    _objects: dict[str, SubMeshInfo] = field(default_factory=dict, init=False, repr=False)

    def add_named_mesh(
        self, name: str, vertices: Iterable[Vertex], indices: Iterable[int]
    ) -> SubMeshInfo:
        """Append a mesh and record a copy of its info under ``name``."""
        info = self.add_mesh(vertices, indices)
        self._objects[name] = replace(info)
        return info

    def object_info(self, name: str) -> SubMeshInfo:
        """Return the info recorded under ``name``; KeyError if there is none."""
        try:
            return self._objects[name]
        except KeyError:
            raise KeyError(f"no mesh named {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._objects


@dataclass
class SubMesh:
    """A drawable view onto one sub-mesh of a shared mesh store."""

    mesh_data: MeshData3D
    info: SubMeshInfo

    @property
    def vao(self) -> int:
        return self.info.vao

    def draw(self) -> tuple[int, ...]:
        """Return the element indices that one draw of this sub-mesh covers."""
        start = self.info.index_offset
        return tuple(self.mesh_data.indices[start : start + self.info.index_count])