"""Built-in primitive meshes: triangle, square, cube, circle and sphere."""

from __future__ import annotations

import math
from typing import Callable

from .mesh import Vertex

__all__ = [
    "MeshFactory",
    "create_triangle",
    "create_square",
    "create_cube",
    "create_circle",
    "create_sphere",
]

MeshParts = tuple[list[Vertex], list[int]]


def create_triangle() -> MeshParts:
    color = (0.5, 0.5, 1.0)
    vertices = [
        Vertex((-0.5, 0.5, 0.0), (0.0, 0.0, 1.0), color, (0.0, 1.0)),
        Vertex((-0.5, -0.5, -0.5), (0.0, 0.0, 1.0), color, (0.0, 0.0)),
        Vertex((0.5, 0.5, 0.5), (0.0, 0.0, 1.0), color, (1.0, 1.0)),
        Vertex((0.5, -0.5, 0.5), (0.0, 0.0, 1.0), color, (1.0, 0.0)),
        Vertex((0.0, 0.5, 0.0), (0.0, 1.0, 0.0), color, (0.5, 1.0)),
    ]
    return vertices, [2, 3, 4]


def create_square() -> MeshParts:
    normal = (0.0, 0.0, -1.0)
    color = (1.0, 1.0, 0.0)
    vertices = [
        Vertex((-0.5, 0.5, -0.5), normal, color),
        Vertex((-0.5, -0.5, -0.5), normal, color),
        Vertex((0.5, 0.5, 0.5), normal, color),
        Vertex((0.5, -0.5, 0.5), normal, color),
    ]
    return vertices, [0, 1, 2, 1, 2, 3]


_CUBE_FACES: list[tuple[tuple[float, float, float], list[tuple[float, float, float]]]] = [
    ((0.0, 0.0, 1.0), [(-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5)]),
    ((0.0, 0.0, -1.0), [(0.5, -0.5, -0.5), (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5)]),
    ((-1.0, 0.0, 0.0), [(-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5)]),
    ((1.0, 0.0, 0.0), [(0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5)]),
    ((0.0, 1.0, 0.0), [(-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5)]),
    ((0.0, -1.0, 0.0), [(-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5)]),
]
_FACE_TEX_COORDS = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


def create_cube() -> MeshParts:
    color = (0.6, 0.0, 0.0)
    vertices: list[Vertex] = []
    indices: list[int] = []
    for normal, corners in _CUBE_FACES:
        base = len(vertices)
        vertices.extend(
            Vertex(corner, normal, color, tex) for corner, tex in zip(corners, _FACE_TEX_COORDS)
        )
        indices.extend(base + offset for offset in (0, 1, 2, 2, 3, 0))
    return vertices, indices


def create_circle() -> MeshParts:
    segment_count = 30
    radius = 1.0
    normal = (0.0, 0.0, 1.0)

    vertices = [Vertex((0.0, 0.0, 0.0), normal, (1.0, 0.0, 0.0), (0.5, 0.5))]
    for i in range(segment_count):
        angle = 2.0 * math.pi * i / segment_count
        x = radius * math.cos(angle)
        y = radius * math.sin(angle)
        color = ((math.cos(angle) + 1.0) * 0.5, (math.sin(angle) + 1.0) * 0.5, 1.0)
        vertices.append(Vertex((x, y, 0.0), normal, color, ((x + 1.0) * 0.5, (y + 1.0) * 0.5)))

    indices: list[int] = []
    for i in range(1, segment_count + 1):
        indices.extend((0, i, 1 if i == segment_count else i + 1))
    return vertices, indices


def create_sphere() -> MeshParts:
    x_segments = 32
    y_segments = 32
    pi = 3.14159265359

    vertices: list[Vertex] = []
    for y in range(y_segments + 1):
        for x in range(x_segments + 1):
            x_segment = x / x_segments
            y_segment = y / y_segments
            x_pos = math.cos(x_segment * 2.0 * pi) * math.sin(y_segment * pi)
            y_pos = math.cos(y_segment * pi)
            z_pos = math.sin(x_segment * 2.0 * pi) * math.sin(y_segment * pi)
            length = math.sqrt(x_pos * x_pos + y_pos * y_pos + z_pos * z_pos)
            vertices.append(
                Vertex(
                    (x_pos * 1.1, y_pos * 1.1, z_pos * 1.1),
                    (x_pos / length, y_pos / length, z_pos / length),
                    (1.0, 0.7, 0.1),
                    (1.0, 0.9),
                )
            )

    indices: list[int] = []
    for y in range(y_segments):
        for x in range(x_segments):
            i0 = y * (x_segments + 1) + x
            i1 = i0 + x_segments + 1
            indices.extend((i0, i1, i0 + 1, i0 + 1, i1, i1 + 1))
    return vertices, indices


class MeshFactory:
    """Builds primitive meshes by name."""

    def __init__(self) -> None:
        self._builders: dict[str, Callable[[], MeshParts]] = {
            "triangle": create_triangle,
            "square": create_square,
            "cube": create_cube,
            "circle": create_circle,
            "sphere": create_sphere,
        }

    @property
    def names(self) -> list[str]:
        return list(self._builders)

    def create(self, name: str) -> MeshParts:
        """Return (vertices, indices) of the named primitive; KeyError if unknown."""
        try:
            builder = self._builders[name]
        except KeyError:
            raise KeyError(f"{name} Object is not found!") from None
        return builder()