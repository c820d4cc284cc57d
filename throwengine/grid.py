"""The ground grid: line vertex generation, drawing and ownership."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from .logger import error, warn

__all__ = ["GridVertex", "GridData", "GridRenderer", "GridSystem"]

Vec3 = tuple[float, float, float]

_MINOR_ALPHA = 0.3
_MAJOR_ALPHA = 0.6
_CENTER_ALPHA = 0.8
_MAJOR_LIFT = 0.001
_CENTER_LIFT = 0.002
_AXIS_EXTENSION = 0.05


def _color(value: Sequence[float]) -> Vec3:
    r, g, b = (float(c) for c in value)
    return (r, g, b)


def _scaled(color: Vec3, factor: float) -> Vec3:
    return (color[0] * factor, color[1] * factor, color[2] * factor)


@dataclass(frozen=True)
class GridVertex:
    """One end point of a grid line."""

    position: Vec3
    color: Vec3


class GridData:
    """Line vertices of a grid centred on the origin in the XZ plane.

    Changing any setting regenerates the vertices.
    """

    def __init__(self) -> None:
        self._tile_size = 1.0
        self.camera_tile_range = 50.0
        self._num_rows = 300
        self._num_cols = 300
        self._major_line_interval = 10
        self._grid_color: Vec3 = (0.7, 0.7, 0.7)
        self._major_grid_color: Vec3 = (1.0, 1.0, 1.0)
        self._center_color: Vec3 = (0.9, 0.3, 0.3)
        self._vertices: list[GridVertex] = []
        self.rebuild()

    @property
    def vertices(self) -> list[GridVertex]:
        return list(self._vertices)

    @property
    def tile_size(self) -> float:
        return self._tile_size

    @tile_size.setter
    def tile_size(self, size: float) -> None:
        self._tile_size = float(size)
        self.rebuild()

    @property
    def num_rows(self) -> int:
        return self._num_rows

    @property
    def num_cols(self) -> int:
        return self._num_cols

    @property
    def major_line_interval(self) -> int:
        return self._major_line_interval

    @property
    def grid_color(self) -> Vec3:
        return self._grid_color

    @grid_color.setter
    def grid_color(self, color: Sequence[float]) -> None:
        self._grid_color = _color(color)
        self.rebuild()

    @property
    def major_grid_color(self) -> Vec3:
        return self._major_grid_color

    @major_grid_color.setter
    def major_grid_color(self, color: Sequence[float]) -> None:
        self._major_grid_color = _color(color)
        self.rebuild()

    @property
    def center_color(self) -> Vec3:
        return self._center_color

    @center_color.setter
    def center_color(self, color: Sequence[float]) -> None:
        self._center_color = _color(color)
        self.rebuild()

    def set_grid_dimensions(self, rows: int, cols: int) -> None:
        self._num_rows = int(rows)
        self._num_cols = int(cols)
        self.rebuild()

    def rebuild(self) -> None:
        """Regenerate all line vertices from the current settings."""
        minor = _scaled(self._grid_color, _MINOR_ALPHA)
        major = _scaled(self._major_grid_color, _MAJOR_ALPHA)
        center = _scaled(self._center_color, _CENTER_ALPHA)

        half_width = self._num_cols * self._tile_size / 2
        half_depth = self._num_rows * self._tile_size / 2
        vertices: list[GridVertex] = []

        for row in range(self._num_rows + 1):
            z = row * self._tile_size - half_depth
            is_major = row % self._major_line_interval == 0
            color = major if is_major else minor
            lift = _MAJOR_LIFT if is_major else 0.0
            vertices.append(GridVertex((-half_width, lift, z), color))
            vertices.append(GridVertex((half_width, lift, z), color))

        for col in range(self._num_cols + 1):
            x = col * self._tile_size - half_width
            is_major = col % self._major_line_interval == 0
            color = major if is_major else minor
            lift = _MAJOR_LIFT if is_major else 0.0
            vertices.append(GridVertex((x, lift, -half_depth), color))
            vertices.append(GridVertex((x, lift, half_depth), color))

        reach = 1 + _AXIS_EXTENSION
        vertices.append(GridVertex((-half_width * reach, _CENTER_LIFT, 0.0), center))
        vertices.append(GridVertex((half_width * reach, _CENTER_LIFT, 0.0), center))
        vertices.append(GridVertex((0.0, _CENTER_LIFT, -half_depth * reach), center))
        vertices.append(GridVertex((0.0, _CENTER_LIFT, half_depth * reach), center))

        self._vertices = vertices


class GridRenderer:
    """Draws grid lines with a shader that exposes a ``program``."""

    FADE_START = 50.0
    FADE_END = 100.0

    def __init__(self, grid_data: GridData, camera: Any) -> None:
        self.grid_data = grid_data
        self.camera = camera
        self._shader: Any = None

    @property
    def shader(self) -> Any:
        if self._shader is None:
            warn("[GridRenderer.shader] no grid shader set")
        return self._shader

    def set_shader(self, shader: Any) -> bool:
        """Use ``shader`` for drawing; refuse and return False when it is None."""
        if shader is None:
            warn("[GridRenderer.set_shader] shader is None, it cannot be set")
            return False
        self._shader = shader
        return True

    def draw(self) -> int:
        """Upload the grid uniforms and return how many line vertices were drawn."""
        if self._shader is None or self.camera is None:
            return 0
        program = getattr(self._shader, "program", None)
        if program is None:
            return 0
        program.bind()
        program.set_vec3("u_cameraPos", np.asarray(self.camera.position, dtype=float))
        program.set_float("u_fadeStart", self.FADE_START)
        program.set_float("u_fadeEnd", self.FADE_END)
        return len(self.grid_data.vertices)


class GridSystem:
    """Owns the grid data together with its renderer."""

    def __init__(self) -> None:
        self._data: GridData | None = None
        self._renderer: GridRenderer | None = None

    def initialize(self, camera: Any) -> bool:
        try:
            self._data = GridData()
        except ValueError as exc:
            error(f"[GridSystem] Failed to create grid data: {exc}")
            return False
        self._renderer = GridRenderer(self._data, camera)
        return True

    @property
    def data(self) -> GridData | None:
        if self._data is None:
            warn("[GridSystem.data] grid data is not created")
        return self._data

    @property
    def renderer(self) -> GridRenderer | None:
        if self._renderer is None:
            warn("[GridSystem.renderer] grid renderer is not created")
        return self._renderer