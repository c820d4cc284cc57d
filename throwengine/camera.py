"""A fly-through perspective camera driven by yaw and pitch angles."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from .transform import look_at, perspective

__all__ = ["Camera"]


def _vec3(value: Sequence[float]) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array.copy()


def _normalize(vector: np.ndarray) -> np.ndarray:
    return vector / np.linalg.norm(vector)


class Camera:
    """Perspective camera with cached view and projection matrices.

    Yaw and pitch are in degrees. Any change marks the camera dirty;
    ``update`` rebuilds the matrices only when it is.
    """

    FIELD_OF_VIEW = 60.0
    NEAR_PLANE = 0.3
    FAR_PLANE = 100.0
    PITCH_LIMIT = 88.0

    def __init__(self, screen_width: int = 1280, screen_height: int = 720) -> None:
        self._screen_width = int(screen_width)
        self._screen_height = int(screen_height)
        self._position = np.array([0.0, 0.0, 5.0])
        self._target = np.zeros(3)
        self._yaw = -90.0
        self._pitch = 0.0
        self._world_up = np.array([0.0, 1.0, 0.0])
        self._up = np.array([0.0, 1.0, 0.0])
        self._front = np.array([0.0, 0.0, -1.0])
        self._right = np.array([1.0, 0.0, 0.0])
        self._camera_up = np.array([0.0, 1.0, 0.0])
        self._view = np.eye(4)
        self._projection = np.eye(4)
        self._dirty = True
        self.update()

    @property
    def dirty(self) -> bool:
        return self._dirty

    @dirty.setter
    def dirty(self, value: bool) -> None:
        self._dirty = bool(value)

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def target(self) -> np.ndarray:
        return self._target.copy()

    @property
    def front(self) -> np.ndarray:
        return self._front.copy()

    @front.setter
    def front(self, value: Sequence[float]) -> None:
        self._front = _vec3(value)

    @property
    def up(self) -> np.ndarray:
        """The camera's own up vector, which tilts with the pitch."""
        return self._camera_up.copy()

    @property
    def right(self) -> np.ndarray:
        return self._right.copy()

    @property
    def world_up(self) -> np.ndarray:
        return self._world_up.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def aspect(self) -> float:
        # Whole-number ratio of the screen sides, as the engine has always used.
        return float(self._screen_width // self._screen_height)

    def set_yaw(self, y: float) -> None:
        """Turn left or right by ``y`` degrees."""
        self._dirty = True
        self._yaw += y

    def set_pitch(self, p: float) -> None:
        """Tilt up or down by ``p`` degrees and refresh the view matrix."""
        self._dirty = True
        self._pitch += p
        up = self._world_up if abs(self._pitch) > self.PITCH_LIMIT else self._camera_up
        self.set_view_matrix(self._position, self._position + self._front, up)

    def move(self, speed: float, front: Sequence[float]) -> None:
        """Move along ``front`` by ``speed`` units."""
        self._dirty = True
        self._position = self._position + speed * _vec3(front)

    def strafe(self, speed: float, front: Sequence[float], up: Sequence[float]) -> None:
        """Move sideways, perpendicular to ``front`` and ``up``."""
        self._dirty = True
        side = _normalize(np.cross(_vec3(front), _vec3(up)))
        self._position = self._position + side * speed

    def set_position(self, pos: Sequence[float]) -> None:
        self._dirty = True
        self._position = _vec3(pos)

    def set_view_matrix(
        self, position: Sequence[float], target: Sequence[float], up: Sequence[float]
    ) -> None:
        self._position = _vec3(position)
        self._target = _vec3(target)
        self._up = _vec3(up)
        self._view = look_at(self._position, self._target, self._up)

    def set_projection_matrix(
        self, fov: float, aspect: float, near_plane: float, far_plane: float
    ) -> None:
        """Build the projection from a vertical field of view in degrees."""
        self._projection = perspective(math.radians(fov), aspect, near_plane, far_plane)

    def update_vectors(self) -> None:
        """Recompute front, right and up from yaw and pitch."""
        yaw = math.radians(self._yaw)
        pitch = math.radians(self._pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self._front = _normalize(front)
        self._right = _normalize(np.cross(self._front, self._world_up))
        self._camera_up = _normalize(np.cross(self._right, self._front))

    def update(self) -> None:
        """Rebuild vectors and matrices if anything changed since the last update."""
        if not self._dirty:
            return
        self.update_vectors()
        self.set_view_matrix(self._position, self._position + self._front, self._camera_up)
        self.set_projection_matrix(self.FIELD_OF_VIEW, self.aspect, self.NEAR_PLANE, self.FAR_PLANE)
        self._dirty = False