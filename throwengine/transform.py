"""Matrix helpers and the position/rotation/scale transform of an object."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

__all__ = [
    "Transform",
    "translation_matrix",
    "scale_matrix",
    "euler_rotation_matrix",
    "perspective",
    "look_at",
]


def _vec3(value: Sequence[float]) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array.copy()


def translation_matrix(offset: Sequence[float]) -> np.ndarray:
    """4x4 matrix that moves points by ``offset``."""
    matrix = np.eye(4)
    matrix[:3, 3] = _vec3(offset)
    return matrix


def scale_matrix(factors: Sequence[float]) -> np.ndarray:
    """4x4 matrix that scales each axis by the matching factor."""
    matrix = np.eye(4)
    matrix[0, 0], matrix[1, 1], matrix[2, 2] = _vec3(factors)
    return matrix


def euler_rotation_matrix(radians: Sequence[float]) -> np.ndarray:
    """4x4 rotation built through a quaternion from (pitch, yaw, roll) in radians."""
    half = _vec3(radians) * 0.5
    cx, cy, cz = np.cos(half)
    sx, sy, sz = np.sin(half)
    w = cx * cy * cz + sx * sy * sz
    x = sx * cy * cz - cx * sy * sz
    y = cx * sy * cz + sx * cy * sz
    z = cx * cy * sz - sx * sy * cz

    matrix = np.eye(4)
    matrix[:3, :3] = [
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ]
    return matrix


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection to a [-1, 1] depth range.

    ``fov_y`` is the vertical field of view in radians.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov_y / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must not be zero")
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = _vec3(eye)
    forward = _vec3(center) - eye_v
    forward /= np.linalg.norm(forward)
    side = np.cross(forward, _vec3(up))
    side /= np.linalg.norm(side)
    upward = np.cross(side, forward)

    matrix = np.eye(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -np.dot(side, eye_v)
    matrix[1, 3] = -np.dot(upward, eye_v)
    matrix[2, 3] = np.dot(forward, eye_v)
    return matrix


class Transform:
    """Position, Euler rotation (degrees) and scale with a cached model matrix."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        euler_angles: Sequence[float] = (0.0, 0.0, 0.0),
        scale: Sequence[float] = (1.0, 1.0, 1.0),
    ) -> None:
        self._position = _vec3(position)
        self._euler_angles = _vec3(euler_angles)
        self._scale = _vec3(scale)
        self._cached = np.eye(4)
        self._dirty = True

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _vec3(value)
        self._dirty = True

    @property
    def euler_angles(self) -> np.ndarray:
        return self._euler_angles.copy()

    @euler_angles.setter
    def euler_angles(self, value: Sequence[float]) -> None:
        self._euler_angles = _vec3(value)
        self._dirty = True

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value: Sequence[float]) -> None:
        self._scale = _vec3(value)
        self._dirty = True

    def model_matrix(self) -> np.ndarray:
        """Return translation * rotation * scale, recomputed only after a change."""
        if self._dirty:
            rotation = euler_rotation_matrix(np.radians(self._euler_angles))
            cached = translation_matrix(self._position) @ rotation @ scale_matrix(self._scale)
            cached.flags.writeable = False
            self._cached = cached
            self._dirty = False
        return self._cached

    def add_position(self, pos: Sequence[float]) -> None:
        self.position = self._position + _vec3(pos)

    def add_scale(self, s: Sequence[float]) -> None:
        self.scale = self._scale + _vec3(s)

    def set_position(self, pos: Sequence[float]) -> None:
        self.position = pos

    def set_scale(self, s: Sequence[float]) -> None:
        self.scale = s