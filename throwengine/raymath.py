"""Mouse picking helpers: screen-space rays and ray/box intersection."""

from __future__ import annotations

from typing import Sequence

import numpy as np

__all__ = ["screen_to_world_ray", "ray_intersects_aabb"]


def _vec3(value: Sequence[float]) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def screen_to_world_ray(
    mouse_x: float,
    mouse_y: float,
    screen_width: int,
    screen_height: int,
    view,
    projection,
) -> np.ndarray:
    """Return the normalised world-space direction through a screen pixel."""
    x = (2.0 * mouse_x) / screen_width - 1.0
    y = 1.0 - (2.0 * mouse_y) / screen_height
    ray_clip = np.array([x, y, -1.0, 1.0])

    ray_eye = np.linalg.inv(np.asarray(projection, dtype=float)) @ ray_clip
    ray_eye = np.array([ray_eye[0], ray_eye[1], -1.0, 0.0])

    ray_world = (np.linalg.inv(np.asarray(view, dtype=float)) @ ray_eye)[:3]
    return ray_world / np.linalg.norm(ray_world)


def _ordered(a: float, b: float) -> tuple[float, float]:
    return (b, a) if a > b else (a, b)


def ray_intersects_aabb(ray_origin, ray_dir, aabb_min, aabb_max) -> float | None:
    """Slab test of a ray against an axis-aligned box.

    Returns the entry distance along the ray, or None when the ray misses.
    Zero direction components are handled as infinite slab distances.
    """
    origin = _vec3(ray_origin)
    direction = _vec3(ray_dir)
    low = _vec3(aabb_min)
    high = _vec3(aabb_max)

    with np.errstate(divide="ignore", invalid="ignore"):
        near = (low - origin) / direction
        far = (high - origin) / direction

    t_min, t_max = _ordered(float(near[0]), float(far[0]))
    for axis in (1, 2):
        axis_min, axis_max = _ordered(float(near[axis]), float(far[axis]))
        if t_min > axis_max or axis_min > t_max:
            return None
        if axis_min > t_min:
            t_min = axis_min
        if axis_max < t_max:
            t_max = axis_max
    return t_min