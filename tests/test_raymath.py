import numpy as np
import pytest

from throwengine.raymath import ray_intersects_aabb, screen_to_world_ray
from throwengine.transform import look_at, perspective


def test_center_ray_with_identity_matrices():
    ray = screen_to_world_ray(50.0, 50.0, 100, 100, np.eye(4), np.eye(4))
    assert np.allclose(ray, [0.0, 0.0, -1.0])


def test_center_ray_through_camera_looks_forward():
    view = look_at((0.0, 0.0, 5.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    projection = perspective(np.radians(60.0), 1280 / 720, 0.3, 100.0)
    ray = screen_to_world_ray(640.0, 360.0, 1280, 720, view, projection)
    assert np.allclose(ray, [0.0, 0.0, -1.0])


@pytest.mark.parametrize("mouse", [(0.0, 0.0), (1279.0, 0.0), (300.0, 700.0)])
def test_ray_is_unit_length(mouse):
    view = look_at((1.0, 2.0, 5.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    projection = perspective(np.radians(60.0), 1280 / 720, 0.3, 100.0)
    ray = screen_to_world_ray(mouse[0], mouse[1], 1280, 720, view, projection)
    assert np.linalg.norm(ray) == pytest.approx(1.0)


def test_left_of_screen_points_left():
    projection = perspective(np.radians(60.0), 1.0, 0.3, 100.0)
    ray = screen_to_world_ray(0.0, 50.0, 100, 100, np.eye(4), projection)
    assert ray[0] < 0.0
    assert ray[2] < 0.0


def test_hit_from_front():
    t = ray_intersects_aabb((0.0, 0.0, 5.0), (0.0, 0.0, -1.0), (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
    assert t == pytest.approx(4.0)
    hit = np.array([0.0, 0.0, 5.0]) + t * np.array([0.0, 0.0, -1.0])
    assert hit[2] == pytest.approx(1.0)


def test_miss_beside_box():
    result = ray_intersects_aabb((2.0, 0.0, 5.0), (0.0, 0.0, -1.0), (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
    assert result is None


def test_diagonal_miss():
    result = ray_intersects_aabb((0.0, 0.0, 5.0), (1.0, 1.0, 0.0), (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
    assert result is None


def test_box_behind_gives_negative_distance():
    t = ray_intersects_aabb((0.0, 0.0, 5.0), (0.0, 0.0, 1.0), (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))
    assert t is not None
    assert t < 0.0


def test_bad_vector_shape():
    with pytest.raises(ValueError):
        ray_intersects_aabb((0.0, 0.0), (0.0, 0.0, 1.0), (-1.0, -1.0, -1.0), (1.0, 1.0, 1.0))