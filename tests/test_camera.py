import numpy as np
import pytest

from throwengine.camera import Camera
from throwengine.transform import look_at


def test_initial_state_looks_down_negative_z():
    cam = Camera()
    assert not cam.dirty
    assert cam.yaw == -90.0
    assert cam.pitch == 0.0
    np.testing.assert_allclose(cam.position, [0.0, 0.0, 5.0])
    np.testing.assert_allclose(cam.front, [0.0, 0.0, -1.0], atol=1e-12)


def test_view_matrix_matches_look_at():
    cam = Camera()
    expected = look_at(cam.position, cam.position + cam.front, cam.up)
    np.testing.assert_allclose(cam.view_matrix, expected)


def test_projection_uses_whole_number_aspect():
    cam = Camera()
    assert cam.aspect == 1.0
    proj = cam.projection_matrix
    assert proj[0, 0] == pytest.approx(proj[1, 1])
    assert proj[3, 2] == -1.0


def test_vectors_are_orthonormal_after_turning():
    cam = Camera()
    cam.set_yaw(37.0)
    cam.set_pitch(21.0)
    cam.update()
    assert np.linalg.norm(cam.front) == pytest.approx(1.0)
    assert np.dot(cam.front, cam.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.front, cam.up) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.right, cam.world_up) == pytest.approx(0.0, abs=1e-12)


def test_set_yaw_accumulates_and_marks_dirty():
    cam = Camera()
    cam.set_yaw(10.0)
    cam.set_yaw(5.0)
    assert cam.dirty
    assert cam.yaw == pytest.approx(-75.0)
    cam.update()
    assert not cam.dirty


def test_update_does_nothing_when_clean():
    cam = Camera()
    before = cam.view_matrix
    cam.set_position([1.0, 2.0, 3.0])
    cam.dirty = False
    cam.update()
    np.testing.assert_allclose(cam.view_matrix, before)


def test_steep_pitch_uses_world_up_for_view():
    cam = Camera()
    cam.set_pitch(89.0)
    expected = look_at(cam.position, cam.position + cam.front, cam.world_up)
    np.testing.assert_allclose(cam.view_matrix, expected)
    assert cam.pitch == 89.0


def test_move_along_front():
    cam = Camera()
    start = cam.position
    cam.move(2.0, cam.front)
    assert cam.dirty
    np.testing.assert_allclose(cam.position, start + 2.0 * cam.front)


def test_strafe_moves_sideways():
    cam = Camera()
    cam.strafe(2.0, [0.0, 0.0, -1.0], [0.0, 1.0, 0.0])
    np.testing.assert_allclose(cam.position, [2.0, 0.0, 5.0])


def test_set_position_and_update_changes_view_translation():
    cam = Camera()
    cam.set_position([0.0, 0.0, 9.0])
    cam.update()
    point = cam.view_matrix @ np.array([0.0, 0.0, 9.0, 1.0])
    np.testing.assert_allclose(point[:3], [0.0, 0.0, 0.0], atol=1e-12)


def test_front_setter_and_bad_vector():
    cam = Camera()
    cam.front = (1.0, 0.0, 0.0)
    np.testing.assert_allclose(cam.front, [1.0, 0.0, 0.0])
    with pytest.raises(ValueError):
        cam.set_position([1.0, 2.0])