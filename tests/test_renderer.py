from types import SimpleNamespace

import numpy as np

from throwengine.renderer import Renderer
from throwengine.scene import InputComponent, Scene


class _Drawable:
    def __init__(self, name):
        self.name = name
        self.id = None
        self.frames = []

    def draw(self, view, projection, render_data):
        self.frames.append((view, projection, render_data))


class _Recorder(InputComponent):
    def __init__(self):
        self.count = 0

    def process_input(self, scene):
        self.count += 1


def _scene():
    scene = Scene()
    obj = _Drawable("a")
    scene.add_object(obj)
    recorder = _Recorder()
    scene.add_input_component(recorder)
    return scene, obj, recorder


def test_draw_runs_input_and_draws_objects():
    scene, obj, recorder = _scene()
    render_data = SimpleNamespace()
    view = np.eye(4)
    projection = np.eye(4) * 2
    assert Renderer(render_data).draw(scene, view, projection) is True
    assert recorder.count == 1
    assert len(obj.frames) == 1
    drawn_view, drawn_projection, drawn_data = obj.frames[0]
    assert drawn_data is render_data
    np.testing.assert_allclose(drawn_projection, projection)


def test_draw_applies_pending_deletions():
    scene, obj, _ = _scene()
    scene.mark_to_be_deleted("a")
    assert Renderer(SimpleNamespace()).draw(scene, np.eye(4), np.eye(4)) is True
    assert scene.objects == [None]


def test_draw_without_render_data():
    scene, obj, recorder = _scene()
    assert Renderer(None).draw(scene, np.eye(4), np.eye(4)) is False
    assert recorder.count == 0
    assert obj.frames == []


def test_draw_without_scene():
    assert Renderer(SimpleNamespace()).draw(None, np.eye(4), np.eye(4)) is False