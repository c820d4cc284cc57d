import json
from types import SimpleNamespace

import numpy as np
import pytest

from throwengine.camera import Camera
from throwengine.lighting import LightManager
from throwengine.material import MaterialLibrary
from throwengine.mesh import MeshData3D, SubMesh
from throwengine.mesh_factory import create_cube
from throwengine.scene_object import SceneObject
from throwengine.shader_program import ShaderProgram
from throwengine.shaders import BasicShader, GridShader
from throwengine.textures import Texture, TextureManager

VERTEX = "uniform mat4 model;\nuniform mat4 view;\nuniform mat4 projection;\nvoid main() {}\n"
FRAGMENT = (
    "struct Material { vec3 ambient; vec3 diffuse; vec3 specular; float shininess; };\n"
    "uniform Material material;\n"
    "uniform vec3 viewPos;\n"
    "uniform vec3 globalAmbient;\n"
    "void main() {}\n"
)


class _CountingMesh:
    def __init__(self):
        self.draws = 0

    def draw(self):
        self.draws += 1


def _render_data(**overrides):
    values = dict(
        light_manager=LightManager(),
        material_library=MaterialLibrary(),
        texture_manager=TextureManager(),
        camera=Camera(),
        global_ambient=np.array([0.1, 0.1, 0.1]),
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def _ready_object(mesh=None):
    obj = SceneObject(mesh if mesh is not None else _CountingMesh(), "gold")
    obj.name = "cube_1"
    obj.set_shader(BasicShader(ShaderProgram(VERTEX, FRAGMENT)))
    obj.material = MaterialLibrary.default_material()
    return obj


def test_mark_for_deletion():
    obj = SceneObject(_CountingMesh(), "gold")
    assert obj.marked_for_deletion is False
    assert obj.id is None
    obj.mark_for_deletion()
    assert obj.marked_for_deletion is True


def test_set_shader_accepts_basic_only():
    obj = SceneObject(_CountingMesh(), "gold")
    basic = BasicShader(ShaderProgram(VERTEX, FRAGMENT))
    assert obj.set_shader(GridShader(ShaderProgram(VERTEX, FRAGMENT))) is False
    assert obj.shader is None
    assert obj.set_shader(None) is False
    assert obj.set_shader(basic) is True
    assert obj.shader is basic


def test_validate_fails_without_shader():
    obj = SceneObject(_CountingMesh(), "gold")
    obj.material = MaterialLibrary.default_material()
    assert obj.validate_render_state(_render_data()) is False


def test_validate_fails_without_program():
    obj = _ready_object()
    obj.set_shader(BasicShader(None))
    assert obj.validate_render_state(_render_data()) is True
    obj2 = SceneObject(_CountingMesh(), "gold")
    obj2.set_shader(BasicShader(None))
    obj2.material = MaterialLibrary.default_material()
    assert obj2.validate_render_state(_render_data()) is False


@pytest.mark.parametrize("missing", ["light_manager", "texture_manager", "camera"])
def test_validate_fails_without_part(missing):
    obj = _ready_object()
    assert obj.validate_render_state(_render_data(**{missing: None})) is False


def test_validate_assigns_default_material():
    obj = _ready_object()
    obj.material = None
    assert obj.validate_render_state(_render_data()) is False
    assert obj.material.name == "default"


def test_initialize_material_copies(tmp_path):
    path = tmp_path / "materials.json"
    path.write_text(
        json.dumps(
            {
                "materials": [
                    {
                        "name": "gold",
                        "ambient": [0.24, 0.19, 0.07],
                        "diffuse": [0.75, 0.6, 0.22],
                        "specular": [0.62, 0.55, 0.36],
                        "shininess": 51.2,
                    }
                ]
            }
        )
    )
    library = MaterialLibrary(tmp_path)
    assert library.create_materials(path, TextureManager()) is True
    obj = SceneObject(_CountingMesh(), "gold")
    obj.initialize_material(library)
    base = library.get_material("gold")
    assert obj.material == base
    assert obj.material is not base
    obj.material.shininess = 1.0
    assert library.get_material("gold").shininess == 51.2


def test_initialize_unknown_material_gives_default():
    obj = SceneObject(_CountingMesh(), "nothing")
    obj.initialize_material(MaterialLibrary())
    assert obj.material.name == "default"


def test_draw_uploads_uniforms_and_draws_mesh():
    mesh = _CountingMesh()
    obj = _ready_object(mesh)
    obj.transform.set_position((1.0, 2.0, 3.0))
    render_data = _render_data()
    view = np.eye(4)
    projection = render_data.camera.projection_matrix
    assert obj.draw(view, projection, render_data) is True
    assert mesh.draws == 1
    program = obj.shader.program
    np.testing.assert_allclose(program.uniform_value("model"), obj.transform.model_matrix())
    np.testing.assert_allclose(program.uniform_value("projection"), projection)
    np.testing.assert_allclose(program.uniform_value("viewPos"), render_data.camera.position)
    np.testing.assert_allclose(program.uniform_value("globalAmbient"), render_data.global_ambient)
    assert program.uniform_value("material.shininess") == obj.material.shininess
    assert obj.shader.render_data is render_data


def test_draw_with_real_sub_mesh():
    data = MeshData3D()
    vertices, indices = create_cube()
    info = data.add_named_mesh("cube", vertices, indices)
    obj = _ready_object(SubMesh(data, info))
    assert obj.draw(np.eye(4), np.eye(4), _render_data()) is True


def test_draw_binds_textures():
    obj = _ready_object()
    obj.material.diffuse_texture = Texture("d", "d.png", gl_id=7)
    obj.material.specular_texture = Texture("s", "s.png", gl_id=9)
    render_data = _render_data()
    obj.draw(np.eye(4), np.eye(4), render_data)
    assert render_data.texture_manager.bound == {0: 7, 1: 9}


def test_draw_skipped_when_invalid():
    mesh = _CountingMesh()
    obj = _ready_object(mesh)
    assert obj.draw(np.eye(4), np.eye(4), _render_data(camera=None)) is False
    assert mesh.draws == 0