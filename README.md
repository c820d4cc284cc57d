# throwengine

The core of a small 3D scene engine in Python. It keeps the state a renderer works with (geometry, transforms, camera, lights, materials, textures, shader uniforms and the objects of a scene) and computes the matrices and values that a frame needs. It needs only numpy and Pillow.

## What is in it

- `throwengine.transform`: `translation_matrix`, `scale_matrix`, `euler_rotation_matrix`, `perspective` and `look_at` build 4x4 numpy matrices. `Transform` holds a position, Euler angles in degrees and a scale. It has `set_position`, `add_position`, `set_scale` and `add_scale`. `model_matrix()` returns translation · rotation · scale and recomputes it only after a change.
- `throwengine.raymath`: `screen_to_world_ray` turns a pixel into a normalised world-space direction. `ray_intersects_aabb` returns the entry distance of a ray into a box, or `None` when the ray misses.
- `throwengine.mesh`: `Vertex`, `SubMeshInfo`, `MeshData` and `MeshData3D`. `MeshData3D` packs several meshes into shared vertex and index lists. `add_named_mesh` offsets the indices of each new mesh, and `object_info(name)` looks a mesh up. `SubMesh.draw()` returns the indices that one sub-mesh covers.
- `throwengine.mesh_factory`: `create_triangle`, `create_square`, `create_cube`, `create_circle` (30 segments) and `create_sphere` (32×32). `MeshFactory().create(name)` builds one by name and raises `KeyError` for an unknown name.
- `throwengine.camera`: `Camera` is a yaw/pitch fly camera with angles in degrees. It has `set_yaw`, `set_pitch`, `move`, `strafe` and `set_position`. `update()` rebuilds the view and projection matrices only when the camera is dirty, using a 60° field of view and near/far planes of 0.3/100.
- `throwengine.grid`: `GridData` generates the line vertices of a ground grid centred on the origin, 300×300 tiles by default. Every 10th line is a major line, and the two centre axes are highlighted. `GridRenderer` uploads the grid uniforms to a shader's program. `GridSystem` owns both.
- `throwengine.world`: `World` hands out entity ids and keeps a `ComponentStorage` per component type. The component types are `TransformComponent`, `MeshComponent`, `MaterialComponent`, `LightComponent` and `CameraComponent`.
- `throwengine.lighting`: `LightType`, `LightData`, `Light` and `LightManager`. `LightData.direction` points towards the origin. `LightManager` keeps lights in reusable slots by name and uploads them as `lights[i].position/direction/diffuse/specular` plus `activeLightCount`.
- `throwengine.textures`: `TextureManager.load` decodes an image with Pillow and flips it vertically. It returns a texture id and gives the same id for a path loaded before. It returns 0 when the file cannot be decoded. `bind(tex_id, slot)` records the texture of a slot.
- `throwengine.material`: `Material` and `MaterialLibrary`. `create_materials(path, texture_manager)` reads a JSON file shaped like `{"materials": [{"name": ..., "ambient": [r, g, b], "diffuse": [...], "specular": [...], "shininess": ..., "diffuseTexture": ["file.png"], "specularTexture": [...]}]}`. Texture files are looked up under `assets_dir`. `get_material` returns a fresh `default_material()` for an unknown name.
- `throwengine.shader_program`: `ShaderProgram` takes vertex and fragment GLSL source. It checks that each stage has a `main` and finds the active uniforms, expanding uniform structs and arrays. It stores the values given to `set_bool`, `set_int`, `set_uint`, `set_float`, `set_vec2/3/4`, `set_mat2/3/4` and `set_mvp`. `has_uniform` requires the program to be bound.
- `throwengine.shaders`: `ShaderType`, the abstract `Shader`, `BasicShader` (material, `model`/`view`/`projection`, `viewPos`) and `GridShader` (`uModel`/`uView`/`uProjection`).
- `throwengine.shader_manager`: `ShaderManager.load_all_shaders()` reads a config such as `{"shaders": [{"name": "basic", "type": "basic", "stages": {"vertex": "a.vert", "fragment": "a.frag"}, "helper": true}]}`. When the config cannot be read it falls back to `opengl/basic.vert` and `opengl/basic.frag`. `get_shader` returns a shared basic fallback for unknown names. The module also has `shader_type_of` and `shader_name_of`.
- `throwengine.scene_object`: `SceneObject` combines a mesh, a `Transform`, its own copy of a material and a basic shader. `draw()` validates the render state, uploads ambient light, lights, material and matrices, and then draws the mesh.
- `throwengine.scene`: `Scene` gives objects ids and slots and recycles both when objects are destroyed, the last freed being reused first. `mark_to_be_deleted` defers destruction to the end of `draw_all_objects`. The module also provides `InputContext` and the abstract `InputComponent`.
- `throwengine.render_data`: `RenderData` holds the shader manager, camera, texture manager, material library, light manager, grid renderer, view/projection matrices and global ambient (0.1). `update()` copies the camera matrices.
- `throwengine.renderer`: `Renderer.draw(scene, view, projection)` runs the scene's input components and then draws all of its objects.
- `throwengine.factory`: `SceneObjectFactory` loads the base meshes. `create_cube` and `create_sphere` add objects, scaled by 7.5 and 3.5, to a scene. `create_point_light`, `create_directional_light` and `create_spot_light` add a sphere together with a light. `generate_name("cube")` gives `cube_1`, `cube_2`, …
- `throwengine.logger`: `info`, `warn` and `error` write `[INFO]`, `[WARN]` and `[ERROR]` lines to standard error. `throwengine.files` provides `read_file` and `exists`.

## Install

```
pip install throwengine
```

## Example

```python
import numpy as np
from throwengine.transform import Transform
from throwengine.mesh import MeshData3D
from throwengine.mesh_factory import MeshFactory
from throwengine.raymath import ray_intersects_aabb
from throwengine.shader_program import ShaderProgram

t = Transform()
t.set_position((1.0, 2.0, 3.0))
t.set_scale((2.0, 2.0, 2.0))
model = t.model_matrix()

data = MeshData3D()
vertices, indices = MeshFactory().create("cube")
info = data.add_named_mesh("cube", vertices, indices)
print(info.vertex_count, info.index_count)  # 24 36

hit = ray_intersects_aabb(
    np.array([0.0, 0.0, -5.0]), np.array([0.0, 0.0, 1.0]),
    np.array([-1.0, -1.0, -1.0]), np.array([1.0, 1.0, 1.0]),
)
print(hit)  # 4.0

program = ShaderProgram("uniform mat4 model; void main() {}", "void main() {}")
program.bind()
print(program.has_uniform("model"))  # True
program.set_mat4("model", model)
```

## What it does not do

- It opens no window and talks to no graphics driver. `ShaderProgram` checks and records uniform values but compiles nothing for a GPU. Drawing means uploading values and returning what would be drawn: index tuples, vertex counts and booleans.
- It reads no keyboard or mouse. `InputComponent` is only the interface a scene calls once per frame.
- It has no editor interface and no command to run. It is a library to import.

## Tests

```
pip install "throwengine[test]"
pytest
```