[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "throwengine"
version = "0.1.0"
description = "A small 3D scene engine core: transforms, meshes, camera, grid, lighting, textures, materials, shader uniforms and a scene with recyclable slots."
requires-python = ">=3.10"
keywords = ["3d", "rendering", "scene", "mesh", "camera", "lighting", "material", "ecs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["throwengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
