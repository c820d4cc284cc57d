"""Core of a small 3D scene engine: matrices, meshes, camera, grid, lights, materials, shader uniforms and scenes."""

__version__ = "0.1.0"