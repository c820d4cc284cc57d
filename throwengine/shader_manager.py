"""Loading shader programs from a JSON configuration and looking them up by name."""

from __future__ import annotations

import json
import os
from typing import Any, Mapping

from .files import read_file
from .logger import error, info, warn
from .shader_program import ShaderProgram
from .shaders import BasicShader, GridShader, Shader, ShaderType

__all__ = ["ShaderManager", "shader_type_of", "shader_name_of"]

_FALLBACK_VERTEX = os.path.join("opengl", "basic.vert")
_FALLBACK_FRAGMENT = os.path.join("opengl", "basic.frag")


def shader_type_of(config: Mapping[str, Any]) -> ShaderType:
    """Return GRID for a ``"type": "grid"`` entry and BASIC for anything else."""
    if config.get("type", "GLSL") == "grid":
        return ShaderType.GRID
    return ShaderType.BASIC


def shader_name_of(config: Mapping[str, Any]) -> str:
    """Return the entry's name, ``basic`` when it has none."""
    return config.get("name", "basic")


def _read_sources(directory: str) -> tuple[str, str]:
    return (
        read_file(os.path.join(directory, _FALLBACK_VERTEX)),
        read_file(os.path.join(directory, _FALLBACK_FRAGMENT)),
    )


class ShaderManager:
    """Shaders by name, plus the helper program other parts of the engine share.

    Stage paths in the configuration are relative to ``shaders_dir``. The
    fallback shader is read from ``opengl/basic.vert`` and ``opengl/basic.frag``
    under ``fallback_dir``, which defaults to ``shaders_dir``.
    """

    def __init__(
        self,
        config_path: str | os.PathLike[str] = os.path.join("shaders", "config", "shaders.json"),
        shaders_dir: str | os.PathLike[str] = "shaders",
        fallback_dir: str | os.PathLike[str] | None = None,
    ) -> None:
        self.config_path = os.fspath(config_path)
        self.shaders_dir = os.fspath(shaders_dir)
        self.fallback_dir = os.fspath(fallback_dir) if fallback_dir is not None else self.shaders_dir
        self._shaders: dict[str, Shader] = {}
        self.wrapper_program: ShaderProgram | None = None
        self._missing_fallback: Shader | None = None

    def __contains__(self, name: object) -> bool:
        return name in self._shaders

    def load_all_shaders(self) -> bool:
        """Load every shader of the configuration; use the fallback if it cannot be read."""
        info(f"Loading shaders from config: {self.config_path}")
        try:
            config = json.loads(read_file(self.config_path))
            if not isinstance(config, dict) or "shaders" not in config:
                raise ValueError("Missing 'shaders' array in config")
            for entry in config["shaders"]:
                name = entry.get("name", "unnamed")
                vertex_path = fragment_path = ""
                if "stages" in entry:
                    stages = entry["stages"]
                    vertex_path = stages.get("vertex", "unnamed")
                    fragment_path = stages.get("fragment", "unnamed")
                else:
                    error("[ShaderManager.load_all_shaders] missing 'stages' in shaders config!")
                is_helper = bool(entry.get("helper", False))
                if not self.load_shader(
                    name, vertex_path, fragment_path, is_helper, shader_type_of(entry)
                ):
                    error(f"Failed to load shader: {name}")
            return True
        except (OSError, ValueError, TypeError, AttributeError):
            error("Failed to load shader config, using fallback")
            return self.create_fallback_shader()

    def load_shader(
        self,
        name: str,
        vert_path: str,
        frag_path: str,
        is_helper: bool,
        shader_type: ShaderType = ShaderType.BASIC,
    ) -> bool:
        """Build a shader from two stage files; False when a file cannot be read."""
        try:
            vertex_source = read_file(os.path.join(self.shaders_dir, vert_path))
            fragment_source = read_file(os.path.join(self.shaders_dir, frag_path))
        except (OSError, UnicodeDecodeError) as exc:
            error(f"Failed to load shader {name}: {exc}")
            return False

        program = ShaderProgram(vertex_source, fragment_source)
        if is_helper:
            self.wrapper_program = program
            info(f"[ShaderManager] Set helper shader: {name}")

        shader: Shader
        if shader_type is ShaderType.GRID:
            shader = GridShader(program)
        else:
            shader = BasicShader(program)
        self.add_shader(name, shader)
        return True

    def create_fallback_shader(self) -> bool:
        """Register a basic shader named ``fallback`` and make it the helper program."""
        info(
            "Attempting fallback shader at:\n  "
            + os.path.join(self.fallback_dir, _FALLBACK_VERTEX)
            + "\n  "
            + os.path.join(self.fallback_dir, _FALLBACK_FRAGMENT)
        )
        try:
            vertex_source, fragment_source = _read_sources(self.fallback_dir)
        except (OSError, UnicodeDecodeError) as exc:
            error(f"CRITICAL: Failed to create fallback shader: {exc}")
            return False
        program = ShaderProgram(vertex_source, fragment_source)
        self.add_shader("fallback", BasicShader(program))
        self.wrapper_program = program
        return True

    def add_shader(self, name: str, shader: Shader) -> bool:
        """Register ``shader``; a name already taken keeps its shader and False is returned."""
        if name in self._shaders:
            info(f"Shader interface '{name}' already exists. Skipping addition.")
            return False
        self._shaders[name] = shader
        info(f"Shader interface '{name}' added successfully.")
        return True

    def get_shader(self, name: str) -> Shader:
        """Return the named shader, or a shared basic fallback when it is unknown."""
        if not self._shaders:
            warn("no shaders are loaded!")
        shader = self._shaders.get(name)
        if shader is not None:
            return shader
        error(f"Shader interface '{name}' not found!")
        if self._missing_fallback is None:
            try:
                vertex_source, fragment_source = _read_sources(self.shaders_dir)
            except (OSError, UnicodeDecodeError):
                vertex_source = fragment_source = ""
            program = ShaderProgram(vertex_source, fragment_source)
            self.wrapper_program = program
            self._missing_fallback = BasicShader(program)
        return self._missing_fallback

    def all_shaders(self) -> list[Shader]:
        shaders = list(self._shaders.values())
        if not shaders:
            warn("No shader interfaces loaded!")
        return shaders