"""Surface materials and a library that loads them from a JSON file."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any

from .files import read_file
from .logger import info, warn
from .textures import Texture, TextureManager

__all__ = ["Material", "MaterialLibrary"]

Vec3 = tuple[float, float, float]


@dataclass
class Material:
    """Phong colours, shininess and optional diffuse/specular textures."""

    name: str = ""
    ambient: Vec3 = (0.0, 0.0, 0.0)
    diffuse: Vec3 = (0.0, 0.0, 0.0)
    specular: Vec3 = (0.0, 0.0, 0.0)
    shininess: float = 0.0
    diffuse_texture: Texture | None = None
    specular_texture: Texture | None = None


def _float_list(entry: dict[str, Any], key: str) -> list[float]:
    raw = entry.get(key, [])
    if not isinstance(raw, list):
        raise ValueError(f"material field {key!r} must be a list")
    return [float(value) for value in raw]


def _name_list(entry: dict[str, Any], key: str) -> list[str]:
    raw = entry.get(key, [])
    if not isinstance(raw, list) or not all(isinstance(value, str) for value in raw):
        raise ValueError(f"material field {key!r} must be a list of strings")
    return raw


class MaterialLibrary:
    """Materials by name; texture files are looked up under ``assets_dir``."""

    def __init__(self, assets_dir: str | os.PathLike[str] = "assets") -> None:
        self.assets_dir = os.fspath(assets_dir)
        self._materials: dict[str, Material] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._materials

    def __len__(self) -> int:
        return len(self._materials)

    def create_materials(
        self, file_path: str | os.PathLike[str], texture_manager: TextureManager
    ) -> bool:
        """Load every material of a JSON file; a name already known keeps its material.

        Returns False when the file is missing, empty or has no ``materials``
        list. Raises ValueError for malformed JSON or badly typed fields.
        """
        try:
            content = read_file(file_path)
        except OSError:
            return False
        if not content:
            warn("[MaterialLibrary.create_materials] content is empty!")
            return False

        parsed = json.loads(content)
        if not isinstance(parsed, dict) or not isinstance(parsed.get("materials"), list):
            warn("[MaterialLibrary.create_materials] Invalid material file structure!")
            return False

        for entry in parsed["materials"]:
            if not isinstance(entry, dict):
                raise ValueError("each material must be a JSON object")
            name = entry.get("name", "unnamed")
            ambient = _float_list(entry, "ambient")
            diffuse = _float_list(entry, "diffuse")
            specular = _float_list(entry, "specular")
            shininess = float(entry.get("shininess", 0.0))
            diffuse_names = _name_list(entry, "diffuseTexture")
            specular_names = _name_list(entry, "specularTexture")

            if len(ambient) != 3 or len(diffuse) != 3 or len(specular) != 3:
                warn(f'Material "{name}" has incorrect color vector sizes.')
                continue

            material = Material(
                name=name,
                ambient=(ambient[0], ambient[1], ambient[2]),
                diffuse=(diffuse[0], diffuse[1], diffuse[2]),
                specular=(specular[0], specular[1], specular[2]),
                shininess=shininess,
            )
            if diffuse_names:
                material.diffuse_texture = self._load_texture(diffuse_names[0], texture_manager)
            if specular_names:
                material.specular_texture = self._load_texture(specular_names[0], texture_manager)

            self._materials.setdefault(name, material)
        return True

    def _load_texture(self, tex_name: str, texture_manager: TextureManager) -> Texture | None:
        texture_manager.load(tex_name, os.path.join(self.assets_dir, tex_name))
        return texture_manager.get_by_name(tex_name)

    def get_material(self, name: str) -> Material:
        """Return the named material, or a fresh default one if there is none."""
        material = self._materials.get(name)
        if material is None:
            warn(f'Material "{name}" not found! but returning fallback')
            return self.default_material()
        return material

    @staticmethod
    def default_material() -> Material:
        """A new plain white material named ``default``."""
        fallback = Material(
            name="default",
            ambient=(0.1, 0.1, 0.1),
            diffuse=(1.0, 1.0, 1.0),
            specular=(1.0, 1.0, 1.0),
            shininess=8.0,
        )
        info("Default Material added!")
        return fallback