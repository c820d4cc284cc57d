"""Loading image files into textures and keeping them by name and path."""

from __future__ import annotations

import itertools
import os
from dataclasses import dataclass

import numpy as np
from PIL import Image

from .logger import warn

__all__ = ["Texture", "TextureManager"]

_CHANNELS_BY_MODE = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}
_FORMAT_BY_CHANNELS = {1: "RED", 3: "RGB", 4: "RGBA"}


@dataclass(eq=False)
class Texture:
    """A decoded texture; ``pixels`` rows run bottom to top."""

    name: str
    path: str
    gl_id: int = 0
    width: int = 0
    height: int = 0
    nr_channels: int = 0
    format: str = "RGB"
    pixels: np.ndarray | None = None


def _normalized(image: Image.Image) -> Image.Image:
    mode = image.mode
    if mode in _CHANNELS_BY_MODE:
        return image
    if mode in ("1", "I", "F") or mode.startswith("I;"):
        return image.convert("L")
    if "A" in mode or "transparency" in image.info:
        return image.convert("RGBA")
    return image.convert("RGB")


class TextureManager:
    """Decodes image files once per path and hands out texture ids."""

    def __init__(self) -> None:
        self._by_name: dict[str, Texture] = {}
        self._by_path: dict[str, Texture] = {}
        self._all: list[Texture] = []
        self._ids = itertools.count(1)
        self._bound: dict[int, int] = {}

    @property
    def bound(self) -> dict[int, int]:
        """Texture id bound to each slot."""
        return dict(self._bound)

    def load(
        self,
        name: str,
        file_path: str | os.PathLike[str],
        width: int = 2,
        height: int = 2,
        nr_channels: int = 0,
    ) -> int:
        """Load an image, flipped vertically, and return its texture id.

        A path loaded before returns its earlier id. ``width``, ``height`` and
        ``nr_channels`` are the expected size; the decoded image's own values
        replace them. Returns 0 when the file cannot be decoded.
        """
        path = os.fspath(file_path)
        existing = self._by_path.get(path)
        if existing is not None:
            return existing.gl_id

        gl_id = next(self._ids)
        try:
            with Image.open(path) as opened:
                image = _normalized(opened)
                image.load()
                array = np.asarray(image, dtype=np.uint8)
        except (OSError, ValueError):
            warn(f'Failed to load texture "{path}".')
            return 0

        if array.ndim == 2:
            array = array.reshape(array.shape[0], array.shape[1], 1)
        height, width, nr_channels = array.shape
        texture = Texture(
            name=name,
            path=path,
            gl_id=gl_id,
            width=width,
            height=height,
            nr_channels=nr_channels,
            format=_FORMAT_BY_CHANNELS.get(nr_channels, "RGB"),
            pixels=np.flipud(array).copy(),
        )
        self._by_name[name] = texture
        self._by_path[path] = texture
        self._all.append(texture)
        return gl_id

    def bind(self, tex_id: int, slot: int) -> None:
        """Make ``tex_id`` the texture of ``slot``."""
        self._bound[int(slot)] = int(tex_id)

    def get_by_name(self, name: str) -> Texture | None:
        texture = self._by_name.get(name)
        if texture is None:
            warn(f'Texture "{name}" not found.')
        return texture

    def get_by_path(self, path: str | os.PathLike[str]) -> Texture | None:
        shown = os.fspath(path)
        texture = self._by_path.get(shown)
        if texture is None:
            warn(f'Texture "{shown}" not found.')
        return texture

    def all_textures(self) -> list[Texture]:
        if not self._all:
            warn("No textures found.")
        return list(self._all)