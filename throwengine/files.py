"""Reading whole files and checking that files can be opened."""

from __future__ import annotations

import os

from .logger import error

__all__ = ["read_file", "exists"]


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a text file, line endings untouched.

    Raises OSError (usually FileNotFoundError) when the file cannot be opened
    and UnicodeDecodeError when its content is not UTF-8.
    """
    shown = os.fspath(path)
    try:
        handle = open(path, encoding="utf-8", newline="")
    except OSError:
        error(f"File not found: {shown}")
        raise
    with handle:
        try:
            return handle.read()
        except (OSError, UnicodeDecodeError):
            error(f"Error reading file: {shown}")
            raise


def exists(path: str | os.PathLike[str]) -> bool:
    """Tell whether the file at ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False