"""Severity-tagged diagnostic messages written to standard error."""

from __future__ import annotations

import sys

__all__ = ["warn", "error", "info"]


def _emit(tag: str, msg: str) -> None:
    print(f"[{tag}] {msg}", file=sys.stderr)


def warn(msg: str) -> None:
    """Report a problem that needs attention but does not stop the program."""
    _emit("WARN", msg)


def error(msg: str) -> None:
    """Report a critical problem that keeps part of the program from working."""
    _emit("ERROR", msg)


def info(msg: str) -> None:
    """Report normal progress, such as a successful operation."""
    _emit("INFO", msg)