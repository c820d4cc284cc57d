"""A GLSL program stand-in: stage checks, uniform discovery and uniform values."""

from __future__ import annotations

import itertools
import re
from typing import Any, ClassVar, Sequence

import numpy as np

from .logger import error, warn

__all__ = ["ShaderProgram"]

_COMMENT_RE = re.compile(r"//[^\n]*|/\*.*?\*/", re.S)
_DEFINE_RE = re.compile(r"^\s*#\s*define\s+(\w+)\s+(\d+)\s*$", re.M)
_CONST_RE = re.compile(r"\bconst\s+(?:u?int)\s+(\w+)\s*=\s*(\d+)\s*;")
_STRUCT_RE = re.compile(r"\bstruct\s+(\w+)\s*\{([^}]*)\}\s*;", re.S)
_UNIFORM_RE = re.compile(r"\buniform\s+([^;{]+);")
_MAIN_RE = re.compile(r"\bvoid\s+main\s*\(")
_DECL_RE = re.compile(r"^(?:(?:highp|mediump|lowp)\s+)?(\w+)\s+(.+)$", re.S)
_DECLARATOR_RE = re.compile(r"^(\w+)\s*(?:\[\s*(\w+)\s*\])?$")
_LAYOUT_RE = re.compile(r"\blayout\s*\([^)]*\)")

_ids = itertools.count(1)


class _ParseError(ValueError):
    pass


def _strip_comments(source: str) -> str:
    return _COMMENT_RE.sub("", source)


def _declarations(text: str, constants: dict[str, int]) -> list[tuple[str, str, int | None]]:
    """Split ``type a, b[N]`` into (type, name, array size) triples."""
    match = _DECL_RE.match(_LAYOUT_RE.sub("", text).strip())
    if match is None:
        raise _ParseError(f"cannot read declaration {text.strip()!r}")
    glsl_type, rest = match.groups()
    result = []
    for part in rest.split(","):
        declarator = _DECLARATOR_RE.match(part.strip())
        if declarator is None:
            raise _ParseError(f"cannot read declarator {part.strip()!r}")
        name, size_text = declarator.groups()
        size: int | None = None
        if size_text is not None:
            if size_text.isdigit():
                size = int(size_text)
            elif size_text in constants:
                size = constants[size_text]
            else:
                raise _ParseError(f"unknown array size {size_text!r}")
        result.append((glsl_type, name, size))
    return result


def _expand(
    name: str,
    glsl_type: str,
    size: int | None,
    structs: dict[str, list[tuple[str, str, int | None]]],
    out: set[str],
) -> None:
    bases = [name] if size is None else [f"{name}[{i}]" for i in range(size)]
    if size is not None and glsl_type not in structs:
        out.add(name)
    for base in bases:
        if glsl_type in structs:
            for field_type, field_name, field_size in structs[glsl_type]:
                _expand(f"{base}.{field_name}", field_type, field_size, structs, out)
        else:
            out.add(base)


def _uniform_names(sources: Sequence[str]) -> set[str]:
    constants: dict[str, int] = {}
    structs: dict[str, list[tuple[str, str, int | None]]] = {}
    cleaned = [_strip_comments(source) for source in sources]
    for text in cleaned:
        for regex in (_DEFINE_RE, _CONST_RE):
            for key, value in regex.findall(text):
                constants[key] = int(value)
    for text in cleaned:
        for struct_name, body in _STRUCT_RE.findall(text):
            fields: list[tuple[str, str, int | None]] = []
            for member in body.split(";"):
                if member.strip():
                    fields.extend(_declarations(member, constants))
            structs[struct_name] = fields
    names: set[str] = set()
    for text in cleaned:
        for declaration in _UNIFORM_RE.findall(text):
            for glsl_type, name, size in _declarations(declaration, constants):
                _expand(name, glsl_type, size, structs, names)
    return names


def _array(value: Any, shape: tuple[int, ...]) -> np.ndarray:
    array = np.array(value, dtype=float)
    if array.shape != shape:
        raise ValueError(f"expected shape {shape}, got {array.shape}")
    return array


class ShaderProgram:
    """A linked vertex/fragment pair whose uniforms can be queried and set.

    Stages must hold a ``void main(`` entry point; otherwise the program is
    invalid and exposes no uniforms. Only one program is bound at a time.
    """

    _current: ClassVar["ShaderProgram | None"] = None

    def __init__(self, vertex_source: str, fragment_source: str) -> None:
        self.vertex_source = vertex_source
        self.fragment_source = fragment_source
        self.program_id = next(_ids)
        self._values: dict[str, Any] = {}
        self._uniforms: set[str] = set()
        self.valid = self._link()
        if not self.valid:
            error("Shader program creation failed - using fallback shader")

    def _link(self) -> bool:
        for stage, source in (("vertex", self.vertex_source), ("fragment", self.fragment_source)):
            if not source or not _MAIN_RE.search(_strip_comments(source)):
                error(f"[ShaderProgram] Shader compilation error ({stage}): no main function")
                return False
        try:
            self._uniforms = _uniform_names((self.vertex_source, self.fragment_source))
        except _ParseError as exc:
            error(f"[ShaderProgram] Program linking error: {exc}")
            self._uniforms = set()
            return False
        return True

    @classmethod
    def current(cls) -> "ShaderProgram | None":
        """The program bound at the moment, if any."""
        return cls._current

    @property
    def uniforms(self) -> list[str]:
        """All active uniform names, sorted."""
        return sorted(self._uniforms)

    def uniform_value(self, name: str) -> Any:
        """Return the last value set for ``name``; KeyError if none was set."""
        value = self._values[name]
        return value.copy() if isinstance(value, np.ndarray) else value

    def bind(self) -> None:
        if not self.valid:
            warn("[ShaderProgram] shader is not valid!")
        ShaderProgram._current = self

    def unbind(self) -> None:
        ShaderProgram._current = None

    def has_uniform(self, name: str) -> bool:
        """Tell whether ``name`` is an active uniform; the program must be bound."""
        current = ShaderProgram._current
        if current is not self:
            shown = current.program_id if current is not None else 0
            error(
                f"Shader not bound when checking uniform: {name}"
                f" | expected: {self.program_id} | current: {shown}"
            )
            return False
        return name in self._uniforms

    def _store(self, name: str, value: Any, report: bool) -> bool:
        if name not in self._uniforms:
            if report:
                warn(f"[Warning] uniform '{name}' not found or optimized out!")
            return False
        self._values[name] = value
        return True

    def set_bool(self, name: str, value: bool) -> bool:
        return self._store(name, bool(value), True)

    def set_uint(self, name: str, value: int) -> bool:
        number = int(value)
        if number < 0:
            raise ValueError(f"unsigned uniform {name!r} cannot be negative")
        return self._store(name, number, True)

    def set_int(self, name: str, value: int) -> bool:
        return self._store(name, int(value), True)

    def set_float(self, name: str, value: float) -> bool:
        return self._store(name, float(value), True)

    def set_vec2(self, name: str, value: Sequence[float]) -> bool:
        return self._store(name, _array(value, (2,)), False)

    def set_vec3(self, name: str, value: Sequence[float]) -> bool:
        return self._store(name, _array(value, (3,)), True)

    def set_vec4(self, name: str, value: Sequence[float]) -> bool:
        return self._store(name, _array(value, (4,)), False)

    def set_mat2(self, name: str, value: Any) -> bool:
        return self._store(name, _array(value, (2, 2)), False)

    def set_mat3(self, name: str, value: Any) -> bool:
        return self._store(name, _array(value, (3, 3)), False)

    def set_mat4(self, name: str, value: Any) -> bool:
        return self._store(name, _array(value, (4, 4)), False)

    def set_mvp(self, model: Any, view: Any, projection: Any) -> bool:
        """Set ``MVP`` to projection * view * model."""
        mvp = _array(projection, (4, 4)) @ _array(view, (4, 4)) @ _array(model, (4, 4))
        return self.set_mat4("MVP", mvp)