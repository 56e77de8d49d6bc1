"""Readable text dumps of values and records for debugging output."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from typing import Any

_INDENT_UNIT = "    "
_COMPRESS_LIMIT = 80


def add_indent(text: str, indent: int = 1) -> str:
    """Prefix every line of ``text`` with ``indent`` levels of four spaces.

    The result always ends with a newline.
    """
    prefix = _INDENT_UNIT * indent
    result = "".join(prefix + line for line in text.splitlines(keepends=True))
    if not result.endswith("\n"):
        result += "\n"
    return result


def compress_string(text: str) -> str:
    """Collapse every run of whitespace into one space.

    Leading whitespace is dropped; a trailing newline is kept.
    """
    parts: list[str] = []
    prev_is_space = True
    for char in text:
        if not char.isspace():
            parts.append(char)
        elif not prev_is_space:
            parts.append(" ")
        prev_is_space = char.isspace()
    if text.endswith("\n"):
        parts.append("\n")
    return "".join(parts)


def try_compress_string(text: str) -> str:
    """Compress ``text`` onto one line if it is shorter than 80 characters."""
    if len(text) < _COMPRESS_LIMIT:
        return compress_string(text)
    return text


def stringify_items(items: Iterable[Any]) -> str:
    """Render items as numbered ``[i]: value`` entries separated by commas."""
    text = ",\n".join(f"[{index}]: {serialize(item)}" for index, item in enumerate(items))
    return try_compress_string(text)


def _container(label: str, items: Iterable[Any]) -> str:
    return try_compress_string(f"{label} {{\n" + add_indent(stringify_items(items)) + "}")


def serialize(value: Any) -> str:
    """Render ``value`` as debugging text.

    Strings are quoted, pairs become ``{a, b}``, containers become numbered
    blocks, and objects with a ``stringify`` method render themselves.
    """
    if value is None:
        return "nullptr"
    if isinstance(value, str):
        return f'"{value}"'
    stringify = getattr(value, "stringify", None)
    if callable(stringify):
        return stringify()
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, tuple) and len(value) == 2:
        first, second = value
        return f"{{{serialize(first)}, {serialize(second)}}}"
    if isinstance(value, Mapping):
        return _container("dict", value.items())
    if isinstance(value, (list, tuple, set, frozenset, deque)):
        return _container(type(value).__name__, value)
    return str(value)


def serialize_fields(name: str, fields: Mapping[str, Any] | Iterable[tuple[str, Any]]) -> str:
    """Render a named record of ``field: value`` lines.

    A leading ``self.`` on a field name is dropped.
    """
    pairs = list(fields.items()) if isinstance(fields, Mapping) else list(fields)
    lines = []
    for field, value in pairs:
        label = field.strip()
        if label.startswith("self."):
            label = label[len("self."):]
        lines.append(f"{label}: {serialize(value)}")
    body = ",\n".join(lines) + "\n" if lines else ""
    return try_compress_string(f"{name} {{\n" + add_indent(body) + "}")