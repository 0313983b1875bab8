from __future__ import annotations

import math

from . import ast as A


_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def format_json(node: A.Json, *, indent: int | None = None) -> str:
    """Render a tree back to JSON text.

    Compact when ``indent`` is None, otherwise one member per line. Uses the
    nodes' current values, so visitor rewrites show up; spans are ignored.
    """
    if indent is not None and indent < 0:
        raise ValueError("indent must be non-negative")
    out: list[str] = []
    _format_value(node, out, indent=indent, level=0)
    return "".join(out)


def _format_value(node: A.Json, out: list[str], *, indent: int | None, level: int) -> None:
    if isinstance(node, A.ObjectAst):
        _format_object(node, out, indent=indent, level=level)
    elif isinstance(node, A.ArrayAst):
        _format_array(node, out, indent=indent, level=level)
    elif isinstance(node, A.StringAst):
        out.append(_format_string(node.value))
    elif isinstance(node, A.BoolAst):
        out.append("true" if node.value else "false")
    elif isinstance(node, A.NumberAst):
        out.append(_format_number(node.value))
    elif isinstance(node, A.NullAst):
        out.append("null")
    else:
        raise TypeError(f"cannot format {type(node).__name__}")


def _format_object(node: A.ObjectAst, out: list[str], *, indent: int | None, level: int) -> None:
    if not node.value:
        out.append("{}")
        return
    sep = ":" if indent is None else ": "
    out.append("{")
    for i, prop in enumerate(node.value):
        if i:
            out.append(",")
        out.append(_newline(indent, level + 1))
        out.append(_format_string(prop.key.value.value))
        out.append(sep)
        _format_value(prop.value, out, indent=indent, level=level + 1)
    out.append(_newline(indent, level))
    out.append("}")


def _format_array(node: A.ArrayAst, out: list[str], *, indent: int | None, level: int) -> None:
    if not node.value:
        out.append("[]")
        return
    out.append("[")
    for i, item in enumerate(node.value):
        if i:
            out.append(",")
        out.append(_newline(indent, level + 1))
        _format_value(item, out, indent=indent, level=level + 1)
    out.append(_newline(indent, level))
    out.append("]")


def _newline(indent: int | None, level: int) -> str:
    if indent is None:
        return ""
    return "\n" + " " * (indent * level)


def _format_string(s: str) -> str:
    parts = ['"']
    for ch in s:
        esc = _ESCAPES.get(ch)
        if esc is not None:
            parts.append(esc)
        elif ch < " " or "\ud800" <= ch <= "\udfff":
            # Control chars and lone surrogates have no literal form.
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(ch)
    parts.append('"')
    return "".join(parts)


def _format_number(v: int | float) -> str:
    if isinstance(v, bool):
        raise TypeError("NumberAst holds a bool; use BoolAst for true/false")
    if isinstance(v, int):
        return str(v)
    if not math.isfinite(v):
        raise ValueError(f"{v!r} has no JSON representation")
    return repr(v)
