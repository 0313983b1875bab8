from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .spans import Span


# Nodes are mutable so visitors can rewrite them in place. Spans are set once
# by the parser and are not updated when a visitor replaces a value.


@dataclass(slots=True)
class Node:
    span: Span


@dataclass(slots=True)
class StringAst(Node):
    value: str  # decoded, escapes resolved


@dataclass(slots=True)
class NumberAst(Node):
    value: int | float


@dataclass(slots=True)
class BoolAst(Node):
    value: bool


@dataclass(slots=True)
class NullAst(Node):
    pass


@dataclass(slots=True)
class IdentifierAst(Node):
    """An object key. Its span is the span of the wrapped string."""

    value: StringAst


@dataclass(slots=True)
class PropertyAst(Node):
    key: IdentifierAst
    value: Json


@dataclass(slots=True)
class ObjectAst(Node):
    value: list[PropertyAst]

    def keys(self) -> list[str]:
        return [p.key.value.value for p in self.value]

    def get(self, key: str) -> Json | None:
        # Duplicate keys are kept; the last one wins for lookup.
        for prop in reversed(self.value):
            if prop.key.value.value == key:
                return prop.value
        return None


@dataclass(slots=True)
class ArrayAst(Node):
    value: list[Json]


Json = ObjectAst | ArrayAst | StringAst | NumberAst | BoolAst | NullAst
AnyNode = Json | PropertyAst | IdentifierAst


def iter_children(node: AnyNode) -> Iterator[AnyNode]:
    """Direct children in traversal order: properties, key before value, elements."""
    if isinstance(node, ObjectAst):
        yield from node.value
    elif isinstance(node, PropertyAst):
        yield node.key
        yield node.value
    elif isinstance(node, IdentifierAst):
        yield node.value
    elif isinstance(node, ArrayAst):
        yield from node.value


def walk(node: AnyNode) -> Iterator[AnyNode]:
    """Yield ``node`` and all of its descendants, depth-first pre-order."""
    stack: list[AnyNode] = [node]
    while stack:
        cur = stack.pop()
        yield cur
        stack.extend(reversed(list(iter_children(cur))))


def to_python(node: Json) -> object:
    """Convert a tree to plain dicts, lists, str, int/float, bool and None."""
    if isinstance(node, ObjectAst):
        return {p.key.value.value: to_python(p.value) for p in node.value}
    if isinstance(node, ArrayAst):
        return [to_python(v) for v in node.value]
    if isinstance(node, (StringAst, NumberAst, BoolAst)):
        return node.value
    if isinstance(node, NullAst):
        return None
    raise TypeError(f"not a JSON value node: {type(node)!r}")
