from __future__ import annotations

import json

from .. import ast as A
from ..spans import Loc


def _expected_loc(src: str, offset: int) -> Loc:
    before = src[:offset]
    return Loc(
        offset=offset,
        line=before.count("\n") + 1,
        column=offset - (before.rfind("\n") + 1) + 1,
    )


def _fail(node: A.AnyNode, src: str, what: str) -> AssertionError:
    return AssertionError(
        f"{type(node).__name__} at {node.span.format()}: {what} "
        f"(text {node.span.text(src)!r})"
    )


def assert_located(src: str, tree: A.Json) -> None:
    """Check that every span slices out its own construct and nests inside its parent.

    Raises AssertionError describing the first offending node.
    """
    for node in A.walk(tree):
        span = node.span
        if span.start.offset > span.end.offset:
            raise _fail(node, src, "start after end")
        for loc in (span.start, span.end):
            if loc != _expected_loc(src, loc.offset):
                raise _fail(node, src, f"line/column mismatch for {loc}")

        text = span.text(src)
        if text != text.strip():
            raise _fail(node, src, "span includes surrounding whitespace")

        if isinstance(node, A.PropertyAst):
            ok = text.startswith(node.key.span.text(src)) and text.endswith(node.value.span.text(src))
        elif isinstance(node, A.IdentifierAst):
            ok = node.span == node.value.span
        elif isinstance(node, A.NullAst):
            ok = text == "null"
        else:
            ok = json.loads(text) == A.to_python(node)
        if not ok:
            raise _fail(node, src, "text does not reproduce the node")

        for child in A.iter_children(node):
            if child.span.start.offset < span.start.offset or child.span.end.offset > span.end.offset:
                raise _fail(child, src, f"escapes parent span {span.format()}")
