from __future__ import annotations

import json

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from spanjson import Visitor, format_json, parse, to_python
from spanjson.testing import assert_located


_scalars = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-(10**30), max_value=10**30)
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=16)
)

json_values = st.recursive(
    _scalars,
    lambda children: st.lists(children, max_size=5) | st.dictionaries(st.text(max_size=8), children, max_size=5),
    max_leaves=25,
)


@st.composite
def json_documents(draw) -> tuple[object, str]:
    value = draw(json_values)
    indent = draw(st.sampled_from([None, 0, 1, 2, "\t"]))
    ensure_ascii = draw(st.booleans())
    pad = draw(st.sampled_from(["", " ", "\n", "\r\n\t"]))
    return value, pad + json.dumps(value, indent=indent, ensure_ascii=ensure_ascii) + pad


@given(json_documents())
@settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
def test_fuzz_spans_and_values(doc: tuple[object, str]) -> None:
    value, src = doc
    tree = parse(src)
    assert to_python(tree) == value
    assert_located(src, tree)


@given(json_documents())
@settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
def test_fuzz_format_is_stable(doc: tuple[object, str]) -> None:
    value, src = doc
    out1 = format_json(parse(src))
    tree2 = parse(out1)
    assert to_python(tree2) == value
    assert format_json(tree2) == out1
    assert json.loads(out1) == value


@given(json_documents())
@settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
def test_fuzz_default_visitor_is_a_no_op(doc: tuple[object, str]) -> None:
    _, src = doc
    tree = parse(src)
    Visitor().visit_json(tree)
    assert tree == parse(src)
