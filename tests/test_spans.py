from __future__ import annotations

import pytest

from spanjson.spans import LineIndex, Loc, Span, loc_at


def test_loc_at_first_line() -> None:
    assert loc_at("abc", 0) == Loc(offset=0, line=1, column=1)
    assert loc_at("abc", 2) == Loc(offset=2, line=1, column=3)


def test_loc_at_counts_newlines_before_offset() -> None:
    src = "ab\ncd\n\nx"
    assert loc_at(src, 2) == Loc(offset=2, line=1, column=3)  # the newline itself
    assert loc_at(src, 3) == Loc(offset=3, line=2, column=1)
    assert loc_at(src, 6) == Loc(offset=6, line=3, column=1)
    assert loc_at(src, 7) == Loc(offset=7, line=4, column=1)


def test_carriage_return_is_a_column() -> None:
    src = "a\r\nb"
    assert loc_at(src, 1) == Loc(offset=1, line=1, column=2)
    assert loc_at(src, 3) == Loc(offset=3, line=2, column=1)


def test_offsets_clamp_to_end_and_reject_negative() -> None:
    idx = LineIndex("a\nb")
    assert idx.loc(99) == Loc(offset=3, line=2, column=2)
    with pytest.raises(ValueError):
        idx.loc(-1)


def test_span_helpers() -> None:
    src = '{"k": 1}'
    idx = LineIndex(src)
    key = idx.span(1, 4, file="x.json")
    value = idx.span(6, 7, file="x.json")
    assert key.text(src) == '"k"'
    assert key.format() == "x.json:1:2"
    joined = key.join(value)
    assert joined == Span(start=key.start, end=value.end, file="x.json")
    assert joined.text(src) == '"k": 1'
