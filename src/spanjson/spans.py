from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Loc:
    """A concrete source location.

    Offsets are 0-based code point indexes; line/column are 1-based for
    user-facing messages.
    """

    offset: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single file."""

    start: Loc
    end: Loc
    file: str = "<memory>"

    def format(self) -> str:
        return f"{self.file}:{self.start.line}:{self.start.column}"

    def text(self, src: str) -> str:
        return src[self.start.offset : self.end.offset]

    def join(self, other: Span) -> Span:
        return Span(start=self.start, end=other.end, file=self.file)


class LineIndex:
    """Maps offsets in one source text to line/column locations.

    Newline offsets are collected once, so each lookup is a bisection.
    Only ``\\n`` ends a line; ``\\r`` occupies a column like any other char.
    """

    __slots__ = ("_src_len", "_newlines")

    def __init__(self, src: str) -> None:
        self._src_len = len(src)
        self._newlines = [i for i, ch in enumerate(src) if ch == "\n"]

    def loc(self, offset: int) -> Loc:
        if offset < 0:
            raise ValueError(f"negative offset: {offset}")
        offset = min(offset, self._src_len)
        # Newlines strictly before offset; a newline at offset belongs to the current line.
        line_idx = bisect_right(self._newlines, offset - 1)
        line_start = self._newlines[line_idx - 1] + 1 if line_idx else 0
        return Loc(offset=offset, line=line_idx + 1, column=offset - line_start + 1)

    def span(self, start: int, end: int, *, file: str = "<memory>") -> Span:
        return Span(start=self.loc(start), end=self.loc(end), file=file)


def loc_at(src: str, offset: int) -> Loc:
    return LineIndex(src).loc(offset)
