from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .spans import Span


class TokenKind(str, Enum):
    # Literals
    STRING = "STRING"
    NUMBER = "NUMBER"

    # Punctuation
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COLON = ":"
    COMMA = ","

    # Keywords
    TRUE = "true"
    FALSE = "false"
    NULL = "null"

    EOF = "EOF"


KEYWORDS: dict[str, TokenKind] = {
    "true": TokenKind.TRUE,
    "false": TokenKind.FALSE,
    "null": TokenKind.NULL,
}


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    lexeme: str  # raw source text, quotes and escapes included
    span: Span
    value: object = None  # decoded str, int/float, or bool

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.lexeme!r}, {self.span.format()})"

    def describe(self) -> str:
        if self.kind is TokenKind.EOF:
            return "end of input"
        if self.kind in (TokenKind.STRING, TokenKind.NUMBER):
            return f"{self.kind.value.lower()} {self.lexeme}"
        return repr(self.lexeme)
