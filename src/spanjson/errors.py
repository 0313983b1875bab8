from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .spans import Span

if TYPE_CHECKING:
    from .tokens import Token


@dataclass(slots=True)
class JsonError(Exception):
    span: Span
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.span.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


# Lexical errors.


class LexError(JsonError):
    pass


@dataclass(slots=True)
class UnexpectedCharacter(LexError):
    char: str = ""


class UnterminatedString(LexError):
    pass


@dataclass(slots=True)
class InvalidEscape(LexError):
    escape: str = ""


class InvalidUnicodeEscape(LexError):
    pass


@dataclass(slots=True)
class InvalidNumber(LexError):
    lexeme: str = ""


@dataclass(slots=True)
class InvalidLiteral(LexError):
    """An identifier-like word that is not ``true``, ``false`` or ``null``."""

    word: str = ""


# Grammar errors.


class ParseError(JsonError):
    pass


@dataclass(slots=True)
class LexFailure(ParseError):
    error: LexError | None = None

    @classmethod
    def wrap(cls, error: LexError) -> LexFailure:
        return cls(span=error.span, message=error.message, hint=error.hint, error=error)


@dataclass(slots=True)
class UnexpectedToken(ParseError):
    found: Token | None = None
    expected: str = ""


class TrailingComma(UnexpectedToken):
    pass


@dataclass(slots=True)
class UnexpectedEndOfInput(ParseError):
    expected: str = ""


@dataclass(slots=True)
class TrailingContent(ParseError):
    found: Token | None = None


@dataclass(slots=True)
class TooDeeplyNested(ParseError):
    depth: int = 0
