from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import (
    InvalidEscape,
    InvalidLiteral,
    InvalidNumber,
    InvalidUnicodeEscape,
    UnexpectedCharacter,
    UnterminatedString,
)
from .spans import LineIndex, Span
from .tokens import KEYWORDS, Token, TokenKind


_WORD_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")
# Whatever a malformed number swallows, reported as a single lexeme.
_NUMBER_RUN_RE = re.compile(r"[-+.0-9A-Za-z_]+")
_STRING_CHUNK_RE = re.compile(r'[^"\\\x00-\x1f]+')
_HEX_RE = re.compile(r"[0-9A-Fa-f]{1,4}")

_WHITESPACE = " \t\r\n"
_DIGITS = "0123456789"

_PUNCTUATION = {
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


@dataclass(slots=True)
class _Cursor:
    file: str
    src: str
    lines: LineIndex
    i: int = 0

    def eof(self) -> bool:
        return self.i >= len(self.src)

    def peek(self, n: int = 0) -> str:
        j = self.i + n
        if j >= len(self.src):
            return ""
        return self.src[j]

    def advance(self, n: int = 1) -> None:
        self.i = min(self.i + n, len(self.src))

    def span(self, start: int, end: int | None = None) -> Span:
        return self.lines.span(start, self.i if end is None else end, file=self.file)


def tokenize(src: str, *, file: str = "<memory>") -> list[Token]:
    """Split ``src`` into tokens, ending with a zero-width EOF token.

    Whitespace between tokens is skipped and never part of a span. Raises a
    ``LexError`` subclass on the first malformed construct.
    """
    cur = _Cursor(file=file, src=src, lines=LineIndex(src))
    tokens: list[Token] = []

    while not cur.eof():
        ch = cur.peek()

        if ch in _WHITESPACE:
            cur.advance()
            continue

        start = cur.i

        kind = _PUNCTUATION.get(ch)
        if kind is not None:
            cur.advance()
            tokens.append(Token(kind, ch, cur.span(start)))
            continue

        if ch == '"':
            value = _scan_string(cur)
            tokens.append(Token(TokenKind.STRING, src[start : cur.i], cur.span(start), value))
            continue

        if ch == "-" or ch in _DIGITS:
            number = _scan_number(cur)
            tokens.append(Token(TokenKind.NUMBER, src[start : cur.i], cur.span(start), number))
            continue

        m = _WORD_RE.match(src, start)
        if m:
            word = m.group(0)
            cur.advance(len(word))
            kind = KEYWORDS.get(word)
            if kind is None:
                raise InvalidLiteral(
                    span=cur.span(start),
                    message=f"unexpected literal {word!r}",
                    hint="only true, false and null are allowed unquoted; quote strings with \"",
                    word=word,
                )
            value = None if kind is TokenKind.NULL else kind is TokenKind.TRUE
            tokens.append(Token(kind, word, cur.span(start), value))
            continue

        raise UnexpectedCharacter(
            span=cur.span(start, start + 1),
            message=f"unexpected character {ch!r}",
            hint="remove the character or replace with valid JSON",
            char=ch,
        )

    eof = cur.span(cur.i)
    tokens.append(Token(TokenKind.EOF, "", eof))
    return tokens


def _scan_string(cur: _Cursor) -> str:
    start = cur.i
    cur.advance()  # opening quote
    buf: list[str] = []

    while not cur.eof():
        m = _STRING_CHUNK_RE.match(cur.src, cur.i)
        if m:
            buf.append(m.group(0))
            cur.advance(len(m.group(0)))
            continue

        c = cur.peek()
        if c == '"':
            cur.advance()
            return "".join(buf)
        if c == "\\":
            buf.append(_scan_escape(cur, start))
            continue

        # Only unescaped control characters are left.
        raise UnexpectedCharacter(
            span=cur.span(cur.i, cur.i + 1),
            message=f"unescaped control character {c!r} in string",
            hint="escape it, for example \\n or \\u0000",
            char=c,
        )

    raise UnterminatedString(
        span=cur.span(start),
        message="unterminated string literal",
        hint='close the quote with "',
    )


def _scan_escape(cur: _Cursor, string_start: int) -> str:
    esc_start = cur.i
    cur.advance()  # backslash
    esc = cur.peek()
    if esc == "":
        raise UnterminatedString(
            span=cur.span(string_start),
            message="unterminated string literal",
            hint='close the quote with "',
        )

    decoded = _ESCAPES.get(esc)
    if decoded is not None:
        cur.advance()
        return decoded

    if esc != "u":
        cur.advance()
        raise InvalidEscape(
            span=cur.span(esc_start),
            message=f"invalid escape sequence \\{esc}",
            hint='valid escapes are \\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX',
            escape="\\" + esc,
        )

    cur.advance()
    code = _read_hex4(cur, esc_start)

    # A high surrogate followed by an escaped low surrogate is one code point.
    if 0xD800 <= code <= 0xDBFF and cur.peek() == "\\" and cur.peek(1) == "u":
        m = _HEX_RE.match(cur.src, cur.i + 2)
        if m and len(m.group(0)) == 4:
            low = int(m.group(0), 16)
            if 0xDC00 <= low <= 0xDFFF:
                cur.advance(6)
                return chr(0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00))

    return chr(code)


def _read_hex4(cur: _Cursor, esc_start: int) -> int:
    m = _HEX_RE.match(cur.src, cur.i)
    digits = m.group(0) if m else ""
    if len(digits) < 4:
        cur.advance(len(digits))
        raise InvalidUnicodeEscape(
            span=cur.span(esc_start),
            message="invalid unicode escape",
            hint="\\u must be followed by exactly 4 hex digits",
        )
    cur.advance(4)
    return int(digits, 16)


def _scan_number(cur: _Cursor) -> int | float:
    start = cur.i
    m = _NUMBER_RE.match(cur.src, start)
    nxt = cur.src[m.end() : m.end() + 1] if m else ""

    # Only ASCII tails belong to the number; anything else is its own token.
    if m is None or (nxt and _NUMBER_RUN_RE.match(nxt)):
        run = _NUMBER_RUN_RE.match(cur.src, start)
        lexeme = run.group(0) if run else cur.peek()
        cur.advance(len(lexeme))
        raise InvalidNumber(
            span=cur.span(start),
            message=f"invalid number {lexeme!r}",
            hint=_number_hint(lexeme),
            lexeme=lexeme,
        )

    lexeme = m.group(0)
    cur.advance(len(lexeme))
    if any(c in lexeme for c in ".eE"):
        return float(lexeme)
    try:
        return int(lexeme)
    except ValueError:
        # Interpreter cap on int digits (sys.set_int_max_str_digits).
        raise InvalidNumber(
            span=cur.span(start),
            message="integer literal is too long",
            hint="write it as a float with an exponent, or raise sys.set_int_max_str_digits",
            lexeme=lexeme,
        ) from None


def _number_hint(lexeme: str) -> str:
    digits = lexeme.lstrip("-")
    if len(digits) > 1 and digits[0] == "0" and digits[1].isdigit():
        return "numbers must not have leading zeros"
    if lexeme.endswith((".", "e", "E", "+", "-")):
        return "add digits after the decimal point or exponent"
    return "numbers look like -12, 0.5 or 1e-3"
