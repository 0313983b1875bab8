from __future__ import annotations

import logging
from dataclasses import dataclass

from .ast import (
    ArrayAst,
    BoolAst,
    IdentifierAst,
    Json,
    NullAst,
    NumberAst,
    ObjectAst,
    PropertyAst,
    StringAst,
)
from .config import ParseOptions
from .errors import (
    LexError,
    LexFailure,
    ParseError,
    TooDeeplyNested,
    TrailingComma,
    TrailingContent,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from .lexer import tokenize
from .tokens import Token, TokenKind


logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = ParseOptions()


@dataclass(slots=True)
class Parser:
    """Recursive descent over a token list, one method per grammar rule.

    Every rule sets its node's span from the first token it consumes to the
    last one. The token list must end with an EOF token.
    """

    tokens: list[Token]
    options: ParseOptions = _DEFAULT_OPTIONS
    i: int = 0
    depth: int = 0

    def parse(self) -> Json:
        value = self.parse_value()
        tok = self.peek()
        if tok.kind is not TokenKind.EOF:
            raise TrailingContent(
                span=tok.span,
                message=f"unexpected {tok.describe()} after the top-level value",
                hint="a JSON document holds exactly one value",
                found=tok,
            )
        return value

    # value := object | array | string | number | true | false | null
    def parse_value(self) -> Json:
        kind = self.peek().kind
        if kind is TokenKind.LBRACE:
            return self.parse_object()
        if kind is TokenKind.LBRACKET:
            return self.parse_array()
        if kind is TokenKind.STRING:
            return self.parse_string()
        if kind is TokenKind.NUMBER:
            return self.parse_number()
        if kind in (TokenKind.TRUE, TokenKind.FALSE):
            return self.parse_bool()
        if kind is TokenKind.NULL:
            return self.parse_null()
        raise self.unexpected(self.peek(), "a value")

    # object := '{' (property (',' property)*)? '}'
    def parse_object(self) -> ObjectAst:
        open_tok = self.expect(TokenKind.LBRACE, "'{'")
        self.enter(open_tok)
        props: list[PropertyAst] = []
        seen: set[str] = set()

        if self.peek().kind is TokenKind.RBRACE:
            close_tok = self.advance()
        else:
            while True:
                prop = self.parse_property()
                key = prop.key.value.value
                if key in seen:
                    logger.debug("duplicate key %r at %s", key, prop.key.span.format())
                seen.add(key)
                props.append(prop)

                tok = self.peek()
                if tok.kind is TokenKind.COMMA:
                    self.advance()
                    self.reject_trailing_comma(TokenKind.RBRACE)
                    continue
                if tok.kind is TokenKind.RBRACE:
                    close_tok = self.advance()
                    break
                raise self.unexpected(tok, "',' or '}'")

        self.leave()
        return ObjectAst(span=open_tok.span.join(close_tok.span), value=props)

    # property := identifier ':' value
    def parse_property(self) -> PropertyAst:
        key = self.parse_identifier()
        self.expect(TokenKind.COLON, "':'")
        value = self.parse_value()
        return PropertyAst(span=key.span.join(value.span), key=key, value=value)

    # identifier := string
    def parse_identifier(self) -> IdentifierAst:
        tok = self.peek()
        if tok.kind is not TokenKind.STRING:
            raise self.unexpected(tok, "a string key")
        string = self.parse_string()
        return IdentifierAst(span=string.span, value=string)

    # array := '[' (value (',' value)*)? ']'
    def parse_array(self) -> ArrayAst:
        open_tok = self.expect(TokenKind.LBRACKET, "'['")
        self.enter(open_tok)
        items: list[Json] = []

        if self.peek().kind is TokenKind.RBRACKET:
            close_tok = self.advance()
        else:
            while True:
                items.append(self.parse_value())
                tok = self.peek()
                if tok.kind is TokenKind.COMMA:
                    self.advance()
                    self.reject_trailing_comma(TokenKind.RBRACKET)
                    continue
                if tok.kind is TokenKind.RBRACKET:
                    close_tok = self.advance()
                    break
                raise self.unexpected(tok, "',' or ']'")

        self.leave()
        return ArrayAst(span=open_tok.span.join(close_tok.span), value=items)

    def parse_string(self) -> StringAst:
        tok = self.expect(TokenKind.STRING, "a string")
        return StringAst(span=tok.span, value=tok.value)

    def parse_number(self) -> NumberAst:
        tok = self.expect(TokenKind.NUMBER, "a number")
        return NumberAst(span=tok.span, value=tok.value)

    def parse_bool(self) -> BoolAst:
        tok = self.peek()
        if tok.kind not in (TokenKind.TRUE, TokenKind.FALSE):
            raise self.unexpected(tok, "true or false")
        self.advance()
        return BoolAst(span=tok.span, value=tok.kind is TokenKind.TRUE)

    def parse_null(self) -> NullAst:
        tok = self.expect(TokenKind.NULL, "null")
        return NullAst(span=tok.span)

    # Token plumbing.

    def peek(self) -> Token:
        return self.tokens[self.i]

    def advance(self) -> Token:
        tok = self.tokens[self.i]
        if tok.kind is not TokenKind.EOF:
            self.i += 1
        return tok

    def expect(self, kind: TokenKind, expected: str) -> Token:
        tok = self.peek()
        if tok.kind is not kind:
            raise self.unexpected(tok, expected)
        return self.advance()

    def unexpected(self, tok: Token, expected: str) -> ParseError:
        if tok.kind is TokenKind.EOF:
            return UnexpectedEndOfInput(
                span=tok.span,
                message=f"unexpected end of input, expected {expected}",
                hint="the document is incomplete; close any open '{' or '['",
                expected=expected,
            )
        return UnexpectedToken(
            span=tok.span,
            message=f"unexpected {tok.describe()}, expected {expected}",
            found=tok,
            expected=expected,
        )

    def reject_trailing_comma(self, closer: TokenKind) -> None:
        tok = self.peek()
        if tok.kind is closer:
            raise TrailingComma(
                span=tok.span,
                message=f"unexpected {tok.describe()} after ','",
                hint="remove the trailing comma",
                found=tok,
                expected="a string key" if closer is TokenKind.RBRACE else "a value",
            )

    def enter(self, tok: Token) -> None:
        self.depth += 1
        limit = self.options.max_depth
        if limit is not None and self.depth > limit:
            raise TooDeeplyNested(
                span=tok.span,
                message=f"nesting deeper than {limit} levels",
                hint="raise ParseOptions.max_depth if the document is trusted",
                depth=self.depth,
            )

    def leave(self) -> None:
        self.depth -= 1


def parse_tokens(tokens: list[Token], *, options: ParseOptions | None = None) -> Json:
    if not tokens or tokens[-1].kind is not TokenKind.EOF:
        raise ValueError("token list must end with an EOF token")
    return Parser(tokens=tokens, options=options or _DEFAULT_OPTIONS).parse()


def parse(text: str, *, file: str = "<memory>", options: ParseOptions | None = None) -> Json:
    """Parse JSON text into a located tree.

    Lexer failures surface as ``LexFailure`` wrapping the ``LexError``; every
    other failure is a ``ParseError`` subclass. Nothing is returned on error.
    """
    try:
        tokens = tokenize(text, file=file)
    except LexError as e:
        raise LexFailure.wrap(e) from e
    return parse_tokens(tokens, options=options)
