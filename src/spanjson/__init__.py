from __future__ import annotations

from .api import parse_file, parse_source
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
    to_python,
    walk,
)
from .config import ParseOptions
from .errors import JsonError, LexError, ParseError
from .format import format_json
from .lexer import tokenize
from .parser import parse
from .spans import Loc, Span
from .visit import Visitor

__all__ = [
    "ArrayAst",
    "BoolAst",
    "IdentifierAst",
    "Json",
    "JsonError",
    "LexError",
    "Loc",
    "NullAst",
    "NumberAst",
    "ObjectAst",
    "ParseError",
    "ParseOptions",
    "PropertyAst",
    "Span",
    "StringAst",
    "Visitor",
    "format_json",
    "parse",
    "parse_file",
    "parse_source",
    "to_python",
    "tokenize",
    "walk",
]
