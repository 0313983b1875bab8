from __future__ import annotations

import logging
from pathlib import Path

from .ast import Json
from .config import ParseOptions
from .parser import parse


logger = logging.getLogger(__name__)


def parse_source(src: str, *, file: str = "<memory>", options: ParseOptions | None = None) -> Json:
    return parse(src, file=file, options=options)


def parse_file(path: str | Path, *, options: ParseOptions | None = None) -> Json:
    p = Path(path).expanduser().resolve()
    # Decode bytes directly so \r\n is kept and offsets match the file.
    src = p.read_bytes().decode("utf-8")
    # Offsets are relative to the text after the BOM.
    src = src.removeprefix("\ufeff")
    logger.debug("parsing %s (%d chars)", p, len(src))
    return parse_source(src, file=str(p), options=options)
