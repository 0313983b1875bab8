from __future__ import annotations

from .corpus import generate_corpus_files, generate_json_sources
from .invariants import assert_located

__all__ = ["assert_located", "generate_corpus_files", "generate_json_sources"]
