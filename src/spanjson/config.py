from __future__ import annotations

from dataclasses import dataclass


DEFAULT_MAX_DEPTH = 200


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Knobs for a single parse.

    ``max_depth`` bounds how many objects/arrays may be open at once; ``None``
    leaves nesting limited only by the interpreter's recursion limit.
    """

    max_depth: int | None = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth <= 0:
            raise ValueError("max_depth must be positive")
