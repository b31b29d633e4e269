from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


@dataclass(frozen=True)
class ElementName:
    """Look up the first direct child element with this tag."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Index:
    """Look up the direct child at this 0-based position (any node kind)."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"Index must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


PathSegment = Union[ElementName, Index]


@dataclass(frozen=True)
class PathExpression:
    """
    Ordered, non-empty sequence of path segments.

    Built by ``parse_path``; an empty string parses to a single
    ``ElementName("")`` lookup, so a parsed expression always has a segment.
    """

    segments: Tuple[PathSegment, ...]

    def __str__(self) -> str:
        from .parse import serialize_path

        return serialize_path(self)

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def last(self) -> PathSegment:
        return self.segments[-1]


class PathMode(str, Enum):
    TEXT = "text"
    LEN = "len"
    ATTR = "attr"

    @property
    def config_key(self) -> str:
        # key used in column config records, e.g. "path_text"
        return f"path_{self.value}"
