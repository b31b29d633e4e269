from __future__ import annotations

import re
from typing import List

from .types import ElementName, Index, PathExpression, PathSegment

SEPARATOR = "."

# optional leading '+', ASCII digits only; values must fit an unsigned 64-bit int
_INDEX_RE = re.compile(r"\+?[0-9]+")
MAX_INDEX = 2**64 - 1


def _classify(token: str) -> PathSegment:
    if _INDEX_RE.fullmatch(token):
        value = int(token)
        if value <= MAX_INDEX:
            return Index(value)
    return ElementName(token)


def parse_path(s: str) -> PathExpression:
    """Split a dotted path ("example.foo.1.bar") into typed segments.

    Never fails: every token is either an index or an element name.
    """
    segments: List[PathSegment] = [_classify(tok) for tok in s.split(SEPARATOR)]
    return PathExpression(tuple(segments))


def serialize_path(path: PathExpression) -> str:
    """Inverse of ``parse_path``."""
    parts: List[str] = []
    for seg in path.segments:
        if isinstance(seg, Index):
            parts.append(str(seg.value))
        elif isinstance(seg, ElementName):
            parts.append(seg.name)
        else:
            raise TypeError(f"Unsupported path segment: {type(seg).__name__}")
    return SEPARATOR.join(parts)
