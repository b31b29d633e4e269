from .types import ElementName, Index, PathExpression, PathMode, PathSegment
from .parse import parse_path, serialize_path

__all__ = [
    "ElementName",
    "Index",
    "PathExpression",
    "PathMode",
    "PathSegment",
    "parse_path",
    "serialize_path",
]
