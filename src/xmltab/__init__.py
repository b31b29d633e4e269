"""xmltab: turn XML documents into CSV rows with dotted path expressions."""

from xmltab.paths import ElementName, Index, PathExpression, PathMode, parse_path, serialize_path
from xmltab.extract import extract
from xmltab.columns.types import ColumnSpec, Intrinsic, IntrinsicKind, Literal, PathExtraction
from xmltab.columns.resolve import resolve_column, resolve_row
from xmltab.columns.config import load_columns

__version__ = "0.1.0"

__all__ = [
    "ElementName",
    "Index",
    "PathExpression",
    "PathMode",
    "parse_path",
    "serialize_path",
    "extract",
    "ColumnSpec",
    "Intrinsic",
    "IntrinsicKind",
    "Literal",
    "PathExtraction",
    "resolve_column",
    "resolve_row",
    "load_columns",
]
