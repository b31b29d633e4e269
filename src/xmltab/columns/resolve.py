from __future__ import annotations

from typing import List, Sequence

from xmltab.columns.types import ColumnSpec, Intrinsic, IntrinsicKind, Literal, PathExtraction
from xmltab.errors import ExtractionError, ResolveError
from xmltab.extract import extract
from xmltab.tree.types import Element


def resolve_column(column: ColumnSpec, doc: Element, doc_identity: str) -> str:
    """
    Produce the cell value of ``column`` for one document.

    A configured default replaces any extraction failure, silently and
    regardless of the failure kind. Without a default the failure is raised
    as a ResolveError carrying the column title and document identity.
    """
    source = column.source

    if isinstance(source, PathExtraction):
        try:
            return extract(doc, source.path, source.mode)
        except ExtractionError as e:
            if source.default is not None:
                return source.default
            raise ResolveError(column.title, doc_identity, e) from e

    if isinstance(source, Literal):
        return source.text

    if isinstance(source, Intrinsic):
        if source.kind is IntrinsicKind.FILE_PATH:
            return doc_identity
        raise ValueError(f"Unknown intrinsic: {source.kind}")

    raise TypeError(f"Unsupported column source: {type(source).__name__}")


def resolve_row(columns: Sequence[ColumnSpec], doc: Element, doc_identity: str) -> List[str]:
    """Resolve every column in config order. The first ResolveError aborts the row."""
    return [resolve_column(c, doc, doc_identity) for c in columns]
