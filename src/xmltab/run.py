"""
xmltab | run.py

Drives one extraction run: discover input files, parse each document,
resolve its columns, and write CSV rows in input order.

Error policy:
  - ABORT (default): the first document that fails stops the run; rows
    written before it stay in the file, the failing row is never written.
  - SKIP: the failing document is left out, the failure is recorded on the
    summary (and appended to the error report if one is configured), and
    the run continues.
"""

from __future__ import annotations

from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from enum import Enum
from itertools import repeat
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, TextIO

import logging

from xmltab.columns.resolve import resolve_row
from xmltab.columns.types import ColumnSpec
from xmltab.errors import ResolveError, XmlTabError
from xmltab.io import CsvRowWriter, jsonl_append
from xmltab.log import get_logger
from xmltab.tree.load import load_document

XML_SUFFIX = ".xml"


class ErrorPolicy(str, Enum):
    ABORT = "abort"
    SKIP = "skip"


# ---------------------------------------------------------------------------
# Options / results
# ---------------------------------------------------------------------------

@dataclass
class RunOptions:
    xml_path: Path
    filter_xml: bool = False
    log: bool = False
    on_error: ErrorPolicy = ErrorPolicy.ABORT
    error_report: Optional[Path] = None
    jobs: int = 1

    logger: logging.Logger = field(default=None, repr=False)

    def __post_init__(self):
        self.xml_path = Path(self.xml_path)
        self.on_error = ErrorPolicy(self.on_error)
        if self.jobs < 1:
            raise ValueError(f"jobs must be >= 1, got {self.jobs}")
        if self.logger is None:
            self.logger = get_logger(verbose=self.log)


@dataclass
class DocumentResult:
    doc_identity: str
    row: Optional[List[str]] = None
    error: Optional[XmlTabError] = None


@dataclass
class RowFailure:
    doc_identity: str
    message: str
    column: Optional[str] = None

    def to_record(self):
        return {"file": self.doc_identity, "column": self.column, "error": self.message}


@dataclass
class RunSummary:
    rows_written: int = 0
    failures: List[RowFailure] = field(default_factory=list)

    @property
    def skipped(self) -> int:
        return len(self.failures)


# ---------------------------------------------------------------------------
# Input discovery
# ---------------------------------------------------------------------------

def _is_filtered_out(path: Path) -> bool:
    # entries without an extension are kept
    return path.suffix != "" and path.suffix != XML_SUFFIX


def discover_inputs(options: RunOptions) -> Iterator[Path]:
    """Files to parse, in name order. A single file input yields itself."""
    root = options.xml_path
    if root.is_file():
        candidates = [root]
    elif root.is_dir():
        candidates = sorted(p for p in root.iterdir() if p.is_file())
    else:
        raise FileNotFoundError(f"Path: '{root}' doesn't exist")

    for p in candidates:
        if options.filter_xml and _is_filtered_out(p):
            options.logger.info(f"skipping: {p}")
            continue
        options.logger.info(f"parsing: {p}")
        yield p


# ---------------------------------------------------------------------------
# Per-document work
# ---------------------------------------------------------------------------

def process_document(path: Path, columns: Sequence[ColumnSpec]) -> DocumentResult:
    """Parse one file and resolve its row. Module-level so worker processes can run it."""
    identity = str(path)
    try:
        doc = load_document(path)
        row = resolve_row(columns, doc, identity)
    except XmlTabError as e:
        return DocumentResult(identity, error=e)
    return DocumentResult(identity, row=row)


def _results(paths: Iterator[Path], columns: Sequence[ColumnSpec], jobs: int) -> Iterator[DocumentResult]:
    if jobs == 1:
        for p in paths:
            yield process_document(p, columns)
        return

    with ProcessPoolExecutor(max_workers=jobs) as pool:
        # map() yields in submission order
        yield from pool.map(process_document, paths, repeat(columns))


def _failure_from(result: DocumentResult) -> RowFailure:
    err = result.error
    column = err.column_title if isinstance(err, ResolveError) else None
    return RowFailure(result.doc_identity, str(err), column)


def run_extraction(columns: Sequence[ColumnSpec], options: RunOptions, out: TextIO) -> RunSummary:
    """
    Write the header and one row per input document to ``out``.

    Under ABORT the first failure is re-raised after the rows before it have
    been written.
    """
    writer = CsvRowWriter(out, [c.title for c in columns])
    summary = RunSummary()

    for result in _results(discover_inputs(options), columns, options.jobs):
        if result.error is None:
            writer.write(result.row)
            summary.rows_written += 1
            continue

        if options.on_error is ErrorPolicy.ABORT:
            raise result.error

        failure = _failure_from(result)
        summary.failures.append(failure)
        options.logger.warning(f"skipped {failure.doc_identity}: {failure.message}")
        if options.error_report is not None:
            jsonl_append(options.error_report, failure.to_record())

    return summary
