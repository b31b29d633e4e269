from __future__ import annotations
import csv, json, pathlib
from typing import Any, Dict, Sequence, TextIO


def jsonl_append(path, rec: Dict[str, Any]):
    p = pathlib.Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("a", encoding="utf-8") as f:
        f.write(json.dumps(rec, ensure_ascii=False) + "\n")


class CsvRowWriter:
    """Header once, then one row per document, flushed as it goes."""

    def __init__(self, stream: TextIO, titles: Sequence[str]):
        self._writer = csv.writer(stream)
        self._stream = stream
        self.width = len(titles)
        self._writer.writerow(list(titles))
        self.rows_written = 0

    def write(self, row: Sequence[str]) -> None:
        if len(row) != self.width:
            raise ValueError(f"row has {len(row)} fields, header has {self.width}")
        self._writer.writerow(list(row))
        self._stream.flush()
        self.rows_written += 1
