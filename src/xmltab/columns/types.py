from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from xmltab.paths.types import PathExpression, PathMode


class IntrinsicKind(str, Enum):
    FILE_PATH = "FilePath"


@dataclass(frozen=True)
class PathExtraction:
    path: PathExpression
    mode: PathMode
    default: Optional[str] = None    # returned on any extraction failure


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Intrinsic:
    kind: IntrinsicKind = IntrinsicKind.FILE_PATH


ColumnSource = Union[PathExtraction, Literal, Intrinsic]


@dataclass(frozen=True)
class ColumnSpec:
    """One output CSV column: a header title and where its values come from."""

    title: str
    source: ColumnSource
