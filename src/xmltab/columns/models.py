from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from xmltab.columns.types import (
    ColumnSpec,
    Intrinsic,
    IntrinsicKind,
    Literal,
    PathExtraction,
)
from xmltab.paths import PathMode, parse_path

PATH_KEYS: Tuple[str, ...] = tuple(m.config_key for m in PathMode)
SOURCE_KEYS: Tuple[str, ...] = PATH_KEYS + ("text", "intrinsic")


class ColumnRecord(BaseModel):
    # Schema for one column record of the config file
    model_config = ConfigDict(extra="forbid")

    title: str
    path_text: Optional[str] = Field(default=None, description="Path whose text is read")
    path_len: Optional[str] = Field(default=None, description="Path whose children are counted")
    path_attr: Optional[str] = Field(default=None, description="Path ending in an attribute name")
    default: Optional[str] = Field(default=None, description="Value used when extraction fails")
    text: Optional[str] = None
    intrinsic: Optional[IntrinsicKind] = None

    @model_validator(mode="after")
    def _exactly_one_source(self) -> "ColumnRecord":
        present = [k for k in SOURCE_KEYS if getattr(self, k) is not None]
        if not present:
            raise ValueError(
                f"column '{self.title}' needs one of: {', '.join(SOURCE_KEYS)}"
            )
        if len(present) > 1:
            raise ValueError(
                f"column '{self.title}' has conflicting sources: {', '.join(present)}"
            )
        if self.default is not None and present[0] not in PATH_KEYS:
            raise ValueError(
                f"column '{self.title}': 'default' is only allowed with {', '.join(PATH_KEYS)}"
            )
        return self

    @property
    def source_key(self) -> str:
        return next(k for k in SOURCE_KEYS if getattr(self, k) is not None)

    def to_spec(self) -> ColumnSpec:
        key = self.source_key
        if key in PATH_KEYS:
            mode = PathMode(key[len("path_"):])
            source = PathExtraction(
                path=parse_path(getattr(self, key)),
                mode=mode,
                default=self.default,
            )
        elif key == "text":
            source = Literal(self.text)
        else:
            source = Intrinsic(self.intrinsic)
        return ColumnSpec(title=self.title, source=source)
