from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import yaml
from pydantic import ValidationError

from xmltab.columns.models import ColumnRecord
from xmltab.columns.types import ColumnSpec, PathExtraction
from xmltab.errors import ConfigError
from xmltab.log import get_logger
from xmltab.paths import ElementName, Index, PathMode

DEFAULT_CONFIG = Path(__file__).resolve().parents[1] / "data" / "default_config.json"
INTERNAL_CONFIG_NAME = "<INTERNAL CONFIG>"
YAML_SUFFIXES = {".yaml", ".yml"}


def _read_config_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to load file '{path}' reason: {e}") from e


def _decode(text: str, path: Path, label: str) -> Any:
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            return yaml.safe_load(text)
        return json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to parse config file '{label}': {e}") from e


def build_columns(records: Any, label: str = INTERNAL_CONFIG_NAME) -> List[ColumnSpec]:
    """Validate raw column records (list of dicts) and build ColumnSpecs."""
    if not isinstance(records, list):
        raise ConfigError(
            f"Failed to parse config file '{label}': expected a list of columns, "
            f"got {type(records).__name__}"
        )

    columns: List[ColumnSpec] = []
    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise ConfigError(f"{label}: column #{i} must be an object")
        try:
            model = ColumnRecord.model_validate(rec)
        except ValidationError as e:
            raise ConfigError(f"{label}: invalid column #{i}: {e}") from e
        columns.append(model.to_spec())

    log = get_logger()
    for problem in config_problems(columns):
        log.warning(f"{label}: {problem}")

    return columns


def load_columns(path: Optional[Path] = None) -> List[ColumnSpec]:
    """
    Load column specs from a JSON or YAML config.

    With no path the packaged default config is used.
    """
    if path is None:
        text = _read_config_text(DEFAULT_CONFIG)
        return build_columns(_decode(text, DEFAULT_CONFIG, INTERNAL_CONFIG_NAME))

    path = Path(path).expanduser()
    text = _read_config_text(path)
    return build_columns(_decode(text, path, str(path)), label=str(path))


def config_problems(columns: List[ColumnSpec]) -> List[str]:
    """Columns that load fine but can never extract anything."""
    problems: List[str] = []
    for c in columns:
        src = c.source
        if not isinstance(src, PathExtraction):
            continue
        if src.mode is PathMode.ATTR and isinstance(src.path.last, Index):
            problems.append(
                f"column '{c.title}': path_attr '{src.path}' ends with an index; "
                f"attributes cannot be selected by position"
            )
        if any(isinstance(s, ElementName) and s.name == "" for s in src.path.segments):
            problems.append(f"column '{c.title}': path '{src.path}' has an empty segment")
    return problems
