import json
import logging

import pytest

from xmltab.columns.config import build_columns, config_problems, load_columns
from xmltab.columns.types import Intrinsic, IntrinsicKind, Literal, PathExtraction
from xmltab.errors import ConfigError
from xmltab.paths import ElementName, Index, PathMode


RECORDS = [
    {"title": "File", "intrinsic": "FilePath"},
    {"title": "Name", "path_text": "person.name"},
    {"title": "Kids", "path_len": "person.children", "default": "0"},
    {"title": "Id", "path_attr": "person.0.id", "default": "?"},
    {"title": "Source", "text": "export"},
]


def test_build_all_shapes():
    cols = build_columns(RECORDS)
    assert [c.title for c in cols] == ["File", "Name", "Kids", "Id", "Source"]

    assert cols[0].source == Intrinsic(IntrinsicKind.FILE_PATH)

    name = cols[1].source
    assert isinstance(name, PathExtraction)
    assert name.mode is PathMode.TEXT
    assert name.default is None
    assert name.path.segments == (ElementName("person"), ElementName("name"))

    assert cols[2].source.mode is PathMode.LEN
    assert cols[2].source.default == "0"

    ident = cols[3].source
    assert ident.mode is PathMode.ATTR
    assert ident.path.segments[1] == Index(0)

    assert cols[4].source == Literal("export")


@pytest.mark.parametrize(
    "record, match",
    [
        ({"title": "x"}, "needs one of"),
        ({"title": "x", "path_text": "a", "text": "b"}, "conflicting sources"),
        ({"title": "x", "path_text": "a", "path_attr": "a.b"}, "conflicting sources"),
        ({"title": "x", "text": "b", "default": "d"}, "only allowed with"),
        ({"title": "x", "intrinsic": "Size"}, "invalid column #0"),
        ({"title": "x", "path_text": "a", "bogus": 1}, "invalid column #0"),
        ({"path_text": "a"}, "invalid column #0"),
        ({"title": "x", "path_text": 5}, "invalid column #0"),
    ],
)
def test_invalid_records(record, match):
    with pytest.raises(ConfigError, match=match):
        build_columns([record])


def test_top_level_must_be_list():
    with pytest.raises(ConfigError, match="expected a list"):
        build_columns({"title": "x", "text": "y"})


def test_load_json(tmp_path):
    p = tmp_path / "cols.json"
    p.write_text(json.dumps(RECORDS), encoding="utf-8")
    assert len(load_columns(p)) == 5


def test_load_yaml(tmp_path):
    p = tmp_path / "cols.yaml"
    p.write_text(
        '- { title: File, intrinsic: FilePath }\n'
        '- { title: Id, path_attr: "item.id", default: "" }\n',
        encoding="utf-8",
    )
    cols = load_columns(p)
    assert cols[1].source.default == ""
    assert str(cols[1].source.path) == "item.id"


def test_load_invalid_json(tmp_path):
    p = tmp_path / "cols.json"
    p.write_text("[{", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse config file"):
        load_columns(p)


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="Failed to load file"):
        load_columns(tmp_path / "missing.json")


def test_default_config():
    cols = load_columns()
    assert [c.title for c in cols] == ["file"]
    assert isinstance(cols[0].source, Intrinsic)


def test_problems_flag_attr_index_and_empty_segment():
    cols = build_columns([
        {"title": "bad_attr", "path_attr": "a.1"},
        {"title": "empty_seg", "path_text": "a..b"},
        {"title": "fine", "path_attr": "a.b"},
    ])
    problems = config_problems(cols)
    assert len(problems) == 2
    assert "bad_attr" in problems[0]
    assert "empty_seg" in problems[1]


def test_problem_warning_goes_through_package_logger(caplog):
    with caplog.at_level(logging.WARNING, logger="xmltab"):
        build_columns([{"title": "bad_attr", "path_attr": "a.1"}])

    logger = logging.getLogger("xmltab")
    assert any(h.formatter is not None and h.formatter._fmt == "[xmltab] %(message)s" for h in logger.handlers)
    assert any(r.name == "xmltab" and "ends with an index" in r.getMessage() for r in caplog.records)
