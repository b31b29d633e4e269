import csv
import json
from pathlib import Path

from typer.testing import CliRunner

from xmltab.cli import app


runner = CliRunner()


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _config(tmp_path: Path, records) -> Path:
    return _write(tmp_path / "cols.json", json.dumps(records))


def _combined(result) -> str:
    # Strip Typer / Rich box-drawing characters, then normalize whitespace
    text = result.output or ""
    for ch in "│─╭╮╰╯":
        text = text.replace(ch, " ")
    return " ".join(text.split())


# ==========================================================
# extract
# ==========================================================

def test_extract_happy_path(tmp_path: Path):
    _write(tmp_path / "in" / "a.xml", '<root><item id="7">hi</item></root>')
    cfg = _config(tmp_path, [
        {"title": "file", "intrinsic": "FilePath"},
        {"title": "id", "path_attr": "item.id"},
        {"title": "text", "path_text": "item"},
        {"title": "n", "path_len": "item"},
    ])
    out = tmp_path / "out" / "rows.csv"

    result = runner.invoke(app, ["extract", str(tmp_path / "in"), "--config", str(cfg), "--save", str(out)])

    assert result.exit_code == 0, result.output
    rows = list(csv.reader(out.open(newline="", encoding="utf-8")))
    assert rows[0] == ["file", "id", "text", "n"]
    assert rows[1][1:] == ["7", "hi", "1"]


def test_extract_default_config(tmp_path: Path):
    _write(tmp_path / "in" / "a.xml", "<root/>")
    out = tmp_path / "rows.csv"
    result = runner.invoke(app, ["extract", str(tmp_path / "in"), "-s", str(out)])
    assert result.exit_code == 0, result.output
    rows = list(csv.reader(out.open(newline="", encoding="utf-8")))
    assert rows == [["file"], [str(tmp_path / "in" / "a.xml")]]


def test_extract_missing_input(tmp_path: Path):
    result = runner.invoke(app, ["extract", str(tmp_path / "nope")])
    assert result.exit_code != 0
    assert "doesn't exist" in _combined(result)


def test_extract_aborts_on_failed_column(tmp_path: Path):
    _write(tmp_path / "in" / "a.xml", "<root/>")
    cfg = _config(tmp_path, [{"title": "id", "path_attr": "item.id"}])
    out = tmp_path / "rows.csv"

    result = runner.invoke(app, ["extract", str(tmp_path / "in"), "-c", str(cfg), "-s", str(out)])

    assert result.exit_code == 1
    assert "Failed to extract column 'id'" in _combined(result)


def test_extract_skip_policy(tmp_path: Path):
    _write(tmp_path / "in" / "a.xml", "<root/>")
    _write(tmp_path / "in" / "b.xml", '<root><item id="2"/></root>')
    cfg = _config(tmp_path, [{"title": "id", "path_attr": "item.id"}])
    out = tmp_path / "rows.csv"

    result = runner.invoke(
        app,
        ["extract", str(tmp_path / "in"), "-c", str(cfg), "-s", str(out), "--on-error", "skip"],
    )

    assert result.exit_code == 0, result.output
    assert "skipped 1" in _combined(result)
    rows = list(csv.reader(out.open(newline="", encoding="utf-8")))
    assert rows == [["id"], ["2"]]


def test_extract_bad_config(tmp_path: Path):
    _write(tmp_path / "in" / "a.xml", "<root/>")
    cfg = _config(tmp_path, [{"title": "x", "text": "a", "path_text": "b"}])
    result = runner.invoke(app, ["extract", str(tmp_path / "in"), "-c", str(cfg)])
    assert result.exit_code == 1
    assert "conflicting sources" in _combined(result)


# ==========================================================
# check-config / eval
# ==========================================================

def test_check_config_ok(tmp_path: Path):
    cfg = _config(tmp_path, [
        {"title": "id", "path_attr": "item.id", "default": ""},
        {"title": "src", "text": "x"},
    ])
    result = runner.invoke(app, ["check-config", str(cfg)])
    assert result.exit_code == 0, result.output
    assert "path_attr=item.id" in result.stdout
    assert "OK (2 columns)" in result.stdout


def test_check_config_reports_index_attribute(tmp_path: Path):
    cfg = _config(tmp_path, [{"title": "bad", "path_attr": "item.1"}])
    result = runner.invoke(app, ["check-config", str(cfg)])
    assert result.exit_code == 1
    assert "ends with an index" in _combined(result)


def test_eval(tmp_path: Path):
    doc = _write(tmp_path / "a.xml", '<root><item id="7">hi</item></root>')
    result = runner.invoke(app, ["eval", str(doc), "item.id", "--mode", "attr"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "7"


def test_eval_failure(tmp_path: Path):
    doc = _write(tmp_path / "a.xml", "<root/>")
    result = runner.invoke(app, ["eval", str(doc), "item"])
    assert result.exit_code == 1
    assert "Cannot find node: item" in _combined(result)
