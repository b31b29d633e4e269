from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from xmltab.columns.config import config_problems, load_columns
from xmltab.columns.types import Intrinsic, Literal, PathExtraction
from xmltab.errors import XmlTabError
from xmltab.extract import extract
from xmltab.paths import PathMode, parse_path
from xmltab.run import ErrorPolicy, RunOptions, run_extraction
from xmltab.tree.load import load_document

app = typer.Typer(help="XML to CSV converter")


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _existing_path(value: Optional[Path]) -> Optional[Path]:
    if value is not None and not value.exists():
        raise typer.BadParameter(f"Path: '{value}' doesn't exist")
    return value


# -----------------------------
# extract
# -----------------------------

@app.command("extract")
def extract_cmd(
    xml_folder: Path = typer.Argument(
        ..., callback=_existing_path,
        help="Path to file or folder containing XML files to extract from",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", callback=_existing_path,
        help="Path to column config (JSON or YAML). If blank the internal default is used",
    ),
    save: Path = typer.Option(Path("output.csv"), "--save", "-s", help="Path of csv file to be made"),
    log: bool = typer.Option(False, "--log", "-l", help="Log xml filepaths when parsing"),
    filter_xml: bool = typer.Option(
        False, "--filter", "-f", help="Skip files that don't end with a .xml file extension"
    ),
    on_error: ErrorPolicy = typer.Option(
        ErrorPolicy.ABORT, "--on-error", help="abort the run or skip the document on a failed column"
    ),
    error_report: Optional[Path] = typer.Option(
        None, "--error-report", help="Append skipped documents to this JSONL file"
    ),
    jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Worker processes used to parse documents"),
):
    """Extract one CSV row per XML document."""
    try:
        columns = load_columns(config)
    except XmlTabError as e:
        _fail(str(e))

    options = RunOptions(
        xml_path=xml_folder,
        filter_xml=filter_xml,
        log=log,
        on_error=on_error,
        error_report=error_report,
        jobs=jobs,
    )

    save = save.expanduser()
    try:
        save.parent.mkdir(parents=True, exist_ok=True)
        out = save.open("w", newline="", encoding="utf-8")
    except OSError as e:
        _fail(f"Failed to create csv file: '{save}': {e}")

    with out:
        try:
            summary = run_extraction(columns, options, out)
        except XmlTabError as e:
            _fail(str(e))

    msg = f"Wrote {save} ({summary.rows_written} rows)"
    if summary.skipped:
        typer.secho(f"{msg}, skipped {summary.skipped}", fg=typer.colors.YELLOW)
    else:
        typer.secho(msg, fg=typer.colors.GREEN)


# -----------------------------
# check-config
# -----------------------------

def _describe(source) -> str:
    if isinstance(source, PathExtraction):
        desc = f"{source.mode.config_key}={source.path}"
        if source.default is not None:
            desc += f" (default {source.default!r})"
        return desc
    if isinstance(source, Literal):
        return f"text={source.text!r}"
    if isinstance(source, Intrinsic):
        return f"intrinsic={source.kind.value}"
    return repr(source)


@app.command("check-config")
def check_config(config: Path = typer.Argument(..., callback=_existing_path, help="Column config to validate")):
    """Validate a column config and list its columns."""
    try:
        columns = load_columns(config)
    except XmlTabError as e:
        _fail(str(e))

    for i, c in enumerate(columns):
        typer.echo(f"{i}: {c.title}: {_describe(c.source)}")

    problems = config_problems(columns)
    if problems:
        for p in problems:
            typer.secho(p, fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)
    typer.secho(f"OK ({len(columns)} columns)", fg=typer.colors.GREEN)


# -----------------------------
# eval
# -----------------------------

@app.command("eval")
def eval_cmd(
    xml_file: Path = typer.Argument(..., callback=_existing_path, help="XML document"),
    path: str = typer.Argument(..., help="Dotted path, e.g. 'item.0.id'"),
    mode: PathMode = typer.Option(PathMode.TEXT, "--mode", "-m", help="text | len | attr"),
):
    """Evaluate one path against one document and print the value."""
    try:
        doc = load_document(xml_file)
        value = extract(doc, parse_path(path), mode)
    except XmlTabError as e:
        _fail(str(e))
    typer.echo(value)


if __name__ == "__main__":
    app()
