"""topn CLI — typer entry point."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Optional

import click
from dotenv import load_dotenv
import typer

# Load .env from cwd before typer reads TOPN_* env vars
load_dotenv(Path.cwd() / ".env")
from rich.console import Console

from topn.errors import NOT_FOUND, AccessError, ArgumentError, ConfigError
from topn.formatters import get_formatter, list_formatters
from topn.models import ScanStats
from topn.parse import parse_count
from topn.scan import find_top_n_records
from topn.settings import load_settings

USAGE = "Usage: topn <filepath> <N>"

app = typer.Typer(
    name="topn",
    help="Print the N highest-scoring records of a '<score>: <json>' line file.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _fail(message: str, code: int) -> typer.Exit:
    err_console.print(message, markup=False, highlight=False, soft_wrap=True)
    return typer.Exit(code)


@app.command()
def topn(
    filepath: Annotated[Path, typer.Argument(help="Input file, one '<score>: <json>' record per line")],
    n: Annotated[str, typer.Argument(metavar="N", help="How many records to keep")],
    fmt: Annotated[Optional[str], typer.Option(
        "-f", "--format", envvar="TOPN_FORMAT",
        help=f"Output format ({', '.join(sorted(list_formatters()))})",
    )] = None,
    indent: Annotated[Optional[int], typer.Option(envvar="TOPN_INDENT", help="Indent for JSON output")] = None,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Print scan counters to stderr")] = False,
) -> None:
    """Scan FILEPATH once and print its top N records, highest score first."""
    try:
        count = parse_count(n)
    except ArgumentError as exc:
        raise _fail(str(exc), 1) from None

    try:
        settings = load_settings()
    except ConfigError as exc:
        raise _fail(f"Error: {exc}", 1) from None

    overrides: dict[str, Any] = {}
    if fmt is not None:
        overrides["format"] = fmt
    if indent is not None:
        overrides["indent"] = indent
    settings = settings.model_copy(update=overrides)

    try:
        formatter = get_formatter(settings.format)
    except KeyError as exc:
        raise _fail(f"Error: {exc.args[0]}", 1) from None

    stats = ScanStats()
    try:
        records = find_top_n_records(filepath, count, stats)
    except AccessError as exc:
        raise _fail(f"Error: {exc}", 1 if exc.kind == NOT_FOUND else 2) from None
    except Exception as exc:
        raise _fail(f"Error: {exc}", 2) from None

    if verbose:
        err_console.print(
            f"[dim]Scanned {stats.lines} lines ({stats.blank_lines} blank), "
            f"{stats.records} records: kept {len(records)}, "
            f"evicted {stats.evicted}, rejected {stats.rejected}[/]",
            soft_wrap=True,
        )
    formatter.write(records, console, settings)


def main() -> None:
    """Console-script entry point; usage errors exit 1 instead of click's 2."""
    try:
        code = app(standalone_mode=False)
    except click.UsageError:
        err_console.print(USAGE, markup=False, highlight=False, soft_wrap=True)
        raise SystemExit(1) from None
    raise SystemExit(code or 0)


if __name__ == "__main__":
    main()
