"""Typer entrypoint summing the numeric annotations of a document."""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from tqdm import tqdm

from .._version import __version__
from ..config import get_settings
from ..errors import AnnosumError, error_chain
from ..pipeline import aggregate_lines
from ..report import render_summary, summary_payload
from ..sources import describe_source, open_lines
from ..utils.logging import RunEvents, configure_json_logger

__all__ = ["app", "run"]


app = typer.Typer(help="Sum bracketed, currency and weight annotations found in text", add_completion=False)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"annosum {__version__}")
        raise typer.Exit()


def _report_error(exc: BaseException) -> None:
    messages = error_chain(exc)
    typer.echo(f"Error: {messages[0]}", err=True)
    for cause in messages[1:]:
        typer.echo(f"Caused by: {cause}", err=True)


@app.command()
def summarize(
    path: Optional[Path] = typer.Argument(
        None,
        help="Text file to scan; reads standard input when omitted or '-'",
    ),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Parallel workers scanning line chunks"),
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", min=1, help="Lines handed to a worker at once"),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Encoding of the input file"),
    as_json: bool = typer.Option(False, "--json", help="Print the sums as a JSON object"),
    progress: bool = typer.Option(False, "--progress/--no-progress", help="Show a progress bar on stderr"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="Optional JSONL log path"),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config-file",
        exists=True,
        dir_okay=False,
        readable=True,
        help="TOML/YAML configuration to use instead of environment variables",
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show annosum version and exit"
    ),
) -> None:
    """Print point, equipment and other sums for the annotations in PATH."""

    try:
        settings = get_settings(refresh=True, config_file=config_file)
    except AnnosumError as exc:
        _report_error(exc)
        raise typer.Exit(code=1) from exc

    effective_workers = workers or settings.workers
    effective_chunk = chunk_size or settings.chunk_size
    effective_encoding = encoding or settings.encoding
    events = RunEvents(configure_json_logger(log_file or settings.log_file))
    source = describe_source(path)
    events.emit(
        "summarize.start",
        source=source,
        workers=effective_workers,
        chunk_size=effective_chunk,
        encoding=effective_encoding,
    )

    line_count = 0

    def counted(lines):
        nonlocal line_count
        for line in lines:
            line_count += 1
            yield line

    try:
        lines = open_lines(path, encoding=effective_encoding)
        lines = tqdm(counted(lines), desc="Scanning", unit="line", file=sys.stderr, disable=not progress)
        result = aggregate_lines(lines, workers=effective_workers, chunk_size=effective_chunk)
    except AnnosumError as exc:
        events.emit(
            "summarize.error",
            level=logging.ERROR,
            source=source,
            error=str(exc),
            chain=error_chain(exc)[1:],
        )
        events.flush()
        _report_error(exc)
        raise typer.Exit(code=1) from exc

    events.emit("summarize.completed", source=source, lines=line_count, **summary_payload(result))
    events.flush()

    if as_json:
        typer.echo(json.dumps(summary_payload(result), indent=2, ensure_ascii=False))
        return
    for row in render_summary(result):
        typer.echo(row)


def run() -> None:
    """Entry point compatible with ``python -m annosum`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()
