"""Line suppliers reading from a named file or from standard input."""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Iterator, Optional, TextIO

from .errors import InputSourceError

__all__ = ["STDIN_MARKER", "describe_source", "open_lines"]

STDIN_MARKER = "-"


def describe_source(path: Optional[str | os.PathLike[str]]) -> str:
    if path is None or str(path) == STDIN_MARKER:
        return "<stdin>"
    return str(path)


def _iter_stream(handle: TextIO, source: str) -> Iterator[str]:
    try:
        for line in handle:
            yield line.rstrip("\r\n")
    except UnicodeDecodeError as exc:
        raise InputSourceError(f"Cannot decode {source}", source=source) from exc
    except OSError as exc:
        raise InputSourceError(f"Cannot read from {source}", source=source) from exc


def open_lines(
    path: Optional[str | os.PathLike[str]] = None,
    *,
    encoding: str = "utf-8",
) -> Iterator[str]:
    """Yield the lines of ``path`` (or stdin for ``None``/``"-"``) without newlines."""

    source = describe_source(path)
    if path is None or str(path) == STDIN_MARKER:
        yield from _iter_stream(sys.stdin, source)
        return

    file_path = Path(path)
    try:
        handle = file_path.open("r", encoding=encoding)
    except FileNotFoundError as exc:
        raise InputSourceError(f"Input file '{file_path}' does not exist", source=source) from exc
    except IsADirectoryError as exc:
        raise InputSourceError(f"Input path '{file_path}' is a directory", source=source) from exc
    except LookupError as exc:
        raise InputSourceError(f"Unknown encoding '{encoding}' for {source}", source=source) from exc
    except OSError as exc:
        raise InputSourceError(f"Cannot open input file '{file_path}'", source=source) from exc

    with handle:
        yield from _iter_stream(handle, source)
