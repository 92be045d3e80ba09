"""Exception hierarchy shared by the scanner, the input sources and the CLI."""
from __future__ import annotations

from typing import List

__all__ = [
    "AnnosumError",
    "ConfigurationError",
    "InputSourceError",
    "NumeralConversionError",
    "error_chain",
]


class AnnosumError(Exception):
    """Base class for every failure that aborts a summarization run."""


class InputSourceError(AnnosumError):
    """The input file or stream could not be opened, read or decoded."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class NumeralConversionError(AnnosumError, ValueError):
    """A matched numeral could not be converted to a finite float."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        message = f"Cannot convert numeral {text!r} to a number"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.text = text


class ConfigurationError(AnnosumError):
    """Invalid configuration document or setting value."""


def error_chain(exc: BaseException) -> List[str]:
    """Return the messages of ``exc`` and of every exception it was raised from."""

    messages: List[str] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        messages.append(str(current) or type(current).__name__)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return messages
