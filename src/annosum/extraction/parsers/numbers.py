"""Utilities to parse comma-grouped numerals found inside annotations."""
from __future__ import annotations

import math
import re

from ...errors import NumeralConversionError

__all__ = ["NUMERAL", "SIGNED_NUMERAL", "parse_numeral", "strip_grouping"]

# ASCII digits only; comma groups are cosmetic and their width is not validated.
NUMERAL = r"(?:[0-9]{1,3},)*[0-9]*\.?[0-9]+"
SIGNED_NUMERAL = rf"-?{NUMERAL}"

_GROUPING = re.compile(r",")
_ASCII_NUMERAL = re.compile(r"-?[0-9]*\.?[0-9]+")


def strip_grouping(raw: str) -> str:
    """Remove thousands separators from ``raw``."""

    return _GROUPING.sub("", raw)


def parse_numeral(raw: str) -> float:
    """Parse a comma-grouped, dot-decimal numeral into a finite float.

    Raises :class:`NumeralConversionError` when the text is not an ASCII
    decimal numeral once the separators are gone, or when it overflows the
    float range.
    """

    candidate = strip_grouping(raw).strip()
    if not _ASCII_NUMERAL.fullmatch(candidate):
        raise NumeralConversionError(raw, "not an ASCII decimal numeral")
    value = float(candidate)
    if not math.isfinite(value):
        raise NumeralConversionError(raw, "value out of range")
    return value
