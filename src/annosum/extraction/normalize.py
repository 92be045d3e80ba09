"""Convert raw annotation matches into scaled, categorised values."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator

from ..errors import NumeralConversionError
from .parsers.numbers import parse_numeral
from .parsers.units import magnitude_factor, weight_factor
from .tokenizer import Category, RawMatch

__all__ = ["CategorizedValue", "normalize_match", "normalize_matches"]

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CategorizedValue:
    """Normalized annotation value; weight in pounds, money in units."""

    category: Category
    value: float


def _scale_for(match: RawMatch) -> float:
    if match.category is Category.WEIGHT:
        return weight_factor(match.unit or "")
    if match.category is Category.MONEY:
        return magnitude_factor(match.unit)
    return 1.0


def normalize_match(match: RawMatch) -> CategorizedValue:
    """Parse ``match.numeral_text`` and apply the scale of its notation.

    Raises :class:`NumeralConversionError` when the scaled value leaves the
    float range, e.g. ``$`` followed by 300 nines and a ``T`` suffix.
    """

    value = parse_numeral(match.numeral_text) * _scale_for(match)
    if not math.isfinite(value):
        raise NumeralConversionError(match.numeral_text, "value out of range")
    LOGGER.debug("normalized %s %r -> %s", match.category.value, match.numeral_text, value)
    return CategorizedValue(category=match.category, value=value)


def normalize_matches(matches: Iterable[RawMatch]) -> Iterator[CategorizedValue]:
    for match in matches:
        yield normalize_match(match)
