"""Parser primitives for numerals and their scale factors."""

from .numbers import NUMERAL, parse_numeral, strip_grouping
from .units import (
    MAGNITUDE_FACTORS,
    POUNDS_PER_KILOGRAM,
    WEIGHT_FACTORS,
    magnitude_factor,
    normalize_weight_unit,
    weight_factor,
)

__all__ = [
    "MAGNITUDE_FACTORS",
    "NUMERAL",
    "POUNDS_PER_KILOGRAM",
    "WEIGHT_FACTORS",
    "magnitude_factor",
    "normalize_weight_unit",
    "parse_numeral",
    "strip_grouping",
    "weight_factor",
]
