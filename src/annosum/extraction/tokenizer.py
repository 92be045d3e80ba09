"""Composite grammar recognising the inline numeric annotation notations."""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional

from .parsers.numbers import NUMERAL, SIGNED_NUMERAL

__all__ = ["ANNOTATION_PATTERN", "Category", "RawMatch", "iter_annotations", "scan_annotations"]


class Category(str, Enum):
    """Semantic tag assigned to a matched numeral."""

    POINTS = "points"
    DISADS = "disads"
    ANGLE = "angle"
    CURLY = "curly"
    PIPE = "pipe"
    MONEY = "money"
    WEIGHT = "weight"


# Alternatives are disjoint by delimiter; the money suffix is greedy so
# "$5K" never stops at "$5".
ANNOTATION_PATTERN = re.compile(
    rf"""
    \[ (?P<points>{NUMERAL}) \]                                  |
    \[ (?P<disads>-{NUMERAL}) \]                                 |
     < (?P<angle>{SIGNED_NUMERAL}) >                             |
    \{{ (?P<curly>{SIGNED_NUMERAL}) \}}                          |
    \| (?P<pipe>{SIGNED_NUMERAL}) \|                             |
       (?P<weight>{NUMERAL}) \s* (?P<weight_unit>lbs?|oz|kg|g)\. |
    \$ (?P<money>{SIGNED_NUMERAL}) (?P<magnitude>[TBMK])?
    """,
    re.VERBOSE,
)

_CATEGORY_GROUPS = (
    (Category.POINTS, None),
    (Category.DISADS, None),
    (Category.ANGLE, None),
    (Category.CURLY, None),
    (Category.PIPE, None),
    (Category.WEIGHT, "weight_unit"),
    (Category.MONEY, "magnitude"),
)


@dataclass(frozen=True)
class RawMatch:
    """Single annotation occurrence located in a line of text."""

    category: Category
    numeral_text: str
    start: int
    end: int
    unit: Optional[str] = None


def _to_raw_match(match: re.Match[str]) -> RawMatch:
    for category, unit_group in _CATEGORY_GROUPS:
        numeral = match.group(category.value)
        if numeral is None:
            continue
        unit = match.group(unit_group) if unit_group else None
        return RawMatch(
            category=category,
            numeral_text=numeral,
            start=match.start(),
            end=match.end(),
            unit=unit,
        )
    raise AssertionError(f"Annotation match without a category group: {match.group(0)!r}")


def iter_annotations(line: str) -> Iterator[RawMatch]:
    """Yield the annotations of ``line`` left to right, without overlaps."""

    for match in ANNOTATION_PATTERN.finditer(line):
        yield _to_raw_match(match)


def scan_annotations(line: str) -> List[RawMatch]:
    return list(iter_annotations(line))
