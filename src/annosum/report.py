"""Render an :class:`AggregateResult` as the three-line summary or as JSON."""
from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Dict, List

from .aggregate import AggregateResult

__all__ = ["format_float", "format_grouped", "render_summary", "summary_payload"]


def format_float(value: float) -> str:
    """Shortest round-trip rendering without exponent or trailing ``.0``."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_grouped(value: float, places: int = 2) -> str:
    """Comma-grouped rendering with a fixed number of decimals."""

    return f"{value:,.{places}f}"


def render_summary(result: AggregateResult) -> List[str]:
    return [
        f"{format_float(result.total_points)} points ({format_float(result.disads)} disadvantages)",
        (
            f"Equipment: ${format_grouped(result.money)}, "
            f"{format_grouped(result.weight)} lbs. ({format_grouped(result.weight_kg)} kg.)"
        ),
        (
            f"Other sums: <{format_float(result.angle)}> "
            f"{{{format_float(result.curly)}}} |{format_float(result.pipe)}|"
        ),
    ]


def summary_payload(result: AggregateResult) -> Dict[str, Any]:
    payload: Dict[str, Any] = result.model_dump()
    payload["total_points"] = result.total_points
    payload["weight_kg"] = result.weight_kg
    return payload
