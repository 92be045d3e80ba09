"""Scale factors for weight units and money magnitude suffixes."""
from __future__ import annotations

from typing import Mapping, Optional

__all__ = [
    "MAGNITUDE_FACTORS",
    "POUNDS_PER_KILOGRAM",
    "WEIGHT_FACTORS",
    "magnitude_factor",
    "normalize_weight_unit",
    "weight_factor",
]

POUNDS_PER_KILOGRAM = 2.205
GRAMS_PER_POUND = 453.593
OUNCES_PER_POUND = 16.0

# Multipliers converting each canonical unit into pounds.
WEIGHT_FACTORS: Mapping[str, float] = {
    "lb": 1.0,
    "oz": 1.0 / OUNCES_PER_POUND,
    "kg": POUNDS_PER_KILOGRAM,
    "g": 1.0 / GRAMS_PER_POUND,
}

_WEIGHT_ALIASES = {
    "lb": "lb",
    "lbs": "lb",
    "oz": "oz",
    "kg": "kg",
    "g": "g",
}

MAGNITUDE_FACTORS: Mapping[str, float] = {
    "": 1.0,
    "K": 1e3,
    "M": 1e6,
    "B": 1e9,
    "T": 1e12,
}


def normalize_weight_unit(token: Optional[str]) -> Optional[str]:
    """Return the canonical weight unit for ``token`` (``"lbs."`` -> ``"lb"``)."""

    if token is None:
        return None
    return _WEIGHT_ALIASES.get(token.strip().rstrip("."))


def weight_factor(token: str) -> float:
    unit = normalize_weight_unit(token)
    if unit is None:
        raise ValueError(f"Unknown weight unit: {token!r}")
    return WEIGHT_FACTORS[unit]


def magnitude_factor(suffix: Optional[str]) -> float:
    key = suffix or ""
    try:
        return MAGNITUDE_FACTORS[key]
    except KeyError as exc:
        raise ValueError(f"Unknown magnitude suffix: {suffix!r}") from exc
