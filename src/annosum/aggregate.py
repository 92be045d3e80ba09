"""Per-category running sums and their merge operation."""
from __future__ import annotations

from typing import Dict, Iterable

from pydantic import BaseModel, ConfigDict, Field

from .extraction.normalize import CategorizedValue
from .extraction.parsers.units import POUNDS_PER_KILOGRAM
from .extraction.tokenizer import Category

__all__ = ["AggregateResult"]


class AggregateResult(BaseModel):
    """Immutable record of the seven category sums.

    Instances are combined with :meth:`merge` (per-field addition), so partial
    results computed over disjoint line ranges can be folded in any order.
    """

    model_config = ConfigDict(frozen=True)

    points: float = Field(0.0, description="Sum of non-negative bracket annotations")
    disads: float = Field(0.0, description="Sum of negative bracket annotations")
    angle: float = Field(0.0, description="Sum of <n> annotations")
    curly: float = Field(0.0, description="Sum of {n} annotations")
    pipe: float = Field(0.0, description="Sum of |n| annotations")
    money: float = Field(0.0, description="Sum of $ annotations after magnitude scaling")
    weight: float = Field(0.0, description="Sum of weight annotations in pounds")

    @property
    def total_points(self) -> float:
        return self.points + self.disads

    @property
    def weight_kg(self) -> float:
        return self.weight / POUNDS_PER_KILOGRAM

    def add(self, item: CategorizedValue) -> "AggregateResult":
        """Return a copy with ``item`` folded into its category sum."""

        field = item.category.value
        return self.model_copy(update={field: getattr(self, field) + item.value})

    def merge(self, other: "AggregateResult") -> "AggregateResult":
        return AggregateResult(
            **{category.value: getattr(self, category.value) + getattr(other, category.value) for category in Category}
        )

    def __add__(self, other: object) -> "AggregateResult":
        if not isinstance(other, AggregateResult):
            return NotImplemented
        return self.merge(other)

    @classmethod
    def from_values(cls, values: Iterable[CategorizedValue]) -> "AggregateResult":
        sums: Dict[str, float] = {category.value: 0.0 for category in Category}
        for item in values:
            sums[item.category.value] += item.value
        return cls(**sums)
