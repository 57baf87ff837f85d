"""
Percent: a ratio displayed on the 0–100 scale.

The ratio is kept as an exact Fraction; rendering multiplies by 100 exactly
and reuses the rational renderer, so rounding and grouping follow the same
options as any other amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .core import PERCENT_SCALE, Override
from .rational import fraction_to_fixed, fraction_to_significant

#: 100 as an exact rational.
PERCENT_100: Fraction = PERCENT_SCALE


@dataclass(frozen=True)
class Percent:
    """Exact ratio rendered as a percentage (Fraction(1, 4) -> '25.00')."""

    ratio: Fraction

    @classmethod
    def from_parts(cls, numerator: int, denominator: int = 1) -> "Percent":
        return cls(Fraction(numerator, denominator))

    def scaled(self) -> Fraction:
        """Return the ratio multiplied by 100."""
        return self.ratio * PERCENT_100

    def to_fixed(self, decimal_places: int, *overrides: Override) -> str:
        return fraction_to_fixed(self.scaled(), decimal_places, *overrides)

    def to_significant(self, significant_digits: int, *overrides: Override) -> str:
        return fraction_to_significant(self.scaled(), significant_digits, *overrides)


__all__ = [
    "PERCENT_100",
    "Percent",
]
