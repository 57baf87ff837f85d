"""
Top-level API for amount_fmt.

Precision-preserving formatting and rounding for monetary amounts:
  - decimal_format: display string for a Decimal (grouping, separators,
    decimal-place truncation/padding)
  - decimal_round: exact rounding to N fractional digits (DOWN/HALF_UP/UP)
  - new_options / with_*: immutable options builder
  - Percent: ratio rendered on the 0–100 scale
  - to_smallest_unit / from_smallest_unit: integer base-unit bridges
"""

from __future__ import annotations

from .core import (
    Rounding,
    Options,
    DEFAULT_OPTIONS,
    new_options,
    with_decimal_separator,
    with_group_separator,
    with_group_size,
    with_secondary_group_size,
    with_fraction_group_separator,
    with_fraction_group_size,
    with_decimal_places,
    with_rounding_mode,
    with_rounding_precision,
    decimal_round,
    decimal_format,
    format_integer_groups,
    format_fraction_groups,
    to_smallest_unit,
    from_smallest_unit,
    InvalidRoundingMode,
    InvariantViolation,
    AmountDomainError,
)
from .rational import fraction_to_fixed, fraction_to_significant
from .percent import PERCENT_100, Percent

__all__ = [
    # options
    "Rounding",
    "Options",
    "DEFAULT_OPTIONS",
    "new_options",
    "with_decimal_separator",
    "with_group_separator",
    "with_group_size",
    "with_secondary_group_size",
    "with_fraction_group_separator",
    "with_fraction_group_size",
    "with_decimal_places",
    "with_rounding_mode",
    "with_rounding_precision",
    # rounding / formatting
    "decimal_round",
    "decimal_format",
    "format_integer_groups",
    "format_fraction_groups",
    # units
    "to_smallest_unit",
    "from_smallest_unit",
    # rationals / percent
    "fraction_to_fixed",
    "fraction_to_significant",
    "PERCENT_100",
    "Percent",
    # exceptions
    "InvalidRoundingMode",
    "InvariantViolation",
    "AmountDomainError",
]
