"""
Amount Formatting Core
======================

Exact-arithmetic primitives for rendering and rounding monetary amounts.
All rounding is performed on `fractions.Fraction` with integer arithmetic;
`decimal.Decimal` is the value type at the edges and is never mutated.
"""

# Defaults and sentinels
from .constants import (
    NON_BREAKING_SPACE,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUP_SEPARATOR,
    DEFAULT_FRACTION_GROUP_SEPARATOR,
    DEFAULT_GROUP_SIZE,
    DEFAULT_SECONDARY_GROUP_SIZE,
    DEFAULT_FRACTION_GROUP_SIZE,
    ROUNDING_PRECISION_UNSET,
    PERCENT_SCALE,
)

# Options builder
from .options import (
    Rounding,
    Options,
    Override,
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
)

# Rounding core
from .rounding import (
    decimal_to_fraction,
    round_fraction,
    fraction_to_decimal,
    round_rational,
    decimal_round,
)

# Grouping and presentation
from .grouping import format_integer_groups, format_fraction_groups
from .fmt import canonical_string, decimal_format, remove_non_breaking_space

# Smallest-unit bridges
from .units import to_smallest_unit, from_smallest_unit

# Core exceptions
from .exc import InvalidRoundingMode, InvariantViolation, AmountDomainError

__all__ = [
    # constants
    "NON_BREAKING_SPACE",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_GROUP_SEPARATOR",
    "DEFAULT_FRACTION_GROUP_SEPARATOR",
    "DEFAULT_GROUP_SIZE",
    "DEFAULT_SECONDARY_GROUP_SIZE",
    "DEFAULT_FRACTION_GROUP_SIZE",
    "ROUNDING_PRECISION_UNSET",
    "PERCENT_SCALE",
    # options
    "Rounding",
    "Options",
    "Override",
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
    # rounding
    "decimal_to_fraction",
    "round_fraction",
    "fraction_to_decimal",
    "round_rational",
    "decimal_round",
    # formatting
    "format_integer_groups",
    "format_fraction_groups",
    "canonical_string",
    "decimal_format",
    "remove_non_breaking_space",
    # units
    "to_smallest_unit",
    "from_smallest_unit",
    # exceptions
    "InvalidRoundingMode",
    "InvariantViolation",
    "AmountDomainError",
]
