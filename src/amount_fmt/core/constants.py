"""
Amount formatting constants
===========================

Default separators, group sizes and sentinels shared by the options builder,
the presentation layer and the rational renderer. Nothing here is mutable
state; `Options` values are the only runtime configuration.
"""

from fractions import Fraction

# ---------------------------------------------------------------------------
# Separators
# ---------------------------------------------------------------------------

#: Placeholder fraction separator. Removed from every formatted result, so it
#: is a safe default trim target when the caller has not picked a separator.
NON_BREAKING_SPACE: str = "\xa0"

DEFAULT_DECIMAL_SEPARATOR: str = "."
DEFAULT_GROUP_SEPARATOR: str = ","
DEFAULT_FRACTION_GROUP_SEPARATOR: str = NON_BREAKING_SPACE


# ---------------------------------------------------------------------------
# Group sizes
# ---------------------------------------------------------------------------

DEFAULT_GROUP_SIZE: int = 3

# 0 reuses the primary group size for every group left of the first.
DEFAULT_SECONDARY_GROUP_SIZE: int = 0

# 0 disables fraction grouping.
DEFAULT_FRACTION_GROUP_SIZE: int = 0


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

#: Sentinel for "no explicit rounding precision". Negative precisions round
#: to a multiple of 10**|p|, so -1 rounds to tens if it reaches the core.
ROUNDING_PRECISION_UNSET: int = -1


# ---------------------------------------------------------------------------
# Percent scale
# ---------------------------------------------------------------------------

PERCENT_SCALE: Fraction = Fraction(100, 1)


__all__ = [
    "NON_BREAKING_SPACE",
    "DEFAULT_DECIMAL_SEPARATOR",
    "DEFAULT_GROUP_SEPARATOR",
    "DEFAULT_FRACTION_GROUP_SEPARATOR",
    "DEFAULT_GROUP_SIZE",
    "DEFAULT_SECONDARY_GROUP_SIZE",
    "DEFAULT_FRACTION_GROUP_SIZE",
    "ROUNDING_PRECISION_UNSET",
    "PERCENT_SCALE",
]
