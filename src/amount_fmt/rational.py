"""
Fixed and significant-digit rendering for exact rationals.

`fractions.Fraction` carries no display logic of its own; these helpers put
one on top of the core contracts: round with the rational rounding core,
then render with the Decimal presentation layer.

Defaults differ from plain `decimal_format` in one respect: the integer group
separator starts as the non-breaking-space placeholder, so grouping is
invisible unless the caller overrides `group_separator`.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction

from .core import (
    NON_BREAKING_SPACE,
    AmountDomainError,
    Override,
    decimal_format,
    new_options,
    round_rational,
    with_decimal_places,
    with_group_separator,
    with_rounding_precision,
)

# Debug printing control
DEBUG_RATIONAL = False

def _dbg(msg: str) -> None:
    if DEBUG_RATIONAL:
        print(msg)


def order_of_magnitude(f: Fraction) -> int:
    """Return floor(log10(|f|)) exactly, for non-zero `f`.

      order_of_magnitude(Fraction(1234))    -> 3
      order_of_magnitude(Fraction(1, 3))    -> -1
      order_of_magnitude(Fraction(1, 1000)) -> -3
    """
    if f == 0:
        raise AmountDomainError("order_of_magnitude(): zero has no magnitude")
    n, d = abs(f.numerator), f.denominator
    # Digit-length difference is either exact or one too high.
    e = len(str(n)) - len(str(d))
    if e >= 0:
        too_high = n < d * 10 ** e
    else:
        too_high = n * 10 ** (-e) < d
    return e - 1 if too_high else e


def fraction_to_fixed(f: Fraction, decimal_places: int, *overrides: Override) -> str:
    """Round `f` to `decimal_places` digits (HALF_UP unless overridden) and render it.

    The result always carries exactly `decimal_places` fractional digits:

      fraction_to_fixed(Fraction(1, 3), 4) -> '0.3333'
      fraction_to_fixed(Fraction(2, 3), 2) -> '0.67'
      fraction_to_fixed(Fraction(5), 2)    -> '5.00'
    """
    if decimal_places < 0:
        raise AmountDomainError(f"decimal_places must be >= 0, got {decimal_places}")
    opts = new_options(
        with_group_separator(NON_BREAKING_SPACE),
        *overrides,
        with_decimal_places(decimal_places),
        with_rounding_precision(decimal_places),
    )
    rounded: Decimal = round_rational(f, opts)
    _dbg(f"fraction_to_fixed: f={f}, places={decimal_places}, rounded={rounded}")
    return decimal_format(rounded, opts)


def fraction_to_significant(f: Fraction, significant_digits: int, *overrides: Override) -> str:
    """Round `f` to `significant_digits` significant digits and render it.

    Trailing fractional zeros are dropped:

      fraction_to_significant(Fraction(1, 3), 3)    -> '0.333'
      fraction_to_significant(Fraction(123456), 2)  -> '120000'
      fraction_to_significant(Fraction(3, 2), 5)    -> '1.5'
    """
    if significant_digits < 1:
        raise AmountDomainError(f"significant_digits must be >= 1, got {significant_digits}")
    precision = 0 if f == 0 else significant_digits - 1 - order_of_magnitude(f)
    opts = new_options(
        with_group_separator(NON_BREAKING_SPACE),
        *overrides,
        with_rounding_precision(precision),
    )
    rounded: Decimal = round_rational(f, opts)
    _dbg(f"fraction_to_significant: f={f}, digits={significant_digits}, prec={precision}, rounded={rounded}")
    return decimal_format(rounded, opts)


__all__ = [
    "order_of_magnitude",
    "fraction_to_fixed",
    "fraction_to_significant",
]
