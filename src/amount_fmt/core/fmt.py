"""
Decimal presentation layer.

Turns a Decimal into a display string: optional decimal-place truncation and
padding, sign handling, integer/fraction grouping and separator clean-up.

Display truncation here is *not* rounding: 1.999 shown with 2 decimal places
is "1.99". Use `decimal_round` first when a rounded display is wanted.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from .constants import NON_BREAKING_SPACE
from .exc import AmountDomainError
from .grouping import format_fraction_groups, format_integer_groups
from .options import DEFAULT_OPTIONS, Options

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------

def canonical_string(value: Decimal) -> str:
    """Plain-notation string with trailing fractional zeros removed.

      Decimal('1.50')   -> '1.5'
      Decimal('1E+3')   -> '1000'
      Decimal('0.000')  -> '0'
    """
    s = format(value, "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def truncate_string(s: str, places: int) -> str:
    """Cut a plain decimal string to at most `places` fractional digits (toward zero)."""
    whole, dot, frac = s.partition(".")
    if not dot or len(frac) <= places:
        return s
    if places <= 0:
        return whole
    return f"{whole}.{frac[:places]}"


def remove_non_breaking_space(s: str) -> str:
    return s.replace(NON_BREAKING_SPACE, "")


def _trim_trailing(s: str, sep: str) -> str:
    """Drop trailing whole copies of `sep` (not a character set, unlike rstrip)."""
    if not sep:
        return s
    while s.endswith(sep):
        s = s[:-len(sep)]
    return s


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def decimal_format(value: Decimal, opts: Optional[Options] = None) -> str:
    """Render `value` per `opts` (defaults to `DEFAULT_OPTIONS`).

      decimal_format(Decimal('-1234.5'))                      -> '-1,234.5'
      decimal_format(Decimal('1.999'), new_options(with_decimal_places(2))) -> '1.99'
    """
    if not value.is_finite():
        raise AmountDomainError(f"decimal_format(): non-finite value {value}")
    if opts is None:
        opts = DEFAULT_OPTIONS
    places = opts.decimal_places
    if places is not None and places < 0:
        places = 0

    s = canonical_string(value)
    if places is not None:
        s = truncate_string(s, places)

    if s.startswith("-"):
        s = s[1:]
    # No sign once every visible digit is zero (-0.001 at 2 places is "0.00").
    negative = value < 0 and s.strip("0.") != ""

    whole, _, frac = s.partition(".")
    _dbg(f"decimal_format: value={value}, negative={negative}, whole={whole!r}, frac={frac!r}")

    out = ("-" if negative else "") + format_integer_groups(
        whole, opts.group_size, opts.secondary_group_size, opts.group_separator
    )
    if not frac and not places:
        return remove_non_breaking_space(out)

    if places is not None:
        frac = frac.ljust(places, "0")[:places]

    out += opts.decimal_separator + format_fraction_groups(
        frac, opts.fraction_group_size, opts.fraction_group_separator
    )
    out = _trim_trailing(out, opts.fraction_group_separator)
    return remove_non_breaking_space(out)


__all__ = [
    "canonical_string",
    "truncate_string",
    "remove_non_breaking_space",
    "decimal_format",
]
