"""
Smallest-unit bridges (token amount <-> integer base units, e.g. ETH <-> wei).

- to_smallest_unit: Decimal amount -> integer units. The amount is first put
  on the 10**-decimals grid by the rounding core (DOWN by default, so an
  outgoing amount is never inflated), then scaled exactly.
- from_smallest_unit: integer units -> Decimal amount, exact (1 wei at
  18 decimals is Decimal('1E-18'), never truncated to zero).
"""

from __future__ import annotations

from decimal import Decimal
from typing import Union

from .exc import AmountDomainError
from .options import Rounding, new_options, with_rounding_mode, with_rounding_precision
from .rounding import decimal_round

# Debug printing control
DEBUG_UNITS = False

def _dbg(msg: str) -> None:
    if DEBUG_UNITS:
        print(msg)


def _check_decimals(decimals: int) -> None:
    if not isinstance(decimals, int) or decimals < 0:
        raise AmountDomainError(f"decimals must be a non-negative int, got {decimals!r}")


def to_smallest_unit(amount: Decimal, decimals: int, mode: Rounding = Rounding.DOWN) -> int:
    """Convert `amount` to integer base units with `decimals` fractional digits.

      to_smallest_unit(Decimal('1.5'), 18)                 -> 1500000000000000000
      to_smallest_unit(Decimal('0.0000001'), 6)            -> 0
      to_smallest_unit(Decimal('0.0000001'), 6, Rounding.UP) -> 1
    """
    _check_decimals(decimals)
    opts = new_options(with_rounding_mode(mode), with_rounding_precision(decimals))
    rounded = decimal_round(amount, opts)
    # `rounded` has exactly `decimals` fractional digits: its coefficient is the unit count.
    sign, digits, _ = rounded.as_tuple()
    units = int("".join(str(d) for d in digits)) if digits else 0
    _dbg(f"to_smallest_unit: amount={amount}, decimals={decimals}, rounded={rounded}, units={units}")
    return -units if sign else units


def from_smallest_unit(value: Union[int, str], decimals: int) -> Decimal:
    """Convert integer base units (or their base-10 string) back to a Decimal amount."""
    _check_decimals(decimals)
    if isinstance(value, str):
        try:
            value = int(value, 10)
        except ValueError as e:
            raise AmountDomainError(f"from_smallest_unit: not an integer string: {value!r}") from e
    elif not isinstance(value, int):
        raise AmountDomainError("from_smallest_unit: value must be int or str")
    # Shift the exponent on the tuple form; scaleb() would round to context precision.
    sign, digits, exponent = Decimal(value).as_tuple()
    return Decimal((sign, digits, exponent - decimals))


__all__ = [
    "to_smallest_unit",
    "from_smallest_unit",
]
