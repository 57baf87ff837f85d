"""
Rational rounding core.

Rounds a Decimal (or an exact Fraction) to N fractional digits using exact
integer arithmetic:

    Decimal -> Fraction -> integer divmod on the 10**N grid -> fixed-point
    string with exactly N fractional digits -> Decimal

Alignment notes:
- DOWN truncates toward zero, HALF_UP resolves ties away from zero, UP rounds
  away from zero on any non-zero remainder. Direction is applied to the
  magnitude and the sign is restored afterwards, so the three modes are
  symmetric around zero.
- N < 0 rounds to a multiple of 10**|N| and serialises without a fraction.
- No float and no Decimal context rounding on any path; `Decimal(str)` is
  exact regardless of context precision.
- Inputs are never mutated; every call returns a new value.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from fractions import Fraction

from .exc import AmountDomainError, InvalidRoundingMode, InvariantViolation
from .options import Options, Rounding

# Debug printing control
DEBUG_ROUNDING = False

def _dbg(msg: str) -> None:
    if DEBUG_ROUNDING:
        print(msg)


def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


def _check_mode(mode) -> Rounding:
    if not isinstance(mode, Rounding):
        raise InvalidRoundingMode(mode)
    return mode


def _round_quotient(q: int, r: int, den: int, mode: Rounding) -> int:
    """Apply `mode` to the non-negative quotient q with remainder r (0 <= r < den)."""
    if r == 0:
        return q
    if mode is Rounding.DOWN:
        return q
    if mode is Rounding.HALF_UP:
        return q + 1 if 2 * r >= den else q
    if mode is Rounding.UP:
        return q + 1
    # Unreachable for validated modes.
    raise InvalidRoundingMode(mode)


# ---------------------------------------------------------------------------
# Exact conversions
# ---------------------------------------------------------------------------

def decimal_to_fraction(value: Decimal) -> Fraction:
    """Exact rational form of a finite Decimal."""
    if not value.is_finite():
        raise AmountDomainError(f"decimal_to_fraction(): non-finite value {value}")
    return Fraction(value)


def round_fraction(f: Fraction, precision: int, mode: Rounding) -> Fraction:
    """Round `f` onto the 10**-precision grid under `mode`, exactly."""
    mode = _check_mode(mode)
    sign = -1 if f < 0 else 1
    mag = abs(f)
    if precision >= 0:
        num = mag.numerator * _ten_pow(precision)
        den = mag.denominator
    else:
        num = mag.numerator
        den = mag.denominator * _ten_pow(-precision)
    q, r = divmod(num, den)
    q = _round_quotient(q, r, den, mode)
    _dbg(f"round_fraction: f={f}, prec={precision}, mode={mode.name}, q={q}, r={r}, den={den}")
    if precision >= 0:
        return Fraction(sign * q, _ten_pow(precision))
    return Fraction(sign * q * _ten_pow(-precision), 1)


def fraction_to_fixed_string(f: Fraction, precision: int) -> str:
    """Serialise `f` with exactly `precision` fractional digits (none if <= 0).

    The value is assumed to already sit on the 10**-precision grid; any finer
    remainder is truncated toward zero.
    """
    sign = "-" if f < 0 else ""
    mag = abs(f)
    if precision <= 0:
        whole = mag.numerator // mag.denominator
        return f"{sign if whole else ''}{whole}"
    scaled = (mag.numerator * _ten_pow(precision)) // mag.denominator
    if scaled == 0:
        sign = ""
    whole, frac = divmod(scaled, _ten_pow(precision))
    return f"{sign}{whole}.{str(frac).zfill(precision)}"


def fraction_to_decimal(f: Fraction, precision: int) -> Decimal:
    """Reserialise a grid-aligned Fraction as a Decimal with `precision` digits."""
    s = fraction_to_fixed_string(f, precision)
    try:
        return Decimal(s)
    except InvalidOperation as e:
        raise InvariantViolation(f"rounded value {s!r} failed to reparse") from e


# ---------------------------------------------------------------------------
# Rounding entry points
# ---------------------------------------------------------------------------

def round_rational(f: Fraction, opts: Options) -> Decimal:
    """Round an exact Fraction per `opts` and return it as a Decimal."""
    mode = _check_mode(opts.rounding_mode)
    prec = opts.rounding_precision
    rounded = round_fraction(f, prec, mode)
    return fraction_to_decimal(rounded, prec)


def decimal_round(value: Decimal, opts: Options) -> Decimal:
    """Round `value` to `opts.rounding_precision` digits under `opts.rounding_mode`.

    Returns a new Decimal whose fractional-digit count equals the precision
    exactly (e.g. 2.340 -> Decimal('2.34'), 2 -> Decimal('2.00')).

    Raises InvalidRoundingMode before touching the value if the mode is not a
    `Rounding` member.
    """
    _check_mode(opts.rounding_mode)
    return round_rational(decimal_to_fraction(value), opts)


__all__ = [
    "decimal_to_fraction",
    "round_fraction",
    "fraction_to_fixed_string",
    "fraction_to_decimal",
    "round_rational",
    "decimal_round",
]
