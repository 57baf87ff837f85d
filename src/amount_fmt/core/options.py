"""
Formatting and rounding options (immutable, incrementally overridable).

- `Options` is a frozen record; every override returns a new value.
- `DEFAULT_OPTIONS` is the process-wide template. It is built once and never
  mutated: `new_options()` folds overrides over a copy of it.
- Overrides are plain callables `Options -> Options`; the `with_*` factories
  below build the common ones. Later overrides win.
- No validation happens here. An unknown rounding mode is only rejected when
  the options reach the rounding core.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, Callable, Optional

from .constants import (
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUP_SEPARATOR,
    DEFAULT_GROUP_SIZE,
    DEFAULT_SECONDARY_GROUP_SIZE,
    DEFAULT_FRACTION_GROUP_SEPARATOR,
    DEFAULT_FRACTION_GROUP_SIZE,
    ROUNDING_PRECISION_UNSET,
)


class Rounding(IntEnum):
    """Closed set of rounding policies understood by the rounding core."""

    DOWN = 0     # toward zero
    HALF_UP = 1  # nearest, ties away from zero
    UP = 2       # away from zero on any remainder


@dataclass(frozen=True)
class Options:
    """Formatting and rounding tunables.

    Fields:
    - decimal_separator: separates integer and fractional parts.
    - group_separator: inserted between integer-part groups.
    - group_size: width of each integer group (0/1 drops the integer part).
    - secondary_group_size: width of groups left of the first (0 = group_size).
    - fraction_group_separator: inserted between fraction groups.
    - fraction_group_size: width of fraction groups (0 disables).
    - decimal_places: pad/truncate the fraction to exactly this length.
    - rounding_mode: used only by the rounding core.
    - rounding_precision: fractional digits to round to (-1 = unset).
    """

    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    group_separator: str = DEFAULT_GROUP_SEPARATOR
    group_size: int = DEFAULT_GROUP_SIZE
    secondary_group_size: int = DEFAULT_SECONDARY_GROUP_SIZE
    fraction_group_separator: str = DEFAULT_FRACTION_GROUP_SEPARATOR
    fraction_group_size: int = DEFAULT_FRACTION_GROUP_SIZE
    decimal_places: Optional[int] = None
    # Not validated here; the rounding core rejects non-Rounding values.
    rounding_mode: Any = Rounding.HALF_UP
    rounding_precision: int = ROUNDING_PRECISION_UNSET

    def apply(self, *overrides: "Override") -> "Options":
        """Return a copy with `overrides` applied in order."""
        opts = self
        for override in overrides:
            opts = override(opts)
        return opts


Override = Callable[[Options], Options]

#: Process-wide default template (frozen; copy-before-override only).
DEFAULT_OPTIONS: Options = Options()


def new_options(*overrides: Override) -> Options:
    """Build options from `DEFAULT_OPTIONS` and the given overrides."""
    return DEFAULT_OPTIONS.apply(*overrides)


# ---------------------------------------------------------------------------
# Override factories
# ---------------------------------------------------------------------------

def _setter(**changes: Any) -> Override:
    def _apply(opts: Options) -> Options:
        return replace(opts, **changes)
    return _apply


def with_decimal_separator(decimal_separator: str) -> Override:
    return _setter(decimal_separator=decimal_separator)


def with_group_separator(group_separator: str) -> Override:
    return _setter(group_separator=group_separator)


def with_group_size(group_size: int) -> Override:
    return _setter(group_size=group_size)


def with_secondary_group_size(secondary_group_size: int) -> Override:
    return _setter(secondary_group_size=secondary_group_size)


def with_fraction_group_separator(fraction_group_separator: str) -> Override:
    return _setter(fraction_group_separator=fraction_group_separator)


def with_fraction_group_size(fraction_group_size: int) -> Override:
    return _setter(fraction_group_size=fraction_group_size)


def with_decimal_places(decimal_places: int) -> Override:
    return _setter(decimal_places=decimal_places)


def with_rounding_mode(mode: Rounding) -> Override:
    return _setter(rounding_mode=mode)


def with_rounding_precision(precision: int) -> Override:
    return _setter(rounding_precision=precision)


__all__ = [
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
]
