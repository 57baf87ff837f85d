import dataclasses

import pytest

from amount_fmt.core.constants import NON_BREAKING_SPACE, ROUNDING_PRECISION_UNSET
from amount_fmt.core.options import (
    DEFAULT_OPTIONS,
    Options,
    Rounding,
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


# -----------------------------
# Defaults
# -----------------------------

def test_new_options_without_overrides_equals_defaults():
    print("[options-defaults] new_options() -> equal to DEFAULT_OPTIONS field by field")
    opts = new_options()
    assert opts == DEFAULT_OPTIONS
    assert opts.decimal_separator == "."
    assert opts.group_separator == ","
    assert opts.group_size == 3
    assert opts.secondary_group_size == 0
    assert opts.fraction_group_separator == NON_BREAKING_SPACE
    assert opts.fraction_group_size == 0
    assert opts.decimal_places is None
    assert opts.rounding_mode is Rounding.HALF_UP
    assert opts.rounding_precision == ROUNDING_PRECISION_UNSET


def test_default_template_is_frozen():
    print("[options-frozen] assigning to DEFAULT_OPTIONS must raise FrozenInstanceError")
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_OPTIONS.group_size = 4  # type: ignore[misc]


def test_overrides_never_touch_default_template():
    print("[options-copy] overriding every field leaves DEFAULT_OPTIONS unchanged")
    before = dataclasses.astuple(DEFAULT_OPTIONS)
    opts = new_options(
        with_decimal_separator(","),
        with_group_separator("."),
        with_group_size(4),
        with_secondary_group_size(2),
        with_fraction_group_separator(" "),
        with_fraction_group_size(3),
        with_decimal_places(5),
        with_rounding_mode(Rounding.UP),
        with_rounding_precision(7),
    )
    print("opts ->", opts)
    assert dataclasses.astuple(DEFAULT_OPTIONS) == before
    assert opts == Options(",", ".", 4, 2, " ", 3, 5, Rounding.UP, 7)


# -----------------------------
# Override ordering and apply()
# -----------------------------

def test_later_override_wins():
    print("[options-order] group_size 2 then 5 -> expect 5; reversed -> expect 2")
    assert new_options(with_group_size(2), with_group_size(5)).group_size == 5
    assert new_options(with_group_size(5), with_group_size(2)).group_size == 2


def test_apply_returns_new_value():
    print("[options-apply] base.apply(...) returns a copy, base unchanged")
    base = new_options(with_decimal_places(2))
    derived = base.apply(with_decimal_places(4), with_group_separator("_"))
    assert base.decimal_places == 2
    assert base.group_separator == ","
    assert derived.decimal_places == 4
    assert derived.group_separator == "_"
    assert base.apply() == base


def test_plain_callable_is_a_valid_override():
    print("[options-callable] any Options -> Options callable acts as an override")
    opts = new_options(lambda o: dataclasses.replace(o, group_size=7))
    assert opts.group_size == 7


def test_no_validation_at_construction():
    print("[options-no-validation] bogus rounding mode is stored as-is")
    opts = new_options(with_rounding_mode(42))  # type: ignore[arg-type]
    assert opts.rounding_mode == 42


def test_options_equality_is_by_value():
    print("[options-identity] two builds with the same overrides compare equal")
    a = new_options(with_decimal_places(3))
    b = new_options(with_decimal_places(3))
    assert a == b and a is not b
    assert hash(a) == hash(b)
