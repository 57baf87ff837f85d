import pytest

from amount_fmt.core.grouping import format_integer_groups, format_fraction_groups


# -----------------------------
# Integer groups
# -----------------------------

@pytest.mark.parametrize(
    "digits,size,secondary,sep,expected",
    [
        ("1234567", 3, 0, ",", "1,234,567"),
        ("123456", 3, 0, ",", "123,456"),
        ("1234", 3, 0, ",", "1,234"),
        ("123", 3, 0, ",", "123"),
        ("12", 3, 0, ",", "12"),
        ("0", 3, 0, ",", "0"),
        ("1234567", 3, 2, ",", "12,34,567"),
        ("123456789", 3, 2, ",", "12,34,56,789"),
        ("12345678", 4, 0, " ", "1234 5678"),
        ("123456789", 2, 0, ".", "1.23.45.67.89"),
    ],
)
def test_format_integer_groups(digits, size, secondary, sep, expected):
    out = format_integer_groups(digits, size, secondary, sep)
    print(f"[int-groups] {digits!r} size={size}/{secondary} -> {out!r}")
    assert out == expected


@pytest.mark.parametrize("size", [0, 1])
def test_integer_grouping_disabled_drops_digits(size):
    print(f"[int-groups-disabled] group_size={size} -> expect empty string")
    assert format_integer_groups("1234567", size, 0, ",") == ""


def test_group_size_larger_than_digits_is_single_group():
    print("[int-groups-single] group_size >= len(digits) -> digits unchanged, no separator")
    assert format_integer_groups("12345", 5, 0, ",") == "12345"
    assert format_integer_groups("12345", 9, 2, ",") == "12345"


@pytest.mark.parametrize("digits", ["1", "12", "1234567", "9876543210123", "1000000000000000000000"])
def test_integer_grouping_strips_back_to_original(digits):
    print(f"[int-groups-idempotence] group then strip separators -> {digits!r}")
    for size, secondary in [(3, 0), (3, 2), (4, 0), (2, 3)]:
        grouped = format_integer_groups(digits, size, secondary, ",")
        assert grouped.replace(",", "") == digits


# -----------------------------
# Fraction groups
# -----------------------------

def test_fraction_groups_trailing_separator():
    print("[frac-groups] '123456' size=2 sep='-' -> '12-34-56-' (trim -> '12-34-56')")
    out = format_fraction_groups("123456", 2, "-")
    assert out == "12-34-56-"
    assert out.rstrip("-") == "12-34-56"


@pytest.mark.parametrize(
    "digits,size,expected",
    [
        ("12345", 2, "12-34-5-"),
        ("12345", 3, "123-45-"),
        ("1", 3, "1-"),
        ("", 3, ""),
    ],
)
def test_fraction_groups_remainder_last(digits, size, expected):
    out = format_fraction_groups(digits, size, "-")
    print(f"[frac-groups-remainder] {digits!r} size={size} -> {out!r}")
    assert out == expected


def test_fraction_grouping_disabled_returns_digits():
    print("[frac-groups-disabled] size=0 -> digits unchanged")
    assert format_fraction_groups("123456", 0, "-") == "123456"
