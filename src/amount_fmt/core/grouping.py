"""
Digit grouping for the integer and fractional parts of a formatted amount.

Both helpers work on plain ASCII digit strings that have already been
rounded/truncated and stripped of their sign.

- Integer part: grouped from the right. The rightmost group has
  `group_size` digits; groups to its left use `secondary_group_size` when
  non-zero (e.g. 12,34,567 with sizes 3/2). No separator after the last group.
- Fraction part: grouped from the left in fixed-width groups, and *every*
  group is followed by the separator. The caller trims the trailing one.
"""

from __future__ import annotations

from typing import List


def format_integer_groups(
    digits: str,
    group_size: int,
    secondary_group_size: int,
    separator: str,
) -> str:
    """Group integer digits from the right.

    Returns "" when `group_size <= 1` (the integer part is dropped entirely,
    not merely left ungrouped). Returns `digits` unchanged when it fits in a
    single group.

      format_integer_groups("1234567", 3, 0, ",") -> "1,234,567"
      format_integer_groups("1234567", 3, 2, ",") -> "12,34,567"
    """
    if group_size <= 1:
        return ""
    n = len(digits)
    if group_size >= n:
        return digits

    head_len = n - group_size
    step = secondary_group_size if secondary_group_size > 0 else group_size

    groups: List[str] = []
    pos = head_len % step
    if pos:
        groups.append(digits[:pos])
    while pos < head_len:
        groups.append(digits[pos:pos + step])
        pos += step
    groups.append(digits[head_len:])
    return separator.join(groups)


def format_fraction_groups(digits: str, group_size: int, separator: str) -> str:
    """Group fraction digits from the left, one separator after every group.

    Returns `digits` unchanged when `group_size == 0`.

      format_fraction_groups("123456", 2, "-") -> "12-34-56-"
      format_fraction_groups("12345", 2, "-")  -> "12-34-5-"
    """
    if group_size == 0:
        return digits
    return "".join(
        digits[pos:pos + group_size] + separator
        for pos in range(0, len(digits), group_size)
    )


__all__ = [
    "format_integer_groups",
    "format_fraction_groups",
]
