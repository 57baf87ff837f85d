from __future__ import annotations
from typing import Callable

import pytest

from amount_fmt.core import (
    Options,
    Rounding,
    new_options,
    with_group_separator,
    with_rounding_mode,
    with_rounding_precision,
)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def default_opts() -> Options:
    return new_options()


@pytest.fixture()
def ungrouped_opts() -> Options:
    """Integer part kept whole: grouping still runs but inserts nothing visible."""
    return new_options(with_group_separator(""))


@pytest.fixture()
def round_opts() -> Callable[[Rounding, int], Options]:
    def _make(mode: Rounding, precision: int) -> Options:
        return new_options(with_rounding_mode(mode), with_rounding_precision(precision))
    return _make
