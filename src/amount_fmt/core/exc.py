"""
Core exception types for amount_fmt.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "InvalidRoundingMode",
    "InvariantViolation",
    "AmountDomainError",
]


class InvalidRoundingMode(ValueError):
    """Raised when a rounding entry point receives a mode outside `Rounding`.

    Attributes
    ----------
    mode : Any
        The rejected value, as found on the options record.
    """

    def __init__(self, mode):
        super().__init__(f"invalid rounding mode: {mode!r}")
        self.mode = mode


class InvariantViolation(Exception):
    """Raised when the rounding step produces output that cannot be reparsed."""
    pass


class AmountDomainError(Exception):
    """Raised when inputs violate basic preconditions (e.g. negative decimals)."""
    pass
