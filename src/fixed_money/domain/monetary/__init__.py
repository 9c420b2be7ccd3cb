"""Monetary domain package.

This package contains the fixed-point Money type, the Precision configuration
it is bound to, and the half-away-from-zero rounding both rely on.
"""

from fixed_money.domain.monetary.errors import (
    InvalidPrecisionError,
    MoneyDivisionByZeroError,
    MoneyDomainError,
    MoneyError,
    MoneyOverflowError,
    PrecisionTooLargeError,
)
from fixed_money.domain.monetary.money import Money
from fixed_money.domain.monetary.precision import (
    GUARD,
    MAX_DECIMAL_PLACES,
    Precision,
    get_precision,
    precision_context,
    set_precision,
)
from fixed_money.domain.monetary.rounding import round_half_away

__all__ = [
    "GUARD",
    "MAX_DECIMAL_PLACES",
    "InvalidPrecisionError",
    "Money",
    "MoneyDivisionByZeroError",
    "MoneyDomainError",
    "MoneyError",
    "MoneyOverflowError",
    "Precision",
    "PrecisionTooLargeError",
    "get_precision",
    "precision_context",
    "round_half_away",
    "set_precision",
]
