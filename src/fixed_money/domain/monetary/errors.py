"""Errors raised by monetary arithmetic and precision configuration.

Each error also derives from the closest builtin exception, so callers can
catch either `MoneyError` or the builtin category (e.g. `ZeroDivisionError`).
"""


class MoneyError(ArithmeticError):
    """Base class for all errors raised by `fixed_money`."""


class MoneyOverflowError(MoneyError, OverflowError):
    """Raised when a raw value cannot be represented as a signed 64-bit integer."""


class InvalidPrecisionError(MoneyError, ValueError):
    """Raised when the requested number of decimal places is negative."""


class PrecisionTooLargeError(MoneyError, ValueError):
    """Raised when the requested number of decimal places exceeds `MAX_DECIMAL_PLACES`."""


class MoneyDivisionByZeroError(MoneyError, ZeroDivisionError):
    """Raised when dividing by a zero Money."""


class MoneyDomainError(MoneyError, ValueError):
    """Raised when an input lies outside the mathematical domain of an operation."""
