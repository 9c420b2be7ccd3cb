from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `float`, but other types are also acceptable (and will be converted to `float`)
FloatLike: TypeAlias = float | int | str | Decimal

# Signed 64-bit range of a raw Money value
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_int64(value: int) -> bool:
    """Check whether $value fits into a signed 64-bit integer."""
    return INT64_MIN <= value <= INT64_MAX


def wrap_int64(value: int) -> int:
    """Wrap an arbitrary Python int into signed 64-bit two's complement.

    Examples:
        >>> wrap_int64(2**63)
        -9223372036854775808
        >>> wrap_int64(-1)
        -1
    """
    result = ((value - INT64_MIN) % 2**64) + INT64_MIN
    return result


def add_overflows(a: int, b: int, result: int) -> bool:
    """Detect signed overflow of `a + b` from the signs of the wrapped $result.

    Overflow happened when $result differs in sign from both operands.
    """
    return (result ^ a) & (result ^ b) < 0


def sub_overflows(a: int, b: int, result: int) -> bool:
    """Detect signed overflow of `a - b` from the signs of the wrapped $result.

    Overflow happened when $result differs in sign from $a while $b shares the sign of $result.
    """
    return (result ^ a) & ~(result ^ b) < 0


def trunc_div(a: int, b: int) -> int:
    """Integer division truncating toward zero.

    Python's `//` floors, which differs from truncation for operands of mixed sign.

    Examples:
        >>> trunc_div(7, 2)
        3
        >>> trunc_div(-7, 2)
        -3
    """
    quotient = abs(a) // abs(b)
    result = quotient if (a < 0) == (b < 0) else -quotient
    return result


# Note: No `as_float` function is provided; use the builtin `float()` directly
