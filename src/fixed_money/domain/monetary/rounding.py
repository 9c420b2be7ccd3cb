from __future__ import annotations

# Remainders at or beyond one half (in magnitude) round away from zero
HALF = 0.5


def round_half_away(truncated: int, remainder: float) -> int:
    """Round a truncated quotient using the fractional part that was cut off.

    The true value is `truncated + remainder`, and $remainder carries the sign
    of the overall value. A remainder of exactly one half rounds away from zero
    in both directions; smaller remainders are dropped.

    Args:
        truncated: Result truncated toward zero.
        remainder: Fractional part of the un-truncated result, in (-1, 1).

    Returns:
        Rounded integer.

    Examples:
        >>> round_half_away(999, 0.5)
        1000
        >>> round_half_away(0, -0.5)
        -1
        >>> round_half_away(7, 0.49)
        7
    """
    if remainder >= HALF:
        return truncated + 1
    if remainder <= -HALF:
        return truncated - 1
    return truncated
