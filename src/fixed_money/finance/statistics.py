from __future__ import annotations

import math
from typing import NamedTuple, Sequence

from fixed_money.domain.monetary.errors import MoneyDomainError


class RegressionResult(NamedTuple):
    """Least-squares line `y = intercept + slope * x` and its correlation coefficient."""

    intercept: float
    slope: float
    r: float


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean.

    Raises:
        MoneyDomainError: If $values is empty.
    """
    # Raise: mean of nothing is undefined
    if len(values) == 0:
        raise MoneyDomainError("Cannot call `mean` because $values is empty")

    return sum(values) / len(values)


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation: `sqrt(SUM((v - mean) ** 2) / n)`."""
    m = mean(values)
    variance = sum((v - m) ** 2 for v in values) / len(values)
    return math.sqrt(variance)


def sample_standard_deviation(values: Sequence[float]) -> float:
    """Sample standard deviation: `sqrt(SUM((v - mean) ** 2) / (n - 1))`.

    Raises:
        MoneyDomainError: If fewer than 2 values are given.
    """
    # Raise: sample deviation needs at least two observations
    if len(values) < 2:
        raise MoneyDomainError(f"Cannot call `sample_standard_deviation` because $values has {len(values)} element(s), at least 2 required")

    m = mean(values)
    variance = sum((v - m) ** 2 for v in values) / (len(values) - 1)
    return math.sqrt(variance)


def covariance(x: Sequence[float], y: Sequence[float]) -> float:
    """Population covariance: `mean(x * y) - mean(x) * mean(y)`.

    Raises:
        MoneyDomainError: If $x is empty or $x and $y differ in length.
    """
    _check_paired(x, y, "covariance")
    xy = [a * b for a, b in zip(x, y)]
    return mean(xy) - mean(x) * mean(y)


def regression(x: Sequence[float], y: Sequence[float]) -> RegressionResult:
    """Ordinary least-squares regression of $y on $x.

    Raises:
        MoneyDomainError: If inputs are empty, differ in length, or either
            series is constant (slope or correlation undefined).
    """
    _check_paired(x, y, "regression")

    n = len(x)
    sum_x = sum(x)
    sum_y = sum(y)
    sum_xy = sum(a * b for a, b in zip(x, y))
    sum_x_sq = sum(a**2 for a in x)
    sum_y_sq = sum(b**2 for b in y)

    s1 = n * sum_xy - sum_x * sum_y
    p1 = n * sum_x_sq - sum_x**2
    q1 = n * sum_y_sq - sum_y**2

    # Raise: a constant series has no slope or correlation
    if p1 == 0 or q1 == 0:
        raise MoneyDomainError("Cannot call `regression` because $x or $y is constant")

    slope = s1 / p1
    intercept = (sum_y - slope * sum_x) / n
    r = s1 / (math.sqrt(p1) * math.sqrt(q1))
    return RegressionResult(intercept=intercept, slope=slope, r=r)


def _check_paired(x: Sequence[float], y: Sequence[float], operation: str) -> None:
    # Raise: at least one pair is needed
    if len(x) == 0:
        raise MoneyDomainError(f"Cannot call `{operation}` because $x is empty")

    # Raise: every x needs its y
    if len(x) != len(y):
        raise MoneyDomainError(f"Cannot call `{operation}` because $x ({len(x)}) and $y ({len(y)}) differ in length")
