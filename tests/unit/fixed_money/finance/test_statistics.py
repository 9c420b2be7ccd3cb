from __future__ import annotations

import math

import pytest

from fixed_money.domain.monetary.errors import MoneyDomainError
from fixed_money.finance.statistics import (
    covariance,
    mean,
    regression,
    sample_standard_deviation,
    standard_deviation,
)


def test_mean():
    assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5


def test_mean_of_empty_sequence():
    with pytest.raises(MoneyDomainError):
        mean([])


def test_standard_deviation():
    assert standard_deviation([2, 4, 4, 4, 5, 5, 7, 9]) == 2.0


def test_sample_standard_deviation():
    assert sample_standard_deviation([1, 2, 3, 4]) == pytest.approx(math.sqrt(5 / 3))


def test_sample_standard_deviation_needs_two_values():
    with pytest.raises(MoneyDomainError):
        sample_standard_deviation([1.0])


def test_covariance():
    # mean(xy) = 28 / 3, mean(x) * mean(y) = 8
    assert covariance([1, 2, 3], [2, 4, 6]) == pytest.approx(4 / 3)


@pytest.mark.parametrize("x, y", [([], []), ([1.0, 2.0], [1.0])])
def test_covariance_input_errors(x, y):
    with pytest.raises(MoneyDomainError):
        covariance(x, y)


def test_regression_on_perfect_line():
    result = regression([1, 2, 3, 4], [3, 5, 7, 9])
    assert result.slope == pytest.approx(2.0)
    assert result.intercept == pytest.approx(1.0)
    assert result.r == pytest.approx(1.0)


def test_regression_negative_correlation():
    result = regression([1, 2, 3], [3, 2, 1])
    assert result.slope == pytest.approx(-1.0)
    assert result.r == pytest.approx(-1.0)


def test_regression_on_constant_series():
    with pytest.raises(MoneyDomainError):
        regression([1, 1, 1], [1, 2, 3])
