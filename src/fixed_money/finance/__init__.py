"""Financial formulas built on the fixed-point `Money` type."""

from fixed_money.finance.interest import (
    compound_rate,
    continuous_interest,
    future_value,
    future_value_annuity,
    future_value_growing_annuity,
    future_value_simple,
    interest,
    interest_factor,
    mortgage_payment,
    power,
    present_value,
    present_value_annuity,
    present_value_annuity_due,
    present_value_fractional,
    present_value_growing_annuity,
    present_value_growing_annuity_due,
    present_value_periodic,
    present_value_series,
    simple_interest,
)
from fixed_money.finance.options import OptionKind, black_scholes, normal_cdf
from fixed_money.finance.statistics import (
    RegressionResult,
    covariance,
    mean,
    regression,
    sample_standard_deviation,
    standard_deviation,
)

__all__ = [
    "OptionKind",
    "RegressionResult",
    "black_scholes",
    "compound_rate",
    "continuous_interest",
    "covariance",
    "future_value",
    "future_value_annuity",
    "future_value_growing_annuity",
    "future_value_simple",
    "interest",
    "interest_factor",
    "mean",
    "mortgage_payment",
    "normal_cdf",
    "power",
    "present_value",
    "present_value_annuity",
    "present_value_annuity_due",
    "present_value_fractional",
    "present_value_growing_annuity",
    "present_value_growing_annuity_due",
    "present_value_periodic",
    "present_value_series",
    "regression",
    "sample_standard_deviation",
    "simple_interest",
    "standard_deviation",
]
