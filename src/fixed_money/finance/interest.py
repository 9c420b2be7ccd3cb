"""Time-value-of-money formulas built on `Money`.

Formulas that take a Money as first argument change that Money in place and
return it, so they chain like the Money arithmetic methods. Scaling always
goes through `Money.mul_float`, the guarded and rounded multiply.

Rates are decimal fractions per period (0.05 for 5 %).
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from fixed_money.domain.monetary.errors import MoneyDivisionByZeroError, MoneyDomainError, MoneyOverflowError
from fixed_money.domain.monetary.money import Money
from fixed_money.domain.monetary.precision import Precision

logger = logging.getLogger(__name__)


# region Factors


def power(base: float, exponent: float) -> float:
    """Return `base ** exponent` for float arguments.

    Raises:
        MoneyDomainError: If the power is undefined for real numbers.
        MoneyOverflowError: If the result is too large for a float.
    """
    try:
        result = math.pow(base, exponent)
    except ValueError as e:
        raise MoneyDomainError(f"Cannot call `power` because {base} ** {exponent} is undefined") from e
    except OverflowError as e:
        raise MoneyOverflowError(f"Cannot call `power` because {base} ** {exponent} overflows") from e
    return result


def interest_factor(rate: float, periods: int) -> float:
    """Growth of one unit over $periods periods: `(1 + rate) ** periods`."""
    return power(1 + rate, periods)


# endregion

# region Future value


def future_value(m: Money, rate: float, periods: int) -> Money:
    """Compound interest: `fv = pv * (1 + rate) ** periods`."""
    return m.mul_float(interest_factor(rate, periods))


def future_value_simple(m: Money, rate: float, periods: int) -> Money:
    """Simple interest: `fv = pv * (1 + rate * periods)`."""
    return m.mul_float(1 + rate * periods)


def interest(m: Money, rate: float, periods: int) -> Money:
    """Principal grown by compound interest over $periods periods."""
    return m.mul_float(interest_factor(rate, periods))


def continuous_interest(pv: Money, rate: float, periods: int) -> Money:
    """Continuous compounding: `fv = pv * e ** (rate * periods)`."""
    return pv.mul_float(power(math.e, rate * periods))


def future_value_annuity(pmt: Money, rate: float, periods: int) -> Money:
    """Future value of an ordinary annuity: `fv = pmt * ((1 + rate) ** n - 1) / rate`.

    A zero $rate reduces to `pmt * n`.
    """
    if rate == 0:
        return pmt.mul_float(periods)
    return pmt.mul_float((interest_factor(rate, periods) - 1) / rate)


def future_value_growing_annuity(pmt: Money, rate: float, growth: float, periods: int) -> Money:
    """Future value of an annuity whose payment grows by $growth each period.

    `fv = pmt * ((1 + rate) ** n - (1 + growth) ** n) / (rate - growth)`, and
    `fv = pmt * n * (1 + rate) ** (n - 1)` when $rate equals $growth.
    """
    if rate == growth:
        return pmt.mul_float(periods * interest_factor(rate, periods - 1))
    return pmt.mul_float((interest_factor(rate, periods) - interest_factor(growth, periods)) / (rate - growth))


# endregion

# region Present value


def present_value(m: Money, rate: float, periods: int) -> Money:
    """Present value of a single future amount: `pv = fv / (1 + rate) ** periods`."""
    return m.mul_float(_discount(interest_factor(rate, periods), "present_value"))


def present_value_fractional(m: Money, rate: float, periods: float) -> Money:
    """Present value of a single future amount over a non-integer number of periods.

    Raises:
        MoneyDomainError: If `1 + rate` is negative and $periods is fractional.
    """
    return m.mul_float(_discount(power(1 + rate, periods), "present_value_fractional"))


def present_value_periodic(m: Money, rate: float, periods: int, periods_per_year: int) -> Money:
    """Present value with $rate compounded $periods_per_year times per period.

    `pv = fv / (1 + rate / periods_per_year) ** (periods * periods_per_year)`
    """
    # Raise: compounding frequency must be positive
    if periods_per_year < 1:
        raise MoneyDomainError(f"Cannot call `present_value_periodic` because $periods_per_year ({periods_per_year}) < 1")

    return m.mul_float(_discount(power(1 + rate / periods_per_year, periods * periods_per_year), "present_value_periodic"))


def present_value_series(
    future_values: Sequence[Money],
    rates: Sequence[float],
    periods: Sequence[float],
    precision: Precision | None = None,
) -> Money:
    """Present value of a series of cash flows: `pv = SUM(fv[t] / (1 + rate[t]) ** n[t])`.

    The input Money values are not changed.

    Args:
        future_values: Cash flows.
        rates: Discount rate per cash flow.
        periods: Time of each cash flow, in (possibly fractional) periods.
        precision: Precision of the result; defaults to the precision of the
            first cash flow, or the process default for an empty series.

    Returns:
        Money: Sum of the discounted cash flows.

    Raises:
        MoneyDomainError: If the sequences differ in length.
        MoneyOverflowError: If the running sum overflows.
    """
    # Raise: every cash flow needs a rate and a period
    if not (len(future_values) == len(rates) == len(periods)):
        raise MoneyDomainError(
            f"Cannot call `present_value_series` because lengths differ: "
            f"$future_values ({len(future_values)}), $rates ({len(rates)}), $periods ({len(periods)})"
        )

    if precision is None and future_values:
        precision = future_values[0].precision

    result = Money(0, precision)
    for fv, rate, n in zip(future_values, rates, periods):
        result.add(present_value_fractional(fv.copy(), rate, n))

    logger.debug(f"Computed present value {result} of {len(future_values)} cash flow(s)")
    return result


def present_value_annuity(pmt: Money, rate: float, periods: int) -> Money:
    """Present value of an ordinary annuity: `pv = pmt * (1 - 1 / (1 + rate) ** n) / rate`.

    A zero $rate reduces to `pmt * n`.
    """
    return pmt.mul_float(_annuity_factor(rate, periods))


def present_value_annuity_due(pmt: Money, rate: float, periods: int) -> Money:
    """Present value of an annuity paid at the start of each period."""
    return pmt.mul_float(_annuity_factor(rate, periods) * (1 + rate))


def present_value_growing_annuity(pmt: Money, rate: float, growth: float, periods: int) -> Money:
    """Present value of a growing annuity: `pv = pmt * (1 - ((1 + g) / (1 + r)) ** n) / (r - g)`.

    When $rate equals $growth it reduces to `pmt * n / (1 + rate)`.
    """
    return pmt.mul_float(_growing_annuity_factor(rate, growth, periods))


def present_value_growing_annuity_due(pmt: Money, rate: float, growth: float, periods: int) -> Money:
    """Present value of a growing annuity paid at the start of each period."""
    return pmt.mul_float(_growing_annuity_factor(rate, growth, periods) * (1 + rate))


# endregion

# region Loans and rates


def mortgage_payment(loan: Money, annual_rate: float, months: int) -> Money:
    """Monthly payment that amortizes $loan over $months at $annual_rate.

    `pmt = loan * i * (1 + i) ** n / ((1 + i) ** n - 1)` with `i = annual_rate / 12`.
    A zero rate reduces to `loan / months`.

    Raises:
        MoneyDomainError: If $months < 1.
    """
    # Raise: loan must be paid back over at least one month
    if months < 1:
        raise MoneyDomainError(f"Cannot call `mortgage_payment` because $months ({months}) < 1")

    monthly_rate = annual_rate / 12
    if monthly_rate == 0:
        return loan.set_float(loan.get() / months)

    growth = interest_factor(monthly_rate, months)
    return loan.set_float(loan.get() * monthly_rate * growth / (growth - 1))


def simple_interest(fv: Money, pv: Money) -> Money:
    """Interest earned as a new Money: `i = fv - pv`. Inputs are not changed."""
    result = fv.copy().sub(pv)
    return result


def compound_rate(fv: Money, pv: Money, periods: float) -> float:
    """Rate per period that grows $pv into $fv: `rate = (fv / pv) ** (1 / n) - 1`.

    Raises:
        MoneyDivisionByZeroError: If $pv is zero.
        MoneyDomainError: If $periods is zero or the ratio is negative with a fractional root.
    """
    # Raise: present value must not be zero
    if pv.value == 0:
        raise MoneyDivisionByZeroError(f"Cannot call `compound_rate` because $pv is zero: {pv!r}")

    # Raise: periods must not be zero
    if periods == 0:
        raise MoneyDomainError("Cannot call `compound_rate` because $periods is zero")

    ratio = fv.get() / pv.get()
    result = power(ratio, 1 / periods) - 1
    return result


# endregion

# region Utilities


def _annuity_factor(rate: float, periods: int) -> float:
    if rate == 0:
        return float(periods)
    return (1 - _discount(interest_factor(rate, periods), "present_value_annuity")) / rate


def _growing_annuity_factor(rate: float, growth: float, periods: int) -> float:
    discount = _discount(1 + rate, "present_value_growing_annuity")
    if rate == growth:
        return periods * discount
    return (1 - power((1 + growth) * discount, periods)) / (rate - growth)


def _discount(growth_factor: float, operation: str) -> float:
    """Return `1 / growth_factor`.

    Raises:
        MoneyDomainError: If  is zero, e.g. for a rate of -100 %.
    """
    # Raise: a rate of -100 % has no present value
    if growth_factor == 0:
        raise MoneyDomainError(f"Cannot call `{operation}` because the growth factor is zero (rate of -100 %)")

    return 1 / growth_factor


# endregion
