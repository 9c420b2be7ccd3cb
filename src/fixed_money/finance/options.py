from __future__ import annotations

import math
from enum import Enum

from fixed_money.domain.monetary.errors import MoneyDomainError


class OptionKind(Enum):
    """European option type."""

    CALL = "c"
    PUT = "p"


def normal_cdf(x: float) -> float:
    """Cumulative distribution function of the standard normal distribution."""
    return 0.5 * (1 + math.erf(x / math.sqrt(2)))


def black_scholes(spot: float, strike: float, years: float, rate: float, volatility: float, kind: OptionKind) -> float:
    """Theoretical premium of a European option on a non-dividend paying stock.

    `call = S * N(d1) - K * e ** (-r * t) * N(d2)`
    `put  = K * e ** (-r * t) * N(-d2) - S * N(-d1)`

    with `d1 = (ln(S / K) + (r + v ** 2 / 2) * t) / (v * sqrt(t))` and
    `d2 = d1 - v * sqrt(t)`.

    Args:
        spot: Spot price of the underlying.
        strike: Strike price.
        years: Time to expiry in years.
        rate: Risk-free rate as decimal fraction.
        volatility: Annualized volatility (sigma).
        kind: CALL or PUT.

    Returns:
        Premium per unit of underlying.

    Raises:
        MoneyDomainError: If $spot, $strike, $years or $volatility is not
            positive, or $kind is not an OptionKind.
    """
    # Raise: the model is only defined for positive inputs
    for name, arg in (("spot", spot), ("strike", strike), ("years", years), ("volatility", volatility)):
        if arg <= 0:
            raise MoneyDomainError(f"Cannot call `black_scholes` because ${name} ({arg}) <= 0")

    # Raise: kind must be a known option type
    if not isinstance(kind, OptionKind):
        raise MoneyDomainError(f"Cannot call `black_scholes` because $kind must be an OptionKind, but provided value is: {kind!r}")

    vol_sqrt_t = volatility * math.sqrt(years)
    d1 = (math.log(spot / strike) + (rate + volatility**2 / 2) * years) / vol_sqrt_t
    d2 = d1 - vol_sqrt_t
    discounted_strike = strike * math.exp(-rate * years)

    if kind is OptionKind.CALL:
        return spot * normal_cdf(d1) - discounted_strike * normal_cdf(d2)
    return discounted_strike * normal_cdf(-d2) - spot * normal_cdf(-d1)
