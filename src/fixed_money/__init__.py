__version__ = "0.1.0"

from fixed_money.domain.monetary import (
    Money,
    MoneyError,
    Precision,
    get_precision,
    round_half_away,
    set_precision,
)

__all__ = ["Money", "MoneyError", "Precision", "get_precision", "round_half_away", "set_precision"]
