from __future__ import annotations

import pytest

from fixed_money.domain.monetary.precision import DEFAULT_DECIMAL_PLACES, set_precision


@pytest.fixture(autouse=True)
def default_precision():
    """Every test starts and ends with the default Precision of 2 decimal places."""
    set_precision(DEFAULT_DECIMAL_PLACES)
    yield
    set_precision(DEFAULT_DECIMAL_PLACES)
