from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from threading import Lock
from typing import Iterator

from fixed_money.domain.monetary.errors import InvalidPrecisionError, PrecisionTooLargeError

logger = logging.getLogger(__name__)

# Largest scale `10 ** places` that still fits into a signed 64-bit integer
MAX_DECIMAL_PLACES = 18
DEFAULT_DECIMAL_PLACES = 2

# Extra scratch digits for the float factor of `Money.mul_float`, never stored
GUARD = 100


@dataclass(frozen=True)
class Precision:
    """Immutable decimal-precision configuration bound to Money values.

    A raw Money integer `M` represents the decimal amount `M / scale`, where
    `scale = 10 ** places`.

    Attributes:
        places (int): Number of decimal places (0-18).
    """

    places: int

    def __post_init__(self) -> None:
        _validate_places(self.places)

    # region Factory

    @classmethod
    def from_places(cls, places: int) -> Precision:
        """Create a Precision with $places decimal places.

        Args:
            places (int): Number of decimal places.

        Returns:
            Precision: Validated configuration.

        Raises:
            TypeError: If $places is not an int.
            InvalidPrecisionError: If $places < 0.
            PrecisionTooLargeError: If $places > 18.
        """
        return cls(places)

    # endregion

    # region Derived multipliers

    @property
    def scale(self) -> int:
        """Integer scale factor `10 ** places`."""
        return 10**self.places

    @property
    def scale_float(self) -> float:
        """Float equivalent of `scale`."""
        return float(self.scale)

    @property
    def guard(self) -> int:
        return GUARD

    @property
    def guard_float(self) -> float:
        return float(GUARD)

    # endregion

    def __str__(self) -> str:
        return f"{self.places} dp"


def _validate_places(places: int) -> None:
    # Raise: places must be a plain int (bool is rejected)
    if not isinstance(places, int) or isinstance(places, bool):
        raise TypeError(f"$places must be an int, but provided value is: {places!r}")

    # Raise: places must not be negative
    if places < 0:
        raise InvalidPrecisionError(f"Decimal places cannot be less than zero, but provided $places is: {places}")

    # Raise: places must fit into the signed 64-bit scale
    if places > MAX_DECIMAL_PLACES:
        raise PrecisionTooLargeError(f"Decimal places too large; maximum is {MAX_DECIMAL_PLACES}, but provided $places is: {places}")


# region Process default

_default_precision = Precision(DEFAULT_DECIMAL_PLACES)
_default_lock = Lock()


def get_precision() -> Precision:
    """Return the process-wide default Precision bound to newly created Money."""
    return _default_precision


def set_precision(places: int) -> Precision:
    """Replace the process-wide default Precision.

    Only Money created afterwards picks up the new default; existing Money keep
    the Precision they were created with. If validation fails, the previous
    default stays in effect.

    Args:
        places (int): Number of decimal places (0-18).

    Returns:
        Precision: The newly installed default.

    Raises:
        TypeError: If $places is not an int.
        InvalidPrecisionError: If $places < 0.
        PrecisionTooLargeError: If $places > 18.
    """
    global _default_precision

    new_precision = Precision.from_places(places)
    with _default_lock:
        old_precision = _default_precision
        _default_precision = new_precision

    logger.info(f"Changed default Precision from {old_precision} to {new_precision}")
    return new_precision


@contextmanager
def precision_context(places: int) -> Iterator[Precision]:
    """Install a default Precision for the duration of a `with` block.

    The previous default is restored on exit, also when the block raises.
    """
    previous = get_precision()
    precision = set_precision(places)
    try:
        yield precision
    finally:
        set_precision(previous.places)


# endregion
