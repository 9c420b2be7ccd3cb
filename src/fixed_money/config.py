from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from fixed_money.domain.monetary.precision import DEFAULT_DECIMAL_PLACES, Precision, set_precision

logger = logging.getLogger(__name__)

DECIMAL_PLACES_ENV_VAR = "FIXED_MONEY_DECIMAL_PLACES"


@dataclass(frozen=True)
class Settings:
    """Process settings for `fixed_money`.

    Attributes:
        decimal_places (int): Default decimal places for newly created Money.
    """

    decimal_places: int = DEFAULT_DECIMAL_PLACES


def load_settings(dotenv_path: str | Path | None = None) -> Settings:
    """Read Settings from the environment, after loading a `.env` file.

    Variables already present in the environment win over the `.env` file.

    Args:
        dotenv_path: Explicit `.env` file; when None, `.env` is searched from
            the current directory upwards.

    Returns:
        Settings: Parsed settings; missing variables keep their defaults.

    Raises:
        ValueError: If `FIXED_MONEY_DECIMAL_PLACES` is not an integer.
    """
    if dotenv_path is None:
        dotenv_path = find_dotenv(usecwd=True)
    load_dotenv(dotenv_path=dotenv_path)

    raw_places = os.environ.get(DECIMAL_PLACES_ENV_VAR)
    if raw_places is None or not raw_places.strip():
        return Settings()

    try:
        places = int(raw_places.strip())
    except ValueError as e:
        raise ValueError(f"${DECIMAL_PLACES_ENV_VAR} must be an integer, but provided value is: '{raw_places}'") from e

    result = Settings(decimal_places=places)
    return result


def apply_settings(settings: Settings) -> Precision:
    """Install $settings as process defaults and return the new default Precision.

    Raises:
        InvalidPrecisionError: If `decimal_places` < 0.
        PrecisionTooLargeError: If `decimal_places` > 18.
    """
    precision = set_precision(settings.decimal_places)
    logger.info(f"Applied Settings with $decimal_places = {settings.decimal_places}")
    return precision
