from __future__ import annotations

import pytest

from fixed_money.config import DECIMAL_PLACES_ENV_VAR, Settings, apply_settings, load_settings
from fixed_money.domain.monetary.errors import PrecisionTooLargeError
from fixed_money.domain.monetary.money import Money
from fixed_money.domain.monetary.precision import get_precision


@pytest.fixture
def clean_env(monkeypatch):
    """Remove the variable and restore its original state after the test, including values set by `.env` loading."""
    monkeypatch.setenv(DECIMAL_PLACES_ENV_VAR, "")
    monkeypatch.delenv(DECIMAL_PLACES_ENV_VAR)
    return monkeypatch


def test_load_settings_defaults(clean_env, tmp_path):
    assert load_settings(tmp_path / "missing.env") == Settings(decimal_places=2)


def test_load_settings_from_environment(clean_env, tmp_path):
    clean_env.setenv(DECIMAL_PLACES_ENV_VAR, " 4 ")
    assert load_settings(tmp_path / "missing.env").decimal_places == 4


def test_load_settings_from_dotenv_file(clean_env, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(f"{DECIMAL_PLACES_ENV_VAR}=6\n")
    assert load_settings(dotenv_file).decimal_places == 6


def test_environment_wins_over_dotenv_file(clean_env, tmp_path):
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text(f"{DECIMAL_PLACES_ENV_VAR}=6\n")
    clean_env.setenv(DECIMAL_PLACES_ENV_VAR, "3")
    assert load_settings(dotenv_file).decimal_places == 3


def test_load_settings_rejects_non_integer(clean_env, tmp_path):
    clean_env.setenv(DECIMAL_PLACES_ENV_VAR, "two")
    with pytest.raises(ValueError):
        load_settings(tmp_path / "missing.env")


def test_apply_settings_installs_default_precision():
    precision = apply_settings(Settings(decimal_places=4))
    assert precision.places == 4
    assert get_precision() == precision
    assert Money.from_float(1.5).value == 15000


def test_apply_settings_rejects_invalid_places():
    with pytest.raises(PrecisionTooLargeError):
        apply_settings(Settings(decimal_places=19))
    assert get_precision().places == 2


def test_load_settings_finds_dotenv_in_working_directory(clean_env, tmp_path):
    """Without an explicit path, `.env` is looked up from the current working directory."""
    (tmp_path / ".env").write_text(f"{DECIMAL_PLACES_ENV_VAR}=6\n")
    clean_env.chdir(tmp_path)
    assert load_settings().decimal_places == 6
