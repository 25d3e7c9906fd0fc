import logging

import pytest

from smart_garden.config import (
    CONSOLE_HANDLER_NAME,
    FILE_HANDLER_NAME,
    GardenConfig,
    load_config,
    setup_logging,
)
from smart_garden.domain.exceptions import ConfigurationError

ENV_VARS = (
    "SMART_GARDEN_ENV",
    "SMART_GARDEN_DEBUG",
    "SMART_GARDEN_LOG_LEVEL",
    "SMART_GARDEN_LOG_FILE",
    "SMART_GARDEN_CYCLES",
    "SMART_GARDEN_CYCLE_DELAY",
    "SMART_GARDEN_SEED",
)


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_run_five_short_cycles():
    config = load_config()
    assert config.cycles == 5
    assert config.cycle_delay_seconds == 0.5
    assert config.random_seed is None
    assert config.DEBUG is False
    assert config.environment == "development"


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("SMART_GARDEN_CYCLES", "12")
    monkeypatch.setenv("SMART_GARDEN_CYCLE_DELAY", "0")
    monkeypatch.setenv("SMART_GARDEN_SEED", "42")
    monkeypatch.setenv("SMART_GARDEN_DEBUG", "yes")
    config = GardenConfig()
    assert config.cycles == 12
    assert config.cycle_delay_seconds == 0.0
    assert config.random_seed == 42
    assert config.DEBUG is True


@pytest.mark.parametrize(
    "name, value",
    [
        ("SMART_GARDEN_CYCLES", "five"),
        ("SMART_GARDEN_CYCLES", "0"),
        ("SMART_GARDEN_CYCLE_DELAY", "soon"),
        ("SMART_GARDEN_CYCLE_DELAY", "-1"),
        ("SMART_GARDEN_SEED", "abc"),
    ],
)
def test_invalid_values_raise_configuration_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        load_config()


def test_overrides_skip_their_environment_variables(monkeypatch):
    monkeypatch.setenv("SMART_GARDEN_CYCLES", "0")
    monkeypatch.setenv("SMART_GARDEN_SEED", "7")
    config = load_config(cycles=3)
    assert config.cycles == 3
    assert config.random_seed == 7


def test_overrides_are_still_validated():
    with pytest.raises(ConfigurationError):
        load_config(cycle_delay_seconds=-1)


def _named_handlers(name):
    return [h for h in logging.getLogger().handlers if getattr(h, "name", "") == name]


def test_setup_logging_does_not_duplicate_handlers(tmp_path, clean_logging):
    log_file = tmp_path / "logs" / "garden.log"
    setup_logging(log_file=str(log_file))
    setup_logging(log_file=str(log_file))

    assert len(_named_handlers(CONSOLE_HANDLER_NAME)) == 1
    assert len(_named_handlers(FILE_HANDLER_NAME)) == 1
    assert log_file.exists()


def test_setup_logging_debug_overrides_level(clean_logging):
    setup_logging(debug=True, level="WARNING")
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_rejects_unknown_level(clean_logging):
    with pytest.raises(ConfigurationError):
        setup_logging(level="LOUD")
