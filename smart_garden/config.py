"""
Configuration for Smart Garden
==============================
Runtime settings for the simulation driver, loaded from environment
variables. Sets up the logging configuration as well.

Irrigation and growth thresholds are fixed policy and live in
``smart_garden.constants``; they are intentionally not read from here.
"""

import logging
import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler

from smart_garden.domain.exceptions import ConfigurationError

CONSOLE_HANDLER_NAME = "smart_garden_console"
FILE_HANDLER_NAME = "smart_garden_file"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int | None) -> int | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(
            f"Environment variable {name} must be an integer.", detail={"name": name, "value": value}
        ) from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(
            f"Environment variable {name} must be a number.", detail={"name": name, "value": value}
        ) from None


@dataclass
class GardenConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("SMART_GARDEN_ENV", "development"))
    DEBUG: bool = field(default_factory=lambda: _env_bool("SMART_GARDEN_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("SMART_GARDEN_LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("SMART_GARDEN_LOG_FILE", "logs/smart_garden.log"))

    # Driver loop
    cycles: int = field(default_factory=lambda: _env_int("SMART_GARDEN_CYCLES", 5))
    cycle_delay_seconds: float = field(default_factory=lambda: _env_float("SMART_GARDEN_CYCLE_DELAY", 0.5))
    random_seed: int | None = field(default_factory=lambda: _env_int("SMART_GARDEN_SEED", None))

    def __post_init__(self):
        if self.cycles < 1:
            raise ConfigurationError("cycles must be at least 1", detail={"cycles": self.cycles})
        if self.cycle_delay_seconds < 0:
            raise ConfigurationError(
                "cycle_delay_seconds must not be negative",
                detail={"cycle_delay_seconds": self.cycle_delay_seconds},
            )


def setup_logging(debug: bool = False, log_file: str | None = None, level: str = "INFO") -> None:
    """Setup logging configuration."""
    log_level = logging.DEBUG if debug else logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ConfigurationError(f"Unknown log level: {level}", detail={"level": level})

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid duplicate handlers when the driver is started more than once in a process
    has_console = any(getattr(h, "name", "") == CONSOLE_HANDLER_NAME for h in root.handlers)
    has_file = any(getattr(h, "name", "") == FILE_HANDLER_NAME for h in root.handlers)
    added_handler = False

    # Console handler (force UTF-8 so the bloom marker survives Windows terminals)
    stream = sys.stderr
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter(LOG_FORMAT)

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = CONSOLE_HANDLER_NAME
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if log_file and not has_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = FILE_HANDLER_NAME
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    for handler in root.handlers:
        if getattr(handler, "name", "") in {CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME}:
            handler.setLevel(log_level)

    if added_handler:
        root.info("Logging initialized at level: %s", logging.getLevelName(log_level))


def load_config(**overrides) -> GardenConfig:
    """Helper for callers to load and validate configuration.

    Fields passed in ``overrides`` take precedence and their environment
    variables are not read.
    """
    return GardenConfig(**overrides)
