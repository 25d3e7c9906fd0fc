"""
Shared test fixtures for the Smart Garden test suite.

Provides:
- Scripted random sources so fault, value and rain trials are deterministic
- Reading factories and a fixed clock
- Scripted sensors returning predetermined outcomes

Usage:
    def test_example(scripted_random, make_reading):
        rng = scripted_random(0.5, 0.05)
        reading = make_reading(humidity=34)
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from smart_garden.config import CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME
from smart_garden.domain.sensors.reading import Reading
from smart_garden.domain.sensors.sensor_entity import SensorFault

# ---------------------------------------------------------------------------
# Logging — keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("smart_garden").setLevel(logging.WARNING)

FIXED_NOW = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class ScriptedRandom(random.Random):
    """Random source whose ``random()`` returns a fixed script of values."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def random(self):
        if not self._values:
            raise AssertionError("ScriptedRandom exhausted: unexpected random() call")
        return self._values.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._values)


class ScriptedSensor:
    """Sensor stand-in returning predetermined outcomes, one per read()."""

    def __init__(self, sensor_id: str, outcomes, kind: str = "combined"):
        self.sensor_id = sensor_id
        self.kind = kind
        self._outcomes = list(outcomes)
        self.reads = 0

    def read(self):
        self.reads += 1
        if len(self._outcomes) == 1:
            return self._outcomes[0]
        return self._outcomes.pop(0)


# ========================== Fixtures ======================================


@pytest.fixture()
def fixed_now():
    return FIXED_NOW


@pytest.fixture()
def scripted_random():
    """Factory: ``scripted_random(0.5, 0.05)``."""

    def _factory(*values):
        return ScriptedRandom(values)

    return _factory


@pytest.fixture()
def make_reading():
    """Factory building a Reading from plain numbers (favourable defaults)."""

    def _factory(temperature="20", humidity="50", illuminance="30000", timestamp=FIXED_NOW):
        return Reading(
            temperature=Decimal(str(temperature)),
            humidity=Decimal(str(humidity)),
            illuminance=Decimal(str(illuminance)),
            timestamp=timestamp,
        )

    return _factory


@pytest.fixture()
def scripted_sensor():
    """Factory: ``scripted_sensor("S1", reading, fault)``; the last outcome repeats."""

    def _factory(sensor_id, *outcomes, kind="combined"):
        return ScriptedSensor(sensor_id, outcomes, kind=kind)

    return _factory


@pytest.fixture()
def fault():
    """Factory for SensorFault outcomes."""

    def _factory(sensor_id):
        return SensorFault(sensor_id)

    return _factory


@pytest.fixture()
def clean_logging():
    """Remove handlers installed by setup_logging after the test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if getattr(handler, "name", "") in {CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME}:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
