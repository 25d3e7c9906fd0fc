"""
Sensor Domain Entity
====================
Simulated environmental sensor with a per-call fault model.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from decimal import Decimal

from smart_garden.constants import SENSOR_FAULT_PROBABILITY, SensorRanges
from smart_garden.domain.exceptions import ValidationError
from smart_garden.domain.sensors.reading import Reading
from smart_garden.utils.time import Clock, utc_now

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SensorFault:
    """Outcome of a read on a sensor that did not answer this call."""

    sensor_id: str

    @property
    def message(self) -> str:
        return f"Sensor '{self.sensor_id}' is not responding!"

    def __str__(self) -> str:
        return self.message


SensorOutcome = Reading | SensorFault


def _uniform(rng: random.Random, bounds: tuple[Decimal, Decimal]) -> Decimal:
    low, high = bounds
    return low + Decimal(str(rng.random())) * (high - low)


@dataclass
class Sensor:
    """
    Simulated sensor.

    Each sensor owns its random source, so fault trials and values stay
    independent across sensors. Inject ``rng`` (anything with a
    ``random()`` method) and ``clock`` to make reads reproducible.
    """

    sensor_id: str
    kind: str
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)
    clock: Clock = field(default=utc_now, repr=False, compare=False)

    def __post_init__(self):
        if not self.sensor_id:
            raise ValidationError("Sensor id must not be empty")

    def read(self) -> SensorOutcome:
        """
        Take one reading.

        The fault trial is drawn fresh on every call (never sticky).

        Returns:
            Reading on success, SensorFault when the sensor did not answer.
        """
        if self.rng.random() < SENSOR_FAULT_PROBABILITY:
            logger.debug("Sensor %s (%s) failed to answer", self.sensor_id, self.kind)
            return SensorFault(self.sensor_id)

        return Reading(
            temperature=_uniform(self.rng, SensorRanges.TEMPERATURE),
            humidity=_uniform(self.rng, SensorRanges.HUMIDITY),
            illuminance=_uniform(self.rng, SensorRanges.ILLUMINANCE),
            timestamp=self.clock(),
        )
