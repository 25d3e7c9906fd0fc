"""
Sensor Reading Value Object
============================
Immutable value object representing an environmental reading, plus the
component-wise mean used to aggregate one cycle's readings.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from smart_garden.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Reading:
    """
    Immutable environmental reading.
    No identity beyond its fields.
    """

    temperature: Decimal  # °C
    humidity: Decimal  # %
    illuminance: Decimal  # lux
    timestamp: datetime

    def __str__(self) -> str:
        return (
            f"Temp: {self.temperature:.1f}°C, Humidity: {self.humidity:.1f}%, "
            f"Light: {self.illuminance:.0f} lux ({self.timestamp:%H:%M:%S})"
        )


def mean_reading(readings: Sequence[Reading], timestamp: datetime) -> Reading:
    """
    Aggregate readings into their component-wise arithmetic mean.

    Args:
        readings: Non-empty sequence of readings from one cycle
        timestamp: Time of aggregation (source timestamps are not averaged)

    Returns:
        Reading whose every component is the simple mean of that component

    Raises:
        ValidationError: If ``readings`` is empty
    """
    if not readings:
        raise ValidationError("Cannot aggregate an empty set of readings")

    count = Decimal(len(readings))
    return Reading(
        temperature=sum((r.temperature for r in readings), Decimal(0)) / count,
        humidity=sum((r.humidity for r in readings), Decimal(0)) / count,
        illuminance=sum((r.illuminance for r in readings), Decimal(0)) / count,
        timestamp=timestamp,
    )
