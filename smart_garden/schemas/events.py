"""
Cycle Event Schemas
===================

Pydantic models for what one controller cycle surfaces to its caller.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from smart_garden.domain.sensors.reading import Reading
from smart_garden.enums.events import CycleEventType


class ReadingPayload(BaseModel):
    """Serializable form of a Reading."""

    temperature: Decimal
    humidity: Decimal
    illuminance: Decimal
    timestamp: datetime

    @classmethod
    def from_reading(cls, reading: Reading) -> ReadingPayload:
        return cls(
            temperature=reading.temperature,
            humidity=reading.humidity,
            illuminance=reading.illuminance,
            timestamp=reading.timestamp,
        )


class CycleEvent(BaseModel):
    """A single human-readable event produced during a cycle."""

    model_config = ConfigDict(frozen=True)

    event_type: CycleEventType
    message: str
    sensor_id: str | None = None
    plant_name: str | None = None
    volume: Decimal | None = None
    reading: ReadingPayload | None = None

    def __str__(self) -> str:
        return self.message


class CycleReport(BaseModel):
    """Outcome of one ``run_cycle()`` call."""

    cycle: int = Field(..., ge=1, description="1-based cycle counter")
    events: list[CycleEvent] = Field(default_factory=list)
    aggregated: ReadingPayload | None = Field(default=None, description="None when every sensor faulted")
    volume: Decimal = Field(default=Decimal("0"), description="Irrigation volume applied to each plant")
    rain: bool = False
    fallback: bool = Field(default=False, description="True when no sensor produced a reading")
    dead_plants: list[str] = Field(default_factory=list)
    snapshot: list[str] = Field(default_factory=list)

    def events_of(self, event_type: CycleEventType) -> list[CycleEvent]:
        return [event for event in self.events if event.event_type == event_type]

    @property
    def snapshot_line(self) -> str:
        return " | ".join(self.snapshot)
