"""
Sensor Health Status
====================
Tracks how reliably a simulated sensor has been answering.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from smart_garden.constants import SENSOR_OFFLINE_AFTER_FAULTS


class HealthLevel(str, Enum):
    """Health status levels"""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    OFFLINE = "offline"
    UNKNOWN = "unknown"


@dataclass
class SensorHealth:
    """
    Sensor read statistics, updated by the controller on every poll.
    """

    sensor_id: str
    consecutive_faults: int = 0
    total_reads: int = 0
    successful_reads: int = 0
    failed_reads: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate percentage"""
        if self.total_reads == 0:
            return 0.0
        return (self.successful_reads / self.total_reads) * 100

    @property
    def level(self) -> HealthLevel:
        if self.total_reads == 0:
            return HealthLevel.UNKNOWN
        if self.consecutive_faults >= SENSOR_OFFLINE_AFTER_FAULTS:
            return HealthLevel.OFFLINE
        if self.consecutive_faults > 0:
            return HealthLevel.DEGRADED
        return HealthLevel.HEALTHY

    def record_read(self, success: bool) -> None:
        """Record a read attempt"""
        self.total_reads += 1
        if success:
            self.successful_reads += 1
            self.consecutive_faults = 0
        else:
            self.failed_reads += 1
            self.consecutive_faults += 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary"""
        return {
            "sensor_id": self.sensor_id,
            "level": self.level.value,
            "consecutive_faults": self.consecutive_faults,
            "total_reads": self.total_reads,
            "successful_reads": self.successful_reads,
            "failed_reads": self.failed_reads,
            "success_rate": round(self.success_rate, 2),
        }
