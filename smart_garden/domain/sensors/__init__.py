"""
Domain Layer for Sensors
========================
Readings, the simulated sensor and its read statistics.
"""

from smart_garden.domain.sensors.health_status import HealthLevel, SensorHealth
from smart_garden.domain.sensors.reading import Reading, mean_reading
from smart_garden.domain.sensors.sensor_entity import Sensor, SensorFault, SensorOutcome

__all__ = [
    "HealthLevel",
    "Reading",
    "Sensor",
    "SensorFault",
    "SensorHealth",
    "SensorOutcome",
    "mean_reading",
]
