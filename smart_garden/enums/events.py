from enum import Enum


class CycleEventType(str, Enum):
    """Events surfaced by one controller cycle, in the order they can occur."""

    CYCLE_STARTED = "cycle_started"
    SENSOR_READING = "sensor_reading"
    SENSOR_FAULT = "sensor_fault"
    FALLBACK_WATERING = "fallback_watering"
    AGGREGATED_READING = "aggregated_reading"
    RAIN = "rain"
    PLANT_WATERED = "plant_watered"
    WATERING_SKIPPED = "watering_skipped"
    PLANT_DEATH = "plant_death"
    SNAPSHOT = "snapshot"
    CYCLE_FINISHED = "cycle_finished"

    def __str__(self):
        return self.value
