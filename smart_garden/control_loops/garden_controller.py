"""
GardenController: runs the greenhouse decision cycle.

One call to :meth:`GardenController.run_cycle` polls every sensor, averages
the readings that came back, derives an irrigation volume from humidity,
then grows, waters and checks each plant in turn.

Sensor faults and plant deaths are expected, per-item outcomes. They are
surfaced as events and never abort the cycle.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from smart_garden.constants import RAIN_PROBABILITY, IrrigationPolicy
from smart_garden.domain.irrigation import apply_rain, base_volume
from smart_garden.domain.plants.plant_entity import Plant, PlantDeath
from smart_garden.domain.sensors.health_status import SensorHealth
from smart_garden.domain.sensors.reading import Reading, mean_reading
from smart_garden.domain.sensors.sensor_entity import Sensor, SensorFault
from smart_garden.enums.events import CycleEventType
from smart_garden.schemas.events import CycleEvent, CycleReport, ReadingPayload
from smart_garden.utils.time import Clock, utc_now

logger = logging.getLogger(__name__)


class GardenController:
    """
    GardenController owns the sensors and plants of one greenhouse.

    Responsibilities:
    - Polling: reads sensors in their fixed order, tolerating faults.
    - Policy: aggregates readings and picks the irrigation volume.
    - Plants: applies growth and watering, reports deaths.
    """

    def __init__(
        self,
        sensors: Sequence[Sensor],
        plants: Sequence[Plant],
        rng: random.Random | None = None,
        clock: Clock = utc_now,
    ):
        """
        Initialize the controller.

        Args:
            sensors: Sensors, polled in this order every cycle
            plants: Plants, updated in this order every cycle
            rng: Random source for the rain trial (a private one if not provided)
            clock: Time source for aggregated readings
        """
        self._sensors = tuple(sensors)
        self._plants = tuple(plants)
        self._rng = rng or random.Random()
        self._clock = clock
        self._cycle = 0
        self._sensor_health = {s.sensor_id: SensorHealth(sensor_id=s.sensor_id) for s in self._sensors}

        logger.info(
            "GardenController initialized with %d sensors and %d plants",
            len(self._sensors),
            len(self._plants),
        )

    @property
    def sensors(self) -> tuple[Sensor, ...]:
        return self._sensors

    @property
    def plants(self) -> tuple[Plant, ...]:
        return self._plants

    @property
    def cycle_count(self) -> int:
        return self._cycle

    def sensor_health(self) -> dict[str, SensorHealth]:
        """Read statistics per sensor id."""
        return dict(self._sensor_health)

    # ==================== Cycle ====================

    def run_cycle(self) -> CycleReport:
        """Run one full decision cycle and return what happened."""
        self._cycle += 1
        report = CycleReport(cycle=self._cycle)
        logger.info("Cycle %d started", self._cycle)
        self._emit(report, CycleEventType.CYCLE_STARTED, f"=== Cycle {self._cycle} started ===")

        readings = self._poll_sensors(report)

        if not readings:
            self._fallback_watering(report)
        else:
            aggregated = mean_reading(readings, self._clock())
            report.aggregated = ReadingPayload.from_reading(aggregated)
            self._emit(
                report,
                CycleEventType.AGGREGATED_READING,
                f"Average readings: {aggregated}",
                reading=report.aggregated,
            )

            report.volume = self._irrigation_volume(aggregated, report)
            for plant in self._plants:
                death = self._update_plant(plant, aggregated, report.volume, report)
                if death is not None:
                    report.dead_plants.append(death.plant_name)

            report.snapshot = [plant.render() for plant in self._plants]
            self._emit(report, CycleEventType.SNAPSHOT, f"Greenhouse snapshot: {report.snapshot_line}")

        self._emit(report, CycleEventType.CYCLE_FINISHED, f"=== Cycle {self._cycle} finished ===")
        logger.info(
            "Cycle %d finished (readings=%d, volume=%s, rain=%s, fallback=%s)",
            self._cycle,
            len(readings),
            report.volume,
            report.rain,
            report.fallback,
        )
        return report

    def _poll_sensors(self, report: CycleReport) -> list[Reading]:
        readings: list[Reading] = []
        for sensor in self._sensors:
            outcome = sensor.read()
            health = self._sensor_health[sensor.sensor_id]

            if isinstance(outcome, SensorFault):
                health.record_read(success=False)
                logger.warning("%s (consecutive faults: %d)", outcome.message, health.consecutive_faults)
                self._emit(
                    report,
                    CycleEventType.SENSOR_FAULT,
                    f"Sensor error: {outcome.message}",
                    sensor_id=sensor.sensor_id,
                )
                continue

            health.record_read(success=True)
            readings.append(outcome)
            self._emit(
                report,
                CycleEventType.SENSOR_READING,
                f"Sensor {sensor.sensor_id}: {outcome}",
                sensor_id=sensor.sensor_id,
                reading=ReadingPayload.from_reading(outcome),
            )
        return readings

    def _fallback_watering(self, report: CycleReport) -> None:
        """No sensor answered: water everything a little and skip growth."""
        volume = IrrigationPolicy.FALLBACK_VOLUME
        report.fallback = True
        report.volume = volume
        logger.info("No sensor data in cycle %d, applying fallback watering of %s", self._cycle, volume)

        for plant in self._plants:
            plant.water(volume)
            self._emit(
                report,
                CycleEventType.FALLBACK_WATERING,
                f"No sensor data! Watered {plant}",
                plant_name=plant.name,
                volume=volume,
            )

    def _irrigation_volume(self, aggregated: Reading, report: CycleReport) -> Decimal:
        volume = base_volume(aggregated.humidity)

        # One rain trial per cycle, shared by every plant.
        if self._rng.random() < RAIN_PROBABILITY:
            volume = apply_rain(volume)
            report.rain = True
            logger.info("Rain in cycle %d, irrigation reduced to %s", self._cycle, volume)
            self._emit(report, CycleEventType.RAIN, "It's raining, reducing irrigation!", volume=volume)

        return volume

    def _update_plant(
        self,
        plant: Plant,
        aggregated: Reading,
        volume: Decimal,
        report: CycleReport,
    ) -> PlantDeath | None:
        plant.grow(aggregated)

        if volume > 0:
            plant.water(volume)
            self._emit(
                report,
                CycleEventType.PLANT_WATERED,
                f"Watered {plant.name} with {volume} l. Current state: {plant}",
                plant_name=plant.name,
                volume=volume,
            )
        else:
            self._emit(
                report,
                CycleEventType.WATERING_SKIPPED,
                f"Watering {plant.name} not required. {plant}",
                plant_name=plant.name,
            )
        logger.debug("Plant updated: %s", plant)

        death = plant.death_outcome()
        if death is not None:
            logger.error("Critical: %s", death.message)
            self._emit(
                report,
                CycleEventType.PLANT_DEATH,
                f"Critical error: {death.message}",
                plant_name=plant.name,
            )
        return death

    @staticmethod
    def _emit(report: CycleReport, event_type: CycleEventType, message: str, **fields: Any) -> None:
        report.events.append(CycleEvent(event_type=event_type, message=message, **fields))
