"""
Default garden roster: the sensors and plants a fresh greenhouse starts with.
"""

from __future__ import annotations

import random

from smart_garden.control_loops.garden_controller import GardenController
from smart_garden.domain.plants.plant_entity import FloweringPlant, Plant, VegetablePlant
from smart_garden.domain.sensors.sensor_entity import Sensor

DEFAULT_SENSORS = (
    ("S1", "combined"),
    ("S2", "temperature"),
    ("S3", "humidity"),
)

DEFAULT_PLANTS = (
    (VegetablePlant, "Tomato", "12.5"),
    (VegetablePlant, "Cucumber", "10.1"),
    (FloweringPlant, "Rose", "15.3"),
)


def build_default_garden(seed: int | None = None) -> GardenController:
    """
    Wire the default sensors and plants into a controller.

    Args:
        seed: Optional seed. Each sensor and the controller get their own
            random source derived from it, so runs are reproducible while
            entities stay independent.
    """
    master = random.Random(seed)

    def _rng() -> random.Random:
        return random.Random(master.getrandbits(64)) if seed is not None else random.Random()

    sensors = [Sensor(sensor_id, kind, rng=_rng()) for sensor_id, kind in DEFAULT_SENSORS]
    plants: list[Plant] = [cls(name, height) for cls, name, height in DEFAULT_PLANTS]
    return GardenController(sensors, plants, rng=_rng())
