"""
Domain Package
==============
Entities, value objects and outcome values of the greenhouse.
"""

from .exceptions import ConfigurationError, GardenError, ValidationError
from .irrigation import apply_rain, base_volume
from .plants import FloweringPlant, Plant, PlantDeath, VegetablePlant
from .sensors import HealthLevel, Reading, Sensor, SensorFault, SensorHealth, mean_reading

__all__ = [
    # Errors
    "ConfigurationError",
    "GardenError",
    "ValidationError",
    # Irrigation
    "apply_rain",
    "base_volume",
    # Plants
    "FloweringPlant",
    "Plant",
    "PlantDeath",
    "VegetablePlant",
    # Sensors
    "HealthLevel",
    "Reading",
    "Sensor",
    "SensorFault",
    "SensorHealth",
    "mean_reading",
]
