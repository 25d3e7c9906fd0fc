"""
Enums Module
============

Enumeration types shared across the Smart Garden package.
"""

from smart_garden.enums.events import CycleEventType
from smart_garden.enums.growth import HealthState, PlantVariant

__all__ = [
    # Event enums
    "CycleEventType",
    # Growth enums
    "HealthState",
    "PlantVariant",
]
