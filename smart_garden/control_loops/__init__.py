"""
Control Loops Package
=====================

The control layer of the greenhouse:

    Sensors ──read()──► GardenController ──grow()/water()──► Plants
                              │
                              ▼
                         CycleReport (events + snapshot)
"""

from smart_garden.control_loops.garden_controller import GardenController

__all__ = [
    "GardenController",
]
