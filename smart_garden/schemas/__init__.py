"""
Schemas Module
==============

Pydantic models for data the controller hands back to its caller.
"""

from smart_garden.schemas.events import CycleEvent, CycleReport, ReadingPayload

__all__ = [
    "CycleEvent",
    "CycleReport",
    "ReadingPayload",
]
