"""
Growth-related Enumerations
============================

This module contains all enums related to plants and their health.
"""

from __future__ import annotations

from enum import Enum


class PlantVariant(str, Enum):
    """Plant families with their own growth rules"""

    VEGETABLE = "vegetable"
    FLOWERING = "flowering"

    def __str__(self):
        return self.value


class HealthState(str, Enum):
    """Ordered plant health states.

    Degradation moves strictly one step along
    Healthy -> Thirsty -> Wilting -> Dead. Dead is absorbing.
    """

    HEALTHY = "Healthy"
    THIRSTY = "Thirsty"
    WILTING = "Wilting"
    DEAD = "Dead"

    def __str__(self):
        return self.value

    @property
    def severity(self) -> int:
        """Position in the degradation order (0 = Healthy, 3 = Dead)."""
        return _DEGRADATION_ORDER.index(self)

    @property
    def is_terminal(self) -> bool:
        return self is HealthState.DEAD

    def degraded(self) -> HealthState:
        """Return the state one step worse; Dead stays Dead."""
        if self.is_terminal:
            return self
        return _DEGRADATION_ORDER[self.severity + 1]


_DEGRADATION_ORDER = (
    HealthState.HEALTHY,
    HealthState.THIRSTY,
    HealthState.WILTING,
    HealthState.DEAD,
)
