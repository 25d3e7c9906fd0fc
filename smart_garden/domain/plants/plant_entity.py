"""
Plant Domain Entity
===================

Growth and health state machine shared by every plant, with per-variant
growth rules.

Health moves only along Healthy -> Thirsty -> Wilting -> Dead through
:meth:`Plant.degrade`; watering is the only way back, and only from Thirsty.
Height never decreases.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from smart_garden.constants import GrowthPolicy
from smart_garden.domain.exceptions import ValidationError
from smart_garden.domain.sensors.reading import Reading
from smart_garden.enums.growth import HealthState, PlantVariant

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlantDeath:
    """Outcome reported when a plant is found dead at the end of its update."""

    plant_name: str

    @property
    def message(self) -> str:
        return f"Plant '{self.plant_name}' has died (needs replanting)"

    def __str__(self) -> str:
        return self.message


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their shortest repr (0.3, not 0.2999...)
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(f"Not a number: {value!r}", detail={"value": repr(value)}) from None


class Plant(ABC):
    """Base class for all plants.

    Plants compare and hash by name and current health, so a plant that
    degrades or recovers changes its hash. Do not keep plants in sets or
    as dict keys across cycles.
    """

    variant: PlantVariant

    def __init__(self, name: str, height: Decimal | float | int | str = Decimal(0)):
        height = _as_decimal(height)
        if height < 0:
            raise ValidationError(
                f"Plant height must be >= 0, got {height}",
                detail={"plant": name, "height": str(height)},
            )
        self._name = name
        self._height = height
        self._health = HealthState.HEALTHY

    @property
    def name(self) -> str:
        return self._name

    @property
    def height(self) -> Decimal:
        return self._height

    @property
    def health(self) -> HealthState:
        return self._health

    @property
    def is_dead(self) -> bool:
        return self._health.is_terminal

    @abstractmethod
    def grow(self, reading: Reading) -> None:
        """Apply one cycle of growth for the aggregated reading."""

    def water(self, volume: Decimal | float | int | str) -> None:
        """Water the plant; revives a Thirsty plant, never a Wilting or Dead one."""
        volume = _as_decimal(volume)
        if volume < 0:
            raise ValidationError(
                f"Watering volume must be >= 0, got {volume}",
                detail={"plant": self._name, "volume": str(volume)},
            )
        if self.is_dead:
            return
        self._height += volume * GrowthPolicy.WATER_GROWTH_FACTOR
        if self._health is HealthState.THIRSTY:
            self._health = HealthState.HEALTHY

    def degrade(self) -> None:
        """Move health exactly one step towards Dead."""
        previous = self._health
        self._health = previous.degraded()
        if self._health is not previous:
            logger.debug("%s degraded: %s -> %s", self._name, previous, self._health)

    def death_outcome(self) -> PlantDeath | None:
        """Return a PlantDeath outcome if the plant is dead, else None."""
        return PlantDeath(self._name) if self.is_dead else None

    def render(self) -> str:
        return f"{self._name} (height: {self._height:.1f} cm, health: {self._health})"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, height={self._height!r}, health={self._health!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plant):
            return NotImplemented
        return self._name == other._name and self._health == other._health

    def __hash__(self) -> int:
        return hash((self._name, self._health))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self._name,
            "variant": self.variant.value,
            "height": self._height,
            "health": self._health.value,
        }


class VegetablePlant(Plant):
    """Vegetable: suffers from dry streaks and temperature extremes, grows with light."""

    variant = PlantVariant.VEGETABLE

    def __init__(self, name: str, height: Decimal | float | int | str = Decimal(0)):
        super().__init__(name, height)
        self.days_without_water = 0

    def grow(self, reading: Reading) -> None:
        if self.is_dead:
            return

        if reading.humidity < GrowthPolicy.DRY_HUMIDITY:
            self.days_without_water += 1
            if self.days_without_water > GrowthPolicy.MAX_DRY_DAYS:
                self.degrade()
        else:
            self.days_without_water = 0
            self._height += (
                reading.illuminance / GrowthPolicy.LIGHT_GROWTH_DIVISOR
            ) * GrowthPolicy.LIGHT_GROWTH_FACTOR

        # Checked independently of humidity; both may degrade in one call.
        if reading.temperature > GrowthPolicy.MAX_TEMPERATURE or reading.temperature < GrowthPolicy.MIN_TEMPERATURE:
            self.degrade()

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["days_without_water"] = self.days_without_water
        return data


class FloweringPlant(Plant):
    """Flowering plant: blooms only under bright, humid, mild conditions."""

    variant = PlantVariant.FLOWERING

    def __init__(self, name: str, height: Decimal | float | int | str = Decimal(0)):
        super().__init__(name, height)
        self.blooming = False

    def _bloom_conditions_met(self, reading: Reading) -> bool:
        return (
            reading.illuminance > GrowthPolicy.BLOOM_MIN_ILLUMINANCE
            and reading.humidity > GrowthPolicy.BLOOM_MIN_HUMIDITY
            and GrowthPolicy.BLOOM_MIN_TEMPERATURE < reading.temperature < GrowthPolicy.BLOOM_MAX_TEMPERATURE
        )

    def grow(self, reading: Reading) -> None:
        if self.is_dead:
            return

        if self._bloom_conditions_met(reading):
            self._height += GrowthPolicy.BLOOM_GROWTH
            self.blooming = True
        else:
            self.blooming = False
            self.degrade()

    def render(self) -> str:
        rendered = super().render()
        return f"{rendered} 🌸" if self.blooming else rendered

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["blooming"] = self.blooming
        return data
