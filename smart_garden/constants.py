"""
Policy Constants
================

Fixed irrigation and growth policy values. These are not configurable at
runtime; see ``smart_garden.config`` for the settings that are.

Usage:
    from smart_garden.constants import IrrigationPolicy, SENSOR_FAULT_PROBABILITY
"""

from decimal import Decimal

# =============================================================================
# Fault / Weather Model
# =============================================================================

SENSOR_FAULT_PROBABILITY = 0.10
RAIN_PROBABILITY = 0.10


# =============================================================================
# Sensor Value Ranges (lower inclusive, upper exclusive)
# =============================================================================


class SensorRanges:
    """Uniform ranges a simulated sensor draws from."""

    TEMPERATURE = (Decimal("15"), Decimal("30"))  # °C
    HUMIDITY = (Decimal("30"), Decimal("80"))  # %
    ILLUMINANCE = (Decimal("10000"), Decimal("60000"))  # lux


# =============================================================================
# Irrigation Policy
# =============================================================================


class IrrigationPolicy:
    """Humidity-driven irrigation volumes."""

    # (upper humidity bound, volume) checked in order, first match wins
    HUMIDITY_STEPS = (
        (Decimal("35"), Decimal("0.8")),
        (Decimal("45"), Decimal("0.5")),
        (Decimal("55"), Decimal("0.3")),
    )
    DEFAULT_VOLUME = Decimal("0")
    RAIN_FACTOR = Decimal("0.4")
    FALLBACK_VOLUME = Decimal("0.2")


# =============================================================================
# Plant Growth Policy
# =============================================================================


class GrowthPolicy:
    """Thresholds and rates used by the plant state machine."""

    WATER_GROWTH_FACTOR = Decimal("0.3")  # height gained per unit of water

    # Vegetable
    DRY_HUMIDITY = Decimal("40")
    MAX_DRY_DAYS = 2
    LIGHT_GROWTH_DIVISOR = Decimal("10000")
    LIGHT_GROWTH_FACTOR = Decimal("0.5")
    MAX_TEMPERATURE = Decimal("45")
    MIN_TEMPERATURE = Decimal("0")

    # Flowering
    BLOOM_MIN_ILLUMINANCE = Decimal("20000")
    BLOOM_MIN_HUMIDITY = Decimal("40")
    BLOOM_MIN_TEMPERATURE = Decimal("10")
    BLOOM_MAX_TEMPERATURE = Decimal("30")
    BLOOM_GROWTH = Decimal("0.4")


# =============================================================================
# Sensor Health
# =============================================================================

SENSOR_OFFLINE_AFTER_FAULTS = 3
