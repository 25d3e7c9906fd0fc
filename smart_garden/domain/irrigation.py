"""
Irrigation Policy
=================
Maps the aggregated humidity of a cycle to a watering volume.
"""

from __future__ import annotations

from decimal import Decimal

from smart_garden.constants import IrrigationPolicy


def base_volume(humidity: Decimal) -> Decimal:
    """
    Return the irrigation volume for an aggregated humidity.

    Thresholds are checked in order and the first match wins:
    ``<35 -> 0.8``, ``<45 -> 0.5``, ``<55 -> 0.3``, otherwise ``0``.
    """
    for upper_bound, volume in IrrigationPolicy.HUMIDITY_STEPS:
        if humidity < upper_bound:
            return volume
    return IrrigationPolicy.DEFAULT_VOLUME


def apply_rain(volume: Decimal) -> Decimal:
    """Scale a volume down for a rain event."""
    return volume * IrrigationPolicy.RAIN_FACTOR
