"""Centralized exception hierarchy for Smart Garden.

All raised errors inherit from :class:`GardenError` so callers can catch a
single base class, yet still match on specific subclasses.

Expected per-cycle conditions (a sensor not answering, a plant dying) are
*not* exceptions; they are outcome values, see
``smart_garden.domain.sensors.sensor_entity.SensorFault`` and
``smart_garden.domain.plants.plant_entity.PlantDeath``.

Hierarchy
---------
::

    GardenError (base)
    ├── ValidationError      (bad argument from caller)
    └── ConfigurationError   (missing / invalid config)
"""

from __future__ import annotations


class GardenError(Exception):
    """Base exception for all Smart Garden errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class ValidationError(GardenError):
    """Caller supplied invalid input (negative height or volume, empty buffer)."""


class ConfigurationError(GardenError):
    """Missing or invalid runtime configuration."""
