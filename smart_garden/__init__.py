"""
Smart Garden
============

Greenhouse simulation: noisy sensors, a plant health state machine and an
irrigation controller that runs one decision cycle per tick.
"""

__version__ = "1.0.0"
