"""Utility functions for time handling.

All timestamps are UTC and timezone-aware. Entities that stamp readings take
a ``clock`` callable defaulting to :func:`utc_now` so tests can pin time.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return current UTC time as an aware datetime."""
    return datetime.now(timezone.utc)


def fixed_clock(moment: datetime) -> Clock:
    """Return a clock that always reports ``moment``."""

    def _clock() -> datetime:
        return moment

    return _clock
