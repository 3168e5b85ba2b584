"""Normalisation of raw form values into the ranges the analysis expects.

Every helper is total: bad input maps onto the documented default rather
than raising, mirroring how the web form repairs a field on blur.
"""

from __future__ import annotations

import math
from typing import Any

from config.sleep import (
    CAFFEINE_CHOICES,
    DEFAULT_CAFFEINE,
    DEFAULT_HEART_RATE,
    DEFAULT_MELATONIN_LEVEL,
    DEFAULT_SLEEP_HOURS,
    HEART_RATE_MAX,
    HEART_RATE_MIN,
    MELATONIN_MAX,
    MELATONIN_MIN,
)


def to_number(value: Any) -> float | None:
    """Coerce ints, floats and numeric strings to a finite float."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def clamp(value: float, lower: float, upper: float) -> float:
    return min(upper, max(lower, value))


def normalise_heart_rate(value: Any) -> float:
    """Clamp to 40-120 bpm; absent or non-numeric values become 65."""

    number = to_number(value)
    if number is None:
        return DEFAULT_HEART_RATE
    return clamp(number, HEART_RATE_MIN, HEART_RATE_MAX)


def normalise_sleep_hours(value: Any) -> float:
    """Return positive hours as-is; anything else falls back to 7."""

    number = to_number(value)
    if number is None or number <= 0:
        return DEFAULT_SLEEP_HOURS
    return number


def normalise_melatonin(value: Any) -> float:
    number = to_number(value)
    if number is None:
        return DEFAULT_MELATONIN_LEVEL
    return clamp(number, MELATONIN_MIN, MELATONIN_MAX)


def normalise_age(value: Any) -> int | None:
    """Keep positive whole ages only."""

    number = to_number(value)
    if number is None or number <= 0 or not number.is_integer():
        return None
    return int(number)


def normalise_caffeine(value: Any) -> str:
    if isinstance(value, str):
        candidate = value.strip().lower()
        if candidate in CAFFEINE_CHOICES:
            return candidate
    return DEFAULT_CAFFEINE


__all__ = [
    "clamp",
    "normalise_age",
    "normalise_caffeine",
    "normalise_heart_rate",
    "normalise_melatonin",
    "normalise_sleep_hours",
    "to_number",
]
