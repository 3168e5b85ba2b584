"""Sleep duration derived from bed and wake clock times.

Malformed or missing times never raise: they are read as midnight so the
caller always gets a number back.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2})(?::(\d{1,2}))?\s*$")


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    """Wall-clock time with minute resolution."""

    hour: int = 0
    minute: int = 0

    @property
    def minutes(self) -> int:
        """Minutes elapsed since midnight."""

        return self.hour * 60 + self.minute


MIDNIGHT = TimeOfDay(0, 0)


def parse_time_of_day(value: str | None) -> TimeOfDay:
    """Parse an ``HH:MM`` string, falling back to midnight on bad input."""

    if not isinstance(value, str):
        return MIDNIGHT

    match = _TIME_PATTERN.match(value)
    if match is None:
        return MIDNIGHT

    hour = int(match.group(1))
    minute = int(match.group(2) or 0)
    if hour > 23 or minute > 59:
        return MIDNIGHT
    return TimeOfDay(hour, minute)


def round_to_half_hour(hours: float) -> float:
    """Round to the nearest 0.5, halves rounding up."""

    return math.floor(hours * 2 + 0.5) / 2


def elapsed_minutes(bed: TimeOfDay, wake: TimeOfDay) -> int:
    """Minutes from ``bed`` to ``wake``; a wake time at or before bed wraps past midnight."""

    bed_minutes = bed.minutes
    wake_minutes = wake.minutes
    if wake_minutes <= bed_minutes:
        elapsed = MINUTES_PER_DAY - bed_minutes + wake_minutes
    else:
        elapsed = wake_minutes - bed_minutes

    if elapsed < 0 or elapsed > MINUTES_PER_DAY:
        return 0
    return elapsed


def _is_blank(value: str | None) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def compute_sleep_hours(bed_time: str | None, wake_time: str | None) -> float:
    """Return hours slept between ``bed_time`` and ``wake_time``.

    The result is rounded to the nearest half hour. Equal times count as a
    full 24 hours. When neither time was reported (``None`` or blank) the
    result is ``0.0``.
    """

    if _is_blank(bed_time) and _is_blank(wake_time):
        return 0.0

    elapsed = elapsed_minutes(parse_time_of_day(bed_time), parse_time_of_day(wake_time))
    return round_to_half_hour(elapsed / 60)


__all__ = [
    "MIDNIGHT",
    "MINUTES_PER_DAY",
    "TimeOfDay",
    "compute_sleep_hours",
    "elapsed_minutes",
    "parse_time_of_day",
    "round_to_half_hour",
]
