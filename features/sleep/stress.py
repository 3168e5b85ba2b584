"""Heuristic stress estimate used when the model does not supply one."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

BASELINE_STRESS_SCORE = 5.0
STRESS_LEVEL_MIN = 1
STRESS_LEVEL_MAX = 10

ELEVATED_HEART_RATE = 75
SHORT_SLEEP_HOURS = 6

Band = Tuple[Callable[[float], bool], float]

# Evaluated top to bottom, first match wins.
HEART_RATE_BANDS: Sequence[Band] = (
    (lambda bpm: bpm >= 85, 2.0),
    (lambda bpm: bpm >= 75, 1.0),
    (lambda bpm: bpm <= 55, -1.0),
)

SLEEP_BANDS: Sequence[Band] = (
    (lambda hours: hours < 5, 2.0),
    (lambda hours: hours < 6, 1.0),
    (lambda hours: 8 <= hours <= 9, -0.5),
)

CAFFEINE_ADJUSTMENTS = {
    "yes": 1.0,
    "sometimes": 0.5,
    "no": 0.0,
}


@dataclass(frozen=True, slots=True)
class StressEstimate:
    level: int
    insight: str


def band_adjustment(value: float, bands: Sequence[Band]) -> float:
    """Return the adjustment of the first band whose predicate holds, else 0."""

    for predicate, adjustment in bands:
        if predicate(value):
            return adjustment
    return 0.0


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _format_number(value: float) -> str:
    # 7.0 -> "7", 7.3333333 -> "7.3333333"
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def build_stress_insight(heart_rate: float, sleep_hours: float) -> str:
    parts = [
        f"Calculated from your resting heart rate ({_format_number(heart_rate)} bpm), "
        f"sleep ({_format_number(sleep_hours)} hrs), and caffeine.",
    ]
    if heart_rate > ELEVATED_HEART_RATE:
        parts.append("Elevated heart rate suggests elevated stress or poor recovery.")
    else:
        parts.append("Heart rate is in a relaxed range.")
    if sleep_hours < SHORT_SLEEP_HOURS:
        parts.append("Short sleep can raise stress.")
    return " ".join(parts).rstrip()


def estimate_stress(heart_rate: float, sleep_hours: float, caffeine_afternoon: str) -> StressEstimate:
    """Score stress on a 1-10 scale from heart rate, sleep and caffeine.

    Inputs are expected to be normalised already (see
    :mod:`features.sleep.normalise`); unknown caffeine values add nothing.
    """

    score = BASELINE_STRESS_SCORE
    score += band_adjustment(heart_rate, HEART_RATE_BANDS)
    score += band_adjustment(sleep_hours, SLEEP_BANDS)
    score += CAFFEINE_ADJUSTMENTS.get(caffeine_afternoon, 0.0)

    clamped = min(STRESS_LEVEL_MAX, max(STRESS_LEVEL_MIN, score))
    return StressEstimate(
        level=round_half_up(clamped),
        insight=build_stress_insight(heart_rate, sleep_hours),
    )


__all__ = [
    "BASELINE_STRESS_SCORE",
    "CAFFEINE_ADJUSTMENTS",
    "HEART_RATE_BANDS",
    "SLEEP_BANDS",
    "STRESS_LEVEL_MAX",
    "STRESS_LEVEL_MIN",
    "StressEstimate",
    "band_adjustment",
    "build_stress_insight",
    "estimate_stress",
    "round_half_up",
]
