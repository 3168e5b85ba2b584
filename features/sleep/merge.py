"""Merge rules for stress fields returned by the language model.

The model output is untrusted: its stress level is kept only when it is a
number within 1-10, and its insight only when it is non-empty text.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from .stress import STRESS_LEVEL_MAX, STRESS_LEVEL_MIN, StressEstimate, round_half_up

STRESS_LEVEL_FIELD = "stressLevelDetected"
STRESS_INSIGHT_FIELD = "stressInsight"


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def merge_stress_level(external: Any, computed: int) -> int:
    """Return the model's level rounded to an integer if it is valid, else ``computed``."""

    number = _as_number(external)
    if number is None or not STRESS_LEVEL_MIN <= number <= STRESS_LEVEL_MAX:
        return computed
    return round_half_up(number)


def merge_stress_insight(external: Any, computed: str) -> str:
    """Keep non-empty model text; fill in ``computed`` otherwise."""

    if isinstance(external, str) and external:
        return external
    return computed


def merge_stress_fields(result: Mapping[str, Any], estimate: StressEstimate) -> dict[str, Any]:
    """Return a copy of ``result`` with both stress fields guaranteed present."""

    merged = dict(result)
    merged[STRESS_LEVEL_FIELD] = merge_stress_level(result.get(STRESS_LEVEL_FIELD), estimate.level)
    merged[STRESS_INSIGHT_FIELD] = merge_stress_insight(result.get(STRESS_INSIGHT_FIELD), estimate.insight)
    return merged


__all__ = [
    "STRESS_INSIGHT_FIELD",
    "STRESS_LEVEL_FIELD",
    "merge_stress_fields",
    "merge_stress_insight",
    "merge_stress_level",
]
