"""Sleep analysis feature: duration, stress heuristic and model-backed assessment."""

from .duration import TimeOfDay, compute_sleep_hours, parse_time_of_day
from .merge import merge_stress_fields, merge_stress_insight, merge_stress_level
from .stress import BASELINE_STRESS_SCORE, StressEstimate, estimate_stress

__all__ = [
    "BASELINE_STRESS_SCORE",
    "StressEstimate",
    "TimeOfDay",
    "compute_sleep_hours",
    "estimate_stress",
    "merge_stress_fields",
    "merge_stress_insight",
    "merge_stress_level",
    "parse_time_of_day",
]
