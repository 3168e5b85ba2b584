"""Sleep analysis configuration."""

from .defaults import (
    ANALYSIS_MAX_TOKENS,
    ANALYSIS_MODEL,
    ANALYSIS_TEMPERATURE,
    CAFFEINE_CHOICES,
    DEFAULT_BED_TIME,
    DEFAULT_CAFFEINE,
    DEFAULT_HEART_RATE,
    DEFAULT_MELATONIN_LEVEL,
    DEFAULT_SLEEP_HOURS,
    DEFAULT_WAKE_TIME,
    HEART_RATE_MAX,
    HEART_RATE_MIN,
    MELATONIN_MAX,
    MELATONIN_MIN,
)

__all__ = [
    "ANALYSIS_MAX_TOKENS",
    "ANALYSIS_MODEL",
    "ANALYSIS_TEMPERATURE",
    "CAFFEINE_CHOICES",
    "DEFAULT_BED_TIME",
    "DEFAULT_CAFFEINE",
    "DEFAULT_HEART_RATE",
    "DEFAULT_MELATONIN_LEVEL",
    "DEFAULT_SLEEP_HOURS",
    "DEFAULT_WAKE_TIME",
    "HEART_RATE_MAX",
    "HEART_RATE_MIN",
    "MELATONIN_MAX",
    "MELATONIN_MIN",
]
