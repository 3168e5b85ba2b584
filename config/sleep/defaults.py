"""Sleep analysis defaults: model settings and form input fallbacks."""

from __future__ import annotations

import os

# Model defaults
ANALYSIS_MODEL = os.getenv("SLEEP_ANALYSIS_MODEL", "gpt-4o-mini")
ANALYSIS_TEMPERATURE = float(os.getenv("SLEEP_ANALYSIS_TEMPERATURE", "0.4"))
ANALYSIS_MAX_TOKENS = int(os.getenv("SLEEP_ANALYSIS_MAX_TOKENS", "1200"))

# Form defaults (23:00 -> 06:00 is 7 hours, matching DEFAULT_SLEEP_HOURS)
DEFAULT_BED_TIME = "23:00"
DEFAULT_WAKE_TIME = "06:00"
DEFAULT_MELATONIN_LEVEL = 20.0
DEFAULT_HEART_RATE = 65.0
DEFAULT_SLEEP_HOURS = 7.0
DEFAULT_CAFFEINE = "no"

# Input bounds
MELATONIN_MIN = 0.0
MELATONIN_MAX = 100.0
HEART_RATE_MIN = 40.0
HEART_RATE_MAX = 120.0

CAFFEINE_CHOICES = ("no", "yes", "sometimes")

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
