"""Parsing of the model's JSON reply and the static fallback assessment."""

from __future__ import annotations

import copy
import json
import logging
import re
from typing import Any

from .types import AnalysisResult

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")

FALLBACK_ANALYSIS: AnalysisResult = {
    "needsMoreSleep": True,
    "confidence": "low",
    "sleepVerdict": (
        "Unable to parse detailed analysis. Consider getting more sleep and re-checking your metrics."
    ),
    "qualityScore": 50,
    "recommendations": [
        "Ensure 7-9 hours of sleep.",
        "Keep a consistent sleep schedule.",
        "Limit caffeine after 2pm.",
    ],
    "idealBedtime": "22:30",
    "idealWakeTime": "06:30",
    "circadianInsight": "Consistent bed and wake times help align melatonin with your schedule.",
    "heartRateInsight": "Resting heart rate can reflect recovery; lower often indicates better rest.",
    "sleepDebtNote": "Try to catch up gradually with slightly earlier bedtimes.",
}


def fallback_analysis() -> dict[str, Any]:
    """Return a fresh copy of the static assessment."""

    return copy.deepcopy(dict(FALLBACK_ANALYSIS))


def strip_code_fences(raw: str) -> str:
    """Remove a surrounding markdown code fence, if any."""

    text = raw.strip()
    text = _LEADING_FENCE.sub("", text)
    text = _TRAILING_FENCE.sub("", text)
    return text.strip()


def parse_analysis_payload(raw: str | None) -> dict[str, Any] | None:
    """Decode the model reply into a dict, or ``None`` when it is not a JSON object.

    An empty reply decodes as ``{}``.
    """

    text = strip_code_fences(raw or "") or "{}"
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.warning("Model reply is not valid JSON: %s", exc)
        return None

    if not isinstance(payload, dict):
        logger.warning("Model reply is JSON but not an object: %s", type(payload).__name__)
        return None
    return payload


__all__ = [
    "FALLBACK_ANALYSIS",
    "fallback_analysis",
    "parse_analysis_payload",
    "strip_code_fences",
]
