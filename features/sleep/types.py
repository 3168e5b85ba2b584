"""Typed dictionary definitions for sleep analysis payloads."""

from __future__ import annotations

from typing import Any, TypedDict


class AnalysisResult(TypedDict, total=False):
    """Assessment rendered verbatim by the client.

    Produced by the language model (or the static fallback), so any field may
    be missing or mistyped except the two stress fields, which are always
    filled in locally.
    """

    needsMoreSleep: bool
    confidence: str
    sleepVerdict: str
    qualityScore: Any
    stressLevelDetected: int
    stressInsight: str
    recommendations: list[str]
    idealBedtime: str
    idealWakeTime: str
    circadianInsight: str
    heartRateInsight: str
    sleepDebtNote: str


__all__ = ["AnalysisResult"]
