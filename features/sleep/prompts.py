"""Prompt construction for the sleep assessment request."""

from __future__ import annotations

import json

from .schemas import SleepMetricsInput

SYSTEM_PROMPT = (
    "You reply with a single valid JSON object only. "
    "Do not wrap it in markdown code fences and do not add any text outside the JSON."
)

RESPONSE_TEMPLATE = {
    "needsMoreSleep": "true or false",
    "confidence": "high, medium or low",
    "sleepVerdict": "One short sentence answering whether they need more sleep",
    "qualityScore": "integer 1-100",
    "stressLevelDetected": "integer 1-10",
    "stressInsight": "One or two sentences on why this stress level was inferred from their metrics",
    "recommendations": ["First recommendation.", "Second recommendation.", "Third recommendation."],
    "idealBedtime": "HH:MM",
    "idealWakeTime": "HH:MM",
    "circadianInsight": "One paragraph on their circadian rhythm and melatonin timing",
    "heartRateInsight": "One sentence on what their heart rate suggests about recovery",
    "sleepDebtNote": "One sentence on sleep debt, if relevant",
}


def _format_value(value: object, unit: str = "") -> str:
    if value is None:
        return "not provided"
    if isinstance(value, float):
        value = f"{value:g}"
    return f"{value}{unit}"


def build_analysis_prompt(metrics: SleepMetricsInput, sleep_hours: float) -> str:
    """Render the user prompt describing ``metrics`` and the expected JSON reply."""

    lines = [
        "You are a sleep and circadian rhythm specialist. Assess the user data below.",
        "",
        "User data (stress level is not supplied; infer it):",
        f"- Melatonin level: {_format_value(metrics.melatonin_level, ' pg/mL')} (typical range roughly 0-100 pg/mL)",
        f"- Resting heart rate: {_format_value(metrics.heart_rate, ' bpm')}",
        f"- Sleep last night: {_format_value(sleep_hours, ' hours')} "
        f"(bed: {_format_value(metrics.bed_time)}, wake: {_format_value(metrics.wake_time)})",
        f"- Age: {_format_value(metrics.age)}",
        f"- Caffeine after 2pm: {_format_value(metrics.caffeine_afternoon)}",
        "",
        "Infer a stress level from 1 (very relaxed) to 10 (very stressed) using heart rate, "
        "sleep length, schedule regularity, caffeine, age and melatonin. "
        "Always include stressLevelDetected and stressInsight.",
        "",
        "Give exactly 3 recommendations. Each must be 2-4 sentences: why it matters for this "
        "user's data, then what to do and how. Be specific to their melatonin, heart rate, "
        "sleep amount and schedule. Escape double quotes inside strings.",
        "",
        "Reply with JSON using exactly these keys:",
        json.dumps(RESPONSE_TEMPLATE, indent=2),
    ]
    return "\n".join(lines)


__all__ = ["RESPONSE_TEMPLATE", "SYSTEM_PROMPT", "build_analysis_prompt"]
