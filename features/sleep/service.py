"""Service layer for the sleep analysis feature."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from core.config import Settings
from core.providers.base import BaseTextProvider

from .duration import compute_sleep_hours
from .merge import merge_stress_fields
from .normalise import normalise_caffeine, normalise_heart_rate, normalise_sleep_hours
from .parsing import fallback_analysis, parse_analysis_payload
from .prompts import SYSTEM_PROMPT, build_analysis_prompt
from .schemas import SleepMetricsInput
from .stress import StressEstimate, estimate_stress

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SleepAnalysis:
    """Outcome of one analysis request."""

    result: dict[str, Any]
    model: str
    sleep_hours: float
    used_fallback: bool = False


def resolve_sleep_hours(metrics: SleepMetricsInput) -> float:
    """Use the reported hours, or derive them from bed and wake time."""

    if metrics.sleep_hours_last_night is not None:
        return metrics.sleep_hours_last_night
    return compute_sleep_hours(metrics.bed_time, metrics.wake_time)


def local_stress_estimate(metrics: SleepMetricsInput, sleep_hours: float) -> StressEstimate:
    return estimate_stress(
        normalise_heart_rate(metrics.heart_rate),
        normalise_sleep_hours(sleep_hours),
        normalise_caffeine(metrics.caffeine_afternoon),
    )


class SleepAnalysisService:
    """Asks the language model for an assessment and fills gaps locally."""

    def __init__(self, provider: BaseTextProvider, settings: Settings) -> None:
        self._provider = provider
        self._settings = settings

    def _generation_options(self) -> dict[str, Any]:
        capabilities = getattr(self._provider, "capabilities", None)
        if capabilities is not None and capabilities.json_mode:
            return {"response_format": {"type": "json_object"}}
        return {}

    async def analyze(self, metrics: SleepMetricsInput) -> SleepAnalysis:
        """Return the merged assessment for ``metrics``.

        Provider failures propagate as :class:`core.exceptions.ProviderError`;
        an unparseable reply is replaced by the static fallback.
        """

        sleep_hours = resolve_sleep_hours(metrics)
        prompt = build_analysis_prompt(metrics, sleep_hours)

        response = await self._provider.generate(
            prompt=prompt,
            model=self._settings.analysis_model,
            temperature=self._settings.analysis_temperature,
            max_tokens=self._settings.analysis_max_tokens,
            system_prompt=SYSTEM_PROMPT,
            **self._generation_options(),
        )

        payload = parse_analysis_payload(response.text)
        used_fallback = payload is None
        if payload is None:
            logger.warning(
                "Falling back to static sleep analysis (model=%s, finish_reason=%s)",
                response.model,
                response.finish_reason,
            )
            payload = fallback_analysis()

        estimate = local_stress_estimate(metrics, sleep_hours)
        result = merge_stress_fields(payload, estimate)

        logger.info(
            "Sleep analysis complete: model=%s sleep_hours=%s stress=%s fallback=%s",
            response.model,
            sleep_hours,
            result["stressLevelDetected"],
            used_fallback,
        )
        return SleepAnalysis(
            result=result,
            model=response.model,
            sleep_hours=sleep_hours,
            used_fallback=used_fallback,
        )


__all__ = [
    "SleepAnalysis",
    "SleepAnalysisService",
    "local_stress_estimate",
    "resolve_sleep_hours",
]
