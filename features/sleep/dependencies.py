"""Dependency wiring for sleep FastAPI endpoints."""

from __future__ import annotations

import logging

from fastapi import Depends

from core.config import Settings, get_settings
from core.providers import get_text_provider
from core.providers.base import BaseTextProvider

from .service import SleepAnalysisService

logger = logging.getLogger(__name__)


def get_analysis_provider(settings: Settings = Depends(get_settings)) -> BaseTextProvider:
    """Resolve the text provider serving the configured analysis model."""

    return get_text_provider(settings.analysis_model)


def get_sleep_analysis_service(
    provider: BaseTextProvider = Depends(get_analysis_provider),
    settings: Settings = Depends(get_settings),
) -> SleepAnalysisService:
    """Resolve a :class:`SleepAnalysisService` wired with the configured provider."""

    return SleepAnalysisService(provider, settings)


__all__ = ["get_analysis_provider", "get_sleep_analysis_service"]
