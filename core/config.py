"""Minimal environment variable loading and settings dataclass.

Domain-specific configuration lives in config/ subdirectories:
- Environment detection: config.environment
- Sleep analysis model and form defaults: config.sleep

This module only collects the values into a frozen ``Settings`` dataclass that
FastAPI dependencies can inject.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from config.environment import ENVIRONMENT, get_node_env
from config.sleep import ANALYSIS_MAX_TOKENS, ANALYSIS_MODEL, ANALYSIS_TEMPERATURE

DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"
PORT = int(os.getenv("PORT", "3001"))


@dataclass(frozen=True)
class Settings:
    """Dependency injection wrapper for cross-cutting settings."""

    environment: str = ENVIRONMENT
    debug_mode: bool = DEBUG_MODE
    port: int = PORT
    analysis_model: str = ANALYSIS_MODEL
    analysis_temperature: float = ANALYSIS_TEMPERATURE
    analysis_max_tokens: int = ANALYSIS_MAX_TOKENS


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings instance."""

    return settings


__all__ = [
    # Environment
    "get_node_env",
    "ENVIRONMENT",
    # Feature toggles
    "DEBUG_MODE",
    "PORT",
    # Settings
    "Settings",
    "settings",
    "get_settings",
]
