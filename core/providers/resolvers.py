"""Provider Resolvers - Dynamic Resolution of AI Providers at Runtime

Resolves a text provider from a model name using the registry populated in
``core/providers/__init__.py``.
"""

from __future__ import annotations

import logging

from core.exceptions import ConfigurationError
from core.providers.base import BaseTextProvider
from core.providers.registries import _text_providers, list_text_providers

logger = logging.getLogger(__name__)

_OPENAI_MODEL_PREFIXES = ("gpt-", "o1", "o3", "o4", "chatgpt-")


def resolve_provider_name(model: str) -> str:
    """Map a model name onto the provider that serves it."""

    normalized = model.lower().strip()
    if normalized.startswith(_OPENAI_MODEL_PREFIXES):
        return "openai"
    if "/" in normalized:
        # "provider/model" form
        return normalized.split("/", 1)[0]
    raise ConfigurationError(f"Unknown text model: {model}", key="SLEEP_ANALYSIS_MODEL")


def get_text_provider(model: str) -> BaseTextProvider:
    """Return a text provider instance able to serve ``model``."""

    provider_name = resolve_provider_name(model)

    if provider_name not in _text_providers:
        raise ConfigurationError(
            f"Provider {provider_name} not registered. Available: {list_text_providers()}",
            key=f"provider.{provider_name}",
        )

    logger.debug("Resolved text provider %s for model %s", provider_name, model)
    provider_class = _text_providers[provider_name]
    return provider_class()


__all__ = ["get_text_provider", "resolve_provider_name"]
