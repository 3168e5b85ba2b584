"""Provider Registries - Global registries for AI providers."""

from __future__ import annotations

from typing import Dict, Type

from core.providers.base import BaseTextProvider

_text_providers: Dict[str, Type[BaseTextProvider]] = {}


def register_text_provider(name: str, provider_class: Type[BaseTextProvider]) -> None:
    """Register a text provider implementation."""
    _text_providers[name] = provider_class


def list_text_providers() -> list[str]:
    """Return the names of all registered text providers."""
    return sorted(_text_providers)


__all__ = ["register_text_provider", "list_text_providers"]
