"""Provider capability declarations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ProviderCapabilities:
    """Capabilities supported by an AI provider."""

    # Provider accepts ``response_format={"type": "json_object"}``
    json_mode: bool = False


__all__ = ["ProviderCapabilities"]
