"""Base provider interface for text generation.

Services depend on :class:`BaseTextProvider` rather than a concrete SDK so the
language model stays an opaque, swappable collaborator. Tests substitute a
stub implementing ``generate``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from core.providers.capabilities import ProviderCapabilities
from core.pydantic_schemas import ProviderResponse

logger = logging.getLogger(__name__)


class BaseTextProvider(ABC):
    """Base interface for text generation providers."""

    provider_name: str = "unknown"
    capabilities: ProviderCapabilities

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        model: str | None = None,
        temperature: float = 0.1,
        max_tokens: int = 4096,
        system_prompt: Optional[str] = None,
        **kwargs: Any,
    ) -> ProviderResponse:
        """Generate a non-streaming response."""


__all__ = ["BaseTextProvider"]
