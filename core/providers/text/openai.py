"""OpenAI text generation provider implementation."""

from __future__ import annotations

import logging
from typing import Any, Optional

from core.clients.ai import get_openai_async_client
from core.providers.base import BaseTextProvider
from core.providers.capabilities import ProviderCapabilities
from core.pydantic_schemas import ProviderResponse

from .generation import generate_text

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"


class OpenAITextProvider(BaseTextProvider):
    """OpenAI text generation provider."""

    provider_name = "openai"

    def __init__(self, client: Any | None = None) -> None:
        self.client = client if client is not None else get_openai_async_client()

        self.capabilities = ProviderCapabilities(json_mode=True)

    async def generate(
        self,
        prompt: str,
        model: Optional[str] = None,
        temperature: float = 0.1,
        max_tokens: int = 4096,
        system_prompt: Optional[str] = None,
        messages: Optional[list[dict[str, Any]]] = None,
        **kwargs: Any,
    ) -> ProviderResponse:
        """Generate a complete response (non-streaming)."""

        return await generate_text(
            client=self.client,
            prompt=prompt,
            model=model or DEFAULT_MODEL,
            temperature=temperature,
            max_tokens=max_tokens,
            system_prompt=system_prompt,
            messages=messages,
            **kwargs,
        )


__all__ = ["OpenAITextProvider"]
