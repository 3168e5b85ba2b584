"""OpenAI text generation logic (non-streaming chat completions)."""

from __future__ import annotations

import logging
from typing import Any, Optional

from openai import RateLimitError as OpenAIRateLimitError

from core.exceptions import ProviderError, RateLimitError
from core.pydantic_schemas import ProviderResponse

logger = logging.getLogger(__name__)


async def generate_text(
    *,
    client: Any,
    prompt: str,
    model: str,
    temperature: float,
    max_tokens: int,
    system_prompt: Optional[str],
    messages: Optional[list[dict[str, Any]]] = None,
    **kwargs: Any,
) -> ProviderResponse:
    """Generate a complete response (non-streaming)."""

    if (not prompt or not prompt.strip()) and not messages:
        raise ProviderError(
            "OpenAI prompt cannot be empty when no message history is provided",
            provider="openai",
        )

    final_messages = list(messages) if messages is not None else []
    if not final_messages:
        if system_prompt:
            final_messages.append({"role": "system", "content": system_prompt})
        final_messages.append({"role": "user", "content": prompt})

    params: dict[str, Any] = {
        "model": model,
        "messages": final_messages,
        "temperature": temperature,
        "max_tokens": max_tokens,
        **kwargs,
    }

    logger.debug(
        "OpenAI API call: model=%s, messages_count=%d, temperature=%s, max_tokens=%s",
        model,
        len(final_messages),
        temperature,
        max_tokens,
    )

    try:
        response = await client.chat.completions.create(**params)
    except OpenAIRateLimitError as exc:
        logger.warning("OpenAI rate limit hit: %s", exc)
        raise RateLimitError(
            f"OpenAI rate limit: {exc}", retry_after=60, provider="openai"
        ) from exc
    except Exception as exc:
        logger.error("OpenAI generate error: %s", exc)
        raise ProviderError(
            f"OpenAI API error: {exc}",
            provider="openai",
            original_error=exc,
        ) from exc

    if not response.choices:
        raise ProviderError("OpenAI returned no choices", provider="openai")

    choice = response.choices[0]
    text = getattr(choice.message, "content", None) or ""

    metadata = {
        "finish_reason": getattr(choice, "finish_reason", None),
        "usage": response.usage.model_dump()
        if getattr(response, "usage", None)
        else None,
    }

    return ProviderResponse(
        text=text,
        model=model,
        provider="openai",
        metadata=metadata,
    )


__all__ = ["generate_text"]
