"""Initialise AI provider clients used across the application."""

from __future__ import annotations

import logging
from typing import Dict

from openai import AsyncOpenAI

from core.utils.env import get_env

logger = logging.getLogger(__name__)


ai_clients: Dict[str, object] = {}

try:
    if get_env("OPENAI_API_KEY"):
        ai_clients["openai_async"] = AsyncOpenAI(api_key=get_env("OPENAI_API_KEY"))
        logger.info("Initialised OpenAI client")
except Exception as exc:  # pragma: no cover - init failure should crash fast
    logger.error("Error initialising AI clients: %s", exc)
    raise

logger.info("Initialised %s AI client(s)", len(ai_clients))


def get_openai_async_client() -> AsyncOpenAI:
    """Return a cached asynchronous OpenAI client.

    Raises :class:`core.exceptions.ConfigurationError` when ``OPENAI_API_KEY``
    is not set, so requests fail with a structured envelope instead of at
    import time.
    """

    client = ai_clients.get("openai_async")
    if client is not None:
        return client  # type: ignore[return-value]

    api_key = get_env("OPENAI_API_KEY", required=True)
    client = AsyncOpenAI(api_key=api_key)
    ai_clients["openai_async"] = client
    logger.info("Initialised OpenAI client via helper")
    return client


__all__ = ["ai_clients", "get_openai_async_client"]
