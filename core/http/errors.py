"""Utilities for formatting structured HTTP error payloads."""

from __future__ import annotations

from typing import Any, Dict

from core.exceptions import (
    ConfigurationError,
    ProviderError,
    RateLimitError,
)


def _build_error_payload(
    *,
    error: str,
    message: str,
    context: Dict[str, Any] | None = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"error": error, "message": message}
    if context:
        payload["context"] = context
    return payload


def format_configuration_error(exc: ConfigurationError) -> Dict[str, Any]:
    """Return a standard payload for :class:`ConfigurationError`."""

    context = {"key": exc.key} if getattr(exc, "key", None) else None
    return _build_error_payload(
        error="configuration_error",
        message=str(exc),
        context=context,
    )


def format_provider_error(exc: ProviderError) -> Dict[str, Any]:
    """Return a standard payload for :class:`ProviderError`."""

    context = {
        key: value
        for key, value in {
            "provider": getattr(exc, "provider", None),
            "retry_after": getattr(exc, "retry_after", None)
            if isinstance(exc, RateLimitError)
            else None,
        }.items()
        if value
    }

    return _build_error_payload(
        error="rate_limit_error" if isinstance(exc, RateLimitError) else "provider_error",
        message=str(exc),
        context=context or None,
    )


__all__ = [
    "format_configuration_error",
    "format_provider_error",
]
