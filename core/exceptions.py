"""Custom exception hierarchy for the sleep analysis backend.

Exception Handling Flow:
    1. Service or provider layer raises a typed exception
    2. Route or FastAPI exception handler catches it (see main.py)
    3. Handler converts it to a structured JSON envelope
    4. Client receives error envelope with code, message, and context

The local computations (sleep duration, stress heuristic, merge policy) never
raise; every invalid input is normalised to a safe default instead.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class ProviderError(ServiceError):
    """Raised when an external provider (AI API) fails."""

    def __init__(self, message: str, provider: str | None = None, original_error: Exception | None = None):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        super().__init__(self.message)


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class RateLimitError(ProviderError):
    """Raised when a provider rate limit is exceeded."""

    def __init__(self, message: str, retry_after: int | None = None, provider: str | None = None):
        super().__init__(message, provider=provider)
        self.retry_after = retry_after
