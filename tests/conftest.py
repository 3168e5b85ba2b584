"""Test configuration helpers."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Iterator

import pytest

# Ensure the repository root is importable so that ``import core`` and the
# other absolute imports used throughout the codebase succeed when tests are
# executed from arbitrary working directories.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

os.environ.setdefault("NODE_ENV", "test")
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")


@pytest.fixture
def anyio_backend() -> str:
    """Default AnyIO backend used when tests do not override the fixture."""

    return "asyncio"


@pytest.fixture(scope="session", autouse=True)
def suppress_asyncio_debug_logging() -> None:
    """Prevent asyncio debug logs from writing to closed pytest capture streams."""

    logger = logging.getLogger("asyncio")
    if logger.getEffectiveLevel() < logging.INFO:
        logger.setLevel(logging.INFO)


class StubTextProvider:
    """Text provider double returning a canned reply and recording calls."""

    provider_name = "stub"

    def __init__(self, text: str = "{}", model: str = "stub-model", error: Exception | None = None) -> None:
        self.text = text
        self.model = model
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def generate(self, prompt: str, **kwargs: Any):
        from core.pydantic_schemas import ProviderResponse

        self.calls.append({"prompt": prompt, **kwargs})
        if self.error is not None:
            raise self.error
        return ProviderResponse(
            text=self.text,
            model=kwargs.get("model") or self.model,
            provider=self.provider_name,
            metadata={"finish_reason": "stop"},
        )


@pytest.fixture
def stub_provider_factory():
    """Build :class:`StubTextProvider` instances inside tests."""

    return StubTextProvider


@pytest.fixture
def clear_dependency_overrides() -> Iterator[None]:
    """Ensure FastAPI dependency overrides do not leak between tests."""

    from main import app

    try:
        yield
    finally:
        app.dependency_overrides.clear()
