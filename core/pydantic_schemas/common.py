"""Common pydantic data models shared across the application."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class ProviderResponse(BaseModel):
    """Standardised response returned by text provider implementations."""

    text: str
    model: str
    provider: str
    metadata: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(frozen=False)

    @property
    def finish_reason(self) -> Optional[str]:
        """Return the provider's finish reason when reported."""

        if self.metadata:
            return self.metadata.get("finish_reason")
        return None


__all__ = ["ProviderResponse"]
