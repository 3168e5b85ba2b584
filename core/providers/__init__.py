"""Provider Registry - Import-Time Registration of AI Providers

Importing this package registers every text provider so that
:func:`get_text_provider` can resolve models before the first request.

Usage Example:
    from core.providers import get_text_provider
    provider = get_text_provider("gpt-4o-mini")
    response = await provider.generate(prompt="Hello")
"""

from core.providers.base import BaseTextProvider
from core.providers.capabilities import ProviderCapabilities
from core.providers.registries import list_text_providers, register_text_provider
from core.providers.resolvers import get_text_provider, resolve_provider_name
from core.providers.text import OpenAITextProvider

register_text_provider("openai", OpenAITextProvider)

__all__ = [
    "BaseTextProvider",
    "OpenAITextProvider",
    "ProviderCapabilities",
    "get_text_provider",
    "list_text_providers",
    "register_text_provider",
    "resolve_provider_name",
]
