"""
Generative AI providers.

get_default_provider() builds the provider used when callers do not pass one.
"""

from .base import BaseProvider, ImageNotFoundError, ProviderError
from .gemini_provider import GeminiProvider


def get_default_provider() -> BaseProvider:
    """Create the default provider (Gemini). Raises RuntimeError if not configured."""
    return GeminiProvider()


__all__ = [
    "BaseProvider",
    "GeminiProvider",
    "ImageNotFoundError",
    "ProviderError",
    "get_default_provider",
]
