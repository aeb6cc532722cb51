"""
Base provider abstract class for generative AI integrations.

This module defines the abstract base class that recipe providers implement.
The rest of the app only talks to a provider through two logical operations:

- generate_recipe_json: structured recipe text matching a declared schema
- generate_image: one image for a textual description, as a data URI
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ProviderError(RuntimeError):
    """Raised when the provider call fails or returns an unusable response."""


class ImageNotFoundError(ProviderError):
    """Raised when an image response carries no inline image data."""


class BaseProvider(ABC):
    """
    Abstract base class for generative AI providers.

    Attributes:
        name: String identifier for the provider (e.g., "gemini")
    """
    name: str

    @abstractmethod
    def generate_recipe_json(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: Dict[str, Any],
    ) -> str:
        """
        Generate recipe text constrained to a JSON schema.

        Args:
            prompt: User-facing request (initial set or search)
            system_instruction: Instruction fixing language and output format
            response_schema: Schema the JSON body must match

        Returns:
            Raw response body (expected to be a JSON document)
        """

    @abstractmethod
    def generate_image(self, prompt: str) -> str:
        """
        Generate one image for a textual description.

        Args:
            prompt: Image description

        Returns:
            Image reference as a "data:<mime>;base64,<data>" URI

        Raises:
            ImageNotFoundError: If the response contained no image data
        """
