"""
Google Gemini provider using the google-genai SDK.

The provider:
- Requests recipe JSON with response_mime_type="application/json" and the
  declared response schema, at the configured temperature
- Requests recipe photos with the IMAGE response modality and returns the
  first inline image part as a base64 data URI

Requires GEMINI_API_KEY in the environment (or .env). Model names default to
gemini-2.5-flash (text) and gemini-2.5-flash-image (image) and can be
overridden via GEMINI_MODEL and GEMINI_IMAGE_MODEL.
"""

import base64
import logging
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from recipe_ai.config import GeminiConfig

from .base import BaseProvider, ImageNotFoundError, ProviderError

logger = logging.getLogger(__name__)


class GeminiProvider(BaseProvider):
    """
    Provider backed by Google Gemini.

    One genai.Client is created per provider instance and shared by the text
    call and all image calls of a batch.
    """
    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        text_model: Optional[str] = None,
        image_model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> None:
        """
        Initialize the Gemini provider.

        Args:
            api_key: Gemini API key (optional, reads GEMINI_API_KEY if not provided)
            text_model: Model for recipe JSON (optional, reads GEMINI_MODEL)
            image_model: Model for recipe photos (optional, reads GEMINI_IMAGE_MODEL)
            temperature: Sampling temperature for recipe JSON (optional, reads GEMINI_TEMPERATURE)

        Raises:
            RuntimeError: If no API key is configured or the client cannot be created.
        """
        key = api_key or GeminiConfig.get_api_key()
        if not key:
            raise RuntimeError(
                "GEMINI_API_KEY is not set. Please add it to your .env file at the project root:\n"
                "GEMINI_API_KEY=your_gemini_api_key_here"
            )

        self.text_model = text_model or GeminiConfig.get_text_model()
        self.image_model = image_model or GeminiConfig.get_image_model()
        self.temperature = temperature if temperature is not None else GeminiConfig.get_temperature()

        try:
            self.client = genai.Client(api_key=key)
        except Exception as e:
            raise RuntimeError(f"Failed to initialize Gemini client: {e}") from e

    def generate_recipe_json(
        self,
        prompt: str,
        system_instruction: str,
        response_schema: Dict[str, Any],
    ) -> str:
        logger.debug("Requesting recipe JSON from %s", self.text_model)
        response = self.client.models.generate_content(
            model=self.text_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                response_mime_type="application/json",
                response_schema=response_schema,
                temperature=self.temperature,
            ),
        )
        text = response.text
        if not text:
            raise ProviderError("Gemini returned an empty response.")
        return text.strip()

    def generate_image(self, prompt: str) -> str:
        response = self.client.models.generate_content(
            model=self.image_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE"],
            ),
        )

        candidates = response.candidates or []
        if not candidates or candidates[0].content is None:
            raise ImageNotFoundError("Image data not found in Gemini response.")

        for part in candidates[0].content.parts or []:
            inline = part.inline_data
            if inline is not None and inline.data:
                data = inline.data
                if isinstance(data, bytes):
                    data = base64.b64encode(data).decode("ascii")
                mime_type = inline.mime_type or "image/png"
                return f"data:{mime_type};base64,{data}"

        raise ImageNotFoundError("Image data not found in Gemini response.")
