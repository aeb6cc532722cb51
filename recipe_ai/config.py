"""
Configuration management for Recipe AI.

This module centralizes environment variable loading from the .env file at the
project root. It is imported early by the Streamlit entry point so that .env is
loaded before any other code reads the environment.

In production there is usually no .env file; load_dotenv() then no-ops and the
platform's environment variables are used instead.

Environment Variables:
- GEMINI_API_KEY: Required, Google Gemini API key (API_KEY is accepted as a fallback)
- GEMINI_MODEL: Optional, text model (defaults to "gemini-2.5-flash")
- GEMINI_IMAGE_MODEL: Optional, image model (defaults to "gemini-2.5-flash-image")
- GEMINI_TEMPERATURE: Optional, sampling temperature for recipe text (defaults to 0.7)
- RECIPE_AI_FAVORITES_PATH: Optional, favorites file (defaults to "favorites.json")
- RECIPE_AI_IMAGE_RETRIES: Optional, image attempts per recipe (defaults to 3)
- RECIPE_AI_LOG_LEVEL: Optional, logging level name (defaults to "INFO")
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_FAVORITES_FILE = "favorites.json"
DEFAULT_IMAGE_RETRIES = 3


def load_env_file() -> None:
    """
    Load environment variables from the .env file at the project root.

    The project root is one level up from this file (recipe_ai/config.py).
    Existing environment variables take precedence over .env values.
    Safe to call multiple times.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


class GeminiConfig:
    """Configuration for the Gemini provider."""

    @staticmethod
    def get_api_key() -> Optional[str]:
        """
        Get the Gemini API key from the environment.

        Returns:
            API key string or None if neither GEMINI_API_KEY nor API_KEY is set

        Note:
            This does not raise; the provider validates its own credentials.
        """
        return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")

    @staticmethod
    def get_text_model() -> str:
        """Model used for structured recipe text."""
        return os.getenv("GEMINI_MODEL", DEFAULT_TEXT_MODEL)

    @staticmethod
    def get_image_model() -> str:
        """Model used for recipe photos."""
        return os.getenv("GEMINI_IMAGE_MODEL", DEFAULT_IMAGE_MODEL)

    @staticmethod
    def get_temperature() -> float:
        """
        Sampling temperature for recipe text.

        Returns:
            Temperature as float; unparseable values fall back to 0.7
        """
        raw = os.getenv("GEMINI_TEMPERATURE")
        if not raw:
            return DEFAULT_TEMPERATURE
        try:
            return float(raw)
        except ValueError:
            logger.warning("Invalid GEMINI_TEMPERATURE=%r, using %s", raw, DEFAULT_TEMPERATURE)
            return DEFAULT_TEMPERATURE


class AppConfig:
    """Application-level settings."""

    @staticmethod
    def get_favorites_path() -> Path:
        """Path of the JSON file holding the favorites list."""
        return Path(os.getenv("RECIPE_AI_FAVORITES_PATH", DEFAULT_FAVORITES_FILE))

    @staticmethod
    def get_image_retries() -> int:
        """
        Number of image generation attempts per recipe in a batch.

        Returns:
            Positive integer (default: 3)
        """
        raw = os.getenv("RECIPE_AI_IMAGE_RETRIES")
        if not raw:
            return DEFAULT_IMAGE_RETRIES
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Invalid RECIPE_AI_IMAGE_RETRIES=%r, using %d", raw, DEFAULT_IMAGE_RETRIES)
            return DEFAULT_IMAGE_RETRIES
        return value if value >= 1 else DEFAULT_IMAGE_RETRIES

    @staticmethod
    def get_log_level() -> str:
        return os.getenv("RECIPE_AI_LOG_LEVEL", "INFO").upper()


def validate_required_config() -> None:
    """
    Validate that all required environment variables are set.

    Called by the Streamlit entry point before anything talks to the provider.

    Raises:
        RuntimeError: If any required configuration is missing
    """
    missing = []

    if not GeminiConfig.get_api_key():
        missing.append("GEMINI_API_KEY (required for recipe and image generation)")

    if missing:
        raise RuntimeError(
            "Missing required environment variables:\n"
            + "\n".join(f"  - {var}" for var in missing)
            + "\n\nPlease create a .env file at the project root with these variables."
        )
