"""
Recipe fetch service.

This module provides the core generation pipeline:
- Builds the system instruction for the requested language
- Requests structured recipe JSON from the provider and validates it
- Fans out one image request per recipe in parallel, each wrapped in a
  bounded retry policy, and maps exhausted image requests to ""
- Joins images back to their recipes positionally

Failure policy: a failure of the text step aborts the whole fetch with
RecipeFetchError. A failure of any single image request never fails the batch;
that recipe just gets an empty image reference and the UI shows a placeholder.

Fetch flow: Streamlit -> RecipeController.fetch() -> fetch_recipes() -> provider.generate_recipe_json()
            -> parse_recipes() -> fetch_images() -> provider.generate_image() x N -> List[Recipe]
"""

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from pydantic import ValidationError

from recipe_ai.config import AppConfig
from recipe_ai.models import Recipe
from recipe_ai.providers import BaseProvider, get_default_provider
from recipe_ai.providers.schema import RESPONSE_SCHEMA
from recipe_ai.retry import SINGLE_ATTEMPT, RetryPolicy

logger = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Failed to parse recipes from API response."
UNKNOWN_FETCH_ERROR_MESSAGE = "An unknown error occurred while fetching recipes."
UNKNOWN_IMAGE_ERROR_MESSAGE = "An unknown error occurred while regenerating the image."


class RecipeFetchError(RuntimeError):
    """Raised when recipe text generation fails (network, provider, parse or schema errors)."""


class RecipeParseError(RecipeFetchError):
    """Raised when the provider response is not a JSON object with a list of recipes."""


class ImageGenerationError(RuntimeError):
    """Raised when on-demand image regeneration fails."""


def build_system_instruction(language: str) -> str:
    """System instruction fixing output language and strict schema-conformant JSON."""
    return (
        f"You are an expert recipe assistant. Generate recipes in {language}. "
        "Ensure the output strictly follows the provided JSON schema. "
        "Do not include markdown formatting like ```json in your response."
    )


def build_image_prompt(recipe: Recipe) -> str:
    """Photo prompt for one recipe."""
    return (
        f'A delicious and realistic photo of "{recipe.recipe_name}". '
        "Style: professional food photography, appetizing, high-quality, "
        "like photos seen on Pixabay, Unsplash, or Wikimedia Commons. "
        f"Description for context: {recipe.description}"
    )


def _strip_code_fences(text: str) -> str:
    """Remove a surrounding ``` / ```json fence if the model added one anyway."""
    text = text.strip()
    if text.startswith("```"):
        lines = text.split("\n")
        lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        text = "\n".join(lines).strip()
    return text


def parse_recipes(raw_text: str) -> List[Recipe]:
    """
    Parse a provider response body into recipes (without images).

    Args:
        raw_text: Response body, expected to be {"recipes": [...]}

    Returns:
        List of Recipe objects with empty image_url, in response order

    Raises:
        RecipeParseError: If the body is not JSON, has no "recipes" list, or
            an item does not match the recipe schema
    """
    try:
        data = json.loads(_strip_code_fences(raw_text or ""))
    except json.JSONDecodeError as e:
        logger.error("Provider response is not valid JSON: %s", e)
        raise RecipeParseError(PARSE_ERROR_MESSAGE) from e

    if not isinstance(data, dict) or not isinstance(data.get("recipes"), list):
        logger.error("Parsed data is not in the expected format: %s", str(data)[:200])
        raise RecipeParseError(PARSE_ERROR_MESSAGE)

    recipes: List[Recipe] = []
    for index, item in enumerate(data["recipes"]):
        if not isinstance(item, dict):
            logger.error("Recipe #%d is not an object: %r", index, str(item)[:200])
            raise RecipeParseError(PARSE_ERROR_MESSAGE)
        try:
            recipe = Recipe.model_validate(item)
        except ValidationError as e:
            logger.error("Recipe #%d does not match the schema: %s", index, e)
            raise RecipeParseError(PARSE_ERROR_MESSAGE) from e
        # Images are generated separately; ignore anything the model put here
        recipes.append(recipe.with_image(""))

    return recipes


def _image_or_empty(provider: BaseProvider, recipe: Recipe, retry_policy: RetryPolicy) -> str:
    """Generate one recipe image under the retry policy; "" once attempts are exhausted."""
    prompt = build_image_prompt(recipe)
    try:
        return retry_policy.run(
            lambda: provider.generate_image(prompt),
            description=f"image for {recipe.recipe_name!r}",
        )
    except Exception as e:
        logger.error("Failed to generate image for %r, will use placeholder: %s", recipe.recipe_name, e)
        return ""


def fetch_images(
    recipes: List[Recipe],
    provider: BaseProvider,
    retry_policy: Optional[RetryPolicy] = None,
    max_workers: Optional[int] = None,
) -> List[str]:
    """
    Generate images for all recipes concurrently.

    All requests are dispatched without waiting for one another; the call
    returns once every request has either succeeded or fallen back to "".
    A failing request never cancels the others.

    Args:
        recipes: Recipes to illustrate
        provider: Provider performing the image calls
        retry_policy: Per-recipe retry policy (default: RECIPE_AI_IMAGE_RETRIES attempts)
        max_workers: Thread pool size (default: one worker per recipe)

    Returns:
        Image references positionally aligned with recipes ("" for failures)
    """
    if not recipes:
        return []

    policy = retry_policy or RetryPolicy(max_attempts=AppConfig.get_image_retries())
    workers = max_workers or len(recipes)

    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="recipe-image") as pool:
        futures = [pool.submit(_image_or_empty, provider, recipe, policy) for recipe in recipes]
        image_urls = [future.result() for future in futures]

    failed = sum(1 for url in image_urls if not url)
    logger.info("Image fan-out finished: %d recipes, %d without image", len(recipes), failed)
    return image_urls


def fetch_recipes(
    prompt: str,
    language: str,
    provider: Optional[BaseProvider] = None,
    retry_policy: Optional[RetryPolicy] = None,
    max_workers: Optional[int] = None,
) -> List[Recipe]:
    """
    Generate recipes for a prompt and illustrate each with a generated image.

    Args:
        prompt: Free-text prompt (initial set or search prompt from the translation table)
        language: Target language tag ("en", "fr", "ar")
        provider: Provider to use (default: Gemini from configuration)
        retry_policy: Per-recipe image retry policy
        max_workers: Thread pool size for the image fan-out

    Returns:
        Fully populated recipes; an empty list when the provider returns none

    Raises:
        RecipeFetchError: If the text generation step fails for any reason

    Examples:
        >>> recipes = fetch_recipes("Generate 8 recipes related to: \\"soup\\".", "en")
        >>> all(isinstance(r, Recipe) for r in recipes)
        True
    """
    logger.info("Fetch request: language=%r prompt=%r", language, prompt[:120])

    try:
        provider = provider or get_default_provider()
        raw_text = provider.generate_recipe_json(
            prompt,
            build_system_instruction(language),
            RESPONSE_SCHEMA,
        )
        recipes = parse_recipes(raw_text)
    except RecipeFetchError:
        raise
    except Exception as e:
        logger.error("Error fetching recipes: %s", e, exc_info=True)
        raise RecipeFetchError(str(e) or UNKNOWN_FETCH_ERROR_MESSAGE) from e

    logger.info("Provider returned %d recipes", len(recipes))
    if not recipes:
        return []

    image_urls = fetch_images(recipes, provider, retry_policy=retry_policy, max_workers=max_workers)
    return [recipe.with_image(url) for recipe, url in zip(recipes, image_urls)]


def regenerate_recipe_image(recipe: Recipe, provider: Optional[BaseProvider] = None) -> str:
    """
    Request a new image for one recipe with a single attempt.

    Args:
        recipe: Recipe to illustrate (its current image is ignored)
        provider: Provider to use (default: Gemini from configuration)

    Returns:
        New image reference

    Raises:
        ImageGenerationError: If the attempt fails; the caller keeps the
            existing image or placeholder and shows the error
    """
    try:
        provider = provider or get_default_provider()
        prompt = build_image_prompt(recipe)
        return SINGLE_ATTEMPT.run(
            lambda: provider.generate_image(prompt),
            description=f"image for {recipe.recipe_name!r}",
        )
    except Exception as e:
        logger.error("Error regenerating image for %r: %s", recipe.recipe_name, e)
        raise ImageGenerationError(str(e) or UNKNOWN_IMAGE_ERROR_MESSAGE) from e
