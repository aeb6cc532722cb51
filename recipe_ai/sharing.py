"""
Recipe sharing helpers.

Sharing uses a native share function when the surface offers one and falls
back to copying a text summary to the clipboard. Share failures are logged and
never surfaced to the user.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from recipe_ai.models import Ingredient, Recipe
from recipe_ai.scaling import format_quantity
from recipe_ai.translations import get_translations

logger = logging.getLogger(__name__)

SHARE_SIGN_OFF = "Check out this recipe on Recipe AI!"

# How long the "copied" confirmation stays visible
COPIED_NOTICE_SECONDS = 2.5


def build_share_payload(recipe: Recipe, url: str = "") -> Dict[str, str]:
    """Title/text/url payload for a native share sheet."""
    return {
        "title": recipe.recipe_name,
        "text": f"{recipe.description}\n\n{SHARE_SIGN_OFF}",
        "url": url,
    }


def format_share_text(recipe: Recipe, ingredients: List[Ingredient], language: str) -> str:
    """
    Plain-text summary copied to the clipboard.

    Args:
        recipe: Recipe being shared
        ingredients: Ingredients as currently displayed (already scaled)
        language: Language for the "Ingredients" header
    """
    header = get_translations(language).ingredients
    lines = "\n".join(
        f"- {format_quantity(ing.quantity)} {ing.unit} {ing.name}" for ing in ingredients
    )
    return f"{recipe.recipe_name}\n\n{header}:\n{lines}\n\n{recipe.description}\n\n{SHARE_SIGN_OFF}"


def share_recipe(
    recipe: Recipe,
    ingredients: List[Ingredient],
    language: str,
    copy_to_clipboard: Callable[[str], None],
    native_share: Optional[Callable[[Dict[str, str]], None]] = None,
    url: str = "",
) -> bool:
    """
    Share a recipe.

    Args:
        recipe: Recipe to share
        ingredients: Displayed (scaled) ingredients for the clipboard text
        language: UI language
        copy_to_clipboard: Callable receiving the text to copy
        native_share: Optional native share callable receiving the payload
        url: Link included in the native share payload

    Returns:
        True when the clipboard fallback succeeded and a "copied" confirmation
        should be shown; False otherwise
    """
    if native_share is not None:
        try:
            native_share(build_share_payload(recipe, url))
        except Exception as e:
            logger.error("Error sharing %r: %s", recipe.recipe_name, e)
        return False

    try:
        copy_to_clipboard(format_share_text(recipe, ingredients, language))
    except Exception as e:
        logger.error("Error copying %r to clipboard: %s", recipe.recipe_name, e)
        return False
    return True


@dataclass
class CopiedNotice:
    """
    Transient "copied" confirmation that dismisses itself after a fixed duration.

    The clock is injectable for tests.
    """
    duration: float = COPIED_NOTICE_SECONDS
    clock: Callable[[], float] = time.monotonic
    shown_at: Optional[float] = None

    def show(self) -> None:
        self.shown_at = self.clock()

    def is_visible(self) -> bool:
        if self.shown_at is None:
            return False
        if self.clock() - self.shown_at >= self.duration:
            self.shown_at = None
            return False
        return True
