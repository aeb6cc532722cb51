"""
Root application controller.

RecipeController owns the AppState and is the only place where user intents
turn into provider calls and state transitions. Presentation code reads
controller.state and calls the intent methods; it never mutates state itself.

Side effects handled here:
- favorites are loaded once on construction and rewritten on every toggle
- fetches go through recipe_ai.service and end in load_succeeded/load_failed
- image regeneration updates only the affected recipe's image reference
"""

import logging
from typing import List, Optional

from recipe_ai.favorites import FavoritesStore
from recipe_ai.models import Recipe
from recipe_ai.providers import BaseProvider, get_default_provider
from recipe_ai.retry import RetryPolicy
from recipe_ai.service import ImageGenerationError, fetch_recipes, regenerate_recipe_image
from recipe_ai.state import AppState, Intent, Phase, is_favorite, phase, reduce, visible_recipes
from recipe_ai.translations import get_translations

logger = logging.getLogger(__name__)


class RecipeController:
    """
    Orchestrates fetches, favorites and selection for one UI session.

    Args:
        provider: Provider for recipe text and images (default: created lazily from config)
        favorites_store: Persistence for favorites (default: file from config)
        retry_policy: Per-recipe image retry policy for batch fetches
    """

    def __init__(
        self,
        provider: Optional[BaseProvider] = None,
        favorites_store: Optional[FavoritesStore] = None,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        self._provider = provider
        self.favorites_store = favorites_store or FavoritesStore()
        self.retry_policy = retry_policy
        self.state = AppState(favorites=self.favorites_store.load())
        logger.debug("Controller created with %d favorites", len(self.state.favorites))

    # -- plumbing -----------------------------------------------------------

    def dispatch(self, intent: Intent) -> AppState:
        """Apply an intent to the current state and return the new state."""
        self.state = reduce(self.state, intent)
        return self.state

    def _get_provider(self) -> BaseProvider:
        if self._provider is None:
            self._provider = get_default_provider()
        return self._provider

    # -- fetching -----------------------------------------------------------

    def fetch(self, term: str = "") -> AppState:
        """
        Fetch recipes for a search term, or the default set when term is empty.

        A term-less fetch also closes the detail view. Errors never escape:
        they end in the ERROR phase with the message stored in state.error.
        """
        translations = get_translations(self.state.language)
        prompt = translations.search_prompt(term) if term else translations.initial_prompt

        self.dispatch(Intent("start_loading", not term))
        try:
            recipes = fetch_recipes(
                prompt,
                self.state.language,
                provider=self._get_provider(),
                retry_policy=self.retry_policy,
            )
        except Exception as e:
            logger.error("Fetch failed (term=%r language=%r): %s", term, self.state.language, e)
            return self.dispatch(Intent("load_failed", str(e) or "An unknown error occurred"))

        logger.info("Loaded %d recipes (term=%r language=%r)", len(recipes), term, self.state.language)
        return self.dispatch(Intent("load_succeeded", recipes))

    def start(self) -> AppState:
        """Initial load on app start."""
        return self.fetch()

    def search(self, term: str) -> AppState:
        """Submit a search. Blank terms are ignored."""
        term = (term or "").strip()
        if not term:
            return self.state
        self.dispatch(Intent("submit_search"))
        return self.fetch(term)

    def change_language(self, language: str) -> AppState:
        """Switch language and re-fetch the default set in that language."""
        if language == self.state.language:
            return self.state
        self.dispatch(Intent("change_language", language))
        return self.fetch()

    def go_home(self) -> AppState:
        """Logo click: reset filter and selection, then re-fetch the default set."""
        self.dispatch(Intent("go_home"))
        return self.fetch()

    # -- selection and filter ----------------------------------------------

    def select(self, recipe: Recipe) -> AppState:
        return self.dispatch(Intent("select_recipe", recipe))

    def back(self) -> AppState:
        return self.dispatch(Intent("clear_selection"))

    def set_filter(self, recipe_filter: str) -> AppState:
        return self.dispatch(Intent("set_filter", recipe_filter))

    # -- favorites ----------------------------------------------------------

    def toggle_favorite(self, recipe_name: str) -> AppState:
        """Toggle a favorite and persist the full list."""
        self.dispatch(Intent("toggle_favorite", recipe_name))
        self.favorites_store.save(self.state.favorites)
        return self.state

    def is_favorite(self, recipe_name: str) -> bool:
        return is_favorite(self.state, recipe_name)

    # -- images -------------------------------------------------------------

    def regenerate_image(self, recipe: Recipe) -> Recipe:
        """
        Generate a new image for one recipe (single attempt).

        The loading phase is not touched. On success the recipe is replaced by
        name in the list and in the selection with only image_url changed.

        Returns:
            The updated recipe

        Raises:
            ImageGenerationError: If generation fails; state is left unchanged
        """
        try:
            provider = self._get_provider()
        except RuntimeError as e:
            raise ImageGenerationError(str(e)) from e

        image_url = regenerate_recipe_image(recipe, provider=provider)
        updated = recipe.with_image(image_url)
        self.dispatch(Intent("update_recipe", updated))
        return updated

    # -- views --------------------------------------------------------------

    def visible_recipes(self) -> List[Recipe]:
        return visible_recipes(self.state)

    def phase(self) -> Phase:
        return phase(self.state)
