"""
Application state and pure transition functions.

AppState holds everything the root controller owns: language, the active
recipe list, the selected recipe, loading and error flags, favorites and the
list filter. Every transition is a pure function returning a new AppState, so
the whole state machine can be tested without a UI or a provider.

Phases:
    INITIAL  -> nothing requested yet
    LOADING  -> a fetch is in flight
    LOADED   -> last fetch succeeded with at least one recipe
    EMPTY    -> last fetch succeeded with zero recipes
    ERROR    -> last fetch failed; recipes are cleared
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from recipe_ai.models import DEFAULT_LANGUAGE, FILTER_ALL, FILTER_FAVORITES, RECIPE_FILTERS, SUPPORTED_LANGUAGES, Recipe


class Phase(str, Enum):
    INITIAL = "initial"
    LOADING = "loading"
    LOADED = "loaded"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class AppState:
    """
    Snapshot of the application state.

    Attributes:
        language: Current language tag
        recipes: Active recipe list (result of the last fetch)
        selected: Recipe shown in the detail view, if any
        is_loading: True while a fetch is in flight
        error: User-visible error message of the last failed fetch
        favorites: Ordered favorite recipe names
        filter: "all" or "favorites"
        has_loaded: True once any fetch has completed
    """
    language: str = DEFAULT_LANGUAGE
    recipes: List[Recipe] = field(default_factory=list)
    selected: Optional[Recipe] = None
    is_loading: bool = False
    error: Optional[str] = None
    favorites: List[str] = field(default_factory=list)
    filter: str = FILTER_ALL
    has_loaded: bool = False


# ---------------------------------------------------------------------------
# Fetch lifecycle
# ---------------------------------------------------------------------------

def start_loading(state: AppState, clear_selection: bool = False) -> AppState:
    """Enter the loading phase; the previous error is cleared."""
    return replace(
        state,
        is_loading=True,
        error=None,
        selected=None if clear_selection else state.selected,
    )


def load_succeeded(state: AppState, recipes: List[Recipe]) -> AppState:
    """Replace the recipe list with a fetch result."""
    return replace(state, recipes=list(recipes), is_loading=False, error=None, has_loaded=True)


def load_failed(state: AppState, message: str) -> AppState:
    """Record a fetch failure; the recipe list is cleared."""
    return replace(
        state,
        recipes=[],
        is_loading=False,
        error=message or "An unknown error occurred",
        has_loaded=True,
    )


# ---------------------------------------------------------------------------
# User intents
# ---------------------------------------------------------------------------

def submit_search(state: AppState) -> AppState:
    """A search resets the filter to "all" and closes the detail view."""
    return replace(state, filter=FILTER_ALL, selected=None)


def go_home(state: AppState) -> AppState:
    """Logo click: back to the full list with no selection."""
    return replace(state, filter=FILTER_ALL, selected=None)


def change_language(state: AppState, language: str) -> AppState:
    """
    Switch language. The selection is left alone; the following re-fetch
    replaces the list.
    """
    if language not in SUPPORTED_LANGUAGES:
        raise ValueError(f"Unsupported language: {language!r}")
    return replace(state, language=language)


def select_recipe(state: AppState, recipe: Recipe) -> AppState:
    return replace(state, selected=recipe)


def clear_selection(state: AppState) -> AppState:
    return replace(state, selected=None)


def set_filter(state: AppState, recipe_filter: str) -> AppState:
    if recipe_filter not in RECIPE_FILTERS:
        raise ValueError(f"Unsupported filter: {recipe_filter!r}")
    return replace(state, filter=recipe_filter)


def toggle_favorite(state: AppState, recipe_name: str) -> AppState:
    """Add the name to favorites, or remove it if already present."""
    if recipe_name in state.favorites:
        favorites = [name for name in state.favorites if name != recipe_name]
    else:
        favorites = state.favorites + [recipe_name]
    return replace(state, favorites=favorites)


def update_recipe(state: AppState, updated: Recipe) -> AppState:
    """
    Replace a recipe (matched by name) in the list and make it the selection.

    Every list entry sharing the name is replaced, so on name collisions the
    last update wins for all of them.
    """
    recipes = [
        updated if recipe.recipe_name == updated.recipe_name else recipe
        for recipe in state.recipes
    ]
    return replace(state, recipes=recipes, selected=updated)


# ---------------------------------------------------------------------------
# Derived views
# ---------------------------------------------------------------------------

def is_favorite(state: AppState, recipe_name: str) -> bool:
    return recipe_name in state.favorites


def visible_recipes(state: AppState) -> List[Recipe]:
    """Recipes shown in the list under the active filter."""
    if state.filter == FILTER_FAVORITES:
        return [recipe for recipe in state.recipes if recipe.recipe_name in state.favorites]
    return list(state.recipes)


def phase(state: AppState) -> Phase:
    if state.is_loading:
        return Phase.LOADING
    if state.error:
        return Phase.ERROR
    if not state.has_loaded:
        return Phase.INITIAL
    return Phase.LOADED if state.recipes else Phase.EMPTY


# ---------------------------------------------------------------------------
# Single entry point keyed by intent
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Intent:
    """
    A state transition request.

    Attributes:
        kind: One of the keys of TRANSITIONS
        payload: Argument for the transition (recipe, name, language, ...)
    """
    kind: str
    payload: Any = None


TRANSITIONS: Dict[str, Callable[..., AppState]] = {
    "start_loading": lambda s, p: start_loading(s, clear_selection=bool(p)),
    "load_succeeded": load_succeeded,
    "load_failed": load_failed,
    "submit_search": lambda s, p: submit_search(s),
    "go_home": lambda s, p: go_home(s),
    "change_language": change_language,
    "select_recipe": select_recipe,
    "clear_selection": lambda s, p: clear_selection(s),
    "set_filter": set_filter,
    "toggle_favorite": toggle_favorite,
    "update_recipe": update_recipe,
}


def reduce(state: AppState, intent: Intent) -> AppState:
    """
    Apply an intent to a state.

    Raises:
        ValueError: If the intent kind is unknown
    """
    transition = TRANSITIONS.get(intent.kind)
    if transition is None:
        raise ValueError(f"Unknown intent: {intent.kind!r}")
    return transition(state, intent.payload)
