"""
Tests for RecipeController.

The controller is exercised end to end with FakeProvider and a favorites file
under tmp_path, so no network or Streamlit is involved.
"""

import json

import pytest

from recipe_ai.controller import RecipeController
from recipe_ai.favorites import FAVORITES_KEY, FavoritesStore
from recipe_ai.retry import RetryPolicy
from recipe_ai.service import ImageGenerationError
from recipe_ai.state import Phase

from conftest import FakeProvider


@pytest.fixture
def store(tmp_path):
    return FavoritesStore(tmp_path / "favorites.json")


@pytest.fixture
def controller(fake_provider, store):
    return RecipeController(provider=fake_provider, favorites_store=store, retry_policy=RetryPolicy(3))


class TestStartup:
    """Test construction and the initial load."""

    def test_loads_persisted_favorites(self, tmp_path, fake_provider):
        """Test that favorites saved by an earlier session are loaded on construction."""
        path = tmp_path / "favorites.json"
        path.write_text(json.dumps({FAVORITES_KEY: ["Beef Stew"]}), encoding="utf-8")

        controller = RecipeController(provider=fake_provider, favorites_store=FavoritesStore(path))

        assert controller.state.favorites == ["Beef Stew"]
        assert controller.phase() == Phase.INITIAL

    def test_start_fetches_default_set(self, controller, fake_provider):
        """Test that start() requests the default recipe set and reaches LOADED."""
        controller.start()

        assert controller.phase() == Phase.LOADED
        assert len(controller.state.recipes) == 3
        assert fake_provider.text_calls[0]["prompt"].startswith("Generate 8 diverse")


class TestSearch:
    """Test search submission."""

    def test_search_uses_search_prompt(self, controller, fake_provider):
        """Test that a search term is trimmed and sent through the search prompt template."""
        controller.search("  soup  ")
        assert fake_provider.text_calls[-1]["prompt"] == 'Generate 8 recipes related to: "soup".'

    def test_blank_search_is_ignored(self, controller, fake_provider):
        """Test that a whitespace-only search makes no provider call."""
        controller.search("   ")
        assert fake_provider.text_calls == []
        assert controller.phase() == Phase.INITIAL

    def test_search_resets_filter_and_selection(self, controller):
        """Test that a search switches back to "all" and closes the detail view."""
        controller.start()
        controller.set_filter("favorites")
        controller.select(controller.state.recipes[0])

        controller.search("stew")

        assert controller.state.filter == "all"
        assert controller.state.selected is None

    def test_search_with_no_results_is_empty(self, store):
        """Test that zero recipes ends in EMPTY, not ERROR."""
        controller = RecipeController(provider=FakeProvider(recipes=[]), favorites_store=store)
        controller.search("unobtainium")
        assert controller.phase() == Phase.EMPTY
        assert controller.state.error is None

    def test_fetch_failure_enters_error_phase(self, store):
        """Test that a provider failure is stored as a message, not raised."""
        provider = FakeProvider(text_error=ConnectionError("network down"))
        controller = RecipeController(provider=provider, favorites_store=store)

        controller.search("soup")

        assert controller.phase() == Phase.ERROR
        assert controller.state.error == "network down"
        assert controller.state.recipes == []

    def test_failure_after_success_clears_list(self, controller, fake_provider):
        """Test that a failed fetch drops the previously loaded recipes."""
        controller.start()
        fake_provider.text_error = ConnectionError("network down")

        controller.search("soup")

        assert controller.state.recipes == []
        assert controller.phase() == Phase.ERROR


class TestNavigation:
    """Test language changes, home and selection."""

    def test_change_language_refetches_in_new_language(self, controller, fake_provider):
        """Test that switching language re-fetches with the new language instruction."""
        controller.start()
        controller.change_language("fr")

        assert controller.state.language == "fr"
        assert len(fake_provider.text_calls) == 2
        assert "Generate recipes in fr." in fake_provider.text_calls[-1]["system_instruction"]

    def test_change_to_same_language_does_nothing(self, controller, fake_provider):
        """Test that selecting the current language does not re-fetch."""
        controller.change_language("en")
        assert fake_provider.text_calls == []

    def test_go_home_refetches_default_set(self, controller, fake_provider):
        """Test that the home action resets the filter and loads the default set."""
        controller.search("stew")
        controller.set_filter("favorites")

        controller.go_home()

        assert controller.state.filter == "all"
        assert fake_provider.text_calls[-1]["prompt"].startswith("Generate 8 diverse")

    def test_select_and_back(self, controller):
        """Test opening and closing the detail view."""
        controller.start()
        recipe = controller.state.recipes[2]

        controller.select(recipe)
        assert controller.state.selected == recipe

        controller.back()
        assert controller.state.selected is None


class TestFavorites:
    """Test favorites toggling and persistence."""

    def test_toggle_persists(self, controller, store):
        """Test that every toggle rewrites the favorites file."""
        controller.toggle_favorite("Tomato Soup")
        assert store.load() == ["Tomato Soup"]
        assert controller.is_favorite("Tomato Soup")

        controller.toggle_favorite("Tomato Soup")
        assert store.load() == []
        assert not controller.is_favorite("Tomato Soup")

    def test_favorites_filter(self, controller):
        """Test that the favorites filter shows only favorited recipes from the list."""
        controller.start()
        controller.toggle_favorite("Lemon Tart")
        controller.set_filter("favorites")

        assert [r.recipe_name for r in controller.visible_recipes()] == ["Lemon Tart"]


class TestRegenerateImage:
    """Test on-demand image regeneration."""

    def test_updates_only_the_image(self, store, recipe_dicts):
        """Test that regeneration replaces only this recipe's image, in the list and the selection."""
        provider = FakeProvider(recipes=recipe_dicts, image_failures={"Beef Stew": 99})
        controller = RecipeController(provider=provider, favorites_store=store, retry_policy=RetryPolicy(3))
        controller.start()
        soup, stew, tart = controller.state.recipes
        assert stew.image_url == ""
        controller.select(stew)

        # Let the next attempt succeed
        provider.image_failures["Beef Stew"] = 0
        updated = controller.regenerate_image(stew)

        assert updated.image_url == "data:image/png;base64,BeefStew=="
        assert controller.state.recipes[1] == updated
        assert controller.state.selected == updated
        assert updated.model_dump(exclude={"image_url"}) == stew.model_dump(exclude={"image_url"})
        # Sibling recipes are untouched
        assert controller.state.recipes[0] == soup
        assert controller.state.recipes[2] == tart
        assert [r.recipe_name for r in controller.state.recipes] == ["Tomato Soup", "Beef Stew", "Lemon Tart"]
        assert controller.phase() == Phase.LOADED

    def test_failure_leaves_state_unchanged(self, store, recipe_dicts):
        """Test that a failed regeneration makes one attempt and changes nothing."""
        provider = FakeProvider(recipes=recipe_dicts, image_failures={"Beef Stew": 99})
        controller = RecipeController(provider=provider, favorites_store=store, retry_policy=RetryPolicy(3))
        controller.start()
        before = controller.state
        calls_before = provider.image_calls["Beef Stew"]

        with pytest.raises(ImageGenerationError):
            controller.regenerate_image(before.recipes[1])

        assert controller.state == before
        assert provider.image_calls["Beef Stew"] == calls_before + 1
