"""
Tests for recipe sharing and the copied confirmation.
"""

from unittest.mock import Mock

from recipe_ai.scaling import scale_ingredients
from recipe_ai.sharing import (
    SHARE_SIGN_OFF,
    CopiedNotice,
    build_share_payload,
    format_share_text,
    share_recipe,
)

from conftest import make_recipe


class TestShareText:
    """Test the clipboard summary."""

    def test_format(self):
        """Test the full clipboard summary layout."""
        recipe = make_recipe("Tomato Soup")
        text = format_share_text(recipe, recipe.ingredients, "en")
        assert text == (
            "Tomato Soup\n\n"
            "Ingredients:\n"
            "- 800 g Tomatoes\n"
            "- 2 tbsp Olive oil\n"
            "- 0.5 tsp Salt\n\n"
            "A lovely tomato soup.\n\n"
            f"{SHARE_SIGN_OFF}"
        )

    def test_uses_scaled_quantities_and_language(self):
        """Test that the summary shows displayed quantities and a localized header."""
        recipe = make_recipe("Tomato Soup", servings=4)
        text = format_share_text(recipe, scale_ingredients(recipe.ingredients, 4, 8), "fr")
        assert "Ingrédients:" in text
        assert "- 1600 g Tomatoes" in text

    def test_payload(self):
        """Test the native share payload."""
        payload = build_share_payload(make_recipe("Beef Stew"), url="https://recipe.ai")
        assert payload["title"] == "Beef Stew"
        assert payload["text"].endswith(SHARE_SIGN_OFF)
        assert payload["url"] == "https://recipe.ai"


class TestShareRecipe:
    """Test native share and clipboard fallback."""

    def test_clipboard_fallback(self):
        """Test that the summary is copied when no native share exists."""
        recipe = make_recipe()
        copy = Mock()
        assert share_recipe(recipe, recipe.ingredients, "en", copy) is True
        copy.assert_called_once()
        assert copy.call_args[0][0].startswith("Tomato Soup\n\n")

    def test_native_share_preferred(self):
        """Test that native share is used instead of the clipboard."""
        recipe = make_recipe()
        copy, native = Mock(), Mock()
        assert share_recipe(recipe, recipe.ingredients, "en", copy, native_share=native) is False
        native.assert_called_once()
        copy.assert_not_called()

    def test_native_share_error_is_swallowed(self, caplog):
        """Test that a native share error is logged, not raised."""
        recipe = make_recipe()
        native = Mock(side_effect=RuntimeError("cancelled"))
        with caplog.at_level("ERROR", logger="recipe_ai.sharing"):
            result = share_recipe(recipe, recipe.ingredients, "en", Mock(), native_share=native)
        assert result is False
        assert "cancelled" in caplog.text

    def test_clipboard_error_is_swallowed(self):
        """Test that a clipboard error is reported as not copied."""
        recipe = make_recipe()
        copy = Mock(side_effect=OSError("no clipboard"))
        assert share_recipe(recipe, recipe.ingredients, "en", copy) is False


class TestCopiedNotice:
    """Test the self-dismissing confirmation."""

    def test_visible_for_duration(self):
        """Test that the notice hides itself after its duration."""
        now = [100.0]
        notice = CopiedNotice(duration=2.5, clock=lambda: now[0])
        assert not notice.is_visible()

        notice.show()
        now[0] = 102.0
        assert notice.is_visible()

        now[0] = 102.5
        assert not notice.is_visible()
        assert notice.shown_at is None
