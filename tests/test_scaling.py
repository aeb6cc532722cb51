"""
Tests for portion scaling.
"""

import pytest

from recipe_ai.models import Ingredient
from recipe_ai.scaling import adjust_portions, format_quantity, portion_multiplier, round_quantity, scale_ingredients

from conftest import make_recipe


class TestScaleIngredients:
    """Test linear scaling of ingredient quantities."""

    def test_scales_by_portions_over_servings(self):
        """Test that quantities scale by portions over servings."""
        recipe = make_recipe(servings=4)
        scaled = scale_ingredients(recipe.ingredients, recipe.servings, 6)
        assert [i.quantity for i in scaled] == [1200, 3, 0.75]
        assert [i.name for i in scaled] == ["Tomatoes", "Olive oil", "Salt"]

    def test_rounds_to_two_decimals(self):
        """Test that scaled quantities keep two decimals."""
        scaled = scale_ingredients([Ingredient(name="Sugar", quantity=100, unit="g")], 3, 1)
        assert scaled[0].quantity == 33.33

    def test_halves_round_up(self):
        """Test that a third decimal of 5 rounds up (0.125 -> 0.13), not to even."""
        scaled = scale_ingredients([Ingredient(name="Salt", quantity=0.25, unit="tsp")], 4, 2)
        assert scaled[0].quantity == 0.13

    def test_round_quantity(self):
        """Test rounding on the exact binary value of the float."""
        assert round_quantity(0.125) == 0.13
        assert round_quantity(2.675) == 2.67
        assert round_quantity(1.5) == 1.5

    def test_default_portions_are_unchanged(self):
        """Test that the default servings reproduce the source quantities."""
        recipe = make_recipe(servings=4)
        scaled = scale_ingredients(recipe.ingredients, 4, 4)
        assert [i.quantity for i in scaled] == [i.quantity for i in recipe.ingredients]

    def test_source_is_not_modified(self):
        """Test that scaling leaves the recipe's ingredients alone."""
        recipe = make_recipe(servings=4)
        scale_ingredients(recipe.ingredients, 4, 8)
        assert recipe.ingredients[0].quantity == 800

    def test_invalid_servings(self):
        """Test that non-positive servings are rejected."""
        with pytest.raises(ValueError):
            portion_multiplier(0, 2)


class TestAdjustPortions:
    """Test the portion stepper."""

    def test_increment_and_decrement(self):
        """Test that the stepper moves by one portion."""
        assert adjust_portions(4, 1) == 5
        assert adjust_portions(4, -1) == 3

    def test_never_below_one(self):
        """Test that portions never drop below one."""
        assert adjust_portions(1, -1) == 1
        assert adjust_portions(2, -5) == 1


class TestFormatQuantity:
    """Test quantity display."""

    @pytest.mark.parametrize(
        "quantity,expected",
        [(2.0, "2"), (800, "800"), (0.75, "0.75"), (33.33, "33.33")],
    )
    def test_format(self, quantity, expected):
        """Test that whole quantities drop the trailing ".0"."""
        assert format_quantity(quantity) == expected
