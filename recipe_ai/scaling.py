"""
Portion scaling for ingredient quantities.

Scaling is display state only: the source recipe is never modified and the
adjusted portions are not persisted.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import List

from recipe_ai.models import Ingredient

MIN_PORTIONS = 1

TWO_PLACES = Decimal("0.01")


def round_quantity(value: float) -> float:
    """Round to two decimals, halves away from zero, using the exact float value."""
    return float(Decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def portion_multiplier(servings: int, portions: int) -> float:
    """Ratio between requested portions and the recipe's default servings."""
    if servings <= 0:
        raise ValueError(f"servings must be positive, got {servings}")
    return portions / servings


def scale_ingredients(ingredients: List[Ingredient], servings: int, portions: int) -> List[Ingredient]:
    """
    Scale ingredient quantities linearly to a number of portions.

    Each quantity becomes quantity * (portions / servings), rounded to two
    decimal places with halves rounded up (0.125 -> 0.13).

    Args:
        ingredients: Source ingredients for the default servings
        servings: Default servings of the recipe
        portions: Requested portions

    Returns:
        New Ingredient objects, in the same order

    Examples:
        >>> scale_ingredients([Ingredient(name="Flour", quantity=200, unit="g")], 4, 6)[0].quantity
        300.0
    """
    multiplier = portion_multiplier(servings, portions)
    return [
        ingredient.model_copy(update={"quantity": round_quantity(ingredient.quantity * multiplier)})
        for ingredient in ingredients
    ]


def adjust_portions(current: int, delta: int) -> int:
    """Change the portion count by delta without going below one."""
    return max(MIN_PORTIONS, current + delta)


def format_quantity(quantity: float) -> str:
    """Render a quantity without a trailing ".0" (2.0 -> "2", 2.5 -> "2.5")."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return str(quantity)
