"""
Recipe models for the Recipe AI app.

This module defines the canonical recipe schema used throughout the app.
The provider returns recipe JSON with camelCase field names; those names are
the wire contract and are kept as aliases so that Recipe.model_validate()
accepts provider output directly and Recipe.to_wire() reproduces it.

# NOTE: Recipes have no numeric ID. The recipe name is the identity key for
    favorites and for in-place updates (e.g. after an image is regenerated).
    Two generated recipes with the same name are treated as the same entity.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

# Supported UI / generation languages
LANGUAGE_EN = "en"
LANGUAGE_FR = "fr"
LANGUAGE_AR = "ar"

SUPPORTED_LANGUAGES = [LANGUAGE_EN, LANGUAGE_FR, LANGUAGE_AR]
DEFAULT_LANGUAGE = LANGUAGE_EN

# Languages rendered right-to-left
RTL_LANGUAGES = {LANGUAGE_AR}

# Instruction modes
COOK_MODE_STANDARD = "standard"
COOK_MODE_THERMOMIX = "thermomix"

COOK_MODES = [COOK_MODE_STANDARD, COOK_MODE_THERMOMIX]

# List filters
FILTER_ALL = "all"
FILTER_FAVORITES = "favorites"

RECIPE_FILTERS = [FILTER_ALL, FILTER_FAVORITES]


def text_direction(language: str) -> str:
    """Return "rtl" for right-to-left languages, "ltr" otherwise."""
    return "rtl" if language in RTL_LANGUAGES else "ltr"


class Nutrition(BaseModel):
    """Nutrition summary. Values are free text such as "450 kcal" or "25 g"."""
    calories: str = Field(..., description="Estimated calories, e.g. '450 kcal'")
    protein: str = Field(..., description="Estimated protein, e.g. '25 g'")
    carbs: str = Field(..., description="Estimated carbohydrates, e.g. '50 g'")
    fat: str = Field(..., description="Estimated fat, e.g. '15 g'")


class Ingredient(BaseModel):
    """A single ingredient line with a numeric quantity."""
    name: str = Field(..., description="Ingredient name")
    quantity: float = Field(..., description="Quantity for the recipe's default servings")
    unit: str = Field(..., description="Unit label, e.g. grams, ml, tsp, cup")


class Recipe(BaseModel):
    """
    A generated recipe.

    Attributes use snake_case; the provider's camelCase names are aliases.
    image_url is empty until an image has been generated (or when image
    generation failed), in which case the UI shows a placeholder.
    """
    recipe_name: str = Field(..., alias="recipeName", description="The name of the recipe")
    description: str = Field(..., description="A short, appealing description of the dish")
    servings: int = Field(..., ge=1, description="The default number of people this recipe serves")
    cooking_time: str = Field(..., alias="cookingTime", description="Total cooking time label, e.g. '45 minutes'")
    rating: int = Field(..., ge=1, le=5, description="Rating on a scale of 1 to 5")
    nutrition: Nutrition
    ingredients: List[Ingredient] = Field(..., description="Ingredients for the default servings")
    standard_instructions: List[str] = Field(..., alias="standardInstructions", description="Standard cooking steps")
    thermomix_instructions: List[str] = Field(..., alias="thermomixInstructions", description="Thermomix cooking steps")
    image_url: str = Field(default="", alias="imageUrl", description="Image URI (data: or http) or empty")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "recipeName": "Tomato Soup",
                "description": "A velvety soup of roasted tomatoes and basil.",
                "servings": 4,
                "cookingTime": "40 minutes",
                "rating": 4,
                "nutrition": {"calories": "180 kcal", "protein": "4 g", "carbs": "20 g", "fat": "9 g"},
                "ingredients": [{"name": "Tomatoes", "quantity": 800, "unit": "g"}],
                "standardInstructions": ["Roast the tomatoes.", "Blend with stock."],
                "thermomixInstructions": ["Chop 5 sec/speed 5.", "Cook 20 min/100°C/speed 1."],
                "imageUrl": "",
            }
        },
    )

    def instructions_for(self, mode: str) -> List[str]:
        """Return the instruction sequence for the given cook mode."""
        if mode == COOK_MODE_THERMOMIX:
            return self.thermomix_instructions
        return self.standard_instructions

    def with_image(self, image_url: str) -> "Recipe":
        """Return a copy of this recipe with only the image reference replaced."""
        return self.model_copy(update={"image_url": image_url})

    def to_wire(self) -> Dict[str, Any]:
        """Dump the recipe using the provider's camelCase field names."""
        return self.model_dump(by_alias=True)
