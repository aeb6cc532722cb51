"""
Shared fixtures for the Recipe AI test suite.

FakeProvider stands in for the generative AI provider: it returns a canned
JSON body for recipe text and per-recipe image results, and records calls.
"""

import json
import threading
from typing import Any, Dict, List, Optional

import pytest

from recipe_ai.models import Recipe
from recipe_ai.providers.base import BaseProvider, ImageNotFoundError


def make_recipe_dict(name: str = "Tomato Soup", servings: int = 4, **overrides: Any) -> Dict[str, Any]:
    """Build a provider-shaped (camelCase) recipe dictionary."""
    data = {
        "recipeName": name,
        "description": f"A lovely {name.lower()}.",
        "servings": servings,
        "cookingTime": "40 minutes",
        "rating": 4,
        "nutrition": {"calories": "180 kcal", "protein": "4 g", "carbs": "20 g", "fat": "9 g"},
        "ingredients": [
            {"name": "Tomatoes", "quantity": 800, "unit": "g"},
            {"name": "Olive oil", "quantity": 2, "unit": "tbsp"},
            {"name": "Salt", "quantity": 0.5, "unit": "tsp"},
        ],
        "standardInstructions": ["Roast the tomatoes.", "Blend with stock."],
        "thermomixInstructions": ["Chop 5 sec/speed 5.", "Cook 20 min/100°C/speed 1."],
    }
    data.update(overrides)
    return data


def make_recipe(name: str = "Tomato Soup", image_url: str = "", **overrides: Any) -> Recipe:
    recipe = Recipe.model_validate(make_recipe_dict(name, **overrides))
    return recipe.with_image(image_url)


class FakeProvider(BaseProvider):
    """
    In-memory provider.

    Args:
        recipes: Recipe dicts returned under {"recipes": [...]}
        raw_text: Exact response body (overrides recipes)
        text_error: Exception raised by generate_recipe_json
        image_failures: recipe name -> number of failing image attempts
            before success (use a large number to fail forever)
    """
    name = "fake"

    def __init__(
        self,
        recipes: Optional[List[Dict[str, Any]]] = None,
        raw_text: Optional[str] = None,
        text_error: Optional[Exception] = None,
        image_failures: Optional[Dict[str, int]] = None,
    ) -> None:
        self.recipes = recipes or []
        self.raw_text = raw_text
        self.text_error = text_error
        self.image_failures = dict(image_failures or {})
        self.text_calls: List[Dict[str, Any]] = []
        self.image_calls: Dict[str, int] = {}
        self._lock = threading.Lock()

    def generate_recipe_json(self, prompt, system_instruction, response_schema):
        self.text_calls.append(
            {"prompt": prompt, "system_instruction": system_instruction, "response_schema": response_schema}
        )
        if self.text_error is not None:
            raise self.text_error
        if self.raw_text is not None:
            return self.raw_text
        return json.dumps({"recipes": self.recipes})

    def _recipe_name_from_prompt(self, prompt: str) -> str:
        # The image prompt quotes the recipe name: ... photo of "<name>". ...
        return prompt.split('"')[1]

    def generate_image(self, prompt):
        name = self._recipe_name_from_prompt(prompt)
        with self._lock:
            self.image_calls[name] = self.image_calls.get(name, 0) + 1
            attempt = self.image_calls[name]
        if attempt <= self.image_failures.get(name, 0):
            raise ImageNotFoundError(f"no image for {name} (attempt {attempt})")
        return f"data:image/png;base64,{name.replace(' ', '')}=="


@pytest.fixture
def recipe_dicts() -> List[Dict[str, Any]]:
    return [
        make_recipe_dict("Tomato Soup"),
        make_recipe_dict("Beef Stew", servings=6),
        make_recipe_dict("Lemon Tart", servings=8),
    ]


@pytest.fixture
def fake_provider(recipe_dicts) -> FakeProvider:
    return FakeProvider(recipes=recipe_dicts)
