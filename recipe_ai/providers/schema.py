"""
Response schema declared to the provider for structured recipe output.

The field names, types and required lists are the interoperability contract
with the provider and with Recipe in recipe_ai.models. Nutrition values are
free-text strings; the only numeric fields are servings, rating and
ingredient quantity.
"""

NUTRITION_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "calories": {"type": "STRING", "description": 'Estimated calories, e.g., "450 kcal".'},
        "protein": {"type": "STRING", "description": 'Estimated protein in grams, e.g., "25 g".'},
        "carbs": {"type": "STRING", "description": 'Estimated carbohydrates in grams, e.g., "50 g".'},
        "fat": {"type": "STRING", "description": 'Estimated fat in grams, e.g., "15 g".'},
    },
    "required": ["calories", "protein", "carbs", "fat"],
}

INGREDIENT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "name": {"type": "STRING"},
        "quantity": {"type": "NUMBER"},
        "unit": {"type": "STRING", "description": "e.g., grams, ml, tsp, cup"},
    },
    "required": ["name", "quantity", "unit"],
}

RECIPE_DATA_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "recipeName": {"type": "STRING", "description": "The name of the recipe."},
        "description": {"type": "STRING", "description": "A short, appealing description of the dish."},
        "servings": {"type": "INTEGER", "description": "The default number of people this recipe serves."},
        "cookingTime": {
            "type": "STRING",
            "description": 'The total estimated cooking time, e.g., "45 minutes" or "1 hour 20 minutes".',
        },
        "rating": {"type": "INTEGER", "description": "A rating for the recipe on a scale of 1 to 5."},
        "nutrition": NUTRITION_SCHEMA,
        "ingredients": {
            "type": "ARRAY",
            "items": INGREDIENT_SCHEMA,
        },
        "standardInstructions": {
            "type": "ARRAY",
            "description": "Step-by-step cooking instructions for a standard kitchen.",
            "items": {"type": "STRING"},
        },
        "thermomixInstructions": {
            "type": "ARRAY",
            "description": "Step-by-step cooking instructions specifically for a Thermomix machine.",
            "items": {"type": "STRING"},
        },
    },
    "required": [
        "recipeName",
        "description",
        "servings",
        "cookingTime",
        "rating",
        "nutrition",
        "ingredients",
        "standardInstructions",
        "thermomixInstructions",
    ],
}

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "recipes": {
            "type": "ARRAY",
            "items": RECIPE_DATA_SCHEMA,
        },
    },
}
