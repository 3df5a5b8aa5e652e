"""AI meal suggestion and recipe service."""

import logging
import re
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from pydantic import ValidationError

from nutritrack.domain.meals import Ingredient, MealDraft
from nutritrack.domain.nutrition import ZERO_MACROS
from nutritrack.domain.suggestions import (
    DietGoal,
    Err,
    MealSuggestion,
    Ok,
    Recipe,
    SuggestionList,
)

logger = logging.getLogger(__name__)

SUGGESTIONS_FAILED = "Failed to get suggestions. Please try again."
RECIPE_FAILED = "Failed to generate recipe. Please try again."
MISSING_INGREDIENTS = "Please enter some ingredients."

SUGGESTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "suggestions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "mealName": {
                        "type": "string",
                        "description": "The name of the meal suggestion.",
                    },
                    "description": {
                        "type": "string",
                        "description": "A brief, appealing description of the meal.",
                    },
                    "calories": {
                        "type": "number",
                        "description": "Estimated calories per serving.",
                    },
                    "protein": {
                        "type": "number",
                        "description": "Estimated grams of protein per serving.",
                    },
                },
                "required": ["mealName", "description", "calories", "protein"],
                "additionalProperties": False,
            },
        }
    },
    "required": ["suggestions"],
    "additionalProperties": False,
}

RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "mealName": {
            "type": "string",
            "description": "The name of the generated recipe.",
        },
        "description": {
            "type": "string",
            "description": "A short description of the recipe.",
        },
        "ingredients": {
            "type": "array",
            "items": {
                "type": "string",
                "description": 'e.g., "1 cup of rice" or "200g chicken breast"',
            },
        },
        "instructions": {
            "type": "array",
            "items": {
                "type": "string",
                "description": "A single step in the recipe instructions.",
            },
        },
    },
    "required": ["mealName", "description", "ingredients", "instructions"],
    "additionalProperties": False,
}

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


class SuggestionClientError(Exception):
    """Raised when the text-generation service cannot produce output."""


class SuggestionClient(Protocol):
    """Interface for structured text generation."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        store: bool,
        temperature: float,
        schema_name: str,
        schema: dict[str, object],
        prompt: str,
    ) -> str:
        """Return the raw JSON text produced for the schema."""


@dataclass
class SuggestionService:
    """Service that prompts the model and validates its structured output."""

    client: SuggestionClient
    model: str
    store: bool = False
    suggestion_temperature: float = 0.8
    recipe_temperature: float = 0.7

    async def get_meal_suggestions(
        self, goal: DietGoal
    ) -> Ok[list[MealSuggestion]] | Err:
        """Ask for five high-protein meals suited to the goal."""
        prompt = (
            f"Provide 5 meal suggestions for someone who is {goal.value}. "
            "The suggestions should be high in protein. Keep descriptions brief."
        )
        try:
            raw = await self.client.generate(
                model=self.model,
                store=self.store,
                temperature=self.suggestion_temperature,
                schema_name="meal_suggestions",
                schema=SUGGESTION_SCHEMA,
                prompt=prompt,
            )
            parsed = SuggestionList.model_validate_json(raw)
        except (SuggestionClientError, ValidationError):
            logger.exception("Meal suggestion request failed")
            return Err(SUGGESTIONS_FAILED)
        return Ok(parsed.suggestions)

    async def generate_recipe(self, ingredients: str) -> Ok[Recipe] | Err:
        """Ask for a simple recipe built from the given ingredients."""
        if not ingredients.strip():
            return Err(MISSING_INGREDIENTS)
        prompt = (
            "Create a simple and healthy recipe using the following ingredients: "
            f"{ingredients}. If the ingredients are insufficient, you can add 1-2 "
            "common pantry staples (like olive oil, salt, pepper)."
        )
        try:
            raw = await self.client.generate(
                model=self.model,
                store=self.store,
                temperature=self.recipe_temperature,
                schema_name="recipe",
                schema=RECIPE_SCHEMA,
                prompt=prompt,
            )
            recipe = Recipe.model_validate_json(raw)
        except (SuggestionClientError, ValidationError):
            logger.exception("Recipe generation request failed")
            return Err(RECIPE_FAILED)
        return Ok(recipe)


def parse_ingredient_line(line: str) -> Ingredient:
    """Split a free-text ingredient line into quantity, unit and name.

    The first token's numeric prefix is the quantity (1 when missing or zero).
    The second token is the unit only when more than two tokens are present.
    """
    tokens = line.split()
    quantity = _parse_quantity(tokens[0] if tokens else "")
    if len(tokens) > 2:  # noqa: PLR2004
        unit = tokens[1]
        name = " ".join(tokens[2:])
    else:
        unit = ""
        name = " ".join(tokens[1:])
    return Ingredient(id=uuid4(), name=name, quantity=quantity, unit=unit)


def recipe_to_draft(recipe: Recipe) -> MealDraft:
    """Convert a generated recipe into a single-serving meal with zero macros."""
    return MealDraft(
        name=recipe.meal_name,
        servings=1,
        per_serving=ZERO_MACROS,
        ingredients=[parse_ingredient_line(line) for line in recipe.ingredients],
    )


def _parse_quantity(token: str) -> float:
    match = _LEADING_NUMBER.match(token)
    if match is None:
        return 1.0
    return float(match.group()) or 1.0
