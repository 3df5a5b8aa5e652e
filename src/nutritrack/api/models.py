"""Pydantic models for API request payloads."""

from uuid import UUID

from pydantic import BaseModel, Field

from nutritrack.domain.suggestions import DietGoal


class MacrosPayload(BaseModel):
    """Calories and macros in grams."""

    calories: float = Field(default=0.0, ge=0.0)
    protein_g: float = Field(default=0.0, ge=0.0)
    carbs_g: float = Field(default=0.0, ge=0.0)
    fat_g: float = Field(default=0.0, ge=0.0)


class IngredientPayload(BaseModel):
    """Ingredient line submitted with a meal."""

    name: str
    quantity: float = Field(default=0.0, ge=0.0)
    unit: str = ""


class MealPayload(BaseModel):
    """Meal create or replace payload."""

    name: str
    servings: int = Field(default=1, ge=1)
    per_serving: MacrosPayload = Field(default_factory=MacrosPayload)
    ingredients: list[IngredientPayload] = Field(default_factory=list)


class LogEntryPayload(BaseModel):
    """Servings of a meal eaten."""

    meal_id: UUID
    servings: float = Field(gt=0.0)


class PlanEntryPayload(BaseModel):
    """Servings of a meal to add to the weekly plan."""

    meal_id: UUID
    servings: float = Field(gt=0.0)


class ManualItemPayload(BaseModel):
    """Free-text grocery item."""

    text: str


class SuggestionRequest(BaseModel):
    """Goal for meal suggestions."""

    goal: DietGoal


class RecipeRequest(BaseModel):
    """Free-text ingredients to build a recipe from."""

    ingredients: str


class RecipePayload(BaseModel):
    """Generated recipe submitted for saving as a meal."""

    meal_name: str
    description: str = ""
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
