"""Models for AI meal suggestions and generated recipes."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class DietGoal(StrEnum):
    """Goal tag sent with a suggestion request."""

    BULKING = "bulking"
    CUTTING = "cutting"


class MealSuggestion(BaseModel):
    """Single suggested meal."""

    model_config = ConfigDict(populate_by_name=True)

    meal_name: str = Field(alias="mealName")
    description: str
    calories: float
    protein: float


class SuggestionList(BaseModel):
    """Structured output for a suggestion request."""

    suggestions: list[MealSuggestion]


class Recipe(BaseModel):
    """Structured output for a recipe request."""

    model_config = ConfigDict(populate_by_name=True)

    meal_name: str = Field(alias="mealName")
    description: str
    ingredients: list[str]
    instructions: list[str]


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful AI result."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed AI result with a user-facing reason."""

    reason: str
