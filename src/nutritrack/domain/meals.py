"""Domain models for meals and their ingredients."""

from dataclasses import dataclass, field
from uuid import UUID

from nutritrack.domain.nutrition import ZERO_MACROS, MacroProfile


@dataclass(frozen=True)
class Ingredient:
    """An ingredient line of a meal.

    Ingredient macros are carried for schema compatibility only and are never
    summed into the meal's per-serving values.
    """

    id: UUID
    name: str
    quantity: float
    unit: str
    macros: MacroProfile = ZERO_MACROS


@dataclass(frozen=True)
class MealDraft:
    """Meal data before an identity has been assigned."""

    name: str
    servings: int
    per_serving: MacroProfile
    ingredients: list[Ingredient] = field(default_factory=list)


@dataclass(frozen=True)
class Meal:
    """A reusable meal definition with authoritative per-serving macros."""

    id: UUID
    name: str
    servings: int
    per_serving: MacroProfile
    ingredients: list[Ingredient] = field(default_factory=list)
