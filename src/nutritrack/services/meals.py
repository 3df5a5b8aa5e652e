"""Meal management service."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from nutritrack.domain.meals import Meal, MealDraft

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for the meal collection."""

    def list_meals(self) -> list[Meal]:
        """Return all meals in insertion order."""

    def save_meals(self, meals: list[Meal]) -> None:
        """Replace the stored meal collection."""


@dataclass
class MealService:
    """Application service for meal CRUD."""

    repository: MealRepository

    def list_meals(self) -> list[Meal]:
        """Return all meals."""
        return self.repository.list_meals()

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal by id, if present."""
        return find_meal(self.repository.list_meals(), meal_id)

    def add_meal(self, draft: MealDraft) -> Meal:
        """Assign a fresh id to the draft and append it."""
        meal = Meal(
            id=uuid4(),
            name=draft.name,
            servings=draft.servings,
            per_serving=draft.per_serving,
            ingredients=list(draft.ingredients),
        )
        self.repository.save_meals([*self.repository.list_meals(), meal])
        return meal

    def update_meal(self, meal: Meal) -> Meal | None:
        """Replace the meal with the same id; no-op when it does not exist."""
        meals = self.repository.list_meals()
        if find_meal(meals, meal.id) is None:
            logger.debug("Ignoring update for unknown meal %s", meal.id)
            return None
        self.repository.save_meals(
            [meal if existing.id == meal.id else existing for existing in meals]
        )
        return meal

    def delete_meal(self, meal_id: UUID) -> None:
        """Remove a meal without touching log entries or the weekly plan."""
        meals = self.repository.list_meals()
        self.repository.save_meals([meal for meal in meals if meal.id != meal_id])


def find_meal(meals: list[Meal], meal_id: UUID) -> Meal | None:
    """Return the first meal with the given id."""
    for meal in meals:
        if meal.id == meal_id:
            return meal
    return None
