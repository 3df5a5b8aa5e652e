"""Weekly plan and grocery list services."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID, uuid4

from nutritrack.domain.grocery import GroceryLine, ManualGroceryItem, WeeklyPlan
from nutritrack.domain.meals import Meal
from nutritrack.services.meals import MealRepository

logger = logging.getLogger(__name__)


class WeeklyPlanRepository(Protocol):
    """Persistence interface for the weekly plan."""

    def get_plan(self) -> WeeklyPlan:
        """Return the plan, empty when nothing is planned."""

    def save_plan(self, plan: WeeklyPlan) -> None:
        """Replace the stored plan."""


class ManualGroceryRepository(Protocol):
    """Persistence interface for hand-added grocery items."""

    def list_items(self) -> list[ManualGroceryItem]:
        """Return manual items in insertion order."""

    def save_items(self, items: list[ManualGroceryItem]) -> None:
        """Replace the stored manual items."""


def ingredient_key(name: str, unit: str) -> tuple[str, str]:
    """Return the aggregation key for an ingredient.

    Names and units are trimmed and lowercased; no unit conversion or
    plural folding is applied.
    """
    return name.strip().lower(), unit.strip().lower()


def aggregate_grocery_list(plan: WeeklyPlan, meals: list[Meal]) -> list[GroceryLine]:
    """Merge ingredient quantities across the planned meals.

    Plan entries whose meal no longer exists are skipped. The first
    contributing ingredient fixes the display name and unit of a line.
    """
    meals_by_id = {meal.id: meal for meal in meals}
    buckets: dict[tuple[str, str], GroceryLine] = {}
    for meal_id, servings in plan.items():
        meal = meals_by_id.get(meal_id)
        if meal is None:
            logger.debug("Skipping planned meal %s that no longer exists", meal_id)
            continue
        for ingredient in meal.ingredients:
            key = ingredient_key(ingredient.name, ingredient.unit)
            amount = ingredient.quantity * servings
            existing = buckets.get(key)
            if existing is None:
                buckets[key] = GroceryLine(
                    name=ingredient.name, quantity=amount, unit=ingredient.unit
                )
            else:
                buckets[key] = GroceryLine(
                    name=existing.name,
                    quantity=existing.quantity + amount,
                    unit=existing.unit,
                )
    return sorted(buckets.values(), key=_line_sort_key)


def _line_sort_key(line: GroceryLine) -> tuple[str, str, str, str]:
    return line.name.casefold(), line.name, line.unit.casefold(), line.unit


@dataclass
class GroceryService:
    """Service for the weekly plan and the shopping list."""

    plan_repository: WeeklyPlanRepository
    item_repository: ManualGroceryRepository
    meal_repository: MealRepository

    def get_plan(self) -> WeeklyPlan:
        """Return the raw weekly plan."""
        return self.plan_repository.get_plan()

    def add_meal_to_plan(self, meal_id: UUID, servings: float) -> WeeklyPlan:
        """Add servings of a meal to the plan, accumulating existing counts."""
        plan = self.plan_repository.get_plan()
        plan[meal_id] = plan.get(meal_id, 0) + servings
        self.plan_repository.save_plan(plan)
        return plan

    def remove_meal_from_plan(self, meal_id: UUID) -> WeeklyPlan:
        """Drop a meal from the plan entirely."""
        plan = self.plan_repository.get_plan()
        plan.pop(meal_id, None)
        self.plan_repository.save_plan(plan)
        return plan

    def planned_meals(self) -> list[tuple[Meal, float]]:
        """Return planned meals with servings, hiding dangling entries."""
        meals_by_id = {meal.id: meal for meal in self.meal_repository.list_meals()}
        return [
            (meals_by_id[meal_id], servings)
            for meal_id, servings in self.plan_repository.get_plan().items()
            if meal_id in meals_by_id
        ]

    def grocery_list(self) -> list[GroceryLine]:
        """Return the aggregated list for the current plan and meals."""
        return aggregate_grocery_list(
            self.plan_repository.get_plan(), self.meal_repository.list_meals()
        )

    def list_manual_items(self) -> list[ManualGroceryItem]:
        """Return hand-added items."""
        return self.item_repository.list_items()

    def add_manual_item(self, text: str) -> ManualGroceryItem | None:
        """Add a trimmed manual item; blank text is ignored."""
        cleaned = text.strip()
        if not cleaned:
            return None
        item = ManualGroceryItem(id=uuid4(), text=cleaned, completed=False)
        self.item_repository.save_items([*self.item_repository.list_items(), item])
        return item

    def toggle_manual_item(self, item_id: UUID) -> ManualGroceryItem | None:
        """Flip the completed flag of a manual item."""
        toggled: ManualGroceryItem | None = None
        items: list[ManualGroceryItem] = []
        for item in self.item_repository.list_items():
            if item.id == item_id:
                toggled = ManualGroceryItem(
                    id=item.id, text=item.text, completed=not item.completed
                )
                items.append(toggled)
            else:
                items.append(item)
        if toggled is not None:
            self.item_repository.save_items(items)
        return toggled

    def delete_manual_item(self, item_id: UUID) -> None:
        """Remove a manual item; no-op when it does not exist."""
        items = self.item_repository.list_items()
        self.item_repository.save_items([item for item in items if item.id != item_id])
