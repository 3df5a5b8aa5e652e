"""Repositories that persist domain records under key-value store keys."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from nutritrack.domain.goals import Goals
from nutritrack.domain.grocery import ManualGroceryItem, WeeklyPlan
from nutritrack.domain.log import DailyLogEntry
from nutritrack.domain.meals import Ingredient, Meal
from nutritrack.domain.nutrition import MacroProfile, macro_fields, parse_macro_fields
from nutritrack.services.daily_log import DailyLogRepository
from nutritrack.services.goals import GoalsRepository
from nutritrack.services.grocery import ManualGroceryRepository, WeeklyPlanRepository
from nutritrack.services.meals import MealRepository
from nutritrack.services.store import KeyValueStore

GOALS_KEY = "nutritrack-goals"
MEALS_KEY = "nutritrack-meals"
DAILY_LOG_KEY = "nutritrack-dailyLog"
WEEKLY_PLAN_KEY = "nutritrack-weeklyPlan"
MANUAL_LIST_KEY = "nutritrack-manualList"


@dataclass
class StoreGoalsRepository(GoalsRepository):
    """Goals singleton stored under one key."""

    store: KeyValueStore

    def get_goals(self) -> Goals | None:
        """Return stored goals, if any."""
        raw = self.store.get(GOALS_KEY)
        if not isinstance(raw, dict):
            return None
        return Goals(**parse_macro_fields(raw))

    def save_goals(self, goals: Goals) -> None:
        """Replace the stored goals."""
        self.store.set(GOALS_KEY, macro_fields(goals))


@dataclass
class StoreMealRepository(MealRepository):
    """Meal collection stored as a JSON list."""

    store: KeyValueStore

    def list_meals(self) -> list[Meal]:
        """Return all stored meals."""
        return [_parse_meal(row) for row in _rows(self.store.get(MEALS_KEY, []))]

    def save_meals(self, meals: list[Meal]) -> None:
        """Replace the stored meal collection."""
        self.store.set(MEALS_KEY, [_serialize_meal(meal) for meal in meals])


@dataclass
class StoreDailyLogRepository(DailyLogRepository):
    """Daily log stored as a JSON list."""

    store: KeyValueStore

    def list_entries(self) -> list[DailyLogEntry]:
        """Return all stored log entries."""
        return [
            _parse_entry(row) for row in _rows(self.store.get(DAILY_LOG_KEY, []))
        ]

    def save_entries(self, entries: list[DailyLogEntry]) -> None:
        """Replace the stored log."""
        self.store.set(DAILY_LOG_KEY, [_serialize_entry(entry) for entry in entries])


@dataclass
class StoreWeeklyPlanRepository(WeeklyPlanRepository):
    """Weekly plan stored as a JSON object keyed by meal id."""

    store: KeyValueStore

    def get_plan(self) -> WeeklyPlan:
        """Return the stored plan."""
        raw = self.store.get(WEEKLY_PLAN_KEY, {})
        if not isinstance(raw, dict):
            return {}
        return {UUID(meal_id): float(servings) for meal_id, servings in raw.items()}

    def save_plan(self, plan: WeeklyPlan) -> None:
        """Replace the stored plan."""
        self.store.set(
            WEEKLY_PLAN_KEY,
            {str(meal_id): servings for meal_id, servings in plan.items()},
        )


@dataclass
class StoreManualGroceryRepository(ManualGroceryRepository):
    """Manual grocery items stored as a JSON list."""

    store: KeyValueStore

    def list_items(self) -> list[ManualGroceryItem]:
        """Return stored manual items."""
        return [
            ManualGroceryItem(
                id=UUID(str(row["id"])),
                text=str(row.get("text", "")),
                completed=bool(row.get("completed", False)),
            )
            for row in _rows(self.store.get(MANUAL_LIST_KEY, []))
        ]

    def save_items(self, items: list[ManualGroceryItem]) -> None:
        """Replace the stored manual items."""
        self.store.set(
            MANUAL_LIST_KEY,
            [
                {"id": str(item.id), "text": item.text, "completed": item.completed}
                for item in items
            ],
        )


def _rows(raw: object) -> list[dict[str, object]]:
    if not isinstance(raw, list):
        return []
    return [row for row in raw if isinstance(row, dict)]


def _serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "name": meal.name,
        "servings": meal.servings,
        "per_serving": macro_fields(meal.per_serving),
        "ingredients": [
            {
                "id": str(ingredient.id),
                "name": ingredient.name,
                "quantity": ingredient.quantity,
                "unit": ingredient.unit,
                "macros": macro_fields(ingredient.macros),
            }
            for ingredient in meal.ingredients
        ],
    }


def _parse_meal(row: dict[str, object]) -> Meal:
    """Parse a stored meal into a domain model."""
    return Meal(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        servings=int(row.get("servings", 1)),
        per_serving=MacroProfile(**parse_macro_fields(row.get("per_serving"))),
        ingredients=[
            Ingredient(
                id=UUID(str(item["id"])),
                name=str(item.get("name", "")),
                quantity=float(item.get("quantity", 0.0)),
                unit=str(item.get("unit", "")),
                macros=MacroProfile(**parse_macro_fields(item.get("macros"))),
            )
            for item in _rows(row.get("ingredients", []))
        ],
    )


def _serialize_entry(entry: DailyLogEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "meal_id": str(entry.meal_id),
        "meal_name": entry.meal_name,
        "servings": entry.servings,
        "calories": entry.calories,
        "protein_g": entry.protein_g,
        "carbs_g": entry.carbs_g,
        "fat_g": entry.fat_g,
        "timestamp": entry.timestamp.isoformat(),
    }


def _parse_entry(row: dict[str, object]) -> DailyLogEntry:
    """Parse a stored log entry into a domain model."""
    return DailyLogEntry(
        id=UUID(str(row["id"])),
        meal_id=UUID(str(row["meal_id"])),
        meal_name=str(row.get("meal_name", "")),
        servings=float(row.get("servings", 0.0)),
        calories=float(row.get("calories", 0.0)),
        protein_g=float(row.get("protein_g", 0.0)),
        carbs_g=float(row.get("carbs_g", 0.0)),
        fat_g=float(row.get("fat_g", 0.0)),
        timestamp=datetime.fromisoformat(str(row["timestamp"])),
    )
