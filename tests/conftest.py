"""Shared test fixtures."""

import json
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

import pytest

from nutritrack.adapters.store_repositories import (
    StoreDailyLogRepository,
    StoreGoalsRepository,
    StoreManualGroceryRepository,
    StoreMealRepository,
    StoreWeeklyPlanRepository,
)
from nutritrack.config import Settings
from nutritrack.containers import AppContainer
from nutritrack.domain.log import DailyLogEntry
from nutritrack.domain.meals import Ingredient, Meal, MealDraft
from nutritrack.domain.nutrition import MacroProfile
from nutritrack.services.daily_log import DailyLogService
from nutritrack.services.goals import GoalsService
from nutritrack.services.grocery import GroceryService
from nutritrack.services.meals import MealService
from nutritrack.services.store import InMemoryKeyValueStore
from nutritrack.services.suggestions import SuggestionClient, SuggestionService


@dataclass
class FakeSuggestionClient(SuggestionClient):
    """Fake text-generation client returning queued payloads."""

    suggestions_payload: str = field(
        default_factory=lambda: json.dumps(
            {
                "suggestions": [
                    {
                        "mealName": "Steak and potatoes",
                        "description": "Lean sirloin with roasted potatoes.",
                        "calories": 750,
                        "protein": 55,
                    },
                    {
                        "mealName": "Chicken burrito bowl",
                        "description": "Rice, beans and grilled chicken.",
                        "calories": 820,
                        "protein": 60,
                    },
                ]
            }
        )
    )
    recipe_payload: str = field(
        default_factory=lambda: json.dumps(
            {
                "mealName": "Chicken fried rice",
                "description": "Quick weeknight fried rice.",
                "ingredients": [
                    "2 cups cooked rice",
                    "200 g chicken breast",
                    "1 tbsp soy sauce",
                ],
                "instructions": ["Cook the chicken.", "Fry the rice.", "Combine."],
            }
        )
    )
    error: Exception | None = None
    calls: list[dict[str, object]] = field(default_factory=list)

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
        self.calls.append(
            {
                "model": model,
                "temperature": temperature,
                "schema_name": schema_name,
                "prompt": prompt,
            }
        )
        if self.error is not None:
            raise self.error
        if schema_name == "recipe":
            return self.recipe_payload
        return self.suggestions_payload


def make_meal(  # noqa: PLR0913
    name: str = "Chicken and rice",
    calories: float = 400,
    protein_g: float = 35,
    carbs_g: float = 45,
    fat_g: float = 8,
    ingredients: list[tuple[str, float, str]] | None = None,
    meal_id: UUID | None = None,
) -> Meal:
    """Build a meal with ingredients given as (name, quantity, unit)."""
    return Meal(
        id=meal_id or uuid4(),
        name=name,
        servings=1,
        per_serving=MacroProfile(
            calories=calories, protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g
        ),
        ingredients=[
            Ingredient(id=uuid4(), name=ing_name, quantity=quantity, unit=unit)
            for ing_name, quantity, unit in ingredients or []
        ],
    )


def make_draft(
    name: str = "Chicken and rice",
    calories: float = 400,
    ingredients: list[tuple[str, float, str]] | None = None,
) -> MealDraft:
    """Build a meal draft from the same shorthand as make_meal."""
    meal = make_meal(name=name, calories=calories, ingredients=ingredients)
    return MealDraft(
        name=meal.name,
        servings=meal.servings,
        per_serving=meal.per_serving,
        ingredients=meal.ingredients,
    )


def make_entry(
    timestamp: datetime, calories: float = 100, **macros: float
) -> DailyLogEntry:
    """Build a log entry at a timestamp."""
    return DailyLogEntry(
        id=uuid4(),
        meal_id=uuid4(),
        meal_name="Oats",
        servings=1,
        calories=calories,
        protein_g=macros.get("protein_g", 0),
        carbs_g=macros.get("carbs_g", 0),
        fat_g=macros.get("fat_g", 0),
        timestamp=timestamp,
    )


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def meal_repository(store: InMemoryKeyValueStore) -> StoreMealRepository:
    return StoreMealRepository(store)


@pytest.fixture
def meal_service(meal_repository: StoreMealRepository) -> MealService:
    return MealService(meal_repository)


@pytest.fixture
def daily_log_service(
    store: InMemoryKeyValueStore, meal_repository: StoreMealRepository
) -> DailyLogService:
    return DailyLogService(
        repository=StoreDailyLogRepository(store),
        meal_repository=meal_repository,
    )


@pytest.fixture
def goals_service(store: InMemoryKeyValueStore) -> GoalsService:
    return GoalsService(StoreGoalsRepository(store))


@pytest.fixture
def grocery_service(
    store: InMemoryKeyValueStore, meal_repository: StoreMealRepository
) -> GroceryService:
    return GroceryService(
        plan_repository=StoreWeeklyPlanRepository(store),
        item_repository=StoreManualGroceryRepository(store),
        meal_repository=meal_repository,
    )


@pytest.fixture
def suggestion_client() -> FakeSuggestionClient:
    return FakeSuggestionClient()


@pytest.fixture
def suggestion_service(suggestion_client: FakeSuggestionClient) -> SuggestionService:
    return SuggestionService(client=suggestion_client, model="gpt-4.1-mini")


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    meal_service: MealService,
    daily_log_service: DailyLogService,
    goals_service: GoalsService,
    grocery_service: GroceryService,
    suggestion_service: SuggestionService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        meal_service=meal_service,
        daily_log_service=daily_log_service,
        goals_service=goals_service,
        grocery_service=grocery_service,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )
