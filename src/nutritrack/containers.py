"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutritrack.adapters.openai_suggestion_client import OpenAISuggestionClient
from nutritrack.adapters.store_repositories import (
    StoreDailyLogRepository,
    StoreGoalsRepository,
    StoreManualGroceryRepository,
    StoreMealRepository,
    StoreWeeklyPlanRepository,
)
from nutritrack.adapters.supabase_store import SupabaseKeyValueStore
from nutritrack.config import Settings, parse_timezone
from nutritrack.services.daily_log import DailyLogService
from nutritrack.services.goals import GoalsService
from nutritrack.services.grocery import GroceryService
from nutritrack.services.meals import MealService
from nutritrack.services.store import InMemoryKeyValueStore, KeyValueStore
from nutritrack.services.suggestions import SuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    meal_service: MealService
    daily_log_service: DailyLogService
    goals_service: GoalsService
    grocery_service: GroceryService
    suggestion_service: SuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_store(settings: Settings) -> KeyValueStore:
    """Return the Supabase store when configured, else an in-memory one."""
    if settings.supabase_url and settings.supabase_service_key:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.supabase_table)
    return InMemoryKeyValueStore()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    store = build_store(resolved_settings)
    meal_repository = StoreMealRepository(store)
    meal_service = MealService(meal_repository)
    daily_log_service = DailyLogService(
        repository=StoreDailyLogRepository(store),
        meal_repository=meal_repository,
        timezone_name=parse_timezone(resolved_settings.timezone),
    )
    goals_service = GoalsService(StoreGoalsRepository(store))
    grocery_service = GroceryService(
        plan_repository=StoreWeeklyPlanRepository(store),
        item_repository=StoreManualGroceryRepository(store),
        meal_repository=meal_repository,
    )
    openai_client = OpenAISuggestionClient.create(resolved_settings.openai_api_key)
    suggestion_service = SuggestionService(
        client=openai_client,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
        suggestion_temperature=resolved_settings.suggestion_temperature,
        recipe_temperature=resolved_settings.recipe_temperature,
    )

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        meal_service=meal_service,
        daily_log_service=daily_log_service,
        goals_service=goals_service,
        grocery_service=grocery_service,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )
