"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID, uuid4

from fastapi import FastAPI, HTTPException, Request, status

from nutritrack.api.ai import router as ai_router
from nutritrack.api.models import (
    LogEntryPayload,
    MacrosPayload,
    ManualItemPayload,
    MealPayload,
    PlanEntryPayload,
)
from nutritrack.api.serializers import (
    serialize_entry,
    serialize_grocery_line,
    serialize_manual_item,
    serialize_meal,
    serialize_progress,
    serialize_totals,
)
from nutritrack.app_logging import configure_logging
from nutritrack.containers import AppContainer
from nutritrack.domain.goals import Goals
from nutritrack.domain.meals import Ingredient, Meal, MealDraft
from nutritrack.domain.nutrition import MacroProfile, macro_fields


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting NutriTrack API (environment=%s)",
            app.state.container.settings.environment,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(ai_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/goals")
    async def get_goals(request: Request) -> dict[str, object]:
        """Return the daily goals."""
        state_container: AppContainer = request.app.state.container
        return {"goals": macro_fields(state_container.goals_service.get_goals())}

    @app.put("/goals")
    async def set_goals(payload: MacrosPayload, request: Request) -> dict[str, object]:
        """Replace the daily goals."""
        state_container: AppContainer = request.app.state.container
        goals = state_container.goals_service.set_goals(
            Goals(**macro_fields(payload))
        )
        return {"goals": macro_fields(goals)}

    @app.get("/tracker/today")
    async def tracker_today(request: Request) -> dict[str, object]:
        """Return today's entries, totals and progress against goals."""
        state_container: AppContainer = request.app.state.container
        totals, entries = state_container.daily_log_service.get_day()
        progress = state_container.goals_service.progress(totals)
        return {
            "totals": serialize_totals(totals),
            "entries": [serialize_entry(entry) for entry in entries],
            "progress": [serialize_progress(item) for item in progress],
        }

    @app.get("/log")
    async def list_log(request: Request) -> dict[str, object]:
        """Return the full log history."""
        state_container: AppContainer = request.app.state.container
        entries = state_container.daily_log_service.list_entries()
        return {"entries": [serialize_entry(entry) for entry in entries]}

    @app.post("/log", status_code=status.HTTP_201_CREATED)
    async def add_log_entry(
        payload: LogEntryPayload, request: Request
    ) -> dict[str, object]:
        """Log servings of a meal."""
        state_container: AppContainer = request.app.state.container
        entry = state_container.daily_log_service.add_entry_to_log(
            payload.meal_id, payload.servings
        )
        if entry is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found"
            )
        return {"entry": serialize_entry(entry)}

    @app.delete("/log/{entry_id}")
    async def remove_log_entry(entry_id: UUID, request: Request) -> dict[str, str]:
        """Remove a log entry."""
        state_container: AppContainer = request.app.state.container
        state_container.daily_log_service.remove_entry_from_log(entry_id)
        return {"status": "ok"}

    @app.get("/meals")
    async def list_meals(request: Request) -> dict[str, object]:
        """Return all meals."""
        state_container: AppContainer = request.app.state.container
        meals = state_container.meal_service.list_meals()
        return {"meals": [serialize_meal(meal) for meal in meals]}

    @app.post("/meals", status_code=status.HTTP_201_CREATED)
    async def create_meal(payload: MealPayload, request: Request) -> dict[str, object]:
        """Create a meal."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_service.add_meal(_draft_from_payload(payload))
        return {"meal": serialize_meal(meal)}

    @app.get("/meals/{meal_id}")
    async def get_meal(meal_id: UUID, request: Request) -> dict[str, object]:
        """Return a single meal."""
        state_container: AppContainer = request.app.state.container
        meal = state_container.meal_service.get_meal(meal_id)
        if meal is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found"
            )
        return {"meal": serialize_meal(meal)}

    @app.put("/meals/{meal_id}")
    async def update_meal(
        meal_id: UUID, payload: MealPayload, request: Request
    ) -> dict[str, object]:
        """Replace a meal record."""
        state_container: AppContainer = request.app.state.container
        draft = _draft_from_payload(payload)
        updated = state_container.meal_service.update_meal(
            Meal(
                id=meal_id,
                name=draft.name,
                servings=draft.servings,
                per_serving=draft.per_serving,
                ingredients=draft.ingredients,
            )
        )
        if updated is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Meal not found"
            )
        return {"meal": serialize_meal(updated)}

    @app.delete("/meals/{meal_id}")
    async def delete_meal(meal_id: UUID, request: Request) -> dict[str, str]:
        """Delete a meal without touching the log or plan."""
        state_container: AppContainer = request.app.state.container
        state_container.meal_service.delete_meal(meal_id)
        return {"status": "ok"}

    @app.get("/plan")
    async def get_plan(request: Request) -> dict[str, object]:
        """Return planned meals with their servings."""
        state_container: AppContainer = request.app.state.container
        planned = state_container.grocery_service.planned_meals()
        return {
            "plan": [
                {"meal_id": str(meal.id), "meal_name": meal.name, "servings": servings}
                for meal, servings in planned
            ]
        }

    @app.post("/plan")
    async def add_to_plan(
        payload: PlanEntryPayload, request: Request
    ) -> dict[str, object]:
        """Add servings of a meal to the weekly plan."""
        state_container: AppContainer = request.app.state.container
        plan = state_container.grocery_service.add_meal_to_plan(
            payload.meal_id, payload.servings
        )
        return {"plan": {str(meal_id): servings for meal_id, servings in plan.items()}}

    @app.delete("/plan/{meal_id}")
    async def remove_from_plan(meal_id: UUID, request: Request) -> dict[str, object]:
        """Remove a meal from the weekly plan."""
        state_container: AppContainer = request.app.state.container
        plan = state_container.grocery_service.remove_meal_from_plan(meal_id)
        return {"plan": {str(key): servings for key, servings in plan.items()}}

    @app.get("/grocery-list")
    async def grocery_list(request: Request) -> dict[str, object]:
        """Return the generated list and the manual items."""
        state_container: AppContainer = request.app.state.container
        lines = state_container.grocery_service.grocery_list()
        items = state_container.grocery_service.list_manual_items()
        return {
            "generated": [serialize_grocery_line(line) for line in lines],
            "manual": [serialize_manual_item(item) for item in items],
        }

    @app.post("/grocery-list/items", status_code=status.HTTP_201_CREATED)
    async def add_manual_item(
        payload: ManualItemPayload, request: Request
    ) -> dict[str, object]:
        """Add a manual grocery item."""
        state_container: AppContainer = request.app.state.container
        item = state_container.grocery_service.add_manual_item(payload.text)
        if item is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Item text is empty"
            )
        return {"item": serialize_manual_item(item)}

    @app.post("/grocery-list/items/{item_id}/toggle")
    async def toggle_manual_item(item_id: UUID, request: Request) -> dict[str, object]:
        """Toggle a manual item's completed flag."""
        state_container: AppContainer = request.app.state.container
        item = state_container.grocery_service.toggle_manual_item(item_id)
        if item is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Item not found"
            )
        return {"item": serialize_manual_item(item)}

    @app.delete("/grocery-list/items/{item_id}")
    async def delete_manual_item(item_id: UUID, request: Request) -> dict[str, str]:
        """Delete a manual grocery item."""
        state_container: AppContainer = request.app.state.container
        state_container.grocery_service.delete_manual_item(item_id)
        return {"status": "ok"}

    return app


def _draft_from_payload(payload: MealPayload) -> MealDraft:
    return MealDraft(
        name=payload.name,
        servings=payload.servings,
        per_serving=MacroProfile(**macro_fields(payload.per_serving)),
        ingredients=[
            Ingredient(
                id=uuid4(),
                name=ingredient.name,
                quantity=ingredient.quantity,
                unit=ingredient.unit,
            )
            for ingredient in payload.ingredients
        ],
    )
