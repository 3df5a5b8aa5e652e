"""AI planner endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from nutritrack.api.models import RecipePayload, RecipeRequest, SuggestionRequest
from nutritrack.api.serializers import serialize_meal
from nutritrack.domain.suggestions import Err, Recipe
from nutritrack.services.suggestions import MISSING_INGREDIENTS, recipe_to_draft

if TYPE_CHECKING:
    from nutritrack.containers import AppContainer

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("/suggestions")
async def meal_suggestions(
    payload: SuggestionRequest, request: Request
) -> dict[str, object]:
    """Return meal suggestions for a bulking or cutting goal."""
    container: AppContainer = request.app.state.container
    result = await container.suggestion_service.get_meal_suggestions(payload.goal)
    if isinstance(result, Err):
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=result.reason
        )
    return {
        "suggestions": [
            suggestion.model_dump(by_alias=False) for suggestion in result.value
        ]
    }


@router.post("/recipe")
async def generate_recipe(
    payload: RecipeRequest, request: Request
) -> dict[str, object]:
    """Generate a recipe from free-text ingredients."""
    container: AppContainer = request.app.state.container
    result = await container.suggestion_service.generate_recipe(payload.ingredients)
    if isinstance(result, Err):
        status_code = (
            status.HTTP_400_BAD_REQUEST
            if result.reason == MISSING_INGREDIENTS
            else status.HTTP_502_BAD_GATEWAY
        )
        raise HTTPException(status_code=status_code, detail=result.reason)
    return {"recipe": result.value.model_dump(by_alias=False)}


@router.post("/recipe/save", status_code=status.HTTP_201_CREATED)
async def save_recipe(payload: RecipePayload, request: Request) -> dict[str, object]:
    """Save a generated recipe as a meal."""
    container: AppContainer = request.app.state.container
    recipe = Recipe.model_validate(payload.model_dump())
    meal = container.meal_service.add_meal(recipe_to_draft(recipe))
    return {"meal": serialize_meal(meal)}
