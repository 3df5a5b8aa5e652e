"""Tests for the AI suggestion service."""

import asyncio

import pytest

from nutritrack.domain.suggestions import DietGoal, Err, Ok, Recipe
from nutritrack.services.suggestions import (
    MISSING_INGREDIENTS,
    RECIPE_FAILED,
    RECIPE_SCHEMA,
    SUGGESTION_SCHEMA,
    SUGGESTIONS_FAILED,
    SuggestionClientError,
    SuggestionService,
    parse_ingredient_line,
    recipe_to_draft,
)
from tests.conftest import FakeSuggestionClient


def test_suggestions_are_parsed(
    suggestion_service: SuggestionService, suggestion_client: FakeSuggestionClient
) -> None:
    result = asyncio.run(suggestion_service.get_meal_suggestions(DietGoal.CUTTING))

    assert isinstance(result, Ok)
    assert result.value[0].meal_name == "Steak and potatoes"
    assert result.value[1].protein == 60
    call = suggestion_client.calls[0]
    assert "cutting" in call["prompt"]
    assert call["temperature"] == 0.8
    assert call["schema_name"] == "meal_suggestions"


def test_recipe_is_parsed(
    suggestion_service: SuggestionService, suggestion_client: FakeSuggestionClient
) -> None:
    result = asyncio.run(suggestion_service.generate_recipe("chicken, rice"))

    assert isinstance(result, Ok)
    assert result.value.meal_name == "Chicken fried rice"
    assert result.value.instructions[-1] == "Combine."
    assert "chicken, rice" in suggestion_client.calls[0]["prompt"]
    assert suggestion_client.calls[0]["temperature"] == 0.7


def test_blank_ingredients_are_rejected_without_a_call(
    suggestion_service: SuggestionService, suggestion_client: FakeSuggestionClient
) -> None:
    result = asyncio.run(suggestion_service.generate_recipe("   "))

    assert result == Err(MISSING_INGREDIENTS)
    assert suggestion_client.calls == []


@pytest.mark.parametrize(
    "payload",
    ["not json", '{"suggestions": [{"mealName": "x"}]}', '[{"mealName": "x"}]'],
)
def test_malformed_suggestions_become_generic_error(payload: str) -> None:
    service = SuggestionService(
        client=FakeSuggestionClient(suggestions_payload=payload), model="m"
    )

    result = asyncio.run(service.get_meal_suggestions(DietGoal.BULKING))

    assert result == Err(SUGGESTIONS_FAILED)


def test_transport_failure_becomes_generic_error() -> None:
    service = SuggestionService(
        client=FakeSuggestionClient(error=SuggestionClientError("boom")), model="m"
    )

    suggestions = asyncio.run(service.get_meal_suggestions(DietGoal.BULKING))
    recipe = asyncio.run(service.generate_recipe("eggs"))

    assert suggestions == Err(SUGGESTIONS_FAILED)
    assert recipe == Err(RECIPE_FAILED)


def test_schemas_are_strict_objects() -> None:
    for schema in (SUGGESTION_SCHEMA, RECIPE_SCHEMA):
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False


@pytest.mark.parametrize(
    ("line", "quantity", "unit", "name"),
    [
        ("1 cup of rice", 1, "cup", "of rice"),
        ("2 eggs", 2, "", "eggs"),
        ("200g chicken breast", 200, "chicken", "breast"),
        ("salt", 1, "", ""),
        ("1/2 cup milk", 1, "cup", "milk"),
        ("0 tbsp oil", 1, "tbsp", "oil"),
        ("a pinch of salt", 1, "pinch", "of salt"),
        ("1.5   kg  potatoes ", 1.5, "kg", "potatoes"),
        ("", 1, "", ""),
    ],
)
def test_parse_ingredient_line(
    line: str, quantity: float, unit: str, name: str
) -> None:
    ingredient = parse_ingredient_line(line)

    assert ingredient.quantity == quantity
    assert ingredient.unit == unit
    assert ingredient.name == name
    assert ingredient.macros.calories == 0


def test_recipe_to_draft() -> None:
    recipe = Recipe(
        mealName="Rice bowl",
        description="Simple bowl.",
        ingredients=["1 cup rice", "2 eggs"],
        instructions=["Cook."],
    )

    draft = recipe_to_draft(recipe)

    assert draft.name == "Rice bowl"
    assert draft.servings == 1
    assert draft.per_serving.calories == 0
    assert [(i.quantity, i.unit, i.name) for i in draft.ingredients] == [
        (1, "cup", "rice"),
        (2, "", "eggs"),
    ]
