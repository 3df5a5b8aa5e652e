"""JSON serializers for API responses."""

from nutritrack.domain.goals import MacroProgress
from nutritrack.domain.grocery import GroceryLine, ManualGroceryItem
from nutritrack.domain.log import DailyLogEntry, DailyTotals
from nutritrack.domain.meals import Meal
from nutritrack.domain.nutrition import macro_fields


def serialize_meal(meal: Meal) -> dict[str, object]:
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
            }
            for ingredient in meal.ingredients
        ],
    }


def serialize_entry(entry: DailyLogEntry) -> dict[str, object]:
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


def serialize_totals(totals: DailyTotals) -> dict[str, object]:
    return {
        "day": totals.day.isoformat(),
        "count": totals.count,
        "calories": totals.calories,
        "protein_g": totals.protein_g,
        "carbs_g": totals.carbs_g,
        "fat_g": totals.fat_g,
    }


def serialize_progress(progress: MacroProgress) -> dict[str, object]:
    return {
        "label": progress.label,
        "value": progress.value,
        "goal": progress.goal,
        "unit": progress.unit,
        "percentage": progress.percentage,
        "is_over": progress.is_over,
    }


def serialize_grocery_line(line: GroceryLine) -> dict[str, object]:
    return {"name": line.name, "quantity": line.quantity, "unit": line.unit}


def serialize_manual_item(item: ManualGroceryItem) -> dict[str, object]:
    return {"id": str(item.id), "text": item.text, "completed": item.completed}
