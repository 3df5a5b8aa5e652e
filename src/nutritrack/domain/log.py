"""Domain models for the daily food log."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class DailyLogEntry:
    """Snapshot of eating a number of servings of a meal.

    Macros are absolute values frozen at creation time; `meal_id` is not a
    live reference and may point to a meal that no longer exists.
    """

    id: UUID
    meal_id: UUID
    meal_name: str
    servings: float
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    timestamp: datetime


@dataclass(frozen=True)
class DailyTotals:
    """Summed macros for one calendar day."""

    day: date
    count: int
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
