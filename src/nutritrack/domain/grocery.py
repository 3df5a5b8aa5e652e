"""Domain models for the weekly plan and grocery list."""

from dataclasses import dataclass
from uuid import UUID

WeeklyPlan = dict[UUID, float]


@dataclass(frozen=True)
class GroceryLine:
    """Merged ingredient quantity on the generated grocery list."""

    name: str
    quantity: float
    unit: str


@dataclass(frozen=True)
class ManualGroceryItem:
    """Free-text item added to the grocery list by hand."""

    id: UUID
    text: str
    completed: bool = False
