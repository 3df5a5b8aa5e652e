"""Daily food log service."""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from nutritrack.domain.log import DailyLogEntry, DailyTotals
from nutritrack.services.meals import MealRepository, find_meal
from nutritrack.services.stats import compute_daily_totals, entries_for_day

logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for the daily log."""

    def list_entries(self) -> list[DailyLogEntry]:
        """Return every log entry in insertion order."""

    def save_entries(self, entries: list[DailyLogEntry]) -> None:
        """Replace the stored log."""


@dataclass
class DailyLogService:
    """Service that records eaten servings and reports daily totals."""

    repository: DailyLogRepository
    meal_repository: MealRepository
    timezone_name: str = "UTC"

    def add_entry_to_log(self, meal_id: UUID, servings: float) -> DailyLogEntry | None:
        """Log servings of a meal, snapshotting its name and macros.

        Returns None and leaves the log untouched when the meal is unknown.
        """
        meal = find_meal(self.meal_repository.list_meals(), meal_id)
        if meal is None:
            logger.debug("Skipping log entry for unknown meal %s", meal_id)
            return None
        macros = meal.per_serving.scaled(servings)
        entry = DailyLogEntry(
            id=uuid4(),
            meal_id=meal.id,
            meal_name=meal.name,
            servings=servings,
            calories=macros.calories,
            protein_g=macros.protein_g,
            carbs_g=macros.carbs_g,
            fat_g=macros.fat_g,
            timestamp=self.now(),
        )
        self.repository.save_entries([*self.repository.list_entries(), entry])
        return entry

    def remove_entry_from_log(self, entry_id: UUID) -> None:
        """Remove a log entry; no-op when it does not exist."""
        entries = self.repository.list_entries()
        self.repository.save_entries(
            [entry for entry in entries if entry.id != entry_id]
        )

    def list_entries(self) -> list[DailyLogEntry]:
        """Return the full log history."""
        return self.repository.list_entries()

    def get_day(
        self, day: date | None = None
    ) -> tuple[DailyTotals, list[DailyLogEntry]]:
        """Return totals and entries for a date, defaulting to today."""
        resolved_day = day or self.today()
        entries = self.repository.list_entries()
        return (
            compute_daily_totals(entries, resolved_day),
            entries_for_day(entries, resolved_day),
        )

    def now(self) -> datetime:
        """Return the current instant in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name))

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return self.now().date()
