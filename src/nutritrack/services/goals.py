"""Daily goal service."""

from dataclasses import dataclass
from typing import Protocol

from nutritrack.domain.goals import DEFAULT_GOALS, Goals, MacroProgress
from nutritrack.domain.log import DailyTotals


class GoalsRepository(Protocol):
    """Persistence interface for the goals singleton."""

    def get_goals(self) -> Goals | None:
        """Return stored goals, if any."""

    def save_goals(self, goals: Goals) -> None:
        """Replace the stored goals."""


@dataclass
class GoalsService:
    """Service for reading and editing daily goals."""

    repository: GoalsRepository

    def get_goals(self) -> Goals:
        """Return goals, persisting the defaults on first use."""
        goals = self.repository.get_goals()
        if goals is None:
            self.repository.save_goals(DEFAULT_GOALS)
            return DEFAULT_GOALS
        return goals

    def set_goals(self, goals: Goals) -> Goals:
        """Replace the goals record."""
        self.repository.save_goals(goals)
        return goals

    def progress(self, totals: DailyTotals) -> list[MacroProgress]:
        """Return progress for each macro against the current goals."""
        goals = self.get_goals()
        return [
            macro_progress("Calories", totals.calories, goals.calories, "kcal"),
            macro_progress("Protein", totals.protein_g, goals.protein_g, "g"),
            macro_progress("Carbs", totals.carbs_g, goals.carbs_g, "g"),
            macro_progress("Fat", totals.fat_g, goals.fat_g, "g"),
        ]


def macro_progress(label: str, value: float, goal: float, unit: str) -> MacroProgress:
    """Compute a progress record; percentage is capped at 100."""
    percentage = min(value * 100 / goal, 100.0) if goal > 0 else 0.0
    return MacroProgress(
        label=label,
        value=value,
        goal=goal,
        unit=unit,
        percentage=percentage,
        is_over=value > goal,
    )
