"""Domain models for daily macro goals."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Goals:
    """Daily macro targets."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


DEFAULT_GOALS = Goals(calories=2500, protein_g=180, carbs_g=250, fat_g=80)


@dataclass(frozen=True)
class MacroProgress:
    """Progress of one macro against its goal."""

    label: str
    value: float
    goal: float
    unit: str
    percentage: float
    is_over: bool
