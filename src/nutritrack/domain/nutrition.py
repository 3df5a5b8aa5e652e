"""Nutrition domain models."""

from dataclasses import dataclass
from typing import Protocol

MACRO_FIELDS = ("calories", "protein_g", "carbs_g", "fat_g")


class MacroValues(Protocol):
    """Anything carrying the four macro fields."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for a single serving or portion."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float

    def scaled(self, factor: float) -> "MacroProfile":
        """Return the profile multiplied by a serving factor."""
        return MacroProfile(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fat_g=self.fat_g * factor,
        )


ZERO_MACROS = MacroProfile(0.0, 0.0, 0.0, 0.0)


def macro_fields(values: MacroValues) -> dict[str, float]:
    """Return the macro fields of a profile or goal set as a plain mapping."""
    return {name: getattr(values, name) for name in MACRO_FIELDS}


def parse_macro_fields(raw: object) -> dict[str, float]:
    """Read macro fields from a JSON mapping, treating missing values as zero."""
    values = raw if isinstance(raw, dict) else {}
    return {name: float(values.get(name, 0.0)) for name in MACRO_FIELDS}
