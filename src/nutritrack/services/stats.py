"""Daily totals computed from the food log."""

from datetime import date

from nutritrack.domain.log import DailyLogEntry, DailyTotals


def entries_for_day(log: list[DailyLogEntry], day: date) -> list[DailyLogEntry]:
    """Return entries whose recorded timestamp falls on the given date.

    Entries are bucketed by the date component of their own timestamp, so an
    entry keeps its day even if the configured timezone changes later.
    """
    return [entry for entry in log if entry.timestamp.date() == day]


def compute_daily_totals(log: list[DailyLogEntry], day: date) -> DailyTotals:
    """Sum macros over the entries logged on the given date."""
    total = DailyTotals(day=day, count=0, calories=0, protein_g=0, carbs_g=0, fat_g=0)
    for entry in entries_for_day(log, day):
        total = DailyTotals(
            day=day,
            count=total.count + 1,
            calories=total.calories + entry.calories,
            protein_g=total.protein_g + entry.protein_g,
            carbs_g=total.carbs_g + entry.carbs_g,
            fat_g=total.fat_g + entry.fat_g,
        )
    return total
