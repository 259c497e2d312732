"""Annual reading plan generation."""

import calendar
import logging
from datetime import date, timedelta

from .models import DayPlan, ReadingPlan
from .parser import parse_passages
from .readings import (
    FALLBACK_THEME,
    MONTHLY_READINGS,
    MONTHLY_THEMES,
    ThemeBuckets,
    theme_for,
)

logger = logging.getLogger(__name__)

PLAN_NAME = "Classic Reading Plan"
DAYS_IN_PLAN = 365

# Finished plans, keyed by year
_plan_cache: dict[int, ReadingPlan] = {}


def plan_dates(year: int) -> list[date]:
    """The 365 calendar dates of a plan year.

    February 29 is skipped in leap years so every date lines up with the
    authored reading for its month and day. Years outside what
    ``datetime.date`` supports (1..9999) raise ``ValueError``.
    """
    start = date(year, 1, 1)
    days_in_year = DAYS_IN_PLAN + calendar.isleap(year)
    return [
        d
        for d in (start + timedelta(days=i) for i in range(days_in_year))
        if (d.month, d.day) != (2, 29)
    ]


def todays_day_of_year(for_date: date | None = None) -> int:
    """Map a calendar date onto the plan's 1..365 day numbers."""
    if for_date is None:
        for_date = date.today()
    day = for_date.timetuple().tm_yday
    if calendar.isleap(for_date.year) and (for_date.month, for_date.day) >= (2, 29):
        day -= 1
    return min(day, DAYS_IN_PLAN)


class PlanGenerator:
    """Builds a year of DayPlans from monthly shorthand and theme tables."""

    def __init__(
        self,
        readings: dict[int, tuple[str, ...]] | None = None,
        themes: dict[int, ThemeBuckets] | None = None,
        name: str = PLAN_NAME,
    ):
        self.readings = readings if readings is not None else MONTHLY_READINGS
        self.themes = themes if themes is not None else MONTHLY_THEMES
        self.name = name

    def build_day(self, day_of_year: int, for_date: date) -> DayPlan:
        """Resolve one day's passages and theme."""
        month_readings = self.readings.get(for_date.month, ())
        index = for_date.day - 1

        if index >= len(month_readings):
            logger.warning(
                f"No reading authored for {for_date:%B} {for_date.day}, "
                f"day {day_of_year} left empty"
            )
            return DayPlan(
                day_of_year=day_of_year,
                calendar_date=for_date,
                passages=(),
                theme=FALLBACK_THEME,
            )

        return DayPlan(
            day_of_year=day_of_year,
            calendar_date=for_date,
            passages=parse_passages(month_readings[index]),
            theme=theme_for(for_date.month, for_date.day, self.themes),
        )

    def generate(self, year: int) -> ReadingPlan:
        """Generate the full plan for a year. Never fails on table gaps."""
        days = tuple(
            self.build_day(offset + 1, for_date)
            for offset, for_date in enumerate(plan_dates(year))
        )
        logger.debug(f"Generated {len(days)} days for {self.name} {year}")
        return ReadingPlan(name=self.name, year=year, days=days)


def generate_annual_plan(year: int) -> ReadingPlan:
    """Get the Classic Reading Plan for a year.

    Generation is deterministic, so the result is memoized per year.
    """
    cached = _plan_cache.get(year)
    if cached is not None:
        return cached
    plan = PlanGenerator().generate(year)
    _plan_cache[year] = plan
    return plan


def clear_cache() -> None:
    _plan_cache.clear()
