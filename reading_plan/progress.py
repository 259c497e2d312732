"""Journal progress through a reading plan."""

from collections.abc import Iterable
from dataclasses import dataclass

from .models import ReadingPlan


@dataclass(frozen=True)
class MonthProgress:
    """Journal completion for one calendar month of the plan."""

    month: int
    completed: int
    total: int
    completed_days: tuple[int, ...] = ()

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        return round(self.completed * 100 / self.total)


@dataclass(frozen=True)
class PlanProgress:
    completed: int
    total: int
    months: tuple[MonthProgress, ...]
    current_streak: int

    @property
    def remaining(self) -> int:
        return self.total - self.completed

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        return round(self.completed * 100 / self.total)


def streak_ending_at(completed: set[int], day: int) -> int:
    """Count consecutive completed days ending at ``day``.

    An unfinished ``day`` does not break the streak; counting starts from
    the day before.
    """
    if day not in completed:
        day -= 1
    streak = 0
    while day >= 1 and day in completed:
        streak += 1
        day -= 1
    return streak


def compute_progress(
    plan: ReadingPlan, completed_days: Iterable[int], today: int | None = None
) -> PlanProgress:
    """Summarize which plan days have a journal entry."""
    valid = {d for d in completed_days if 1 <= d <= len(plan)}

    by_month: dict[int, list[int]] = {}
    for day in plan.days:
        by_month.setdefault(day.calendar_date.month, []).append(day.day_of_year)

    months = tuple(
        MonthProgress(
            month=month,
            completed=sum(1 for d in days if d in valid),
            total=len(days),
            completed_days=tuple(d for d in days if d in valid),
        )
        for month, days in sorted(by_month.items())
    )

    return PlanProgress(
        completed=len(valid),
        total=len(plan),
        months=months,
        current_streak=streak_ending_at(valid, today) if today else 0,
    )
