"""Classic Bible reading plan: a year of daily readings and themes."""

from .generator import generate_annual_plan
from .models import DayPlan, JournalEntry, PassageRef, ReadingPlan
from .parser import parse_passages

__all__ = [
    "DayPlan",
    "JournalEntry",
    "PassageRef",
    "ReadingPlan",
    "generate_annual_plan",
    "parse_passages",
]
