"""Pytest fixtures for Bible reading plan tests."""

from datetime import date

import pytest

from reading_plan.generator import clear_cache
from reading_plan.models import DayPlan, JournalEntry, PassageRef


@pytest.fixture(autouse=True)
def clear_plan_cache():
    """Clear the per-year plan memo before each test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def genesis_range() -> PassageRef:
    """Genesis 1-2 as parsed from the January 1 reading."""
    return PassageRef(
        book="Genesis",
        chapter=1,
        end_chapter=2,
        verse_range="1-50",
        display_label="Genesis 1-2",
    )


@pytest.fixture
def luke_1() -> PassageRef:
    return PassageRef(
        book="Luke", chapter=1, verse_range="1-50", display_label="Luke 1"
    )


@pytest.fixture
def sample_day(genesis_range: PassageRef, luke_1: PassageRef) -> DayPlan:
    """January 1 of the 2025 plan."""
    return DayPlan(
        day_of_year=1,
        calendar_date=date(2025, 1, 1),
        passages=(genesis_range, luke_1),
        theme="Creation and Beginnings",
    )


@pytest.fixture
def sample_entry() -> JournalEntry:
    return JournalEntry(
        day=1,
        title="In the beginning",
        scripture="Genesis 1:1",
        observation="God creates by his word.",
        application="Start the day in the word.",
        prayer="Thank you for making all things.",
    )
