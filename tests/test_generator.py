"""Tests for annual plan generation."""

import calendar
import logging
from datetime import date

import pytest

from reading_plan.books import BIBLE_BOOKS
from reading_plan.generator import (
    PlanGenerator,
    clear_cache,
    generate_annual_plan,
    plan_dates,
    todays_day_of_year,
)
from reading_plan.readings import FALLBACK_THEME


@pytest.mark.parametrize("year", [1, 2023, 2024, 2025, 2100, 9999])
def test_always_365_days(year):
    assert len(generate_annual_plan(year).days) == 365


def test_day_index_alignment():
    plan = generate_annual_plan(2025)
    for i, day in enumerate(plan.days):
        assert day.day_of_year == i + 1


def test_deterministic():
    first = generate_annual_plan(2025)
    clear_cache()
    second = generate_annual_plan(2025)
    assert first is not second
    assert first == second


def test_memoized_per_year():
    assert generate_annual_plan(2025) is generate_annual_plan(2025)


def test_january_first():
    day = generate_annual_plan(2025).days[0]
    assert day.calendar_date == date(2025, 1, 1)
    assert day.iso_date == "2025-01-01"
    assert day.theme == "Creation and Beginnings"
    genesis, luke = day.passages
    assert (genesis.book, genesis.chapter, genesis.end_chapter) == ("Genesis", 1, 2)
    assert (luke.book, luke.chapter, luke.end_chapter) == ("Luke", 1, None)


def test_march_28_psalm_list():
    day = generate_annual_plan(2025).day(87)
    assert day.calendar_date == date(2025, 3, 28)
    labels = [p.display_label for p in day.passages]
    assert labels == ["Judges 4-5", "Psalms 39", "Psalms 41", "1 Corinthians 13"]
    assert day.theme == "Judges and Deliverance"


def test_last_day_is_december_31():
    day = generate_annual_plan(2025).days[-1]
    assert day.calendar_date == date(2025, 12, 31)
    assert [p.display_label for p in day.passages] == ["Revelation 19-22"]
    assert day.theme == "Revelation: Christ's Victory"


def test_december_26_psalm_119():
    day = generate_annual_plan(2025).day(360)
    assert day.calendar_date == date(2025, 12, 26)
    assert [p.display_label for p in day.passages] == [
        "Psalms 117",
        "Psalms 119:81-176",
        "2 John",
        "3 John",
    ]
    assert day.theme == "Psalm 119: God's Perfect Word"


def test_every_day_has_reading():
    for day in generate_annual_plan(2025).days:
        assert day.passages, f"day {day.day_of_year} has no passages"
        assert day.theme != FALLBACK_THEME


def test_every_book_is_canonical():
    for day in generate_annual_plan(2025).days:
        for passage in day.passages:
            assert passage.book in BIBLE_BOOKS


def test_leap_year_skips_february_29():
    plan = generate_annual_plan(2024)
    assert plan.day(59).calendar_date == date(2024, 2, 28)
    march_first = plan.day(60)
    assert march_first.calendar_date == date(2024, 3, 1)
    assert march_first.passages == generate_annual_plan(2025).day(60).passages
    assert plan.days[-1].calendar_date == date(2024, 12, 31)
    assert plan.day_for_date(date(2024, 2, 29)) is None


@pytest.mark.parametrize("year", [0, -1, 10000])
def test_unrepresentable_year_raises(year):
    with pytest.raises(ValueError):
        generate_annual_plan(year)


def test_last_representable_year_ends_on_december_31():
    assert plan_dates(9999)[-1] == date(9999, 12, 31)


def test_plan_dates_are_unique_and_ordered():
    dates = plan_dates(2024)
    assert len(dates) == 365
    assert dates == sorted(set(dates))


def test_short_month_table_falls_back(caplog):
    readings = {1: ("Gen. 1-2", "Gen. 3-5")}
    generator = PlanGenerator(readings=readings, themes={})
    with caplog.at_level(logging.WARNING, logger="reading_plan.generator"):
        plan = generator.generate(2025)

    assert len(plan.days) == 365
    assert plan.day(1).passages[0].display_label == "Genesis 1-2"
    assert plan.day(1).theme == FALLBACK_THEME
    third = plan.day(3)
    assert third.passages == ()
    assert third.theme == FALLBACK_THEME
    assert plan.day(200).passages == ()
    assert "No reading authored" in caplog.text


def test_custom_name():
    plan = PlanGenerator(name="Test Plan").generate(2025)
    assert plan.name == "Test Plan"
    assert generate_annual_plan(2025).name == "Classic Reading Plan"


def test_todays_day_of_year_common_year():
    assert todays_day_of_year(date(2025, 1, 1)) == 1
    assert todays_day_of_year(date(2025, 3, 1)) == 60
    assert todays_day_of_year(date(2025, 12, 31)) == 365


def test_todays_day_of_year_leap_year():
    assert calendar.isleap(2024)
    assert todays_day_of_year(date(2024, 2, 28)) == 59
    assert todays_day_of_year(date(2024, 2, 29)) == 59
    assert todays_day_of_year(date(2024, 3, 1)) == 60
    assert todays_day_of_year(date(2024, 12, 31)) == 365


def test_todays_day_matches_plan_date():
    for d in (date(2024, 7, 4), date(2025, 7, 4)):
        plan = generate_annual_plan(d.year)
        assert plan.day(todays_day_of_year(d)).calendar_date == d
