#!/usr/bin/env python3
"""
Bible Reading Plan - a year of daily scripture readings.

Usage:
    python main.py                       # Show today's reading
    python main.py --date 2025-03-28     # Show the reading for a date
    python main.py --preview             # One-line preview of today's reading
    python main.py --day 100 --with-text # Show day 100 with passage text
    python main.py --export plan.json    # Write the whole year as JSON
    python main.py --progress            # Journal progress through the plan
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path

from dotenv import load_dotenv

from reading_plan.bible_api import BibleApiClient
from reading_plan.config import Config
from reading_plan.formatter import (
    format_day,
    format_entry,
    format_passage_list,
    format_progress,
    format_verses,
)
from reading_plan.generator import generate_annual_plan, todays_day_of_year
from reading_plan.journal import JournalStore
from reading_plan.models import DayPlan
from reading_plan.progress import compute_progress

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Bible Reading Plan",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py                      Show today's reading
    python main.py --date 2025-12-26    Show the reading for a date
    python main.py --preview            Preview today's reading
    python main.py --export plan.json   Export the year to JSON
        """,
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print a short preview of the day's reading and theme",
    )
    parser.add_argument(
        "--date",
        type=str,
        help="Show the reading for a date (YYYY-MM-DD format)",
    )
    parser.add_argument(
        "--day",
        type=int,
        help="Show the reading for a plan day (1-365)",
    )
    parser.add_argument(
        "--year",
        type=int,
        help="Plan year (defaults to PLAN_YEAR or the current year)",
    )
    parser.add_argument(
        "--with-text",
        action="store_true",
        help="Fetch and print the passage text",
    )
    parser.add_argument(
        "--links",
        action="store_true",
        help="Print Bible Gateway links under each passage",
    )
    parser.add_argument(
        "--export",
        type=Path,
        metavar="PATH",
        help="Write the full year plan as JSON",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show journal progress through the plan",
    )
    return parser.parse_args(argv)


def select_day(args: argparse.Namespace, year: int) -> DayPlan:
    """Pick the plan day requested on the command line."""
    if args.date:
        target = datetime.strptime(args.date, "%Y-%m-%d").date()
        plan = generate_annual_plan(target.year)
        return plan.day(todays_day_of_year(target))

    plan = generate_annual_plan(year)
    if args.day is not None:
        return plan.day(args.day)
    return plan.day(todays_day_of_year(date.today()))


def preview_day(day: DayPlan) -> None:
    """Print a short preview of a day's reading."""
    when = f"{day.calendar_date:%B} {day.calendar_date.day}"
    print(f"Day {day.day_of_year} | {when} | {day.theme}")
    print(f"  {format_passage_list(day.passages)}")


def show_day(day: DayPlan, config: Config, with_text: bool, links: bool) -> None:
    """Print a day's reading and journal entry, optionally with passage text."""
    print(f"\n{'=' * 60}")
    print(format_day(day, with_links=links))
    print("=" * 60)

    entry = JournalStore(config.journal_path).get_entry(day.day_of_year)
    if entry is not None:
        print()
        print(format_entry(entry))

    if not with_text:
        return

    client = BibleApiClient(
        base_url=config.bible_api_url,
        translation=config.bible_translation,
        timeout=config.request_timeout,
    )
    for passage in day.passages:
        print()
        print(format_verses(passage, client.fetch_passage(passage)))


def export_plan(path: Path, year: int) -> None:
    """Write the year's plan to a JSON file."""
    plan = generate_annual_plan(year)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(plan.to_dict(), f, ensure_ascii=False, indent=2)
    logger.info(f"Exported {len(plan)} days to {path}")


def show_progress(config: Config, year: int) -> None:
    """Print journal completion for the plan year."""
    plan = generate_annual_plan(year)
    store = JournalStore(config.journal_path)
    today = todays_day_of_year() if year == date.today().year else None
    print(format_progress(compute_progress(plan, store.completed_days(), today)))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    args = parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    config.setup_logging()
    year = args.year or config.plan_year

    if args.export:
        export_plan(args.export, year)
        return 0

    if args.progress:
        show_progress(config, year)
        return 0

    try:
        day = select_day(args, year)
    except (ValueError, IndexError) as e:
        print(f"Invalid day: {e}", file=sys.stderr)
        return 1

    if args.preview and not args.with_text:
        preview_day(day)
        return 0

    show_day(day, config, args.with_text, args.links)
    return 0


if __name__ == "__main__":
    sys.exit(main())
