"""Plain-text formatting for the command line."""

import calendar

from .bible_api import passage_gateway_url
from .models import DayPlan, JournalEntry, PassageRef, Verse
from .progress import PlanProgress

MAX_LINE_LENGTH = 78


def split_text(text: str, max_len: int) -> list[str]:
    """Split text into chunks at word boundaries."""
    if len(text) <= max_len:
        return [text]
    chunks = []
    while text:
        if len(text) <= max_len:
            chunks.append(text)
            break
        split_at = text.rfind(" ", 0, max_len)
        if split_at == -1:
            split_at = max_len
        chunks.append(text[:split_at])
        text = text[split_at:].lstrip()
    return chunks


def format_passage_list(passages: tuple[PassageRef, ...]) -> str:
    """Join passage labels the way the plan is usually printed."""
    if not passages:
        return "No reading assigned"
    return "; ".join(p.display_label for p in passages)


def format_day(day: DayPlan, with_links: bool = False) -> str:
    """Format a day's header, theme and readings."""
    lines = [
        f"Day {day.day_of_year} | {day.calendar_date:%A, %B} {day.calendar_date.day}",
        f"Theme: {day.theme}",
        "",
    ]
    if not day.passages:
        lines.append("  No reading assigned")
    for passage in day.passages:
        lines.append(f"  - {passage.display_label}")
        if with_links:
            lines.append("    " + passage_gateway_url(passage))
    return "\n".join(lines)


def format_verses(passage: PassageRef, verses: list[Verse] | None) -> str:
    """Format fetched verse text under a passage heading."""
    heading = passage.display_label
    if not verses:
        return f"{heading}\n  (text unavailable)"

    lines = [heading]
    chapter = None
    for verse in verses:
        if passage.is_range and verse.chapter != chapter:
            chapter = verse.chapter
            lines.append(f"  [{verse.book} {verse.chapter}]")
        for i, chunk in enumerate(
            split_text(f"{verse.verse} {verse.text}", MAX_LINE_LENGTH - 2)
        ):
            lines.append(("  " if i == 0 else "    ") + chunk)
    return "\n".join(lines)


def format_entry(entry: JournalEntry) -> str:
    """Format a SOAP journal entry."""
    sections = [
        ("Scripture", entry.scripture),
        ("Observation", entry.observation),
        ("Application", entry.application),
        ("Prayer", entry.prayer),
    ]
    lines = [entry.title or f"Day {entry.day}"]
    for label, text in sections:
        if text:
            lines.append(f"{label}: {text}")
    return "\n".join(lines)


def format_progress(progress: PlanProgress) -> str:
    """Format overall and per-month completion."""
    lines = [
        f"{progress.completed} of {progress.total} days completed "
        f"({progress.percent}%)",
        f"Remaining: {progress.remaining}",
        f"Current streak: {progress.current_streak}",
        "",
    ]
    for month in progress.months:
        lines.append(
            f"  {calendar.month_name[month.month]:<10} "
            f"{month.completed:>2}/{month.total:<2} {month.percent:>3}%"
        )
    return "\n".join(lines)
