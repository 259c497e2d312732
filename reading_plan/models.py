"""Data models for the Bible reading plan."""

from dataclasses import dataclass
from datetime import date
from typing import Any


@dataclass(frozen=True)
class PassageRef:
    """One scripture range to read on a given day."""

    book: str  # Canonical name, or the raw abbreviation if it did not resolve
    chapter: int
    verse_range: str  # Placeholder upper bound unless the shorthand names verses
    display_label: str
    end_chapter: int | None = None  # Only set for multi-chapter ranges

    def __post_init__(self) -> None:
        """Validate chapter bounds."""
        if self.chapter < 1:
            raise ValueError(f"Chapter must be positive, got {self.chapter}")
        if self.end_chapter is not None and self.end_chapter < self.chapter:
            raise ValueError(
                f"End chapter {self.end_chapter} precedes chapter {self.chapter}"
            )

    @property
    def is_range(self) -> bool:
        return self.end_chapter is not None

    @property
    def chapters(self) -> tuple[int, ...]:
        """Every chapter covered by this passage, in reading order."""
        last = self.end_chapter if self.end_chapter is not None else self.chapter
        return tuple(range(self.chapter, last + 1))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "book": self.book,
            "chapter": self.chapter,
            "verses": self.verse_range,
            "display": self.display_label,
        }
        if self.end_chapter is not None:
            data["end_chapter"] = self.end_chapter
        return data


@dataclass(frozen=True)
class DayPlan:
    """One calendar day's readings and theme."""

    day_of_year: int
    calendar_date: date
    passages: tuple[PassageRef, ...]
    theme: str

    @property
    def iso_date(self) -> str:
        return self.calendar_date.isoformat()

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": self.day_of_year,
            "date": self.iso_date,
            "passages": [p.to_dict() for p in self.passages],
            "theme": self.theme,
        }


@dataclass(frozen=True)
class ReadingPlan:
    """A whole year of daily readings."""

    name: str
    year: int
    days: tuple[DayPlan, ...]

    def __post_init__(self) -> None:
        """Validate that days are numbered 1..N without gaps."""
        for index, day in enumerate(self.days):
            if day.day_of_year != index + 1:
                raise ValueError(
                    f"Day at position {index} is numbered {day.day_of_year}, "
                    f"expected {index + 1}"
                )

    def __len__(self) -> int:
        return len(self.days)

    def day(self, day_of_year: int) -> DayPlan:
        """Look up a day by its 1-based number."""
        if not 1 <= day_of_year <= len(self.days):
            raise IndexError(f"Day {day_of_year} is outside 1..{len(self.days)}")
        return self.days[day_of_year - 1]

    def day_for_date(self, for_date: date) -> DayPlan | None:
        """Find the day scheduled on a calendar date, if any."""
        for day in self.days:
            if day.calendar_date == for_date:
                return day
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "year": self.year,
            "days": [d.to_dict() for d in self.days],
        }


@dataclass(frozen=True)
class JournalEntry:
    """A SOAP journal entry (Scripture, Observation, Application, Prayer)."""

    day: int
    title: str = ""
    scripture: str = ""
    observation: str = ""
    application: str = ""
    prayer: str = ""
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JournalEntry":
        return cls(
            day=int(data["day"]),
            title=data.get("title", ""),
            scripture=data.get("scripture", ""),
            observation=data.get("observation", ""),
            application=data.get("application", ""),
            prayer=data.get("prayer", ""),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": self.day,
            "title": self.title,
            "scripture": self.scripture,
            "observation": self.observation,
            "application": self.application,
            "prayer": self.prayer,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class Verse:
    """A single verse of text returned by the verse lookup service."""

    book: str
    chapter: int
    verse: int
    text: str

