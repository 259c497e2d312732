"""SOAP journal storage keyed by plan day."""

import json
import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path

from .models import JournalEntry

logger = logging.getLogger(__name__)

MAX_DAY = 366

# (event, day, entry) where event is "put" or "delete"
JournalListener = Callable[[str, int, JournalEntry | None], None]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def _check_day(day: int) -> None:
    if not 1 <= day <= MAX_DAY:
        raise ValueError(f"Day must be between 1 and {MAX_DAY}, got {day}")


class JournalStore:
    """Journal entries persisted to a JSON file, with change notifications."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._listeners: list[JournalListener] = []

    def subscribe(self, listener: JournalListener) -> Callable[[], None]:
        """Register a change listener. Returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: str, day: int, entry: JournalEntry | None) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, day, entry)
            except Exception:
                logger.exception(f"Journal listener failed on {event} for day {day}")

    def _load(self) -> dict[int, JournalEntry]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return {
                int(day): JournalEntry.from_dict(item)
                for day, item in data.get("entries", {}).items()
            }
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError):
            logger.warning(f"Failed to load journal from {self.path}, starting fresh")
            return {}

    def _save(self, entries: dict[int, JournalEntry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "entries": {
                str(day): entries[day].to_dict() for day in sorted(entries)
            }
        }
        self.path.write_text(
            json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8"
        )

    def all_entries(self) -> dict[int, JournalEntry]:
        return self._load()

    def get_entry(self, day: int) -> JournalEntry | None:
        _check_day(day)
        return self._load().get(day)

    def put_entry(self, day: int, entry: JournalEntry) -> JournalEntry:
        """Create or replace the entry for a day. Returns the stored entry."""
        _check_day(day)
        entries = self._load()
        now = _now()
        previous = entries.get(day)
        created = previous.created_at if previous else (entry.created_at or now)
        stored = replace(entry, day=day, created_at=created, updated_at=now)
        entries[day] = stored
        self._save(entries)
        logger.info(f"Saved journal entry for day {day}")
        self._notify("put", day, stored)
        return stored

    def delete_entry(self, day: int) -> bool:
        """Remove a day's entry. Returns True if one existed."""
        _check_day(day)
        entries = self._load()
        if day not in entries:
            return False
        del entries[day]
        self._save(entries)
        logger.info(f"Deleted journal entry for day {day}")
        self._notify("delete", day, None)
        return True

    def completed_days(self) -> set[int]:
        return set(self._load())
