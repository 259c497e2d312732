"""Bible API client for fetching passage text."""

import logging
import re
from typing import Any
from urllib.parse import quote, quote_plus

import requests

from .models import PassageRef, Verse

logger = logging.getLogger(__name__)

WHOLE_CHAPTER = "1-176"

_RANGE_RE = re.compile(r"^\s*([0-9]+)\s*(?:-\s*([0-9]+)\s*)?$")


def parse_verse_range(verse_range: str) -> tuple[int, int] | None:
    """Parse ``"1-50"`` (or a lone ``"7"``) into inclusive verse bounds."""
    m = _RANGE_RE.match(verse_range)
    if not m:
        return None
    start = int(m.group(1))
    end = int(m.group(2)) if m.group(2) else start
    if start < 1 or end < start:
        return None
    return start, end


def bible_gateway_url(
    book: str, chapter: int, verses: str, version: str = "ASV"
) -> str:
    """Link to a passage on Bible Gateway."""
    passage = f"{book} {chapter}:{verses}"
    return (
        f"https://www.biblegateway.com/passage/?search={quote_plus(passage)}"
        f"&version={version}"
    )


def passage_gateway_url(passage: PassageRef, version: str = "ASV") -> str:
    """Link to a plan passage on Bible Gateway.

    Multi-chapter passages search their label (``Genesis 1-2``); the verse
    range they carry is only a placeholder.
    """
    if passage.is_range:
        return (
            "https://www.biblegateway.com/passage/"
            f"?search={quote_plus(passage.display_label)}&version={version}"
        )
    return bible_gateway_url(
        passage.book, passage.chapter, passage.verse_range, version
    )


class BibleApiClient:
    """Client for a bible-api.com compatible verse service."""

    BASE_URL = "https://bible-api.com"

    def __init__(
        self,
        base_url: str | None = None,
        translation: str = "kjv",
        timeout: int = 10,
    ):
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.translation = translation
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "User-Agent": "BibleReadingPlan/1.0",
                "Connection": "keep-alive",
            }
        )
        adapter = requests.adapters.HTTPAdapter(
            pool_connections=10,
            pool_maxsize=10,
            max_retries=1,
        )
        self.session.mount("https://", adapter)

    def chapter_url(self, book: str, chapter: int) -> str:
        return f"{self.base_url}/{quote(f'{book} {chapter}')}"

    def get_chapter(self, book: str, chapter: int) -> dict[str, Any] | None:
        """Fetch a whole chapter from the API."""
        url = self.chapter_url(book, chapter)
        try:
            response = self.session.get(
                url, params={"translation": self.translation}, timeout=self.timeout
            )
            response.raise_for_status()
            result: dict[str, Any] = response.json()
            return result
        except requests.RequestException as e:
            logger.error(f"Failed to fetch {book} {chapter}: {e}")
            return None
        except ValueError as e:
            logger.error(f"Invalid response for {book} {chapter}: {e}")
            return None

    def _clean_text(self, text: str) -> str:
        """Collapse whitespace and line breaks."""
        if not text:
            return ""
        return re.sub(r"\s+", " ", text).strip()

    def fetch_verse_text(
        self, book: str, chapter: int, verse_range: str
    ) -> list[Verse] | None:
        """Fetch verses for a range, clipped to the chapter's real length.

        The plan uses generous placeholder ranges such as ``1-176``; any
        verses past the end of the chapter are simply absent from the result.
        """
        bounds = parse_verse_range(verse_range)
        if bounds is None:
            logger.warning(f"Unusable verse range {verse_range!r} for {book} {chapter}")
            return None

        data = self.get_chapter(book, chapter)
        if not data:
            return None

        start, end = bounds
        verses = []
        for item in data.get("verses", []):
            try:
                number = int(item["verse"])
                chapter_number = int(item.get("chapter") or chapter)
                text = self._clean_text(str(item.get("text", "")))
            except (KeyError, TypeError, ValueError):
                continue
            if start <= number <= end and text:
                verses.append(
                    Verse(
                        book=item.get("book_name") or book,
                        chapter=chapter_number,
                        verse=number,
                        text=text,
                    )
                )

        if not verses:
            logger.warning(f"No verses found for {book} {chapter}:{verse_range}")
            return None
        return verses

    def fetch_passage(self, passage: PassageRef) -> list[Verse] | None:
        """Fetch every chapter of a passage in order.

        Multi-chapter ranges are read as whole chapters; the verse range of a
        range passage is only a placeholder.
        """
        verse_range = WHOLE_CHAPTER if passage.is_range else passage.verse_range
        verses: list[Verse] = []
        for chapter in passage.chapters:
            chapter_verses = self.fetch_verse_text(passage.book, chapter, verse_range)
            if chapter_verses:
                verses.extend(chapter_verses)
        return verses or None
