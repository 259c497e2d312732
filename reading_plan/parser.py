"""Parser for the reading plan's shorthand passage notation.

A shorthand string is a semicolon separated list of clauses, for example
``"Judg. 4-5; Ps. 39,41; 1 Cor. 13"``. Parsing is best effort: a clause that
cannot be understood is skipped, never raised.
"""

import logging
import re

from .books import is_single_chapter, resolve_book
from .models import PassageRef

logger = logging.getLogger(__name__)

PSALMS = "Psalms"

# Placeholder verse bounds; the verse lookup clips them to the real chapter
PSALM_VERSES = "1-176"
CHAPTER_VERSES = "1-50"
SINGLE_CHAPTER_VERSES = "1-25"

_PSALM_RE = re.compile(r"^Ps\.\s*(?P<spec>.+)$")
_PSALM_119_RE = re.compile(r"^119:\s*(?P<start>[0-9]+)\s*-\s*(?P<end>[0-9]+)$")
_BOOK_RE = re.compile(
    r"^(?P<book>(?:[1-3]\s*)?[A-Za-z]+(?:\s+[A-Za-z]+)*\.?)\s*(?P<spec>.*)$"
)
_SEGMENT_RE = re.compile(r"^(?P<start>[0-9]+)(?:\s*-\s*(?P<end>[0-9]+))?$")


def _split_clauses(shorthand: str) -> list[str]:
    """Split a shorthand string into trimmed, non-empty clauses."""
    return [c.strip() for c in shorthand.split(";") if c.strip()]


def _parse_segment(text: str) -> tuple[int, int] | None:
    """Parse ``"7"`` or ``"3-5"`` into an inclusive chapter span."""
    m = _SEGMENT_RE.match(text.strip())
    if not m:
        return None
    start = int(m.group("start"))
    end = int(m.group("end")) if m.group("end") else start
    if start < 1 or end < start:
        return None
    return start, end


def _psalm_119(start: str, end: str) -> PassageRef:
    verses = f"{int(start)}-{int(end)}"
    return PassageRef(
        book=PSALMS,
        chapter=119,
        verse_range=verses,
        display_label=f"{PSALMS} 119:{verses}",
    )


def _chapter_ref(book: str, start: int, end: int, verses: str) -> PassageRef:
    if end == start:
        return PassageRef(
            book=book,
            chapter=start,
            verse_range=verses,
            display_label=f"{book} {start}",
        )
    return PassageRef(
        book=book,
        chapter=start,
        end_chapter=end,
        verse_range=verses,
        display_label=f"{book} {start}-{end}",
    )


def _parse_psalms(spec: str) -> list[PassageRef]:
    """Psalm lists are kept one entry per item, even when consecutive."""
    passages = []
    for item in spec.split(","):
        item = item.strip()
        m = _PSALM_119_RE.match(item)
        if m:
            passages.append(_psalm_119(m.group("start"), m.group("end")))
            continue
        segment = _parse_segment(item)
        if segment is None:
            logger.debug(f"Skipping psalm item {item!r}")
            continue
        passages.append(_chapter_ref(PSALMS, *segment, PSALM_VERSES))
    return passages


def _coalesce(segments: list[tuple[int, int]]) -> list[tuple[int, int]]:
    """Merge neighbouring spans that continue a consecutive run."""
    merged: list[tuple[int, int]] = []
    for start, end in segments:
        if merged and start == merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], end)
        else:
            merged.append((start, end))
    return merged


def _parse_book(abbreviation: str, spec: str) -> list[PassageRef]:
    book = resolve_book(abbreviation)

    if is_single_chapter(book):
        return [
            PassageRef(
                book=book,
                chapter=1,
                verse_range=SINGLE_CHAPTER_VERSES,
                display_label=book,
            )
        ]

    if not spec:
        return []

    segments = []
    for item in spec.split(","):
        segment = _parse_segment(item)
        if segment is None:
            logger.debug(f"Skipping chapter item {item!r} for {book}")
            continue
        segments.append(segment)

    return [
        _chapter_ref(book, start, end, CHAPTER_VERSES)
        for start, end in _coalesce(segments)
    ]


def parse_clause(clause: str) -> list[PassageRef]:
    """Parse a single clause; unrecognised input yields an empty list."""
    clause = clause.strip()

    m = _PSALM_RE.match(clause)
    if m:
        return _parse_psalms(m.group("spec"))

    m = _PSALM_119_RE.match(clause)
    if m:
        return [_psalm_119(m.group("start"), m.group("end"))]

    m = _BOOK_RE.match(clause)
    if m:
        return _parse_book(m.group("book"), m.group("spec").strip())

    logger.debug(f"Dropping unparseable clause {clause!r}")
    return []


def parse_passages(shorthand: str) -> tuple[PassageRef, ...]:
    """Convert a shorthand string into passages in reading order."""
    passages: list[PassageRef] = []
    for clause in _split_clauses(shorthand or ""):
        passages.extend(parse_clause(clause))
    return tuple(passages)
