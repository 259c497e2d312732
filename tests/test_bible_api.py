"""Tests for the Bible API client."""

import pytest
import responses

from reading_plan.bible_api import (
    BibleApiClient,
    bible_gateway_url,
    parse_verse_range,
    passage_gateway_url,
)
from reading_plan.models import PassageRef


def _chapter_payload(book: str, chapter: int, count: int) -> dict:
    return {
        "reference": f"{book} {chapter}",
        "verses": [
            {
                "book_name": book,
                "chapter": chapter,
                "verse": n,
                "text": f"Verse {n} of {book} {chapter}.\n",
            }
            for n in range(1, count + 1)
        ],
    }


@pytest.fixture
def client():
    return BibleApiClient()


def test_parse_verse_range():
    assert parse_verse_range("1-50") == (1, 50)
    assert parse_verse_range(" 81 - 176 ") == (81, 176)
    assert parse_verse_range("7") == (7, 7)
    assert parse_verse_range("50-1") is None
    assert parse_verse_range("0-3") is None
    assert parse_verse_range("abc") is None


def test_chapter_url(client):
    assert client.chapter_url("John", 3) == "https://bible-api.com/John%203"
    assert (
        client.chapter_url("Song of Songs", 1)
        == "https://bible-api.com/Song%20of%20Songs%201"
    )


def test_bible_gateway_url():
    url = bible_gateway_url("John", 3, "1-50")
    assert url.startswith("https://www.biblegateway.com/passage/?search=John+3%3A1-50")
    assert url.endswith("&version=ASV")


def test_passage_gateway_url_for_range():
    passage = PassageRef(
        book="Revelation",
        chapter=19,
        end_chapter=22,
        verse_range="1-50",
        display_label="Revelation 19-22",
    )
    assert passage_gateway_url(passage) == (
        "https://www.biblegateway.com/passage/?search=Revelation+19-22&version=ASV"
    )


def test_passage_gateway_url_for_sub_verse():
    passage = PassageRef(
        book="Psalms",
        chapter=119,
        verse_range="81-176",
        display_label="Psalms 119:81-176",
    )
    assert passage_gateway_url(passage, version="KJV") == (
        "https://www.biblegateway.com/passage/?search=Psalms+119%3A81-176&version=KJV"
    )


def test_parse_verse_range_ascii_digits_only():
    assert parse_verse_range("١-٥") is None
    assert parse_verse_range("٧") is None


@responses.activate
def test_placeholder_range_is_clipped(client):
    responses.add(
        responses.GET,
        "https://bible-api.com/Psalms%2023",
        json=_chapter_payload("Psalms", 23, 6),
        status=200,
    )
    verses = client.fetch_verse_text("Psalms", 23, "1-176")
    assert verses is not None
    assert [v.verse for v in verses] == [1, 2, 3, 4, 5, 6]
    assert verses[0].text == "Verse 1 of Psalms 23."
    assert "translation=kjv" in responses.calls[0].request.url


@responses.activate
def test_sub_range_is_filtered(client):
    responses.add(
        responses.GET,
        "https://bible-api.com/Psalms%20119",
        json=_chapter_payload("Psalms", 119, 176),
        status=200,
    )
    verses = client.fetch_verse_text("Psalms", 119, "81-176")
    assert verses is not None
    assert verses[0].verse == 81
    assert verses[-1].verse == 176
    assert len(verses) == 96


@responses.activate
def test_not_found_returns_none(client):
    responses.add(
        responses.GET,
        "https://bible-api.com/Wis.%203",
        json={"error": "not found"},
        status=404,
    )
    assert client.fetch_verse_text("Wis.", 3, "1-50") is None


@responses.activate
def test_empty_chapter_returns_none(client):
    responses.add(
        responses.GET,
        "https://bible-api.com/Genesis%2099",
        json={"verses": []},
        status=200,
    )
    assert client.fetch_verse_text("Genesis", 99, "1-50") is None


@responses.activate
def test_invalid_json_returns_none(client):
    responses.add(
        responses.GET,
        "https://bible-api.com/Genesis%201",
        body="not json",
        status=200,
    )
    assert client.fetch_verse_text("Genesis", 1, "1-50") is None


def test_bad_verse_range_skips_request(client):
    with responses.RequestsMock() as rsps:
        assert client.fetch_verse_text("Genesis", 1, "nonsense") is None
        assert len(rsps.calls) == 0


@responses.activate
def test_fetch_passage_walks_chapters(client, genesis_range):
    responses.add(
        responses.GET,
        "https://bible-api.com/Genesis%201",
        json=_chapter_payload("Genesis", 1, 31),
        status=200,
    )
    responses.add(
        responses.GET,
        "https://bible-api.com/Genesis%202",
        json=_chapter_payload("Genesis", 2, 25),
        status=200,
    )
    verses = client.fetch_passage(genesis_range)
    assert verses is not None
    assert len(verses) == 56
    assert (verses[0].chapter, verses[0].verse) == (1, 1)
    assert (verses[-1].chapter, verses[-1].verse) == (2, 25)


@responses.activate
def test_fetch_passage_range_reads_whole_chapters(client):
    """A range's placeholder verse bound must not truncate long chapters."""
    responses.add(
        responses.GET,
        "https://bible-api.com/Numbers%207",
        json=_chapter_payload("Numbers", 7, 89),
        status=200,
    )
    responses.add(
        responses.GET,
        "https://bible-api.com/Numbers%208",
        json=_chapter_payload("Numbers", 8, 26),
        status=200,
    )
    passage = PassageRef(
        book="Numbers",
        chapter=7,
        end_chapter=8,
        verse_range="1-50",
        display_label="Numbers 7-8",
    )
    verses = client.fetch_passage(passage)
    assert verses is not None
    assert len(verses) == 89 + 26


@responses.activate
def test_fetch_passage_all_missing(client, luke_1):
    responses.add(
        responses.GET,
        "https://bible-api.com/Luke%201",
        status=500,
    )
    assert client.fetch_passage(luke_1) is None
