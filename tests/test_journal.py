"""Tests for journal storage."""

import json

import pytest

from reading_plan.journal import JournalStore
from reading_plan.models import JournalEntry


@pytest.fixture
def store(tmp_path):
    return JournalStore(tmp_path / "state" / "journal.json")


def test_empty_store(store):
    assert store.get_entry(1) is None
    assert store.all_entries() == {}
    assert store.completed_days() == set()


def test_put_and_get(store, sample_entry):
    stored = store.put_entry(1, sample_entry)
    assert stored.created_at
    assert stored.updated_at
    loaded = store.get_entry(1)
    assert loaded == stored
    assert loaded.observation == "God creates by his word."


def test_put_uses_day_argument(store, sample_entry):
    stored = store.put_entry(5, sample_entry)
    assert stored.day == 5
    assert store.get_entry(1) is None
    assert store.get_entry(5) is not None


def test_update_keeps_created_at(store, sample_entry):
    first = store.put_entry(1, sample_entry)
    updated = JournalEntry(day=1, title="Revised", prayer="Amen")
    second = store.put_entry(1, updated)
    assert second.created_at == first.created_at
    assert store.get_entry(1).title == "Revised"


def test_persists_across_instances(store, sample_entry):
    store.put_entry(10, sample_entry)
    reopened = JournalStore(store.path)
    assert reopened.get_entry(10).title == "In the beginning"
    assert reopened.completed_days() == {10}


def test_delete(store, sample_entry):
    store.put_entry(2, sample_entry)
    assert store.delete_entry(2) is True
    assert store.delete_entry(2) is False
    assert store.get_entry(2) is None


@pytest.mark.parametrize("day", [0, -1, 367])
def test_rejects_out_of_range_day(store, sample_entry, day):
    with pytest.raises(ValueError):
        store.put_entry(day, sample_entry)
    with pytest.raises(ValueError):
        store.get_entry(day)


def test_corrupt_file_reads_empty(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("{not json")
    assert store.all_entries() == {}


def test_wrong_shape_reads_empty(store):
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps(["not", "a", "mapping"]))
    assert store.all_entries() == {}


def test_file_format(store, sample_entry):
    store.put_entry(3, sample_entry)
    data = json.loads(store.path.read_text())
    assert list(data["entries"]) == ["3"]
    assert data["entries"]["3"]["prayer"] == "Thank you for making all things."


def test_subscribers_notified(store, sample_entry):
    events = []
    unsubscribe = store.subscribe(lambda event, day, entry: events.append((event, day)))

    store.put_entry(4, sample_entry)
    store.delete_entry(4)
    unsubscribe()
    store.put_entry(5, sample_entry)

    assert events == [("put", 4), ("delete", 4)]


def test_failing_subscriber_does_not_block_others(store, sample_entry):
    seen = []

    def broken(event, day, entry):
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.subscribe(lambda event, day, entry: seen.append(entry.day))

    store.put_entry(6, sample_entry)
    assert seen == [6]
    assert store.get_entry(6) is not None
