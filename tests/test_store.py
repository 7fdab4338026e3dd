"""Tests for the date-keyed entry store."""

import io
from datetime import date

import pytest

from standup.core.entry import Aspect, Entry
from standup.core.store import Store
from standup.errors import DecodeError


@pytest.fixture
def day():
    return date(2015, 1, 1)


class TestLoadFrom:
    def test_reads_entries_from_text(self, day):
        store = Store.load_from('[{"date":"2015-01-01"}]')
        assert store.get(day) is not None

    def test_accepts_bytes(self, day):
        store = Store.load_from('[{"date":"2015-01-01","today":["café"]}]'.encode("utf-8"))
        assert store.get(day).today == ("café",)

    def test_invalid_utf8_bytes_raise_decode_error(self):
        with pytest.raises(DecodeError, match="not valid UTF-8"):
            Store.load_from(b"\xff\xfe[]")

    def test_empty_array_is_empty_store(self, day):
        store = Store.load_from("[]")
        assert len(store) == 0
        assert store.get(day) is None
        assert store.get(date(2030, 6, 1)) is None

    def test_duplicate_dates_last_wins(self, day):
        store = Store.load_from(
            '[{"date":"2015-01-01","today":["first"]},{"date":"2015-01-01","today":["second"]}]'
        )
        assert len(store) == 1
        assert store.get(day).today == ("second",)

    def test_decode_failure_raises(self):
        with pytest.raises(DecodeError):
            Store.load_from("not json")

    def test_missing_dates_use_injected_today(self):
        store = Store.load_from('[{"today":["x"]}]', today=date(2025, 1, 15))
        assert date(2025, 1, 15) in store


class TestFlushTo:
    def test_writes_whole_document(self, day):
        store = Store.load_from("[]")
        store.insert(Entry.from_date(day))
        sink = io.StringIO()

        store.flush_to(sink)

        assert '"date":"2015-01-01"' in sink.getvalue()

    def test_writes_ascending_order(self):
        store = Store()
        store.insert(Entry.from_date(date(2024, 3, 1)))
        store.insert(Entry.from_date(date(2023, 12, 31)))
        sink = io.StringIO()

        store.flush_to(sink)

        text = sink.getvalue()
        assert text.index("2023-12-31") < text.index("2024-03-01")

    def test_round_trip(self):
        store = Store()
        store.insert(Entry.from_date(date(2024, 1, 2)).add(Aspect.TODAY, "b"))
        store.insert(Entry.from_date(date(2024, 1, 1)).add(Aspect.BLOCKER, "a"))
        sink = io.StringIO()

        store.flush_to(sink)

        assert Store.load_from(sink.getvalue()).list() == store.list()


class TestInsertGet:
    def test_can_add_entries(self, day):
        store = Store()
        entry = Entry.from_date(day).add(Aspect.TODAY, "x")
        store.insert(entry)
        assert store.get(day) == entry

    def test_upsert_replaces_whole_entry(self, day):
        store = Store()
        store.insert(Entry.from_date(day).add(Aspect.TODAY, "first"))
        second = Entry.from_date(day).add(Aspect.YESTERDAY, "second")

        store.insert(second)

        assert len(store) == 1
        assert store.get(day) == second
        assert store.get(day).today == ()

    def test_get_missing_is_none(self, day):
        assert Store().get(day) is None


class TestDelete:
    def test_can_delete_an_entry(self, day):
        store = Store()
        entry = Entry.from_date(day)
        store.insert(entry)
        assert len(store) == 1

        assert store.delete(day) == entry
        assert len(store) == 0
        assert store.get(day) is None

    def test_delete_missing_returns_none(self, day):
        store = Store()
        assert store.delete(day) is None
        assert store.get(day) is None


class TestList:
    def test_ascending_by_date(self):
        dates = [date(2024, 5, 1), date(2023, 1, 1), date(2024, 1, 1)]
        store = Store([Entry.from_date(d) for d in dates])
        assert [e.date for e in store.list()] == sorted(dates)

    def test_empty(self):
        assert Store().list() == []

    def test_list_is_a_copy(self, day):
        store = Store([Entry.from_date(day)])
        store.list().clear()
        assert len(store) == 1
