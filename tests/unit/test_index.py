"""Unit tests for the record store."""

import pytest
from translation_lookup.core.index import RecordStore
from translation_lookup.models.record import TranslationRecord


def make_record(record_id, group_name="Sheet1"):
    return TranslationRecord(id=record_id, group_name=group_name, key=record_id)


class TestRecordStore:
    """Test cases for the RecordStore class."""

    @pytest.fixture
    def store(self):
        """Create an empty store for testing."""
        return RecordStore()

    def test_initialization(self, store):
        assert len(store) == 0
        assert store.get_all() == []
        assert store.get_stats()["total_records"] == 0
        assert store.get_stats()["last_updated"] is None

    def test_append_batches_preserve_order(self, store):
        store.append_batch([make_record("a"), make_record("b")])
        store.append_batch([make_record("c")])

        assert [r.id for r in store.get_all()] == ["a", "b", "c"]
        assert store.get_stats()["total_batches"] == 2
        assert store.get_stats()["total_records"] == 3

    def test_random_access(self, store):
        store.append_batch([make_record(str(i)) for i in range(10)])

        assert store[0].id == "0"
        assert store[7].id == "7"
        assert store[-1].id == "9"

    def test_get_by_id(self, store):
        store.append_batch([make_record("a"), make_record("b")])

        assert store.get("b").id == "b"
        assert store.get("missing") is None

    def test_slice(self, store):
        store.append_batch([make_record(str(i)) for i in range(10)])

        assert [r.id for r in store.slice(3, 4)] == ["3", "4", "5", "6"]
        assert [r.id for r in store.slice(8, 5)] == ["8", "9"]
        assert store.slice(20, 5) == []

    def test_get_all_returns_copy(self, store):
        store.append_batch([make_record("a")])
        records = store.get_all()
        records.clear()

        assert len(store) == 1

    def test_duplicate_id_rejected(self, store):
        store.append_batch([make_record("a")])

        with pytest.raises(ValueError):
            store.append_batch([make_record("b"), make_record("a")])

        # Nothing from the rejected batch is kept
        assert [r.id for r in store.get_all()] == ["a"]

    def test_duplicate_id_within_batch_rejected(self, store):
        with pytest.raises(ValueError):
            store.append_batch([make_record("a"), make_record("a")])
        assert len(store) == 0

    def test_group_names_first_seen_order(self, store):
        store.append_batch([
            make_record("1", "Menu"),
            make_record("2", "Dialogs"),
            make_record("3", "Menu"),
        ])

        assert store.group_names() == ["Menu", "Dialogs"]

    def test_clear(self, store):
        store.append_batch([make_record("a")])
        store.clear()

        assert len(store) == 0
        assert store.get("a") is None
        assert store.get_stats()["total_batches"] == 0
