"""
Unit tests for the watched list store.

Uses the in-memory SQLite key-value store, so persistence is exercised
end to end.
"""

import pytest

from popcorn.core.watched import WatchedStore
from popcorn.models.watched import WatchedSummary


class FailingStorage:
    """Storage whose saves always fail."""

    def load(self, key, default=None):
        return default

    def save(self, key, value):
        raise OSError("disk full")


class TestWatchedStore:
    """Tests for add/remove/contains and aggregates."""

    def test_empty_aggregates(self, store):
        """An empty list has all-zero aggregates."""
        summary = store.aggregates()
        assert summary == WatchedSummary(
            count=0,
            mean_external_rating=0,
            mean_user_rating=0,
            mean_runtime_minutes=0,
        )
        assert len(store) == 0

    def test_aggregates_scenario(self, store, make_record):
        """Means are plain arithmetic means over the list."""
        store.add(make_record("tt001", user_rating=4, runtime_minutes=100, external_rating=8.0))
        store.add(make_record("tt002", user_rating=6, runtime_minutes=120, external_rating=6.0))

        summary = store.aggregates()
        assert summary.count == 2
        assert summary.mean_user_rating == 5
        assert summary.mean_external_rating == 7
        assert summary.mean_runtime_minutes == 110

    def test_add_then_remove_restores_aggregates(self, store, make_record):
        store.add(make_record("tt001", user_rating=3, runtime_minutes=97, external_rating=7.1))
        store.add(make_record("tt002", user_rating=9, runtime_minutes=131, external_rating=8.4))
        before = store.aggregates()

        store.add(make_record("tt003", user_rating=1, runtime_minutes=88, external_rating=2.3))
        assert store.aggregates() != before
        store.remove("tt003")

        assert store.aggregates() == before

    def test_contains_and_get(self, store, make_record):
        record = make_record("tt001")
        store.add(record)
        assert store.contains("tt001")
        assert not store.contains("tt999")
        assert store.get("tt001") == record
        assert store.get("tt999") is None

    def test_duplicate_add_is_noop(self, store, make_record):
        """A second record for the same id is rejected, the first one kept."""
        assert store.add(make_record("tt001", user_rating=4))
        assert not store.add(make_record("tt001", user_rating=9))
        assert len(store) == 1
        assert store.get("tt001").user_rating == 4

    def test_remove_missing_is_noop(self, store, make_record):
        store.add(make_record("tt001"))
        assert not store.remove("tt999")
        assert len(store) == 1

    def test_order_is_insertion_order(self, store, make_record):
        for movie_id in ["tt003", "tt001", "tt002"]:
            store.add(make_record(movie_id))
        assert [r.id for r in store] == ["tt003", "tt001", "tt002"]
        assert [r.id for r in store.records] == ["tt003", "tt001", "tt002"]

    def test_records_is_a_copy(self, store, make_record):
        store.add(make_record("tt001"))
        store.records.clear()
        assert len(store) == 1


class TestWatchedPersistence:
    """Tests for write-through persistence."""

    def test_add_writes_through(self, store, storage, make_record):
        """The persisted list uses the camelCase record shape."""
        store.add(make_record("tt001", runtime_minutes=142, external_rating=8.8,
                              user_rating=10, interaction_count=3))

        saved = storage.load("watched")
        assert saved == [{
            "id": "tt001",
            "title": "Title tt001",
            "year": "2000",
            "poster": "",
            "runtimeMinutes": 142,
            "externalRating": 8.8,
            "userRating": 10,
            "interactionCount": 3,
        }]

    def test_remove_writes_through(self, store, storage, make_record):
        store.add(make_record("tt001"))
        store.add(make_record("tt002"))
        store.remove("tt001")
        assert [item["id"] for item in storage.load("watched")] == ["tt002"]

    def test_reload_from_storage(self, storage, make_record):
        """A new store on the same storage sees the saved list."""
        first = WatchedStore(storage)
        first.add(make_record("tt001"))
        first.add(make_record("tt002", user_rating=8))

        second = WatchedStore(storage)
        assert [r.id for r in second] == ["tt001", "tt002"]
        assert second.get("tt002").user_rating == 8
        assert second.aggregates() == first.aggregates()

    def test_custom_key(self, storage, make_record):
        store = WatchedStore(storage, key="watched_v2")
        store.add(make_record("tt001"))
        assert storage.load("watched") is None
        assert len(storage.load("watched_v2")) == 1

    def test_invalid_entries_skipped_on_load(self, storage, make_record):
        """Entries that don't validate, and duplicate ids, are dropped on load."""
        good = make_record("tt001").model_dump(by_alias=True)
        storage.save("watched", [good, {"id": "tt002"}, dict(good, userRating=2)])

        store = WatchedStore(storage)
        assert [r.id for r in store] == ["tt001"]
        assert store.get("tt001").user_rating == good["userRating"]

    def test_non_list_value_starts_empty(self, storage):
        storage.save("watched", {"not": "a list"})
        assert len(WatchedStore(storage)) == 0

    def test_failed_save_leaves_store_unchanged(self, make_record):
        """The in-memory list only changes after a successful save."""
        store = WatchedStore(FailingStorage())
        with pytest.raises(OSError):
            store.add(make_record("tt001"))
        assert len(store) == 0
        assert not store.contains("tt001")
