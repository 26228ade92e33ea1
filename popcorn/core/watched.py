"""
Watched list state.

Holds the rated movies, answers membership questions, derives the summary
statistics, and writes the whole list through to storage on every change.
"""

import logging
from typing import Any, Iterator, List, Optional

from pydantic import ValidationError

from popcorn.models.watched import WatchedRecord, WatchedSummary

logger = logging.getLogger(__name__)

DEFAULT_WATCHED_KEY = "watched"


def _mean(values: List[float]) -> float:
    return sum(values) / len(values) if values else 0.0


class WatchedStore:
    """
    Persisted list of watched movies, at most one record per movie id.

    storage is any object with load(key, default) and save(key, value),
    e.g. popcorn.database.KeyValueStore.

    Mutations persist the new list first and only then replace the in-memory
    list, so a failed save leaves the store unchanged.
    """

    def __init__(self, storage: Any, key: str = DEFAULT_WATCHED_KEY):
        self._storage = storage
        self.key = key
        self._records: List[WatchedRecord] = self._load()

    def _load(self) -> List[WatchedRecord]:
        raw = self._storage.load(self.key, [])
        if not isinstance(raw, list):
            logger.warning("Stored %r is not a list, starting empty", self.key)
            return []

        records: List[WatchedRecord] = []
        seen = set()
        for item in raw:
            try:
                record = WatchedRecord.model_validate(item)
            except ValidationError as e:
                logger.warning("Skipping invalid watched entry %r: %s", item, e)
                continue
            if record.id in seen:
                logger.warning("Skipping duplicate watched entry %s", record.id)
                continue
            seen.add(record.id)
            records.append(record)

        logger.info("Loaded %d watched movie(s)", len(records))
        return records

    def _commit(self, records: List[WatchedRecord]) -> None:
        self._storage.save(self.key, [r.model_dump(by_alias=True) for r in records])
        self._records = records

    @property
    def records(self) -> List[WatchedRecord]:
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[WatchedRecord]:
        return iter(list(self._records))

    def get(self, movie_id: str) -> Optional[WatchedRecord]:
        for record in self._records:
            if record.id == movie_id:
                return record
        return None

    def contains(self, movie_id: str) -> bool:
        return self.get(movie_id) is not None

    def add(self, record: WatchedRecord) -> bool:
        """
        Append record unless its movie is already in the list.

        Returns:
            True if added, False if a record with the same id exists
        """
        if self.contains(record.id):
            logger.info("%s is already watched, ignoring", record.id)
            return False
        self._commit(self._records + [record])
        return True

    def remove(self, movie_id: str) -> bool:
        """
        Remove the record for movie_id.

        Returns:
            True if removed, False if not found
        """
        remaining = [r for r in self._records if r.id != movie_id]
        if len(remaining) == len(self._records):
            return False
        self._commit(remaining)
        logger.info("Removed %s from watched", movie_id)
        return True

    def aggregates(self) -> WatchedSummary:
        """Count and means over the current list; means of an empty list are 0."""
        return WatchedSummary(
            count=len(self._records),
            mean_external_rating=_mean([r.external_rating for r in self._records]),
            mean_user_rating=_mean([r.user_rating for r in self._records]),
            mean_runtime_minutes=_mean([r.runtime_minutes for r in self._records]),
        )
