"""
Top-level selection state.
"""

import asyncio
import logging
from typing import Optional

from popcorn.core.detail import DetailFetcher, DetailLifecycle
from popcorn.core.keys import KeyBindings
from popcorn.core.title import DocumentTitle
from popcorn.core.watched import WatchedStore
from popcorn.models.movie import MovieDetail
from popcorn.models.watched import WatchedRecord, WatchedSummary

logger = logging.getLogger(__name__)


class SelectionController:
    """
    Tracks which movie is selected and routes its detail view.

    Selecting the open movie again closes it. Records committed in the
    detail view go to the watched store, after which the view closes.
    """

    def __init__(
        self,
        store: WatchedStore,
        fetch_detail: DetailFetcher,
        title: Optional[DocumentTitle] = None,
        keys: Optional[KeyBindings] = None,
        rating_max: int = 10,
    ):
        self.store = store
        self.title = title or DocumentTitle()
        self.keys = keys or KeyBindings()
        self.detail = DetailLifecycle(
            fetch_detail,
            self.title,
            self.keys,
            lookup_rating=self.watched_rating,
            on_add=self.on_committed,
            on_close=self.deselect,
            rating_max=rating_max,
        )
        self.selected_id: Optional[str] = None

    @property
    def is_watched(self) -> bool:
        return self.selected_id is not None and self.store.contains(self.selected_id)

    def watched_rating(self, movie_id: str) -> Optional[int]:
        record = self.store.get(movie_id)
        return record.user_rating if record is not None else None

    def select(self, movie_id: str) -> "Optional[asyncio.Task[Optional[MovieDetail]]]":
        """
        Select movie_id, or close it if it is already selected.

        Returns:
            The detail fetch task, or None when the selection was toggled off
        """
        if movie_id == self.selected_id:
            self.deselect()
            return None
        self.selected_id = movie_id
        logger.debug("Selected %s (watched: %s)", movie_id, self.is_watched)
        return self.detail.open(movie_id)

    def deselect(self) -> None:
        self.selected_id = None
        self.detail.close()

    def on_committed(self, record: WatchedRecord) -> None:
        self.store.add(record)
        self.deselect()

    def remove_watched(self, movie_id: str) -> bool:
        return self.store.remove(movie_id)

    def summary(self) -> WatchedSummary:
        return self.store.aggregates()
