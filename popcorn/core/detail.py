"""
Movie detail lifecycle.

Loads the detail for the selected movie, owns the rating widget shown while
it is open, and builds the watched record when the user adds the movie.

Each open() starts a new generation. A fetch only applies its result if its
generation and movie id are still current when it resolves, so a slow
response for an earlier selection can never overwrite a later one.
"""

import asyncio
import logging
import re
from enum import Enum
from typing import Awaitable, Callable, Optional

from popcorn.core.keys import KeyBindings
from popcorn.core.rating import RatingWidget
from popcorn.core.title import DocumentTitle, TitleLease
from popcorn.errors import FetchError, ParseError
from popcorn.models.movie import MovieDetail
from popcorn.models.watched import WatchedRecord

logger = logging.getLogger(__name__)

DetailFetcher = Callable[[str], Awaitable[MovieDetail]]

CLOSE_KEY = "Escape"

_LEADING_INT = re.compile(r"^\s*(\d+)")


def parse_runtime_minutes(runtime: str) -> int:
    """
    Parse minutes from a catalog runtime string such as "142 min".

    Raises:
        ParseError: If the string does not start with an integer
    """
    match = _LEADING_INT.match(runtime or "")
    if match is None:
        raise ParseError(f"No runtime minutes in {runtime!r}")
    return int(match.group(1))


class DetailStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class DetailLifecycle:
    """
    Fetch-on-open / cleanup-on-close cycle for one movie id at a time.

    The owner supplies how to look up an existing user rating (which decides
    between "rate" and "already rated" mode), where finished records go,
    and how to request the view be closed.

    Usage (inside the event loop):
        lifecycle = DetailLifecycle(fetch, title, keys, lookup, on_add, on_close)
        await lifecycle.open("tt0111161")
        lifecycle.rating_widget.click(9)
        lifecycle.add_to_watched()
    """

    def __init__(
        self,
        fetch_detail: DetailFetcher,
        title: DocumentTitle,
        keys: KeyBindings,
        lookup_rating: Callable[[str], Optional[int]],
        on_add: Callable[[WatchedRecord], None],
        on_close: Callable[[], None],
        rating_max: int = 10,
    ):
        self._fetch_detail = fetch_detail
        self._title = title
        self._keys = keys
        self._lookup_rating = lookup_rating
        self._on_add = on_add
        self._on_close = on_close
        self.rating_max = rating_max

        self._generation = 0
        self._title_lease: Optional[TitleLease] = None
        self._unsubscribe_close: Optional[Callable[[], None]] = None

        self.movie_id: Optional[str] = None
        self.status = DetailStatus.IDLE
        self.detail: Optional[MovieDetail] = None
        self.error: Optional[str] = None
        self.rating_widget: Optional[RatingWidget] = None
        self.user_rating = 0
        self.interaction_count = 0

    @property
    def is_loading(self) -> bool:
        return self.status == DetailStatus.LOADING

    @property
    def watched_rating(self) -> Optional[int]:
        """The stored user rating when this movie is already watched."""
        if self.movie_id is None:
            return None
        return self._lookup_rating(self.movie_id)

    @property
    def is_rated(self) -> bool:
        return self.watched_rating is not None

    @property
    def can_add(self) -> bool:
        return (
            self.status == DetailStatus.READY
            and self.detail is not None
            and not self.is_rated
            and self.user_rating > 0
        )

    def open(self, movie_id: str) -> "asyncio.Task[Optional[MovieDetail]]":
        """
        Show movie_id, replacing whatever was open, and start its fetch.

        Must be called from a running event loop.

        Returns:
            Task resolving to the applied MovieDetail, or None if the fetch
            failed or went stale
        """
        self._teardown()
        self._generation += 1
        generation = self._generation

        self.movie_id = movie_id
        self.status = DetailStatus.LOADING
        self.detail = None
        self.error = None
        self.user_rating = 0
        self.interaction_count = 0
        self.rating_widget = RatingWidget(
            max_rating=self.rating_max,
            size=24,
            on_commit=self._on_rating_committed,
        )
        self._unsubscribe_close = self._keys.subscribe(CLOSE_KEY, self._on_close_key)

        logger.info("Loading detail for %s", movie_id)
        return asyncio.get_running_loop().create_task(self._load(generation, movie_id))

    def close(self) -> None:
        """Tear down regardless of load state; any in-flight fetch is discarded."""
        if self.movie_id is None and self.status == DetailStatus.IDLE:
            return
        self._generation += 1
        self._teardown()
        logger.debug("Closed detail for %s", self.movie_id)
        self.movie_id = None
        self.status = DetailStatus.IDLE
        self.detail = None
        self.error = None
        self.rating_widget = None
        self.user_rating = 0
        self.interaction_count = 0

    def add_to_watched(self) -> WatchedRecord:
        """
        Build the watched record for the open movie and hand it to the owner.

        Raises:
            ValueError: If the detail isn't loaded, the movie is already rated,
                or no rating has been selected
        """
        if not self.can_add:
            raise ValueError("Select a rating for a loaded, unrated movie before adding it")

        detail = self.detail
        try:
            runtime_minutes = parse_runtime_minutes(detail.runtime)
        except ParseError as e:
            logger.warning("Using 0 minutes for %s: %s", detail.id, e)
            runtime_minutes = 0

        record = WatchedRecord(
            id=self.movie_id,
            title=detail.title,
            year=detail.year,
            poster=detail.poster,
            runtime_minutes=runtime_minutes,
            external_rating=detail.imdb_rating,
            user_rating=self.user_rating,
            interaction_count=self.interaction_count,
        )
        logger.info(
            "Adding %s (%s) rated %d after %d change(s)",
            record.id, record.title, record.user_rating, record.interaction_count,
        )
        self._on_add(record)
        self._on_close()
        return record

    def _is_current(self, generation: int, movie_id: str) -> bool:
        return generation == self._generation and movie_id == self.movie_id

    async def _load(self, generation: int, movie_id: str) -> Optional[MovieDetail]:
        try:
            detail = await self._fetch_detail(movie_id)
        except FetchError as e:
            if not self._is_current(generation, movie_id):
                logger.debug("Ignoring failure for stale selection %s: %s", movie_id, e)
                return None
            logger.warning("Failed to load detail for %s: %s", movie_id, e)
            self.status = DetailStatus.FAILED
            self.error = str(e)
            return None

        if not self._is_current(generation, movie_id):
            logger.debug("Discarding stale detail for %s (current: %s)", movie_id, self.movie_id)
            return None

        self.detail = detail
        self.status = DetailStatus.READY
        if detail.title:
            self._title_lease = self._title.acquire(f"Movie | {detail.title}")
        return detail

    def _on_rating_committed(self, rating: int) -> None:
        if self.is_rated:
            return
        if rating != self.user_rating:
            self.user_rating = rating
            self.interaction_count += 1

    def _on_close_key(self) -> None:
        self._on_close()

    def _teardown(self) -> None:
        if self._title_lease is not None:
            self._title_lease.release()
            self._title_lease = None
        if self._unsubscribe_close is not None:
            self._unsubscribe_close()
            self._unsubscribe_close = None
