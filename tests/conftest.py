"""
Shared fixtures: in-memory database, watched store, and a controllable
fake catalog for driving detail fetches step by step.
"""

import asyncio

import pytest

from popcorn.database.connection import DatabaseManager
from popcorn.database.storage import KeyValueStore
from popcorn.core.watched import WatchedStore
from popcorn.errors import FetchError
from popcorn.models.movie import MovieDetail
from popcorn.models.watched import WatchedRecord


class FakeCatalog:
    """
    Detail provider whose responses are released by the test.

    Each fetch waits on a future per call; resolve()/fail() complete the
    oldest pending call for that id.
    """

    def __init__(self):
        self.calls = []
        self._pending = {}

    async def fetch_detail(self, movie_id: str) -> MovieDetail:
        future = asyncio.get_running_loop().create_future()
        self.calls.append(movie_id)
        self._pending.setdefault(movie_id, []).append(future)
        return await future

    def resolve(self, movie_id: str, **fields) -> None:
        fields.setdefault("title", f"Title {movie_id}")
        fields.setdefault("runtime", "100 min")
        fields.setdefault("imdb_rating", 7.5)
        self._pending[movie_id].pop(0).set_result(MovieDetail(id=movie_id, **fields))

    def fail(self, movie_id: str, message: str = "Movie not found!") -> None:
        self._pending[movie_id].pop(0).set_exception(FetchError(message, movie_id=movie_id))


async def _settle() -> None:
    """Let scheduled tasks run until they block again."""
    for _ in range(5):
        await asyncio.sleep(0)


@pytest.fixture
def db_manager():
    """Create an in-memory SQLite database for testing."""
    manager = DatabaseManager(db_path=":memory:")
    manager.create_tables()
    yield manager
    manager.close()


@pytest.fixture
def storage(db_manager):
    return KeyValueStore(db_manager)


@pytest.fixture
def store(storage):
    return WatchedStore(storage)


@pytest.fixture
def catalog():
    return FakeCatalog()


@pytest.fixture
def settle():
    """Coroutine function that yields to the event loop until tasks block."""
    return _settle


@pytest.fixture
def make_record():
    """Factory for watched records with sensible defaults."""
    def _make(movie_id="tt001", **overrides):
        fields = {
            "id": movie_id,
            "title": f"Title {movie_id}",
            "year": "2000",
            "poster": "",
            "runtime_minutes": 100,
            "external_rating": 8.0,
            "user_rating": 4,
            "interaction_count": 1,
        }
        fields.update(overrides)
        return WatchedRecord(**fields)
    return _make
