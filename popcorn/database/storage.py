"""
Durable key-value storage on top of the SQLAlchemy database.

Values are JSON documents; this is the persistence collaborator the watched
list writes through to.
"""

import json
import logging
from typing import Any, List

from sqlalchemy import select

from popcorn.database.connection import DatabaseManager
from popcorn.database.models import KeyValueEntry

logger = logging.getLogger(__name__)


class KeyValueStore:
    """
    Named JSON values, durable across sessions.

    Usage:
        storage = KeyValueStore(db_manager)
        storage.save("watched", [...])
        watched = storage.load("watched", [])
    """

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    def load(self, key: str, default: Any = None) -> Any:
        """
        Load the value stored under key.

        Args:
            key: Value name
            default: Returned when the key is missing or its value is not valid JSON

        Returns:
            Decoded value or default
        """
        with self.db_manager.session_scope() as session:
            entry = session.get(KeyValueEntry, key)
            raw = entry.value if entry is not None else None

        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Stored value for %r is not valid JSON, using default: %s", key, e)
            return default

    def save(self, key: str, value: Any) -> None:
        """
        Store value under key, replacing any previous value.

        Raises:
            TypeError: If value is not JSON serializable
        """
        raw = json.dumps(value)
        with self.db_manager.session_scope() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=raw))
            else:
                entry.value = raw
        logger.debug("Saved %r (%d bytes)", key, len(raw))

    def delete(self, key: str) -> bool:
        """
        Delete the value stored under key.

        Returns:
            True if a value was deleted, False if not found
        """
        with self.db_manager.session_scope() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                return False
            session.delete(entry)
        return True

    def keys(self) -> List[str]:
        """Get all stored keys, sorted."""
        with self.db_manager.session_scope() as session:
            return list(session.scalars(select(KeyValueEntry.key).order_by(KeyValueEntry.key)))
