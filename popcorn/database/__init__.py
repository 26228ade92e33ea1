"""
Database module for the movie tracker.

This module provides the key-value ORM model, connection management, and the
JSON key-value store using SQLAlchemy ORM.
"""

from popcorn.database.models import Base, KeyValueEntry
from popcorn.database.connection import DatabaseManager, get_db_manager
from popcorn.database.storage import KeyValueStore
from popcorn.database.init_db import init_database, verify_schema

__all__ = [
    # Models
    'Base',
    'KeyValueEntry',
    # Connection
    'DatabaseManager',
    'get_db_manager',
    # Storage
    'KeyValueStore',
    # Initialization
    'init_database',
    'verify_schema',
]
