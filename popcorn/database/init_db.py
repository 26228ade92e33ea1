"""
Database initialization and schema creation.

Run as a script to create (or reset) the schema:
    python -m popcorn.database.init_db [--reset]
"""

import argparse
import logging

from sqlalchemy import inspect

from popcorn.config import get_database_path
from popcorn.database.connection import DatabaseManager, get_db_manager

logger = logging.getLogger(__name__)


def init_database(db_path: str, reset: bool = False) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_path: Path to SQLite database file
        reset: If True, drop existing tables before creating new ones

    Returns:
        DatabaseManager instance
    """
    db_manager = get_db_manager(db_path=db_path)

    if reset:
        logger.info("Resetting database (dropping all tables)...")
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready at %s", db_manager.database_url)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    inspector = inspect(db_manager.engine)
    existing_tables = set(inspector.get_table_names())

    expected_tables = {'kv_entries'}

    missing_tables = expected_tables - existing_tables

    if missing_tables:
        logger.error(f"Missing tables: {missing_tables}")
        return False

    logger.info(f"All tables exist: {existing_tables}")
    return True


if __name__ == "__main__":
    from popcorn.utils.logging_config import setup_logging

    parser = argparse.ArgumentParser(description="Initialize the movie tracker database")
    parser.add_argument("--reset", action="store_true", help="Drop all tables first")
    parser.add_argument("--db-path", default=None, help="Database file (default: DATABASE_PATH)")
    args = parser.parse_args()

    setup_logging()
    db_manager = init_database(args.db_path or get_database_path(), reset=args.reset)

    if verify_schema(db_manager):
        print("\n✅ Database initialization successful!")
    else:
        print("\n❌ Database initialization failed!")
