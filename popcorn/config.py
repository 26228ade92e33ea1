"""
Application configuration loaded from environment or defaults.
"""

import os
from pathlib import Path


def get_omdb_api_key() -> str:
    """Get OMDb API key from env."""
    return os.getenv("OMDB_API_KEY", "")


def get_omdb_base_url() -> str:
    """Get OMDb base URL from env or default."""
    return os.getenv("OMDB_BASE_URL", "https://www.omdbapi.com/")


def get_omdb_timeout() -> float:
    """Get OMDb request timeout in seconds."""
    return float(os.getenv("OMDB_TIMEOUT", "10"))


def get_database_path() -> str:
    """Get database file path from env or default."""
    return os.getenv("DATABASE_PATH", "") or str(
        Path(__file__).resolve().parents[1] / "data" / "popcorn.db"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_app_title() -> str:
    """Get the default page title."""
    return os.getenv("APP_TITLE", "usePopcorn")


def get_watched_key() -> str:
    """Get the storage key the watched list is persisted under."""
    return os.getenv("WATCHED_KEY", "watched")


def get_rating_max() -> int:
    """Get number of stars shown in the detail view."""
    return int(os.getenv("RATING_MAX", "10"))


def get_search_min_chars() -> int:
    """Get minimum query length before the catalog is searched."""
    return int(os.getenv("SEARCH_MIN_CHARS", "3"))
