"""
Exceptions raised by the movie tracker.
"""

from typing import Optional


class PopcornError(Exception):
    """Base class for application errors."""


class FetchError(PopcornError):
    """Raised when a movie detail cannot be loaded from the catalog."""

    def __init__(self, message: str, movie_id: Optional[str] = None):
        super().__init__(message)
        self.movie_id = movie_id


class ParseError(PopcornError, ValueError):
    """Raised when a catalog value has an unexpected format."""
