"""
Pydantic schemas for catalog movies and the watched list.
"""

from popcorn.models.movie import Candidate, SearchResult, MovieDetail
from popcorn.models.watched import WatchedRecord, WatchedSummary

__all__ = [
    "Candidate",
    "SearchResult",
    "MovieDetail",
    "WatchedRecord",
    "WatchedSummary",
]
