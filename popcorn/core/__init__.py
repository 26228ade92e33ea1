"""
Interactive core: rating widget, detail lifecycle, watched list, selection.
"""

from popcorn.core.rating import RatingWidget
from popcorn.core.keys import KeyBindings
from popcorn.core.title import DocumentTitle, TitleLease
from popcorn.core.detail import DetailLifecycle, DetailStatus, parse_runtime_minutes
from popcorn.core.watched import WatchedStore
from popcorn.core.selection import SelectionController

__all__ = [
    "RatingWidget",
    "KeyBindings",
    "DocumentTitle",
    "TitleLease",
    "DetailLifecycle",
    "DetailStatus",
    "parse_runtime_minutes",
    "WatchedStore",
    "SelectionController",
]
