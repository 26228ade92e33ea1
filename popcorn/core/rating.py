"""
Star rating widget state.

Keeps the committed rating and the hover preview as two separate values so
the widget can be driven and tested without a rendering surface.
"""

import logging
from typing import Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)


class RatingWidget:
    """
    Interactive star rating control.

    Hovering a star previews it (``temp_rating``); clicking commits it
    (``rating``) and notifies the owner through ``on_commit``. A non-zero
    preview wins for display but never changes the committed value.

    Usage:
        widget = RatingWidget(max_rating=10, on_commit=print)
        widget.enter(7)      # preview 7 stars
        widget.leave(7)      # back to committed
        widget.click(4)      # commits 4, prints 4
    """

    def __init__(
        self,
        max_rating: int = 5,
        color: str = "#fcc419",
        size: int = 48,
        messages: Optional[Sequence[str]] = None,
        default_rating: int = 0,
        on_commit: Optional[Callable[[int], None]] = None,
    ):
        """
        Args:
            max_rating: Number of stars
            color: Star and label color (display only)
            size: Star size in pixels (display only)
            messages: Label per star; used only when there is one per star
            default_rating: Initially committed rating, 0 for none
            on_commit: Callback(rating) fired on every click

        Raises:
            ValueError: If max_rating < 1 or default_rating is out of range
        """
        if max_rating < 1:
            raise ValueError("max_rating must be at least 1")
        if not (0 <= default_rating <= max_rating):
            raise ValueError(f"default_rating must be between 0 and {max_rating}")

        self.max_rating = max_rating
        self.color = color
        self.size = size
        self.messages = list(messages or [])
        self.rating = default_rating
        self.temp_rating = 0
        self._on_commit = on_commit

    @property
    def positions(self) -> range:
        """Star positions, 1-indexed."""
        return range(1, self.max_rating + 1)

    def _check_position(self, position: int) -> None:
        if position not in self.positions:
            raise ValueError(f"Star position must be between 1 and {self.max_rating}, got {position}")

    def enter(self, position: int) -> None:
        """Pointer entered a star: preview it."""
        self._check_position(position)
        self.temp_rating = position

    def leave(self, position: Optional[int] = None) -> None:
        """Pointer left a star: clear the whole preview."""
        self.temp_rating = 0

    def click(self, position: int) -> None:
        """Commit the clicked star and notify the owner."""
        self._check_position(position)
        self.rating = position
        logger.debug("Rating committed: %d/%d", position, self.max_rating)
        if self._on_commit is not None:
            self._on_commit(position)

    def is_full(self, position: int) -> bool:
        if self.temp_rating:
            return self.temp_rating >= position
        return self.rating >= position

    def stars(self) -> List[bool]:
        """Full/empty flag for every star, left to right."""
        return [self.is_full(i) for i in self.positions]

    @property
    def full_count(self) -> int:
        return sum(self.stars())

    @property
    def label(self) -> str:
        """Text shown next to the stars."""
        shown = self.temp_rating or self.rating
        if len(self.messages) == self.max_rating:
            return self.messages[shown - 1] if shown else ""
        return str(shown) if shown else ""
