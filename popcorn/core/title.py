"""
Page title resource.

A component that wants to show its own title acquires a lease and releases
it when torn down, which restores whatever title was shown before.
"""

import logging

logger = logging.getLogger(__name__)


class TitleLease:
    """One acquired title; release() restores the previous one, once."""

    def __init__(self, document: "DocumentTitle", title: str, previous: str):
        self._document = document
        self.title = title
        self.previous = previous
        self.released = False

    def release(self) -> None:
        if self.released:
            return
        self.released = True
        self._document.value = self.previous
        logger.debug("Title restored to %r", self.previous)


class DocumentTitle:
    """The current page title, starting at a default."""

    def __init__(self, default: str = "usePopcorn"):
        self.default = default
        self.value = default

    def acquire(self, title: str) -> TitleLease:
        lease = TitleLease(self, title, previous=self.value)
        self.value = title
        logger.debug("Title set to %r", title)
        return lease
