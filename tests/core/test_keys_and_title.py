"""
Unit tests for key dispatch and the page title resource.
"""

from popcorn.core.keys import KeyBindings
from popcorn.core.title import DocumentTitle


class TestKeyBindings:
    """Tests for subscribe/dispatch/unsubscribe."""

    def test_dispatch_calls_subscribers(self):
        """Handlers for a key run on dispatch; other keys are untouched."""
        keys = KeyBindings()
        calls = []
        keys.subscribe("Escape", lambda: calls.append("esc"))
        keys.subscribe("Enter", lambda: calls.append("enter"))

        assert keys.dispatch("Escape") == 1
        assert calls == ["esc"]

    def test_key_names_are_case_insensitive(self):
        keys = KeyBindings()
        calls = []
        keys.subscribe("Escape", lambda: calls.append(1))
        keys.dispatch("escape")
        keys.dispatch("ESCAPE")
        assert calls == [1, 1]

    def test_unsubscribe(self):
        """The returned function removes the handler; calling it again is a no-op."""
        keys = KeyBindings()
        calls = []
        unsubscribe = keys.subscribe("Escape", lambda: calls.append(1))
        unsubscribe()
        unsubscribe()
        assert keys.dispatch("Escape") == 0
        assert calls == []
        assert keys.subscription_count("Escape") == 0

    def test_handler_may_unsubscribe_during_dispatch(self):
        keys = KeyBindings()
        calls = []
        unsubscribe = None

        def handler():
            calls.append(1)
            unsubscribe()

        unsubscribe = keys.subscribe("Escape", handler)
        keys.dispatch("Escape")
        keys.dispatch("Escape")
        assert calls == [1]


class TestDocumentTitle:
    """Tests for title leases."""

    def test_acquire_and_release(self):
        """Releasing a lease restores the previous title."""
        title = DocumentTitle("usePopcorn")
        lease = title.acquire("Movie | Heat")
        assert title.value == "Movie | Heat"
        lease.release()
        assert title.value == "usePopcorn"

    def test_release_is_idempotent(self):
        """A second release doesn't clobber a newer title."""
        title = DocumentTitle()
        lease = title.acquire("Movie | Heat")
        lease.release()
        other = title.acquire("Movie | Alien")
        lease.release()
        assert title.value == "Movie | Alien"
        other.release()
        assert title.value == title.default
