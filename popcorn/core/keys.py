"""
Global key-event dispatch.

Components subscribe handlers by key name for as long as they are mounted
and unsubscribe on teardown.
"""

import logging
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)

KeyHandler = Callable[[], None]


class KeyBindings:
    """
    Subscription list keyed by key name.

    Key names match case-insensitively ("Escape" == "escape").

    Usage:
        keys = KeyBindings()
        unsubscribe = keys.subscribe("Escape", close_view)
        keys.dispatch("escape")   # calls close_view
        unsubscribe()
    """

    def __init__(self):
        self._handlers: Dict[str, List[KeyHandler]] = {}

    @staticmethod
    def _normalize(key: str) -> str:
        return key.lower()

    def subscribe(self, key: str, handler: KeyHandler) -> Callable[[], None]:
        """
        Register handler for key.

        Returns:
            Function that removes this subscription; calling it twice is a no-op
        """
        name = self._normalize(key)
        self._handlers.setdefault(name, []).append(handler)
        active = True

        def unsubscribe() -> None:
            nonlocal active
            if active:
                active = False
                self.unsubscribe(key, handler)

        return unsubscribe

    def unsubscribe(self, key: str, handler: KeyHandler) -> bool:
        """
        Remove one subscription of handler for key.

        Returns:
            True if a subscription was removed, False if not found
        """
        name = self._normalize(key)
        handlers = self._handlers.get(name, [])
        if handler not in handlers:
            return False
        handlers.remove(handler)
        if not handlers:
            del self._handlers[name]
        return True

    def dispatch(self, key: str) -> int:
        """
        Deliver a key press to every handler subscribed to it.

        Handlers may unsubscribe while being dispatched.

        Returns:
            Number of handlers called
        """
        handlers = list(self._handlers.get(self._normalize(key), []))
        for handler in handlers:
            handler()
        if handlers:
            logger.debug("Dispatched %r to %d handler(s)", key, len(handlers))
        return len(handlers)

    def subscription_count(self, key: str) -> int:
        return len(self._handlers.get(self._normalize(key), []))
