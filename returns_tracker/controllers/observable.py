# returns_tracker/controllers/observable.py

import logging
from typing import Any, Callable, Generic, List, TypeVar

logger = logging.getLogger(__name__)

S = TypeVar("S")

Listener = Callable[[S], Any]


class Observable(Generic[S]):
    """
    Minimal publish side for controllers.

    Listeners receive every new state snapshot. A listener that raises is
    logged and skipped so one broken view cannot stall the controller.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, callback: Listener) -> None:
        # Avoid duplicate subscriptions
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Listener) -> bool:
        if callback in self._listeners:
            self._listeners.remove(callback)
            return True
        return False

    def clear_all_subscriptions(self) -> None:
        self._listeners.clear()

    def _publish(self, state: S) -> None:
        for callback in list(self._listeners):
            try:
                callback(state)
            except Exception as e:
                logger.error(f"Error in state listener {callback!r}: {e}", exc_info=True)
