"""
Notification surface between a session and its presentation layer.
"""
from typing import Callable, Dict, List

CELL_UPDATED = 'cell_updated'   # (index, mark)
TURN_CHANGED = 'turn_changed'   # (mark)
GAME_OVER = 'game_over'         # (MatchResult)
RESET = 'reset'                 # (starting_player)

EVENTS = (CELL_UPDATED, TURN_CHANGED, GAME_OVER, RESET)


class EventEmitter:
    """
    Registry of listeners keyed by event name.

    Listeners are called synchronously, in subscription order. Exceptions
    raised by a listener propagate to whoever triggered the event.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Callable]] = {name: [] for name in EVENTS}

    def _check(self, event: str):
        if event not in self._listeners:
            raise ValueError(f"Unknown event: {event!r} (expected one of {', '.join(EVENTS)})")

    def on(self, event: str, callback: Callable) -> Callable:
        """
        Subscribe ``callback`` to ``event``.

        Returns the callback.
        """
        self._check(event)
        self._listeners[event].append(callback)
        return callback

    def off(self, event: str, callback: Callable):
        """Unsubscribe ``callback``; unknown callbacks are ignored."""
        self._check(event)
        if callback in self._listeners[event]:
            self._listeners[event].remove(callback)

    def emit(self, event: str, *args):
        self._check(event)
        # Copy so listeners may unsubscribe while being notified
        for callback in list(self._listeners[event]):
            callback(*args)

    def listener_count(self, event: str) -> int:
        self._check(event)
        return len(self._listeners[event])
