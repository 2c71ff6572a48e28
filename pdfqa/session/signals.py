"""Minimal observer primitive used to notify the rendering layer of changes."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class Signal:
    """A "changed" notification that listeners can subscribe to.

    Listeners are called synchronously in subscription order. A failing
    listener is logged and does not prevent the others from running.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._listeners: list[Listener] = []

    def connect(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def disconnect(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception(f"Listener for signal '{self.name}' failed")

    def __len__(self) -> int:
        return len(self._listeners)
