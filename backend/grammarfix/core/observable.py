"""Single-slot observable state.

Holds one current value. Subscribers receive the current value as soon as
they subscribe and then every later change. A subscriber that falls behind
skips intermediate values but always catches up to the latest one.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """Latest-value state holder with replay-on-subscribe."""

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._version = 0
        self._closed = False
        self._waiters: set[asyncio.Event] = set()
        self._listeners: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    @property
    def closed(self) -> bool:
        return self._closed

    def publish(self, value: T) -> None:
        """Replace the current value and notify observers.

        Publishing a value equal to the current one is a no-op, and
        publishing after ``close`` is ignored.
        """
        if self._closed:
            logger.debug("Ignoring publish on closed observable")
            return
        if value == self._value:
            return

        self._value = value
        self._version += 1

        for event in self._waiters:
            event.set()
        for listener in list(self._listeners):
            self._notify(listener, value)

    def add_listener(self, listener: Callable[[T], None]) -> Callable[[], None]:
        """Call *listener* now with the current value and on every change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)
        self._notify(listener, self._value)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    @staticmethod
    def _notify(listener: Callable[[T], None], value: T) -> None:
        # A failing listener must not stop the publisher or the other listeners
        try:
            listener(value)
        except Exception:
            logger.exception("Observable listener %r failed", listener)

    async def subscribe(self) -> AsyncIterator[T]:
        """Yield the current value, then each newer value until closed."""
        seen = -1
        while True:
            if seen != self._version:
                seen = self._version
                yield self._value
                continue
            if self._closed:
                return

            event = asyncio.Event()
            self._waiters.add(event)
            try:
                await event.wait()
            finally:
                self._waiters.discard(event)

    def close(self) -> None:
        """Stop accepting values and release all observers."""
        if self._closed:
            return
        self._closed = True
        for event in self._waiters:
            event.set()
        self._listeners.clear()
