"""A last-value cell that other threads can read while the UI thread writes."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

Subscriber = Callable[[Decimal | None], None]


class ValueStream:
    """Holds the most recently published value and notifies subscribers.

    Only the UI thread publishes.  Each publish rebinds a single attribute,
    so a reader on another thread always sees a whole value.  The subscriber
    collection is an immutable tuple that is replaced, never mutated.
    """

    def __init__(self, initial: Decimal | None = None) -> None:
        self._value = initial
        self._subscribers: tuple[Subscriber, ...] = ()

    @property
    def value(self) -> Decimal | None:
        """The latest published value."""
        return self._value

    def publish(self, value: Decimal | None) -> None:
        """Store *value* and pass it to every subscriber."""
        self._value = value
        for callback in self._subscribers:
            callback(value)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* for future values.

        Returns:
            A function that removes the subscription again.
        """
        self._subscribers = self._subscribers + (callback,)

        def unsubscribe() -> None:
            self._subscribers = tuple(s for s in self._subscribers if s is not callback)

        return unsubscribe
