"""
Observable value cell.

A ``Signal`` holds one value and a registry of subscriber callbacks. Every
``set`` notifies all subscribers synchronously, in subscription order, even
when the value is unchanged.

Reentrancy: notification iterates a snapshot of the registry taken before the
first callback runs. A callback subscribed during notification is first called
on the next ``set``; a callback unsubscribed during notification still receives
the in-flight value. An exception raised by a callback propagates out of
``set`` and the remaining callbacks are not called.
"""

from collections.abc import Callable
from typing import Generic, TypeVar

from ultan.log import get_logger

logger = get_logger(__name__)

ValueT = TypeVar("ValueT")

Subscriber = Callable[[ValueT], None]
Unsubscribe = Callable[[], None]


class Signal(Generic[ValueT]):
    """Value holder with change notification."""

    def __init__(self, initial: ValueT) -> None:
        self._value = initial
        # Ordered set of callbacks; dicts keep insertion order.
        self._subscribers: dict[Subscriber[ValueT], None] = {}

    def get(self) -> ValueT:
        return self._value

    def set(self, value: ValueT) -> None:
        self._value = value
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Subscriber[ValueT]) -> Unsubscribe:
        """Register ``callback`` and return a function that removes it.

        Subscribing the same callback twice keeps a single registration.
        """
        self._subscribers.setdefault(callback, None)
        logger.debug("signal_subscribed", subscribers=len(self._subscribers))

        def unsubscribe() -> None:
            self._subscribers.pop(callback, None)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


def create_signal(initial: ValueT) -> Signal[ValueT]:
    return Signal(initial)
