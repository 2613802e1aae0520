from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar


T = TypeVar("T")
Subscriber = Callable[[T], None]

logger = logging.getLogger(__name__)


class Observable(Generic[T]):
    """
    A single value cell the rendering layer can watch.

    - `set()` notifies subscribers synchronously, in subscription order.
    - Setting a value equal to the current one is not a change and notifies nobody.
    - A failing subscriber is logged and does not stop the others.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: List[Subscriber[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        for callback in list(self._subscribers):
            try:
                callback(value)
            except Exception:
                name = getattr(callback, "__name__", repr(callback))
                logger.exception("Subscriber %s failed on state change", name)

    def subscribe(self, callback: Subscriber[T]) -> Callable[[], None]:
        """Register `callback` and return a function that unregisters it."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


__all__ = ["Observable"]
