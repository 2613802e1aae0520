from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, MutableSet, Optional, Protocol, Sequence

from viewstate.models import RevealPhase
from viewstate.observable import Observable


HIDDEN_CLASS = "scroll-reveal-hidden"
VISIBLE_CLASS = "scroll-reveal-visible"
REVEAL_THRESHOLD = 0.2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntersectionEntry:
    """One visibility report for an observed element."""

    target: Any
    is_intersecting: bool
    intersection_ratio: float = 0.0


IntersectionCallback = Callable[[Sequence[IntersectionEntry]], None]


class RevealElement(Protocol):
    """A rendered element whose presentation classes can be toggled."""

    classes: MutableSet[str]


class VisibilityObserver(Protocol):
    def observe(self, element: Any) -> None:
        ...

    def unobserve(self, element: Any) -> None:
        ...

    def disconnect(self) -> None:
        ...


# Given a callback and a threshold, return an observer that reports to it.
ObserverFactory = Callable[[IntersectionCallback, float], VisibilityObserver]


class RevealAnimator:
    """
    Flip one element from hidden to visible the first time it scrolls into view.

    Lifecycle
    - `attach()`: mark the element hidden, then start observing it.
    - first entry for the element that intersects with ratio >= threshold:
      swap classes, mark Visible and stop observing. Never reverts.
    - `dispose()`: disconnect the observer. Safe to call repeatedly and
      before `attach()`. An element that never intersects stays hidden.

    Usable as a context manager: `with animator:` attaches and always disposes.
    """

    def __init__(
        self,
        element: RevealElement,
        observer_factory: ObserverFactory,
        *,
        threshold: float = REVEAL_THRESHOLD,
    ) -> None:
        self._element = element
        self._observer_factory = observer_factory
        self._threshold = threshold
        self._observer: Optional[VisibilityObserver] = None
        self.state: Observable[RevealPhase] = Observable(RevealPhase.HIDDEN)

    @property
    def element(self) -> RevealElement:
        return self._element

    @property
    def is_visible(self) -> bool:
        return self.state.value is RevealPhase.VISIBLE

    @property
    def observing(self) -> bool:
        return self._observer is not None

    def attach(self) -> None:
        if self._observer is not None or self.is_visible:
            return
        # Hidden class goes on before observation so the element never flashes.
        self._element.classes.add(HIDDEN_CLASS)
        self._observer = self._observer_factory(self._on_entries, self._threshold)
        self._observer.observe(self._element)

    def dispose(self) -> None:
        if self._observer is not None:
            self._observer.disconnect()
            self._observer = None

    def __enter__(self) -> "RevealAnimator":
        self.attach()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.dispose()

    # --------------- Internal ---------------
    def _on_entries(self, entries: Sequence[IntersectionEntry]) -> None:
        observer = self._observer
        if observer is None or self.is_visible:
            return
        for entry in entries:
            if entry.target is not self._element:
                continue
            if entry.is_intersecting and entry.intersection_ratio >= self._threshold:
                self._element.classes.add(VISIBLE_CLASS)
                self._element.classes.discard(HIDDEN_CLASS)
                self.state.set(RevealPhase.VISIBLE)
                observer.unobserve(self._element)
                logger.debug("Revealed element %r", self._element)
                break


__all__ = [
    "HIDDEN_CLASS",
    "IntersectionEntry",
    "ObserverFactory",
    "REVEAL_THRESHOLD",
    "RevealAnimator",
    "RevealElement",
    "VISIBLE_CLASS",
    "VisibilityObserver",
]
