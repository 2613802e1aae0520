from __future__ import annotations

import logging
from typing import Optional

from viewstate.models import HeroTypingState
from viewstate.observable import Observable

from .scheduler import Scheduler, TickHandle


DEFAULT_TYPING_INTERVAL = 0.05  # seconds per character

logger = logging.getLogger(__name__)


class HeroTypingEffect:
    """
    Reveal `full_text` one character per tick.

    Notes
    - At most one schedule is active: `start()` cancels any previous one and
      restarts from an empty prefix.
    - The schedule cancels itself once the whole text is shown.
    - Ticks from a cancelled or replaced schedule are ignored, so a late
      timer after `dispose()` never mutates state.
    """

    def __init__(
        self,
        full_text: str,
        scheduler: Scheduler,
        *,
        interval: float = DEFAULT_TYPING_INTERVAL,
    ) -> None:
        self._full_text = full_text
        self._scheduler = scheduler
        self._interval = interval
        self._handle: Optional[TickHandle] = None
        self._run: Optional[object] = None
        self.state: Observable[HeroTypingState] = Observable(HeroTypingState(full_text))

    @property
    def full_text(self) -> str:
        return self._full_text

    @property
    def displayed_text(self) -> str:
        return self.state.value.displayed_text

    @property
    def running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        self.stop()
        self.state.set(HeroTypingState(self._full_text))
        if not self._full_text:
            return
        run = object()
        self._run = run
        self._handle = self._scheduler.every(self._interval, lambda: self._tick(run))
        logger.debug("Hero typing started (%d chars)", len(self._full_text))

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
        self._handle = None
        self._run = None

    def dispose(self) -> None:
        self.stop()

    def _tick(self, run: object) -> None:
        if run is not self._run:
            return
        current = self.state.value
        if not current.is_complete:
            current = current.advance()
            self.state.set(current)
        if current.is_complete:
            logger.debug("Hero typing finished")
            self.stop()


__all__ = ["DEFAULT_TYPING_INTERVAL", "HeroTypingEffect"]
