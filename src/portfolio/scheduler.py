from __future__ import annotations

import asyncio
import logging
from typing import Callable, Optional, Protocol


logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class TickHandle(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def every(self, interval: float, callback: TickCallback) -> TickHandle:
        ...


class RepeatingCall:
    """
    A callback fired every `interval` seconds on an asyncio loop until cancelled.

    - Deadlines are computed from the loop clock (`loop.time()`), so a slow
      callback does not push later ticks back.
    - Ticks missed while the loop was blocked are dropped, not replayed.
    - `cancel()` is idempotent; a tick that was already queued when
      cancelled does not run.
    - A failing callback is logged and the schedule keeps going.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: TickCallback,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        self._deadline = loop.time()
        self._timer: Optional[asyncio.TimerHandle] = None
        self._schedule_next()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule_next(self) -> None:
        nxt = self._deadline + self._interval
        now = self._loop.time()
        if nxt <= now:
            nxt = now + self._interval
        self._deadline = nxt
        self._timer = self._loop.call_at(self._deadline, self._fire)

    def _fire(self) -> None:
        if self._cancelled:
            return
        # Re-arm before running so the callback can cancel its own schedule.
        self._schedule_next()
        try:
            self._callback()
        except Exception:
            logger.exception("Scheduled callback failed")


class AsyncioScheduler:
    """Timer collaborator backed by the asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def every(self, interval: float, callback: TickCallback) -> RepeatingCall:
        loop = self._loop or asyncio.get_running_loop()
        return RepeatingCall(loop, interval, callback)


__all__ = [
    "AsyncioScheduler",
    "RepeatingCall",
    "Scheduler",
    "TickCallback",
    "TickHandle",
]
