"""Cooperative, cancellable timers driven by the caller's event loop."""

from __future__ import annotations

import itertools
import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class TimerHandle:
    """A scheduled callback. ``cancel()`` may be called any number of times."""

    def __init__(
        self,
        scheduler: Scheduler,
        due: float,
        callback: Callable[[], None],
        interval: float | None = None,
    ) -> None:
        self._scheduler = scheduler
        self.due = due
        self.callback = callback
        self.interval = interval
        self.cancelled = False
        self.seq = 0

    def cancel(self) -> None:
        if not self.cancelled:
            self.cancelled = True
            self._scheduler._discard(self)


class Scheduler:
    """Timer queue with no thread of its own.

    Nothing fires until ``run_pending()`` is called; frontends call it from
    their input loop and tests call it after advancing a fake clock.
    """

    def __init__(self, now: Callable[[], float] = time.time) -> None:
        self.now = now
        self._timers: list[TimerHandle] = []
        self._order = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return self._add(TimerHandle(self, self.now() + delay, callback))

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        return self._add(TimerHandle(self, self.now() + interval, callback, interval))

    def run_pending(self) -> int:
        """Fire every callback whose due time has passed; return how many ran.

        Callbacks run in due-time order (ties in scheduling order). A
        repeating timer that fell several intervals behind fires once per
        missed interval.
        """
        fired = 0
        while True:
            now = self.now()
            due = [t for t in self._timers if t.due <= now]
            if not due:
                return fired
            timer = min(due, key=lambda t: (t.due, t.seq))
            if timer.interval is None:
                self._discard(timer)
            else:
                timer.due += timer.interval
            timer.callback()
            fired += 1

    @property
    def pending(self) -> int:
        return len(self._timers)

    # -- helpers --------------------------------------------------------------

    def _add(self, timer: TimerHandle) -> TimerHandle:
        self._timers.append(timer)
        timer.seq = next(self._order)
        logger.debug("scheduled %s at %.3f", getattr(timer.callback, "__name__", timer.callback), timer.due)
        return timer

    def _discard(self, timer: TimerHandle) -> None:
        if timer in self._timers:
            self._timers.remove(timer)
