"""Countdown derived from an authoritative start time."""

from __future__ import annotations

import math
import time
from datetime import datetime, timezone
from typing import Callable, Union

Timestamp = Union[float, int, str, datetime]

# Epoch seconds stay below this until the year 5138; larger numbers are
# JavaScript millisecond timestamps.
_MILLIS_THRESHOLD = 1e11


def to_epoch_seconds(value: Timestamp) -> float:
    """Normalise a timestamp to seconds since the epoch.

    Accepts epoch seconds, epoch milliseconds (as sent by ``Date.now()``),
    an aware or naive (UTC) ``datetime``, or an ISO 8601 string such as
    ``"2024-05-01T12:00:00Z"``.
    """
    if isinstance(value, bool):
        raise ValueError(f"Not a timestamp: {value!r}")
    if isinstance(value, (int, float)):
        if abs(value) >= _MILLIS_THRESHOLD:
            return value / 1000.0
        return float(value)
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValueError(f"Not an ISO 8601 timestamp: {value!r}") from exc
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.timestamp()
    raise ValueError(f"Not a timestamp: {value!r}")


class CountdownClock:
    """Remaining and elapsed time for a round.

    Every reading is recomputed from the start time rather than counted
    down locally, so a late or skipped tick never makes the countdown drift
    from the shared deadline.
    """

    def __init__(
        self,
        start_time: Timestamp | None,
        time_limit: int,
        now: Callable[[], float] = time.time,
    ) -> None:
        self.start_time = None if start_time is None else to_epoch_seconds(start_time)
        self.time_limit = time_limit
        self.now = now
        self.remaining = time_limit

    @property
    def running(self) -> bool:
        return self.start_time is not None

    def elapsed(self) -> float | None:
        """Seconds since the start time, or ``None`` without one.

        A start time slightly in the future (client clock skew) reads as 0.
        """
        if self.start_time is None:
            return None
        return max(0.0, self.now() - self.start_time)

    def reconcile(self) -> int:
        """Recompute ``remaining`` from the wall clock and return it."""
        elapsed = self.elapsed()
        if elapsed is not None:
            self.remaining = max(0, self.time_limit - math.floor(elapsed))
        return self.remaining

    @property
    def expired(self) -> bool:
        return self.remaining <= 0


def format_remaining(seconds: int) -> str:
    m, s = divmod(max(0, int(seconds)), 60)
    return f"{m}:{s:02d}"
