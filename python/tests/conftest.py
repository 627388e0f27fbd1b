"""Shared fixtures: a controllable wall clock and seeded randomness."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameclock import Scheduler

START = 1_700_000_000.0


class FakeClock:
    """Stands in for ``time.time``; only moves when told to."""

    def __init__(self, t: float = START) -> None:
        self.t = t

    def __call__(self) -> float:
        return self.t

    def advance(self, seconds: float) -> None:
        self.t += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> Scheduler:
    return Scheduler(now=clock)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
