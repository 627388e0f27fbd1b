"""Core gameplay logic — processes gestures, runs the clock, and ends the round."""

from __future__ import annotations

import logging
import random
from enum import StrEnum
from typing import Callable, Iterable

from backend.engine.gameclock import CountdownClock, Scheduler, TimerHandle
from backend.engine.gameclock.clock import Timestamp
from backend.engine.gamegenerator import GenerationResult, GridGenerator
from backend.engine.gamescoring import Scorer
from backend.engine.gamestate import SelectionState
from backend.models.grid import Grid, WordEntry
from backend.models.leaderboard import PlayerRecord, Standings, standings
from config import Config, GameConfig

logger = logging.getLogger(__name__)


class Outcome(StrEnum):
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"
    # Restored from match data that says "finished" but not how.
    FINISHED = "FINISHED"


class GameSession:
    """Orchestrates a single round for one player.

    All state changes go through ``outcome``: the first path to move it off
    ``PLAYING`` wins, and every later trigger sees a finished session and
    does nothing. ``on_finish`` is therefore called at most once.

    *start_time* is the shared round start: epoch seconds, epoch
    milliseconds, a ``datetime``, or an ISO 8601 string. Without one the
    countdown does not run.
    """

    def __init__(
        self,
        config: GameConfig,
        player: str = "",
        start_time: Timestamp | None = None,
        players: Iterable[PlayerRecord] = (),
        on_finish: Callable[[int], None] | None = None,
        scheduler: Scheduler | None = None,
        rng: random.Random | None = None,
        celebrate: Callable[[], None] | None = None,
    ) -> None:
        generation = GridGenerator.generate(config.words, config.grid_size, rng)
        self._setup(config, generation, player, start_time, players, on_finish, scheduler, celebrate)

    @classmethod
    def from_grid(
        cls,
        grid: Grid,
        words: list[str],
        time_limit: int = Config.DEFAULT_TIME_LIMIT_SEC,
        **kwargs,
    ) -> "GameSession":
        """Create a session over an existing grid instead of generating one."""
        obj = object.__new__(cls)
        config = GameConfig(words=words, grid_size=grid.size, time_limit=time_limit)
        obj._setup(config, GenerationResult(grid=grid), **kwargs)
        return obj

    def _setup(
        self,
        config: GameConfig,
        generation: GenerationResult,
        player: str = "",
        start_time: Timestamp | None = None,
        players: Iterable[PlayerRecord] = (),
        on_finish: Callable[[int], None] | None = None,
        scheduler: Scheduler | None = None,
        celebrate: Callable[[], None] | None = None,
    ) -> None:
        self.config = config
        self.generation = generation
        self.player = player
        self.players = list(players)
        self.on_finish = on_finish
        self.celebrate = celebrate
        self.scheduler = scheduler or Scheduler()

        self.words = [WordEntry(word=w) for w in config.words]
        self.selection = SelectionState(generation.grid, self.words)
        self.clock = CountdownClock(start_time, config.time_limit, now=self.scheduler.now)

        self.outcome = Outcome.PLAYING
        self.score: int | None = None
        self._tick: TimerHandle | None = None
        self._pending_finish: TimerHandle | None = None
        self._finish_sent = False
        self._disposed = False

        record = next((p for p in self.players if p.name == player), None)
        if record is not None and record.finished:
            self._restore(record)
            return

        if not self.clock.running:
            logger.warning("no start time for %r; the countdown will not run", player)
            return
        self.clock.reconcile()
        self._tick = self.scheduler.call_every(Config.TICK_INTERVAL_SEC, self.tick)

    def _restore(self, record: PlayerRecord) -> None:
        if record.outcome in (Outcome.WON, Outcome.LOST):
            self.outcome = Outcome(record.outcome)
        else:
            self.outcome = Outcome.FINISHED
        self.score = record.score
        self._finish_sent = True
        logger.info("restored %r as %s with score %d", record.name, self.outcome, record.score)

    # -- gestures -------------------------------------------------------------

    def press(self, x: int, y: int) -> bool:
        """Start a selection at (x, y). Returns True if the gesture began."""
        if self._closed:
            self.selection.reset()
            return False
        return self.selection.begin(x, y)

    def enter(self, x: int, y: int) -> bool:
        """Drag the selection to (x, y). Returns True if the path changed."""
        if self._closed:
            self.selection.reset()
            return False
        return self.selection.extend(x, y)

    def release(self) -> WordEntry | None:
        """End the selection and return the word it found, if any."""
        if self._closed:
            self.selection.reset()
            return None
        entry = self.selection.commit()
        if entry is not None:
            logger.info("%r found %s (%d/%d)", self.player, entry.word, self.words_found, self.words_total)
            if self.selection.all_found:
                self._win()
        return entry

    # -- clock ----------------------------------------------------------------

    def tick(self) -> None:
        """Reconcile the countdown; lose the round once it reaches zero."""
        if self._closed:
            return
        if self.clock.reconcile() <= 0:
            self._lose()

    # -- lifecycle ------------------------------------------------------------

    def _win(self) -> None:
        if self._closed:
            return
        self.outcome = Outcome.WON
        self._stop_clock()
        self.score = Scorer.score(self.clock.elapsed(), won=True)
        logger.info("%r won with score %d", self.player, self.score)
        if self.celebrate is not None:
            try:
                self.celebrate()
            except Exception:
                logger.exception("celebration effect failed")
        self._pending_finish = self.scheduler.call_later(
            Config.WIN_FINISH_DELAY_SEC, self._send_finish
        )

    def _lose(self) -> None:
        if self._closed:
            return
        self.outcome = Outcome.LOST
        self._stop_clock()
        self.clock.remaining = 0
        self.score = Scorer.score(self.config.time_limit, won=False)
        logger.info("%r ran out of time", self.player)
        self._send_finish()

    def _stop_clock(self) -> None:
        if self._tick is not None:
            self._tick.cancel()
            self._tick = None

    def _send_finish(self) -> None:
        self._pending_finish = None
        if self._finish_sent or self._disposed:
            return
        self._finish_sent = True
        if self.on_finish is not None:
            self.on_finish(self.score or 0)

    def dispose(self) -> None:
        """Cancel every timer and stop accepting input.

        A pending win emission is dropped, not sent, and nothing that happens
        afterwards can reach ``on_finish``.
        """
        self._disposed = True
        self._stop_clock()
        if self._pending_finish is not None:
            self._pending_finish.cancel()
            self._pending_finish = None
            logger.debug("dropped pending finish for %r", self.player)
        self.selection.reset()

    # -- queries --------------------------------------------------------------

    @property
    def finished(self) -> bool:
        return self.outcome != Outcome.PLAYING

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def _closed(self) -> bool:
        return self._disposed or self.finished

    @property
    def reported(self) -> bool:
        """True once the final score has been handed to ``on_finish``."""
        return self._finish_sent

    @property
    def is_won(self) -> bool:
        return self.outcome == Outcome.WON

    @property
    def grid(self) -> Grid:
        return self.generation.grid

    @property
    def time_left(self) -> int:
        return self.clock.remaining

    @property
    def words_found(self) -> int:
        return sum(1 for w in self.words if w.found)

    @property
    def words_total(self) -> int:
        return len(self.words)

    def is_cell_selected(self, x: int, y: int) -> bool:
        return self.selection.is_selected(x, y)

    @property
    def standings(self) -> Standings | None:
        """Top players and own score, available once the round is over."""
        if not self.finished:
            return None
        return standings(self.players, self.player, Config.LEADERBOARD_SIZE)
