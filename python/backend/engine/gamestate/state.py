"""Tracks the player's in-progress selection gesture."""

from __future__ import annotations

import logging

from backend.models.grid import Grid, Point, WordEntry

logger = logging.getLogger(__name__)


def line_between(start: Point, end: Point) -> list[Point] | None:
    """Cells from *start* to *end* inclusive, or ``None`` if not a straight line.

    Horizontal, vertical, and 45-degree diagonal lines are accepted in
    either direction.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    if dx != 0 and dy != 0 and abs(dx) != abs(dy):
        return None
    steps = max(abs(dx), abs(dy))
    sx = (dx > 0) - (dx < 0)
    sy = (dy > 0) - (dy < 0)
    return [Point(start.x + i * sx, start.y + i * sy) for i in range(steps + 1)]


class SelectionState:
    """One pointer gesture, from press to release.

    ``IDLE`` while ``active`` is False; ``SELECTING`` while True.
    """

    def __init__(self, grid: Grid, words: list[WordEntry]) -> None:
        self.grid = grid
        self.words = words
        self.anchor: Point | None = None
        self.path: list[Point] = []
        self.active: bool = False

    # -- transitions ----------------------------------------------------------

    def begin(self, x: int, y: int) -> bool:
        if not self.grid.in_bounds(x, y):
            return False
        self.anchor = Point(x, y)
        self.path = [self.anchor]
        self.active = True
        return True

    def extend(self, x: int, y: int) -> bool:
        """Redraw the path from the anchor to (x, y) if that is a straight line."""
        if not self.active or self.anchor is None or not self.grid.in_bounds(x, y):
            return False
        line = line_between(self.anchor, Point(x, y))
        if line is None:
            logger.debug("rejected non-straight extension %s -> (%d, %d)", self.anchor, x, y)
            return False
        self.path = line
        return True

    def commit(self) -> WordEntry | None:
        """Finish the gesture and return the word it matched, if any.

        The first unfound entry equal to the selected letters, read either
        way, is marked found along with every selected cell. The gesture is
        cleared whether or not anything matched.
        """
        if not self.active:
            return None

        candidate = self.grid.word_at(self.path)
        reversed_candidate = candidate[::-1]
        match = next(
            (
                entry
                for entry in self.words
                if not entry.found and entry.word in (candidate, reversed_candidate)
            ),
            None,
        )
        if match is not None:
            match.found = True
            for point in self.path:
                self.grid.cell(point.x, point.y).found = True

        self.reset()
        return match

    def reset(self) -> None:
        self.anchor = None
        self.path = []
        self.active = False

    # -- queries --------------------------------------------------------------

    def is_selected(self, x: int, y: int) -> bool:
        return Point(x, y) in self.path

    @property
    def all_found(self) -> bool:
        return all(entry.found for entry in self.words)
