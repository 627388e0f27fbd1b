"""Generates word search grids."""

from __future__ import annotations

import logging
import random
import string
from dataclasses import dataclass, field

from backend.models.grid import Direction, Grid, Placement, Point
from config import Config, normalize_word

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase


@dataclass
class GenerationResult:
    grid: Grid
    placements: list[Placement] = field(default_factory=list)
    unplaced: list[str] = field(default_factory=list)

    @property
    def placed_ratio(self) -> float:
        total = len(self.placements) + len(self.unplaced)
        return len(self.placements) / total if total else 1.0

    def placement_for(self, word: str) -> Placement | None:
        return next((p for p in self.placements if p.word == word), None)


class GridGenerator:
    """Places words at random and fills the rest with random letters."""

    @staticmethod
    def generate(
        words: list[str],
        size: int,
        rng: random.Random | None = None,
        max_attempts: int = Config.MAX_PLACEMENT_ATTEMPTS,
    ) -> GenerationResult:
        """Return a full grid containing as many of *words* as could be placed.

        A word that still has no spot after *max_attempts* random tries is
        skipped and reported in ``unplaced``; generation itself never fails.
        """
        rng = rng or random.Random()
        grid = Grid.empty(size)
        result = GenerationResult(grid=grid)

        for raw in words:
            word = normalize_word(raw)
            if not word:
                continue
            placement = GridGenerator.place(grid, word, rng, max_attempts)
            if placement is None:
                logger.warning(
                    "could not place %r in a %dx%d grid after %d attempts",
                    word, size, size, max_attempts,
                )
                result.unplaced.append(word)
            else:
                result.placements.append(placement)

        GridGenerator.fill(grid, rng)
        logger.debug("generated %dx%d grid:\n%s", size, size, "\n".join(grid.rows()))
        return result

    @staticmethod
    def place(
        grid: Grid, word: str, rng: random.Random, max_attempts: int
    ) -> Placement | None:
        """Try random spots for *word*; write it and return where, or ``None``."""
        directions = list(Direction)
        for _ in range(max_attempts):
            direction = rng.choice(directions)
            start = Point(rng.randrange(grid.size), rng.randrange(grid.size))
            candidate = Placement(word=word, start=start, direction=direction)
            if GridGenerator.fits(grid, candidate):
                for point, letter in zip(candidate.cells(), word):
                    grid.cell(point.x, point.y).letter = letter
                return candidate
        return None

    @staticmethod
    def fits(grid: Grid, placement: Placement) -> bool:
        """True if *placement* stays on the grid and only crosses matching letters."""
        end = placement.end
        if not grid.in_bounds(end.x, end.y):
            return False
        for point, letter in zip(placement.cells(), placement.word):
            existing = grid.letter(point.x, point.y)
            if existing and existing != letter:
                return False
        return True

    @staticmethod
    def fill(grid: Grid, rng: random.Random) -> None:
        """Fill every empty cell with a uniformly random letter."""
        for row in grid.cells:
            for cell in row:
                if not cell.letter:
                    cell.letter = rng.choice(ALPHABET)
