"""Grid model for the word search game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, NamedTuple


class Point(NamedTuple):
    x: int
    y: int


class Direction(Enum):
    """Directions a word may be written in (always forward)."""

    RIGHT = (1, 0)
    DOWN = (0, 1)
    DOWN_RIGHT = (1, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


@dataclass
class Cell:
    x: int
    y: int
    letter: str = ""
    found: bool = False


@dataclass
class WordEntry:
    word: str
    found: bool = False


@dataclass(frozen=True)
class Placement:
    """Where a word's letters were written into the grid."""

    word: str
    start: Point
    direction: Direction

    @property
    def end(self) -> Point:
        n = len(self.word) - 1
        return Point(
            self.start.x + n * self.direction.dx,
            self.start.y + n * self.direction.dy,
        )

    def cells(self) -> list[Point]:
        return [
            Point(self.start.x + i * self.direction.dx, self.start.y + i * self.direction.dy)
            for i in range(len(self.word))
        ]


@dataclass
class Grid:
    """Square matrix of letter cells.

    Cells are stored row-major, so ``cells[y][x]`` is column *x* of row *y*.
    """

    size: int
    cells: list[list[Cell]] = field(default_factory=list)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def empty(cls, size: int) -> Grid:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}.")
        cells = [[Cell(x=x, y=y) for x in range(size)] for y in range(size)]
        return cls(size=size, cells=cells)

    @classmethod
    def from_rows(cls, rows: list[str]) -> Grid:
        """Create a grid from a list of equal-length letter rows.

        Example::

            Grid.from_rows(["CAT", "XOX", "DOG"])
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError(f"Expected {size} letters in every row of a {size}×{size} grid.")
        grid = cls.empty(size)
        for y, row in enumerate(rows):
            for x, letter in enumerate(row):
                grid.cells[y][x].letter = letter.upper()
        return grid

    # -- queries --------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def letter(self, x: int, y: int) -> str:
        return self.cells[y][x].letter

    def word_at(self, path: Iterable[Point]) -> str:
        """Return the letters along *path*, in order."""
        return "".join(self.cells[p.y][p.x].letter for p in path)

    def rows(self) -> list[str]:
        return ["".join(c.letter or "." for c in row) for row in self.cells]
