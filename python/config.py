import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class Config:
    # Puzzle defaults used when the editor payload omits a value
    DEFAULT_TIME_LIMIT_SEC = int(os.environ.get("DEFAULT_TIME_LIMIT_SEC", "300"))
    DEFAULT_GRID_SIZE = int(os.environ.get("DEFAULT_GRID_SIZE", "15"))
    # Random placements tried per word before it is skipped
    MAX_PLACEMENT_ATTEMPTS = int(os.environ.get("MAX_PLACEMENT_ATTEMPTS", "100"))
    # Clock reconciliation cadence (seconds)
    TICK_INTERVAL_SEC = float(os.environ.get("TICK_INTERVAL_SEC", "1"))
    # Hold between a win and the finish callback (seconds)
    WIN_FINISH_DELAY_SEC = float(os.environ.get("WIN_FINISH_DELAY_SEC", "2"))
    LEADERBOARD_SIZE = int(os.environ.get("LEADERBOARD_SIZE", "5"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING")
    DATA_DIR = Path(os.environ.get("DATA_DIR") or Path(__file__).resolve().parent.parent / "data")


_NON_LETTERS = re.compile(r"[^A-Z]")


def normalize_word(word: str) -> str:
    """Uppercase *word* and strip everything but A-Z."""
    return _NON_LETTERS.sub("", word.upper())


def validate_word(word: str, grid_size: int) -> bool:
    """Editor acceptance rule: non-empty and no longer than the grid side."""
    word = normalize_word(word)
    return 0 < len(word) <= grid_size


@dataclass
class GameConfig:
    """A word search puzzle definition as authored in the editor."""

    words: list[str] = field(default_factory=list)
    grid_size: int = Config.DEFAULT_GRID_SIZE
    time_limit: int = Config.DEFAULT_TIME_LIMIT_SEC

    def __post_init__(self) -> None:
        if isinstance(self.grid_size, bool) or not isinstance(self.grid_size, int) or self.grid_size <= 0:
            raise ValueError(f"gridSize must be a positive integer, got {self.grid_size!r}")
        if isinstance(self.time_limit, bool) or not isinstance(self.time_limit, int) or self.time_limit <= 0:
            raise ValueError(f"timeLimit must be a positive integer, got {self.time_limit!r}")
        self.words = [w for w in (normalize_word(w) for w in self.words) if w]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameConfig":
        """Build from the editor's camelCase payload (``words``, ``gridSize``, ``timeLimit``)."""
        return cls(
            words=list(data.get("words") or []),
            grid_size=data.get("gridSize") or Config.DEFAULT_GRID_SIZE,
            time_limit=data.get("timeLimit") or Config.DEFAULT_TIME_LIMIT_SEC,
        )

    def to_dict(self) -> dict[str, Any]:
        return {"words": list(self.words), "gridSize": self.grid_size, "timeLimit": self.time_limit}
