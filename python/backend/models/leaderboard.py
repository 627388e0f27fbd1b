"""Match players, standings, and match persistence."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Iterable


@dataclass
class PlayerRecord:
    name: str
    score: int = 0
    finished: bool = False
    # "WON" / "LOST" once known; older match data only carries ``finished``.
    outcome: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlayerRecord:
        return cls(
            name=str(data["name"]),
            score=int(data.get("score") or 0),
            finished=bool(data.get("finished", False)),
            outcome=data.get("outcome"),
        )


@dataclass
class Standings:
    top: list[PlayerRecord]
    own_score: int


def standings(
    players: Iterable[PlayerRecord], player_name: str, limit: int = 5
) -> Standings:
    """Top *limit* players by descending score plus *player_name*'s own score.

    ``sorted`` is stable, so players with equal scores keep their original
    order. The own score is looked up by name whether or not the player
    made the top list, and is 0 when the player is unknown.
    """
    players = list(players)
    top = sorted(players, key=lambda p: p.score, reverse=True)[:limit]
    own = next((p.score for p in players if p.name == player_name), 0)
    return Standings(top=top, own_score=own)


@dataclass
class Match:
    """One round of the game as the session collaborator sees it."""

    config: dict[str, Any]
    start_time: float | None = None
    players: list[PlayerRecord] = field(default_factory=list)

    def find_player(self, name: str) -> PlayerRecord | None:
        return next((p for p in self.players if p.name == name), None)


class MatchStore:
    """Loads and saves a single match from a JSON file."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self.match: Match | None = None
        self._load()

    @classmethod
    def load(cls, filepath: Path) -> MatchStore:
        if not filepath.exists():
            raise FileNotFoundError(f"Match file not found: {filepath}")
        return cls(filepath)

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if self.filepath.exists():
            data = json.loads(self.filepath.read_text())
            self.match = Match(
                config=data.get("config", {}),
                start_time=data.get("startTime"),
                players=[PlayerRecord.from_dict(p) for p in data.get("players", [])],
            )

    def save(self) -> None:
        if self.match is None:
            return
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "config": self.match.config,
            "startTime": self.match.start_time,
            "players": [asdict(p) for p in self.match.players],
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- updates --------------------------------------------------------------

    def start(self, config: dict[str, Any], start_time: float) -> Match:
        """Begin a fresh match, dropping any players of a previous one."""
        self.match = Match(config=config, start_time=start_time)
        self.save()
        return self.match

    def refresh(self) -> None:
        """Re-read the file so changes saved by other players are kept."""
        self._load()

    def join(self, name: str) -> PlayerRecord:
        self.refresh()
        if self.match is None:
            raise RuntimeError("No match has been started.")
        player = self.match.find_player(name)
        if player is None:
            player = PlayerRecord(name=name)
            self.match.players.append(player)
            self.save()
        return player

    def submit_score(self, name: str, score: int, outcome: str | None = None) -> None:
        player = self.join(name)  # refreshes first
        player.score = score
        player.finished = True
        player.outcome = outcome
        self.save()
