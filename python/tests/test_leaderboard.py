"""Standings and match persistence tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.models.leaderboard import MatchStore, PlayerRecord, standings


def _players(*pairs: tuple[str, int]) -> list[PlayerRecord]:
    return [PlayerRecord(name, score) for name, score in pairs]


# -- standings ----------------------------------------------------------------


def test_top_five_by_descending_score() -> None:
    players = _players(("a", 1), ("b", 9), ("c", 4), ("d", 7), ("e", 2), ("f", 8), ("g", 3))
    result = standings(players, "a")
    assert [p.name for p in result.top] == ["b", "f", "d", "c", "g"]
    assert result.own_score == 1


def test_ties_keep_original_order() -> None:
    players = _players(("x", 5), ("y", 5), ("z", 5))
    assert [p.name for p in standings(players, "y").top] == ["x", "y", "z"]


def test_unknown_player_scores_zero() -> None:
    result = standings(_players(("a", 10)), "nobody")
    assert result.own_score == 0
    assert len(result.top) == 1


def test_standings_do_not_reorder_input() -> None:
    players = _players(("a", 1), ("b", 2))
    standings(players, "a")
    assert [p.name for p in players] == ["a", "b"]


def test_player_record_from_dict_defaults() -> None:
    record = PlayerRecord.from_dict({"name": "ana"})
    assert record == PlayerRecord("ana", 0, False, None)
    record = PlayerRecord.from_dict({"name": "luis", "score": None, "finished": True, "outcome": "WON"})
    assert record == PlayerRecord("luis", 0, True, "WON")


# -- match store --------------------------------------------------------------


def test_match_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "data" / "match.json"
    store = MatchStore(path)
    assert store.match is None

    store.start({"words": ["CAT"], "gridSize": 10, "timeLimit": 60}, start_time=1234.5)
    store.join("ana")
    store.join("ana")
    store.join("luis")
    store.submit_score("ana", 870, "WON")

    reloaded = MatchStore.load(path)
    match = reloaded.match
    assert match is not None
    assert match.start_time == 1234.5
    assert match.config["gridSize"] == 10
    assert [p.name for p in match.players] == ["ana", "luis"]
    assert match.find_player("ana") == PlayerRecord("ana", 870, True, "WON")
    assert match.find_player("luis").finished is False

    data = json.loads(path.read_text())
    assert data["startTime"] == 1234.5
    assert data["players"][0]["outcome"] == "WON"


def test_players_sharing_a_match_file_keep_each_others_scores(tmp_path: Path) -> None:
    path = tmp_path / "match.json"
    ana = MatchStore(path)
    ana.start({"words": ["CAT"]}, start_time=1.0)
    ana.join("ana")

    luis = MatchStore(path)
    luis.join("luis")

    ana.submit_score("ana", 900, "WON")
    luis.submit_score("luis", 500, "WON")

    scores = {p.name: p.score for p in MatchStore.load(path).match.players}
    assert scores == {"ana": 900, "luis": 500}


def test_starting_a_match_clears_players(tmp_path: Path) -> None:
    store = MatchStore(tmp_path / "match.json")
    store.start({"words": ["CAT"]}, start_time=1.0)
    store.submit_score("ana", 10)
    store.start({"words": ["DOG"]}, start_time=2.0)
    assert store.match.players == []


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        MatchStore.load(tmp_path / "nope.json")


def test_join_needs_a_match(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        MatchStore(tmp_path / "match.json").join("ana")
