from backend.models.grid import Cell, Direction, Grid, Placement, Point, WordEntry
from backend.models.leaderboard import Match, MatchStore, PlayerRecord, Standings, standings

__all__ = [
    "Cell",
    "Direction",
    "Grid",
    "Match",
    "MatchStore",
    "Placement",
    "PlayerRecord",
    "Point",
    "Standings",
    "WordEntry",
    "standings",
]
