#!/usr/bin/env python3
"""Timed Word Search.

Usage::

    python main.py -p ana -w cat,dog,bird      # start a new match and play it
    python main.py -p luis                     # join the match in progress
    python main.py -s 12 -t 120 -w lion,tiger  # 12×12 grid, two minutes
    python main.py --scores                    # view the match leaderboard
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import Config, GameConfig, normalize_word, validate_word  # noqa: E402


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    player: str = typer.Option(
        "player", "-p", "--player",
        help="Your name on the leaderboard.",
    ),
    words: Optional[str] = typer.Option(
        None, "-w", "--words",
        help="Comma-separated word list. Starts a new match.",
    ),
    size: int = typer.Option(
        Config.DEFAULT_GRID_SIZE, "-s", "--size",
        min=1,
        help="Grid size (the editor offers 10-20).",
    ),
    time_limit: int = typer.Option(
        Config.DEFAULT_TIME_LIMIT_SEC, "-t", "--time-limit",
        min=1,
        help="Seconds to find every word.",
    ),
    match_file: Path = typer.Option(
        Config.DATA_DIR / "match.json", "-m", "--match",
        help="Match file shared by every player of the round.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for grid generation.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show the match leaderboard and exit.",
    ),
    log_level: str = typer.Option(
        Config.LOG_LEVEL, "--log-level",
        help="Logging level.",
    ),
) -> None:
    """Timed Word Search."""
    _setup_logging(log_level)

    from backend.models.leaderboard import MatchStore
    from frontend.cli.rich import app as rich_app

    if scores:
        try:
            store = MatchStore.load(match_file)
        except FileNotFoundError:
            typer.echo("No scores yet.")
            return
        rich_app.draw_scores(store, player)
        return

    store = MatchStore(match_file)

    config = None
    if words is not None:
        word_list = [w for w in words.split(",") if w.strip()]
        rejected = [w.strip() for w in word_list if not validate_word(w, size)]
        if rejected:
            names = ", ".join(normalize_word(w) or w for w in rejected)
            raise typer.BadParameter(
                f"Words must be 1-{size} letters long: {names}",
                param_hint="--words",
            )
        try:
            config = GameConfig(
                words=word_list,
                grid_size=size,
                time_limit=time_limit,
            )
        except ValueError as exc:
            raise typer.BadParameter(str(exc)) from exc
    elif store.match is None:
        raise typer.BadParameter("No match in progress; pass --words to start one.")

    rich_app.run(store, player, config=config, seed=seed)


if __name__ == "__main__":
    app()
