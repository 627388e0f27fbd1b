"""Rich terminal frontend — playable word search board.

Uses the ``rich`` library for the grid, word list, and results panels.
Keyboard gestures are translated into the same press / enter / release
calls a pointer would make: Space anchors the selection at the cursor,
moving the cursor drags it, and Space again commits.
"""

from __future__ import annotations

import random
import time

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameclock import Scheduler, format_remaining
from backend.engine.gameplay import GameSession, Outcome
from backend.models.leaderboard import MatchStore, Standings, standings
from config import GameConfig
from frontend.cli.input_handler import get_key, get_key_timeout

console = Console()

_MOVES = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


# -- rendering ----------------------------------------------------------------


def _render_grid(session: GameSession, cursor: tuple[int, int]) -> Table:
    """Return a Rich Table representing the letter grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 0),
    )
    grid = session.grid
    for _ in range(grid.size):
        table.add_column(width=3, justify="center")

    for y, row in enumerate(grid.cells):
        cells: list[str] = []
        for x, cell in enumerate(row):
            if cell.found:
                style = "bold white on green"
            elif session.is_cell_selected(x, y):
                style = "bold white on blue"
            else:
                style = "white"
            if (x, y) == cursor:
                style += " reverse"
            cells.append(f"[{style}] {cell.letter} [/{style}]")
        table.add_row(*cells)

    return table


def _render_words(session: GameSession) -> Panel:
    lines = Text()
    for entry in session.words:
        if entry.found:
            lines.append(f"✓ {entry.word}\n", style="green strike dim")
        else:
            lines.append(f"  {entry.word}\n", style="bold white")
    lines.append(f"\n{session.words_found} / {session.words_total} found", style="dim")
    return Panel(lines, title="[bold yellow]Words[/bold yellow]", border_style="yellow")


def _draw_game(session: GameSession, cursor: tuple[int, int], status: str = "") -> None:
    console.clear()

    left = session.time_left
    clock = Text(
        f" {format_remaining(left)} ",
        style="bold red on #3b0d0d" if left <= 30 else "bold white on #313244",
    )

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Space", style="bold cyan")
    controls.append("  select   ", style="dim")
    controls.append("C", style="bold cyan")
    controls.append("  cancel   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    size = session.grid.size
    panel = Panel(
        Columns([_render_grid(session, cursor), _render_words(session)], padding=(0, 2)),
        title=f"[bold green]Word Search  {size}×{size}[/bold green]",
        subtitle=clock,
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _celebrate() -> None:
    console.print(
        Align.center(Text("\n★ ★ ★  ALL WORDS FOUND  ★ ★ ★\n", style="bold yellow"))
    )


def _render_standings(result: Standings, player: str) -> Table:
    table = Table(
        title="Top 5",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Player")
    table.add_column("Score", justify="right", style="yellow")
    for i, p in enumerate(result.top, 1):
        name_style = "bold blue" if p.name == player else ""
        table.add_row(str(i), Text(p.name, style=name_style), str(p.score))
    return table


def _draw_results(session: GameSession) -> None:
    console.clear()

    if session.outcome == Outcome.WON:
        headline = Text("Puzzle complete! You found every word.", style="bold green")
        border = "bold green"
    elif session.outcome == Outcome.LOST:
        headline = Text("Time's up!", style="bold red")
        border = "bold red"
    else:
        headline = Text("You already finished this round.", style="bold cyan")
        border = "cyan"

    result = session.standings
    own = Text()
    own.append("Your score: ", style="dim")
    own.append(str(result.own_score if result else session.score or 0), style="bold yellow")

    parts = [Align.center(headline), Text(""), Align.center(own), Text("")]
    if result is not None:
        parts.append(Align.center(_render_standings(result, session.player)))

    console.print()
    console.print(Align.center(Panel(Group(*parts), title="[bold]RESULTS[/bold]", border_style=border, padding=(1, 4))))
    console.print(Align.center(Text("\n  Press any key to exit.\n", style="dim")))
    get_key()


def draw_scores(store: MatchStore, player: str = "") -> None:
    """Print the leaderboard of the match in *store*."""
    match = store.match
    if match is None or not match.players:
        console.print(Align.center(Text("  No scores yet.", style="dim")))
        return
    console.print(Align.center(_render_standings(standings(match.players, player), player)))


# -- game loop ----------------------------------------------------------------


def _play(session: GameSession, scheduler: Scheduler) -> None:
    cursor = (0, 0)
    status = ""

    while not (session.finished and session.reported):
        _draw_game(session, cursor, status)
        status = ""

        # Gestures are applied before due timers so a winning commit and an
        # expiring tick in the same pass resolve as a win.
        key = get_key_timeout(0.25)
        if key == "quit":
            session.dispose()
            return
        if key in _MOVES:
            dx, dy = _MOVES[key]
            size = session.grid.size
            cursor = (min(size - 1, max(0, cursor[0] + dx)), min(size - 1, max(0, cursor[1] + dy)))
            if session.selection.active:
                session.enter(*cursor)
        elif key == "select":
            if session.selection.active:
                entry = session.release()
                status = f"[green]Found {entry.word}![/green]" if entry else "[dim]No match.[/dim]"
            else:
                session.press(*cursor)
        elif key == "cancel":
            session.selection.reset()

        scheduler.run_pending()

        if session.finished and not session.reported:
            _draw_game(session, cursor, "")
            if session.is_won:
                _celebrate()
            while not session.reported:
                time.sleep(0.1)
                scheduler.run_pending()

    _draw_results(session)


# -- public entry point -------------------------------------------------------


def run(
    store: MatchStore,
    player: str,
    config: GameConfig | None = None,
    seed: int | None = None,
) -> None:
    """Play one round as *player*, starting a new match when *config* is given."""
    if config is not None or store.match is None:
        config = config or GameConfig()
        store.start(config.to_dict(), start_time=time.time())
    store.join(player)
    match = store.match

    scheduler = Scheduler()
    session = GameSession(
        GameConfig.from_dict(match.config),
        player=player,
        start_time=match.start_time,
        players=match.players,
        scheduler=scheduler,
        rng=random.Random(seed),
        celebrate=console.bell,
    )

    def report(score: int) -> None:
        store.submit_score(player, score, str(session.outcome))
        session.players = store.match.players

    session.on_finish = report
    try:
        _play(session, scheduler)
    finally:
        session.dispose()
