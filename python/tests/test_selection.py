"""Selection gesture tests over hand-built grids."""

from __future__ import annotations

import pytest

from backend.engine.gamestate import SelectionState, line_between
from backend.models.grid import Grid, Point, WordEntry

ROWS = [
    "CATXX",
    "XOXXX",
    "XXGXX",
    "DOGXX",
    "XXXXX",
]


# -- helpers ------------------------------------------------------------------


def _state(*words: str) -> SelectionState:
    return SelectionState(Grid.from_rows(ROWS), [WordEntry(w) for w in words])


def _select(state: SelectionState, start: tuple[int, int], end: tuple[int, int]) -> WordEntry | None:
    assert state.begin(*start)
    state.extend(*end)
    return state.commit()


# -- line geometry ------------------------------------------------------------


@pytest.mark.parametrize(
    "end, expected",
    [
        ((3, 1), [(1, 1), (2, 1), (3, 1)]),
        ((1, 3), [(1, 1), (1, 2), (1, 3)]),
        ((3, 3), [(1, 1), (2, 2), (3, 3)]),
        ((0, 0), [(1, 1), (0, 0)]),
        ((0, 1), [(1, 1), (0, 1)]),
        ((1, 1), [(1, 1)]),
    ],
)
def test_line_between_straight_lines(end: tuple[int, int], expected: list[tuple[int, int]]) -> None:
    assert line_between(Point(1, 1), Point(*end)) == [Point(*p) for p in expected]


@pytest.mark.parametrize("end", [(2, 3), (3, 2), (4, 2)])
def test_line_between_rejects_other_shapes(end: tuple[int, int]) -> None:
    assert line_between(Point(1, 1), Point(*end)) is None


# -- transitions --------------------------------------------------------------


def test_begin_sets_anchor_and_path() -> None:
    state = _state("CAT")
    assert state.begin(2, 0)
    assert state.active
    assert state.anchor == Point(2, 0)
    assert state.path == [Point(2, 0)]


def test_begin_outside_grid_is_ignored() -> None:
    state = _state("CAT")
    assert not state.begin(5, 0)
    assert not state.active


def test_extend_without_begin_is_ignored() -> None:
    state = _state("CAT")
    assert not state.extend(2, 0)
    assert state.path == []


def test_non_straight_extension_keeps_previous_path() -> None:
    state = _state("CAT")
    state.begin(0, 0)
    assert state.extend(2, 0)
    before = list(state.path)
    assert not state.extend(2, 1)
    assert state.path == before


def test_extension_recomputes_path_from_anchor() -> None:
    state = _state("CAT")
    state.begin(0, 0)
    state.extend(3, 0)
    state.extend(0, 2)
    assert state.path == [Point(0, 0), Point(0, 1), Point(0, 2)]
    assert state.is_selected(0, 1)
    assert not state.is_selected(1, 0)


def test_commit_marks_word_and_cells_found() -> None:
    state = _state("CAT", "DOG")
    entry = _select(state, (0, 0), (2, 0))

    assert entry is not None and entry.word == "CAT"
    assert entry.found
    assert all(state.grid.cell(x, 0).found for x in range(3))
    assert not state.grid.cell(3, 0).found
    assert not state.words[1].found
    assert not state.active and state.path == [] and state.anchor is None


def test_commit_matches_reverse_selection() -> None:
    forward = _state("DOG")
    backward = _state("DOG")
    a = _select(forward, (0, 3), (2, 3))
    b = _select(backward, (2, 3), (0, 3))
    assert a is not None and b is not None
    assert a.word == b.word == "DOG"
    assert [c.found for c in forward.grid.cells[3]] == [c.found for c in backward.grid.cells[3]]


def test_commit_diagonal_word() -> None:
    # C(0,0) O(1,1) G(2,2)
    state = _state("COG")
    entry = _select(state, (2, 2), (0, 0))
    assert entry is not None and entry.word == "COG"


def test_wrong_selection_clears_without_side_effects() -> None:
    state = _state("CAT")
    assert _select(state, (0, 0), (0, 2)) is None
    assert not state.words[0].found
    assert not any(c.found for row in state.grid.cells for c in row)
    assert not state.active


def test_commit_without_gesture_returns_none() -> None:
    state = _state("CAT")
    assert state.commit() is None


def test_found_word_cannot_be_matched_twice() -> None:
    state = _state("CAT")
    _select(state, (0, 0), (2, 0))
    found_before = [[c.found for c in row] for row in state.grid.cells]

    assert _select(state, (0, 0), (2, 0)) is None
    assert [[c.found for c in row] for row in state.grid.cells] == found_before
    assert state.words[0].found


def test_duplicate_words_are_matched_independently() -> None:
    state = _state("CAT", "CAT")
    first = _select(state, (0, 0), (2, 0))
    assert first is state.words[0]
    assert not state.all_found
    second = _select(state, (2, 0), (0, 0))
    assert second is state.words[1]
    assert state.all_found
