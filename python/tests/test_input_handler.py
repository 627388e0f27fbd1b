"""Keypress decoding tests."""

from __future__ import annotations

import pytest

from frontend.cli.input_handler import _decode, resolve


def _reader(*chars: str):
    pending = list(chars)
    return lambda: pending.pop(0) if pending else ""


@pytest.mark.parametrize(
    "ch, action",
    [("w", "up"), ("S", "down"), (" ", "select"), ("\r", "select"), ("c", "cancel"), ("Q", "quit"), ("x", "")],
)
def test_resolve(ch: str, action: str) -> None:
    assert resolve(ch) == action


@pytest.mark.parametrize("final, action", [("A", "up"), ("B", "down"), ("C", "right"), ("D", "left")])
def test_ansi_arrow_sequences(final: str, action: str) -> None:
    assert _decode("\x1b", _reader("[", final)) == action


def test_bare_escape_cancels() -> None:
    assert _decode("\x1b", _reader()) == "cancel"


@pytest.mark.parametrize("prefix", ["\x00", "\xe0"])
def test_windows_arrow_prefix(prefix: str) -> None:
    assert _decode(prefix, _reader("K")) == "left"
