"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessrules.core.move import Move
from chessrules.game.state import GameState

Play = Callable[..., GameState]


def play_moves(state: GameState, *moves: str) -> GameState:
    """Apply long-algebraic moves (``'e2e4'``, ``'a7a8q'``) in order."""
    for text in moves:
        state.apply_move(Move.parse(text))
    return state


@pytest.fixture
def game() -> GameState:
    """A fresh game from the standard starting position."""
    return GameState()


@pytest.fixture
def play() -> Play:
    return play_moves
