"""GameSession — the single object a front end holds for one game.

Wraps a :class:`GameState` and notifies subscribers through plain
callbacks so the UI / tests can react to applied moves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color
from chessrules.core.move import Move
from chessrules.core.policy import DrawPolicy
from chessrules.core.status import GameStatus
from chessrules.core.types import Square
from chessrules.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
StatusCallback = Callable[[GameStatus], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event.

    Handlers run synchronously inside :meth:`GameSession.submit_move` and
    must not submit moves themselves; treat the state they receive as
    read-only.
    """

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Owns one game; independent sessions never share state.

    Methods are synchronous and meant to be called from a single thread.
    """

    __slots__ = ("_state", "events")

    def __init__(
        self, fen: str | None = None, policy: DrawPolicy | None = None
    ) -> None:
        self._state = self._make_state(fen, policy)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    @property
    def board(self) -> Board:
        return self._state.board

    # ── Commands ─────────────────────────────────────────────────────────

    def new_game(
        self, fen: str | None = None, policy: DrawPolicy | None = None
    ) -> None:
        """Discard the current game and start another."""
        self._state = self._make_state(fen, policy or self._state.policy)
        _LOGGER.debug("New game from %s", self._state.start_fen)
        self._emit_status(self._state.status)

    def submit_move(self, move: Move) -> GameState:
        """Apply *move*; raises :class:`InvalidMove` if it is rejected.

        Subscribers are notified after the move is applied and see the
        updated state.
        """
        before = self._state.status
        self._state.apply_move(move)
        record = self._state.history[-1]

        for cb in self.events.on_move:
            cb(record, self._state)
        if self._state.status != before:
            self._emit_status(self._state.status)
        return self._state

    def claim_draw(self) -> GameStatus:
        status = self._state.claim_draw()
        self._emit_status(status)
        return status

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_destinations(self, sq: Square) -> list[Square]:
        return self._state.legal_destinations(sq)

    def legal_moves(self, sq: Square) -> list[Move]:
        return self._state.legal_moves(sq)

    # ── Internals ────────────────────────────────────────────────────────

    @staticmethod
    def _make_state(fen: str | None, policy: DrawPolicy | None) -> GameState:
        if fen is None:
            return GameState(policy=policy)
        return GameState.from_fen(fen, policy)

    def _emit_status(self, status: GameStatus) -> None:
        for cb in self.events.on_status_changed:
            cb(status)
