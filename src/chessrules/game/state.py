"""Game state manager: turn order, history and terminal-status tracking."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Hashable
from dataclasses import dataclass

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, DrawReason
from chessrules.core.errors import InvalidMove, InvalidMoveReason
from chessrules.core.fen import position_from_fen, position_to_fen
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.policy import DrawPolicy
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.status import GameStatus
from chessrules.core.types import Square
from chessrules.core.validator import MoveValidator

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None
    fen_after: str
    status: GameStatus


class GameState:
    """Authoritative state of one game.

    The position changes only through :meth:`apply_move`; accessors hand out
    copies so callers cannot bypass validation.
    """

    __slots__ = (
        "_position",
        "_policy",
        "_status",
        "_records",
        "_start_fen",
        "_repetitions",
    )

    def __init__(
        self,
        position: Position | None = None,
        policy: DrawPolicy | None = None,
    ) -> None:
        self._position = (
            position.copy() if position is not None else Position.initial()
        )
        self._policy = policy or DrawPolicy.standard()
        self._records: list[MoveRecord] = []
        self._start_fen = position_to_fen(self._position)
        self._repetitions: Counter[Hashable] = Counter([self._position.key()])
        self._status = self._classify()

    @classmethod
    def from_fen(cls, fen: str, policy: DrawPolicy | None = None) -> GameState:
        return cls(position_from_fen(fen), policy)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        """Copy of the current occupancy."""
        return self._position.board.copy()

    @property
    def position(self) -> Position:
        """Copy of the current position."""
        return self._position.copy()

    @property
    def side_to_move(self) -> Color:
        return self._position.side_to_move

    @property
    def castling(self) -> CastlingRights:
        return self._position.castling

    @property
    def en_passant(self) -> Square | None:
        return self._position.en_passant

    @property
    def halfmove_clock(self) -> int:
        return self._position.halfmove_clock

    @property
    def fullmove_number(self) -> int:
        return self._position.fullmove_number

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def policy(self) -> DrawPolicy:
        return self._policy

    @property
    def is_game_over(self) -> bool:
        return self._status.is_terminal

    @property
    def start_fen(self) -> str:
        return self._start_fen

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._records)

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(record.move for record in self._records)

    @property
    def last_move(self) -> Move | None:
        return self._records[-1].move if self._records else None

    @property
    def ply_count(self) -> int:
        return len(self._records)

    @property
    def repetition_count(self) -> int:
        """How many times the current position has occurred in this game."""
        return self._repetitions[self._position.key()]

    @property
    def can_claim_draw(self) -> bool:
        if self.is_game_over:
            return False
        return self._claimable_draw() is not None

    def fen(self) -> str:
        return position_to_fen(self._position)

    def piece_at(self, sq: Square) -> Piece | None:
        return self._position.board[sq]

    def captured_pieces(self, color: Color) -> list[Piece]:
        """Pieces of *color* captured so far, in capture order."""
        return [
            record.captured
            for record in self._records
            if record.captured is not None and record.captured.color == color
        ]

    # ── Legal moves ──────────────────────────────────────────────────────

    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq* (none once the game is over)."""
        if self.is_game_over:
            return []
        return MoveValidator(self._position).legal_moves(sq)

    def legal_destinations(self, sq: Square) -> list[Square]:
        """Distinct destination squares for highlighting."""
        return list(dict.fromkeys(move.to_sq for move in self.legal_moves(sq)))

    def legal_moves_for_side_to_move(self) -> dict[Square, list[Move]]:
        if self.is_game_over:
            return {}
        return MoveValidator(self._position).all_legal_moves()

    def is_legal(self, move: Move) -> bool:
        if self.is_game_over:
            return False
        return MoveValidator(self._position).is_legal(move)

    # ── Commands ─────────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> GameState:
        """Validate and apply *move*, then reclassify the position.

        Raises :class:`InvalidMove` and leaves the state untouched when the
        move is rejected.
        """
        if self.is_game_over:
            _LOGGER.debug("Rejected %s: game is over (%s)", move, self._status)
            raise InvalidMove(InvalidMoveReason.GAME_OVER, str(move))

        try:
            resolved = MoveValidator(self._position).resolve(move)
        except InvalidMove as exc:
            _LOGGER.debug("Rejected %s: %s", move, exc.reason.name)
            raise

        piece = self._position.board[resolved.from_sq]
        assert piece is not None
        captured = self._position.play(resolved)
        self._repetitions[self._position.key()] += 1

        previous = self._status
        self._status = self._classify()
        self._records.append(
            MoveRecord(
                move=resolved,
                piece=piece,
                captured=captured,
                fen_after=position_to_fen(self._position),
                status=self._status,
            )
        )
        _LOGGER.debug("Applied %s (%s), status: %s", resolved, piece, self._status)
        if self._status.is_terminal and not previous.is_terminal:
            _LOGGER.info("Game over after %d plies: %s", self.ply_count, self._status)
        return self

    def claim_draw(self) -> GameStatus:
        """End the game by the 50-move rule or threefold repetition."""
        if self.is_game_over:
            raise InvalidMove(InvalidMoveReason.GAME_OVER, "claim draw")
        reason = self._claimable_draw()
        if reason is None:
            raise InvalidMove(InvalidMoveReason.DRAW_NOT_CLAIMABLE)
        self._status = GameStatus.draw(reason)
        _LOGGER.info("Draw claimed by %s: %s", self.side_to_move, reason.name)
        return self._status

    # ── Internals ────────────────────────────────────────────────────────

    def _classify(self) -> GameStatus:
        return Rules.classify(self._position, self.repetition_count, self._policy)

    def _claimable_draw(self) -> DrawReason | None:
        return Rules.claimable_draw(self._position, self.repetition_count, self._policy)

    def __repr__(self) -> str:
        return f"GameState({self.fen()!r}, status={self._status})"
