"""Exception hierarchy for the rules engine."""

from __future__ import annotations

from enum import Enum


class InvalidMoveReason(Enum):
    """Reason codes attached to :class:`InvalidMove`."""

    GAME_OVER = "game is over"
    NO_PIECE = "no piece on the origin square"
    NOT_YOUR_TURN = "not your turn"
    OWN_PIECE_AT_DESTINATION = "destination holds your own piece"
    BLOCKED_PATH = "blocked path"
    ILLEGAL_DESTINATION = "piece cannot move there"
    CASTLING_NOT_ALLOWED = "castling is not available"
    CASTLING_THROUGH_CHECK = "king is in, passes through or lands on an attacked square"
    PROMOTION_REQUIRED = "promotion piece must be chosen"
    INVALID_PROMOTION = "illegal promotion piece"
    LEAVES_KING_IN_CHECK = "leaves king in check"
    DRAW_NOT_CLAIMABLE = "no draw can be claimed"


class ChessError(Exception):
    """Base class for all rules-engine errors."""


class InvalidMove(ChessError, ValueError):
    """A submitted move was rejected; the game state is unchanged."""

    def __init__(self, reason: InvalidMoveReason, detail: str = "") -> None:
        self.reason = reason
        self.detail = detail
        message = reason.value if not detail else f"{detail}: {reason.value}"
        super().__init__(message)


class OutOfBounds(ChessError, IndexError):
    """Square coordinates outside the 8x8 board (a programming error)."""
