"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import MoveValidator, Position, Rules, Square

    pos = Position.initial()
    for move in MoveValidator(pos).legal_moves(Square.parse("g1")):
        print(move)
    print(Rules.classify(pos))
"""

from chessrules.core.board import Board
from chessrules.core.enums import (
    CastlingRights,
    Color,
    DrawReason,
    MoveKind,
    PieceType,
    StatusKind,
)
from chessrules.core.errors import (
    ChessError,
    InvalidMove,
    InvalidMoveReason,
    OutOfBounds,
)
from chessrules.core.fen import STARTING_FEN, position_from_fen, position_to_fen
from chessrules.core.move import Move
from chessrules.core.movement import attackers, is_square_attacked, pseudo_legal_moves
from chessrules.core.piece import Piece
from chessrules.core.policy import DrawPolicy
from chessrules.core.position import Position
from chessrules.core.rules import Rules
from chessrules.core.status import GameStatus
from chessrules.core.types import ALL_SQUARES, Square
from chessrules.core.validator import MoveValidator

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "DrawReason",
    "MoveKind",
    "PieceType",
    "StatusKind",
    # Errors
    "ChessError",
    "InvalidMove",
    "InvalidMoveReason",
    "OutOfBounds",
    # Types
    "ALL_SQUARES",
    "Square",
    # Domain objects
    "Board",
    "DrawPolicy",
    "GameStatus",
    "Move",
    "MoveValidator",
    "Piece",
    "Position",
    "Rules",
    # Movement rules
    "attackers",
    "is_square_attacked",
    "pseudo_legal_moves",
    # FEN adapter
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
