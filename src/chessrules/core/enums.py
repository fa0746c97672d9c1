"""Core enumerations and flags for the chess domain."""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank delta of a pawn step for this side."""
        return 1 if self is Color.WHITE else -1

    @property
    def home_rank(self) -> int:
        """Back rank index (0 for white, 7 for black)."""
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """The six piece kinds, ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


class MoveKind(IntEnum):
    """Move classification assigned by the generator."""

    NORMAL = 0
    CAPTURE = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class CastlingRights(IntFlag):
    """Bitmask for castling availability."""

    NONE = 0
    WHITE_KINGSIDE = auto()
    WHITE_QUEENSIDE = auto()
    BLACK_KINGSIDE = auto()
    BLACK_QUEENSIDE = auto()

    WHITE_BOTH = WHITE_KINGSIDE | WHITE_QUEENSIDE
    BLACK_BOTH = BLACK_KINGSIDE | BLACK_QUEENSIDE
    ALL = WHITE_BOTH | BLACK_BOTH

    @staticmethod
    def kingside(color: Color) -> CastlingRights:
        if color == Color.WHITE:
            return CastlingRights.WHITE_KINGSIDE
        return CastlingRights.BLACK_KINGSIDE

    @staticmethod
    def queenside(color: Color) -> CastlingRights:
        if color == Color.WHITE:
            return CastlingRights.WHITE_QUEENSIDE
        return CastlingRights.BLACK_QUEENSIDE

    @staticmethod
    def both(color: Color) -> CastlingRights:
        if color == Color.WHITE:
            return CastlingRights.WHITE_BOTH
        return CastlingRights.BLACK_BOTH


class StatusKind(IntEnum):
    """Classification of a position after a move."""

    IN_PROGRESS = 0
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    DRAW = auto()


class DrawReason(IntEnum):
    """Why a game ended drawn."""

    INSUFFICIENT_MATERIAL = auto()
    SEVENTY_FIVE_MOVE_RULE = auto()
    FIVEFOLD_REPETITION = auto()
    FIFTY_MOVE_RULE = auto()
    THREEFOLD_REPETITION = auto()
