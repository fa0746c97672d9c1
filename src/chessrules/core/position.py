"""Board plus side to move, castling rights, en passant target and clocks."""

from __future__ import annotations

from collections.abc import Hashable

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveKind, PieceType
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import A1, A8, H1, H8, Square

# Corner square -> right lost when anything moves from or to it.
_ROOK_CORNERS: dict[Square, CastlingRights] = {
    A1: CastlingRights.WHITE_QUEENSIDE,
    H1: CastlingRights.WHITE_KINGSIDE,
    A8: CastlingRights.BLACK_QUEENSIDE,
    H8: CastlingRights.BLACK_KINGSIDE,
}


def en_passant_victim(move: Move) -> Square:
    """Square of the pawn removed by an en-passant *move*."""
    return Square(move.to_sq.file, move.from_sq.rank)


def castling_rook_squares(move: Move) -> tuple[Square, Square]:
    """(from, to) of the rook that accompanies a castling *move*."""
    rank = move.from_sq.rank
    if move.kind == MoveKind.CASTLE_KINGSIDE:
        return Square(7, rank), Square(5, rank)
    return Square(0, rank), Square(3, rank)


class Position:
    """Full chess position.

    Moves are applied with :meth:`play`; there is no unmake. Speculative
    probing works on a :meth:`copy` which is then discarded.
    """

    __slots__ = (
        "board",
        "side_to_move",
        "castling",
        "en_passant",
        "halfmove_clock",
        "fullmove_number",
    )

    def __init__(
        self,
        board: Board | None = None,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights = CastlingRights.ALL,
        en_passant: Square | None = None,
        halfmove_clock: int = 0,
        fullmove_number: int = 1,
    ) -> None:
        self.board = board if board is not None else Board.initial()
        self.side_to_move = side_to_move
        self.castling = castling
        self.en_passant = en_passant
        self.halfmove_clock = halfmove_clock
        self.fullmove_number = fullmove_number

    # ── Move application ─────────────────────────────────────────────────

    def play(self, move: Move) -> Piece | None:
        """Apply a classified *move* and return the captured piece, if any.

        No legality check is performed here.
        """
        board = self.board
        piece = board[move.from_sq]
        if piece is None:
            raise ValueError(f"No piece on {move.from_sq}")

        if move.kind == MoveKind.EN_PASSANT:
            victim_sq = en_passant_victim(move)
            captured = board[victim_sq]
            board[victim_sq] = None
            board.move_piece(move.from_sq, move.to_sq)
        else:
            captured = board.move_piece(move.from_sq, move.to_sq)

        if move.promotion is not None:
            board[move.to_sq] = Piece(piece.color, move.promotion)

        if move.is_castle:
            rook_from, rook_to = castling_rook_squares(move)
            board.move_piece(rook_from, rook_to)

        # The target exists only for the reply to a double step.
        self.en_passant = None
        if (
            piece.kind == PieceType.PAWN
            and abs(move.to_sq.rank - move.from_sq.rank) == 2
        ):
            self.en_passant = Square(
                move.from_sq.file, (move.from_sq.rank + move.to_sq.rank) // 2
            )

        self._update_castling(move, piece)

        if piece.kind == PieceType.PAWN or captured is not None:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        if self.side_to_move == Color.BLACK:
            self.fullmove_number += 1
        self.side_to_move = self.side_to_move.opposite
        return captured

    def _update_castling(self, move: Move, piece: Piece) -> None:
        if piece.kind == PieceType.KING:
            self.castling &= ~CastlingRights.both(piece.color)
        for sq in (move.from_sq, move.to_sq):
            right = _ROOK_CORNERS.get(sq)
            if right is not None:
                self.castling &= ~right

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
        )

    def key(self) -> Hashable:
        """Identity used for repetition counting (clocks excluded)."""
        return (
            self.board.key(),
            self.side_to_move,
            int(self.castling),
            self.en_passant,
        )

    @classmethod
    def initial(cls) -> Position:
        return cls()

    def __repr__(self) -> str:
        return (
            f"{self.board!r}\n"
            f"{self.side_to_move} to move, castling={int(self.castling):04b}, "
            f"ep={self.en_passant}, halfmove={self.halfmove_clock}, "
            f"fullmove={self.fullmove_number}"
        )
