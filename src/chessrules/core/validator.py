"""Move validation: filters pseudo-legal moves by king safety."""

from __future__ import annotations

from chessrules.core.enums import PROMOTION_TYPES, Color, MoveKind, PieceType
from chessrules.core.errors import InvalidMove, InvalidMoveReason
from chessrules.core.move import Move
from chessrules.core.movement import (
    is_square_attacked,
    pseudo_legal_moves,
    sliding_path_blocked,
)
from chessrules.core.piece import Piece
from chessrules.core.position import Position
from chessrules.core.types import Square


class MoveValidator:
    """Computes and checks legal moves for the side to move of a :class:`Position`.

    King safety is tested on a scratch copy of the position, so the
    validator never mutates the position it was given.
    """

    __slots__ = ("_pos",)

    def __init__(self, position: Position) -> None:
        self._pos = position

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, sq: Square) -> list[Move]:
        """Legal moves of the piece on *sq*.

        Empty unless that piece belongs to the side to move.
        """
        piece = self._pos.board[sq]
        if piece is None or piece.color != self._pos.side_to_move:
            return []
        return [move for move in self._candidates(sq) if self._is_acceptable(move)]

    def all_legal_moves(self) -> dict[Square, list[Move]]:
        """Legal moves of the side to move, keyed by origin square."""
        result: dict[Square, list[Move]] = {}
        for sq, _piece in self._pos.board.pieces(self._pos.side_to_move):
            moves = self.legal_moves(sq)
            if moves:
                result[sq] = moves
        return result

    def has_legal_move(self) -> bool:
        """Whether the side to move has at least one legal move."""
        for sq, _piece in self._pos.board.pieces(self._pos.side_to_move):
            for move in self._candidates(sq):
                if self._is_acceptable(move):
                    return True
        return False

    def is_legal(self, move: Move) -> bool:
        try:
            self.resolve(move)
        except InvalidMove:
            return False
        return True

    def resolve(self, move: Move) -> Move:
        """Match a proposal against the legal moves and return the classified move.

        The proposal's ``kind`` is ignored; squares and promotion choice
        decide. Raises :class:`InvalidMove` explaining any rejection.
        """
        board = self._pos.board
        piece = board[move.from_sq]
        if piece is None:
            raise InvalidMove(InvalidMoveReason.NO_PIECE, str(move))
        if piece.color != self._pos.side_to_move:
            raise InvalidMove(InvalidMoveReason.NOT_YOUR_TURN, str(move))
        if move.promotion is not None and move.promotion not in PROMOTION_TYPES:
            raise InvalidMove(
                InvalidMoveReason.INVALID_PROMOTION,
                f"cannot promote to {move.promotion.name.lower()}",
            )

        candidates = [
            m for m in self._candidates(move.from_sq) if m.to_sq == move.to_sq
        ]
        if not candidates:
            raise self._explain_unreachable(move, piece)

        if candidates[0].kind == MoveKind.PROMOTION:
            if move.promotion is None:
                raise InvalidMove(InvalidMoveReason.PROMOTION_REQUIRED, str(move))
            chosen = next(m for m in candidates if m.promotion == move.promotion)
        else:
            if move.promotion is not None:
                raise InvalidMove(
                    InvalidMoveReason.INVALID_PROMOTION, f"{move} is not a promotion"
                )
            chosen = candidates[0]

        if chosen.is_castle and not self._castling_path_safe(chosen):
            raise InvalidMove(InvalidMoveReason.CASTLING_THROUGH_CHECK, str(move))
        if not self._leaves_king_safe(chosen):
            raise InvalidMove(InvalidMoveReason.LEAVES_KING_IN_CHECK, str(move))
        return chosen

    # -- Internals ----------------------------------------------------------

    def _candidates(self, sq: Square) -> list[Move]:
        board = self._pos.board
        return [
            move
            for move in pseudo_legal_moves(
                board, sq, self._pos.en_passant, self._pos.castling
            )
            if not _holds_king(board[move.to_sq])
        ]

    def _is_acceptable(self, move: Move) -> bool:
        if move.is_castle and not self._castling_path_safe(move):
            return False
        return self._leaves_king_safe(move)

    def _leaves_king_safe(self, move: Move) -> bool:
        mover = self._pos.side_to_move
        scratch = self._pos.copy()
        scratch.play(move)
        board = scratch.board
        return not is_square_attacked(board, board.king_square(mover), mover.opposite)

    def _castling_path_safe(self, move: Move) -> bool:
        """King is not in check and does not cross an attacked square."""
        board = self._pos.board
        opponent = self._pos.side_to_move.opposite
        step = 1 if move.kind == MoveKind.CASTLE_KINGSIDE else -1
        rank = move.from_sq.rank
        squares = (
            move.from_sq,
            Square(move.from_sq.file + step, rank),
            move.to_sq,
        )
        return not any(is_square_attacked(board, sq, opponent) for sq in squares)

    def _explain_unreachable(self, move: Move, piece: Piece) -> InvalidMove:
        board = self._pos.board
        target = board[move.to_sq]
        detail = str(move)

        if target is not None and target.color == piece.color:
            return InvalidMove(InvalidMoveReason.OWN_PIECE_AT_DESTINATION, detail)
        if _holds_king(target):
            return InvalidMove(
                InvalidMoveReason.ILLEGAL_DESTINATION, f"{detail} would capture a king"
            )

        df = move.to_sq.file - move.from_sq.file
        dr = move.to_sq.rank - move.from_sq.rank
        if piece.kind == PieceType.KING and dr == 0 and abs(df) == 2:
            return InvalidMove(InvalidMoveReason.CASTLING_NOT_ALLOWED, detail)
        if sliding_path_blocked(board, move.from_sq, move.to_sq):
            return InvalidMove(InvalidMoveReason.BLOCKED_PATH, detail)
        if (
            piece.kind == PieceType.PAWN
            and df == 0
            and _pawn_push_blocked(piece.color, move, dr)
        ):
            return InvalidMove(InvalidMoveReason.BLOCKED_PATH, detail)
        return InvalidMove(InvalidMoveReason.ILLEGAL_DESTINATION, detail)


def _holds_king(piece: Piece | None) -> bool:
    return piece is not None and piece.kind == PieceType.KING


def _pawn_push_blocked(color: Color, move: Move, dr: int) -> bool:
    distance = dr * color.forward
    start_rank = 1 if color == Color.WHITE else 6
    return distance == 1 or (distance == 2 and move.from_sq.rank == start_rank)
