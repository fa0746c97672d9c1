"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A2, E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    D4, E4, E5, H4, H6,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board.piece_at(E8) == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        assert board.count(Color.WHITE, PieceType.PAWN) == 8
        assert board.count(Color.BLACK, PieceType.PAWN) == 8
        white_pawns = [
            sq for sq, p in board.pieces(Color.WHITE) if p.kind == PieceType.PAWN
        ]
        assert all(sq.rank == 1 for sq in white_pawns)

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board.is_empty(Square(file, rank))


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board.set(E4, piece)
        assert board[E4] == piece
        assert board.is_empty(E2)
        board.set(E4, None)
        assert board.is_empty(E4)

    def test_move_piece_returns_captured(self) -> None:
        board = Board()
        rook = Piece(Color.WHITE, PieceType.ROOK)
        pawn = Piece(Color.BLACK, PieceType.PAWN)
        board[A1] = rook
        board[A8] = pawn
        assert board.move_piece(A1, A8) == pawn
        assert board[A8] == rook
        assert board.is_empty(A1)

    def test_move_piece_from_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="No piece"):
            Board().move_piece(E4, E5)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_king_square_follows_moves(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8
        board[E2] = None
        board.move_piece(E1, E2)
        assert board.king_square(Color.WHITE) == E2

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="No WHITE king"):
            board.king_square(Color.WHITE)

    def test_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16
        assert len(board.occupied()) == 32

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.occupied() == []

    def test_repr_not_empty(self) -> None:
        text = repr(Board.initial())
        assert "K" in text
        assert "a b c d e f g h" in text


class TestPathClear:
    def test_blocked_at_start(self) -> None:
        board = Board.initial()
        assert not board.path_clear(A1, A8)
        assert not board.path_clear(A1, H1)
        assert not board.path_clear(C1, H6)

    def test_adjacent_is_clear(self) -> None:
        board = Board.initial()
        assert board.path_clear(A1, A2)
        assert board.path_clear(E1, D1)

    def test_endpoints_excluded(self) -> None:
        board = Board()
        board[A1] = Piece(Color.WHITE, PieceType.ROOK)
        board[A8] = Piece(Color.BLACK, PieceType.ROOK)
        assert board.path_clear(A1, A8)
        assert board.path_clear(A8, A1)

    def test_diagonal(self) -> None:
        board = Board()
        assert board.path_clear(A1, H8)
        board[D4] = Piece(Color.BLACK, PieceType.PAWN)
        assert not board.path_clear(A1, H8)
        assert board.path_clear(A1, D4)

    def test_not_aligned_raises(self) -> None:
        with pytest.raises(ValueError, match="not on a common line"):
            Board().path_clear(A1, H4)
