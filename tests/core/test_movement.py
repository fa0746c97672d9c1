"""Tests for pseudo-legal move generation and attack detection."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import CastlingRights, Color, MoveKind, PieceType
from chessrules.core.fen import position_from_fen
from chessrules.core.move import Move
from chessrules.core.movement import attackers, is_square_attacked, pseudo_legal_moves
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, A7, A8, B1, C1, D4, D5, D6, E1, E2, E3, E4, E5, E6,
    F2, F3, G1, G2, H3, Square,
)


def _lone(piece: Piece, sq: Square) -> Board:
    board = Board()
    board[sq] = piece
    return board


def _targets(moves: list[Move]) -> set[Square]:
    return {m.to_sq for m in moves}


class TestSteppingPieces:
    def test_knight_from_start(self) -> None:
        board = Board.initial()
        assert _targets(pseudo_legal_moves(board, G1)) == {F3, H3}

    def test_knight_in_corner(self) -> None:
        board = _lone(Piece(Color.WHITE, PieceType.KNIGHT), A1)
        assert len(pseudo_legal_moves(board, A1)) == 2

    def test_king_in_centre(self) -> None:
        board = _lone(Piece(Color.WHITE, PieceType.KING), E4)
        assert len(pseudo_legal_moves(board, E4)) == 8

    def test_own_piece_blocks_enemy_is_capture(self) -> None:
        board = _lone(Piece(Color.WHITE, PieceType.KNIGHT), E4)
        board[F2] = Piece(Color.WHITE, PieceType.PAWN)
        board[D6] = Piece(Color.BLACK, PieceType.PAWN)
        moves = {m.to_sq: m for m in pseudo_legal_moves(board, E4)}
        assert F2 not in moves
        assert moves[D6].kind == MoveKind.CAPTURE


class TestSlidingPieces:
    @pytest.mark.parametrize(
        ("kind", "expected"),
        [(PieceType.ROOK, 14), (PieceType.BISHOP, 13), (PieceType.QUEEN, 27)],
    )
    def test_open_board_counts(self, kind: PieceType, expected: int) -> None:
        board = _lone(Piece(Color.WHITE, kind), D4)
        assert len(pseudo_legal_moves(board, D4)) == expected

    def test_blocked_by_own_and_enemy(self) -> None:
        board = _lone(Piece(Color.WHITE, PieceType.ROOK), A1)
        board[Square.parse("a4")] = Piece(Color.WHITE, PieceType.PAWN)
        board[Square.parse("d1")] = Piece(Color.BLACK, PieceType.KNIGHT)
        targets = _targets(pseudo_legal_moves(board, A1))
        assert targets == {
            Square.parse(name) for name in ("a2", "a3", "b1", "c1", "d1")
        }

    def test_start_position_sliders_have_no_moves(self) -> None:
        board = Board.initial()
        for name in ("a1", "c1", "d1", "f1", "h1"):
            assert pseudo_legal_moves(board, Square.parse(name)) == []


class TestPawn:
    def test_single_and_double_step(self) -> None:
        board = Board.initial()
        assert _targets(pseudo_legal_moves(board, E2)) == {E3, E4}

    def test_double_step_needs_both_squares_empty(self) -> None:
        board = Board.initial()
        board[E4] = Piece(Color.BLACK, PieceType.KNIGHT)
        assert _targets(pseudo_legal_moves(board, E2)) == {E3}
        board[E3] = Piece(Color.BLACK, PieceType.KNIGHT)
        assert pseudo_legal_moves(board, E2) == []

    def test_black_pawn_moves_down(self) -> None:
        board = Board.initial()
        assert _targets(pseudo_legal_moves(board, Square.parse("d7"))) == {
            D6,
            D5,
        }

    def test_diagonal_capture_only_onto_enemy(self) -> None:
        board = Board.initial()
        board[D5] = Piece(Color.BLACK, PieceType.PAWN)
        board[Square.parse("f5")] = Piece(Color.WHITE, PieceType.KNIGHT)
        board[E4] = Piece(Color.WHITE, PieceType.PAWN)
        moves = {m.to_sq: m for m in pseudo_legal_moves(board, E4)}
        assert set(moves) == {D5, E5}
        assert moves[D5].kind == MoveKind.CAPTURE

    def test_en_passant_needs_target(self) -> None:
        board = _lone(Piece(Color.WHITE, PieceType.PAWN), E5)
        board[D5] = Piece(Color.BLACK, PieceType.PAWN)
        assert D6 not in _targets(pseudo_legal_moves(board, E5))
        moves = {m.to_sq: m for m in pseudo_legal_moves(board, E5, en_passant=D6)}
        assert moves[D6].kind == MoveKind.EN_PASSANT

    def test_promotion_generates_each_piece(self) -> None:
        board = _lone(Piece(Color.WHITE, PieceType.PAWN), A7)
        moves = pseudo_legal_moves(board, A7)
        assert {m.to_sq for m in moves} == {A8}
        assert {m.promotion for m in moves} == {
            PieceType.QUEEN,
            PieceType.ROOK,
            PieceType.BISHOP,
            PieceType.KNIGHT,
        }
        assert all(m.kind == MoveKind.PROMOTION for m in moves)

    def test_capture_promotion(self) -> None:
        board = _lone(Piece(Color.BLACK, PieceType.PAWN), G2)
        board[Square.parse("h1")] = Piece(Color.WHITE, PieceType.ROOK)
        board[Square.parse("g1")] = Piece(Color.WHITE, PieceType.KNIGHT)
        moves = pseudo_legal_moves(board, G2)
        assert {m.to_sq for m in moves} == {Square.parse("h1")}
        assert len(moves) == 4


class TestCastlingCandidates:
    FEN = "r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1"

    def test_both_sides_surfaced(self) -> None:
        pos = position_from_fen(self.FEN)
        moves = pseudo_legal_moves(pos.board, E1, pos.en_passant, pos.castling)
        kinds = {m.kind for m in moves}
        assert MoveKind.CASTLE_KINGSIDE in kinds
        assert MoveKind.CASTLE_QUEENSIDE in kinds

    def test_without_rights(self) -> None:
        pos = position_from_fen(self.FEN)
        moves = pseudo_legal_moves(pos.board, E1, None, CastlingRights.BLACK_BOTH)
        assert not any(m.is_castle for m in moves)

    def test_occupied_square_between(self) -> None:
        pos = position_from_fen("r3k2r/8/8/8/8/8/8/RN2K2R w KQkq - 0 1")
        moves = pseudo_legal_moves(pos.board, E1, None, pos.castling)
        kinds = {m.kind for m in moves}
        assert MoveKind.CASTLE_QUEENSIDE not in kinds
        assert MoveKind.CASTLE_KINGSIDE in kinds
        assert B1 not in _targets(moves)

    def test_ignores_attacks(self) -> None:
        # Attack conditions are the validator's job.
        pos = position_from_fen("r3kr2/8/8/8/8/8/8/R3K2R w KQq - 0 1")
        moves = pseudo_legal_moves(pos.board, E1, None, pos.castling)
        assert any(m.kind == MoveKind.CASTLE_KINGSIDE for m in moves)


class TestAttacks:
    def test_start_position(self) -> None:
        board = Board.initial()
        assert is_square_attacked(board, E3, Color.WHITE)
        assert is_square_attacked(board, E6, Color.BLACK)
        assert not is_square_attacked(board, E4, Color.WHITE)
        assert not is_square_attacked(board, E1, Color.BLACK)

    def test_attackers_of_f3(self) -> None:
        board = Board.initial()
        assert set(attackers(board, F3, Color.WHITE)) == {E2, G2, G1}

    def test_slider_blocked(self) -> None:
        board = _lone(Piece(Color.BLACK, PieceType.ROOK), A8)
        assert is_square_attacked(board, A1, Color.BLACK)
        board[A7] = Piece(Color.WHITE, PieceType.PAWN)
        assert not is_square_attacked(board, A1, Color.BLACK)

    @pytest.mark.parametrize(
        "fen",
        [
            "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1",
            "8/2p5/3p4/KP5r/1R3p1k/8/4P1P1/8 w - - 0 1",
            "rnbq1k1r/pp1Pbppp/2p5/8/2B5/8/PPP1NnPP/RNBQK2R w KQ - 1 8",
        ],
    )
    def test_matches_enemy_pseudo_legal_moves(self, fen: str) -> None:
        """An occupied square is attacked iff some enemy move lands on it."""
        board = position_from_fen(fen).board
        for sq, piece in board.occupied():
            enemy = piece.color.opposite
            reachable = any(
                move.to_sq == sq
                for from_sq, _ in board.pieces(enemy)
                for move in pseudo_legal_moves(board, from_sq)
            )
            assert is_square_attacked(board, sq, enemy) == reachable, str(sq)
