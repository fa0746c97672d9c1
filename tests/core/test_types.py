"""Tests for Square, Piece and Move value objects."""

import pytest

from chessrules.core.enums import Color, MoveKind, PieceType
from chessrules.core.errors import OutOfBounds
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import A1, E2, E4, E7, E8, H8, Square


class TestSquare:
    def test_name(self) -> None:
        assert Square(4, 3).name == "e4"
        assert str(H8) == "h8"

    def test_parse(self) -> None:
        assert Square.parse("e4") == E4
        assert Square.parse("a1") == A1

    @pytest.mark.parametrize("text", ["i9", "a0", "a9", "", "a", "abc", "E4"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Square.parse(text)

    @pytest.mark.parametrize("coords", [(8, 0), (0, 8), (-1, 3), (3, -1)])
    def test_out_of_range_fails_fast(self, coords: tuple[int, int]) -> None:
        with pytest.raises(OutOfBounds):
            Square(*coords)

    def test_out_of_bounds_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            Square.from_index(64)

    def test_index(self) -> None:
        assert A1.index == 0
        assert E4.index == 28
        assert Square.from_index(63) == H8

    def test_offset(self) -> None:
        assert E4.offset(1, 1) == Square.parse("f5")
        assert H8.offset(1, 0) is None
        assert A1.offset(0, -1) is None

    def test_hashable(self) -> None:
        assert {Square(4, 3), E4} == {E4}


class TestPiece:
    def test_fen_letter(self) -> None:
        assert str(Piece(Color.WHITE, PieceType.KNIGHT)) == "N"
        assert str(Piece(Color.BLACK, PieceType.QUEEN)) == "q"

    def test_from_char(self) -> None:
        assert Piece.from_char("k") == Piece(Color.BLACK, PieceType.KING)
        assert Piece.from_char("P") == Piece(Color.WHITE, PieceType.PAWN)

    @pytest.mark.parametrize("char", ["x", "", "Kk", "1"])
    def test_from_char_invalid(self, char: str) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char(char)

    def test_symbols(self) -> None:
        assert Piece(Color.WHITE, PieceType.KING).symbol == "♔"
        assert Piece(Color.WHITE, PieceType.PAWN).symbol == "♙"
        assert Piece(Color.BLACK, PieceType.KNIGHT).symbol == "♞"
        assert Piece(Color.BLACK, PieceType.PAWN).symbol == "♟"


class TestMove:
    def test_str(self) -> None:
        assert str(Move(E2, E4)) == "e2e4"
        promo = Move(E7, E8, MoveKind.PROMOTION, PieceType.QUEEN)
        assert promo.uci == "e7e8q"

    def test_parse(self) -> None:
        assert Move.parse("e2e4") == Move(E2, E4)
        assert Move.parse("e7e8n").promotion == PieceType.KNIGHT

    @pytest.mark.parametrize("text", ["e2", "e2e9", "e7e8k", "e2e4qq"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(ValueError):
            Move.parse(text)

    def test_matches_ignores_kind(self) -> None:
        assert Move(E2, E4).matches(Move(E2, E4, MoveKind.CAPTURE))
        assert not Move(E7, E8).matches(
            Move(E7, E8, MoveKind.PROMOTION, PieceType.QUEEN)
        )
