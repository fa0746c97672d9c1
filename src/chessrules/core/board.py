"""Board - piece placement on an 8x8 grid, without rule knowledge."""

from __future__ import annotations

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Board:
    """Mutable 64-square board with a king-square cache."""

    __slots__ = ("_squares", "_king_squares")

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64
        # [color] -> king square (None if no king of that color is placed).
        self._king_squares: list[Square | None] = [None, None]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        idx = sq.index
        old_piece = self._squares[idx]
        if old_piece is not None and old_piece.kind == PieceType.KING:
            if self._king_squares[old_piece.color] == sq:
                self._king_squares[old_piece.color] = None

        self._squares[idx] = piece
        if piece is not None and piece.kind == PieceType.KING:
            self._king_squares[piece.color] = sq

    def piece_at(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def set(self, sq: Square, piece: Piece | None) -> None:
        self[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Relocate whatever stands on *from_sq*; return what was on *to_sq*."""
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")
        captured = self[to_sq]
        self[from_sq] = None
        self[to_sq] = piece
        return captured

    def path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between the endpoints is empty.

        The endpoints must share a rank, file or diagonal.
        """
        df = to_sq.file - from_sq.file
        dr = to_sq.rank - from_sq.rank
        if not (df == 0 or dr == 0 or abs(df) == abs(dr)):
            raise ValueError(f"{from_sq} and {to_sq} are not on a common line")
        step_f, step_r = _sign(df), _sign(dr)
        f = from_sq.file + step_f
        r = from_sq.rank + step_r
        while (f, r) != (to_sq.file, to_sq.rank):
            if self._squares[r * 8 + f] is not None:
                return False
            f += step_f
            r += step_r
        return True

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[tuple[Square, Piece]]:
        """All (square, piece) pairs for *color*, a1 first."""
        return [
            (ALL_SQUARES[idx], piece)
            for idx, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def occupied(self) -> list[tuple[Square, Piece]]:
        return [
            (ALL_SQUARES[idx], piece)
            for idx, piece in enumerate(self._squares)
            if piece is not None
        ]

    def count(self, color: Color, kind: PieceType) -> int:
        target = Piece(color, kind)
        return self._squares.count(target)

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        sq = self._king_squares[color]
        if sq is None:
            raise ValueError(f"No {color.name} king on board")
        return sq

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._king_squares = self._king_squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64
        self._king_squares = [None, None]

    def key(self) -> tuple[Piece | None, ...]:
        """Hashable snapshot of the occupancy."""
        return tuple(self._squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, kind in enumerate(_BACK_RANK):
            b[Square(f, 0)] = Piece(Color.WHITE, kind)
            b[Square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            b[Square(f, 7)] = Piece(Color.BLACK, kind)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[rank * 8 + file]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
