"""Move value object (long-algebraic representation)."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import MoveKind, PieceType
from chessrules.core.types import Square

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}
_CHAR_PROMOS: dict[str, PieceType] = {v: k for k, v in _PROMO_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Move:
    """A move proposal, or a classified legal move once generated.

    Callers may submit a bare ``Move(from_sq, to_sq)``; the validator
    resolves it to the generated move carrying the proper ``kind``.
    """

    from_sq: Square
    to_sq: Square
    kind: MoveKind = MoveKind.NORMAL
    promotion: PieceType | None = None

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "?")
        return base

    @property
    def uci(self) -> str:
        return str(self)

    @property
    def is_castle(self) -> bool:
        return self.kind in (MoveKind.CASTLE_KINGSIDE, MoveKind.CASTLE_QUEENSIDE)

    def matches(self, other: Move) -> bool:
        """Same squares and promotion choice, regardless of ``kind``."""
        return (
            self.from_sq == other.from_sq
            and self.to_sq == other.to_sq
            and self.promotion == other.promotion
        )

    @classmethod
    def parse(cls, text: str) -> Move:
        """Parse ``'e2e4'`` or ``'e7e8q'`` into an unclassified proposal."""
        if len(text) not in (4, 5):
            raise ValueError(f"Invalid move text: {text!r}")
        promotion = None
        if len(text) == 5:
            promotion = _CHAR_PROMOS.get(text[4].lower())
            if promotion is None:
                raise ValueError(f"Invalid promotion piece in move: {text!r}")
        return cls(Square.parse(text[:2]), Square.parse(text[2:4]), promotion=promotion)
