"""Square value type and coordinate helpers.

Files and ranks are zero-based: ``file`` 0-7 maps to a-h and ``rank`` 0-7
maps to 1-8. ``Square.index`` gives the little-endian rank-file index
(a1=0, h1=7, a8=56, h8=63) used by the board's backing list.
"""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.errors import OutOfBounds

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate; always on the board."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise OutOfBounds(
                f"Square out of range: file={self.file}, rank={self.rank}"
            )

    @property
    def index(self) -> int:
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise OutOfBounds(f"Square index out of range: {index}")
        return ALL_SQUARES[index]

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse a square name, e.g. ``'e4'``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return ALL_SQUARES[_RANKS.index(name[1]) * 8 + _FILES.index(name[0])]

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by (*df*, *dr*), or None when it leaves the board."""
        f = self.file + df
        r = self.rank + dr
        if 0 <= f < 8 and 0 <= r < 8:
            return ALL_SQUARES[r * 8 + f]
        return None

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Square({self.name})"


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(f, r) for r in range(8) for f in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]
