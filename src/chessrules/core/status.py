"""Game status value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, DrawReason, StatusKind


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Classification of the current position.

    ``color`` is the side in check for CHECK and the winner for CHECKMATE.
    """

    kind: StatusKind
    color: Color | None = None
    draw_reason: DrawReason | None = None

    @classmethod
    def in_progress(cls) -> GameStatus:
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def check(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECK, color)

    @classmethod
    def checkmate(cls, winner: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, winner)

    @classmethod
    def stalemate(cls) -> GameStatus:
        return cls(StatusKind.STALEMATE)

    @classmethod
    def draw(cls, reason: DrawReason) -> GameStatus:
        return cls(StatusKind.DRAW, draw_reason=reason)

    @property
    def is_terminal(self) -> bool:
        return self.kind in (
            StatusKind.CHECKMATE,
            StatusKind.STALEMATE,
            StatusKind.DRAW,
        )

    @property
    def winner(self) -> Color | None:
        return self.color if self.kind == StatusKind.CHECKMATE else None

    def __str__(self) -> str:
        if self.kind == StatusKind.CHECK:
            return f"{self.color} in check"
        if self.kind == StatusKind.CHECKMATE:
            return f"checkmate, {self.color} wins"
        if self.kind == StatusKind.DRAW and self.draw_reason is not None:
            return f"draw ({self.draw_reason.name.lower().replace('_', ' ')})"
        return self.kind.name.lower().replace("_", " ")
