"""Draw-rule configuration."""

from __future__ import annotations


class DrawPolicy:
    """Which draw rules a game enforces.

    Args:
        insufficient_material: End the game when neither side can mate.
        seventy_five_move_rule: End the game after 75 moves without a
            pawn move or capture.
        fivefold_repetition: End the game on the fifth repetition.
        claims_allowed: Allow claiming the 50-move rule and threefold
            repetition.
    """

    __slots__ = (
        "insufficient_material",
        "seventy_five_move_rule",
        "fivefold_repetition",
        "claims_allowed",
    )

    def __init__(
        self,
        insufficient_material: bool = True,
        seventy_five_move_rule: bool = True,
        fivefold_repetition: bool = True,
        claims_allowed: bool = True,
    ) -> None:
        self.insufficient_material = insufficient_material
        self.seventy_five_move_rule = seventy_five_move_rule
        self.fivefold_repetition = fivefold_repetition
        self.claims_allowed = claims_allowed

    @classmethod
    def standard(cls) -> DrawPolicy:
        return cls()

    @classmethod
    def no_draws(cls) -> DrawPolicy:
        """Only checkmate and stalemate end the game."""
        return cls(False, False, False, False)

    def __repr__(self) -> str:
        enabled = [name for name in self.__slots__ if getattr(self, name)]
        return f"DrawPolicy({', '.join(enabled) or 'none'})"
