"""High-level chess rules: check, checkmate, stalemate and draw detection."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, DrawReason, PieceType
from chessrules.core.movement import is_square_attacked
from chessrules.core.policy import DrawPolicy
from chessrules.core.position import Position
from chessrules.core.status import GameStatus
from chessrules.core.validator import MoveValidator

_MINORS = (PieceType.KNIGHT, PieceType.BISHOP)


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy:
    # - Claim-based draws: 50-move rule, threefold repetition.
    # - Automatic draws: insufficient material, 75-move rule, fivefold repetition.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return is_square_attacked(board, board.king_square(color), color.opposite)

    @staticmethod
    def has_legal_move(position: Position) -> bool:
        return MoveValidator(position).has_legal_move()

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        return Rules.is_in_check(
            position.board, position.side_to_move
        ) and not Rules.has_legal_move(position)

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        return not Rules.is_in_check(
            position.board, position.side_to_move
        ) and not Rules.has_legal_move(position)

    @staticmethod
    def is_insufficient_material(board: Board) -> bool:
        """K vs K, K+B vs K, K+N vs K, K+B vs K+B (same-colour bishops)."""
        others = [
            (sq, piece)
            for sq, piece in board.occupied()
            if piece.kind != PieceType.KING
        ]
        if not others:
            return True
        if len(others) == 1:
            return others[0][1].kind in _MINORS

        if len(others) == 2:
            (sq_a, a), (sq_b, b) = others
            if a.kind == b.kind == PieceType.BISHOP and a.color != b.color:
                return (sq_a.file + sq_a.rank) % 2 == (sq_b.file + sq_b.rank) % 2
        return False

    @staticmethod
    def is_fifty_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= 100  # 100 half-moves = 50 full moves

    @staticmethod
    def is_seventy_five_move_rule(position: Position) -> bool:
        return position.halfmove_clock >= 150  # 150 half-moves = 75 full moves

    @staticmethod
    def automatic_draw(
        position: Position, repetitions: int = 1, policy: DrawPolicy | None = None
    ) -> DrawReason | None:
        """Reason the position is drawn without a claim, if any."""
        policy = policy or DrawPolicy.standard()
        if policy.insufficient_material and Rules.is_insufficient_material(
            position.board
        ):
            return DrawReason.INSUFFICIENT_MATERIAL
        if policy.seventy_five_move_rule and Rules.is_seventy_five_move_rule(position):
            return DrawReason.SEVENTY_FIVE_MOVE_RULE
        if policy.fivefold_repetition and repetitions >= 5:
            return DrawReason.FIVEFOLD_REPETITION
        return None

    @staticmethod
    def claimable_draw(
        position: Position, repetitions: int = 1, policy: DrawPolicy | None = None
    ) -> DrawReason | None:
        """Reason the side to move may claim a draw, if any."""
        policy = policy or DrawPolicy.standard()
        if not policy.claims_allowed:
            return None
        if repetitions >= 3:
            return DrawReason.THREEFOLD_REPETITION
        if Rules.is_fifty_move_rule(position):
            return DrawReason.FIFTY_MOVE_RULE
        return None

    @staticmethod
    def classify(
        position: Position, repetitions: int = 1, policy: DrawPolicy | None = None
    ) -> GameStatus:
        """Classify *position* from the side to move's point of view.

        Checkmate and stalemate take precedence over automatic draws, which
        take precedence over a plain check.
        """
        side = position.side_to_move
        in_check = Rules.is_in_check(position.board, side)

        if not Rules.has_legal_move(position):
            if in_check:
                return GameStatus.checkmate(side.opposite)
            return GameStatus.stalemate()

        reason = Rules.automatic_draw(position, repetitions, policy)
        if reason is not None:
            return GameStatus.draw(reason)

        if in_check:
            return GameStatus.check(side)
        return GameStatus.in_progress()
