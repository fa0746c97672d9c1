"""Game management layer — state manager and session.

Quick start::

    from chessrules.core import Move
    from chessrules.game import GameSession

    session = GameSession()
    session.submit_move(Move.parse("e2e4"))
    print(session.status)
"""

from chessrules.game.session import GameEvents, GameSession
from chessrules.game.state import GameState, MoveRecord

__all__ = [
    "GameEvents",
    "GameSession",
    "GameState",
    "MoveRecord",
]
