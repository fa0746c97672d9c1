"""chessrules — a chess rules engine: legal moves, check detection, game state."""

__version__ = "0.1.0"
