"""Piece movement rules: pseudo-legal move generation and attack detection.

Everything here is geometric. Nothing consults whether the mover's own
king ends up in check; that filtering belongs to the validator.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from chessrules.core.board import Board
from chessrules.core.enums import (
    PROMOTION_TYPES,
    CastlingRights,
    Color,
    MoveKind,
    PieceType,
)
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.core.types import ALL_SQUARES, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Precomputed lookup tables (indexed by Square.index) --------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Square, ...], ...]:
    targets: list[tuple[Square, ...]] = []
    for sq in ALL_SQUARES:
        moves = (sq.offset(df, dr) for df, dr in offsets)
        targets.append(tuple(to_sq for to_sq in moves if to_sq is not None))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Square, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Square, ...], ...]] = []
    for sq in ALL_SQUARES:
        square_rays: list[tuple[Square, ...]] = []
        for df, dr in directions:
            ray: list[Square] = []
            to_sq = sq.offset(df, dr)
            while to_sq is not None:
                ray.append(to_sq)
                to_sq = to_sq.offset(df, dr)
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)

_DIAGONAL_SLIDERS = (PieceType.BISHOP, PieceType.QUEEN)
_ORTHOGONAL_SLIDERS = (PieceType.ROOK, PieceType.QUEEN)


# -- Per-kind generators ----------------------------------------------------

_Generator = Callable[
    [Board, Square, Color, Square | None, CastlingRights, list[Move]], None
]


def _step_or_capture(
    board: Board, from_sq: Square, to_sq: Square, color: Color
) -> Move | None:
    target = board[to_sq]
    if target is None:
        return Move(from_sq, to_sq)
    if target.color != color:
        return Move(from_sq, to_sq, MoveKind.CAPTURE)
    return None


def _gen_pawn(
    board: Board,
    sq: Square,
    color: Color,
    en_passant: Square | None,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    forward = color.forward
    last_rank = 7 if color == Color.WHITE else 0
    start_rank = 1 if color == Color.WHITE else 6

    one_step = sq.offset(0, forward)
    if one_step is not None and board.is_empty(one_step):
        if one_step.rank == last_rank:
            for pt in PROMOTION_TYPES:
                moves.append(Move(sq, one_step, MoveKind.PROMOTION, pt))
        else:
            moves.append(Move(sq, one_step))
            if sq.rank == start_rank:
                two_step = sq.offset(0, 2 * forward)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

    for df in (-1, 1):
        cap_sq = sq.offset(df, forward)
        if cap_sq is None:
            continue
        target = board[cap_sq]
        if target is not None:
            if target.color == color:
                continue
            if cap_sq.rank == last_rank:
                for pt in PROMOTION_TYPES:
                    moves.append(Move(sq, cap_sq, MoveKind.PROMOTION, pt))
            else:
                moves.append(Move(sq, cap_sq, MoveKind.CAPTURE))
        elif cap_sq == en_passant:
            victim = board[Square(cap_sq.file, sq.rank)]
            if victim == Piece(color.opposite, PieceType.PAWN):
                moves.append(Move(sq, cap_sq, MoveKind.EN_PASSANT))


def _gen_knight(
    board: Board,
    sq: Square,
    color: Color,
    en_passant: Square | None,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    for to_sq in _KNIGHT_TARGETS[sq.index]:
        move = _step_or_capture(board, sq, to_sq, color)
        if move is not None:
            moves.append(move)


def _gen_sliding(
    board: Board,
    sq: Square,
    color: Color,
    rays: tuple[tuple[Square, ...], ...],
    moves: list[Move],
) -> None:
    for ray in rays:
        for to_sq in ray:
            target = board[to_sq]
            if target is None:
                moves.append(Move(sq, to_sq))
                continue
            if target.color != color:
                moves.append(Move(sq, to_sq, MoveKind.CAPTURE))
            break


def _gen_bishop(
    board: Board,
    sq: Square,
    color: Color,
    en_passant: Square | None,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    _gen_sliding(board, sq, color, _BISHOP_RAYS[sq.index], moves)


def _gen_rook(
    board: Board,
    sq: Square,
    color: Color,
    en_passant: Square | None,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    _gen_sliding(board, sq, color, _ROOK_RAYS[sq.index], moves)


def _gen_queen(
    board: Board,
    sq: Square,
    color: Color,
    en_passant: Square | None,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    _gen_sliding(board, sq, color, _QUEEN_RAYS[sq.index], moves)


def _gen_king(
    board: Board,
    sq: Square,
    color: Color,
    en_passant: Square | None,
    castling: CastlingRights,
    moves: list[Move],
) -> None:
    for to_sq in _KING_TARGETS[sq.index]:
        move = _step_or_capture(board, sq, to_sq, color)
        if move is not None:
            moves.append(move)

    moves.extend(castling_candidates(board, sq, color, castling))


_GENERATORS: dict[PieceType, _Generator] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}


# -- Public API -------------------------------------------------------------


def pseudo_legal_moves(
    board: Board,
    sq: Square,
    en_passant: Square | None = None,
    castling: CastlingRights = CastlingRights.NONE,
) -> list[Move]:
    """Pseudo-legal moves of the piece on *sq* (empty if the square is empty)."""
    piece = board[sq]
    if piece is None:
        return []
    moves: list[Move] = []
    _GENERATORS[piece.kind](board, sq, piece.color, en_passant, castling, moves)
    return moves


def castling_candidates(
    board: Board,
    king_sq: Square,
    color: Color,
    castling: CastlingRights,
) -> list[Move]:
    """Castling moves allowed by rights and occupancy alone.

    Requires the king on its home square, the matching rook in its corner
    and every square between them empty. Attack conditions are checked by
    the validator.
    """
    home = color.home_rank
    if king_sq != Square(4, home):
        return []

    rook = Piece(color, PieceType.ROOK)
    moves: list[Move] = []

    rook_sq = Square(7, home)
    if (
        castling & CastlingRights.kingside(color)
        and board[rook_sq] == rook
        and board.path_clear(king_sq, rook_sq)
    ):
        moves.append(Move(king_sq, Square(6, home), MoveKind.CASTLE_KINGSIDE))

    rook_sq = Square(0, home)
    if (
        castling & CastlingRights.queenside(color)
        and board[rook_sq] == rook
        and board.path_clear(king_sq, rook_sq)
    ):
        moves.append(Move(king_sq, Square(2, home), MoveKind.CASTLE_QUEENSIDE))

    return moves


def sliding_path_blocked(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether a slider on *from_sq* lines up with *to_sq* but is blocked."""
    piece = board[from_sq]
    if piece is None or not piece.is_slider:
        return False
    df = abs(to_sq.file - from_sq.file)
    dr = abs(to_sq.rank - from_sq.rank)
    diagonal = df == dr and df > 0
    orthogonal = (df == 0) != (dr == 0)
    if piece.kind == PieceType.BISHOP and not diagonal:
        return False
    if piece.kind == PieceType.ROOK and not orthogonal:
        return False
    if not (diagonal or orthogonal):
        return False
    return not board.path_clear(from_sq, to_sq)


# -- Attack detection -------------------------------------------------------


def _iter_attackers(board: Board, sq: Square, by_color: Color) -> Iterator[Square]:
    # Pawns of by_color attack sq from one rank behind it (relative to them).
    for df in (-1, 1):
        from_sq = sq.offset(df, -by_color.forward)
        if from_sq is not None and board[from_sq] == Piece(by_color, PieceType.PAWN):
            yield from_sq

    knight = Piece(by_color, PieceType.KNIGHT)
    for from_sq in _KNIGHT_TARGETS[sq.index]:
        if board[from_sq] == knight:
            yield from_sq

    king = Piece(by_color, PieceType.KING)
    for from_sq in _KING_TARGETS[sq.index]:
        if board[from_sq] == king:
            yield from_sq

    for rays, kinds in (
        (_BISHOP_RAYS[sq.index], _DIAGONAL_SLIDERS),
        (_ROOK_RAYS[sq.index], _ORTHOGONAL_SLIDERS),
    ):
        for ray in rays:
            for from_sq in ray:
                piece = board[from_sq]
                if piece is None:
                    continue
                if piece.color == by_color and piece.kind in kinds:
                    yield from_sq
                break


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    return next(_iter_attackers(board, sq, by_color), None) is not None


def attackers(board: Board, sq: Square, by_color: Color) -> list[Square]:
    """Squares of *by_color*'s pieces attacking *sq*."""
    return list(_iter_attackers(board, sq, by_color))
