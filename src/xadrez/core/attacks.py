"""Attack detection: is a square attacked by a given color?

Every function takes the board explicitly so it answers equally for the
live board and for scratch copies made during legality checks.
"""

from __future__ import annotations

from xadrez.core.board import Board
from xadrez.core.enums import Color, PieceType
from xadrez.core.move_generator import (
    BISHOP_RAYS,
    KING_TARGETS,
    KNIGHT_TARGETS,
    PAWN_DIRECTION,
    ROOK_RAYS,
)
from xadrez.core.types import Square, in_bounds

_DIAGONAL_ATTACKERS = frozenset((PieceType.BISHOP, PieceType.QUEEN))
_ORTHOGONAL_ATTACKERS = frozenset((PieceType.ROOK, PieceType.QUEEN))


def is_square_attacked(board: Board, sq: Square, by_color: Color) -> bool:
    """Is *sq* attacked by any piece of *by_color*?"""
    return (
        _attacked_by_pawn(board, sq, by_color)
        or _attacked_by_stepper(board, KNIGHT_TARGETS[sq], by_color, PieceType.KNIGHT)
        or _attacked_by_stepper(board, KING_TARGETS[sq], by_color, PieceType.KING)
        or _attacked_by_slider(board, BISHOP_RAYS[sq], by_color, _DIAGONAL_ATTACKERS)
        or _attacked_by_slider(board, ROOK_RAYS[sq], by_color, _ORTHOGONAL_ATTACKERS)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent? False if it has no king."""
    king_sq = board.find_king(color)
    return king_sq is not None and is_square_attacked(board, king_sq, color.opposite)


# -- Attacker checks (private) ---------------------------------------------


def _attacked_by_pawn(board: Board, sq: Square, by_color: Color) -> bool:
    # An attacking pawn stands one step behind sq, seen from its own
    # direction of travel.
    row, col = sq
    pawn_row = row - PAWN_DIRECTION[by_color]
    for dc in (-1, 1):
        pawn_col = col + dc
        if not in_bounds(pawn_row, pawn_col):
            continue
        piece = board[(pawn_row, pawn_col)]
        if (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and piece.color == by_color
        ):
            return True
    return False


def _attacked_by_stepper(
    board: Board,
    origins: tuple[Square, ...],
    by_color: Color,
    piece_type: PieceType,
) -> bool:
    for from_sq in origins:
        piece = board[from_sq]
        if piece is not None and piece.piece_type == piece_type and piece.color == by_color:
            return True
    return False


def _attacked_by_slider(
    board: Board,
    rays: tuple[tuple[Square, ...], ...],
    by_color: Color,
    attackers: frozenset[PieceType],
) -> bool:
    for ray in rays:
        for from_sq in ray:
            piece = board[from_sq]
            if piece is None:
                continue
            if piece.color == by_color and piece.piece_type in attackers:
                return True
            break
    return False
