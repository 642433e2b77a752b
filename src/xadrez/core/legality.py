"""Legality filter: prune pseudo-legal targets that self-check or take a king."""

from __future__ import annotations

from enum import Enum

from xadrez.core.attacks import is_square_attacked
from xadrez.core.board import Board
from xadrez.core.enums import PieceType
from xadrez.core.move import Move
from xadrez.core.move_generator import MoveGenerator
from xadrez.core.types import Square


class MoveSafety(Enum):
    """Outcome of simulating a move on a scratch board."""

    SAFE = "safe"
    EXPOSES_KING = "exposes_king"
    # The mover's king is not on the board, so safety cannot be verified.
    KING_MISSING = "king_missing"
    NO_PIECE = "no_piece"


def check_move_safety(board: Board, move: Move) -> MoveSafety:
    """Play *move* on a copy of *board* and report the mover's king safety.

    *board* itself is never modified.
    """
    moving = board[move.from_sq]
    if moving is None:
        return MoveSafety.NO_PIECE

    scratch = board.copy()
    scratch[move.to_sq] = moving
    scratch[move.from_sq] = None

    king_sq = scratch.find_king(moving.color)
    if king_sq is None:
        return MoveSafety.KING_MISSING
    if is_square_attacked(scratch, king_sq, moving.color.opposite):
        return MoveSafety.EXPOSES_KING
    return MoveSafety.SAFE


def would_leave_king_in_check(board: Board, move: Move) -> bool:
    """True unless the move is verifiably safe for the mover's king."""
    return check_move_safety(board, move) is not MoveSafety.SAFE


def legal_targets(board: Board, sq: Square) -> set[Square]:
    """Fully legal destinations for the piece on *sq*.

    Pseudo-legal targets, minus squares holding a king, minus targets that
    would leave the mover's king attacked.
    """
    candidates = MoveGenerator(board).pseudo_legal_targets(sq)
    legal: set[Square] = set()
    for to_sq in candidates:
        target = board[to_sq]
        if target is not None and target.piece_type == PieceType.KING:
            continue
        if would_leave_king_in_check(board, Move(sq, to_sq)):
            continue
        legal.add(to_sq)
    return legal
