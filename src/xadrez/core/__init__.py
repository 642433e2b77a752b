"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from xadrez.core import Board, Rules, Color, legal_targets, parse_square

    board = Board.initial()
    print(legal_targets(board, parse_square("g1")))
    print(Rules.legal_moves(board, Color.WHITE))
"""

from xadrez.core.attacks import is_in_check, is_square_attacked
from xadrez.core.board import Board
from xadrez.core.enums import Color, GameResult, PieceType
from xadrez.core.legality import (
    MoveSafety,
    check_move_safety,
    legal_targets,
    would_leave_king_in_check,
)
from xadrez.core.move import Move
from xadrez.core.move_generator import MoveGenerator
from xadrez.core.piece import Piece
from xadrez.core.rules import Rules
from xadrez.core.types import (
    Square,
    col_of,
    in_bounds,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameResult",
    "PieceType",
    # Types / helpers
    "Square",
    "col_of",
    "in_bounds",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Attacks / legality
    "MoveSafety",
    "check_move_safety",
    "is_in_check",
    "is_square_attacked",
    "legal_targets",
    "would_leave_king_in_check",
]
