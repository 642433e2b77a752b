"""High-level chess rules: check, checkmate, promotion."""

from __future__ import annotations

from xadrez.core import attacks
from xadrez.core.board import Board
from xadrez.core.enums import Color, PieceType
from xadrez.core.legality import legal_targets
from xadrez.core.move import Move
from xadrez.core.piece import Piece
from xadrez.core.types import Square, row_of

PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - Checkmate is the only terminal condition.
    # - Stalemate is not distinguished (a side with no moves but not in
    #   check is simply not mated).

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        return attacks.is_in_check(board, color)

    @staticmethod
    def legal_moves(board: Board, color: Color) -> list[Move]:
        """Every legal move for *color*, ordered by origin then target."""
        moves: list[Move] = []
        for from_sq in board.pieces(color):
            for to_sq in sorted(legal_targets(board, from_sq)):
                moves.append(Move(from_sq, to_sq))
        return moves

    @staticmethod
    def has_legal_move(board: Board, color: Color) -> bool:
        return any(legal_targets(board, sq) for sq in board.pieces(color))

    @staticmethod
    def is_checkmate(board: Board, color: Color) -> bool:
        if not Rules.is_in_check(board, color):
            return False
        return not Rules.has_legal_move(board, color)

    @staticmethod
    def is_promotion(piece: Piece, to_sq: Square) -> bool:
        """Pawn arriving on its far rank (row 0 for white, row 7 for black)."""
        return (
            piece.piece_type == PieceType.PAWN
            and row_of(to_sq) == PROMOTION_ROW[piece.color]
        )
