"""Game state machine — turn alternation, selection, move commit, checkmate."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from xadrez.core.board import Board
from xadrez.core.enums import Color, GameResult, PieceType
from xadrez.core.legality import legal_targets
from xadrez.core.move import Move
from xadrez.core.piece import Piece
from xadrez.core.rules import Rules
from xadrez.core.types import Square, is_valid_square, square_name
from xadrez.game.interfaces import GameOptions, GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    piece: Piece
    captured: Piece | None = None
    promoted: bool = False
    gave_check: bool = False


@dataclass
class GameState:
    """Owns the live board and the side to move.

    Invalid input (empty squares, opponent pieces, targets outside the legal
    set) is ignored rather than raised. This is a pure data/logic class — no
    threading, no UI.
    """

    board: Board = field(default_factory=Board.initial)
    turn: Color = Color.WHITE
    options: GameOptions = field(default_factory=GameOptions)
    phase: GamePhase = field(default=GamePhase.AWAITING_MOVE, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)
    _selection: Square | None = field(default=None, init=False, repr=False)
    _selected_targets: frozenset[Square] = field(
        default=frozenset(), init=False, repr=False
    )

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, square: Square) -> set[Square]:
        """Legal destinations for the side-to-move's piece on *square*."""
        if not is_valid_square(square):
            return set()
        piece = self.board[square]
        if piece is None or piece.color != self.turn:
            return set()
        return legal_targets(self.board, square)

    @property
    def current_selection(self) -> Square | None:
        return self._selection

    @property
    def selected_targets(self) -> frozenset[Square]:
        """Legal destinations of the selected piece (empty when none)."""
        return self._selected_targets

    @property
    def is_check(self) -> bool:
        return Rules.is_in_check(self.board, self.turn)

    @property
    def is_checkmate(self) -> bool:
        """Whether the side to move is checkmated on the current board."""
        return Rules.is_checkmate(self.board, self.turn)

    @property
    def winner(self) -> Color | None:
        return self.turn.opposite if self.is_checkmate else None

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> MoveRecord | None:
        return self.move_history[-1] if self.move_history else None

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, square: Square) -> bool:
        """Select a piece of the side to move when nothing is selected."""
        if self.is_game_over or self._selection is not None:
            return False
        return self._select(square)

    def clear_selection(self) -> None:
        self._selection = None
        self._selected_targets = frozenset()

    def click(self, square: Square) -> bool:
        """Board click: select, reselect, commit or deselect.

        Returns True if the click committed a move.
        """
        if self.is_game_over or not is_valid_square(square):
            return False
        if self._selection is None:
            self._select(square)
            return False

        target = self.board[square]
        if target is not None and target.color == self.turn:
            self._select(square)
            return False
        return self.commit(self._selection, square)

    # ── Move application ─────────────────────────────────────────────────

    def commit(self, from_sq: Square, to_sq: Square) -> bool:
        """Apply ``from_sq -> to_sq`` if legal for the side to move.

        Any attempt clears the selection; an illegal one changes nothing
        else.
        """
        if self.is_game_over:
            return False

        if from_sq == self._selection:
            allowed: set[Square] | frozenset[Square] = self._selected_targets
        else:
            allowed = self.legal_moves(from_sq)
        self.clear_selection()

        if to_sq not in allowed:
            _LOGGER.debug("Rejected move %s -> %s", from_sq, to_sq)
            return False

        self._apply(Move(from_sq, to_sq))
        return True

    # ── Internal ─────────────────────────────────────────────────────────

    def _select(self, square: Square) -> bool:
        if not is_valid_square(square):
            return False
        piece = self.board[square]
        if piece is None or piece.color != self.turn:
            return False
        self._selection = square
        self._selected_targets = frozenset(legal_targets(self.board, square))
        return True

    def _apply(self, move: Move) -> None:
        board = self.board
        piece = board[move.from_sq]
        assert piece is not None
        captured = board[move.to_sq]

        board[move.to_sq] = piece
        board[move.from_sq] = None

        promoted = Rules.is_promotion(piece, move.to_sq)
        if promoted:
            board[move.to_sq] = Piece(piece.color, PieceType.QUEEN)

        self.turn = self.turn.opposite
        gave_check = Rules.is_in_check(board, self.turn)
        self.move_history.append(
            MoveRecord(
                move=move,
                piece=piece,
                captured=captured,
                promoted=promoted,
                gave_check=gave_check,
            )
        )
        _LOGGER.debug(
            "%s played %s%s",
            piece.color,
            move,
            " (promotion)" if promoted else "",
        )

        if gave_check:
            self._check_game_over()

    def _check_game_over(self) -> None:
        if Rules.has_legal_move(self.board, self.turn):
            return
        self.result = GameResult.win_for(self.turn.opposite)
        _LOGGER.info(
            "Checkmate: %s wins (king on %s)",
            self.turn.opposite,
            _king_name(self.board, self.turn),
        )
        if self.options.lock_on_checkmate:
            self.phase = GamePhase.GAME_OVER


def _king_name(board: Board, color: Color) -> str:
    king_sq = board.find_king(color)
    return square_name(king_sq) if king_sq is not None else "?"
