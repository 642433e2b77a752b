"""GameController — the central orchestrator of a game.

Coordinates: Players, GameState.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from xadrez.core.enums import Color
from xadrez.core.move import Move
from xadrez.core.types import Square
from xadrez.game.interfaces import GameOptions, IGameController, IPlayer
from xadrez.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameState], None]
TurnCallback = Callable[[Color], None]  # side now to move
SelectionCallback = Callable[[Square | None, frozenset[Square]], None]
CheckmateCallback = Callable[[Color], None]  # winner


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_checkmate: list[CheckmateCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Orchestrates a full game: routes clicks, applies moves, switches
    turns, lets an AI reply and notifies listeners.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread).
    """

    __slots__ = ("_state", "_players", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._players: dict[Color, IPlayer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._state.turn)

    def player(self, color: Color) -> IPlayer | None:
        return self._players.get(color)

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        options: GameOptions | None = None,
    ) -> None:
        self._players = {Color.WHITE: white, Color.BLACK: black}
        self._state = GameState(options=options or GameOptions())
        _LOGGER.debug("New game: %s vs %s", white.name, black.name)

        self._emit_turn(self._state.turn)
        self._emit_selection()
        # An AI playing white opens the game.
        if self._state.options.ai_reply:
            self.play_ai_turn()

    def click(self, square: Square) -> bool:
        cp = self.current_player
        if cp is not None and not cp.is_human:
            return False

        before = self._state.current_selection
        moved = self._state.click(square)
        if moved:
            self._after_move(by_human=True)
        elif self._state.current_selection != before:
            self._emit_selection()
        return moved

    def select(self, square: Square) -> bool:
        selected = self._state.select(square)
        if selected:
            self._emit_selection()
        return selected

    def submit_move(self, move: Move) -> bool:
        had_selection = self._state.current_selection is not None
        if not self._state.commit(move.from_sq, move.to_sq):
            if had_selection:
                self._emit_selection()
            return False
        cp = self.player(self._state.turn.opposite)
        self._after_move(by_human=cp is None or cp.is_human)
        return True

    def play_ai_turn(self) -> bool:
        cp = self.current_player
        if cp is None or cp.is_human or self._state.is_game_over:
            return False
        move = cp.choose_move(self._state)
        if move is None:
            return False
        if not self._state.commit(move.from_sq, move.to_sq):
            _LOGGER.warning("%s proposed illegal move %s", cp.name, move)
            return False
        self._after_move(by_human=False)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _after_move(self, *, by_human: bool) -> None:
        record = self._state.last_move
        assert record is not None
        self._emit_move(record)
        self._emit_selection()
        self._emit_turn(self._state.turn)

        if record.gave_check and self._state.is_checkmate:
            self._emit_checkmate(self._state.turn.opposite)

        if by_human and self._state.options.ai_reply:
            self.play_ai_turn()

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_turn(self, color: Color) -> None:
        for cb in self.events.on_turn_changed:
            cb(color)

    def _emit_selection(self) -> None:
        selection = self._state.current_selection
        targets = self._state.selected_targets
        for cb in self.events.on_selection_changed:
            cb(selection, targets)

    def _emit_checkmate(self, winner: Color) -> None:
        for cb in self.events.on_checkmate:
            cb(winner)
