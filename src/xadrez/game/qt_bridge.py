"""Qt bridge exposing a GameController to a Qt presentation layer."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from xadrez.core.enums import Color
from xadrez.core.types import Square, make_square
from xadrez.game.controller import GameController
from xadrez.game.interfaces import GameOptions, IPlayer
from xadrez.game.player import HumanPlayer
from xadrez.game.state import GameState, MoveRecord


class GameBridge(QObject):
    """Relays controller events as Qt signals.

    Signals carry plain values so views never touch the board directly:
    ``move_made(record)``, ``turn_changed(color)``,
    ``selection_changed(square_or_None, targets)`` and ``checkmate(winner)``.
    """

    move_made = pyqtSignal(object)
    turn_changed = pyqtSignal(int)
    selection_changed = pyqtSignal(object, object)
    checkmate = pyqtSignal(int)

    __slots__ = ("_controller",)

    def __init__(self, controller: GameController | None = None) -> None:
        super().__init__()
        self._controller = controller if controller is not None else GameController()
        events = self._controller.events
        events.on_move.append(self._relay_move)
        events.on_turn_changed.append(lambda color: self.turn_changed.emit(int(color)))
        events.on_selection_changed.append(self.selection_changed.emit)
        events.on_checkmate.append(lambda winner: self.checkmate.emit(int(winner)))

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def state(self) -> GameState:
        return self._controller.state

    @pyqtSlot(int, int)
    def click(self, row: int, col: int) -> None:
        """Forward a click on board cell (*row*, *col*)."""
        self._controller.click(make_square(row, col))

    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        options: GameOptions | None = None,
    ) -> None:
        """Start over; missing players default to humans."""
        self._controller.new_game(
            white or HumanPlayer(Color.WHITE),
            black or HumanPlayer(Color.BLACK),
            options,
        )

    def legal_moves(self, square: Square) -> set[Square]:
        return self._controller.state.legal_moves(square)

    def _relay_move(self, record: MoveRecord, _state: GameState) -> None:
        self.move_made.emit(record)
