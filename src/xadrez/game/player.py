"""Concrete player implementations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from xadrez.core.enums import Color
from xadrez.engine import DefaultEngine
from xadrez.game.interfaces import IPlayer

if TYPE_CHECKING:
    from xadrez.core.move import Move
    from xadrez.engine.search import IEngine
    from xadrez.game.state import GameState


class HumanPlayer(IPlayer):
    """A human participant — moves come from board clicks.

    ``choose_move`` returns ``None`` because humans select moves interactively.
    """

    __slots__ = ("_color", "_name")

    def __init__(self, color: Color, name: str = "") -> None:
        self._color = color
        self._name = name or f"Player ({color})"

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return True

    def choose_move(self, state: GameState) -> Move | None:
        return None  # Human moves arrive via controller.click()


class AIPlayer(IPlayer):
    """An AI participant that delegates move choice to an engine.

    Args:
        color: Side the AI plays.
        name: Display name.
        engine: Any :class:`IEngine`; defaults to the random engine.
    """

    __slots__ = ("_color", "_name", "_engine")

    def __init__(
        self,
        color: Color,
        name: str = "Engine",
        engine: IEngine | None = None,
    ) -> None:
        self._color = color
        self._name = name
        self._engine = engine if engine is not None else DefaultEngine()

    @property
    def color(self) -> Color:
        return self._color

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_human(self) -> bool:
        return False

    def choose_move(self, state: GameState) -> Move | None:
        return self._engine.search(state.board, self._color).best_move
