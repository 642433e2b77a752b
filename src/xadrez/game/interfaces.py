"""Abstract interfaces and options for the game layer.

Follows Dependency Inversion: the high-level GameController depends on
these ABCs, not on concrete player implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from xadrez.core.enums import Color

if TYPE_CHECKING:
    from xadrez.core.move import Move
    from xadrez.core.types import Square
    from xadrez.game.state import GameState


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    AWAITING_MOVE = auto()
    GAME_OVER = auto()


# ── Options ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameOptions:
    """Behaviour switches for a single game.

    Args:
        lock_on_checkmate: Enter ``GAME_OVER`` on checkmate and ignore any
            further input. When False, checkmate is only reported and play
            may continue.
        ai_reply: Let the controller answer a human move immediately when
            the next player is an AI.
    """

    lock_on_checkmate: bool = True
    ai_reply: bool = True


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IPlayer(ABC):
    """Interface for a game participant (human or AI)."""

    @property
    @abstractmethod
    def color(self) -> Color: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def is_human(self) -> bool: ...

    @abstractmethod
    def choose_move(self, state: GameState) -> Move | None:
        """Pick a move for the current position.

        Humans return ``None`` (their moves arrive through the UI).
        """


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        white: IPlayer,
        black: IPlayer,
        options: GameOptions | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def click(self, square: Square) -> bool:
        """Handle a board click. Returns True if a move was made."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def play_ai_turn(self) -> bool:
        """Let the AI to move play once. Returns True if it moved."""
