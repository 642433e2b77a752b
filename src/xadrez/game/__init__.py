"""Game management layer — controller, players, state machine.

Quick start::

    from xadrez.core import Color, parse_square
    from xadrez.game import AIPlayer, GameController, HumanPlayer

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=AIPlayer(Color.BLACK),
    )
    ctrl.click(parse_square("e2"))
    ctrl.click(parse_square("e4"))  # the AI replies immediately

The Qt signal bridge lives in :mod:`xadrez.game.qt_bridge` and is not
imported here, so the game layer runs without a Qt installation.
"""

from xadrez.game.controller import GameController, GameEvents
from xadrez.game.interfaces import (
    GameOptions,
    GamePhase,
    IGameController,
    IPlayer,
)
from xadrez.game.player import AIPlayer, HumanPlayer
from xadrez.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameOptions",
    "GamePhase",
    "IGameController",
    "IPlayer",
    # Concrete
    "AIPlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
]
