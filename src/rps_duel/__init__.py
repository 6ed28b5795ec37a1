"""
rps_duel — Two-player Rock-Paper-Scissors
=========================================

A single round of Rock-Paper-Scissors between two players sharing one
device. Each player commits a move blind; once both have chosen, the
moves are revealed and the round is scored.

Quick Start:
    from rps_duel import GameController, Move, Player

    game = GameController()
    game.choose(Move.ROCK, Player.ONE)
    game.choose(Move.SCISSORS, Player.TWO)
    game.evaluate_result()            # Result.WIN
    game.status(Player.TWO)           # Status(FINISHED, Outcome.LOSE)

Presentation layers redraw from `game.snapshot()` after every change,
either by querying after each call or by registering a listener:

    unsubscribe = game.subscribe(lambda g: redraw(g.snapshot()))

Play in a terminal:
    rps-duel
    python -m rps_duel --style word
"""

from ._round.enums import Move, Outcome, Player, Result, RoundPhase, StatusKind
from ._round.rules import BEATS, beats
from .controller import GameController
from .errors import ConfigError, InvalidMoveError, RpsDuelError
from .labels import move_label, parse_move, player_name, status_text
from .types import PlayerView, RoundSnapshot, Status

__all__ = [
    # Main classes
    "GameController",
    # Enums
    "Move",
    "Player",
    "Result",
    "Outcome",
    "RoundPhase",
    "StatusKind",
    # Rules
    "BEATS",
    "beats",
    # Read models
    "Status",
    "PlayerView",
    "RoundSnapshot",
    # Labels
    "move_label",
    "parse_move",
    "player_name",
    "status_text",
    # Errors
    "RpsDuelError",
    "InvalidMoveError",
    "ConfigError",
]
__version__ = "1.0.0"
