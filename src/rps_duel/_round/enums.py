# Area: Round
"""
rps_duel._round.enums — Round Enums
===================================

Defines the moves, players, results and phases used by the round
state and the controller.
"""

from enum import Enum


class Move(Enum):
    """The three moves a player can commit to."""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


class Player(Enum):
    """The two seats at the table."""
    ONE = "one"
    TWO = "two"


class Result(Enum):
    """
    Result of a complete round, always from Player ONE's side.

    WIN  -> Player ONE's move beats Player TWO's
    LOSS -> Player TWO's move beats Player ONE's
    DRAW -> both picked the same move
    """
    WIN = "win"
    LOSS = "loss"
    DRAW = "draw"


class Outcome(Enum):
    """A result as seen by one particular player."""
    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"


class RoundPhase(Enum):
    """
    Phases of a round.

    EMPTY -> ONE_CHOSEN (first selection recorded)
    ONE_CHOSEN -> COMPLETE (second selection recorded)
    COMPLETE -> EMPTY (reset only)
    """
    EMPTY = "EMPTY"
    ONE_CHOSEN = "ONE_CHOSEN"
    COMPLETE = "COMPLETE"


class StatusKind(Enum):
    """What a player's status line should convey."""
    WAITING = "WAITING"
    YOUR_TURN = "YOUR_TURN"
    FINISHED = "FINISHED"
    UNDEFINED = "UNDEFINED"
