# Area: Round
"""
rps_duel._round — Round state and rules
=======================================

Leaf layer of the game: enums, the beats relation and the mutable
round state. The controller is the only consumer.
"""

from .enums import Move, Outcome, Player, Result, RoundPhase, StatusKind
from .rules import BEATS, beats, evaluate, outcome_for
from .state import MOVES, RoundState

__all__ = [
    "Move",
    "Outcome",
    "Player",
    "Result",
    "RoundPhase",
    "StatusKind",
    "BEATS",
    "beats",
    "evaluate",
    "outcome_for",
    "MOVES",
    "RoundState",
]
