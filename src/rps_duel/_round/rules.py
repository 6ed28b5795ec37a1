# Area: Round
"""
rps_duel._round.rules — Beats relation and result evaluation
============================================================

Pure functions over moves. Nothing here holds state.
"""

from typing import Optional

from .enums import Move, Outcome, Player, Result


# {move: the one move it beats}
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.PAPER: Move.ROCK,
    Move.SCISSORS: Move.PAPER,
}


def beats(move: Move, other: Move) -> bool:
    """Check whether `move` beats `other`."""
    return BEATS[move] == other


def evaluate(first: Optional[Move], second: Optional[Move]) -> Optional[Result]:
    """
    Evaluate a round from Player ONE's side.

    Args:
        first: Player ONE's move, or None if not chosen yet
        second: Player TWO's move, or None if not chosen yet

    Returns:
        The Result, or None while either move is missing
    """
    if first is None or second is None:
        return None

    if first == second:
        return Result.DRAW

    if beats(first, second):
        return Result.WIN

    return Result.LOSS


def outcome_for(result: Result, player: Player) -> Outcome:
    """Map a round result onto one player's perspective."""
    if result == Result.DRAW:
        return Outcome.DRAW
    won = result == Result.WIN
    if player == Player.TWO:
        won = not won
    return Outcome.WIN if won else Outcome.LOSE
