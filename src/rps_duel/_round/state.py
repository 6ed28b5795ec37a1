# Area: Round
"""
rps_duel._round.state — Round state tracker
===========================================

Tracks the single live round: what each player has picked, whose
turn it is, and whether the round can be scored yet.

Nothing in here raises. Late or premature calls degrade to no-ops
or to None so the presentation layer can call freely.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import logging

from .enums import Move, Player, Result, RoundPhase
from .rules import evaluate

logger = logging.getLogger("rps_duel.round")

# Order in which moves are offered to the active player
MOVES: Tuple[Move, ...] = tuple(Move)


@dataclass
class RoundState:
    """
    State of one round between Player ONE and Player TWO.

    Attributes:
        first: Player ONE's selection (None until chosen)
        second: Player TWO's selection (None until chosen)
        active_player: The player currently offered moves
    """

    first: Optional[Move] = None
    second: Optional[Move] = None
    active_player: Player = Player.ONE

    @property
    def moves(self) -> Tuple[Move, ...]:
        return MOVES

    @property
    def phase(self) -> RoundPhase:
        chosen = (self.first is not None) + (self.second is not None)
        if chosen == 0:
            return RoundPhase.EMPTY
        if chosen == 1:
            return RoundPhase.ONE_CHOSEN
        return RoundPhase.COMPLETE

    def is_complete(self) -> bool:
        return self.first is not None and self.second is not None

    def selection_for(self, player: Player) -> Optional[Move]:
        """Get a player's selection, revealed or not."""
        return self.first if player == Player.ONE else self.second

    def record_selection(self, player: Player, move: Move) -> bool:
        """
        Record a player's move.

        A complete round ignores further input until reset. Either
        player may otherwise overwrite their own selection; turn order
        is only enforced by what the controller offers.

        Args:
            player: The player making the selection
            move: The chosen move

        Returns:
            True if the selection was recorded, False if it was ignored
        """
        if self.is_complete():
            logger.debug(
                f"Ignoring {move.value} from player {player.name}: round is complete"
            )
            return False

        before = self.phase
        if player == Player.ONE:
            self.first = move
        else:
            self.second = move

        # Only Player ONE acting with a recorded first move hands the turn over
        if self.first is not None and player == Player.ONE:
            self.active_player = Player.TWO
        else:
            self.active_player = Player.ONE

        if self.phase != before:
            logger.debug(f"Phase: {before.value} → {self.phase.value}")
        return True

    def evaluate_result(self) -> Optional[Result]:
        """Score the round from Player ONE's side, or None if incomplete."""
        return evaluate(self.first, self.second)

    def reset(self) -> None:
        """Clear both selections and give the turn back to Player ONE."""
        if self.phase != RoundPhase.EMPTY:
            logger.debug(f"Phase: {self.phase.value} → {RoundPhase.EMPTY.value}")
        self.first = None
        self.second = None
        self.active_player = Player.ONE
