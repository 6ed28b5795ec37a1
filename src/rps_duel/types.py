"""
rps_duel.types — Read models handed to the presentation layer
=============================================================

`Status` is what `GameController.status()` returns for one player.
`RoundSnapshot` bundles everything a screen needs to draw both
players at once:

    snap = controller.snapshot()
    snap.player_one.allowed_moves    # (Move.ROCK, Move.PAPER, Move.SCISSORS)
    snap.model_dump(mode="json")     # plain dict with string values
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ._round.enums import Move, Outcome, Player, Result, RoundPhase, StatusKind


@dataclass(frozen=True)
class Status:
    """
    One player's status.

    Attributes:
        kind: WAITING, YOUR_TURN, FINISHED or UNDEFINED
        outcome: The player's outcome, set only when kind is FINISHED
    """

    kind: StatusKind
    outcome: Optional[Outcome] = None

    @classmethod
    def finished(cls, outcome: Outcome) -> "Status":
        return cls(kind=StatusKind.FINISHED, outcome=outcome)


WAITING = Status(StatusKind.WAITING)
YOUR_TURN = Status(StatusKind.YOUR_TURN)
UNDEFINED = Status(StatusKind.UNDEFINED)


class PlayerView(BaseModel):
    """What one player's half of the screen shows."""
    model_config = ConfigDict(frozen=True)

    player: Player
    status: StatusKind
    outcome: Optional[Outcome] = None
    allowed_moves: Tuple[Move, ...] = ()
    revealed_move: Optional[Move] = None


class RoundSnapshot(BaseModel):
    """Immutable picture of the round at one point in time."""
    model_config = ConfigDict(frozen=True)

    phase: RoundPhase
    active_player: Player
    is_complete: bool
    result: Optional[Result] = None
    player_one: PlayerView
    player_two: PlayerView

    def view_for(self, player: Player) -> PlayerView:
        return self.player_one if player == Player.ONE else self.player_two
