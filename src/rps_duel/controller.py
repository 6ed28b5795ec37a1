# Area: Controller
"""
rps_duel.controller — Game controller
=====================================

The GameController is what a presentation layer instantiates. It owns
the single live round, decides what each player may see and pick, and
tells subscribers when the round has changed.

Usage
-----
    from rps_duel import GameController, Move, Player

    game = GameController()
    game.subscribe(lambda g: redraw(g.snapshot()))

    game.allowed_moves(Player.ONE)    # all three moves
    game.choose(Move.ROCK, Player.ONE)
    game.choose(Move.SCISSORS, Player.TWO)
    game.status(Player.ONE)           # Status(FINISHED, Outcome.WIN)
    game.reset()

Turn order is a soft gate: `allowed_moves` only offers moves to the
active player, but `choose` accepts any player until the round is
complete. Pass `strict_turns=True` to drop out-of-turn choices instead.
"""

from __future__ import annotations
from typing import Callable, List, Optional, Tuple
import logging

from ._round.enums import Move, Player, Result, RoundPhase
from ._round.rules import outcome_for
from ._round.state import RoundState
from .types import PlayerView, RoundSnapshot, Status, UNDEFINED, WAITING, YOUR_TURN

logger = logging.getLogger("rps_duel.controller")

Listener = Callable[["GameController"], None]


class GameController:
    """
    Turn-gated access to one round of Rock-Paper-Scissors.

    Every query is safe to call at any time and returns a defined value;
    every mutation leaves the round consistent for the next query.

    Attributes:
        strict_turns: If True, choices from a player who is not being
            offered moves are ignored
    """

    def __init__(self, strict_turns: bool = False, state: Optional[RoundState] = None):
        self.strict_turns = strict_turns
        self._state = state if state is not None else RoundState()
        self._listeners: List[Listener] = []

    # ── Queries ──────────────────────────────────────────────────

    @property
    def moves(self) -> Tuple[Move, ...]:
        return self._state.moves

    @property
    def active_player(self) -> Player:
        return self._state.active_player

    @property
    def phase(self) -> RoundPhase:
        return self._state.phase

    def is_complete(self) -> bool:
        return self._state.is_complete()

    def evaluate_result(self) -> Optional[Result]:
        return self._state.evaluate_result()

    def allowed_moves(self, player: Player) -> Tuple[Move, ...]:
        """
        Moves a player may pick right now.

        Returns:
            All moves for the active player of an unfinished round,
            otherwise an empty tuple
        """
        if self._state.active_player == player and not self._state.is_complete():
            return self._state.moves
        return ()

    def status(self, player: Player) -> Status:
        """
        Status of the round from one player's point of view.

        Returns:
            YOUR_TURN or WAITING while the round is open, FINISHED with the
            player's outcome once it is complete, UNDEFINED if a complete
            round could not be scored
        """
        if not self._state.is_complete():
            return YOUR_TURN if self._state.active_player == player else WAITING

        result = self._state.evaluate_result()
        if result is None:
            return UNDEFINED
        return Status.finished(outcome_for(result, player))

    def revealed_move(self, player: Player) -> Optional[Move]:
        """A player's move once the round is complete; hidden (None) before."""
        if self._state.is_complete():
            return self._state.selection_for(player)
        return None

    def snapshot(self) -> RoundSnapshot:
        """Capture both players' views in one immutable model."""
        return RoundSnapshot(
            phase=self._state.phase,
            active_player=self._state.active_player,
            is_complete=self._state.is_complete(),
            result=self._state.evaluate_result(),
            player_one=self._view(Player.ONE),
            player_two=self._view(Player.TWO),
        )

    def _view(self, player: Player) -> PlayerView:
        status = self.status(player)
        return PlayerView(
            player=player,
            status=status.kind,
            outcome=status.outcome,
            allowed_moves=self.allowed_moves(player),
            revealed_move=self.revealed_move(player),
        )

    # ── Mutations ────────────────────────────────────────────────

    def choose(self, move: Move, player: Player) -> None:
        """Forward a player's choice to the round, then notify subscribers."""
        if self.strict_turns and not self.is_complete() and not self.allowed_moves(player):
            logger.warning(f"Ignoring out-of-turn choice from player {player.name}")
        elif self._state.record_selection(player, move):
            logger.info(f"Player {player.name} chose {move.value}")
            if self._state.is_complete():
                logger.info(f"Round complete: {self._state.evaluate_result().value}")
        self._notify()

    def reset(self) -> None:
        """Start a fresh round with Player ONE to move."""
        self._state.reset()
        logger.info("Round reset")
        self._notify()

    # ── Change notification ──────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callable run after every choose() and reset().

        Args:
            listener: Called with this controller as its only argument

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
