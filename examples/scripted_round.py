"""
scripted_round.py — Drive a round the way a GUI would
=====================================================

A presentation layer only needs the controller: it draws each player's
half of the screen from a snapshot and forwards button presses back.
This script plays two rounds with fixed moves and "redraws" after every
change by printing the snapshot.

Run with:  python examples/scripted_round.py
"""

import json
import logging

from rps_duel import GameController, Move, Player, move_label, player_name, status_text

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)


def redraw(game: GameController) -> None:
    """Stand-in for a screen refresh."""
    for player in (Player.TWO, Player.ONE):
        buttons = " ".join(move_label(m) for m in game.allowed_moves(player))
        move = game.revealed_move(player)
        print(f"  {player_name(player):9} │ {move_label(move) if move else '  '} │ "
              f"{status_text(game.status(player)):10} │ {buttons}")
    print(f"  snapshot: {json.dumps(game.snapshot().model_dump(mode='json'))}")
    print()


def main() -> None:
    game = GameController()
    game.subscribe(redraw)

    print("Round 1: Rock vs Scissors")
    redraw(game)
    game.choose(Move.ROCK, Player.ONE)
    game.choose(Move.SCISSORS, Player.TWO)

    # Late input is ignored once both players have committed
    game.choose(Move.PAPER, Player.TWO)

    print("Retry → Round 2: Paper vs Paper")
    game.reset()
    game.choose(Move.PAPER, Player.ONE)
    game.choose(Move.PAPER, Player.TWO)


if __name__ == "__main__":
    main()
