# Area: Presentation
"""
rps_duel.cli — Command-line interface
=====================================

Hot-seat Rock-Paper-Scissors: both players share one terminal and
type their moves in turn. Moves are read without echo when stdin is a
terminal, so the second player cannot see what the first one picked.

Usage:
    rps-duel                          # Play with defaults
    rps-duel --style word             # Show Rock/Paper/Scissors instead of symbols
    rps-duel --config config.json     # Load settings from a JSON file
    python -m rps_duel --strict-turns --log-level INFO

Settings can also come from environment variables or a .env file:
    RPS_MOVE_STYLE=word RPS_LOG_LEVEL=INFO rps-duel
"""

import argparse
import getpass
import logging
import sys
from typing import Callable, List, Optional

from ._config import LOG_LEVELS, load_config
from ._round.enums import Move, Player, RoundPhase
from ._shared.logging_config import log_error, setup_logging
from .controller import GameController
from .errors import ConfigError, InvalidMoveError
from .labels import MOVE_STYLES, move_label, parse_move, player_name, status_text

logger = logging.getLogger("rps_duel.cli")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="rps-duel",
        description="Two-player Rock-Paper-Scissors on one terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rps-duel
  rps-duel --style word
  rps-duel --config config.json --strict-turns
  RPS_LOG_LEVEL=INFO rps-duel --log-file rps_duel.log
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--style",
        choices=MOVE_STYLES,
        help="How moves are shown (default: emoji)",
    )

    parser.add_argument(
        "--strict-turns",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Ignore moves typed out of turn instead of accepting them (default: from config)",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write JSON logs to this file",
    )

    return parser.parse_args(argv)


def default_reader() -> Callable[[str], str]:
    """Hidden input on a terminal, plain input otherwise."""
    if sys.stdin.isatty():
        return getpass.getpass
    return input


class HotSeatSession:
    """
    Runs rounds on a shared terminal.

    The session only talks to the controller: it asks the active player
    for a move, forwards it, and redraws whenever the controller reports
    a change.
    """

    def __init__(
        self,
        controller: GameController,
        style: str = "emoji",
        read: Optional[Callable[[str], str]] = None,
        ask: Optional[Callable[[str], str]] = None,
        write: Callable[[str], None] = print,
    ):
        """
        Args:
            controller: The game to drive
            style: Move style passed to move_label()
            read: Reads a move; defaults to hidden input on a terminal
            ask: Reads the play-again answer
            write: Writes a line of output
        """
        self.controller = controller
        self.style = style
        self.read = read or default_reader()
        self.ask = ask or input
        self.write = write
        self.rounds_played = 0
        controller.subscribe(self._on_change)

    def prompt_for(self, player: Player) -> Move:
        """Keep asking a player until they type a valid move."""
        options = ", ".join(move_label(m, "word").lower() for m in self.controller.allowed_moves(player))
        while True:
            raw = self.read(f"{player_name(player)}, choose ({options}): ")
            try:
                return parse_move(raw)
            except InvalidMoveError as e:
                self.write(str(e))

    def play_round(self) -> None:
        """Collect one move from each player until the round is complete."""
        while not self.controller.is_complete():
            offered = [p for p in Player if self.controller.allowed_moves(p)]
            if not offered:
                logger.error("Round is open but no player is offered moves")
                return
            for player in offered:
                self.controller.choose(self.prompt_for(player), player)
        self.rounds_played += 1

    def render_result(self) -> None:
        self.write("")
        for player in Player:
            move = self.controller.revealed_move(player)
            shown = move_label(move, self.style) if move is not None else ""
            self.write(f"{player_name(player)}: {shown}  {status_text(self.controller.status(player))}")
        self.write("")

    def _on_change(self, controller: GameController) -> None:
        if controller.is_complete():
            self.render_result()
        elif controller.phase == RoundPhase.EMPTY:
            self.write(f"New round. {player_name(controller.active_player)} goes first.")

    def wants_retry(self) -> bool:
        answer = self.ask("Play again? [y/N] ")
        return answer.strip().lower() in ("y", "yes")

    def run(self) -> int:
        """Play rounds until the players decline a retry."""
        self.write(f"New round. {player_name(self.controller.active_player)} goes first.")
        while True:
            self.play_round()
            if not self.wants_retry():
                return self.rounds_played
            self.controller.reset()


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        setup_logging()
        log_error(e)
        return EXIT_CONFIG_ERROR

    setup_logging(
        level=args.log_level or config.log_level,
        log_file_path=args.log_file or config.log_file,
    )

    strict_turns = config.strict_turns if args.strict_turns is None else args.strict_turns
    controller = GameController(strict_turns=strict_turns)
    session = HotSeatSession(controller, style=args.style or config.move_style)

    try:
        rounds = session.run()
    except (EOFError, KeyboardInterrupt):
        print("\nBye.")
        return EXIT_OK

    logger.info(f"Session ended after {rounds} round(s)")
    return EXIT_OK
