# Area: Presentation
"""
rps_duel.labels — Display vocabulary
====================================

Maps moves, players and statuses onto the strings a screen shows,
and parses what a person types back into a Move.

Two move styles are available:
    "emoji" -> ✊🏽 / 👋🏽 / ✌🏽
    "word"  -> Rock / Paper / Scissors
"""

from typing import Dict

from ._round.enums import Move, Outcome, Player, StatusKind
from .errors import InvalidMoveError
from .types import Status

MOVE_STYLES = ("emoji", "word")

MOVE_SYMBOLS: Dict[Move, str] = {
    Move.ROCK: "✊🏽",
    Move.PAPER: "👋🏽",
    Move.SCISSORS: "✌🏽",
}

MOVE_WORDS: Dict[Move, str] = {
    Move.ROCK: "Rock",
    Move.PAPER: "Paper",
    Move.SCISSORS: "Scissors",
}

PLAYER_NAMES: Dict[Player, str] = {
    Player.ONE: "Player 1",
    Player.TWO: "Player 2",
}

OUTCOME_TEXT: Dict[Outcome, str] = {
    Outcome.WIN: "You Win!",
    Outcome.LOSE: "You Lose!",
    Outcome.DRAW: "Draw!",
}

# Empty string marks "your turn"; the buttons speak for themselves
WAITING_TEXT = "..."
YOUR_TURN_TEXT = ""
UNDEFINED_TEXT = "Undefined State"

# Everything parse_move() accepts, lowercased
_ALIASES: Dict[str, Move] = {}
for _move in Move:
    _ALIASES[_move.value] = _move
    _ALIASES[_move.value[0]] = _move
    _ALIASES[MOVE_SYMBOLS[_move]] = _move
    # Skin tone modifier dropped
    _ALIASES[MOVE_SYMBOLS[_move][0]] = _move


def move_label(move: Move, style: str = "emoji") -> str:
    """Render a move in the given style ("emoji" or "word")."""
    if style == "word":
        return MOVE_WORDS[move]
    return MOVE_SYMBOLS[move]


def player_name(player: Player) -> str:
    return PLAYER_NAMES[player]


def status_text(status: Status) -> str:
    """Text shown under a player's half of the screen."""
    if status.kind == StatusKind.YOUR_TURN:
        return YOUR_TURN_TEXT
    if status.kind == StatusKind.WAITING:
        return WAITING_TEXT
    if status.kind == StatusKind.FINISHED and status.outcome is not None:
        return OUTCOME_TEXT[status.outcome]
    return UNDEFINED_TEXT


def parse_move(text: str) -> Move:
    """
    Parse typed input into a Move.

    Accepts the move name, its first letter or its symbol, ignoring
    case and surrounding whitespace.

    Raises:
        InvalidMoveError: If the text names no move
    """
    move = _ALIASES.get(text.strip().lower())
    if move is None:
        raise InvalidMoveError(text)
    return move
