"""Text-mode driver for playing a game from a terminal."""

import logging
import sys
from typing import Iterable, Optional, TextIO
from baduk.game import GoGame

logger = logging.getLogger(__name__)

HELP = "Commands: <row> <col> | pass | undo | resign | help | quit"


def render(game: GoGame, show_coordinates: bool = True) -> str:
    """Render the board with an optional coordinate frame.

    Args:
        game: Game to render
        show_coordinates: Whether to label rows and columns

    Returns:
        Multi-line board text
    """
    rows = str(game.board).split("\n")
    if not show_coordinates:
        return "\n".join(rows)

    width = len(str(game.board_size - 1))
    header = " " * (width + 1) + " ".join(str(col % 10) for col in range(game.board_size))
    lines = [header]
    for index, line in enumerate(rows):
        lines.append(f"{index:>{width}} {line}")
    return "\n".join(lines)


def describe(game: GoGame) -> str:
    """One-line summary of whose turn it is, or the result."""
    score = game.get_score()
    tally = f"(black {score.black}, white {score.white})"
    if game.is_game_over():
        winner = game.get_winner()
        result = f"{winner.name.capitalize()} wins" if winner else "Draw"
        return f"Game over: {result} {tally}"
    return f"{game.get_current_player().name.capitalize()} to play {tally}"


def handle_command(game: GoGame, command: str) -> Optional[str]:
    """Apply one command to the game.

    Args:
        game: Game to update
        command: Line typed by the player

    Returns:
        Message to show, or None to stop the loop
    """
    words = command.strip().lower().split()
    if not words:
        return ""

    action = words[0]
    if action in ("quit", "exit"):
        return None
    if action == "help":
        return HELP
    if action == "pass":
        game.pass_turn()
        return "Passed"
    if action == "undo":
        return "Undone" if game.undo_move() else "Nothing to undo"
    if action == "resign":
        game.resign(game.get_current_player())
        return "Resigned"

    if len(words) != 2:
        return f"Unknown command: {command.strip()}"
    try:
        row, col = int(words[0]), int(words[1])
    except ValueError:
        return f"Unknown command: {command.strip()}"

    if not game.make_move(row, col):
        return f"Illegal move: {row} {col}"
    return ""


def run(game: GoGame, lines: Iterable[str], out: TextIO = sys.stdout,
        show_coordinates: bool = True) -> GoGame:
    """Read commands until input ends or the player quits.

    Args:
        game: Game to play
        lines: Source of command lines
        out: Stream for board and messages
        show_coordinates: Whether to label rows and columns

    Returns:
        The game in its final state
    """
    print(render(game, show_coordinates), file=out)
    print(describe(game), file=out)

    for line in lines:
        message = handle_command(game, line)
        if message is None:
            break
        if message:
            print(message, file=out)
        print(render(game, show_coordinates), file=out)
        print(describe(game), file=out)

    logger.debug("Console finished after %d placement(s)", len(game.history))
    return game
