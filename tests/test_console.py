import io

from baduk.board import Stone
from baduk.console import describe, handle_command, render, run
from baduk.game import GoGame


def test_render_with_and_without_coordinates():
    game = GoGame(3)
    game.make_move(0, 0)
    assert render(game, show_coordinates=False) == "X . .\n. . .\n. . ."
    assert render(game).split("\n")[0] == "  0 1 2"
    assert render(game).split("\n")[1] == "0 X . ."


def test_handle_command_moves_and_errors():
    game = GoGame(5)
    assert handle_command(game, "2 2") == ""
    assert handle_command(game, "2 2") == "Illegal move: 2 2"
    assert handle_command(game, "a b") == "Unknown command: a b"
    assert handle_command(game, "   ") == ""
    assert handle_command(game, "undo") == "Undone"
    assert handle_command(game, "undo") == "Nothing to undo"
    assert handle_command(game, "quit") is None


def test_resign_command_resigns_current_player():
    game = GoGame(5)
    handle_command(game, "resign")
    assert game.get_winner() == Stone.WHITE
    assert describe(game).startswith("Game over: White wins")


def test_run_until_double_pass():
    game = GoGame(5)
    out = io.StringIO()

    run(game, ["2 2", "pass", "pass", "quit", "1 1"], out)

    assert game.is_game_over()
    assert game.get_board()[1][1] == Stone.EMPTY
    assert "Game over: Black wins (black 24, white 0)" in out.getvalue()
