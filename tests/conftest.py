import pytest

from baduk.board import Board, Stone
from baduk.game import GoGame


@pytest.fixture
def make_board():
    """Build a board with stones placed directly, bypassing the rules."""
    def _make(size=5, black=(), white=()):
        board = Board(size)
        for row, col in black:
            board.set_stone(row, col, Stone.BLACK)
        for row, col in white:
            board.set_stone(row, col, Stone.WHITE)
        return board
    return _make


@pytest.fixture
def game():
    return GoGame(5)


@pytest.fixture
def play():
    """Play a sequence of moves (None means pass), asserting each is accepted."""
    def _play(game, *moves):
        for move in moves:
            if move is None:
                game.pass_turn()
            else:
                assert game.make_move(*move), f"move {move} was rejected"
        return game
    return _play


@pytest.fixture
def ko_sequence():
    """Moves ending with Black taking the white stone at (1, 1) and leaving a ko."""
    return [
        (0, 1), (0, 2),
        (1, 0), (1, 3),
        (2, 1), (2, 2),
        (4, 4), (1, 1),
        (1, 2),
    ]
