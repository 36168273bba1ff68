import pytest

from baduk.board import Board, Stone


def test_new_board_is_empty():
    board = Board(9)
    assert board.size == 9
    assert all(stone == Stone.EMPTY for row in board.grid for stone in row)
    assert all(len(row) == 9 for row in board.grid)


@pytest.mark.parametrize("size", [0, 1, 26, -3])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        Board(size)


def test_is_valid_position_edges():
    board = Board(5)
    assert board.is_valid_position(0, 0)
    assert board.is_valid_position(4, 4)
    assert not board.is_valid_position(-1, 0)
    assert not board.is_valid_position(0, 5)


def test_get_stone_off_board_raises():
    board = Board(5)
    with pytest.raises(ValueError):
        board.get_stone(5, 0)


def test_set_stone_rejects_non_stone():
    board = Board(5)
    with pytest.raises(ValueError):
        board.set_stone(0, 0, 1)


def test_adjacent_positions_at_corner_and_center():
    board = Board(5)
    assert sorted(board.get_adjacent_positions(0, 0)) == [(0, 1), (1, 0)]
    assert len(board.get_adjacent_positions(2, 2)) == 4


def test_opponent():
    assert Stone.BLACK.opponent() == Stone.WHITE
    assert Stone.WHITE.opponent() == Stone.BLACK
    with pytest.raises(ValueError):
        Stone.EMPTY.opponent()


def test_snapshot_is_independent():
    board = Board(5)
    board.set_stone(1, 1, Stone.BLACK)

    snapshot = board.snapshot()
    snapshot[1][1] = Stone.WHITE

    assert board.get_stone(1, 1) == Stone.BLACK


def test_clear_keeps_size():
    board = Board(5)
    board.set_stone(0, 0, Stone.WHITE)
    board.clear()
    assert board.snapshot() == Board(5).snapshot()
    assert board.size == 5


def test_str_rendering(make_board):
    board = make_board(3, black=[(0, 0)], white=[(2, 2)])
    assert str(board) == "X . .\n. . .\n. . O"
