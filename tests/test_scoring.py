from baduk.board import Board, Stone
from baduk.scoring import ScoreTally, calculate_territory, determine_region_owner, find_empty_region


def column(col, size=5):
    return [(row, col) for row in range(size)]


def test_empty_board_has_no_territory():
    assert calculate_territory(Board(5)) == {Stone.BLACK: 0, Stone.WHITE: 0}


def test_region_surrounded_by_one_color(make_board):
    board = make_board(black=column(2))
    assert calculate_territory(board) == {Stone.BLACK: 20, Stone.WHITE: 0}


def test_region_touching_both_colors_is_neutral(make_board):
    board = make_board(black=column(1), white=column(3))
    # Column 0 is Black's, column 4 is White's, column 2 touches both.
    assert calculate_territory(board) == {Stone.BLACK: 5, Stone.WHITE: 5}


def test_find_empty_region_marks_visited(make_board):
    board = make_board(black=column(1))
    visited = set()
    region = find_empty_region(board, 0, 0, visited)
    assert sorted(region) == column(0)
    assert visited == set(column(0))


def test_region_owner(make_board):
    board = make_board(white=[(0, 1), (1, 0)], black=[(2, 2)])
    assert determine_region_owner(board, [(0, 0)]) == Stone.WHITE
    visited = set()
    big = find_empty_region(board, 4, 4, visited)
    assert determine_region_owner(board, big) == Stone.EMPTY


def test_score_tally_leader():
    assert ScoreTally(black=3, white=7).leader() == Stone.WHITE
    assert ScoreTally(black=8, white=7).leader() == Stone.BLACK
    assert ScoreTally(2, 2).leader() is None
