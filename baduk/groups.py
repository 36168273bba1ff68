"""Connected-group discovery and liberty counting."""

from typing import Iterable, Set
from baduk.board import Board, Position, Stone


def find_group(board: Board, row: int, col: int) -> Set[Position]:
    """Get all stones in the group containing the position.

    Args:
        board: Board to inspect
        row: Row index
        col: Column index

    Returns:
        Set of positions in the group
    """
    stone = board.get_stone(row, col)
    if stone == Stone.EMPTY:
        raise ValueError(f"No stone at ({row}, {col})")

    group = set()
    to_check = [(row, col)]

    while to_check:
        r, c = to_check.pop()
        if (r, c) in group:
            continue

        group.add((r, c))

        for adj_r, adj_c in board.get_adjacent_positions(r, c):
            if board.get_stone(adj_r, adj_c) == stone and (adj_r, adj_c) not in group:
                to_check.append((adj_r, adj_c))

    return group


def get_liberties(board: Board, group: Iterable[Position]) -> Set[Position]:
    """Get the empty points adjacent to any member of a group.

    Args:
        board: Board to inspect
        group: Positions of the group

    Returns:
        Set of liberty positions
    """
    liberties = set()
    for r, c in group:
        for adj_r, adj_c in board.get_adjacent_positions(r, c):
            if board.get_stone(adj_r, adj_c) == Stone.EMPTY:
                liberties.add((adj_r, adj_c))
    return liberties


def count_liberties(board: Board, group: Iterable[Position]) -> int:
    """Count liberties of a group; zero means it is captured."""
    return len(get_liberties(board, group))
