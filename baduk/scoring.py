"""End-of-game territory counting."""

from collections import deque
from dataclasses import dataclass
from typing import Dict, List, Optional, Set
from baduk.board import Board, Position, Stone


@dataclass(frozen=True)
class ScoreTally:
    """Captured stones plus (after the game ends) territory for each color."""
    black: int = 0
    white: int = 0

    def leader(self) -> Optional[Stone]:
        """Color with the higher score, or None on a tie."""
        if self.black > self.white:
            return Stone.BLACK
        if self.white > self.black:
            return Stone.WHITE
        return None


def find_empty_region(board: Board, row: int, col: int, visited: Set[Position]) -> List[Position]:
    """Flood-fill the connected empty region containing a point.

    Args:
        board: Board to inspect
        row: Row index of an empty point
        col: Column index of an empty point
        visited: Points already assigned to a region; updated in place

    Returns:
        Positions in the region
    """
    region = []
    queue = deque([(row, col)])

    while queue:
        r, c = queue.popleft()
        if (r, c) in visited:
            continue
        visited.add((r, c))
        region.append((r, c))

        for adj_r, adj_c in board.get_adjacent_positions(r, c):
            if (adj_r, adj_c) not in visited and board.get_stone(adj_r, adj_c) == Stone.EMPTY:
                queue.append((adj_r, adj_c))

    return region


def determine_region_owner(board: Board, region: List[Position]) -> Stone:
    """Decide which color, if any, surrounds an empty region.

    Args:
        board: Board to inspect
        region: Empty region from find_empty_region

    Returns:
        BLACK or WHITE if only that color borders the region, else EMPTY
    """
    border_colors = set()
    for r, c in region:
        for adj_r, adj_c in board.get_adjacent_positions(r, c):
            stone = board.get_stone(adj_r, adj_c)
            if stone != Stone.EMPTY:
                border_colors.add(stone)

    if len(border_colors) == 1:
        return border_colors.pop()
    return Stone.EMPTY


def calculate_territory(board: Board) -> Dict[Stone, int]:
    """Count the territory of each color.

    Args:
        board: Final board position

    Returns:
        Number of territory points for BLACK and WHITE
    """
    territory = {Stone.BLACK: 0, Stone.WHITE: 0}
    visited: Set[Position] = set()

    for row in range(board.size):
        for col in range(board.size):
            if board.get_stone(row, col) == Stone.EMPTY and (row, col) not in visited:
                region = find_empty_region(board, row, col, visited)
                owner = determine_region_owner(board, region)
                if owner != Stone.EMPTY:
                    territory[owner] += len(region)

    return territory
