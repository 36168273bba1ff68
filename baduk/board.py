"""Board state management for Go game."""

from typing import List, Tuple
from enum import Enum

Position = Tuple[int, int]

MIN_SIZE = 2
MAX_SIZE = 25


class Stone(Enum):
    """Represents the content of a board cell."""
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    def opponent(self) -> 'Stone':
        """Get the opposing color.

        Returns:
            WHITE for BLACK and BLACK for WHITE
        """
        if self == Stone.BLACK:
            return Stone.WHITE
        if self == Stone.WHITE:
            return Stone.BLACK
        raise ValueError("EMPTY has no opponent")


class Board:
    """Fixed-size square grid of stones."""

    def __init__(self, size: int = 19):
        """Initialize an empty board.

        Args:
            size: Board size (default 19)
        """
        if not isinstance(size, int) or not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(f"Board size must be between {MIN_SIZE} and {MAX_SIZE}")

        self.size = size
        self.grid = [[Stone.EMPTY for _ in range(size)] for _ in range(size)]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is on the board.

        Args:
            row: Row index (0-based)
            col: Column index (0-based)

        Returns:
            True if position is valid
        """
        return 0 <= row < self.size and 0 <= col < self.size

    def get_stone(self, row: int, col: int) -> Stone:
        """Get the stone at a position.

        Args:
            row: Row index
            col: Column index

        Returns:
            Stone at position
        """
        if not self.is_valid_position(row, col):
            raise ValueError(f"Invalid position: ({row}, {col})")
        return self.grid[row][col]

    def set_stone(self, row: int, col: int, stone: Stone) -> None:
        """Set a stone at a position (internal use).

        Args:
            row: Row index
            col: Column index
            stone: Stone to place, or EMPTY to clear the cell
        """
        if not self.is_valid_position(row, col):
            raise ValueError(f"Invalid position: ({row}, {col})")
        if not isinstance(stone, Stone):
            raise ValueError(f"Not a stone: {stone!r}")
        self.grid[row][col] = stone

    def get_adjacent_positions(self, row: int, col: int) -> List[Position]:
        """Get all on-board neighbors (up, down, left, right).

        Args:
            row: Row index
            col: Column index

        Returns:
            List of adjacent positions
        """
        adjacent = []
        for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            new_row, new_col = row + dr, col + dc
            if self.is_valid_position(new_row, new_col):
                adjacent.append((new_row, new_col))
        return adjacent

    def snapshot(self) -> List[List[Stone]]:
        """Copy of the grid that callers may keep or modify freely."""
        return [row[:] for row in self.grid]

    def clear(self) -> None:
        """Clear all stones from the board."""
        self.grid = [[Stone.EMPTY for _ in range(self.size)] for _ in range(self.size)]

    def __str__(self) -> str:
        """String representation of the board."""
        lines = []
        for row in self.grid:
            line = ""
            for stone in row:
                if stone == Stone.BLACK:
                    line += "X "
                elif stone == Stone.WHITE:
                    line += "O "
                else:
                    line += ". "
            lines.append(line.rstrip())
        return "\n".join(lines)
