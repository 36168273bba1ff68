"""Record of the placements played in a game."""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
from baduk.board import Position, Stone


@dataclass(frozen=True)
class Move:
    """A successful placement."""
    position: Position
    color: Stone
    captured: Tuple[Position, ...] = ()


class MoveHistory:
    """Ordered list of the placements that reached the board.

    Passes and resignations are not recorded. Replaying the entries in order
    from an empty board reproduces the current position.
    """

    def __init__(self):
        self.moves: List[Move] = []

    def add_move(self, row: int, col: int, color: Stone, captured=()) -> Move:
        """Append a placement.

        Args:
            row: Row index
            col: Column index
            color: Stone color
            captured: Positions removed by the placement

        Returns:
            The new entry
        """
        move = Move((row, col), color, tuple(sorted(captured)))
        self.moves.append(move)
        return move

    def pop(self) -> Optional[Move]:
        """Remove and return the latest placement, or None if there is none."""
        if not self.moves:
            return None
        return self.moves.pop()

    def last(self) -> Optional[Move]:
        return self.moves[-1] if self.moves else None

    def clear(self) -> None:
        self.moves = []

    def __len__(self) -> int:
        return len(self.moves)

    def __iter__(self) -> Iterator[Move]:
        return iter(list(self.moves))
