"""Go rules: move legality, captures and the ko point."""

import logging
from typing import Optional, Set
from baduk.board import Board, Position, Stone
from baduk.groups import count_liberties, find_group, get_liberties

logger = logging.getLogger(__name__)


class MoveResult:
    """Result of checking a move."""

    def __init__(self, valid: bool, message: str = ""):
        """Initialize move result.

        Args:
            valid: Whether the move is legal
            message: Reason the move was rejected
        """
        self.valid = valid
        self.message = message


def find_captured(board: Board, row: int, col: int, stone: Stone) -> Set[Position]:
    """Get opponent stones left without liberties next to a placed stone.

    The stone at (row, col) must already be on the board. Several groups may
    be captured by one placement; a group touching the point on more than one
    side is only counted once.

    Args:
        board: Board to inspect
        row: Row index of the placed stone
        col: Column index of the placed stone
        stone: Color of the placed stone

    Returns:
        Set of positions of captured stones
    """
    opponent = stone.opponent()
    captured: Set[Position] = set()

    for adj_r, adj_c in board.get_adjacent_positions(row, col):
        if (adj_r, adj_c) in captured:
            continue
        if board.get_stone(adj_r, adj_c) == opponent:
            group = find_group(board, adj_r, adj_c)
            if count_liberties(board, group) == 0:
                captured.update(group)

    return captured


def check_move(board: Board, row: int, col: int, stone: Stone) -> MoveResult:
    """Check bounds, occupancy and suicide for a move.

    Ko is not considered here. The board is left exactly as it was found.

    Args:
        board: Board to check against
        row: Row index
        col: Column index
        stone: Stone color to place

    Returns:
        MoveResult indicating validity
    """
    if not board.is_valid_position(row, col):
        return MoveResult(False, "Position is off the board")

    if board.get_stone(row, col) != Stone.EMPTY:
        return MoveResult(False, "Position is already occupied")

    board.set_stone(row, col, stone)
    try:
        if find_captured(board, row, col, stone):
            return MoveResult(True)
        if count_liberties(board, find_group(board, row, col)) == 0:
            return MoveResult(False, "Suicide move not allowed")
        return MoveResult(True)
    finally:
        board.set_stone(row, col, Stone.EMPTY)


def is_legal(board: Board, row: int, col: int, stone: Stone) -> bool:
    """Check if a move is legal, ignoring ko."""
    return check_move(board, row, col, stone).valid


def resolve_captures(board: Board, row: int, col: int, stone: Stone) -> Set[Position]:
    """Remove opponent groups captured by the stone just placed.

    Args:
        board: Board the stone was placed on
        row: Row index of the placed stone
        col: Column index of the placed stone
        stone: Color of the placed stone

    Returns:
        Positions that were emptied
    """
    captured = find_captured(board, row, col, stone)
    for cap_r, cap_c in captured:
        board.set_stone(cap_r, cap_c, Stone.EMPTY)
    if captured:
        logger.debug("%s at (%d, %d) captured %d stone(s)", stone.name, row, col, len(captured))
    return captured


def next_ko_point(board: Board, row: int, col: int, captured: Set[Position]) -> Optional[Position]:
    """Compute the ko point after a placement has been resolved.

    Ko applies when exactly one stone was captured and the capturing stone
    is a lone stone whose only liberty is the point it just emptied, so it
    could be taken straight back.

    Args:
        board: Board after captures were removed
        row: Row index of the placed stone
        col: Column index of the placed stone
        captured: Positions captured by the placement

    Returns:
        The forbidden recapture point, or None
    """
    if len(captured) != 1:
        return None

    (ko_point,) = captured
    group = find_group(board, row, col)
    if len(group) != 1:
        return None

    # The captured point is empty now, so it must be the only liberty left.
    if get_liberties(board, group) != {ko_point}:
        return None

    return ko_point
