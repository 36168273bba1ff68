"""Game controller: turn order, pass/resign, undo and the public query API."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
from baduk.board import Board, Position, Stone
from baduk.history import Move, MoveHistory
from baduk.rules import check_move, is_legal, next_ko_point, resolve_captures
from baduk.scoring import ScoreTally, calculate_territory

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    """Whether the game still accepts moves."""
    IN_PROGRESS = 0
    OVER = 1


@dataclass(frozen=True)
class GameState:
    """Snapshot of a game for display."""
    board: Tuple[Tuple[Stone, ...], ...]
    current_player: Stone
    game_over: bool
    winner: Optional[Stone]
    score: ScoreTally


class GoGame:
    """A single game of Go.

    Owns the board, the capture counters, the move history and the turn
    state. Commands that can be illegal return a boolean instead of raising.
    """

    def __init__(self, board_size: int = 19):
        """Initialize a new game.

        Args:
            board_size: Size of the board (default 19)
        """
        self.board = Board(board_size)
        self.board_size = board_size
        self.history = MoveHistory()
        self.reset_game()

    def reset_game(self) -> None:
        """Return to the initial empty-board state with Black to play."""
        self.board.clear()
        self.history.clear()
        self.current_player = Stone.BLACK
        self.ko_point: Optional[Position] = None
        self.captures = {Stone.BLACK: 0, Stone.WHITE: 0}
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Stone] = None
        self.passes = 0

    def is_valid_move(self, row: int, col: int) -> bool:
        """Check whether the current player may play at a point.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if make_move would accept the point
        """
        if self.status == GameStatus.OVER:
            return False
        if self.ko_point == (row, col):
            return False
        return is_legal(self.board, row, col, self.current_player)

    def legal_moves(self) -> List[Position]:
        """Get every point the current player may play."""
        return [
            (row, col)
            for row in range(self.board_size)
            for col in range(self.board_size)
            if self.is_valid_move(row, col)
        ]

    def make_move(self, row: int, col: int) -> bool:
        """Place a stone for the current player.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if the stone was placed; False leaves the game unchanged
        """
        if self.status == GameStatus.OVER:
            logger.debug("Rejected (%d, %d): game is over", row, col)
            return False

        if self.ko_point == (row, col):
            logger.debug("Rejected (%d, %d): ko rule violation", row, col)
            return False

        result = check_move(self.board, row, col, self.current_player)
        if not result.valid:
            logger.debug("Rejected (%d, %d): %s", row, col, result.message)
            return False

        stone = self.current_player
        self.board.set_stone(row, col, stone)
        captured = resolve_captures(self.board, row, col, stone)
        self.captures[stone] += len(captured)

        self.ko_point = next_ko_point(self.board, row, col, captured)
        if self.ko_point is not None:
            logger.debug("Ko point set at %s", self.ko_point)

        self.history.add_move(row, col, stone, captured)
        self.passes = 0
        self.current_player = stone.opponent()
        return True

    def pass_turn(self) -> None:
        """Pass the turn. Two passes in a row end and score the game."""
        if self.status == GameStatus.OVER:
            logger.debug("Ignored pass: game is over")
            return

        logger.debug("%s passes", self.current_player.name)
        self.passes += 1
        self.current_player = self.current_player.opponent()

        if self.passes >= 2:
            self._end_game()

    def resign(self, player: Stone) -> None:
        """Resign the game; the opponent wins without counting.

        Args:
            player: Color that resigns
        """
        if player not in (Stone.BLACK, Stone.WHITE):
            raise ValueError(f"Only BLACK or WHITE can resign, got {player}")
        if self.status == GameStatus.OVER:
            logger.debug("Ignored resignation: game is over")
            return

        self.status = GameStatus.OVER
        self.winner = player.opponent()
        logger.info("%s resigns, %s wins", player.name, self.winner.name)

    def undo_move(self) -> bool:
        """Take back the latest placement by replaying the rest of the game.

        Passes are not part of the history, so a pass played after the
        latest placement is discarded along with it. A single pass between
        two recorded placements shows up as two consecutive moves of one
        color and is re-issued during the replay.

        Returns:
            False if there is nothing to undo
        """
        if self.history.pop() is None:
            return False

        remaining = list(self.history)
        self.reset_game()
        logger.debug("Replaying %d move(s) after undo", len(remaining))

        for move in remaining:
            if move.color != self.current_player:
                self.pass_turn()
            if not self.make_move(*move.position):
                raise RuntimeError(f"History replay failed at {move}")

        return True

    def _end_game(self) -> None:
        """Add territory to the tallies and decide the winner."""
        self.status = GameStatus.OVER
        territory = calculate_territory(self.board)
        for stone, points in territory.items():
            self.captures[stone] += points
        self.winner = self.get_score().leader()
        logger.info(
            "Game over: black %d, white %d, winner %s",
            self.captures[Stone.BLACK],
            self.captures[Stone.WHITE],
            self.winner.name if self.winner else "none",
        )

    def get_board(self) -> List[List[Stone]]:
        """Copy of the current grid."""
        return self.board.snapshot()

    def get_game_state(self) -> GameState:
        return GameState(
            board=tuple(tuple(row) for row in self.board.grid),
            current_player=self.current_player,
            game_over=self.is_game_over(),
            winner=self.winner,
            score=self.get_score(),
        )

    def get_score(self) -> ScoreTally:
        return ScoreTally(black=self.captures[Stone.BLACK], white=self.captures[Stone.WHITE])

    def get_status(self) -> GameStatus:
        return self.status

    def is_game_over(self) -> bool:
        return self.status == GameStatus.OVER

    def get_winner(self) -> Optional[Stone]:
        return self.winner

    def get_current_player(self) -> Stone:
        return self.current_player

    def get_ko_point(self) -> Optional[Position]:
        return self.ko_point

    def get_last_move(self) -> Optional[Position]:
        move = self.history.last()
        return move.position if move else None

    def get_move_history(self) -> List[Move]:
        return list(self.history)
