"""Rules engine for Go: legality, captures, ko, scoring and undo."""

from baduk.board import Board, Position, Stone
from baduk.game import GameState, GameStatus, GoGame
from baduk.history import Move, MoveHistory
from baduk.scoring import ScoreTally

__all__ = [
    "Board",
    "GameState",
    "GameStatus",
    "GoGame",
    "Move",
    "MoveHistory",
    "Position",
    "ScoreTally",
    "Stone",
]
