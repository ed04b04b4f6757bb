"""tictactoe_core package.

Board engine, scripted opponent, score accounting, and a simple CLI.

Convenience imports are exposed for common workflows.
"""

from .controller import GameController
from .engine import GameSession, Mode, apply_move
from .errors import CellOccupied, GameAlreadyOver, InvalidCell, MoveError, NoAvailableMove, WrongTurn
from .game_basics import (
    IN_PROGRESS,
    TIE,
    GameResult,
    Side,
    available_moves,
    evaluate_result,
    reset_board,
    winning_line,
)
from .opponent import ScriptedOpponent, select_move
from .scoring import KeyValueScoreStore, ScoreStore, ScoreTally

__all__ = [
    "GameController",
    "GameSession",
    "Mode",
    "apply_move",
    "Side",
    "GameResult",
    "IN_PROGRESS",
    "TIE",
    "evaluate_result",
    "winning_line",
    "available_moves",
    "reset_board",
    "select_move",
    "ScriptedOpponent",
    "ScoreTally",
    "ScoreStore",
    "KeyValueScoreStore",
    "MoveError",
    "CellOccupied",
    "GameAlreadyOver",
    "InvalidCell",
    "NoAvailableMove",
    "WrongTurn",
]
