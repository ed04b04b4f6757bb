"""
Board engine: game session state, move application and turn order.

The engine decides whose mark is written from the session itself; callers
only supply the cell. Rejected moves leave the session untouched.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .errors import CellOccupied, GameAlreadyOver, InvalidCell
from .game_basics import (
    EMPTY,
    IN_PROGRESS,
    GameResult,
    Side,
    available_moves,
    evaluate_result,
    reset_board,
    winning_line,
)

logger = logging.getLogger(__name__)


class Mode(Enum):
    HUMAN_VS_HUMAN = "hvh"
    HUMAN_VS_SCRIPTED = "hvc"

    def is_scripted(self, side: Side) -> bool:
        """True if moves for `side` come from the scripted opponent in this mode."""
        return self is Mode.HUMAN_VS_SCRIPTED and side is Side.O


@dataclass
class GameSession:
    mode: Mode = Mode.HUMAN_VS_HUMAN
    board: List[int] = field(default_factory=reset_board)
    to_move: Side = Side.X
    result: GameResult = IN_PROGRESS
    # bumped on every applied move and every reset
    generation: int = 0

    @property
    def is_over(self) -> bool:
        return self.result.is_terminal

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return winning_line(self.board)

    @property
    def available_moves(self) -> List[int]:
        return available_moves(self.board)

    def restart(self) -> None:
        """Fresh board with X to move; mode is kept."""
        self.board = reset_board()
        self.to_move = Side.X
        self.result = IN_PROGRESS
        self.generation += 1
        logger.debug("Board reset (generation=%d)", self.generation)


def apply_move(session: GameSession, cell: int) -> GameResult:
    """Place the side-to-move's mark at `cell` and return the resulting GameResult."""
    if session.result.is_terminal:
        raise GameAlreadyOver(session.result)
    if isinstance(cell, bool) or not isinstance(cell, int) or not 0 <= cell <= 8:
        raise InvalidCell(cell)
    if session.board[cell] != EMPTY:
        raise CellOccupied(cell)

    side = session.to_move
    session.board[cell] = int(side)
    result = evaluate_result(session.board)
    session.result = result
    if not result.is_terminal:
        session.to_move = side.opponent
    session.generation += 1
    logger.debug("%s -> %d (%s)", side.symbol, cell, result)
    return result
