"""
Scripted opponent: fixed-priority heuristic move selection.

Priority, first match wins:
  1. win now      - first available cell (ascending) that completes a line for `side`
  2. block        - first available cell (ascending) that completes a line for the opponent
  3. center       - cell 4
  4. corner       - uniform random among empty corners
  5. any          - uniform random among the remaining available cells

This is not a minimax player and can be beaten with forks.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .errors import NoAvailableMove
from .game_basics import CENTER, CORNERS, EMPTY, Side, available_moves
from .tactics import blocking_moves, immediate_winning_moves

logger = logging.getLogger(__name__)


def select_move(board: List[int], side: Side, rng: Optional[np.random.Generator] = None) -> int:
    moves = available_moves(board)
    if not moves:
        raise NoAvailableMove()

    wins = immediate_winning_moves(board, side)
    if wins:
        logger.debug("%s plays win at %d", Side(side).symbol, wins[0])
        return wins[0]

    blocks = blocking_moves(board, side)
    if blocks:
        logger.debug("%s plays block at %d", Side(side).symbol, blocks[0])
        return blocks[0]

    if board[CENTER] == EMPTY:
        return CENTER

    if rng is None:
        rng = np.random.default_rng()
    corners = [i for i in CORNERS if board[i] == EMPTY]
    if corners:
        return int(rng.choice(corners))
    return int(rng.choice(moves))


class ScriptedOpponent:
    """Heuristic opponent bound to one side and one random source."""

    def __init__(self, side: Side = Side.O, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        self.side = Side(side)
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def choose(self, board: List[int]) -> int:
        return select_move(board, self.side, self.rng)
