"""
Tactics and simple motifs: immediate wins, blocks, forks.
Notes:
- Scans run over empty cells in ascending index order, so the first entry of
  each list is the move the scripted opponent would pick for that rule.
"""
from typing import List

from .game_basics import EMPTY, Side, get_winner


def immediate_winning_moves(board: List[int], player: int) -> List[int]:
    wins: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = board[:]
        b[i] = player
        if get_winner(b) == player:
            wins.append(i)
    return wins


def blocking_moves(board: List[int], player: int) -> List[int]:
    """Cells where the opponent of `player` would complete a line next turn."""
    return immediate_winning_moves(board, Side(player).opponent)


def fork_moves(board: List[int], player: int) -> List[int]:
    forks: List[int] = []
    for i, v in enumerate(board):
        if v != EMPTY:
            continue
        b = board[:]
        b[i] = player
        if len(immediate_winning_moves(b, player)) >= 2:
            forks.append(i)
    return forks
