"""
Game basics: board representation, serialization, rules, result and win-line checks.
Notes:
- State is a list of 9 cells: 0=empty, 1=X, 2=O. X always starts.
- Result detection and win-line highlighting share one rule table and one
  line scan, so a Win always comes with its line and vice versa.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

EMPTY = 0

# rows top-to-bottom, columns left-to-right, then the two diagonals
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

CENTER = 4
CORNERS: Tuple[int, ...] = (0, 2, 6, 8)


class Side(IntEnum):
    X = 1
    O = 2

    @property
    def opponent(self) -> "Side":
        return Side.O if self is Side.X else Side.X

    @property
    def symbol(self) -> str:
        return self.name


@dataclass(frozen=True)
class GameResult:
    """Outcome of a board: in progress, a win for one side, or a tie."""

    status: str
    winner: Optional[Side] = None

    IN_PROGRESS_STATUS = "in_progress"
    WIN_STATUS = "win"
    TIE_STATUS = "tie"

    @classmethod
    def win(cls, side: Side) -> "GameResult":
        return cls(cls.WIN_STATUS, Side(side))

    @property
    def is_terminal(self) -> bool:
        return self.status != self.IN_PROGRESS_STATUS

    @property
    def is_win(self) -> bool:
        return self.status == self.WIN_STATUS

    @property
    def is_tie(self) -> bool:
        return self.status == self.TIE_STATUS

    def __str__(self) -> str:
        if self.is_win:
            return f"{self.winner.symbol} wins"
        if self.is_tie:
            return "tie"
        return "in progress"


IN_PROGRESS = GameResult(GameResult.IN_PROGRESS_STATUS)
TIE = GameResult(GameResult.TIE_STATUS)


def serialize_board(board: List[int]) -> str:
    return ''.join(str(cell) for cell in board)


def deserialize_board(board_str: str) -> List[int]:
    raw = board_str.strip()
    if len(raw) != 9 or any(c not in "012" for c in raw):
        raise ValueError(f"Invalid board string {board_str!r}. Must be 9 chars of 0/1/2.")
    return [int(cell) for cell in raw]


def reset_board() -> List[int]:
    return [EMPTY] * 9


def _first_line(board: List[int]) -> Optional[Tuple[int, int, int]]:
    for pattern in WIN_PATTERNS:
        a, b, c = pattern
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return pattern
    return None


def winning_line(board: List[int]) -> Optional[Tuple[int, int, int]]:
    """First completed line in rule-table order, or None."""
    return _first_line(board)


def get_winner(board: List[int]) -> int:
    line = _first_line(board)
    return board[line[0]] if line is not None else EMPTY


def evaluate_result(board: List[int]) -> GameResult:
    line = _first_line(board)
    if line is not None:
        return GameResult.win(Side(board[line[0]]))
    if EMPTY not in board:
        return TIE
    return IN_PROGRESS


def available_moves(board: List[int]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def get_piece_counts(board: List[int]) -> Tuple[int, int]:
    return board.count(Side.X), board.count(Side.O)


def current_player(board: List[int]) -> Side:
    x, o = get_piece_counts(board)
    return Side.X if x == o else Side.O


def is_valid_state(board: List[int]) -> bool:
    """True if the board can arise from legal alternating play starting with X."""
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(p: int) -> int:
        return sum(1 for pat in WIN_PATTERNS if all(board[i] == p for i in pat))

    x_wins, o_wins = count_wins(Side.X), count_wins(Side.O)
    if x_wins > 0 and o_wins > 0:
        return False
    if x_wins > 0 and x_count != o_count + 1:
        return False
    if o_wins > 0 and x_count != o_count:
        return False
    return True


def render_board(board: List[int], highlight: Optional[Tuple[int, ...]] = None) -> str:
    """Three text rows; empty cells show their 1-based number, highlighted marks are bracketed."""
    cells = []
    for i, v in enumerate(board):
        if v == EMPTY:
            cells.append(f" {i + 1} ")
        elif highlight and i in highlight:
            cells.append(f"[{Side(v).symbol}]")
        else:
            cells.append(f" {Side(v).symbol} ")
    rows = ["|".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n---+---+---\n".join(rows)
