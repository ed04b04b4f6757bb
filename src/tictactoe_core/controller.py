"""
Game controller: the command/query surface a front end talks to.

Owns one GameSession, one ScoreTally, the injected score store, the scripted
opponent and its pending delayed move. Every finished game is counted exactly
once, on the move that ends it.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .config import Settings, load_settings
from .engine import GameSession, Mode, apply_move
from .errors import GameAlreadyOver, WrongTurn
from .game_basics import GameResult, Side
from .opponent import ScriptedOpponent, select_move
from .scheduler import MoveScheduler, PendingMove
from .scoring import KeyValueScoreStore, ScoreStore, ScoreTally

logger = logging.getLogger(__name__)


class GameController:
    def __init__(
        self,
        mode: Mode = Mode.HUMAN_VS_HUMAN,
        store: Optional[ScoreStore] = None,
        opponent: Optional[ScriptedOpponent] = None,
        scheduler: Optional[MoveScheduler] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings if settings is not None else load_settings()
        self.store = store if store is not None else KeyValueScoreStore(key=self.settings.score_key)
        self.opponent = opponent if opponent is not None else ScriptedOpponent(Side.O, seed=self.settings.seed)
        self.scheduler = scheduler if scheduler is not None else MoveScheduler(self.settings.opponent_delay)
        self.session = GameSession(mode=mode)
        self._score = self.store.load_score()

    # queries

    @property
    def mode(self) -> Mode:
        return self.session.mode

    @property
    def board(self) -> List[int]:
        return list(self.session.board)

    @property
    def to_move(self) -> Side:
        return self.session.to_move

    @property
    def result(self) -> GameResult:
        return self.session.result

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.session.winning_line

    @property
    def available_moves(self) -> List[int]:
        return self.session.available_moves

    @property
    def score(self) -> ScoreTally:
        s = self._score
        return ScoreTally(s.wins_x, s.wins_o, s.ties)

    @property
    def pending_move(self) -> Optional[PendingMove]:
        return self.scheduler.pending

    @property
    def awaiting_opponent(self) -> bool:
        return not self.session.is_over and self.mode.is_scripted(self.session.to_move)

    # commands

    def select_mode(self, mode: Mode) -> None:
        """Switch mode. Starts a fresh board and a fresh tally."""
        self.session.mode = Mode(mode)
        logger.info("Mode: %s", self.session.mode.value)
        self.reset_score()

    def apply_move(self, cell: int) -> GameResult:
        """Apply a human move for the side to move."""
        if not self.session.is_over and self.mode.is_scripted(self.session.to_move):
            raise WrongTurn(self.session.to_move, scripted=True)
        return self._apply(cell)

    def play_opponent(self) -> int:
        """Apply the scripted move right away, dropping any pending one."""
        if self.session.is_over:
            raise GameAlreadyOver(self.session.result)
        if not self.awaiting_opponent:
            raise WrongTurn(self.session.to_move, scripted=False)
        self.scheduler.cancel()
        return self._play_scripted()

    def poll(self) -> Optional[int]:
        """Fire the pending scripted move if it is due. Returns the cell played, if any."""
        task = self.scheduler.take_due(self.session)
        if task is None:
            return None
        return self._play_scripted()

    def run_pending(self) -> Optional[int]:
        """Wait for the pending scripted move, then fire it."""
        self.scheduler.wait()
        return self.poll()

    def restart_board(self) -> None:
        self.scheduler.cancel()
        self.session.restart()

    def reset_score(self) -> None:
        self._score.reset()
        self.store.save_score(self._score)
        logger.info("Score reset")
        self.restart_board()

    # internals

    def _play_scripted(self) -> int:
        # side comes from the session, not from the opponent object
        cell = select_move(self.session.board, self.session.to_move, self.opponent.rng)
        self._apply(cell)
        return cell

    def _apply(self, cell: int) -> GameResult:
        result = apply_move(self.session, cell)
        if result.is_terminal:
            self._score.record(result)
            self.store.save_score(self._score)
            logger.info("Game over: %s (X=%d O=%d ties=%d)", result,
                        self._score.wins_x, self._score.wins_o, self._score.ties)
        elif self.awaiting_opponent:
            self.scheduler.schedule(self.session)
        return result
