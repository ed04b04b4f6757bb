"""
Score accounting over terminal results, and the session-scoped store hooks.

The tally is append-only until an explicit reset. Storage is injected: any
object with `load_score()` / `save_score(tally)` works; `KeyValueScoreStore`
adapts a plain mutable mapping holding JSON text.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Dict, MutableMapping, Protocol

from .game_basics import GameResult, Side

logger = logging.getLogger(__name__)

DEFAULT_SCORE_KEY = "tic-tac-toe-score"


@dataclass
class ScoreTally:
    wins_x: int = 0
    wins_o: int = 0
    ties: int = 0

    def record(self, result: GameResult) -> None:
        """Count one finished game. In-progress results are rejected."""
        if not result.is_terminal:
            raise ValueError("Cannot record a game that is still in progress")
        if result.is_tie:
            self.ties += 1
        elif result.winner is Side.X:
            self.wins_x += 1
        else:
            self.wins_o += 1

    def reset(self) -> None:
        self.wins_x = 0
        self.wins_o = 0
        self.ties = 0

    @property
    def games_played(self) -> int:
        return self.wins_x + self.wins_o + self.ties

    def to_dict(self) -> Dict[str, int]:
        return {"X": self.wins_x, "O": self.wins_o, "ties": self.ties}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> "ScoreTally":
        values = [data.get("X", 0), data.get("O", 0), data.get("ties", 0)]
        if any(isinstance(v, bool) or not isinstance(v, int) or v < 0 for v in values):
            raise ValueError(f"Score counters must be non-negative integers: {data!r}")
        return cls(*values)


class ScoreStore(Protocol):
    def load_score(self) -> ScoreTally: ...

    def save_score(self, tally: ScoreTally) -> None: ...


class KeyValueScoreStore:
    """Score hooks over a session key-value store (e.g. a dict)."""

    def __init__(self, backend: MutableMapping[str, str] | None = None,
                 key: str = DEFAULT_SCORE_KEY):
        self.backend: MutableMapping[str, str] = backend if backend is not None else {}
        self.key = key

    def load_score(self) -> ScoreTally:
        raw = self.backend.get(self.key)
        if raw is None:
            return ScoreTally()
        try:
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"expected an object, got {type(data).__name__}")
            return ScoreTally.from_dict(data)
        except ValueError as e:
            logger.warning("Ignoring stored score under %r: %s", self.key, e)
            return ScoreTally()

    def save_score(self, tally: ScoreTally) -> None:
        self.backend[self.key] = json.dumps(tally.to_dict())
