"""Runtime settings.

Environment-first, with defaults that work when nothing is set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .scoring import DEFAULT_SCORE_KEY

DEFAULT_DELAY_MS = 600


@dataclass(frozen=True)
class Settings:
    opponent_delay_ms: int = DEFAULT_DELAY_MS
    seed: int | None = None
    score_key: str = DEFAULT_SCORE_KEY

    @property
    def opponent_delay(self) -> float:
        return self.opponent_delay_ms / 1000.0


def _int_env(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def opponent_delay_ms() -> int:
    """Delay before a scripted move, from TTT_OPPONENT_DELAY_MS (default 600)."""
    v = _int_env("TTT_OPPONENT_DELAY_MS")
    if v is None:
        return DEFAULT_DELAY_MS
    if v < 0:
        raise ValueError(f"TTT_OPPONENT_DELAY_MS must be >= 0, got {v}")
    return v


def opponent_seed() -> int | None:
    return _int_env("TTT_SEED")


def score_key() -> str:
    return os.getenv("TTT_SCORE_KEY") or DEFAULT_SCORE_KEY


def load_settings() -> Settings:
    return Settings(
        opponent_delay_ms=opponent_delay_ms(),
        seed=opponent_seed(),
        score_key=score_key(),
    )
