"""
Delayed scripted moves as cancellable, poll-driven tasks.

A pending move remembers the session generation it was scheduled against.
When it comes due it is dropped, not applied, if the session has moved on
(a move was applied, the board was reset) or the game is over.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from .engine import GameSession

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


@dataclass
class PendingMove:
    due: float
    generation: int
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class MoveScheduler:
    def __init__(self, delay: float = 0.6, clock: Clock = time.monotonic,
                 sleep: Callable[[float], None] = time.sleep):
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")
        self.delay = delay
        self.clock = clock
        self.sleep = sleep
        self.pending: Optional[PendingMove] = None

    def schedule(self, session: GameSession) -> PendingMove:
        self.cancel()
        self.pending = PendingMove(due=self.clock() + self.delay, generation=session.generation)
        logger.debug("Scripted move scheduled for generation %d", session.generation)
        return self.pending

    def cancel(self) -> None:
        if self.pending is not None:
            self.pending.cancel()
            logger.debug("Scripted move for generation %d cancelled", self.pending.generation)
            self.pending = None

    def is_stale(self, task: PendingMove, session: GameSession) -> bool:
        return task.cancelled or task.generation != session.generation or session.is_over

    def take_due(self, session: GameSession) -> Optional[PendingMove]:
        """Pop the pending task if it is due; None if nothing should fire yet.

        Stale tasks are discarded and never returned.
        """
        task = self.pending
        if task is None or self.clock() < task.due:
            return None
        self.pending = None
        if self.is_stale(task, session):
            logger.debug("Discarding stale scripted move (generation %d, session at %d)",
                         task.generation, session.generation)
            return None
        return task

    def wait(self) -> None:
        """Block until the pending task (if any) is due."""
        if self.pending is None:
            return
        remaining = self.pending.due - self.clock()
        if remaining > 0:
            self.sleep(remaining)
