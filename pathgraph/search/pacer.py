"""
Caller-paced stepping for long-running searches.

A host loop (a render frame, a scheduler tick) calls tick() once per
iteration; each tick performs a bounded number of search steps.
"""

from __future__ import annotations

import logging

from pathgraph.config import STEPS_PER_TICK
from pathgraph.search.astar import AStar

logger = logging.getLogger(__name__)


class StepPacer:
    """Runs at most steps_per_tick A* steps per tick()."""

    def __init__(self, search: AStar, steps_per_tick: int = STEPS_PER_TICK) -> None:
        if steps_per_tick < 1:
            raise ValueError(f"steps_per_tick must be positive, got {steps_per_tick}")
        self.search = search
        self.steps_per_tick = steps_per_tick
        self.ticks = 0

    @property
    def done(self) -> bool:
        return self.search.is_finished

    def tick(self) -> bool:
        """
        Advance the search by up to steps_per_tick steps.

        Stops early once the target is found. Ticking a finished search
        does nothing.

        Returns:
            True once the target has been found

        Raises:
            EmptyFrontierError: If the search ran out of nodes this tick
        """
        if self.search.is_finished:
            return self.search.found

        self.ticks += 1
        for _ in range(self.steps_per_tick):
            if self.search.do_step():
                logger.debug(f"Pacer: target found on tick {self.ticks}")
                return True
        return False
