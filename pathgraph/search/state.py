"""
State and result dataclasses for A* searches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class SearchState(Enum):
    """Lifecycle of a search. FOUND and EXHAUSTED are terminal."""

    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class SearchResult:
    """
    Snapshot of a search after running it.

    Attributes:
        start: Name of the start node
        target: Name of the target node
        state: Search state at the time of the snapshot
        distance: Distance from start to target (None unless found)
        path: Node names from start to target (empty unless found)
        steps: Number of nodes finalized
        explored_count: Number of nodes marked explored
        frontier_size: Entries still waiting in the open set
        elapsed_ms: Wall time spent stepping (milliseconds)
        timestamp: When the snapshot was taken
    """

    start: Any
    target: Any
    state: SearchState
    distance: float | None
    path: list[Any]
    steps: int
    explored_count: int
    frontier_size: int
    elapsed_ms: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def found(self) -> bool:
        """Whether the target was reached."""
        return self.state is SearchState.FOUND

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, or None if not found."""
        if not self.found:
            return None
        return len(self.path) - 1
