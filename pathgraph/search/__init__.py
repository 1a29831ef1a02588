"""
Search module.

Provides the steppable A* engine and its helpers:
- AStar: Incremental A* search
- SearchNode: Per-node A* bookkeeping
- SearchState / SearchResult: Lifecycle and result snapshot
- StepPacer: Bounded steps per host tick
"""

from pathgraph.search.astar import AStar, Metric, SearchNode
from pathgraph.search.pacer import StepPacer
from pathgraph.search.state import SearchResult, SearchState

__all__ = [
    "AStar",
    "Metric",
    "SearchNode",
    "SearchState",
    "SearchResult",
    "StepPacer",
]
