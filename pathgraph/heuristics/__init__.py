"""
Heuristics module.

Provides metric functions for guiding A* on coordinate-named nodes:
- manhattan: Sum of absolute coordinate differences
- euclidean: Straight-line distance
- zero: Always 0 (turns A* into Dijkstra)
"""

from pathgraph.heuristics.metrics import METRICS, euclidean, get_metric, manhattan, zero

__all__ = [
    "METRICS",
    "manhattan",
    "euclidean",
    "zero",
    "get_metric",
]
