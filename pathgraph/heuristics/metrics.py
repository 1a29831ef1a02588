"""
Reference metrics for A* on 2-D grids.

Each metric takes (current, target) nodes whose names are (x, y)
coordinate pairs. All are consistent for 4-neighbour grids whose edge
weights are at least 1.
"""

from __future__ import annotations

import math

from pathgraph.graph.named_graph import GraphNode
from pathgraph.search.astar import Metric


def manhattan(current: GraphNode, target: GraphNode) -> float:
    (x1, y1), (x2, y2) = current.name, target.name
    return abs(x2 - x1) + abs(y2 - y1)


def euclidean(current: GraphNode, target: GraphNode) -> float:
    (x1, y1), (x2, y2) = current.name, target.name
    return math.hypot(x2 - x1, y2 - y1)


def zero(current: GraphNode, target: GraphNode) -> float:
    """Uninformed baseline."""
    return 0


METRICS: dict[str, Metric] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
    "zero": zero,
}


def get_metric(name: str) -> Metric:
    """
    Get a metric by name.

    Args:
        name: Metric identifier (manhattan, euclidean, zero)

    Returns:
        The metric function

    Raises:
        ValueError: If metric name is unknown
    """
    if name not in METRICS:
        available = ", ".join(METRICS.keys())
        raise ValueError(f"Unknown metric '{name}'. Available: {available}")
    return METRICS[name]
