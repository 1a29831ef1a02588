"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import pytest

from pathgraph.graph import NamedGraph
from pathgraph.grid import build_grid


@pytest.fixture
def graph() -> NamedGraph[str]:
    """Return an empty graph with string names."""
    return NamedGraph()


@pytest.fixture
def triangle() -> NamedGraph[str]:
    """Return a graph with nodes a, b, c and edges a-b (1), b-c (2), a-c (5)."""
    g: NamedGraph[str] = NamedGraph()
    for name in ("a", "b", "c"):
        g.add_node(name)
    g.add_edge("a", "b", weight=1)
    g.add_edge("b", "c", weight=2)
    g.add_edge("a", "c", weight=5)
    return g


@pytest.fixture
def grid() -> NamedGraph[tuple[int, int]]:
    """Return an unblocked 5x5 unit-weight grid."""
    return build_grid(5, 5)


@pytest.fixture
def table_metric():
    """Return a factory for metrics that look up estimates by node name."""

    def make(estimates: dict):
        def metric(current, target):
            return estimates[current.name]

        return metric

    return make
