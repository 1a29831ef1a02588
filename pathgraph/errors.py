"""
Exceptions raised by graph and search operations.

Every error is a local, synchronous contract failure surfaced to the
caller. EmptyFrontierError is the exception: it is the normal outcome
of searching for an unreachable target.
"""

from __future__ import annotations

from typing import Any


class GraphError(Exception):
    """Base class for all pathgraph errors."""


class DuplicateNameError(GraphError):
    """A node with this name already exists in the graph."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"Node with name {name!r} already exists in graph")
        self.name = name


class NodeNotFoundError(GraphError, KeyError):
    """No node with this name exists in the graph."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"Graph node with name {name!r} does not exist in the graph")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class InvalidEdgeError(GraphError, ValueError):
    """Edge cannot be created, or a disconnected half-edge was used."""


class DecorationConflictError(GraphError):
    """The node already carries a decoration from this registry."""

    def __init__(self, node: Any) -> None:
        super().__init__(f"Node {node!r} is already decorated")
        self.node = node


class MissingDecorationError(GraphError, KeyError):
    """The node carries no decoration from this registry."""

    def __init__(self, node: Any) -> None:
        super().__init__(f"Node {node!r} is not decorated")
        self.node = node

    def __str__(self) -> str:
        return self.args[0]


class EmptyFrontierError(GraphError):
    """
    The open set ran dry before the target was reached.

    Signals that no path exists from start to target. The search is
    terminal afterwards and must not be stepped again.
    """


class SearchFinishedError(GraphError):
    """A terminal search (found or exhausted) was stepped again."""
