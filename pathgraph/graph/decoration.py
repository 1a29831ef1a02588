"""
Per-node decorations owned by an algorithm.

A decoration is scratch state an algorithm attaches to a node for the
length of one run (distances, priorities, parents, ...). Decorations
live in a registry side table keyed by node handle, so the graph's node
type never needs to know which algorithm is looking at it.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from pathgraph.errors import DecorationConflictError, MissingDecorationError
from pathgraph.graph.named_graph import GraphNode


class Decoration:
    """
    Base class for algorithm-private node data.

    Attributes:
        node: The node this decoration belongs to
    """

    def __init__(self, node: GraphNode) -> None:
        self.node = node

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(node={self.node.name!r})"


D = TypeVar("D", bound=Decoration)


class DecorationRegistry(Generic[D]):
    """
    Single-slot storage of one decoration per node.

    Attaching over an existing decoration is an error; detach first.
    """

    def __init__(self) -> None:
        self._slots: dict[int, D] = {}

    def attach(self, decoration: D) -> D:
        """
        Install a decoration on its node.

        Raises:
            DecorationConflictError: If the node is already decorated
        """
        handle = decoration.node.handle
        if handle in self._slots:
            raise DecorationConflictError(decoration.node.name)
        self._slots[handle] = decoration
        return decoration

    def is_decorated(self, node: GraphNode) -> bool:
        return node.handle in self._slots

    def get(self, node: GraphNode) -> D:
        """
        Return the node's live decoration.

        Raises:
            MissingDecorationError: If the node is not decorated
        """
        try:
            return self._slots[node.handle]
        except KeyError:
            raise MissingDecorationError(node.name) from None

    def find(self, node: GraphNode) -> D | None:
        return self._slots.get(node.handle)

    def detach(self, node: GraphNode) -> None:
        """Clear the node's slot; no-op if it is not decorated."""
        self._slots.pop(node.handle, None)

    def clear(self) -> None:
        """Detach every decoration."""
        self._slots.clear()

    def __contains__(self, node: object) -> bool:
        return isinstance(node, GraphNode) and node.handle in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[D]:
        return iter(list(self._slots.values()))
