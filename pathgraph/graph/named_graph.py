"""
Named graph with symmetric weighted edges.

Nodes are keyed by an arbitrary hashable name (coordinates, integers,
strings, ...). Every undirected edge is stored as two half-edges, one in
each endpoint's adjacency list. Both halves share a single EdgeLink
record, so weight and the per-pass visited flag always agree.

The graph is an arena: nodes live in a handle table and links in an id
table. Half-edges refer to endpoints and links by handle/id only.

Usage:
    from pathgraph.graph import NamedGraph

    graph = NamedGraph()
    graph.add_node((0, 0))
    graph.add_node((1, 0))
    graph.add_edge((0, 0), (1, 0), weight=2)
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pathgraph.config import BLOCKED_WEIGHT, DEFAULT_EDGE_WEIGHT, NODE_SIZE
from pathgraph.errors import (
    DuplicateNameError,
    InvalidEdgeError,
    NodeNotFoundError,
)

logger = logging.getLogger(__name__)

N = TypeVar("N", bound=Hashable)


@dataclass
class EdgeLink:
    """
    State shared by both halves of one undirected edge.

    Attributes:
        weight: Authoritative edge weight
        draw: Rendering hint; False edges are skipped by walk() visitors
        visited: Whether the edge was touched in the current walk pass
    """

    weight: float
    draw: bool = True
    visited: bool = False


@dataclass(eq=False)
class GraphNode(Generic[N]):
    """
    A node within a graph.

    Compared and hashed by identity. x, y and size are opaque to the
    graph and only exist for rendering collaborators.

    Attributes:
        handle: Stable arena handle assigned by the owning graph
        name: The node's unique name
        x: Horizontal position
        y: Vertical position
        size: Rendered size
        data: Arbitrary caller payload
        explored: Set by search algorithms once the node is finalized
        blocked: Blocked nodes make all incident edges impassable
        edges: Ordered adjacency list of half-edges leaving this node
    """

    handle: int
    name: N
    x: float = 0.0
    y: float = 0.0
    size: float = NODE_SIZE
    data: Any = None
    explored: bool = False
    blocked: bool = False
    edges: list[GraphEdge] = field(default_factory=list, repr=False)

    def neighbors(self) -> list[GraphNode[N]]:
        """Nodes on the far side of each incident edge, in adjacency order."""
        return [edge.target for edge in self.edges]

    def reset_edge_flags(self) -> None:
        """Reset the shared visited flag of every incident edge."""
        for edge in self.edges:
            edge.was_visited = False


class GraphEdge:
    """
    One directional half of an undirected edge.

    Owned by the adjacency list of its source node. Its mirror lives in
    the target node's list and shares the same EdgeLink. Once
    disconnected, a half-edge must not be used again; doing so raises
    InvalidEdgeError.
    """

    __slots__ = ("_graph", "link_id", "source_handle", "target_handle", "forward")

    def __init__(
        self,
        graph: NamedGraph,
        link_id: int,
        source_handle: int,
        target_handle: int,
        forward: bool,
    ) -> None:
        self._graph = graph
        self.link_id = link_id
        self.source_handle = source_handle
        self.target_handle = target_handle
        self.forward = forward

    def _link(self) -> EdgeLink:
        link = self._graph._links.get(self.link_id)
        if link is None:
            raise InvalidEdgeError(f"Edge {self.link_id} has been disconnected")
        return link

    @property
    def is_connected(self) -> bool:
        return self.link_id in self._graph._links

    @property
    def source(self) -> GraphNode:
        self._link()
        return self._graph.node_by_handle(self.source_handle)

    @property
    def target(self) -> GraphNode:
        self._link()
        return self._graph.node_by_handle(self.target_handle)

    @property
    def weight(self) -> float:
        """Effective weight: infinite while either endpoint is blocked."""
        link = self._link()
        if self.source.blocked or self.target.blocked:
            return BLOCKED_WEIGHT
        return link.weight

    @weight.setter
    def weight(self, weight: float) -> None:
        self._link().weight = weight

    @property
    def base_weight(self) -> float:
        """Stored weight, ignoring blocked endpoints."""
        return self._link().weight

    @property
    def was_visited(self) -> bool:
        return self._link().visited

    @was_visited.setter
    def was_visited(self, visited: bool) -> None:
        self._link().visited = visited

    @property
    def draw(self) -> bool:
        return self._link().draw

    @property
    def mirror(self) -> GraphEdge:
        """The opposite half stored in the target node's adjacency list."""
        for edge in self.target.edges:
            if edge.link_id == self.link_id and edge.forward != self.forward:
                return edge
        raise InvalidEdgeError(f"Edge {self.link_id} has no mirror half")

    def disconnect(self) -> None:
        """
        Remove this edge from both endpoints.

        Entries are matched by identity and only the first match is
        removed, so parallel edges are disconnected one at a time.
        Disconnecting an already disconnected edge does nothing.
        """
        if not self.is_connected:
            return

        mirror = self.mirror
        _remove_identical(self.source.edges, self)
        _remove_identical(mirror.source.edges, mirror)
        del self._graph._links[self.link_id]

    def __repr__(self) -> str:
        if not self.is_connected:
            return f"GraphEdge(link_id={self.link_id}, disconnected)"
        return (
            f"GraphEdge({self.source.name!r} -> {self.target.name!r}, "
            f"weight={self.weight})"
        )


def _remove_identical(edges: list[GraphEdge], edge: GraphEdge) -> None:
    for index, candidate in enumerate(edges):
        if candidate is edge:
            del edges[index]
            return


class NamedGraph(Generic[N]):
    """
    A graph containing named nodes and symmetric edges between them.

    Every node has a unique, hashable name. Adding a duplicate name is an
    error, never an overwrite. Edges carry one shared weight for both
    directions. Self-loops are rejected; parallel edges are allowed.
    """

    def __init__(self) -> None:
        self._nodes: dict[int, GraphNode[N]] = {}
        self._handles: dict[N, int] = {}
        self._links: dict[int, EdgeLink] = {}
        self._handle_counter = itertools.count()
        self._link_counter = itertools.count()

    # -------------------------------------------------------------------------
    # Nodes
    # -------------------------------------------------------------------------

    def add_node(
        self,
        name: N,
        x: float = 0.0,
        y: float = 0.0,
        size: float = NODE_SIZE,
        data: Any = None,
    ) -> GraphNode[N]:
        """
        Add a new node to the graph.

        Args:
            name: Unique name of the new node
            x: Horizontal position (rendering only)
            y: Vertical position (rendering only)
            size: Rendered size (rendering only)
            data: Arbitrary payload kept on the node

        Returns:
            The created node

        Raises:
            DuplicateNameError: If a node with this name already exists
        """
        if name in self._handles:
            raise DuplicateNameError(name)

        handle = next(self._handle_counter)
        node = GraphNode(handle=handle, name=name, x=x, y=y, size=size, data=data)
        self._nodes[handle] = node
        self._handles[name] = handle
        return node

    def remove_node(self, name: N) -> bool:
        """
        Remove the node with the given name, disconnecting its edges first.

        Returns:
            True if a node was removed, False if no such node exists
        """
        handle = self._handles.get(name)
        if handle is None:
            return False

        node = self._nodes[handle]
        for edge in list(node.edges):
            edge.disconnect()

        del self._handles[name]
        del self._nodes[handle]
        logger.debug(f"Removed node {name!r}")
        return True

    def get_node(self, name: N) -> GraphNode[N]:
        """
        Look up a node by name.

        Raises:
            NodeNotFoundError: If no node has this name
        """
        handle = self._handles.get(name)
        if handle is None:
            raise NodeNotFoundError(name)
        return self._nodes[handle]

    def find_node(self, name: N) -> GraphNode[N] | None:
        """Look up a node by name, returning None if absent."""
        handle = self._handles.get(name)
        if handle is None:
            return None
        return self._nodes[handle]

    def has_node(self, name: N) -> bool:
        return name in self._handles

    def node_by_handle(self, handle: int) -> GraphNode[N]:
        """Resolve an arena handle to its node."""
        try:
            return self._nodes[handle]
        except KeyError:
            raise NodeNotFoundError(f"<handle {handle}>") from None

    def name_of(self, node: GraphNode[N]) -> N:
        """Return the name of a node owned by this graph."""
        if self._nodes.get(node.handle) is not node:
            raise NodeNotFoundError(node.name)
        return node.name

    def names(self) -> list[N]:
        """All node names in insertion order."""
        return list(self._handles)

    def nodes(self) -> list[GraphNode[N]]:
        """All nodes in insertion order."""
        return list(self._nodes.values())

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[GraphNode[N]]:
        return iter(list(self._nodes.values()))

    # -------------------------------------------------------------------------
    # Edges
    # -------------------------------------------------------------------------

    def add_edge(
        self,
        first_name: N,
        second_name: N,
        weight: float = DEFAULT_EDGE_WEIGHT,
        draw: bool = True,
    ) -> GraphEdge:
        """
        Add an edge between two nodes.

        Args:
            first_name: Name of the first node
            second_name: Name of the second node
            weight: Weight shared by both directions
            draw: Set to False if renderers should skip this edge

        Returns:
            The half-edge stored in the first node's adjacency list

        Raises:
            NodeNotFoundError: If either node does not exist
            InvalidEdgeError: If both names refer to the same node
        """
        first = self.get_node(first_name)
        second = self.get_node(second_name)

        if first is second:
            raise InvalidEdgeError(f"Self-loop on {first_name!r} is not supported")

        link_id = next(self._link_counter)
        self._links[link_id] = EdgeLink(weight=weight, draw=draw)

        first_edge = GraphEdge(self, link_id, first.handle, second.handle, forward=True)
        second_edge = GraphEdge(self, link_id, second.handle, first.handle, forward=False)
        first.edges.append(first_edge)
        second.edges.append(second_edge)
        return first_edge

    def edges_between(self, first_name: N, second_name: N) -> list[GraphEdge]:
        """Half-edges from the first node to the second (several if parallel)."""
        first = self.get_node(first_name)
        second = self.get_node(second_name)
        return [edge for edge in first.edges if edge.target_handle == second.handle]

    def neighbors(self, name: N) -> list[N]:
        """Names of all nodes adjacent to the given node."""
        return [edge.target.name for edge in self.get_node(name).edges]

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return len(self._links)

    def iter_edges(self) -> Iterator[GraphEdge]:
        """Yield one half of every undirected edge."""
        seen: set[int] = set()
        for node in self.nodes():
            for edge in node.edges:
                if edge.link_id in seen:
                    continue
                seen.add(edge.link_id)
                yield edge

    # -------------------------------------------------------------------------
    # Flags and passes
    # -------------------------------------------------------------------------

    def set_blocked(self, name: N, blocked: bool = True) -> None:
        """Mark a node blocked; its edges then report an infinite weight."""
        self.get_node(name).blocked = blocked

    def reset_search_state(self) -> None:
        """Clear the explored flag on every node."""
        for node in self._nodes.values():
            node.explored = False

    def walk(
        self,
        visit_node: Callable[[GraphNode[N]], None] | None = None,
        visit_edge: Callable[[GraphEdge], None] | None = None,
    ) -> None:
        """
        Visit every node once, then every undirected edge once.

        Runs in three phases: reset the shared visited flags, visit the
        nodes, then visit each node's edges. Since both halves share one
        flag, an edge is handed to visit_edge only the first time either
        half is reached. Edges created with draw=False are marked but not
        visited.
        """
        nodes = self.nodes()

        for node in nodes:
            node.reset_edge_flags()

        if visit_node is not None:
            for node in nodes:
                visit_node(node)

        for node in nodes:
            for edge in node.edges:
                if edge.was_visited:
                    continue
                edge.was_visited = True
                if visit_edge is not None and edge.draw:
                    visit_edge(edge)

    def __repr__(self) -> str:
        return f"NamedGraph(nodes={len(self)}, edges={self.edge_count()})"
