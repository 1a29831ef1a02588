"""
Incremental A* search over a NamedGraph.

The search is driven from outside: each do_step() call finalizes one
node. A host can interleave steps with other work, or call run() to
loop until the target is found.

Per-node distances live in SearchNode decorations attached through a
DecorationRegistry, so "is this node in the open set" is a side-table
lookup rather than a field on the node.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
import time
from collections.abc import Callable
from typing import Any

from pathgraph.errors import EmptyFrontierError, GraphError, SearchFinishedError
from pathgraph.graph.decoration import Decoration, DecorationRegistry
from pathgraph.graph.named_graph import GraphNode
from pathgraph.search.state import SearchResult, SearchState

logger = logging.getLogger(__name__)

# metric(current, target) -> estimated remaining distance
Metric = Callable[[GraphNode, GraphNode], float]


class SearchNode(Decoration):
    """
    A* bookkeeping for one node in play.

    Attributes:
        estimated_distance: Heuristic distance to the target, fixed at creation
        distance: Best known distance from the start
        total_distance: distance + estimated_distance
        parent: Predecessor on the best known path (None for the start)
        seq: Insertion order into the open set, kept across relaxations
        closed: Whether this search has finalized the node
    """

    def __init__(
        self,
        node: GraphNode,
        distance: float,
        estimated_distance: float,
        parent: GraphNode | None = None,
    ) -> None:
        super().__init__(node)
        self.estimated_distance = estimated_distance
        self.parent = parent
        self.seq = 0
        self.closed = False
        self.distance = distance

    @property
    def distance(self) -> float:
        return self._distance

    @distance.setter
    def distance(self, distance: float) -> None:
        self._distance = distance
        self._total_distance = distance + self.estimated_distance

    @property
    def total_distance(self) -> float:
        return self._total_distance

    def __repr__(self) -> str:
        return (
            f"SearchNode(node={self.node.name!r}, distance={self.distance}, "
            f"total_distance={self.total_distance})"
        )


class AStar:
    """
    Steppable A* search from a start node to a target node.

    The metric must be a consistent heuristic, i.e.
    metric(u, target) <= weight(u, v) + metric(v, target) for every edge.
    This is not checked; with an inconsistent metric the result may not
    be optimal.

    Selection order: lowest total distance first, ties broken by the
    largest distance from the start, remaining ties by insertion order.
    Edges with infinite weight (blocked) are never followed.

    Nodes are borrowed from the graph. Their explored flag is set as they
    are finalized; call clear() to reset it before searching the same
    graph again.
    """

    def __init__(self, start: GraphNode, target: GraphNode, metric: Metric) -> None:
        """
        Initialize the search with the start node in the open set.

        Args:
            start: Node to search from
            target: Node to search for
            metric: Consistent heuristic metric(current, target)
        """
        self.start = start
        self.target = target
        self.metric = metric

        self._decorations: DecorationRegistry[SearchNode] = DecorationRegistry()
        self._heap: list[tuple[float, float, int, SearchNode]] = []
        self._counter = itertools.count()
        self._open_count = 0
        self._explored: list[GraphNode] = []
        self._state = SearchState.RUNNING
        self._cleared = False
        self._steps = 0
        self._elapsed_ms = 0.0
        self._found_distance: float | None = None
        self._found_path: list[Any] = []

        self._open(SearchNode(start, 0, metric(start, target)))

    # -------------------------------------------------------------------------
    # Open set
    # -------------------------------------------------------------------------

    def _open(self, wrapper: SearchNode) -> None:
        self._decorations.attach(wrapper)
        wrapper.seq = next(self._counter)
        self._open_count += 1
        self._push(wrapper)

    def _push(self, wrapper: SearchNode) -> None:
        heapq.heappush(
            self._heap,
            (wrapper.total_distance, -wrapper.distance, wrapper.seq, wrapper),
        )

    def _pop_best(self) -> SearchNode:
        """
        Remove and return the best open entry.

        Heap entries made stale by a later relaxation, or belonging to a
        node this search already finalized, are discarded on the way.

        Raises:
            EmptyFrontierError: If no open entry remains
        """
        while self._heap:
            _, neg_distance, _, wrapper = heapq.heappop(self._heap)
            if wrapper.closed or wrapper.distance != -neg_distance:
                continue
            self._open_count -= 1
            return wrapper

        self._state = SearchState.EXHAUSTED
        logger.info(
            f"A*: No path from {self.start.name!r} to {self.target.name!r} "
            f"({self._steps} steps)"
        )
        raise EmptyFrontierError(
            f"Open set exhausted: {self.target.name!r} is unreachable from {self.start.name!r}"
        )

    # -------------------------------------------------------------------------
    # Stepping
    # -------------------------------------------------------------------------

    def do_step(self) -> bool:
        """
        Finalize the best node in the open set.

        Returns:
            True if the target was just finalized, False otherwise

        Raises:
            EmptyFrontierError: If the open set is empty (no path exists)
            SearchFinishedError: If the search already found the target or
                exhausted its open set
        """
        if self._state is not SearchState.RUNNING:
            raise SearchFinishedError(f"Search is already {self._state.value}")
        if self._cleared:
            raise SearchFinishedError("Search was cleared")

        began = time.perf_counter()
        try:
            return self._expand(self._pop_best())
        finally:
            self._elapsed_ms += (time.perf_counter() - began) * 1000

    def _expand(self, current: SearchNode) -> bool:
        node = current.node
        current.closed = True
        node.explored = True
        self._explored.append(node)
        self._steps += 1

        if node is self.target:
            self._state = SearchState.FOUND
            self._found_distance = current.distance
            self._found_path = self._trace_path(current)
            logger.info(
                f"A*: Found {self.target.name!r} at distance {current.distance} "
                f"after {self._steps} steps"
            )
            return True

        for edge in node.edges:
            neighbor = edge.target
            if neighbor.explored:
                continue

            weight = edge.weight
            if math.isinf(weight):
                continue

            new_distance = current.distance + weight
            wrapper = self._decorations.find(neighbor)
            if wrapper is None:
                self._open(
                    SearchNode(
                        neighbor,
                        new_distance,
                        self.metric(neighbor, self.target),
                        parent=node,
                    )
                )
            elif new_distance < wrapper.distance:
                wrapper.distance = new_distance
                wrapper.parent = node
                self._push(wrapper)

        logger.debug(
            f"A*: Expanded {node.name!r} (distance={current.distance}, "
            f"open={self._open_count})"
        )
        return False

    def run(self, max_steps: int | None = None) -> SearchResult:
        """
        Step until the target is found.

        Args:
            max_steps: Stop after this many steps even if still running

        Returns:
            Result snapshot (state RUNNING if max_steps was hit first)

        Raises:
            EmptyFrontierError: If no path exists
        """
        taken = 0
        while self._state is SearchState.RUNNING:
            if max_steps is not None and taken >= max_steps:
                logger.warning(f"A*: Stopped after {max_steps} steps without reaching target")
                break
            self.do_step()
            taken += 1
        return self.result()

    # -------------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------------

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def found(self) -> bool:
        return self._state is SearchState.FOUND

    @property
    def is_finished(self) -> bool:
        return self._state is not SearchState.RUNNING

    @property
    def steps(self) -> int:
        """Number of nodes finalized so far."""
        return self._steps

    @property
    def frontier_size(self) -> int:
        """Number of nodes in the open set."""
        return self._open_count

    @property
    def explored_nodes(self) -> list[GraphNode]:
        return list(self._explored)

    @property
    def distance(self) -> float | None:
        """Distance from start to target, once found."""
        return self._found_distance

    def is_open(self, node: GraphNode) -> bool:
        """Whether the node is waiting in the open set."""
        wrapper = self._decorations.find(node)
        return wrapper is not None and not wrapper.closed

    def decoration(self, node: GraphNode) -> SearchNode:
        """Return the node's search bookkeeping (MissingDecorationError if none)."""
        return self._decorations.get(node)

    def path(self) -> list[Any]:
        """
        Names of the nodes on the found path, start first.

        Raises:
            GraphError: If the target has not been found
        """
        if not self.found:
            raise GraphError("No path available: target has not been found")
        return list(self._found_path)

    def _trace_path(self, wrapper: SearchNode) -> list[Any]:
        names = []
        node: GraphNode | None = wrapper.node
        while node is not None:
            names.append(node.name)
            node = self._decorations.get(node).parent
        return list(reversed(names))

    def result(self) -> SearchResult:
        """Snapshot the current state of the search."""
        return SearchResult(
            start=self.start.name,
            target=self.target.name,
            state=self._state,
            distance=self.distance,
            path=self.path() if self.found else [],
            steps=self._steps,
            explored_count=len(self._explored),
            frontier_size=self._open_count,
            elapsed_ms=self._elapsed_ms,
        )

    def clear(self) -> None:
        """
        Drop all decorations and reset explored flags this search set.

        distance and path() stay available on a found search. Stepping
        after clear() raises SearchFinishedError.
        """
        for node in self._explored:
            node.explored = False
        self._explored.clear()
        self._decorations.clear()
        self._heap.clear()
        self._open_count = 0
        self._cleared = True

    def __repr__(self) -> str:
        return (
            f"AStar(start={self.start.name!r}, target={self.target.name!r}, "
            f"state={self._state.value}, steps={self._steps})"
        )
