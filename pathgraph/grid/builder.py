"""
Grid construction on top of NamedGraph.

Cells are named by (x, y) integer coordinates and connected to their
horizontal and vertical neighbours with a uniform weight. Blocked cells
are expressed through NamedGraph.set_blocked(), so their edges report an
infinite weight and A* never crosses them.
"""

from __future__ import annotations

import logging

import numpy as np

from pathgraph.config import CELL_SIZE, DEFAULT_BLOCK_DENSITY, DEFAULT_EDGE_WEIGHT
from pathgraph.graph.named_graph import NamedGraph

logger = logging.getLogger(__name__)

Coord = tuple[int, int]


def build_grid(
    width: int,
    height: int,
    weight: float = DEFAULT_EDGE_WEIGHT,
    cell_size: float = CELL_SIZE,
    draw_edges: bool = False,
) -> NamedGraph[Coord]:
    """
    Build a width x height 4-neighbour grid graph.

    Node x/y are the pixel centres of the cells.

    Args:
        width: Number of columns
        height: Number of rows
        weight: Weight of every edge
        cell_size: Cell size in pixels
        draw_edges: Whether renderers should draw the grid edges

    Returns:
        Graph with one node per cell
    """
    if width < 1 or height < 1:
        raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")

    graph: NamedGraph[Coord] = NamedGraph()
    for x in range(width):
        for y in range(height):
            graph.add_node(
                (x, y),
                x=(x + 0.5) * cell_size,
                y=(y + 0.5) * cell_size,
                size=cell_size,
            )

    for x in range(width):
        for y in range(height):
            if x + 1 < width:
                graph.add_edge((x, y), (x + 1, y), weight=weight, draw=draw_edges)
            if y + 1 < height:
                graph.add_edge((x, y), (x, y + 1), weight=weight, draw=draw_edges)

    logger.debug(f"Built {width}x{height} grid with {graph.edge_count()} edges")
    return graph


def grid_from_mask(
    blocked: np.ndarray,
    weight: float = DEFAULT_EDGE_WEIGHT,
    cell_size: float = CELL_SIZE,
    draw_edges: bool = False,
) -> NamedGraph[Coord]:
    """
    Build a grid whose blocked cells come from a boolean mask.

    Args:
        blocked: Array of shape (height, width); True marks a blocked cell

    Returns:
        Grid graph with the masked cells blocked
    """
    mask = np.asarray(blocked, dtype=bool)
    if mask.ndim != 2:
        raise ValueError(f"Blocked mask must be 2-D, got shape {mask.shape}")

    height, width = mask.shape
    graph = build_grid(width, height, weight=weight, cell_size=cell_size, draw_edges=draw_edges)
    for y, x in np.argwhere(mask):
        graph.set_blocked((int(x), int(y)))
    return graph


def random_blocked_mask(
    width: int,
    height: int,
    density: float = DEFAULT_BLOCK_DENSITY,
    seed: int | None = None,
    keep_clear: tuple[Coord, ...] = (),
) -> np.ndarray:
    """
    Random boolean mask of shape (height, width).

    Args:
        density: Probability of each cell being blocked
        seed: Random seed for reproducibility
        keep_clear: Cells that are never blocked (e.g. start and target)
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be within [0, 1], got {density}")

    rng = np.random.default_rng(seed)
    mask = rng.random((height, width)) < density
    for x, y in keep_clear:
        mask[y, x] = False
    return mask
