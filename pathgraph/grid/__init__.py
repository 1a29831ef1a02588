"""
Grid module.

Builds coordinate-named grid graphs:
- build_grid: Uniform 4-neighbour grid
- grid_from_mask: Grid with blocked cells from a numpy mask
- random_blocked_mask: Seeded random obstacle mask
"""

from pathgraph.grid.builder import Coord, build_grid, grid_from_mask, random_blocked_mask

__all__ = [
    "Coord",
    "build_grid",
    "grid_from_mask",
    "random_blocked_mask",
]
