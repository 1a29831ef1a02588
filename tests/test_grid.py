"""
Unit tests for grid construction.
"""

import numpy as np
import pytest

from pathgraph.grid import build_grid, grid_from_mask, random_blocked_mask


class TestBuildGrid:
    """Test uniform grid construction."""

    def test_node_and_edge_counts(self):
        """A WxH grid has W*H nodes and 2WH - W - H edges."""
        grid = build_grid(4, 3)
        assert len(grid) == 12
        assert grid.edge_count() == 2 * 4 * 3 - 4 - 3

    def test_corner_and_inner_degree(self, grid):
        assert len(grid.get_node((0, 0)).edges) == 2
        assert len(grid.get_node((2, 2)).edges) == 4
        assert len(grid.get_node((4, 2)).edges) == 3

    def test_four_neighbours(self, grid):
        assert sorted(grid.neighbors((2, 2))) == [(1, 2), (2, 1), (2, 3), (3, 2)]

    def test_uniform_weight(self):
        grid = build_grid(3, 3, weight=2)
        assert {edge.weight for edge in grid.iter_edges()} == {2}

    def test_edges_not_drawn_by_default(self, grid):
        assert not any(edge.draw for edge in grid.iter_edges())

    def test_pixel_centres(self):
        grid = build_grid(2, 2, cell_size=10)
        node = grid.get_node((1, 0))
        assert (node.x, node.y) == (15, 5)
        assert node.size == 10

    def test_invalid_size_raises(self):
        with pytest.raises(ValueError):
            build_grid(0, 3)


class TestMask:
    """Test grids built from numpy masks."""

    def test_grid_from_mask_blocks_cells(self):
        """Mask is indexed [y, x]."""
        mask = np.zeros((2, 3), dtype=bool)
        mask[1, 2] = True
        grid = grid_from_mask(mask)

        assert len(grid) == 6
        assert grid.get_node((2, 1)).blocked
        assert [node.name for node in grid if node.blocked] == [(2, 1)]

    def test_non_2d_mask_raises(self):
        with pytest.raises(ValueError):
            grid_from_mask(np.zeros(4, dtype=bool))

    def test_random_mask_is_seeded(self):
        first = random_blocked_mask(10, 8, density=0.4, seed=3)
        second = random_blocked_mask(10, 8, density=0.4, seed=3)
        assert first.shape == (8, 10)
        assert np.array_equal(first, second)

    def test_random_mask_keeps_cells_clear(self):
        mask = random_blocked_mask(5, 5, density=1.0, seed=0, keep_clear=((0, 0), (4, 2)))
        assert not mask[0, 0]
        assert not mask[2, 4]
        assert mask.sum() == 23

    def test_density_out_of_range_raises(self):
        with pytest.raises(ValueError):
            random_blocked_mask(5, 5, density=1.5)
