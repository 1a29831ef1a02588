"""
Unit tests for StepPacer.
"""

import pytest

from pathgraph.errors import EmptyFrontierError
from pathgraph.graph import NamedGraph
from pathgraph.heuristics import manhattan, zero
from pathgraph.search import AStar, StepPacer


class TestStepPacer:
    """Test bounded stepping per tick."""

    def test_one_step_per_tick(self, grid):
        search = AStar(grid.get_node((0, 0)), grid.get_node((3, 0)), manhattan)
        pacer = StepPacer(search, steps_per_tick=1)

        ticks = 0
        while not pacer.tick():
            ticks += 1
            assert search.steps == ticks
        assert pacer.ticks == search.steps == 4

    def test_stops_early_when_found(self, grid):
        """Steps beyond the found step should not be taken."""
        search = AStar(grid.get_node((0, 0)), grid.get_node((3, 0)), manhattan)
        pacer = StepPacer(search, steps_per_tick=10)
        assert pacer.tick() is True
        assert search.steps == 4
        assert pacer.done

    def test_tick_after_found_is_noop(self, grid):
        search = AStar(grid.get_node((0, 0)), grid.get_node((1, 0)), manhattan)
        pacer = StepPacer(search)
        assert pacer.tick() is True
        assert pacer.tick() is True
        assert pacer.ticks == 1

    def test_empty_frontier_propagates(self):
        graph = NamedGraph()
        graph.add_node("s")
        graph.add_node("t")
        pacer = StepPacer(AStar(graph.get_node("s"), graph.get_node("t"), zero))
        with pytest.raises(EmptyFrontierError):
            pacer.tick()
        assert pacer.done
        assert pacer.tick() is False

    def test_invalid_steps_per_tick(self, grid):
        search = AStar(grid.get_node((0, 0)), grid.get_node((1, 0)), manhattan)
        with pytest.raises(ValueError):
            StepPacer(search, steps_per_tick=0)
