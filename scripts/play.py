#!/usr/bin/env python3
"""
pathgraph CLI - Run one A* search on a grid.

Usage:
    python scripts/play.py --width 20 --height 10
    python scripts/play.py --width 40 --height 20 --density 0.3 --seed 7
    python scripts/play.py --start 0,0 --target 19,9 --metric manhattan
    python scripts/play.py --steps-per-tick 5 --verbose

Metrics:
    manhattan - Sum of absolute coordinate differences
    euclidean - Straight-line distance
    zero      - No heuristic (Dijkstra)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathgraph.config import (  # noqa: E402
    DEFAULT_BLOCK_DENSITY,
    DEFAULT_METRIC,
    LOG_LEVEL,
    MAX_SEARCH_STEPS,
    STEPS_PER_TICK,
)
from pathgraph.errors import EmptyFrontierError, GraphError  # noqa: E402
from pathgraph.grid import grid_from_mask, random_blocked_mask  # noqa: E402
from pathgraph.heuristics import METRICS, get_metric  # noqa: E402
from pathgraph.search import AStar, StepPacer  # noqa: E402


def parse_coord(text: str) -> tuple[int, int]:
    """Parse 'x,y' into a coordinate pair."""
    try:
        x, y = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'x,y', got {text!r}") from None
    return x, y


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run A* on a grid with random obstacles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--width", type=int, default=20, help="Grid width (default: 20)")
    parser.add_argument("--height", type=int, default=10, help="Grid height (default: 10)")
    parser.add_argument(
        "--start",
        type=parse_coord,
        default=None,
        help="Start cell as x,y (default: middle of the left edge)",
    )
    parser.add_argument(
        "--target",
        type=parse_coord,
        default=None,
        help="Target cell as x,y (default: middle of the right edge)",
    )
    parser.add_argument(
        "--metric",
        type=str,
        default=DEFAULT_METRIC,
        choices=list(METRICS),
        help=f"Heuristic to use (default: {DEFAULT_METRIC})",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_BLOCK_DENSITY,
        help=f"Fraction of blocked cells (default: {DEFAULT_BLOCK_DENSITY})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for obstacles")
    parser.add_argument(
        "--steps-per-tick",
        type=int,
        default=STEPS_PER_TICK,
        help=f"Search steps per tick (default: {STEPS_PER_TICK})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    start = args.start or (0, args.height // 2)
    target = args.target or (args.width - 1, args.height // 2)

    mask = random_blocked_mask(
        args.width,
        args.height,
        density=args.density,
        seed=args.seed,
        keep_clear=(start, target),
    )

    try:
        graph = grid_from_mask(mask)
        search = AStar(graph.get_node(start), graph.get_node(target), get_metric(args.metric))
        pacer = StepPacer(search, steps_per_tick=args.steps_per_tick)
    except (GraphError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print("A* Search")
    print("=" * 60)
    print(f"  Grid:    {args.width}x{args.height} ({int(mask.sum())} blocked)")
    print(f"  Start:   {start}")
    print(f"  Target:  {target}")
    print(f"  Metric:  {args.metric}")
    print("=" * 60 + "\n")

    try:
        while not pacer.tick():
            if search.steps >= MAX_SEARCH_STEPS:
                print(f"Gave up after {search.steps} steps")
                return 1
    except EmptyFrontierError:
        result = search.result()
        print(f"No path from {start} to {target}")
        print(f"  Explored {result.explored_count} cells in {pacer.ticks} ticks")
        return 1
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    result = search.result()
    print(f"Found {target} at distance {result.distance} ({result.hops} moves)")
    print(f"  Steps:    {result.steps} over {pacer.ticks} ticks")
    print(f"  Frontier: {result.frontier_size} cells still open")
    print(f"  Time:     {result.elapsed_ms:.1f}ms")
    print(f"  Finished: {result.timestamp:%Y-%m-%d %H:%M:%S}")

    print("\nPath taken:")
    for i, name in enumerate(result.path):
        marker = " (START)" if i == 0 else " (TARGET)" if name == target else ""
        print(f"  {i}. {name}{marker}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
