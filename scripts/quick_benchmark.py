#!/usr/bin/env python3
"""
Quick benchmark to compare metrics on a few seeded grids.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathgraph.errors import EmptyFrontierError
from pathgraph.grid import grid_from_mask, random_blocked_mask
from pathgraph.heuristics import get_metric
from pathgraph.search import AStar

# Test cases: (width, height, density, seed)
TEST_CASES = [
    (20, 10, 0.0, 1),
    (20, 10, 0.2, 2),
    (40, 20, 0.2, 3),
    (40, 20, 0.3, 4),
    (60, 30, 0.25, 5),
    (80, 40, 0.3, 6),
]

METRICS = ["zero", "manhattan", "euclidean"]


def run_benchmark():
    print("=" * 70)
    print("pathgraph - Metric Comparison")
    print("=" * 70)
    print(f"\nTesting {len(METRICS)} metrics on {len(TEST_CASES)} grids...\n")

    results = {metric: [] for metric in METRICS}

    for i, (width, height, density, seed) in enumerate(TEST_CASES, 1):
        start = (0, height // 2)
        target = (width - 1, height // 2)
        mask = random_blocked_mask(width, height, density, seed=seed, keep_clear=(start, target))

        print(f"\n[{i}/{len(TEST_CASES)}] {width}x{height}, density {density}, seed {seed}")
        print("-" * 50)

        for metric_name in METRICS:
            graph = grid_from_mask(mask)
            search = AStar(graph.get_node(start), graph.get_node(target), get_metric(metric_name))

            try:
                result = search.run()
            except EmptyFrontierError:
                print(f"  {metric_name:10} : NO PATH after {search.steps} steps")
                results[metric_name].append((False, search.steps))
                continue

            results[metric_name].append((True, result.steps))
            print(
                f"  {metric_name:10} : distance {result.distance:5} in {result.steps:5} steps "
                f"({result.elapsed_ms:.1f}ms)"
            )

    # Summary
    print("\n" + "=" * 70)
    print("SUMMARY")
    print("=" * 70)

    for metric_name in METRICS:
        found = [steps for ok, steps in results[metric_name] if ok]
        total = len(results[metric_name])
        avg_steps = sum(found) / len(found) if found else 0

        print(f"  {metric_name:10} : {len(found)}/{total} found, avg {avg_steps:.1f} steps (when found)")


if __name__ == "__main__":
    run_benchmark()
