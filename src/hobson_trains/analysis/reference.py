"""
Brute-force reach counts used as an oracle for the heap-based solver.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


def reference_counts(targets: Sequence[Optional[int]], horizon: int) -> List[int]:
    """
    Breadth-first search backward from every station, ``horizon`` levels deep.

    O(n^2) in the worst case; meant for tests and benchmarks only.
    """
    if horizon < 0:
        raise ValueError(f"Horizon must be non-negative, got {horizon}.")

    incoming: List[List[int]] = [[] for _ in targets]
    for source, target in enumerate(targets):
        if target is not None:
            incoming[int(target) - 1].append(source)

    counts: List[int] = []
    for station in range(len(targets)):
        seen = {station}
        frontier = [station]
        for _ in range(horizon):
            next_frontier = [
                feeder
                for current in frontier
                for feeder in incoming[current]
                if feeder not in seen
            ]
            if not next_frontier:
                break
            seen.update(next_frontier)
            frontier = next_frontier
        counts.append(len(seen))
    return counts
