"""
Time the heap-based solver against the brute-force reference on random
functional graphs.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

import numpy as np

from benchmarks.utils import (
    BenchmarkResult,
    export_json,
    format_summary_table,
    run_single_trial,
    summarize,
)
from hobson_trains.analysis.reference import reference_counts
from hobson_trains.graph.builders import random_functional_graph
from hobson_trains.propagation.solver import solve
from hobson_trains.runtime.profiling import Profiler


PROFILES = {
    "small": {
        "stations": 1_000,
        "horizon": 4,
    },
    "medium": {
        "stations": 20_000,
        "horizon": 16,
    },
    "large": {
        "stations": 200_000,
        "horizon": 64,
    },
}

# The reference is quadratic in the worst case.
REFERENCE_LIMIT = 20_000


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--profile", choices=PROFILES.keys(), default="small")
    parser.add_argument("--stations", type=int, default=None)
    parser.add_argument("--horizon", type=int, default=None)
    parser.add_argument("--terminal-fraction", type=float, default=0.0)
    parser.add_argument("--trials", type=int, default=3)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--json", type=Path, default=None)
    args = parser.parse_args()
    profile = PROFILES[args.profile]
    if args.stations is None:
        args.stations = profile["stations"]
    if args.horizon is None:
        args.horizon = profile["horizon"]
    return args


def main() -> None:
    args = parse_args()
    rng = np.random.default_rng(args.seed)
    results: List[BenchmarkResult] = []

    for trial in range(args.trials):
        targets = random_functional_graph(
            args.stations, rng, terminal_fraction=args.terminal_fraction
        )
        profiler = Profiler()
        heap_result, counts = run_single_trial(
            "random",
            "heap",
            trial,
            stations=args.stations,
            horizon=args.horizon,
            solve_fn=lambda: solve(targets, args.horizon, profiler=profiler),
        )
        stats = profiler.snapshot()
        heap_result.extra_metrics.update(
            {
                "unions": float(stats.unions),
                "pruned_entries": float(stats.pruned_entries),
                "peak_heap_size": float(stats.peak_heap_size),
            }
        )
        results.append(heap_result)

        if args.stations <= REFERENCE_LIMIT:
            ref_result, expected = run_single_trial(
                "random",
                "reference",
                trial,
                stations=args.stations,
                horizon=args.horizon,
                solve_fn=lambda: reference_counts(targets, args.horizon),
            )
            if expected != counts:
                raise RuntimeError(f"Trial {trial}: heap solver disagrees with reference.")
            results.append(ref_result)

    print(format_summary_table(summarize(results)))
    if args.json is not None:
        export_json(results, args.json)


if __name__ == "__main__":
    main()
