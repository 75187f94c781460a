"""
Print, for every station, how many stations reach it within k backward hops.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from hobson_trains.analysis.reference import reference_counts
from hobson_trains.io import Problem, format_counts, parse_problem
from hobson_trains.propagation.solver import solve
from hobson_trains.runtime.profiling import Profiler
from hobson_trains.utils.config import config
from hobson_trains.utils.logging import configure_logging, logger

EXIT_MISMATCH = 1
EXIT_BAD_INPUT = 2


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="hobson-trains", description=__doc__)
    parser.add_argument(
        "input", nargs="?", type=Path, default=None, help="Problem file (default: stdin)."
    )
    parser.add_argument(
        "-o", "--output", type=Path, default=None, help="Answer file (default: stdout)."
    )
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level.")
    parser.add_argument(
        "--validate-heaps",
        action="store_true",
        help="Check heap invariants after every union.",
    )
    parser.add_argument(
        "--stats", action="store_true", help="Log union/prune counters and timings."
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Compare against the brute-force reference before writing.",
    )
    return parser.parse_args(argv)


def _load(path: Optional[Path]) -> Problem:
    text = sys.stdin.read() if path is None else path.read_text()
    return parse_problem(text)


def _log_stats(profiler: Profiler) -> None:
    stats = profiler.snapshot()
    logger.info(
        "unions=%d pruned=%d (%.2f per union) peak_heap=%d",
        stats.unions,
        stats.pruned_entries,
        stats.pruned_per_union,
        stats.peak_heap_size,
    )
    for name, duration_ms in stats.events.items():
        logger.info("%s: %.3f ms", name, duration_ms)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(debug=args.debug)
    config.debug = args.debug
    config.validate_heaps = args.validate_heaps

    try:
        problem = _load(args.input)
    except OSError as exc:
        logger.error("Cannot read input: %s", exc)
        return EXIT_BAD_INPUT
    except ValueError as exc:
        logger.error("Malformed input: %s", exc)
        return EXIT_BAD_INPUT

    profiler = Profiler()
    counts: List[int] = solve(problem.targets, problem.horizon, profiler=profiler)

    if args.check:
        expected = reference_counts(problem.targets, problem.horizon)
        mismatched = [i + 1 for i, (a, b) in enumerate(zip(counts, expected)) if a != b]
        if mismatched:
            logger.error(
                "Counts differ from the reference at stations %s.", mismatched[:10]
            )
            return EXIT_MISMATCH
        logger.info("Counts match the brute-force reference.")

    if args.stats:
        _log_stats(profiler)

    text = format_counts(counts)
    if args.output is None:
        sys.stdout.write(text)
    else:
        args.output.write_text(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
