from __future__ import annotations

from contextlib import contextmanager
from time import perf_counter
from typing import Iterator, List, Optional, Sequence

from hobson_trains.graph.builders import from_targets
from hobson_trains.graph.network import Network
from hobson_trains.propagation.classify import classify
from hobson_trains.propagation.ring import ring_propagate
from hobson_trains.propagation.tree import tree_propagate
from hobson_trains.runtime.profiling import Profiler
from hobson_trains.utils.logging import logger


def reach_counts(network: Network) -> List[int]:
    """Distinct stations within the horizon of each station, in id order."""
    total = len(network)
    return [station.heap.count_distinct_payloads(total) for station in network]


class HobsonSolver:
    """
    Runs classification, tree propagation and ring propagation over a
    network and reports per-station reach counts.
    """

    def __init__(self, network: Network, profiler: Optional[Profiler] = None) -> None:
        self.network = network
        self.profiler = profiler if profiler is not None else Profiler()

    @classmethod
    def from_targets(
        cls,
        targets: Sequence[Optional[int]],
        horizon: int,
        profiler: Optional[Profiler] = None,
    ) -> "HobsonSolver":
        return cls(from_targets(targets, horizon), profiler)

    def run(self) -> List[int]:
        """
        Propagate from freshly seeded heaps and return the reach counts.
        Safe to call more than once.
        """
        self.network.validate()
        self.network.reset_heaps()

        with self._phase("classify"):
            classify(self.network)
        with self._phase("tree_propagate"):
            tree_propagate(self.network, profiler=self.profiler)
        with self._phase("ring_propagate"):
            ring_propagate(self.network, profiler=self.profiler)
        with self._phase("count"):
            counts = reach_counts(self.network)

        stats = self.profiler.snapshot()
        logger.debug(
            "Solved %d stations: %d unions, %d pruned entries, peak heap %d.",
            len(self.network),
            stats.unions,
            stats.pruned_entries,
            stats.peak_heap_size,
        )
        return counts

    @contextmanager
    def _phase(self, name: str) -> Iterator[None]:
        start = perf_counter()
        yield
        self.profiler.record_event(name, (perf_counter() - start) * 1000.0)


def solve(
    targets: Sequence[Optional[int]],
    horizon: int,
    *,
    profiler: Optional[Profiler] = None,
) -> List[int]:
    """
    Reach count of every station in the functional graph ``targets``.

    Args:
        targets: ``targets[i]`` is the 1-based target of station ``i + 1``,
            or ``None`` when that station has no outgoing edge.
        horizon: Maximum number of backward hops.
    """
    return HobsonSolver.from_targets(targets, horizon, profiler).run()
