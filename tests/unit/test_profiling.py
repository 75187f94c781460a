from __future__ import annotations

from hobson_trains.heap.binomial import BinomialHeap, union
from hobson_trains.runtime.profiling import Profiler


def _grown(size: int) -> BinomialHeap:
    heap = BinomialHeap.empty()
    for payload in range(size):
        heap = union(heap, BinomialHeap.singleton(payload), take_ownership=True)
    return heap


def test_profiler_records_stats() -> None:
    profiler = Profiler()

    profiler.record_absorb(_grown(12), pruned=3)
    profiler.record_absorb(_grown(5), pruned=0)  # should not reduce peak
    profiler.record_event("tree_propagate", 1.5)
    profiler.record_event("tree_propagate", 0.5)

    stats = profiler.snapshot()
    assert stats.peak_heap_size == 12
    assert stats.unions == 2
    assert stats.pruned_entries == 3
    assert stats.pruned_per_union == 1.5
    assert stats.events["tree_propagate"] == 2.0


def test_profiler_reads_tracked_size_without_walking() -> None:
    heap = _grown(6)
    # Detach the nodes: only the tracked size is left to read.
    heap.head = None

    profiler = Profiler()
    profiler.record_absorb(heap, pruned=0)
    assert profiler.snapshot().peak_heap_size == 6


def test_empty_profile() -> None:
    assert Profiler().snapshot().pruned_per_union == 0.0
